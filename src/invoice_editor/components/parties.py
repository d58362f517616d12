"""Invoice header: sender block, invoice metadata and the bill-to client."""

import reflex as rx

from invoice_editor.state import InvoiceEditorState


def _section_input(section: str, field: str, value, placeholder: str) -> rx.Component:
    return rx.input(
        value=value,
        placeholder=placeholder,
        on_change=lambda v: InvoiceEditorState.set_section_field(section, field, v),
        class_name="paper-input",
    )


def _root_input(field: str, value, label: str, type_: str = "text") -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.input(
            value=value,
            type=type_,
            on_change=lambda v: InvoiceEditorState.set_root_field(field, v),
            class_name="paper-input align-right",
        ),
        class_name="meta-field",
    )


def _contact_block(section: str, info) -> rx.Component:
    return rx.box(
        _section_input(section, "name", info["name"], "Name"),
        rx.hstack(
            rx.icon("mail", size=14),
            _section_input(section, "email", info["email"], "Email"),
        ),
        rx.hstack(
            rx.icon("map-pin", size=14),
            rx.text_area(
                value=info["address"],
                placeholder="Address",
                on_change=lambda v: InvoiceEditorState.set_section_field(
                    section, "address", v
                ),
                class_name="paper-input",
            ),
        ),
        class_name="contact-block",
    )


def invoice_header() -> rx.Component:
    """Build the sender, metadata and client sections."""
    sender = InvoiceEditorState.sender_info
    return rx.box(
        rx.box(
            rx.box(
                rx.heading("Invoice", size="8", as_="h2", class_name="invoice-title"),
                _contact_block("sender", sender),
                _section_input("sender", "phone", sender["phone"], "Phone"),
            ),
            rx.box(
                _root_input("number", InvoiceEditorState.invoice_number, "Invoice #"),
                _root_input("date", InvoiceEditorState.invoice_date, "Date", "date"),
                _root_input("due_date", InvoiceEditorState.due_date, "Due Date", "date"),
                class_name="meta-block",
            ),
            class_name="header-row",
        ),
        rx.box(
            rx.text("Bill To", class_name="section-label"),
            _contact_block("client", InvoiceEditorState.client_info),
            class_name="client-block",
        ),
    )
