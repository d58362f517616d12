"""
Totals and payment details shown below the line items.

The totals are display strings already rounded to two decimals by the state.
"""

import reflex as rx

from invoice_editor.state import InvoiceEditorState


def _total_row(label, value, class_name: str = "total-row") -> rx.Component:
    return rx.hstack(rx.text(label), rx.spacer(), rx.text(value), class_name=class_name)


def totals_panel() -> rx.Component:
    """Build subtotal, tax rate input, tax amount and total."""
    return rx.box(
        _total_row("Subtotal", InvoiceEditorState.subtotal),
        rx.hstack(
            rx.text("Tax"),
            rx.input(
                value=InvoiceEditorState.tax_rate,
                on_change=lambda v: InvoiceEditorState.set_root_field("tax_rate", v),
                class_name="tax-input",
            ),
            rx.text("%"),
            rx.spacer(),
            rx.text(InvoiceEditorState.tax_amount),
            class_name="total-row",
        ),
        _total_row(
            f"Total ({InvoiceEditorState.currency_code})",
            InvoiceEditorState.total,
            "total-row grand-total",
        ),
        class_name="totals-block",
    )


def _payment_input(field: str, label: str) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.input(
            value=InvoiceEditorState.payment_info[field],
            on_change=lambda v: InvoiceEditorState.set_section_field(
                "payment_info", field, v
            ),
            class_name="paper-input",
        ),
    )


def payment_panel() -> rx.Component:
    """Build the bank details box, including the routing code type selector."""
    payment = InvoiceEditorState.payment_info
    return rx.box(
        rx.hstack(
            rx.icon("credit-card", size=16),
            rx.text("Payment Details", class_name="section-label"),
        ),
        rx.grid(
            _payment_input("bank_name", "Bank Name"),
            _payment_input("account_number", "Account Number"),
            _payment_input("account_name", "Account Name"),
            rx.box(
                rx.el.select(
                    rx.foreach(
                        InvoiceEditorState.code_types,
                        lambda code: rx.el.option(code, value=code),
                    ),
                    value=payment["code_type"],
                    on_change=lambda v: InvoiceEditorState.set_section_field(
                        "payment_info", "code_type", v
                    ),
                    class_name="code-type-select",
                ),
                rx.input(
                    value=payment["swift_code"],
                    on_change=lambda v: InvoiceEditorState.set_section_field(
                        "payment_info", "swift_code", v
                    ),
                    class_name="paper-input",
                ),
            ),
            _payment_input("upi_id", "UPI ID"),
            columns="2",
            spacing="4",
        ),
        rx.text_area(
            value=payment["notes"],
            on_change=lambda v: InvoiceEditorState.set_section_field(
                "payment_info", "notes", v
            ),
            class_name="paper-input notes",
        ),
        class_name="payment-block",
    )
