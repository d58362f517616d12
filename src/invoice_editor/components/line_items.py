"""Editable line item table."""

import reflex as rx

from invoice_editor.state import InvoiceEditorState


def _item_input(item, field: str, class_name: str = "paper-input") -> rx.Component:
    return rx.input(
        value=item[field],
        on_change=lambda v: InvoiceEditorState.set_item_field(item["id"], field, v),
        class_name=class_name,
    )


def _item_row(item) -> rx.Component:
    return rx.table.row(
        rx.table.cell(_item_input(item, "description")),
        rx.table.cell(_item_input(item, "quantity", "paper-input align-right")),
        rx.table.cell(
            rx.hstack(
                rx.text(InvoiceEditorState.currency_symbol, class_name="muted"),
                _item_input(item, "rate", "paper-input align-right"),
            )
        ),
        rx.table.cell(item["amount"], class_name="align-right amount"),
        rx.table.cell(
            rx.icon_button(
                rx.icon("trash-2", size=16),
                on_click=InvoiceEditorState.delete_item(item["id"]),
                variant="ghost",
                title="Remove item",
            ),
            class_name="no-print",
        ),
    )


def line_items_table() -> rx.Component:
    """Build the items table with its add-row button."""
    return rx.box(
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Description"),
                    rx.table.column_header_cell("Qty", class_name="align-right"),
                    rx.table.column_header_cell("Rate", class_name="align-right"),
                    rx.table.column_header_cell("Amount", class_name="align-right"),
                    rx.table.column_header_cell("", class_name="no-print"),
                )
            ),
            rx.table.body(rx.foreach(InvoiceEditorState.line_items, _item_row)),
            width="100%",
        ),
        rx.button(
            rx.icon("plus", size=16),
            "Add Line Item",
            on_click=InvoiceEditorState.add_item,
            variant="ghost",
            class_name="add-item-button no-print",
        ),
        class_name="items-block",
    )
