"""
Toolbar component for the invoice editor.

Holds the currency selector and the print button. The whole bar carries the
``no-print`` class so it disappears from the printed page.
"""

import reflex as rx

from invoice_editor.state import APP_SUBTITLE, APP_TITLE, InvoiceEditorState


def toolbar() -> rx.Component:
    """Build the controls shown above the invoice paper."""
    return rx.box(
        rx.box(
            rx.heading(APP_TITLE, size="6", as_="h1"),
            rx.text(APP_SUBTITLE, class_name="muted"),
        ),
        rx.box(
            rx.el.select(
                rx.foreach(
                    InvoiceEditorState.currencies,
                    lambda c: rx.el.option(c["label"], value=c["symbol"]),
                ),
                value=InvoiceEditorState.currency_symbol,
                on_change=lambda value: InvoiceEditorState.set_root_field(
                    "currency_symbol", value
                ),
                class_name="currency-select",
            ),
            rx.button(
                rx.icon("printer", size=18),
                "Print / Save PDF",
                on_click=InvoiceEditorState.export,
                class_name="print-button",
            ),
            class_name="toolbar-actions",
        ),
        class_name="toolbar no-print",
    )
