"""
Reflex UI components for the invoice editor page.

- toolbar: Title, currency selector and print button (hidden when printing)
- parties: Invoice header, sender and client blocks
- line_items: Editable line item table
- summary: Totals and payment details
"""

from invoice_editor.components.line_items import line_items_table
from invoice_editor.components.parties import invoice_header
from invoice_editor.components.summary import payment_panel, totals_panel
from invoice_editor.components.toolbar import toolbar

__all__ = [
    "invoice_header",
    "line_items_table",
    "payment_panel",
    "toolbar",
    "totals_panel",
]
