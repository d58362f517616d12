"""
Calculation engine for invoice totals.

Totals are derived from a snapshot on every call and never cached. Values
are carried unrounded; rounding to two decimals happens only when an amount
is formatted for display (see ``utils.format_money``).
"""

from dataclasses import dataclass

from invoice_editor.models.invoice import InvoiceDocument, LineItem


@dataclass(frozen=True, slots=True)
class Totals:
    """Subtotal, tax and grand total for one document snapshot."""

    subtotal: float = 0.0
    tax_amount: float = 0.0
    total: float = 0.0


def line_amount(item: LineItem) -> float:
    """Return the amount a line item contributes to the subtotal."""
    return item.quantity * item.rate


def calculate_subtotal(document: InvoiceDocument) -> float:
    """Sum quantity times rate over all line items."""
    return sum((line_amount(item) for item in document.items), 0.0)


def calculate_totals(document: InvoiceDocument) -> Totals:
    """
    Derive subtotal, tax amount and total from a document.

    ``tax_rate`` is a percentage, so a rate of 10 adds a tenth of the
    subtotal.
    """
    subtotal = calculate_subtotal(document)
    tax_amount = subtotal * (document.tax_rate / 100)
    return Totals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )
