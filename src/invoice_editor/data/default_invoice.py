"""
Template documents an editing session starts from.

The seeded template carries illustrative sender, client, items and payment
details so the page is never blank. Set ``INVOICE_EDITOR_SEED=false`` to start
from an empty document instead.
"""

import os
from datetime import date, timedelta

from invoice_editor.models.currency import lookup_symbol
from invoice_editor.models.invoice import (
    CodeType,
    ContactInfo,
    InvoiceDocument,
    LineItem,
    PaymentInfo,
)
from invoice_editor.utils import env_flag

DUE_IN_DAYS = 14
DEFAULT_NUMBER = "INV-2024-001"
SEED_TEMPLATE = env_flag("INVOICE_EDITOR_SEED", default=True)
DEFAULT_CURRENCY = os.getenv("INVOICE_EDITOR_CURRENCY", "USD")


def default_invoice(today: date | None = None) -> InvoiceDocument:
    """Return the seeded template dated ``today`` and due two weeks later."""
    issued = today or date.today()
    return InvoiceDocument(
        number=DEFAULT_NUMBER,
        date=issued.isoformat(),
        due_date=(issued + timedelta(days=DUE_IN_DAYS)).isoformat(),
        currency_symbol="$",
        sender=ContactInfo(
            name="John Doe (Freelancer)",
            email="john@example.com",
            address="123 Developer Lane, Code City, 90210",
            phone="+1 (555) 000-0000",
        ),
        client=ContactInfo(
            name="Client Company LLC",
            email="accounts@client.com",
            address="456 Business Rd, Enterprise City, NY",
        ),
        items=(
            LineItem(
                id=1,
                description="Frontend Development - React Components",
                quantity=20,
                rate=85.0,
            ),
            LineItem(id=2, description="API Integration & Testing", quantity=10, rate=85.0),
            LineItem(id=3, description="Server Setup & Deployment", quantity=5, rate=90.0),
        ),
        payment_info=PaymentInfo(
            bank_name="Tech Bank International",
            account_name="John Doe",
            account_number="1234567890",
            swift_code="TECH0001234",
            code_type=CodeType.IFSC,
            upi_id="john.doe@upi",
            notes=(
                "Please include the invoice number in the transfer description. "
                "Paypal accepted at: john@example.com"
            ),
        ),
        tax_rate=0.0,
        next_item_id=4,
    )


def empty_invoice(today: date | None = None, currency_code: str | None = None) -> InvoiceDocument:
    """
    Return a blank document with today's dates and no line items.

    Raises:
        CurrencyNotFoundError: If the currency code is not in the catalog.
    """
    issued = today or date.today()
    return InvoiceDocument(
        date=issued.isoformat(),
        due_date=(issued + timedelta(days=DUE_IN_DAYS)).isoformat(),
        currency_symbol=lookup_symbol(currency_code or DEFAULT_CURRENCY),
    )


def initial_invoice(today: date | None = None) -> InvoiceDocument:
    """Return the document a new session starts with, per configuration."""
    if SEED_TEMPLATE:
        return default_invoice(today)
    return empty_invoice(today)
