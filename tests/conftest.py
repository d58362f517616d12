"""Shared fixtures for invoice editor tests."""

from datetime import date

import pytest

from invoice_editor.data.default_invoice import default_invoice
from invoice_editor.models.invoice import InvoiceDocument
from invoice_editor.services import LoggingExportService

ISSUE_DATE = date(2024, 3, 1)


@pytest.fixture
def document() -> InvoiceDocument:
    """The seeded template dated 2024-03-01."""
    return default_invoice(ISSUE_DATE)


@pytest.fixture
def export_service() -> LoggingExportService:
    return LoggingExportService()
