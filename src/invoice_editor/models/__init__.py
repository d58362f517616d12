"""
Data models for the invoice editor.

This package provides:
- Invoice document models (InvoiceDocument, LineItem, ContactInfo, PaymentInfo)
- The currency catalog entry type and registry lookups
- Serialization/deserialization of document snapshots

All models are frozen dataclasses; edits produce new instances.
"""

from invoice_editor.models.currency import (
    Currency,
    list_currencies,
    lookup_by_symbol,
    lookup_symbol,
)
from invoice_editor.models.invoice import (
    CodeType,
    ContactInfo,
    InvoiceDocument,
    LineItem,
    PaymentInfo,
    deserialize_document,
    document_from_json,
    document_to_json,
    field_names,
    serialize_document,
)

__all__ = [
    "CodeType",
    "ContactInfo",
    "Currency",
    "InvoiceDocument",
    "LineItem",
    "PaymentInfo",
    "deserialize_document",
    "document_from_json",
    "document_to_json",
    "field_names",
    "list_currencies",
    "lookup_by_symbol",
    "lookup_symbol",
    "serialize_document",
]
