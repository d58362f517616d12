"""Exception classes for the invoice editor."""

from typing import Any, Dict, Optional


class InvoiceEditorError(Exception):
    """
    Base exception for invoice editor errors.

    Every error raised by the document core extends this class so the
    presentation layer can catch a single type at its event boundary.
    """

    code = "EDITOR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


class InvalidFieldError(InvoiceEditorError):
    """Raised when an edit names a field or section the document does not have."""

    code = "FIELD"

    def __init__(
        self,
        field: str,
        section: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        target = f"{section}.{field}" if section else field
        super().__init__(
            message or f"Unknown field: {target}",
            details={"field": field, "section": section},
        )
        self.field = field
        self.section = section


class ItemNotFoundError(InvoiceEditorError):
    """Line item lookup failed"""

    code = "ITEM"

    def __init__(self, item_id: int) -> None:
        super().__init__(f"No line item with id {item_id}", details={"id": item_id})
        self.item_id = item_id


class CurrencyNotFoundError(InvoiceEditorError):
    """Currency code is not part of the catalog"""

    code = "CURRENCY"

    def __init__(self, currency_code: str) -> None:
        super().__init__(
            f"Unknown currency code: {currency_code}",
            details={"currency_code": currency_code},
        )
        self.currency_code = currency_code


class MalformedDocumentError(InvoiceEditorError):
    """Serialized document could not be decoded"""

    code = "DOCUMENT"
