"""
Invoice document model and serialization helpers.

The document is an immutable snapshot. The hierarchy is:

    InvoiceDocument
    ├── number, date, due_date, currency_symbol, tax_rate
    ├── ContactInfo (sender, client)
    ├── LineItem[] (description, quantity, rate)
    └── PaymentInfo (bank details, code type, notes)

Every edit produces a new InvoiceDocument via ``dataclasses.replace``;
untouched sub-objects are shared between snapshots. Serialization converts
between these dataclasses and JSON-compatible dictionaries.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Tuple

from invoice_editor.exceptions import MalformedDocumentError
from invoice_editor.utils import coerce_number


class CodeType(str, Enum):
    """Label shown next to the bank routing code."""

    IFSC = "IFSC"
    SWIFT = "SWIFT"
    IBAN = "IBAN"
    ROUTING = "Routing"


@dataclass(frozen=True, slots=True)
class ContactInfo:
    """Issuer or recipient of the invoice."""

    name: str = ""
    email: str = ""
    address: str = ""
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentInfo:
    """Bank transfer details printed at the bottom of the invoice."""

    bank_name: str = ""
    account_name: str = ""
    account_number: str = ""
    swift_code: str = ""
    code_type: CodeType = CodeType.IFSC
    upi_id: str = ""
    notes: str = ""


@dataclass(frozen=True, slots=True)
class LineItem:
    """One billable row. The amount is derived, never stored."""

    id: int
    description: str = ""
    quantity: float = 0.0
    rate: float = 0.0

    @property
    def amount(self) -> float:
        """Return quantity multiplied by rate."""
        return self.quantity * self.rate


@dataclass(frozen=True, slots=True)
class InvoiceDocument:
    """
    Aggregate root holding all editable invoice state.

    ``next_item_id`` is the id the next added line item receives; it only
    ever grows so ids are never reused within a session.
    """

    number: str = ""
    date: str = ""
    due_date: str = ""
    currency_symbol: str = "$"
    sender: ContactInfo = field(default_factory=ContactInfo)
    client: ContactInfo = field(default_factory=ContactInfo)
    items: Tuple[LineItem, ...] = ()
    payment_info: PaymentInfo = field(default_factory=PaymentInfo)
    tax_rate: float = 0.0
    next_item_id: int = 1

    def find_item(self, item_id: int) -> LineItem | None:
        """Return the line item with the given id, or None."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


def field_names(cls: type) -> Tuple[str, ...]:
    """Return the declared field names of a model dataclass."""
    return tuple(f.name for f in fields(cls))


def serialize_document(document: InvoiceDocument) -> dict:
    """Convert an InvoiceDocument into a JSON serializable dictionary."""
    data = asdict(document)
    data["items"] = [asdict(item) for item in document.items]
    data["payment_info"]["code_type"] = document.payment_info.code_type.value
    return data


def document_to_json(document: InvoiceDocument, indent: int | None = None) -> str:
    """Serialize a document to a JSON string."""
    return json.dumps(serialize_document(document), indent=indent, ensure_ascii=False)


def document_from_json(text: str | bytes) -> InvoiceDocument:
    """
    Decode a JSON string produced by ``document_to_json``.

    Raises:
        MalformedDocumentError: If the text is not valid JSON or does not
            describe a document.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise MalformedDocumentError(f"Invalid document JSON: {exc}") from exc
    return deserialize_document(payload)


def deserialize_document(payload: Any) -> InvoiceDocument:
    """
    Convert a dictionary structure back into an InvoiceDocument.

    Numeric fields go through the same coercion as edits. A missing or
    stale ``next_item_id`` is repaired so it stays above every item id.

    Raises:
        MalformedDocumentError: On missing keys, wrong types, duplicate item
            ids or an unknown code type.
    """
    data = _require_mapping(payload, "document")
    items = tuple(
        _deserialize_item(raw) for raw in _require_list(data.get("items", []), "items")
    )
    ids = [item.id for item in items]
    if len(set(ids)) != len(ids):
        raise MalformedDocumentError("Duplicate line item ids", details={"ids": ids})

    next_item_id = data.get("next_item_id", 1)
    if isinstance(next_item_id, bool) or not isinstance(next_item_id, int):
        raise MalformedDocumentError("next_item_id must be an integer")
    next_item_id = max([next_item_id, *(i + 1 for i in ids)])

    return InvoiceDocument(
        number=_require_str(data, "number"),
        date=_require_str(data, "date"),
        due_date=_require_str(data, "due_date"),
        currency_symbol=_require_str(data, "currency_symbol"),
        sender=_deserialize_contact(data.get("sender"), "sender"),
        client=_deserialize_contact(data.get("client"), "client"),
        items=items,
        payment_info=_deserialize_payment(data.get("payment_info")),
        tax_rate=coerce_number(data.get("tax_rate", 0)),
        next_item_id=next_item_id,
    )


def _deserialize_contact(payload: Any, name: str) -> ContactInfo:
    data = _require_mapping(payload, name)
    phone = data.get("phone")
    if phone is not None and not isinstance(phone, str):
        raise MalformedDocumentError(f"{name}.phone must be a string")
    return ContactInfo(
        name=_require_str(data, "name", name),
        email=_require_str(data, "email", name),
        address=_require_str(data, "address", name),
        phone=phone,
    )


def _deserialize_payment(payload: Any) -> PaymentInfo:
    data = _require_mapping(payload, "payment_info")
    raw_code_type = data.get("code_type", CodeType.IFSC.value)
    try:
        code_type = CodeType(raw_code_type)
    except ValueError as exc:
        raise MalformedDocumentError(
            f"Unknown code type: {raw_code_type}",
            details={"code_type": raw_code_type},
        ) from exc
    return PaymentInfo(
        bank_name=_require_str(data, "bank_name", "payment_info"),
        account_name=_require_str(data, "account_name", "payment_info"),
        account_number=_require_str(data, "account_number", "payment_info"),
        swift_code=_require_str(data, "swift_code", "payment_info"),
        code_type=code_type,
        upi_id=_require_str(data, "upi_id", "payment_info"),
        notes=_require_str(data, "notes", "payment_info"),
    )


def _deserialize_item(payload: Any) -> LineItem:
    data = _require_mapping(payload, "item")
    item_id = data.get("id")
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        raise MalformedDocumentError("Line item id must be an integer")
    return LineItem(
        id=item_id,
        description=_require_str(data, "description", "item"),
        quantity=coerce_number(data.get("quantity", 0)),
        rate=coerce_number(data.get("rate", 0)),
    )


def _require_mapping(payload: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise MalformedDocumentError(f"{name} must be an object")
    return payload


def _require_list(payload: Any, name: str) -> list:
    if not isinstance(payload, list):
        raise MalformedDocumentError(f"{name} must be a list")
    return payload


def _require_str(data: Mapping[str, Any], key: str, section: str | None = None) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        target = f"{section}.{key}" if section else key
        raise MalformedDocumentError(
            f"{target} must be a string", details={"field": target}
        )
    return value
