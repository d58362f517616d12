"""
Pure edit operations on invoice documents.

Each function takes a snapshot and returns the next one; inputs are never
modified. Field names are checked against the dataclass definitions, so each
entity exposes a closed set of editable fields and a typo raises
InvalidFieldError instead of silently adding a key.

Edits that target a line item id not present in the document return the
input document unchanged.
"""

from dataclasses import replace
from typing import Any

from invoice_editor.exceptions import InvalidFieldError
from invoice_editor.lib import logs
from invoice_editor.models.invoice import (
    CodeType,
    ContactInfo,
    InvoiceDocument,
    LineItem,
    PaymentInfo,
    field_names,
)
from invoice_editor.utils import coerce_number

LOG = logs.logger(__file__)

NEW_ITEM_DESCRIPTION = "New Service Item"

ROOT_TEXT_FIELDS = frozenset({"number", "date", "due_date", "currency_symbol"})
ROOT_NUMERIC_FIELDS = frozenset({"tax_rate"})
ROOT_FIELDS = ROOT_TEXT_FIELDS | ROOT_NUMERIC_FIELDS

SECTIONS = {
    "sender": ContactInfo,
    "client": ContactInfo,
    "payment_info": PaymentInfo,
}

ITEM_TEXT_FIELDS = frozenset({"description"})
ITEM_NUMERIC_FIELDS = frozenset({"quantity", "rate"})


def set_root_field(document: InvoiceDocument, field: str, value: Any) -> InvoiceDocument:
    """
    Set a top-level scalar field.

    ``tax_rate`` is coerced to a non-negative number (invalid input becomes
    0); the remaining fields store the value as text.

    Raises:
        InvalidFieldError: If ``field`` is not a top-level scalar field.
    """
    if field not in ROOT_FIELDS:
        raise InvalidFieldError(field)
    if field in ROOT_NUMERIC_FIELDS:
        return replace(document, **{field: coerce_number(value)})
    return replace(document, **{field: _as_text(value)})


def set_section_field(
    document: InvoiceDocument, section: str, field: str, value: Any
) -> InvoiceDocument:
    """
    Replace one field of the sender, client or payment_info section.

    Sibling fields of the section and every other section are carried over
    unchanged.

    Raises:
        InvalidFieldError: If the section or field is unknown, or if a
            ``code_type`` value is not one of the CodeType labels.
    """
    try:
        section_type = SECTIONS[section]
    except KeyError as exc:
        raise InvalidFieldError(field, section, f"Unknown section: {section}") from exc
    if field not in field_names(section_type):
        raise InvalidFieldError(field, section)

    current = getattr(document, section)
    if field == "code_type":
        new_value: Any = _as_code_type(value, section)
    elif field == "phone" and value is None:
        new_value = None
    else:
        new_value = _as_text(value)
    return replace(document, **{section: replace(current, **{field: new_value})})


def set_item_field(
    document: InvoiceDocument, item_id: int, field: str, value: Any
) -> InvoiceDocument:
    """
    Edit one field of the line item with the given id.

    ``description`` is stored as text; ``quantity`` and ``rate`` are coerced
    to non-negative numbers, with invalid input becoming 0. A missing id
    returns ``document`` itself.

    Raises:
        InvalidFieldError: If ``field`` is not an editable item field.
    """
    if field in ITEM_TEXT_FIELDS:
        new_value: Any = _as_text(value)
    elif field in ITEM_NUMERIC_FIELDS:
        new_value = coerce_number(value)
    else:
        raise InvalidFieldError(field, "items")

    if document.find_item(item_id) is None:
        LOG.debug("set_item_field ignored - missing item id:%s", item_id)
        return document

    items = tuple(
        replace(item, **{field: new_value}) if item.id == item_id else item
        for item in document.items
    )
    return replace(document, items=items)


def add_item(
    document: InvoiceDocument, description: str = NEW_ITEM_DESCRIPTION
) -> InvoiceDocument:
    """Append a placeholder line item (quantity 1, rate 0) with a fresh id."""
    item = LineItem(
        id=document.next_item_id,
        description=description,
        quantity=1.0,
        rate=0.0,
    )
    return replace(
        document,
        items=document.items + (item,),
        next_item_id=document.next_item_id + 1,
    )


def delete_item(document: InvoiceDocument, item_id: int) -> InvoiceDocument:
    """Remove the line item with the given id; a missing id is ignored."""
    if document.find_item(item_id) is None:
        LOG.debug("delete_item ignored - missing item id:%s", item_id)
        return document
    return replace(
        document, items=tuple(item for item in document.items if item.id != item_id)
    )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _as_code_type(value: Any, section: str) -> CodeType:
    try:
        return CodeType(value)
    except ValueError as exc:
        raise InvalidFieldError(
            "code_type",
            section,
            f"Unknown code type: {value!r} (expected one of "
            f"{', '.join(c.value for c in CodeType)})",
        ) from exc
