"""Tests for document serialization."""

import json
from dataclasses import replace

import pytest

from invoice_editor.exceptions import MalformedDocumentError
from invoice_editor.models.invoice import (
    CodeType,
    InvoiceDocument,
    LineItem,
    deserialize_document,
    document_from_json,
    document_to_json,
    serialize_document,
)


@pytest.fixture
def payload(document: InvoiceDocument) -> dict:
    return serialize_document(document)


class TestSerialize:
    def test_shape(self, payload: dict):
        assert set(payload) == {
            "number",
            "date",
            "due_date",
            "currency_symbol",
            "sender",
            "client",
            "items",
            "payment_info",
            "tax_rate",
            "next_item_id",
        }
        assert payload["items"][0] == {
            "id": 1,
            "description": "Frontend Development - React Components",
            "quantity": 20,
            "rate": 85.0,
        }
        assert payload["payment_info"]["code_type"] == "IFSC"
        assert payload["client"]["phone"] is None

    def test_json_round_trip(self, document: InvoiceDocument):
        euro = replace(document, currency_symbol="€")
        text = document_to_json(euro)
        assert "€" in text
        assert document_from_json(text) == euro


class TestDeserialize:
    def test_numeric_fields_coerced(self, payload: dict):
        payload["tax_rate"] = "abc"
        payload["items"][0]["quantity"] = "3"
        doc = deserialize_document(payload)
        assert doc.tax_rate == 0
        assert doc.items[0].quantity == 3

    def test_code_type(self, payload: dict):
        payload["payment_info"]["code_type"] = "Routing"
        assert deserialize_document(payload).payment_info.code_type is CodeType.ROUTING

    def test_next_item_id_repaired(self, payload: dict):
        payload["next_item_id"] = 2
        assert deserialize_document(payload).next_item_id == 4

    def test_next_item_id_defaults(self, payload: dict):
        del payload["next_item_id"]
        payload["items"] = [{"id": 10, "description": "x", "quantity": 1, "rate": 1}]
        assert deserialize_document(payload).next_item_id == 11

    def test_empty_items(self, payload: dict):
        payload["items"] = []
        doc = deserialize_document(payload)
        assert doc.items == ()

    def test_item_order_kept(self, payload: dict):
        payload["items"].reverse()
        assert [i.id for i in deserialize_document(payload).items] == [3, 2, 1]


class TestMalformed:
    def test_invalid_json(self):
        with pytest.raises(MalformedDocumentError):
            document_from_json("{")

    def test_not_an_object(self):
        with pytest.raises(MalformedDocumentError):
            document_from_json(json.dumps([1, 2, 3]))

    def test_missing_field(self, payload: dict):
        del payload["number"]
        with pytest.raises(MalformedDocumentError) as exc_info:
            deserialize_document(payload)
        assert exc_info.value.details == {"field": "number"}

    def test_missing_section(self, payload: dict):
        del payload["sender"]
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)

    def test_wrong_type_in_section(self, payload: dict):
        payload["client"]["email"] = 5
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)

    def test_duplicate_ids(self, payload: dict):
        payload["items"][1]["id"] = 1
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)

    @pytest.mark.parametrize("item_id", ["1", None, True, 1.5])
    def test_bad_item_id(self, payload: dict, item_id):
        payload["items"][0]["id"] = item_id
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)

    def test_unknown_code_type(self, payload: dict):
        payload["payment_info"]["code_type"] = "BSB"
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)

    def test_items_not_a_list(self, payload: dict):
        payload["items"] = {"id": 1}
        with pytest.raises(MalformedDocumentError):
            deserialize_document(payload)


def test_line_item_survives_round_trip():
    doc = InvoiceDocument(items=(LineItem(id=5, description="Ops", quantity=1.5, rate=40),), next_item_id=6)
    assert deserialize_document(serialize_document(doc)) == doc
