"""Tests for utility helpers."""

import math

import pytest

from invoice_editor.controller import DocumentController
from invoice_editor.services import LoggingExportService
from invoice_editor.utils import (
    coerce_number,
    display_number,
    env_flag,
    format_money,
    format_number,
)


class TestCoerceNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5.0),
            (2.5, 2.5),
            ("12", 12.0),
            (" 7.25 ", 7.25),
            ("", 0.0),
            ("abc", 0.0),
            (None, 0.0),
            (True, 0.0),
            ("-3", 0.0),
            (-1, 0.0),
            ("nan", 0.0),
            (math.inf, 0.0),
            ("1_000", 0.0),
            ("0x10", 0.0),
            ("1e3", 1000.0),
            ("12.", 12.0),
            (".5", 0.5),
        ],
    )
    def test_values(self, value, expected):
        assert coerce_number(value) == expected


class TestFormatting:
    def test_format_money_rounds_for_display(self):
        assert format_money(3000, "$") == "$3000.00"
        assert format_money(0.1 + 0.2, "€") == "€0.30"

    def test_format_number(self):
        assert format_number(20.0) == "20"
        assert format_number(12.5) == "12.5"


class TestEnvFlag:
    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("INVOICE_EDITOR_TEST_FLAG", raising=False)
        assert env_flag("INVOICE_EDITOR_TEST_FLAG", default=True) is True

    @pytest.mark.parametrize("raw, expected", [("1", True), ("Yes", True), ("false", False), ("0", False)])
    def test_parses(self, monkeypatch, raw, expected):
        monkeypatch.setenv("INVOICE_EDITOR_TEST_FLAG", raw)
        assert env_flag("INVOICE_EDITOR_TEST_FLAG") is expected


class TestDisplayNumber:
    @pytest.mark.parametrize(
        "typed, value, expected",
        [
            ("0.", 0.0, "0."),
            ("12.50", 12.5, "12.50"),
            (".", 0.0, "."),
            ("abc", 0.0, "0"),
            ("", 0.0, "0"),
            ("-4", 0.0, "0"),
            (None, 7.5, "7.5"),
            ("3", 4.0, "4"),
        ],
    )
    def test_values(self, typed, value, expected):
        assert display_number(typed, value) == expected


def _type_keys(controller: DocumentController, item_id: int, field: str, keys: str) -> str:
    """Type keys into an item input the way the editor page does."""
    shown = display_number(None, getattr(controller.get_item(item_id), field))
    for key in keys:
        typed = shown + key
        controller.set_item_field(item_id, field, typed)
        shown = display_number(typed, getattr(controller.get_item(item_id), field))
    return shown


class TestNumericInputRoundTrip:
    @pytest.fixture
    def controller(self, document) -> DocumentController:
        controller = DocumentController(document, export_service=LoggingExportService())
        controller.add_item()
        return controller

    def test_decimal_rate(self, controller: DocumentController):
        # new item rate starts at 0, so typing ".5" shows "0.5"
        assert _type_keys(controller, 4, "rate", ".5") == "0.5"
        assert controller.get_item(4).rate == 0.5

    def test_decimal_quantity(self, controller: DocumentController):
        assert _type_keys(controller, 1, "quantity", ".25") == "20.25"
        assert controller.get_item(1).quantity == 20.25

    def test_invalid_key_shows_zero(self, controller: DocumentController):
        assert _type_keys(controller, 4, "rate", "x") == "0"
        assert controller.get_item(4).rate == 0

    def test_decimal_tax_rate(self, controller: DocumentController):
        shown = "0"
        for key in ".5":
            typed = shown + key
            controller.set_root_field("tax_rate", typed)
            shown = display_number(typed, controller.document.tax_rate)
        assert shown == "0.5"
        assert controller.snapshot().tax_amount == pytest.approx(3000 * 0.005)
