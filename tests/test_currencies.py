"""Tests for the currency registry."""

import pytest

from invoice_editor.exceptions import CurrencyNotFoundError
from invoice_editor.models.currency import (
    Currency,
    list_currencies,
    lookup_by_symbol,
    lookup_symbol,
)


class TestListCurrencies:
    def test_catalog_order(self):
        codes = [c.code for c in list_currencies()]
        assert codes == ["USD", "EUR", "GBP", "INR", "JPY", "CAD", "AUD", "SGD", "CNY"]

    def test_entries(self):
        currencies = list_currencies()
        assert currencies[0] == Currency(code="USD", symbol="$", label="US Dollar ($)")
        assert currencies[-1].symbol == "CN¥"

    def test_symbols_unique(self):
        symbols = [c.symbol for c in list_currencies()]
        assert len(set(symbols)) == len(symbols)


class TestLookup:
    def test_lookup_symbol(self):
        assert lookup_symbol("INR") == "₹"

    def test_lookup_symbol_case_insensitive(self):
        assert lookup_symbol(" gbp ") == "£"

    def test_lookup_symbol_unknown(self):
        with pytest.raises(CurrencyNotFoundError) as exc_info:
            lookup_symbol("BTC")
        assert exc_info.value.currency_code == "BTC"
        assert exc_info.value.to_dict()["code"] == "CURRENCY"

    def test_lookup_by_symbol(self):
        assert lookup_by_symbol("CA$").code == "CAD"
        assert lookup_by_symbol("?") is None
