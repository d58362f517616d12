"""
Currency catalog entries and registry lookups.

The catalog is static configuration compiled into the package; entries are
never created or changed at runtime. Order is display order.
"""

from dataclasses import dataclass
from typing import Sequence

from invoice_editor.exceptions import CurrencyNotFoundError


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency the invoice can be displayed in."""

    code: str
    symbol: str
    label: str


def list_currencies() -> Sequence[Currency]:
    """Return the catalog in display order."""
    from invoice_editor.data.currencies import CURRENCIES

    return CURRENCIES


def lookup_symbol(code: str) -> str:
    """
    Return the display symbol for a currency code.

    Args:
        code: ISO currency code, case-insensitive (e.g. ``"usd"``).

    Raises:
        CurrencyNotFoundError: If the code is not in the catalog.
    """
    normalized = code.strip().upper()
    for currency in list_currencies():
        if currency.code == normalized:
            return currency.symbol
    raise CurrencyNotFoundError(code)


def lookup_by_symbol(symbol: str) -> Currency | None:
    """Return the catalog entry whose symbol matches, or None."""
    for currency in list_currencies():
        if currency.symbol == symbol:
            return currency
    return None
