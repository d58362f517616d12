"""Currency catalog offered by the currency selector."""

from typing import Tuple

from invoice_editor.models.currency import Currency

CURRENCIES: Tuple[Currency, ...] = (
    Currency(code="USD", symbol="$", label="US Dollar ($)"),
    Currency(code="EUR", symbol="€", label="Euro (€)"),
    Currency(code="GBP", symbol="£", label="British Pound (£)"),
    Currency(code="INR", symbol="₹", label="Indian Rupee (₹)"),
    Currency(code="JPY", symbol="¥", label="Japanese Yen (¥)"),
    Currency(code="CAD", symbol="CA$", label="Canadian Dollar (CA$)"),
    Currency(code="AUD", symbol="AU$", label="Australian Dollar (AU$)"),
    Currency(code="SGD", symbol="S$", label="Singapore Dollar (S$)"),
    Currency(code="CNY", symbol="CN¥", label="Chinese Yuan (CN¥)"),
)
