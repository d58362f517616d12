"""Helper functions for numeric input handling and display formatting."""

import math
import os
import re
from typing import Any

_TRUTHY = {"1", "true", "yes"}

# Plain decimal notation with optional exponent; no digit separators
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# What a user may have typed so far while entering a non-negative decimal
_DRAFT_PATTERN = re.compile(r"\d*\.?\d*")


def coerce_number(value: Any) -> float:
    """
    Coerce free-form user input into a non-negative number.

    Numbers pass through, strings are parsed after stripping whitespace.
    Anything that does not parse, including NaN, infinities and
    ``1_000``-style digit separators, becomes 0, and so do negative values.

    Args:
        value: Raw value from an edit event.

    Returns:
        The coerced float.
    """
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            return 0.0
        number = float(text)
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def display_number(typed: str | None, value: float) -> str:
    """
    Return the text a numeric input should show for a stored value.

    While a decimal is being typed (``"0."``, ``"12.50"``) the typed text is
    kept as long as it still means ``value``; otherwise, including after
    invalid input was coerced to 0, the stored value is shown.

    Args:
        typed: Text the user last entered in this input, if any.
        value: The number stored in the document.
    """
    if typed is not None:
        text = typed.strip()
        if text and _DRAFT_PATTERN.fullmatch(text) and coerce_number(text) == value:
            return text
    return format_number(value)


def format_money(value: float, symbol: str) -> str:
    """Format a monetary amount for display, e.g. ``$3000.00``."""
    return f"{symbol}{value:.2f}"


def format_number(value: float) -> str:
    """Format an editable number without a trailing ``.0`` for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment (``1``/``true``/``yes``)."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY
