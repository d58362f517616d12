"""Utility functions shared across the invoice editor package."""

from invoice_editor.utils.invoice_helpers import (
    coerce_number,
    display_number,
    env_flag,
    format_money,
    format_number,
)

__all__ = [
    "coerce_number",
    "display_number",
    "env_flag",
    "format_money",
    "format_number",
]
