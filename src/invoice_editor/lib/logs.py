"""
Logging utilities for the invoice editor.

Provides a logger factory so every module gets a consistently formatted
Python logger with a single call: ``LOG = logs.logger(__file__)``.
"""

import logging
import os
from pathlib import Path

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    File paths (e.g. ``__file__``) are reduced to a dotted name rooted at the
    ``invoice_editor`` package so that ``state.py`` and
    ``services/__init__.py`` do not collide.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = _module_name(Path(name))

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log


def _module_name(path: Path) -> str:
    parts = list(path.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    if "invoice_editor" in parts:
        idx = len(parts) - 1 - parts[::-1].index("invoice_editor")
        return ".".join(parts[idx:])
    return parts[-1] if parts else "invoice_editor"
