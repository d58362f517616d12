"""
Service factory for the invoice editor.

This module provides the get_export_service() factory function that returns
the ExportService implementation selected by configuration.

Available Implementations:
- print: Browser print dialog queued for the Reflex UI
- log: Headless, logs each request

Unlike a shared data service, the export collaborator is created per editing
session, so the factory returns a new instance on every call. Configure via the
INVOICE_EDITOR_EXPORT environment variable.
"""

import os
from typing import Callable, Dict

from invoice_editor.lib import logs
from invoice_editor.services.export_service import ExportService
from invoice_editor.services.export_service_log import LoggingExportService
from invoice_editor.services.export_service_print import BrowserPrintExportService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], ExportService]] = {
    "print": lambda: BrowserPrintExportService(),
    "log": lambda: LoggingExportService(),
}


def get_export_service(kind: str | None = None) -> ExportService:
    """Return a new export service of the configured kind."""
    resolved_kind = (kind or os.getenv("INVOICE_EDITOR_EXPORT", "print")).lower()
    LOG.debug("get_export_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown export service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "BrowserPrintExportService",
    "ExportService",
    "LoggingExportService",
    "get_export_service",
]
