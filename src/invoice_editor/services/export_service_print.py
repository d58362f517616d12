"""
Browser print implementation of ExportService.

The Reflex state cannot open the print dialog from inside the controller, so
requests are queued here as client-side scripts. The state drains the queue
after every export event and hands each script to ``rx.call_script``.
"""

from threading import Lock
from typing import List

from invoice_editor.lib import logs
from invoice_editor.services.export_service import ExportService

LOG = logs.logger(__file__)

PRINT_SCRIPT = "window.print()"


class BrowserPrintExportService(ExportService):
    """Queues ``window.print()`` calls for the browser that owns the session."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._pending: List[str] = []

    def request_render(self) -> None:
        """Queue one print dialog."""
        with self._lock:
            self._pending.append(PRINT_SCRIPT)
        LOG.info("Print requested")

    @property
    def pending(self) -> int:
        """Number of queued scripts not yet handed to the browser."""
        with self._lock:
            return len(self._pending)

    def drain(self) -> List[str]:
        """Return and clear the queued scripts."""
        with self._lock:
            scripts, self._pending = self._pending, []
        return scripts
