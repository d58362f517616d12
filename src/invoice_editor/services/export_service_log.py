"""
Headless implementation of ExportService.

Useful when the editor runs without a browser (scripts, tests): every
request is logged and counted, nothing is rendered.
"""

from invoice_editor.lib import logs
from invoice_editor.services.export_service import ExportService

LOG = logs.logger(__file__)


class LoggingExportService(ExportService):
    """Records render requests instead of producing output."""

    def __init__(self) -> None:
        self.requests = 0

    def request_render(self) -> None:
        """Log the request and bump the counter."""
        self.requests += 1
        LOG.info("Render requested (headless) - count:%s", self.requests)
