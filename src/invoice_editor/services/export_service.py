"""
Abstract base class for the print/export collaborator.

The editor core never renders paper itself. When the user asks for a
printable copy, the Document Controller calls ``request_render()`` on an
ExportService and moves on without waiting for a result; turning the
currently displayed document into paper or PDF is the host's job.

Implementations:
- BrowserPrintExportService: Queues the browser print dialog for the UI
- LoggingExportService: Headless stand-in that records requests in the log
"""

from abc import ABC, abstractmethod


class ExportService(ABC):
    """Contract for the "render current document to paper" capability."""

    @abstractmethod
    def request_render(self) -> None:
        """
        Ask the host to render whatever document is currently displayed.

        Takes no document argument; the host prints what it last presented.
        """
