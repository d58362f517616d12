"""
Document controller: the single owner of the current invoice snapshot.

The controller applies pure mutations to the current document and swaps the
result in under a lock, so one writer runs at a time and readers always see
a complete snapshot. Totals handed out by ``snapshot()`` are computed from the
same document they are returned with.
"""

from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable

from invoice_editor import mutations
from invoice_editor.data.default_invoice import initial_invoice
from invoice_editor.exceptions import ItemNotFoundError
from invoice_editor.lib import logs
from invoice_editor.models.invoice import (
    InvoiceDocument,
    LineItem,
    document_from_json,
    document_to_json,
)
from invoice_editor.services import ExportService, get_export_service
from invoice_editor.totals import Totals, calculate_totals

LOG = logs.logger(__file__)

Mutation = Callable[..., InvoiceDocument]


@dataclass(frozen=True, slots=True)
class EditorSnapshot:
    """A document together with the totals derived from it."""

    document: InvoiceDocument
    totals: Totals

    @property
    def subtotal(self) -> float:
        return self.totals.subtotal

    @property
    def tax_amount(self) -> float:
        return self.totals.tax_amount

    @property
    def total(self) -> float:
        return self.totals.total


class DocumentController:
    """
    Holds the current document for one editing session.

    Attributes:
        export_service: Collaborator invoked by ``trigger_export``.
    """

    def __init__(
        self,
        document: InvoiceDocument | None = None,
        export_service: ExportService | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            document: Starting snapshot, or None for the configured template.
            export_service: Print/export collaborator, or None for the
                configured default.
        """
        self._lock = RLock()
        self._document = document if document is not None else initial_invoice()
        self.export_service = export_service or get_export_service()

    @property
    def document(self) -> InvoiceDocument:
        """The current snapshot."""
        return self._document

    def snapshot(self) -> EditorSnapshot:
        """Return the current document and its totals as one consistent value."""
        document = self._document
        return EditorSnapshot(document=document, totals=calculate_totals(document))

    def get_item(self, item_id: int) -> LineItem:
        """
        Return a line item of the current snapshot.

        Raises:
            ItemNotFoundError: If no item has this id, e.g. a stale id kept
                after the item was deleted.
        """
        item = self._document.find_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    def apply(self, mutation: Mutation, *args: Any) -> InvoiceDocument:
        """
        Apply ``mutation(document, *args)`` and commit the result.

        If the mutation raises, the current snapshot is left untouched.
        """
        with self._lock:
            updated = mutation(self._document, *args)
            self._document = updated
        LOG.debug("apply - mutation:%s args:%s", mutation.__name__, args)
        return updated

    def set_root_field(self, field: str, value: Any) -> InvoiceDocument:
        return self.apply(mutations.set_root_field, field, value)

    def set_section_field(self, section: str, field: str, value: Any) -> InvoiceDocument:
        return self.apply(mutations.set_section_field, section, field, value)

    def set_item_field(self, item_id: int, field: str, value: Any) -> InvoiceDocument:
        return self.apply(mutations.set_item_field, item_id, field, value)

    def add_item(self) -> InvoiceDocument:
        return self.apply(mutations.add_item)

    def delete_item(self, item_id: int) -> InvoiceDocument:
        return self.apply(mutations.delete_item, item_id)

    def load(self, document: InvoiceDocument) -> InvoiceDocument:
        """Replace the current snapshot wholesale."""
        with self._lock:
            self._document = document
        LOG.info(
            "Document loaded - number:%s items:%s", document.number, len(document.items)
        )
        return document

    def load_json(self, text: str | bytes) -> InvoiceDocument:
        """
        Decode and load a serialized document.

        Raises:
            MalformedDocumentError: If the text does not decode to a document;
                the current snapshot is kept.
        """
        return self.load(document_from_json(text))

    def dump_json(self, indent: int | None = None) -> str:
        """Serialize the current snapshot."""
        return document_to_json(self._document, indent=indent)

    def reset(self) -> InvoiceDocument:
        """Start over from the configured template."""
        return self.load(initial_invoice())

    def trigger_export(self) -> None:
        """
        Ask the export collaborator to render the latest committed snapshot.

        Fire-and-forget: the result is not awaited and collaborator failures
        are logged rather than raised into the editing session.
        """
        # Wait out any in-flight edit so the host renders committed state.
        with self._lock:
            number = self._document.number
        LOG.info("Export triggered - number:%s", number)
        try:
            self.export_service.request_render()
        except Exception as e:
            LOG.error("Export request failed: %s", e, exc_info=True)
