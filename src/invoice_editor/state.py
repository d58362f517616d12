"""
Reflex state management for the invoice editor.

The state class holds no invoice data of its own. Each browser session gets
a DocumentController from the session registry; edit events are forwarded
to it and the resulting snapshot is mirrored into display vars.
"""

import reflex as rx

from invoice_editor.controller import DocumentController, EditorSnapshot
from invoice_editor.exceptions import InvoiceEditorError
from invoice_editor.lib import logs
from invoice_editor.models.currency import list_currencies, lookup_by_symbol
from invoice_editor.models.invoice import CodeType, ContactInfo
from invoice_editor.services import BrowserPrintExportService
from invoice_editor.sessions import SessionRegistry
from invoice_editor.utils import display_number, format_money

LOG = logs.logger(__file__)

APP_TITLE = "Invoice Generator"
APP_SUBTITLE = "Edit directly on the paper below"

_SESSIONS = SessionRegistry()


def get_controller(token: str) -> DocumentController:
    """Return the controller for a client token, creating it on first use."""
    return _SESSIONS.get(token)


def _contact_dict(contact: ContactInfo) -> dict[str, str]:
    return {
        "name": contact.name,
        "email": contact.email,
        "address": contact.address,
        "phone": contact.phone or "",
    }


class InvoiceEditorState(rx.State):
    """
    Display state for the invoice editor page.

    Every var is a formatted copy of the controller's current snapshot.
    """

    invoice_number: str = ""
    invoice_date: str = ""
    due_date: str = ""
    currency_symbol: str = "$"
    currency_code: str = "USD"
    tax_rate: str = "0"

    sender_info: dict[str, str] = {}
    client_info: dict[str, str] = {}
    payment_info: dict[str, str] = {}
    line_items: list[dict[str, str]] = []

    subtotal: str = ""
    tax_amount: str = ""
    total: str = ""

    currencies: list[dict[str, str]] = [
        {"code": c.code, "symbol": c.symbol, "label": c.label}
        for c in list_currencies()
    ]
    code_types: list[str] = [c.value for c in CodeType]

    # Last text typed into each numeric input, keyed "tax_rate" or "<id>:<field>"
    _typed_numbers: dict[str, str] = {}

    @rx.event
    def on_load(self):
        """Populate the page from the session's current document."""
        self._sync()

    @rx.event
    def set_root_field(self, field: str, value: str):
        """Edit number, dates, currency symbol or tax rate."""
        if field == "tax_rate":
            self._typed_numbers = {**self._typed_numbers, field: value}
        self._edit("set_root_field", field, value)

    @rx.event
    def set_section_field(self, section: str, field: str, value: str):
        """Edit one sender, client or payment detail."""
        self._edit("set_section_field", section, field, value)

    @rx.event
    def set_item_field(self, item_id: str, field: str, value: str):
        """Edit a line item's description, quantity or rate."""
        if field in ("quantity", "rate"):
            key = f"{item_id}:{field}"
            self._typed_numbers = {**self._typed_numbers, key: value}
        self._edit("set_item_field", int(item_id), field, value)

    @rx.event
    def add_item(self):
        self._edit("add_item")

    @rx.event
    def delete_item(self, item_id: str):
        self._edit("delete_item", int(item_id))

    @rx.event
    def export(self):
        """Open the browser print dialog for the committed document."""
        controller = self._controller()
        controller.trigger_export()
        service = controller.export_service
        if isinstance(service, BrowserPrintExportService):
            return [rx.call_script(script) for script in service.drain()]

    def _controller(self) -> DocumentController:
        return get_controller(self.router.session.client_token)

    def _edit(self, operation: str, *args):
        controller = self._controller()
        try:
            getattr(controller, operation)(*args)
        except InvoiceEditorError as e:
            LOG.warning("Edit rejected - %s: %s", operation, e)
        self._sync(controller.snapshot())

    def _sync(self, snapshot: EditorSnapshot | None = None):
        snap = snapshot or self._controller().snapshot()
        doc = snap.document
        symbol = doc.currency_symbol

        self.invoice_number = doc.number
        self.invoice_date = doc.date
        self.due_date = doc.due_date
        self.currency_symbol = symbol
        currency = lookup_by_symbol(symbol)
        self.currency_code = currency.code if currency else ""
        typed = self._typed_numbers
        self.tax_rate = display_number(typed.get("tax_rate"), doc.tax_rate)

        self.sender_info = _contact_dict(doc.sender)
        self.client_info = _contact_dict(doc.client)
        payment = doc.payment_info
        self.payment_info = {
            "bank_name": payment.bank_name,
            "account_name": payment.account_name,
            "account_number": payment.account_number,
            "swift_code": payment.swift_code,
            "code_type": payment.code_type.value,
            "upi_id": payment.upi_id,
            "notes": payment.notes,
        }
        self.line_items = [
            {
                "id": str(item.id),
                "description": item.description,
                "quantity": display_number(
                    typed.get(f"{item.id}:quantity"), item.quantity
                ),
                "rate": display_number(typed.get(f"{item.id}:rate"), item.rate),
                "amount": format_money(item.amount, symbol),
            }
            for item in doc.items
        ]

        self.subtotal = format_money(snap.subtotal, symbol)
        self.tax_amount = format_money(snap.tax_amount, symbol)
        self.total = format_money(snap.total, symbol)
