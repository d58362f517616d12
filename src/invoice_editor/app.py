"""
Reflex application entry point for the invoice editor.

This module initializes the Reflex app and defines the single editor page.
"""

import os

import reflex as rx

from invoice_editor.components import (
    invoice_header,
    line_items_table,
    payment_panel,
    toolbar,
    totals_panel,
)
from invoice_editor.lib import logs
from invoice_editor.state import APP_TITLE, InvoiceEditorState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("DATABRICKS_APP_PORT", "8000"))

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The toolbar followed by the invoice "paper".
    """
    return rx.box(
        toolbar(),
        rx.box(
            invoice_header(),
            line_items_table(),
            totals_panel(),
            payment_panel(),
            rx.text("Thank you for your business!", class_name="footer muted"),
            class_name="invoice-paper",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="medium",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceEditorState.on_load,
)


def main() -> None:
    """Entrypoint used via `invoice_editor` console script."""
    # In production, use `reflex run` directly
    import subprocess
    import sys

    LOG.info("Starting invoice editor on port %s", APP_PORT)
    subprocess.run([sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)])


if __name__ == "__main__":
    main()
