"""Reflex configuration for the invoice editor application."""

import reflex as rx

config = rx.Config(
    app_name="invoice_editor",
    # Use the src directory structure
    app_module_import="invoice_editor.app",
)
