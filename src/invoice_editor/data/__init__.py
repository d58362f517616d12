"""
Static data for the invoice editor.

Modules:
- currencies: The fixed currency catalog
- default_invoice: The seeded template document a session starts from
"""
