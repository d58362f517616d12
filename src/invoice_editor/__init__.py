"""
Invoice Editor: a Reflex application for composing a printable invoice.

The core is a set of immutable document models, pure edit operations and a
totals calculation, owned per session by a DocumentController. The Reflex
state and components are a thin presentation binding on top.

Subpackages:
- models: Document model, currency catalog entries, serialization
- data: Static currency catalog and the seeded template document
- services: Print/export collaborator implementations
- components: Reflex UI components
- lib: Logging helpers

Main entry points:
- app.main(): Start the development server
- controller.DocumentController: Headless editing session
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
