"""
Catalog package for the museum merchandise API.

This package holds the product query engine and the routes that
expose museums, categories and products. Products are filtered in
memory against an optional set of predicates and returned joined with
their museum and category, so a front-end can render a catalogue card
without further lookups.
"""

from .router import router as catalog_router  # noqa: F401
