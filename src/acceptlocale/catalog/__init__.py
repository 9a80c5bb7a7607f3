"""Catalog capability and built-in backends.

Submodules:
    protocol      - Catalog protocol (known_locales, activate_locale)
    static        - StaticCatalog, a fixed in-memory locale set
    babel_catalog - BabelCatalog, gettext .mo catalogs loaded through Babel

Python 3.13+.
"""

from .babel_catalog import BabelCatalog
from .protocol import Catalog
from .static import StaticCatalog

__all__ = [
    "BabelCatalog",
    "Catalog",
    "StaticCatalog",
]
