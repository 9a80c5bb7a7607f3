"""In-memory catalog with a fixed locale set.

Suited to services whose translations live elsewhere (a frontend bundle,
an external localization service) and to tests.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from acceptlocale.context import LocaleSlot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from acceptlocale.types import LanguageTag

__all__ = ["StaticCatalog"]

logger = logging.getLogger(__name__)


class StaticCatalog:
    """Catalog backed by a fixed set of locale tags.

    The active locale is stored in a context-local slot owned by the
    instance: concurrent requests each see the locale they activated.

    Example:
        >>> catalog = StaticCatalog(["en", "de"])
        >>> sorted(catalog.known_locales())
        ['de', 'en']
        >>> catalog.active_locale is None
        True
        >>> catalog.activate_locale("de")
        >>> catalog.active_locale
        'de'
    """

    __slots__ = ("_locales", "_slot")

    def __init__(self, locales: Iterable[LanguageTag]) -> None:
        self._locales: frozenset[LanguageTag] = frozenset(locales)
        self._slot: LocaleSlot[LanguageTag] = LocaleSlot(f"static_catalog.{id(self):x}")

    def __repr__(self) -> str:
        return f"StaticCatalog({sorted(self._locales)!r})"

    def known_locales(self) -> frozenset[LanguageTag]:
        return self._locales

    def activate_locale(self, locale: LanguageTag) -> None:
        self._slot.set(locale)
        logger.debug("StaticCatalog activated locale: %s", locale)

    @property
    def active_locale(self) -> LanguageTag | None:
        """Locale activated in the current context, or None."""
        return self._slot.get()
