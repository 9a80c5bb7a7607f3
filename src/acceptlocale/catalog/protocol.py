"""Catalog capability required by the negotiator.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Set

    from acceptlocale.types import LanguageTag

__all__ = ["Catalog"]


@runtime_checkable
class Catalog(Protocol):
    """Protocol for translation backends that negotiation can drive.

    Any translation engine satisfies it with two methods; adapters need no
    base class.

    Implementations must keep the active locale request-scoped (for example
    in a ContextVar): activating a locale for one request must not change
    the locale seen by any other request handled concurrently.

    Example:
        >>> class DictCatalog:
        ...     def __init__(self, strings):
        ...         self.strings = strings
        ...     def known_locales(self):
        ...         return frozenset(self.strings)
        ...     def activate_locale(self, locale):
        ...         current_locale.set(locale)
        ...
        >>> isinstance(DictCatalog({"en": {}}), Catalog)
        True
    """

    def known_locales(self) -> Set[LanguageTag]:
        """Return the locales this catalog has translations for.

        Must be a pure query; it is called once per negotiation.
        """
        ...

    def activate_locale(self, locale: LanguageTag) -> None:
        """Make ``locale`` the active translation locale for the current request.

        Must be idempotent and must accept any tag, including tags outside
        known_locales().
        """
        ...
