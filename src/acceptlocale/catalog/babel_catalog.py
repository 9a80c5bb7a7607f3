"""gettext catalog backed by Babel.

Discovers compiled message catalogs laid out the gettext way::

    <directory>/<locale>/LC_MESSAGES/<domain>.mo

and serves translations for the locale activated in the current request
context. Directory names use POSIX form (``pt_BR``); tags are reported in
hyphenated form (``pt-BR``) to match what clients send in Accept-Language.

Architecture:
    - Discovery runs once at construction (locale set is immutable)
    - Translations objects are loaded lazily per tag and cached
    - Cache access is serialized by a lock; lookups are lock-free afterwards
    - The active tag is stored in a context-local slot (request isolation)

Python 3.13+. Uses Babel for gettext catalog loading.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from babel.support import NullTranslations, Translations

from acceptlocale.constants import DEFAULT_DOMAIN
from acceptlocale.context import LocaleSlot
from acceptlocale.diagnostics import CatalogError, ErrorTemplate

if TYPE_CHECKING:
    import os

    from acceptlocale.types import LanguageTag

__all__ = ["BabelCatalog"]

logger = logging.getLogger(__name__)


class BabelCatalog:
    """Catalog serving gettext ``.mo`` files through babel.support.Translations.

    Example:
        >>> catalog = BabelCatalog("translations")
        >>> sorted(catalog.known_locales())
        ['de', 'pt-BR']
        >>> catalog.activate_locale("de")
        >>> catalog.gettext("Hello")
        'Hallo'

    Activating a tag without a catalog (for example a whitelisted locale
    or the default locale of an untranslated source language) installs
    NullTranslations, which return messages unchanged.
    """

    __slots__ = (
        "_directories",
        "_directory",
        "_domain",
        "_lock",
        "_slot",
        "_translations",
    )

    def __init__(
        self,
        directory: str | os.PathLike[str],
        domain: str = DEFAULT_DOMAIN,
    ) -> None:
        """Discover the locales available under ``directory``.

        Args:
            directory: Root of the gettext locale tree
            domain: gettext domain (``.mo`` file stem)

        Raises:
            CatalogError: If directory does not exist or is not a directory
        """
        path = Path(directory)
        if not path.is_dir():
            raise CatalogError(ErrorTemplate.catalog_directory_not_found(str(path)))

        self._directory = path
        self._domain = domain
        self._directories: dict[LanguageTag, str] = self._discover(path, domain)
        self._translations: dict[LanguageTag, NullTranslations] = {}
        self._lock = threading.Lock()
        self._slot: LocaleSlot[LanguageTag] = LocaleSlot(f"babel_catalog.{id(self):x}")

        logger.info(
            "BabelCatalog discovered %d locale(s) in %s for domain '%s': %s",
            len(self._directories),
            path,
            domain,
            ", ".join(sorted(self._directories)),
        )

    @staticmethod
    def _discover(path: Path, domain: str) -> dict[LanguageTag, str]:
        directories: dict[LanguageTag, str] = {}
        for child in sorted(path.iterdir()):
            if not (child / "LC_MESSAGES" / f"{domain}.mo").is_file():
                continue
            directories[child.name.replace("_", "-")] = child.name
        return directories

    def __repr__(self) -> str:
        return f"BabelCatalog({str(self._directory)!r}, domain={self._domain!r})"

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def domain(self) -> str:
        return self._domain

    def known_locales(self) -> frozenset[LanguageTag]:
        return frozenset(self._directories)

    def activate_locale(self, locale: LanguageTag) -> None:
        # Load eagerly so the first gettext() of the request does not pay for I/O
        self._get_translations(locale)
        self._slot.set(locale)
        logger.debug("BabelCatalog activated locale: %s", locale)

    @property
    def active_locale(self) -> LanguageTag | None:
        """Locale activated in the current context, or None."""
        return self._slot.get()

    def translations(self) -> NullTranslations:
        """Translations for the active locale (NullTranslations if none is active)."""
        locale = self._slot.get()
        if locale is None:
            return NullTranslations()
        return self._get_translations(locale)

    def gettext(self, message: str) -> str:
        return self.translations().gettext(message)

    def ngettext(self, singular: str, plural: str, n: int) -> str:
        return self.translations().ngettext(singular, plural, n)

    def pgettext(self, context: str, message: str) -> str:
        return self.translations().pgettext(context, message)

    def _get_translations(self, locale: LanguageTag) -> NullTranslations:
        cached = self._translations.get(locale)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._translations.get(locale)
            if cached is not None:
                return cached

            dirname = self._directories.get(locale)
            if dirname is None:
                translations = NullTranslations()
            else:
                translations = Translations.load(
                    dirname=self._directory, locales=[dirname], domain=self._domain
                )
                logger.debug("Loaded %s translations for locale: %s", self._domain, locale)
            self._translations[locale] = translations
            return translations
