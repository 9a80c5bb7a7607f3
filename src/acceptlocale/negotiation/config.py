"""Negotiator configuration.

Provides a single frozen dataclass holding everything negotiation needs.
Constructed once at startup and shared read-only by every request, so all
validation happens here, in __post_init__: an incomplete configuration
fails at construction and never reaches request handling.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from acceptlocale.catalog.protocol import Catalog
from acceptlocale.diagnostics import ConfigurationError, ErrorTemplate
from acceptlocale.locale_utils import is_valid_locale_tag
from acceptlocale.types import LanguageTag

__all__ = ["NegotiatorConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class NegotiatorConfig:
    """Immutable configuration for locale negotiation.

    Attributes:
        catalog: Translation backend providing known_locales() and
            activate_locale() (required).
        default_locale: Locale used when no preference matches, and the
            locale activated in the catalog for whitelisted matches
            (required). Expected to be known to the catalog; a warning is
            logged at construction when it is not.
        additional_locales: Whitelist of locales accepted for routing even
            though the catalog has no translations for them (default: empty).
            Any iterable of tags is accepted and frozen.

    Example:
        >>> from acceptlocale.catalog import StaticCatalog
        >>> config = NegotiatorConfig(
        ...     catalog=StaticCatalog(["en", "de"]),
        ...     default_locale="en",
        ...     additional_locales=["fr"],
        ... )
        >>> config.additional_locales
        frozenset({'fr'})
    """

    catalog: Catalog
    default_locale: LanguageTag
    additional_locales: frozenset[LanguageTag] = frozenset()

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If catalog is missing or does not implement
                the Catalog protocol, default_locale is missing, or any
                configured tag is not a usable language tag.
        """
        if self.catalog is None:
            raise ConfigurationError(ErrorTemplate.missing_catalog())
        if not isinstance(self.catalog, Catalog):
            raise ConfigurationError(ErrorTemplate.invalid_catalog(self.catalog))

        if self.default_locale is None or self.default_locale == "":
            raise ConfigurationError(ErrorTemplate.missing_default_locale(self.default_locale))
        if not is_valid_locale_tag(self.default_locale):
            raise ConfigurationError(
                ErrorTemplate.invalid_locale_tag("default_locale", self.default_locale)
            )

        additional = self.additional_locales
        # A bare string is iterable too; frozenset("fr") would whitelist "f" and "r".
        if isinstance(additional, str) or not isinstance(additional, Iterable):
            raise ConfigurationError(
                ErrorTemplate.invalid_locale_tag("additional_locales", additional)
            )
        try:
            frozen = frozenset(additional)
        except TypeError:
            raise ConfigurationError(
                ErrorTemplate.invalid_locale_tag("additional_locales", additional)
            ) from None
        for tag in frozen:
            if not is_valid_locale_tag(tag):
                raise ConfigurationError(ErrorTemplate.invalid_locale_tag("additional_locales", tag))
        object.__setattr__(self, "additional_locales", frozen)

        if self.default_locale not in self.catalog.known_locales():
            logger.warning(
                "%s", ErrorTemplate.default_locale_not_known(self.default_locale).format_error()
            )
