"""Locale negotiation against a catalog and a whitelist.

Matching algorithm:
    1. supported = catalog.known_locales() | additional_locales
    2. picked = first candidate (in preference order) found in supported
    3. no pick          -> resolved = catalog = default_locale  (DEFAULT)
    4. picked whitelisted -> resolved = picked,
                             catalog = default_locale           (WHITELIST)
    5. otherwise        -> resolved = catalog = picked          (CATALOG)

Step 4 applies even when the whitelisted tag is also known to the catalog:
whitelist membership decides which locale is activated, never whether a
candidate matches. Tags are compared by exact string equality.

negotiate() is pure and total. Activating the catalog locale is a
separate step (LocaleNegotiator.activate) so the decision can be tested
without touching translation state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from acceptlocale.enums import RoutingDecision
from acceptlocale.negotiation.config import NegotiatorConfig
from acceptlocale.parsing import parse_accept_language

if TYPE_CHECKING:
    from collections.abc import Iterable

    from acceptlocale.catalog.protocol import Catalog
    from acceptlocale.types import LanguageTag

__all__ = [
    "LocaleNegotiator",
    "Resolution",
    "is_supported_locale",
    "negotiate",
    "supported_locales",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of negotiating one request.

    Attributes:
        resolved_locale: Locale exposed to the request pipeline (routing,
            templates, client-side behaviour)
        catalog_locale: Locale to activate in the translation catalog
        decision: Which negotiation branch produced this result
    """

    resolved_locale: LanguageTag
    catalog_locale: LanguageTag
    decision: RoutingDecision

    @property
    def is_split(self) -> bool:
        """True when the catalog falls back while routing keeps the whitelisted tag."""
        return self.resolved_locale != self.catalog_locale


def supported_locales(config: NegotiatorConfig) -> frozenset[LanguageTag]:
    """Locales a candidate may match: catalog locales plus the whitelist."""
    return frozenset(config.catalog.known_locales()) | config.additional_locales


def is_supported_locale(locale: LanguageTag, config: NegotiatorConfig) -> bool:
    """Check whether a tag is known to the catalog or whitelisted."""
    return locale in supported_locales(config)


def negotiate(candidates: Iterable[LanguageTag], config: NegotiatorConfig) -> Resolution:
    """Select the locale for a request.

    Never raises for any sequence of string tags; no match is a normal
    outcome that resolves to the default locale.

    Args:
        candidates: Tags in descending preference order (see
            parse_accept_language)
        config: Negotiation configuration

    Returns:
        Resolution with the routed and catalog locales

    Example:
        >>> from acceptlocale.catalog import StaticCatalog
        >>> config = NegotiatorConfig(
        ...     catalog=StaticCatalog(["en"]),
        ...     default_locale="en",
        ...     additional_locales=["fr"],
        ... )
        >>> negotiate(["fr"], config)
        Resolution(resolved_locale='fr', catalog_locale='en', decision=<RoutingDecision.WHITELIST: 'whitelist'>)
    """
    supported = supported_locales(config)
    picked = next((candidate for candidate in candidates if candidate in supported), None)
    default = config.default_locale

    if picked is None:
        resolution = Resolution(default, default, RoutingDecision.DEFAULT)
    elif picked in config.additional_locales:
        resolution = Resolution(picked, default, RoutingDecision.WHITELIST)
    else:
        resolution = Resolution(picked, picked, RoutingDecision.CATALOG)

    logger.debug(
        "Negotiated locale %s (catalog: %s, decision: %s)",
        resolution.resolved_locale,
        resolution.catalog_locale,
        resolution.decision,
    )
    return resolution


class LocaleNegotiator:
    """Reusable negotiator bound to one configuration.

    Holds no per-request state: a single instance can serve any number of
    concurrent requests (threads or asyncio tasks).

    Example:
        >>> from acceptlocale.catalog import StaticCatalog
        >>> negotiator = LocaleNegotiator.from_options(
        ...     catalog=StaticCatalog(["en", "de"]),
        ...     default_locale="en",
        ... )
        >>> resolution = negotiator.resolve("de, en;q=0.5")
        >>> resolution.resolved_locale, resolution.catalog_locale
        ('de', 'de')
        >>> negotiator.activate(resolution).catalog_locale
        'de'
    """

    __slots__ = ("_config",)

    def __init__(self, config: NegotiatorConfig) -> None:
        """Bind the negotiator to a validated configuration.

        Args:
            config: Configuration built once at startup

        Raises:
            TypeError: If config is not a NegotiatorConfig
        """
        if not isinstance(config, NegotiatorConfig):
            msg = f"config must be a NegotiatorConfig, got {type(config).__name__}"
            raise TypeError(msg)
        self._config = config

    @classmethod
    def from_options(
        cls,
        *,
        catalog: Catalog,
        default_locale: LanguageTag,
        additional_locales: Iterable[LanguageTag] = (),
    ) -> LocaleNegotiator:
        """Build the configuration and the negotiator in one step.

        Raises:
            ConfigurationError: If the options are incomplete or invalid
        """
        config = NegotiatorConfig(
            catalog=catalog,
            default_locale=default_locale,
            # Frozen and validated (a bare str is rejected) in __post_init__
            additional_locales=additional_locales,  # type: ignore[arg-type]
        )
        return cls(config)

    def __repr__(self) -> str:
        return f"LocaleNegotiator({self._config!r})"

    @property
    def config(self) -> NegotiatorConfig:
        return self._config

    def supported_locales(self) -> frozenset[LanguageTag]:
        return supported_locales(self._config)

    def negotiate(self, candidates: Iterable[LanguageTag]) -> Resolution:
        return negotiate(candidates, self._config)

    def resolve(self, header_value: str | None) -> Resolution:
        """Parse an Accept-Language value and negotiate it. Pure."""
        return negotiate(parse_accept_language(header_value), self._config)

    def activate(self, resolution: Resolution) -> Resolution:
        """Activate the resolution's catalog locale for the current request.

        Returns:
            The same resolution, for chaining
        """
        self._config.catalog.activate_locale(resolution.catalog_locale)
        return resolution
