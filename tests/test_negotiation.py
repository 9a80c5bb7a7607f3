"""Tests for locale negotiation.

Covers the three routing branches (catalog match, whitelist split, default
fallback), first-match precedence, idempotence and the separation between
the pure decision and catalog activation.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from acceptlocale import parse_accept_language
from acceptlocale.catalog import StaticCatalog
from acceptlocale.constants import MAX_HEADER_LENGTH
from acceptlocale.enums import RoutingDecision
from acceptlocale.negotiation import (
    LocaleNegotiator,
    NegotiatorConfig,
    Resolution,
    is_supported_locale,
    negotiate,
    supported_locales,
)


def _config(
    known: list[str], default: str = "en", additional: list[str] | None = None
) -> NegotiatorConfig:
    return NegotiatorConfig(
        catalog=StaticCatalog(known),
        default_locale=default,
        additional_locales=frozenset(additional or ()),
    )


class TestReferenceScenarios:
    """End-to-end header -> Resolution scenarios."""

    def test_empty_header_resolves_to_default(self) -> None:
        config = _config(["en", "de"])
        resolution = negotiate(parse_accept_language(""), config)
        assert resolution.resolved_locale == "en"
        assert resolution.catalog_locale == "en"
        assert resolution.decision is RoutingDecision.DEFAULT

    def test_direct_catalog_match(self) -> None:
        config = _config(["en", "de"])
        resolution = negotiate(parse_accept_language("de,en;q=0.5"), config)
        assert resolution == Resolution("de", "de", RoutingDecision.CATALOG)

    def test_whitelist_split(self) -> None:
        config = _config(["en"], additional=["fr"])
        resolution = negotiate(parse_accept_language("fr"), config)
        assert resolution.resolved_locale == "fr"
        assert resolution.catalog_locale == "en"
        assert resolution.decision is RoutingDecision.WHITELIST
        assert resolution.is_split

    def test_no_match_falls_back_fully(self) -> None:
        config = _config(["en"])
        resolution = negotiate(parse_accept_language("xx,yy"), config)
        assert resolution == Resolution("en", "en", RoutingDecision.DEFAULT)
        assert not resolution.is_split


class TestFirstMatchPrecedence:
    """The first supported candidate wins, whatever its kind."""

    def test_whitelisted_before_catalog_locale(self) -> None:
        config = _config(["en", "de"], additional=["fr"])
        resolution = negotiate(parse_accept_language("fr;q=0.5, de;q=0.5"), config)
        assert resolution.resolved_locale == "fr"
        assert resolution.catalog_locale == "en"

    def test_catalog_locale_before_whitelisted(self) -> None:
        config = _config(["en", "de"], additional=["fr"])
        resolution = negotiate(parse_accept_language("de;q=0.5, fr;q=0.5"), config)
        assert resolution == Resolution("de", "de", RoutingDecision.CATALOG)

    def test_unsupported_candidates_skipped(self) -> None:
        config = _config(["en", "de"])
        resolution = negotiate(["xx", "yy", "de", "en"], config)
        assert resolution.resolved_locale == "de"

    def test_weight_beats_position(self) -> None:
        config = _config(["en", "de"])
        resolution = negotiate(parse_accept_language("en;q=0.2, de"), config)
        assert resolution.resolved_locale == "de"


class TestWhitelistSemantics:
    """Whitelist membership decides which locale the catalog activates."""

    def test_whitelisted_and_known_still_splits(self) -> None:
        """A tag in both sets is treated as whitelisted."""
        config = _config(["en", "de"], additional=["de"])
        resolution = negotiate(["de"], config)
        assert resolution == Resolution("de", "en", RoutingDecision.WHITELIST)

    def test_default_locale_whitelisted(self) -> None:
        config = _config(["en"], additional=["en"])
        resolution = negotiate(["en"], config)
        assert resolution == Resolution("en", "en", RoutingDecision.WHITELIST)
        assert not resolution.is_split

    def test_whitelist_only_supported_set(self) -> None:
        config = _config([], default="en", additional=["fr"])
        assert negotiate(["fr"], config).resolved_locale == "fr"
        assert negotiate(["en"], config).decision is RoutingDecision.DEFAULT


class TestExactMatching:
    """Tags match by exact, case-sensitive equality."""

    def test_region_does_not_match_language(self) -> None:
        config = _config(["en", "de"])
        assert negotiate(["de-AT"], config).decision is RoutingDecision.DEFAULT

    def test_language_does_not_match_region(self) -> None:
        config = _config(["en", "de-AT"])
        assert negotiate(["de"], config).decision is RoutingDecision.DEFAULT

    def test_case_sensitive(self) -> None:
        config = _config(["en", "de"])
        assert negotiate(["DE"], config).decision is RoutingDecision.DEFAULT

    def test_both_registered_match_independently(self) -> None:
        config = _config(["en", "de", "de-AT"])
        assert negotiate(["de-AT", "de"], config).resolved_locale == "de-AT"

    def test_tag_cut_by_length_limit_does_not_match(self) -> None:
        prefix = "zz;q=0.9,"
        filler = "y" * (MAX_HEADER_LENGTH - len(prefix) - len(",de"))
        header = f"{prefix}{filler},de-AT"
        resolution = negotiate(parse_accept_language(header), _config(["en", "de"]))
        assert resolution.decision is RoutingDecision.DEFAULT
        assert (resolution.resolved_locale, resolution.catalog_locale) == ("en", "en")


class TestPurity:
    """negotiate() has no memory and no side effects."""

    def test_idempotent(self) -> None:
        config = _config(["en", "de"], additional=["fr"])
        candidates = parse_accept_language("fr;q=0.4, de;q=0.9")
        assert negotiate(candidates, config) == negotiate(candidates, config)

    def test_no_memory_across_calls(self) -> None:
        config = _config(["en", "de"])
        negotiate(["de"], config)
        assert negotiate([], config).resolved_locale == "en"

    def test_does_not_activate_catalog(self) -> None:
        config = _config(["en", "de"])
        with patch.object(StaticCatalog, "activate_locale") as activate:
            negotiate(["de"], config)
        activate.assert_not_called()

    def test_accepts_generator(self) -> None:
        config = _config(["en", "de"])
        assert negotiate((tag for tag in ["xx", "de"]), config).resolved_locale == "de"

    def test_empty_supported_set(self) -> None:
        config = _config([], default="en")
        assert negotiate(["en", "de"], config) == Resolution(
            "en", "en", RoutingDecision.DEFAULT
        )

    def test_resolution_is_frozen(self) -> None:
        resolution = Resolution("en", "en", RoutingDecision.DEFAULT)
        with pytest.raises(AttributeError):
            resolution.resolved_locale = "de"  # type: ignore[misc]

    def test_decision_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        config = _config(["en", "de"])
        with caplog.at_level(logging.DEBUG, logger="acceptlocale.negotiation.negotiator"):
            negotiate(["de"], config)
        assert "Negotiated locale de" in caplog.text


class TestSupportedLocales:
    """Supported set is the union of catalog locales and the whitelist."""

    def test_union(self) -> None:
        config = _config(["en", "de"], additional=["fr"])
        assert supported_locales(config) == frozenset({"en", "de", "fr"})

    def test_membership_predicate(self) -> None:
        config = _config(["en"], additional=["fr"])
        assert is_supported_locale("fr", config)
        assert is_supported_locale("en", config)
        assert not is_supported_locale("de", config)

    def test_catalog_queried_each_time(self) -> None:
        """Catalogs whose locale set changes are seen by later negotiations."""
        known = [frozenset({"en"}), frozenset({"en", "de"})]
        with patch.object(StaticCatalog, "known_locales", side_effect=known):
            # One known_locales() call happens in the config's startup check.
            config = NegotiatorConfig(catalog=StaticCatalog([]), default_locale="en")
            assert negotiate(["de"], config).resolved_locale == "de"


class TestLocaleNegotiator:
    """Object form bound to one configuration."""

    def test_resolve_parses_and_negotiates(self, negotiator: LocaleNegotiator) -> None:
        assert negotiator.resolve("de, en;q=0.5") == Resolution(
            "de", "de", RoutingDecision.CATALOG
        )

    def test_resolve_none_header(self, negotiator: LocaleNegotiator) -> None:
        assert negotiator.resolve(None).decision is RoutingDecision.DEFAULT

    def test_negotiate_delegates(self, negotiator: LocaleNegotiator) -> None:
        assert negotiator.negotiate(["fr"]).catalog_locale == "en"

    def test_resolve_is_pure(self, negotiator: LocaleNegotiator, catalog: StaticCatalog) -> None:
        negotiator.resolve("de")
        assert catalog.active_locale is None

    def test_activate_uses_catalog_locale(
        self, negotiator: LocaleNegotiator, catalog: StaticCatalog
    ) -> None:
        resolution = negotiator.activate(negotiator.resolve("fr"))
        assert resolution.resolved_locale == "fr"
        assert catalog.active_locale == "en"

    def test_activate_catalog_match(
        self, negotiator: LocaleNegotiator, catalog: StaticCatalog
    ) -> None:
        negotiator.activate(negotiator.resolve("de"))
        assert catalog.active_locale == "de"

    def test_supported_locales(self, negotiator: LocaleNegotiator) -> None:
        assert negotiator.supported_locales() == frozenset({"en", "de", "fr"})

    def test_config_property(
        self, negotiator: LocaleNegotiator, config: NegotiatorConfig
    ) -> None:
        assert negotiator.config is config

    def test_rejects_non_config(self) -> None:
        with pytest.raises(TypeError, match="must be a NegotiatorConfig"):
            LocaleNegotiator({"default_locale": "en"})  # type: ignore[arg-type]

    def test_from_options(self) -> None:
        negotiator = LocaleNegotiator.from_options(
            catalog=StaticCatalog(["en"]), default_locale="en", additional_locales=["fr"]
        )
        assert negotiator.config.additional_locales == frozenset({"fr"})
        assert negotiator.resolve("fr").is_split

    def test_from_options_whitelist_optional(self) -> None:
        negotiator = LocaleNegotiator.from_options(
            catalog=StaticCatalog(["en"]), default_locale="en"
        )
        assert negotiator.config.additional_locales == frozenset()

    def test_repr_mentions_config(self, negotiator: LocaleNegotiator) -> None:
        assert "NegotiatorConfig" in repr(negotiator)
