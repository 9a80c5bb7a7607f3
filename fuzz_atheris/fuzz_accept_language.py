#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: accept_language - Preference Parsing & Negotiation
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# FUZZ_PLUGIN_HEADER_END
"""Accept-Language Fuzzer (Atheris).

Targets: acceptlocale.parsing.parse_preferences, acceptlocale.negotiate

Concern boundary: header text arrives from untrusted clients. This fuzzer
checks that parsing never raises, that output respects the entry and
header limits, that weights are ordered and in range, and that negotiation
always resolves to a supported locale with the catalog locale known to the
catalog or equal to the default.

Pattern Routing:
Pattern selection uses deterministic round-robin over a weighted schedule,
immune to libFuzzer's coverage-guided mutation bias.

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import sys

import atheris

with atheris.instrument_imports(include=["acceptlocale"]):
    from acceptlocale.catalog import StaticCatalog
    from acceptlocale.constants import MAX_PREFERENCES
    from acceptlocale.enums import RoutingDecision
    from acceptlocale.negotiation import NegotiatorConfig, negotiate, supported_locales
    from acceptlocale.parsing import parse_preferences


class AcceptLanguageFuzzError(Exception):
    """Raised when a parsing or negotiation invariant is breached."""


_CONFIG = NegotiatorConfig(
    catalog=StaticCatalog(["en", "de", "lv", "pt-BR"]),
    default_locale="en",
    additional_locales=frozenset({"fr", "de"}),
)
_SUPPORTED = supported_locales(_CONFIG)

# Fragments that steer random bytes toward header-shaped input
_FRAGMENTS: tuple[str, ...] = (
    "en", "de", "fr", "lv", "pt-BR", "*", "x-pirate", ",", ";", "q=", "Q =",
    "0", "1", "0.5", "1.000", ".5", "2", "-1", "nan", "inf", "1e0", " ", "\t",
)

# Pattern weights: (name, weight)
_PATTERN_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("raw_header", 30),
    ("fragment_header", 50),
    ("oversized_header", 5),
    ("many_entries", 15),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_iterations = 0


def _fragment_header(fdp: atheris.FuzzedDataProvider) -> str:
    count = fdp.ConsumeIntInRange(0, 40)
    return "".join(
        _FRAGMENTS[fdp.ConsumeIntInRange(0, len(_FRAGMENTS) - 1)] for _ in range(count)
    )


def _build_header(pattern: str, fdp: atheris.FuzzedDataProvider) -> str:
    match pattern:
        case "raw_header":
            return fdp.ConsumeUnicodeNoSurrogates(512)
        case "fragment_header":
            return _fragment_header(fdp)
        case "oversized_header":
            return _fragment_header(fdp) * fdp.ConsumeIntInRange(100, 1000)
        case _:
            return ",".join(["de;q=0.1"] * fdp.ConsumeIntInRange(60, 200)) + ",lv"


def _check(header: str) -> None:
    preferences = parse_preferences(header)

    if len(preferences) > MAX_PREFERENCES:
        msg = f"{len(preferences)} preferences exceed limit"
        raise AcceptLanguageFuzzError(msg)

    weights = [preference.quality for preference in preferences]
    if any(not 0.0 <= weight <= 1.0 for weight in weights):
        msg = f"weight out of range: {weights!r}"
        raise AcceptLanguageFuzzError(msg)
    if weights != sorted(weights, reverse=True):
        msg = f"weights not descending: {weights!r}"
        raise AcceptLanguageFuzzError(msg)

    for earlier, later in zip(preferences, preferences[1:], strict=False):
        if earlier.quality == later.quality and earlier.position > later.position:
            msg = f"unstable order for equal weights: {preferences!r}"
            raise AcceptLanguageFuzzError(msg)

    resolution = negotiate((preference.tag for preference in preferences), _CONFIG)
    if resolution.resolved_locale not in _SUPPORTED | {_CONFIG.default_locale}:
        msg = f"resolved unsupported locale: {resolution!r}"
        raise AcceptLanguageFuzzError(msg)
    if resolution.decision is RoutingDecision.WHITELIST:
        if resolution.catalog_locale != _CONFIG.default_locale:
            msg = f"whitelisted locale activated non-default catalog: {resolution!r}"
            raise AcceptLanguageFuzzError(msg)
    elif resolution.catalog_locale != resolution.resolved_locale:
        msg = f"split resolution outside whitelist: {resolution!r}"
        raise AcceptLanguageFuzzError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse and negotiate one generated header."""
    global _iterations  # noqa: PLW0603
    _iterations += 1

    fdp = atheris.FuzzedDataProvider(data)
    pattern = _PATTERN_SCHEDULE[(_iterations - 1) % len(_PATTERN_SCHEDULE)]
    _check(_build_header(pattern, fdp))


def main() -> None:
    """Run the Accept-Language fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Accept-Language parsing and negotiation fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    atheris.Setup([sys.argv[0], *remaining], test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
