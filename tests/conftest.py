"""Pytest configuration for the acceptlocale test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from acceptlocale.catalog import StaticCatalog
from acceptlocale.context import reset_resolution, set_resolution
from acceptlocale.locale_utils import clear_locale_cache
from acceptlocale.negotiation import LocaleNegotiator, NegotiatorConfig

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def catalog() -> StaticCatalog:
    """Catalog with translations for English and German."""
    return StaticCatalog(["en", "de"])


@pytest.fixture
def config(catalog: StaticCatalog) -> NegotiatorConfig:
    """English default, French whitelisted for routing only."""
    return NegotiatorConfig(catalog=catalog, default_locale="en", additional_locales={"fr"})


@pytest.fixture
def negotiator(config: NegotiatorConfig) -> LocaleNegotiator:
    return LocaleNegotiator(config)


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """gettext tree with compiled catalogs for de and pt_BR.

    Layout::

        <tmp>/de/LC_MESSAGES/messages.mo
        <tmp>/pt_BR/LC_MESSAGES/messages.mo
        <tmp>/README  (ignored, not a locale directory)
        <tmp>/empty/  (ignored, no catalog)
    """
    from babel.messages.catalog import Catalog as MessageCatalog  # noqa: PLC0415
    from babel.messages.mofile import write_mo  # noqa: PLC0415

    strings = {
        "de": {"Hello": "Hallo", "Goodbye": "Auf Wiedersehen"},
        "pt_BR": {"Hello": "Olá", "Goodbye": "Tchau"},
    }
    for directory, messages in strings.items():
        message_catalog = MessageCatalog(locale=directory, domain="messages")
        for msgid, msgstr in messages.items():
            message_catalog.add(msgid, msgstr)
        message_catalog.add(("apple", "apples"), ("Apfel", "Äpfel"))
        message_catalog.add("Open", "Öffnen", context="verb")
        target = tmp_path / directory / "LC_MESSAGES"
        target.mkdir(parents=True)
        with (target / "messages.mo").open("wb") as handle:
            write_mo(handle, message_catalog)

    (tmp_path / "README").write_text("not a locale", encoding="utf-8")
    (tmp_path / "empty").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_locale_cache() -> None:
    clear_locale_cache()


@pytest.fixture(autouse=True)
def _isolate_resolution() -> Generator[None]:
    """Start every test with no recorded Resolution in the current context."""
    token = set_resolution(None)
    yield
    reset_resolution(token)
