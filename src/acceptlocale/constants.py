"""Shared constants for acceptlocale.

This module provides centralized configuration constants used across the
parsing, negotiation and request packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Header names: Conventional names for inbound headers and context attributes
- Quality weights: Defaults applied while parsing preference lists
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Header names
    "ACCEPT_LANGUAGE",
    "LOCALE_ATTRIBUTE",
    # Quality weights
    "DEFAULT_QUALITY_WEIGHT",
    "INVALID_QUALITY_WEIGHT",
    "MIN_QUALITY_WEIGHT",
    "MAX_QUALITY_WEIGHT",
    # Input limits
    "MAX_HEADER_LENGTH",
    "MAX_PREFERENCES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Catalog defaults
    "DEFAULT_DOMAIN",
]

# ============================================================================
# HEADER NAMES
# ============================================================================

# Conventional header carrying the client's weighted language preferences.
# Header lookup is case-insensitive; this is the canonical spelling.
ACCEPT_LANGUAGE: str = "Accept-Language"

# Attribute (or mapping key) under which the resolved locale is recorded on
# a per-request context object for downstream handlers.
LOCALE_ATTRIBUTE: str = "locale"

# ============================================================================
# QUALITY WEIGHTS
# ============================================================================

# Weight assigned to entries without an explicit q parameter.
DEFAULT_QUALITY_WEIGHT: float = 1.0

# Weight assigned to entries whose q parameter cannot be parsed or lies
# outside [MIN_QUALITY_WEIGHT, MAX_QUALITY_WEIGHT]. Such entries are kept,
# ordered after every validly weighted entry with a positive weight.
INVALID_QUALITY_WEIGHT: float = 0.0

MIN_QUALITY_WEIGHT: float = 0.0
MAX_QUALITY_WEIGHT: float = 1.0

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum number of header characters considered. Longer values are cut
# back to the last whole entry within the limit; well-behaved clients send
# a few dozen bytes.
MAX_HEADER_LENGTH: int = 4096

# Maximum number of preferences kept per header. Entries dropped as
# malformed do not count; kept entries beyond this limit are ignored.
MAX_PREFERENCES: int = 64

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects (see locale_utils.get_babel_locale).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CATALOG DEFAULTS
# ============================================================================

# gettext domain used by BabelCatalog when none is given.
DEFAULT_DOMAIN: str = "messages"
