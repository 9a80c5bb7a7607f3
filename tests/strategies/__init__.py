"""Hypothesis strategies for acceptlocale property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- accept_language: Language tags, q-values and complete headers
- negotiation: Catalog/whitelist configurations

Usage:
    from tests.strategies import accept_language_headers, language_tags
    from tests.strategies.negotiation import negotiation_setups
"""

from .accept_language import (
    LANGUAGE_TAG_POOL,
    accept_language_headers,
    invalid_quality_values,
    language_tags,
    quality_values,
    weighted_entries,
)
from .negotiation import negotiation_setups

__all__ = [
    "LANGUAGE_TAG_POOL",
    "accept_language_headers",
    "invalid_quality_values",
    "language_tags",
    "negotiation_setups",
    "quality_values",
    "weighted_entries",
]
