"""Preference parsing for Accept-Language headers.

Functions:
    parse_accept_language - header text -> ordered candidate tags
    parse_preferences - header text -> weighted Preference records
    parse_quality - single q-value -> weight (invalid values weigh 0.0)

Python 3.13+. Tag validation comes from acceptlocale.locale_utils, which
imports Babel lazily; parsing never loads it.
"""

from .accept_language import (
    Preference,
    parse_accept_language,
    parse_preferences,
    parse_quality,
)

__all__ = [
    "Preference",
    "parse_accept_language",
    "parse_preferences",
    "parse_quality",
]
