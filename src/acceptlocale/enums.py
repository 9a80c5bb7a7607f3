"""Enumerations for acceptlocale type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class RoutingDecision(StrEnum):
    """How a Resolution was reached during negotiation.

    StrEnum provides automatic string conversion: str(RoutingDecision.CATALOG) == "catalog"
    """

    CATALOG = "catalog"
    """Picked a catalog-known locale; it is both resolved and activated."""

    WHITELIST = "whitelist"
    """Picked a whitelisted locale; the catalog stays on the default locale."""

    DEFAULT = "default"
    """No candidate was supported; the default locale is used for both."""


__all__ = [
    "RoutingDecision",
]
