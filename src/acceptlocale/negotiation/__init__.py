"""Locale negotiation package.

Submodules:
    config     - NegotiatorConfig (immutable, validated at construction)
    negotiator - negotiate(), Resolution, LocaleNegotiator

Python 3.13+.
"""

from acceptlocale.enums import RoutingDecision
from acceptlocale.negotiation.config import NegotiatorConfig
from acceptlocale.negotiation.negotiator import (
    LocaleNegotiator,
    Resolution,
    is_supported_locale,
    negotiate,
    supported_locales,
)

__all__ = [
    "LocaleNegotiator",
    "NegotiatorConfig",
    "Resolution",
    "RoutingDecision",
    "is_supported_locale",
    "negotiate",
    "supported_locales",
]
