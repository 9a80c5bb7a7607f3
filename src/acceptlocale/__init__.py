"""acceptlocale - request-scoped locale negotiation from Accept-Language.

Given a request's weighted language preferences and the locales a server
supports, deterministically selects one locale for the request and records
the decision for downstream consumers. Supports a whitelist of additional
locales that are routed to while the translation catalog stays on the
default locale.

Public API:
    parse_accept_language - Header text to ordered candidate tags
    negotiate - Candidates plus configuration to a Resolution
    NegotiatorConfig - Immutable, validated configuration
    LocaleNegotiator - Reusable negotiator bound to one configuration
    Resolution - Resolved locale, catalog locale and routing decision
    RoutingDecision - CATALOG, WHITELIST or DEFAULT
    Catalog - Protocol for translation backends
    StaticCatalog - In-memory catalog with a fixed locale set
    BabelCatalog - gettext catalog served through Babel
    resolve_request - Extract, negotiate, activate and annotate in one call

Exceptions:
    AcceptLocaleError - Base exception class
    ConfigurationError - Invalid configuration (raised at construction)
    CatalogError - Catalog backend construction failure

Submodules:
    acceptlocale.parsing - Preference parsing (Preference, parse_quality)
    acceptlocale.context - Request-scoped state (contextvars)
    acceptlocale.request - Header extraction and request annotation
    acceptlocale.locale_utils - Tag validation and Babel helpers
    acceptlocale.diagnostics - Diagnostic codes, templates and formatting
"""

from .catalog import BabelCatalog, Catalog, StaticCatalog
from .diagnostics import AcceptLocaleError, CatalogError, ConfigurationError
from .enums import RoutingDecision
from .negotiation import LocaleNegotiator, NegotiatorConfig, Resolution, negotiate
from .parsing import parse_accept_language
from .request import resolve_request

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("acceptlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AcceptLocaleError",
    "BabelCatalog",
    "Catalog",
    "CatalogError",
    "ConfigurationError",
    "LocaleNegotiator",
    "NegotiatorConfig",
    "Resolution",
    "RoutingDecision",
    "StaticCatalog",
    "__version__",
    "negotiate",
    "parse_accept_language",
    "resolve_request",
]
