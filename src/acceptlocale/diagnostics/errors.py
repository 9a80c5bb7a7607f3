"""acceptlocale exception hierarchy with structured diagnostics.

Negotiation never raises. Exceptions exist only for construction-time
contract violations (fail fast at startup, not per request).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AcceptLocaleError",
    "CatalogError",
    "ConfigurationError",
]


class AcceptLocaleError(Exception):
    """Base exception for all acceptlocale errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize AcceptLocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(AcceptLocaleError, ValueError):
    """Invalid NegotiatorConfig.

    Raised once at construction time when a required field is missing or a
    configured locale tag is unusable. Subclasses ValueError so callers that
    validate settings generically keep working.
    """


class CatalogError(AcceptLocaleError):
    """Catalog backend could not be constructed.

    Example: BabelCatalog pointed at a directory that does not exist.
    """
