"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for configuration and catalog
failures. Negotiation itself never produces diagnostics.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (NegotiatorConfig construction)
        2000-2999: Catalog errors (catalog backend construction)
        3000-3999: Configuration warnings (logged, never raised)
    """

    # Configuration errors (1000-1999)
    CONFIG_MISSING_CATALOG = 1001
    CONFIG_INVALID_CATALOG = 1002
    CONFIG_MISSING_DEFAULT_LOCALE = 1003
    CONFIG_INVALID_LOCALE_TAG = 1004

    # Catalog errors (2000-2999)
    CATALOG_DIRECTORY_NOT_FOUND = 2001

    # Configuration warnings (3000-3999)
    DEFAULT_LOCALE_NOT_KNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        field_name: Configuration field that caused the error
        received_value: repr() of the offending value
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    field_name: str | None = None
    received_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[CONFIG_MISSING_DEFAULT_LOCALE]: default_locale is required
              = field: default_locale
              = received: None
              = help: Pass the locale to use when no preference matches

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
