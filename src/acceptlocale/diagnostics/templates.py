"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All configuration and catalog error messages are created here so that
    exception constructors never format strings inline.
    """

    @staticmethod
    def missing_catalog() -> Diagnostic:
        """NegotiatorConfig constructed without a catalog.

        Returns:
            Diagnostic for CONFIG_MISSING_CATALOG
        """
        return Diagnostic(
            code=DiagnosticCode.CONFIG_MISSING_CATALOG,
            message="catalog is required",
            hint="Pass an object providing known_locales() and activate_locale()",
            field_name="catalog",
            received_value="None",
        )

    @staticmethod
    def invalid_catalog(catalog: object) -> Diagnostic:
        """Catalog does not satisfy the Catalog protocol.

        Args:
            catalog: The rejected catalog object

        Returns:
            Diagnostic for CONFIG_INVALID_CATALOG
        """
        type_name = type(catalog).__name__
        msg = f"catalog of type '{type_name}' does not provide known_locales() and activate_locale()"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID_CATALOG,
            message=msg,
            hint="Use StaticCatalog, BabelCatalog, or implement the Catalog protocol",
            field_name="catalog",
            received_value=type_name,
        )

    @staticmethod
    def missing_default_locale(value: object) -> Diagnostic:
        """NegotiatorConfig constructed without a usable default locale.

        Args:
            value: The value received for default_locale

        Returns:
            Diagnostic for CONFIG_MISSING_DEFAULT_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.CONFIG_MISSING_DEFAULT_LOCALE,
            message="default_locale is required",
            hint="Pass the locale to use when no preference matches",
            field_name="default_locale",
            received_value=repr(value),
        )

    @staticmethod
    def invalid_locale_tag(field_name: str, value: object) -> Diagnostic:
        """A configured locale tag is not a usable language tag.

        Args:
            field_name: Configuration field holding the tag
            value: The rejected value

        Returns:
            Diagnostic for CONFIG_INVALID_LOCALE_TAG
        """
        msg = f"Invalid locale tag in {field_name}: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID_LOCALE_TAG,
            message=msg,
            hint="Locale tags are non-empty strings without whitespace, ',' or ';'",
            field_name=field_name,
            received_value=repr(value),
        )

    @staticmethod
    def catalog_directory_not_found(directory: str) -> Diagnostic:
        """Translation directory for BabelCatalog does not exist.

        Args:
            directory: The missing directory path

        Returns:
            Diagnostic for CATALOG_DIRECTORY_NOT_FOUND
        """
        msg = f"Translation directory not found: {directory}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DIRECTORY_NOT_FOUND,
            message=msg,
            hint="Expected a layout like <directory>/<locale>/LC_MESSAGES/<domain>.mo",
            field_name="directory",
            received_value=directory,
        )

    @staticmethod
    def default_locale_not_known(default_locale: str) -> Diagnostic:
        """Default locale is neither known to the catalog nor whitelisted.

        Args:
            default_locale: The configured default locale

        Returns:
            Diagnostic for DEFAULT_LOCALE_NOT_KNOWN (warning severity)
        """
        msg = f"default_locale '{default_locale}' is not known to the catalog"
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_LOCALE_NOT_KNOWN,
            message=msg,
            hint="Fallback requests will activate a locale without translations",
            field_name="default_locale",
            severity="warning",
        )
