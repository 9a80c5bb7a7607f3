"""Locale tag utilities.

Negotiation treats language tags as opaque strings compared by exact
equality. The helpers here never feed back into matching: they validate
configured tags at startup and bridge tags to Babel for catalog lookup and
display purposes.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from acceptlocale.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

    from acceptlocale.types import LanguageTag

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_valid_locale_tag",
    "locale_display_name",
    "to_posix_locale",
]

# Characters that would make a tag ambiguous inside an Accept-Language header.
_FORBIDDEN_TAG_CHARS = frozenset(",;=")


def is_valid_locale_tag(value: object) -> bool:
    """Check that a value can be used as a configured language tag.

    A usable tag is a non-empty string with no whitespace and none of the
    header delimiters ``,``, ``;`` or ``=``. No BCP-47 structure is
    required: private tags such as ``"x-pirate"`` are accepted.

    Args:
        value: Candidate tag

    Returns:
        True if the value is usable as a language tag

    Example:
        >>> is_valid_locale_tag("pt-BR")
        True
        >>> is_valid_locale_tag("en US")
        False
        >>> is_valid_locale_tag("")
        False
    """
    if not isinstance(value, str) or not value:
        return False
    return not any(ch.isspace() or ch in _FORBIDDEN_TAG_CHARS for ch in value)


def to_posix_locale(locale_code: LanguageTag) -> str:
    """Convert a BCP-47 style tag to the POSIX form used by Babel and gettext.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved. Only used at the Babel boundary, never for matching.

    Example:
        >>> to_posix_locale("pt-BR")
        'pt_BR'
        >>> to_posix_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: LanguageTag) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(to_posix_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache (tests and long-running reloads)."""
    get_babel_locale.cache_clear()


def locale_display_name(
    locale_code: LanguageTag, display_locale: LanguageTag | None = None
) -> str | None:
    """Human-readable name of a locale, for language switchers in templates.

    Args:
        locale_code: Tag to describe
        display_locale: Tag of the language to render the name in
            (defaults to the locale itself, e.g. "Deutsch" for "de")

    Returns:
        Display name, or None when Babel does not know one of the tags.
        Whitelisted private tags commonly have no CLDR data.

    Example:
        >>> locale_display_name("de")
        'Deutsch'
        >>> locale_display_name("de", "en")
        'German'
        >>> locale_display_name("x-pirate") is None
        True
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
        if display_locale is None:
            return locale.display_name
        return locale.get_display_name(get_babel_locale(display_locale))
    except (UnknownLocaleError, ValueError, TypeError):
        return None
