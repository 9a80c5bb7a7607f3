"""Request glue: from inbound headers to an annotated request context.

Framework-agnostic. Works with any header container a web framework hands
out: case-insensitive header objects (Starlette, Werkzeug), plain dicts,
WSGI environ dicts and raw ASGI ``(name, value)`` byte pairs.

A request is handled in four steps:
    1. extract the Accept-Language value
    2. negotiate it (pure)
    3. activate the catalog locale for the current context
    4. record the resolved locale (context slot and request context object)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from acceptlocale.constants import ACCEPT_LANGUAGE, LOCALE_ATTRIBUTE
from acceptlocale.context import reset_resolution, set_resolution

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from acceptlocale.negotiation.negotiator import LocaleNegotiator, Resolution
    from acceptlocale.types import LanguageTag

__all__ = [
    "assign_locale",
    "extract_accept_language",
    "locale_request",
    "resolve_request",
]

# Header spelling (any case) and its WSGI environ key.
_HEADER_KEYS = frozenset({ACCEPT_LANGUAGE.lower(), "http_accept_language"})

type HeaderSource = Mapping[Any, Any] | Iterable[tuple[Any, Any]]


def _decode(value: str | bytes) -> str:
    # HTTP header bytes are ISO-8859-1 per RFC 9110
    return value.decode("latin-1") if isinstance(value, bytes) else value


def extract_accept_language(headers: HeaderSource | None) -> str:
    """Return the Accept-Language value from a header container.

    Lookup is case-insensitive. Repeated headers, and list or tuple
    values, are joined with ", " as HTTP allows for list-valued headers.

    Args:
        headers: Mapping, object with items(), or iterable of name/value pairs

    Returns:
        The header value, or "" when absent

    Example:
        >>> extract_accept_language({"accept-language": "de, en;q=0.5"})
        'de, en;q=0.5'
        >>> extract_accept_language([(b"accept-language", b"fr")])
        'fr'
        >>> extract_accept_language({})
        ''
    """
    if headers is None:
        return ""

    items = getattr(headers, "items", None)
    pairs = items() if callable(items) else headers

    values: list[str] = []
    for name, value in pairs:
        if not isinstance(name, (str, bytes)) or _decode(name).lower() not in _HEADER_KEYS:
            continue
        if isinstance(value, (list, tuple)):
            values.extend(_decode(item) for item in value)
        elif isinstance(value, (str, bytes)):
            values.append(_decode(value))

    return ", ".join(value for value in values if value.strip())


def assign_locale(
    context: MutableMapping[str, Any] | object,
    locale: LanguageTag,
    attribute: str = LOCALE_ATTRIBUTE,
) -> None:
    """Record the resolved locale on a per-request context object.

    Mappings (ASGI scope state, Flask ``g``-like dicts) get an item;
    anything else (``request.state``, plain objects) gets an attribute.
    """
    if isinstance(context, MutableMapping):
        context[attribute] = locale
    else:
        setattr(context, attribute, locale)


def resolve_request(
    headers: HeaderSource | None,
    negotiator: LocaleNegotiator,
    context: MutableMapping[str, Any] | object | None = None,
    *,
    attribute: str = LOCALE_ATTRIBUTE,
) -> Resolution:
    """Negotiate a request's locale and apply the decision.

    Activates the catalog locale, records the Resolution in the current
    context (see acceptlocale.context) and, when ``context`` is given,
    stores the resolved locale on it under ``attribute``.

    Args:
        headers: Inbound request headers
        negotiator: Negotiator built once at startup
        context: Per-request object downstream handlers read from
        attribute: Name under which the resolved locale is stored

    Returns:
        The Resolution that was applied

    Example:
        >>> state = {}
        >>> resolve_request({"Accept-Language": "fr"}, negotiator, state)
        Resolution(resolved_locale='fr', catalog_locale='en', ...)
        >>> state["locale"]
        'fr'
    """
    resolution = negotiator.resolve(extract_accept_language(headers))
    negotiator.activate(resolution)
    set_resolution(resolution)
    if context is not None:
        assign_locale(context, resolution.resolved_locale, attribute)
    return resolution


@contextmanager
def locale_request(
    headers: HeaderSource | None,
    negotiator: LocaleNegotiator,
    context: MutableMapping[str, Any] | object | None = None,
    *,
    attribute: str = LOCALE_ATTRIBUTE,
) -> Generator[Resolution]:
    """Scoped form of resolve_request for servers that reuse worker threads.

    The previously recorded Resolution is restored on exit, including when
    annotating ``context`` fails. The catalog's active locale is left as
    activated; the next request activates its own.
    """
    resolution = negotiator.resolve(extract_accept_language(headers))
    negotiator.activate(resolution)
    token = set_resolution(resolution)
    try:
        if context is not None:
            assign_locale(context, resolution.resolved_locale, attribute)
        yield resolution
    finally:
        reset_resolution(token)
