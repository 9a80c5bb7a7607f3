"""Request-scoped locale state using contextvars.

Every piece of per-request locale state lives in a ContextVar: each thread
and each asyncio task sees its own value, so the locale resolved for one
request can never leak into another request handled concurrently.

Two kinds of state are kept:
    - LocaleSlot: the active locale of one catalog instance. Catalog
      backends own a slot each, so two catalogs in the same process do not
      share an active locale.
    - The current Resolution (resolved and catalog locale) for code that
      needs the negotiated locale but has no request object at hand.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

    from acceptlocale.negotiation.negotiator import Resolution
    from acceptlocale.types import LanguageTag

__all__ = [
    "LocaleSlot",
    "get_catalog_locale",
    "get_resolution",
    "get_resolved_locale",
    "locale_scope",
    "reset_resolution",
    "set_resolution",
]


class LocaleSlot[T]:
    """A named, context-local value slot.

    Thin wrapper over ContextVar with a None default. Instances are cheap
    and meant to be created once (per catalog) and shared.

    Example:
        >>> slot = LocaleSlot[str]("demo")
        >>> slot.get() is None
        True
        >>> token = slot.set("de")
        >>> slot.get()
        'de'
        >>> slot.reset(token)
        >>> slot.get() is None
        True
    """

    __slots__ = ("_var",)

    def __init__(self, name: str) -> None:
        self._var: ContextVar[T | None] = ContextVar(f"acceptlocale.{name}", default=None)

    @property
    def name(self) -> str:
        return self._var.name

    def get(self) -> T | None:
        return self._var.get()

    def set(self, value: T | None) -> Token[T | None]:
        return self._var.set(value)

    def reset(self, token: Token[T | None]) -> None:
        self._var.reset(token)


_resolution: LocaleSlot[Resolution] = LocaleSlot("resolution")


def get_resolution() -> Resolution | None:
    """Resolution recorded for the current request context, if any."""
    return _resolution.get()


def get_resolved_locale() -> LanguageTag | None:
    """Locale exposed to the request pipeline (URL and template logic)."""
    resolution = _resolution.get()
    return resolution.resolved_locale if resolution is not None else None


def get_catalog_locale() -> LanguageTag | None:
    """Locale activated in the translation catalog for the current request."""
    resolution = _resolution.get()
    return resolution.catalog_locale if resolution is not None else None


def set_resolution(resolution: Resolution | None) -> Token[Resolution | None]:
    """Record a Resolution for the current context.

    Returns:
        Token that restores the previous value via reset_resolution().
    """
    return _resolution.set(resolution)


def reset_resolution(token: Token[Resolution | None]) -> None:
    """Restore the Resolution that was current before set_resolution()."""
    _resolution.reset(token)


@contextmanager
def locale_scope(resolution: Resolution) -> Generator[Resolution]:
    """Record a Resolution for the duration of a block.

    The previous value is restored on exit, including on exceptions.

    Example:
        >>> with locale_scope(resolution):
        ...     get_resolved_locale()
        'fr'
    """
    token = set_resolution(resolution)
    try:
        yield resolution
    finally:
        reset_resolution(token)
