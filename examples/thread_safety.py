"""Thread Safety Example - One Negotiator, Many Concurrent Requests.

LocaleNegotiator and NegotiatorConfig are immutable and shared. Per-request
state (the active catalog locale and the recorded Resolution) lives in
contextvars, so each thread and each asyncio task sees only its own.

Demonstrates:
1. Thread pool (WSGI-style servers)
2. asyncio tasks (ASGI-style servers)

Python 3.13+.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

from acceptlocale import LocaleNegotiator, StaticCatalog
from acceptlocale.context import get_resolved_locale
from acceptlocale.request import locale_request, resolve_request

catalog = StaticCatalog(["en", "de", "lv", "fr"])
negotiator = LocaleNegotiator.from_options(
    catalog=catalog, default_locale="en", additional_locales=["lt"]
)

HEADERS = ["de", "lv;q=0.9, en;q=0.1", "lt", "ja", "fr-CA, fr;q=0.8"]


def example_1_thread_pool() -> None:
    """Example 1: WSGI-style handler on a thread pool."""
    print("=" * 60)
    print("Example 1: Thread Pool")
    print("=" * 60)

    def handle(header: str) -> str:
        environ = {"HTTP_ACCEPT_LANGUAGE": header}
        with locale_request(environ, negotiator, environ) as resolution:
            return (
                f"  {header!r:<22} locale={environ['locale']} "
                f"catalog={catalog.active_locale} ({resolution.decision})"
            )

    with ThreadPoolExecutor(max_workers=4) as pool:
        for line in pool.map(handle, HEADERS * 2):
            print(line)


def example_2_asyncio() -> None:
    """Example 2: ASGI-style handler on asyncio tasks."""
    print("\n" + "=" * 60)
    print("Example 2: asyncio Tasks")
    print("=" * 60)

    async def handle(header: str) -> str:
        scope_state: dict[str, object] = {}
        resolve_request([(b"accept-language", header.encode())], negotiator, scope_state)
        await asyncio.sleep(0)  # other requests run here
        return f"  {header!r:<22} locale={get_resolved_locale()} catalog={catalog.active_locale}"

    async def main() -> None:
        for line in await asyncio.gather(*(handle(header) for header in HEADERS)):
            print(line)

    asyncio.run(main())


if __name__ == "__main__":
    example_1_thread_pool()
    example_2_asyncio()

    print("\n" + "=" * 60)
    print("[SUCCESS] Every request saw only its own locale")
    print("=" * 60)
