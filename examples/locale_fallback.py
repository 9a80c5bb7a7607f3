"""Whitelist and Default Fallback with gettext Catalogs.

Demonstrates how negotiation routes requests when translations are
incomplete:

1. Catalog locales: translations exist, the catalog switches to them
2. Whitelisted locales: the site routes to the locale (URLs, formatting)
   while messages stay in the default language
3. Unmatched requests: everything falls back to the default locale

Catalogs are compiled at runtime into a temporary gettext tree so the
example is self-contained. In a real application the .mo files come from
``pybabel compile``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from babel.messages.catalog import Catalog as MessageCatalog
from babel.messages.mofile import write_mo

from acceptlocale import BabelCatalog, LocaleNegotiator
from acceptlocale.locale_utils import locale_display_name


def build_translations(root: Path) -> None:
    """Write <root>/<locale>/LC_MESSAGES/messages.mo for lv and de."""
    translations = {
        "lv": {"Welcome": "Laipni lūdzam", "Cart": "Grozs"},
        "de": {"Welcome": "Willkommen", "Cart": "Warenkorb"},
    }
    for locale, messages in translations.items():
        message_catalog = MessageCatalog(locale=locale)
        for msgid, msgstr in messages.items():
            message_catalog.add(msgid, msgstr)
        target = root / locale / "LC_MESSAGES"
        target.mkdir(parents=True)
        with (target / "messages.mo").open("wb") as handle:
            write_mo(handle, message_catalog)


def example_routing(root: Path) -> None:
    print("=" * 60)
    print("Catalog, whitelist and default routing")
    print("=" * 60)

    catalog = BabelCatalog(root)
    # Lithuanian pages exist (routing, formatting) but messages are not
    # translated yet: lt is whitelisted and served English text.
    negotiator = LocaleNegotiator.from_options(
        catalog=catalog,
        default_locale="en",
        additional_locales=["lt"],
    )
    print(f"\nKnown to catalog: {sorted(catalog.known_locales())}")
    print(f"Supported:        {sorted(negotiator.supported_locales())}")

    for header in ["lv, en;q=0.5", "lt, lv;q=0.9", "ja, de;q=0.1", "ja"]:
        resolution = negotiator.activate(negotiator.resolve(header))
        name = locale_display_name(resolution.resolved_locale, "en") or "?"
        print(
            f"\n  Accept-Language: {header}\n"
            f"    route as   {resolution.resolved_locale} ({name}), {resolution.decision}\n"
            f"    messages   {catalog.gettext('Welcome')} / {catalog.gettext('Cart')}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    with tempfile.TemporaryDirectory() as tmp:
        build_translations(Path(tmp))
        example_routing(Path(tmp))
