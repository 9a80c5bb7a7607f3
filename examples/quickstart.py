"""Quickstart example for acceptlocale.

Demonstrates parsing an Accept-Language header, negotiating it against a
catalog and a whitelist, and annotating a request with the result.
"""

from types import SimpleNamespace

from acceptlocale import LocaleNegotiator, StaticCatalog, parse_accept_language, resolve_request
from acceptlocale.context import get_catalog_locale, get_resolved_locale
from acceptlocale.parsing import parse_preferences

# Example 1: Parsing a header
print("=" * 50)
print("Example 1: Parsing Accept-Language")
print("=" * 50)

header = "fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7, *;q=0.5"
for preference in parse_preferences(header):
    print(f"  {preference.tag:<6} q={preference.quality}")

print(parse_accept_language("de;q=0.5, lv, en;q=abc"))
# Output: ('lv', 'de', 'en')   (an unparseable weight counts as 0)

# Example 2: Negotiation
print("\n" + "=" * 50)
print("Example 2: Negotiating Against a Catalog")
print("=" * 50)

catalog = StaticCatalog(["en", "de", "lv"])
negotiator = LocaleNegotiator.from_options(
    catalog=catalog,
    default_locale="en",
    additional_locales=["fr"],
)

for value in ["de, en;q=0.5", "fr-CH, fr;q=0.9", "ja", ""]:
    resolution = negotiator.resolve(value)
    print(
        f"  {value!r:<22} -> resolved={resolution.resolved_locale} "
        f"catalog={resolution.catalog_locale} ({resolution.decision})"
    )
# Output:
#   'de, en;q=0.5'         -> resolved=de catalog=de (catalog)
#   'fr-CH, fr;q=0.9'      -> resolved=fr catalog=en (whitelist)
#   'ja'                   -> resolved=en catalog=en (default)
#   ''                     -> resolved=en catalog=en (default)

# Example 3: Handling a request
print("\n" + "=" * 50)
print("Example 3: Annotating a Request")
print("=" * 50)

state = SimpleNamespace()
resolve_request({"Accept-Language": "fr, de;q=0.5"}, negotiator, state)
print(f"  request.state.locale = {state.locale}")
print(f"  resolved (context)   = {get_resolved_locale()}")
print(f"  catalog (context)    = {get_catalog_locale()}")
print(f"  catalog active       = {catalog.active_locale}")
# Output:
#   request.state.locale = fr
#   resolved (context)   = fr
#   catalog (context)    = en
#   catalog active       = en
