"""
Country lookup used when filling company address blocks.

The extractor only depends on the ``CountryResolver`` protocol. The bundled
``TableCountryResolver`` covers the names and codes that show up on European
road-freight paperwork; deployments with a gazetteer plug in their own.
"""

import re
from typing import Protocol

# Lower-cased names and common spellings mapped to ISO-3166 alpha-2
COUNTRY_NAMES: dict[str, str] = {
    "austria": "AT", "österreich": "AT", "osterreich": "AT",
    "belgium": "BE", "belgique": "BE", "belgië": "BE",
    "bulgaria": "BG",
    "croatia": "HR", "hrvatska": "HR",
    "czech republic": "CZ", "czechia": "CZ", "česko": "CZ",
    "denmark": "DK", "danmark": "DK",
    "estonia": "EE", "eesti": "EE",
    "finland": "FI", "suomi": "FI",
    "france": "FR",
    "germany": "DE", "deutschland": "DE",
    "greece": "GR",
    "hungary": "HU", "magyarország": "HU",
    "ireland": "IE",
    "italy": "IT", "italia": "IT",
    "latvia": "LV", "latvija": "LV",
    "lithuania": "LT", "lietuva": "LT",
    "luxembourg": "LU",
    "netherlands": "NL", "the netherlands": "NL", "holland": "NL", "nederland": "NL",
    "norway": "NO", "norge": "NO",
    "poland": "PL", "polska": "PL",
    "portugal": "PT",
    "romania": "RO", "românia": "RO",
    "slovakia": "SK", "slovensko": "SK",
    "slovenia": "SI", "slovenija": "SI",
    "spain": "ES", "españa": "ES", "espana": "ES",
    "sweden": "SE", "sverige": "SE",
    "switzerland": "CH", "schweiz": "CH", "suisse": "CH",
    "turkey": "TR", "türkiye": "TR", "turkiye": "TR",
    "ukraine": "UA",
    "united kingdom": "GB", "great britain": "GB", "england": "GB", "uk": "GB",
}


class CountryResolver(Protocol):
    def resolve_iso(self, text: str) -> str | None:
        """Map free text to an ISO-2 code, or None when nothing matches."""
        ...


class TableCountryResolver:
    """Resolves countries by name, or by a bare ISO code token."""

    def __init__(self, names: dict[str, str] | None = None):
        self.names = names or COUNTRY_NAMES
        self.codes = frozenset(self.names.values())
        # Longest names first so "the netherlands" wins over "netherlands"
        alternatives = sorted(self.names, key=len, reverse=True)
        self._name_re = re.compile(
            r"(?<!\w)(" + "|".join(re.escape(n) for n in alternatives) + r")(?!\w)"
        )

    def resolve_iso(self, text: str) -> str | None:
        if not text:
            return None

        match = self._name_re.search(text.lower())
        if match:
            return self.names[match.group(1)]

        # Upper-case two-letter token, e.g. "DE-10115 Berlin" or "Paris, FR"
        for token in re.findall(r"\b[A-Z]{2}\b", text):
            if token in self.codes:
                return token
        return None
