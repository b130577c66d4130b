"""Tests for the table-backed country resolver."""

import pytest

from order_intake.order_extractor.countries import TableCountryResolver


@pytest.fixture
def resolver():
    return TableCountryResolver()


class TestTableCountryResolver:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Germany", "DE"),
            ("Hafenstrasse 12, 20457 Hamburg, Deutschland", "DE"),
            ("FRANCE", "FR"),
            ("Rotterdam, The Netherlands", "NL"),
            ("Warszawa, Polska", "PL"),
            ("Acme UK Ltd", "GB"),
        ],
    )
    def test_resolves_names(self, resolver, text, expected):
        assert resolver.resolve_iso(text) == expected

    def test_resolves_bare_code(self, resolver):
        assert resolver.resolve_iso("75001 Paris FR") == "FR"

    def test_lowercase_code_is_not_a_code(self, resolver):
        assert resolver.resolve_iso("at the dock") is None

    def test_name_must_be_whole_word(self, resolver):
        assert resolver.resolve_iso("Spainstreet 4") is None

    @pytest.mark.parametrize("text", ["", "Unknown place", "XX-123"])
    def test_unresolved(self, resolver, text):
        assert resolver.resolve_iso(text) is None

    def test_custom_table(self):
        resolver = TableCountryResolver({"narnia": "NA"})
        assert resolver.resolve_iso("Cair Paravel, Narnia") == "NA"
        assert resolver.resolve_iso("Germany") is None
