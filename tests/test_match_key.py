"""Tests for match key generation."""

from routematch.address.canonicalizer import canonicalize
from routematch.address.match_key import (
    MatchKeyGenerator,
    key_for,
    match_key,
    street_segment,
)
from routematch.address.models import CanonicalAddress


class TestMatchKeyGenerator:
    """Test MatchKeyGenerator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = MatchKeyGenerator()

    def test_scanned_key(self):
        address = CanonicalAddress("123 Main St", "Detroit", "MI", "48201")
        assert self.generator.generate(address) == "123mainst-detroit-MI-48201"

    def test_stored_and_scanned_collide(self):
        """Stored "Street" and scanned "St" normalize to the same key."""
        stored = canonicalize({"legal_address": "123 Main Street, Detroit, MI 48201"})
        scanned = canonicalize(
            {"street": "123 Main St", "city": "Detroit", "state": "MI", "zip": "48201"}
        )
        assert match_key(stored) == match_key(scanned) == "123mainst-detroit-MI-48201"

    def test_abbreviation_folding(self):
        long_form = CanonicalAddress("456 Oak Avenue", "Novi", "MI", "48377")
        short_form = CanonicalAddress("456 Oak Ave", "Novi", "MI", "48377")
        assert match_key(long_form) == match_key(short_form)

    def test_all_designators(self):
        cases = {
            "1 Sunset Boulevard": "1sunsetblvd",
            "2 Lake Drive": "2lakedr",
            "3 Mill Road": "3millrd",
            "4 Pine Lane": "4pineln",
            "5 Elm Court": "5elmct",
            "6 Oak Place": "6oakpl",
            "7 Ring Circle": "7ringcir",
            "8 Main St Apartment 2": "8mainstapt2",
            "9 Main St Suite 100": "9mainstste100",
            "10 Main St Unit B": "10mainstunitb",
            "11 Hill Way": "11hillway",
        }
        for street, expected in cases.items():
            assert self.generator.normalize_street(street) == expected, street

    def test_substring_replacement_inside_words(self):
        """Designators are folded even inside unrelated street names."""
        assert self.generator.normalize_street("100 Broadway") == "100brdway"
        assert (
            self.generator.normalize_street("12 Wayland Court Apartment 4")
            == "12waylandctapt4"
        )

    def test_street_punctuation_and_case(self):
        assert self.generator.normalize_street("  123 N. MAIN   St., #4 ") == "123nmainst4"

    def test_city_letters_only(self):
        assert self.generator.normalize_city("St. Clair Shores 2") == "stclairshores"

    def test_state_names(self):
        assert self.generator.normalize_state("Michigan") == "MI"
        assert self.generator.normalize_state("ohio") == "OH"
        assert self.generator.normalize_state("mi") == "MI"
        # Other full names are not collapsed
        assert self.generator.normalize_state("Texas") == "TEXAS"

    def test_zip_digits_truncated(self):
        assert self.generator.normalize_zip("48201-1234") == "48201"
        assert self.generator.normalize_zip(" 482 ") == "482"
        assert self.generator.normalize_zip("") == ""

    def test_street_only_key(self):
        assert match_key(CanonicalAddress("123 Main St")) == "123mainst---"

    def test_stable_under_whitespace_and_case(self):
        a = {"street": "  123   MAIN street ", "city": "DETROIT", "state": "mi", "zip": "48201"}
        b = {"street": "123 main Street", "city": " detroit ", "state": "MI", "zip": "48201"}
        assert key_for(a) == key_for(b)

    def test_deterministic(self):
        address = CanonicalAddress("456 Oak Ave", "Novi", "Michigan", "48377-0001")
        assert match_key(address) == match_key(address) == "456oakave-novi-MI-48377"


class TestKeyHelpers:
    """Test key convenience helpers."""

    def test_key_for_absent_input(self):
        assert key_for(None) is None
        assert key_for("") is None
        assert key_for(",,,") is None

    def test_key_for_free_form(self):
        assert key_for("123 Main Street, Detroit, MI 48201") == "123mainst-detroitmi--"

    def test_street_segment(self):
        assert street_segment("123mainst-detroit-MI-48201") == "123mainst"
        assert street_segment(None) == ""
