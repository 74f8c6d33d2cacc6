"""Tests for DCN to address matching."""

import pytest

from routematch.matching.dcn import AddressMatch, DCNMatcher, string_similarity


class TestStringSimilarity:
    """Test string_similarity()."""

    def test_identical(self):
        assert string_similarity("123mainst", "123mainst") == 1.0

    def test_empty(self):
        assert string_similarity("", "123mainst") == 0.0
        assert string_similarity("123mainst", "") == 0.0
        assert string_similarity("", "") == 0.0

    def test_edit_distance(self):
        assert string_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
        assert string_similarity("123mianst", "123mainst") == pytest.approx(1 - 2 / 9)


class TestDCNMatcher:
    """Test DCNMatcher class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.matcher = DCNMatcher()

    def test_uploaded_key_uses_default_state(self):
        assert self.matcher.uploaded_key("123 Main St", "Detroit") == "123mainst-detroit-MI-"
        assert self.matcher.uploaded_key("", "Detroit") is None

    def test_exact_match(self):
        addresses = [
            {"id": "a1", "normalized_key": "999elmst-troy-MI-48083"},
            {"id": "a2", "normalized_key": "123mainst-detroit-MI-"},
        ]
        match = self.matcher.find_address_match(addresses, "123 Main Street", "Detroit")

        assert match == AddressMatch("a2", 1.0, DCNMatcher.EXACT)

    def test_exact_match_wins_after_street_match(self):
        addresses = [
            {"id": "a1", "normalized_key": "123mainst-detroit-MI-48201"},
            {"id": "a2", "normalized_key": "123mainst-detroit-MI-"},
        ]
        match = self.matcher.find_address_match(addresses, "123 Main St", "Detroit")

        assert match.address_id == "a2"
        assert match.match_type == DCNMatcher.EXACT

    def test_street_exact_match(self):
        """Stored keys carry a zip, so the full key differs."""
        addresses = [{"id": "a1", "normalized_key": "123mainst-detroit-MI-48201"}]
        match = self.matcher.find_address_match(addresses, "123 Main St", "Detroit")

        assert match == AddressMatch("a1", 0.92, DCNMatcher.STREET_EXACT)

    def test_short_street_falls_through_to_fuzzy(self):
        addresses = [{"id": "a1", "normalized_key": "1ast-detroit-MI-48201"}]
        match = self.matcher.find_address_match(addresses, "1 A St", "Detroit")

        assert match.match_type == DCNMatcher.FUZZY
        assert match.confidence == 1.0

    def test_fuzzy_match(self):
        addresses = [
            {"id": "a1", "normalized_key": "123mainst-detroit-MI-48201"},
            {"id": "a2", "normalized_key": "77oakave-novi-MI-48377"},
        ]
        match = self.matcher.find_address_match(addresses, "123 Mian St", "Detroit")

        assert match.address_id == "a1"
        assert match.match_type == DCNMatcher.FUZZY
        assert match.confidence == pytest.approx(1 - 2 / 9)

    def test_best_fuzzy_wins(self):
        addresses = [
            {"id": "a1", "normalized_key": "123mianst-detroit-MI-48201"},
            {"id": "a2", "normalized_key": "123mainsx-detroit-MI-48201"},
        ]
        match = self.matcher.find_address_match(addresses, "123 Main St", "Detroit")

        assert match.address_id == "a2"
        assert match.confidence == pytest.approx(1 - 1 / 9)

    def test_street_exact_beats_weaker_fuzzy(self):
        addresses = [
            {"id": "a1", "normalized_key": "123mianst-detroit-MI-48201"},
            {"id": "a2", "normalized_key": "123mainst-warren-MI-48089"},
        ]
        match = self.matcher.find_address_match(addresses, "123 Main St", "Detroit")

        assert match.address_id == "a2"
        assert match.match_type == DCNMatcher.STREET_EXACT

    def test_addresses_with_dcn_skipped(self):
        addresses = [
            {"id": "a1", "normalized_key": "123mainst-detroit-MI-", "has_dcn": True},
        ]
        assert self.matcher.find_address_match(addresses, "123 Main St", "Detroit") is None

    def test_below_floor_is_none(self):
        addresses = [{"id": "a1", "normalized_key": "77oakave-novi-MI-48377"}]
        assert self.matcher.find_address_match(addresses, "123 Main St", "Detroit") is None

    def test_missing_street_is_none(self):
        addresses = [{"id": "a1", "normalized_key": "123mainst-detroit-MI-"}]
        assert self.matcher.find_address_match(addresses, "", "Detroit") is None
        assert self.matcher.find_address_match(addresses, None) is None

    def test_empty_address_list(self):
        assert self.matcher.find_address_match([], "123 Main St", "Detroit") is None

    @pytest.mark.parametrize(
        "confidence,expected",
        [
            (1.0, "auto_match"),
            (0.95, "auto_match"),
            (0.92, "pending_review"),
            (0.75, "pending_review"),
            (0.7, "no_match"),
        ],
    )
    def test_review_status(self, confidence, expected):
        assert self.matcher.review_status(confidence) == expected
