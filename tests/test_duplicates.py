"""Tests for duplicate address detection."""

from routematch.geo.proximity import GeoPoint, ProximityVerifier
from routematch.matching.duplicates import DuplicateDetector


class TestDuplicateDetector:
    """Test DuplicateDetector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = DuplicateDetector(ProximityVerifier(match_radius_feet=250))
        self.candidate = {
            "street": "123 Main St",
            "city": "Detroit",
            "state": "MI",
            "zip": "48201",
        }
        self.known = [
            {
                "id": 1,
                "normalized_key": "123mainst-detroit-MI-48201",
                "latitude": 42.3314,
                "longitude": -83.0458,
            },
            {"id": 2, "legal_address": "123 Main Street, Detroit, MI 48201"},
            {"id": 3, "normalized_key": "456oakave-novi-MI-48377"},
            {
                "id": 4,
                "normalized_key": "123mainst-detroit-MI-48201",
                "latitude": 42.3414,
                "longitude": -83.0458,
            },
        ]

    def test_finds_key_collisions(self):
        duplicates = self.detector.find_duplicates(self.candidate, self.known)

        assert [d.address_id for d in duplicates] == [1, 2, 4]
        assert all(d.match_key == "123mainst-detroit-MI-48201" for d in duplicates)

    def test_without_location_unverified(self):
        duplicates = self.detector.find_duplicates(self.candidate, self.known)

        assert all(d.distance_feet is None for d in duplicates)
        assert all(d.is_confirmed is None for d in duplicates)

    def test_proximity_corroboration(self):
        location = GeoPoint(latitude=42.3315, longitude=-83.0458)
        duplicates = {
            d.address_id: d
            for d in self.detector.find_duplicates(self.candidate, self.known, location)
        }

        assert duplicates[1].is_confirmed is True
        assert duplicates[1].distance_feet < 250
        # No coordinates on record
        assert duplicates[2].is_confirmed is None
        # Same key, about 3,600 ft away
        assert duplicates[4].is_confirmed is False
        assert duplicates[4].distance_feet > 3000

    def test_free_form_candidate(self):
        known = [{"id": 9, "normalized_key": "123mainst-detroitmi--"}]
        duplicates = self.detector.find_duplicates("123 Main St, Detroit, MI", known)
        assert [d.address_id for d in duplicates] == [9]

    def test_no_key_no_duplicates(self):
        assert self.detector.find_duplicates(None, self.known) == []
        assert self.detector.find_duplicates({"city": "Detroit"}, self.known) == []

    def test_group_by_key(self):
        groups = self.detector.group_by_key(
            [
                {"street": "123 Main St", "city": "Detroit", "state": "MI", "zip": "48201"},
                {"legal_address": "123 Main Street, Detroit, MI 48201"},
                "   ",
                {"street": "456 Oak Avenue", "city": "Novi", "state": "MI", "zip": "48377"},
            ]
        )

        assert set(groups) == {"123mainst-detroit-MI-48201", "456oakave-novi-MI-48377"}
        assert len(groups["123mainst-detroit-MI-48201"]) == 2
