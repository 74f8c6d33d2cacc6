"""Tests for configuration settings."""

from routematch.config import Settings, get_settings


class TestSettings:
    """Test Settings class."""

    def test_defaults(self):
        settings = Settings()

        assert settings.matching.default_state == "MI"
        assert settings.matching.auto_match_threshold == 0.95
        assert settings.matching.pending_review_threshold == 0.75
        assert settings.proximity.match_radius_feet == 250
        assert settings.proximity.treat_zero_as_missing is True
        assert settings.qualifier.timezone == "America/Detroit"
        assert settings.qualifier.service_start == 480
        assert settings.qualifier.service_end == 1260
        assert settings.location.timeout_seconds == 10.0
        assert settings.location.desktop_timeout_seconds == 20.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MATCHING_DEFAULT_STATE", "OH")
        monkeypatch.setenv("PROXIMITY_MATCH_RADIUS_FEET", "500")
        monkeypatch.setenv("QUALIFIER_TIMEZONE", "America/New_York")

        settings = Settings()

        assert settings.matching.default_state == "OH"
        assert settings.proximity.match_radius_feet == 500
        assert settings.qualifier.timezone == "America/New_York"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
