"""Application configuration settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingSettings(BaseSettings):
    """Address and DCN matching configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCHING_")

    # State assumed for uploaded DCN rows, which carry no state column
    default_state: str = "MI"

    auto_match_threshold: float = 0.95
    pending_review_threshold: float = 0.75

    street_exact_confidence: float = 0.92
    street_exact_min_length: int = 5
    fuzzy_floor: float = 0.6


class ProximitySettings(BaseSettings):
    """Proximity verification configuration."""

    model_config = SettingsConfigDict(env_prefix="PROXIMITY_")

    match_radius_feet: int = 250
    treat_zero_as_missing: bool = True


class QualifierSettings(BaseSettings):
    """Service-hours qualifier configuration."""

    model_config = SettingsConfigDict(env_prefix="QUALIFIER_")

    timezone: str = "America/Detroit"

    # Minutes after midnight
    service_start: int = 8 * 60
    service_end: int = 21 * 60
    am_end: int = 12 * 60
    pm_start: int = 17 * 60


class LocationSettings(BaseSettings):
    """Device location acquisition configuration."""

    model_config = SettingsConfigDict(env_prefix="LOCATION_")

    timeout_seconds: float = 10.0
    desktop_timeout_seconds: float = 20.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "RouteMatch Address Engine"
    debug: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Sub-configurations
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    proximity: ProximitySettings = Field(default_factory=ProximitySettings)
    qualifier: QualifierSettings = Field(default_factory=QualifierSettings)
    location: LocationSettings = Field(default_factory=LocationSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
