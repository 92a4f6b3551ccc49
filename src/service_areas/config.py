"""
Application configuration using Pydantic Settings.

All settings are loaded from environment variables or .env file.
business.yaml (see service_areas.business) can override the location
settings for a single site.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from service_areas.data.models import Coordinates, SelectionMode

if TYPE_CHECKING:
    from service_areas.business import BusinessConfig


class CatalogueSettings(BaseSettings):
    """Suburb catalogue source."""

    path: str = "src/data/suburbs.json"
    lock_timeout: float = 5.0

    model_config = SettingsConfigDict(env_prefix="CATALOGUE_")


class LocationSettings(BaseSettings):
    """Footer and service-area selection options."""

    service_radius_km: float = 50.0
    footer_featured_suburbs: Annotated[Optional[list[str]], NoDecode] = None
    suburb_selection_mode: SelectionMode = SelectionMode.BEST_MATCH
    suburb_limit: Optional[int] = None
    auto_supplement: bool = True
    footer_count: int = 11
    base_path: str = "/locations"
    center_lat: Optional[float] = None
    center_lng: Optional[float] = None

    model_config = SettingsConfigDict(env_prefix="LOCATIONS_")

    @field_validator("footer_featured_suburbs", mode="before")
    @classmethod
    def parse_featured(cls, v: str | list[str] | None) -> list[str] | None:
        if v is None or v == "":
            return None
        if isinstance(v, str):
            v = v.split(",")
        names = [name.strip() for name in v if name and name.strip()]
        return names or None

    @field_validator("suburb_limit")
    @classmethod
    def zero_limit_is_unlimited(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            return None
        return v

    @field_validator("service_radius_km")
    @classmethod
    def radius_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("service_radius_km must be positive")
        return v

    @property
    def center(self) -> Optional[Coordinates]:
        """Explicitly configured business center, if both coordinates are set."""
        if self.center_lat is None or self.center_lng is None:
            return None
        return Coordinates(lat=self.center_lat, lng=self.center_lng)

    def merged_with(self, business: "BusinessConfig | None") -> "LocationSettings":
        """
        Return a copy with the business.yaml ``service`` section applied on top.

        Only fields the section sets override. An explicit empty featured list
        or a zero limit clears the environment value.
        """
        if business is None:
            return self
        service = business.service
        overrides = {
            "service_radius_km": service.radius_km,
            "footer_featured_suburbs": service.footer_featured_suburbs,
            "suburb_selection_mode": service.suburb_selection_mode,
            "suburb_limit": service.suburb_limit,
            "auto_supplement": service.auto_supplement,
            "center_lat": service.center_lat,
            "center_lng": service.center_lng,
        }
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return LocationSettings.model_validate(data)


class PathSettings(BaseSettings):
    """File path configuration."""

    config_dir: str = "config"
    data_dir: str = "src/data"

    model_config = SettingsConfigDict(env_prefix="")

    @property
    def business_config(self) -> Path:
        return Path(self.config_dir) / "business.yaml"

    def ensure_dirs(self) -> None:
        """Create all configured directories if they don't exist."""
        for field_name in self.__class__.model_fields:
            path = Path(getattr(self, field_name))
            path.mkdir(parents=True, exist_ok=True)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: str = "INFO"
    file: str = "logs/service_areas.log"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    catalogue: CatalogueSettings = CatalogueSettings()
    locations: LocationSettings = LocationSettings()
    paths: PathSettings = PathSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def setup(self) -> None:
        """Initialize application: create directories, configure logging."""
        self.paths.ensure_dirs()
        log_dir = Path(self.logging.file).parent
        log_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance for scripts; library classes take settings explicitly
settings = Settings()
