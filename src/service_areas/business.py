"""
Business configuration loaded from config/business.yaml.

Only the sections the location logic reads are modelled strictly; other
sections (colors, hours, social, ...) are accepted and ignored.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from service_areas.data.models import SelectionMode
from service_areas.exceptions import BusinessConfigError
from service_areas.logging_config import get_logger

logger = get_logger(__name__)


class BusinessInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    tagline: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class AddressInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    street: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""

    @property
    def full_address(self) -> str:
        parts = [self.street, f"{self.city} {self.state} {self.postcode}".strip(), self.country]
        return ", ".join(p for p in parts if p)


class ServiceInfo(BaseModel):
    """The ``service`` section. Unset fields leave the environment settings alone."""

    model_config = ConfigDict(extra="ignore")

    main_category: Optional[str] = None
    main_location: Optional[str] = None
    radius_km: Optional[float] = None
    center_lat: Optional[float] = None
    center_lng: Optional[float] = None
    footer_featured_suburbs: Optional[list[str]] = None
    suburb_selection_mode: Optional[SelectionMode] = None
    suburb_limit: Optional[int] = None
    auto_supplement: Optional[bool] = None

    @field_validator("footer_featured_suburbs", mode="before")
    @classmethod
    def parse_featured(cls, v):
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v


class BusinessConfig(BaseModel):
    """Validated business.yaml."""

    model_config = ConfigDict(extra="ignore")

    business: BusinessInfo = Field(default_factory=BusinessInfo)
    address: AddressInfo = Field(default_factory=AddressInfo)
    service: ServiceInfo = Field(default_factory=ServiceInfo)

    @field_validator("address", mode="before")
    @classmethod
    def postcode_as_text(cls, v):
        # YAML reads 5084 as an int
        if isinstance(v, dict) and v.get("postcode") is not None:
            v = {**v, "postcode": str(v["postcode"])}
        return v


def load_business_config(path: str | Path) -> Optional[BusinessConfig]:
    """
    Load and validate business.yaml.

    Returns:
        The validated config, or None if the file does not exist.

    Raises:
        BusinessConfigError: The file is not valid YAML or fails validation.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("business.yaml not found at %s", path)
        return None

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise BusinessConfigError(
            message=f"Could not parse {path}: {e}",
            details={"path": str(path)},
        ) from e

    if not isinstance(raw, dict):
        raise BusinessConfigError(
            message=f"{path} must contain a mapping at the top level",
            details={"path": str(path)},
        )

    try:
        return BusinessConfig.model_validate(raw)
    except ValidationError as e:
        raise BusinessConfigError(
            message=f"Invalid business configuration in {path}: {e.error_count()} error(s)",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e
