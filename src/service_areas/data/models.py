"""
Pydantic models for suburb records and footer output.

Field names are snake_case in Python and camelCase on the wire so the
models read and write the suburbs.json catalogue format directly.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SelectionMode(str, Enum):
    """How a manually featured suburb name maps to catalogue entries."""

    BEST_MATCH = "best_match"
    ALL_VARIATIONS = "all_variations"


class _Record(BaseModel):
    """Immutable record with camelCase aliases."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Coordinates(_Record):
    """A WGS84 point in decimal degrees."""

    lat: float
    lng: float


class Suburb(_Record):
    """
    Reference record for one suburb in the catalogue.

    ``id`` is unique within a single catalogue load. Names may repeat with
    qualifiers ("Salisbury" vs "Salisbury North").
    """

    id: int
    name: str
    postcode: Optional[str] = None
    state: str = ""
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.latitude, lng=self.longitude)


class Demographics(_Record):
    """Optional demographic data. Absent fields mean "no data", not zero."""

    population: Optional[int] = None
    population_density: Optional[float] = None
    households: Optional[int] = None
    median_age: Optional[float] = None

    @property
    def has_population(self) -> bool:
        return bool(self.population)


class EnrichedSuburb(Suburb):
    """A suburb with distance/direction from a specific center plus demographics."""

    distance_km: float
    direction: str
    population: Optional[int] = None
    population_density: Optional[float] = None
    households: Optional[int] = None
    median_age: Optional[float] = None

    @property
    def has_population(self) -> bool:
        return bool(self.population)


class ScoredSuburb(_Record):
    """A suburb and its score within one selection pass."""

    suburb: EnrichedSuburb
    score: float


class FooterLocationEntry(_Record):
    """One footer/service-area link."""

    suburb: EnrichedSuburb
    slug: str
    url: str


class CatalogueRow(_Record):
    """One row of the suburbs.json ``suburbs`` array."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: int
    name: str
    postcode: Optional[str] = None
    state: str = ""
    latitude: float
    longitude: float
    distance_km: Optional[float] = None
    direction: Optional[str] = None
    population: Optional[int] = None
    population_density: Optional[float] = None
    households: Optional[int] = None
    median_age: Optional[float] = None

    @field_validator("postcode", mode="before")
    @classmethod
    def postcode_as_text(cls, v):
        # JSON writers may emit 5082 as a number
        if v is None or isinstance(v, str):
            return v
        return str(v)

    def to_suburb(self) -> Suburb:
        return Suburb(
            id=self.id,
            name=self.name,
            postcode=self.postcode or None,
            state=self.state,
            latitude=self.latitude,
            longitude=self.longitude,
        )

    def to_demographics(self) -> Optional[Demographics]:
        demographics = Demographics(
            population=self.population,
            population_density=self.population_density,
            households=self.households,
            median_age=self.median_age,
        )
        if demographics == Demographics():
            return None
        return demographics


class CatalogueFile(_Record):
    """The suburbs.json document. Only ``suburbs`` is read; the rest is informational."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    generated: Optional[str] = None
    center: Optional[Coordinates] = None
    radius_km: Optional[float] = None
    count: Optional[int] = None
    suburbs: list[CatalogueRow] = Field(default_factory=list)
