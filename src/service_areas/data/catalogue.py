"""
Suburb catalogue file I/O.

The catalogue is a pre-generated suburbs.json (see scripts/generate_suburbs.py).
Reads and writes take a file lock so a generator rewriting the file and a
build reading it never see a half-written document.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from filelock import FileLock, Timeout
from pydantic import BaseModel, ConfigDict, ValidationError

from service_areas.data.models import (
    CatalogueFile,
    CatalogueRow,
    Coordinates,
    Demographics,
    Suburb,
)
from service_areas.exceptions import CatalogueError, CatalogueFormatError, CatalogueNotFoundError
from service_areas.geo import direction, distance_km, round_half_up
from service_areas.logging_config import get_logger

logger = get_logger(__name__)


class Catalogue(BaseModel):
    """Loaded catalogue: suburbs in file order plus demographics keyed by suburb id."""

    model_config = ConfigDict(frozen=True)

    suburbs: tuple[Suburb, ...] = ()
    demographics: dict[int, Demographics] = {}

    def __len__(self) -> int:
        return len(self.suburbs)

    @classmethod
    def from_file(cls, document: CatalogueFile) -> "Catalogue":
        """Build a catalogue from a parsed document, rejecting duplicate ids."""
        seen: set[int] = set()
        suburbs = []
        demographics = {}
        for row in document.suburbs:
            if row.id in seen:
                raise CatalogueFormatError(
                    message=f"Duplicate suburb id {row.id} in catalogue",
                    details={"id": row.id, "name": row.name},
                )
            seen.add(row.id)
            suburbs.append(row.to_suburb())
            demo = row.to_demographics()
            if demo is not None:
                demographics[row.id] = demo
        return cls(suburbs=tuple(suburbs), demographics=demographics)


def _lock_for(path: Path, timeout: float) -> FileLock:
    return FileLock(str(path) + ".lock", timeout=timeout)


def read_catalogue_file(path: str | Path, lock_timeout: float = 5.0) -> CatalogueFile:
    """
    Parse a suburbs.json document.

    Raises:
        CatalogueNotFoundError: The file does not exist.
        CatalogueFormatError: The file is not valid JSON or not a catalogue.
        CatalogueError: The file lock could not be acquired.
    """
    path = Path(path)
    if not path.exists():
        raise CatalogueNotFoundError(path=str(path))

    try:
        with _lock_for(path, lock_timeout):
            raw = json.loads(path.read_text(encoding="utf-8"))
    except Timeout as e:
        raise CatalogueError(
            message=f"Timed out waiting for catalogue lock: {e}",
            details={"path": str(path)},
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogueFormatError(
            message=f"Catalogue is not valid JSON: {e}",
            details={"path": str(path)},
        ) from e

    try:
        return CatalogueFile.model_validate(raw)
    except ValidationError as e:
        raise CatalogueFormatError(
            message=f"Catalogue does not match the expected schema: {e.error_count()} error(s)",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e


def load_catalogue_file(path: str | Path, lock_timeout: float = 5.0) -> Catalogue:
    """Read and index a catalogue file. Raises the same errors as read_catalogue_file."""
    document = read_catalogue_file(path, lock_timeout=lock_timeout)
    catalogue = Catalogue.from_file(document)
    logger.info("Loaded %d suburbs from %s", len(catalogue), path)
    return catalogue


def build_catalogue_file(
    seeds: Iterable[dict[str, Any]],
    center: Coordinates,
    radius_km: float,
    default_state: str = "",
    generated: Optional[datetime] = None,
) -> CatalogueFile:
    """
    Turn seed rows into a catalogue document centred on ``center``.

    Seed rows need ``name``, ``lat`` and ``lng``; ``postcode``, ``state`` and
    ``population`` are optional. Ids are assigned 1..n in input order before
    the radius filter, so an id stays stable when the radius changes.
    """
    origin = (center.lat, center.lng)
    rows = []
    for index, seed in enumerate(seeds, start=1):
        point = (float(seed["lat"]), float(seed["lng"]))
        population = seed.get("population")
        rows.append(CatalogueRow(
            id=index,
            name=str(seed["name"]).strip(),
            postcode=str(seed["postcode"]) if seed.get("postcode") else None,
            state=str(seed.get("state") or default_state),
            latitude=point[0],
            longitude=point[1],
            distance_km=round_half_up(distance_km(origin, point), 2),
            direction=direction(origin, point),
            population=int(population) if population else None,
        ))

    in_radius = sorted(
        (row for row in rows if row.distance_km <= radius_km),
        key=lambda row: row.distance_km,
    )

    return CatalogueFile(
        generated=(generated or datetime.now(timezone.utc)).isoformat(),
        center=center,
        radius_km=radius_km,
        count=len(in_radius),
        suburbs=in_radius,
    )


def write_catalogue_file(document: CatalogueFile, path: str | Path, lock_timeout: float = 5.0) -> Path:
    """Write a catalogue document as pretty-printed camelCase JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = document.model_dump(mode="json", by_alias=True)

    with _lock_for(path, lock_timeout):
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    logger.info("Wrote %d suburbs to %s", document.count or 0, path)
    return path
