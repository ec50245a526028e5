"""
Mapping functions for FishFinder.

Pure functions for turning the raw catalog document into fish records, and
fish records into display rows.
"""

from typing import Any

from pydantic import ValidationError

from ..utils.exceptions import DataMappingError
from .models import ANY_SPOT, AnySpots, FishRecord

FISH_FIELDS = ("id", "name", "lure", "spots", "circle", "eventOnly")


def map_spots(raw_spots: Any) -> dict[str, Any]:
    """Map the raw ``spots`` value onto the tagged spots variant."""
    if raw_spots == ANY_SPOT:
        return {"kind": "any"}

    if isinstance(raw_spots, list):
        return {"kind": "specific", "spots": raw_spots}

    raise DataMappingError(
        f"Unsupported spots value: {raw_spots!r}",
        source_data=raw_spots,
        expected_format='"any" or a list of spot numbers',
    )


def map_fish(raw_fish: Any) -> FishRecord:
    """Map one raw catalog entry to a ``FishRecord``."""
    if not isinstance(raw_fish, dict):
        raise DataMappingError(
            "Catalog entry is not an object",
            source_data=raw_fish,
            expected_format="JSON object",
        )

    missing = [field for field in FISH_FIELDS if field not in raw_fish]
    if missing:
        raise DataMappingError(
            f"Catalog entry is missing fields: {', '.join(missing)}",
            source_data=raw_fish,
            expected_format=", ".join(FISH_FIELDS),
        )

    try:
        return FishRecord.model_validate(
            {**raw_fish, "spots": map_spots(raw_fish["spots"])}
        )
    except ValidationError as e:
        raise DataMappingError(
            f"Invalid fish entry {raw_fish.get('name')!r}: {e.error_count()} error(s)",
            source_data=raw_fish,
            expected_format=str(e),
        ) from e


def map_catalog_document(document: Any) -> tuple[FishRecord, ...]:
    """Map a ``{"fish": [...]}`` document to an ordered tuple of records."""
    if not isinstance(document, dict) or not isinstance(document.get("fish"), list):
        raise DataMappingError(
            "Catalog document has no 'fish' list",
            expected_format='{"fish": [...]}',
        )

    records = tuple(map_fish(raw_fish) for raw_fish in document["fish"])

    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise DataMappingError(
                f"Duplicate fish id {record.id}",
                source_data={"id": record.id, "name": record.name},
                expected_format="unique integer ids",
            )
        seen.add(record.id)

    return records


def format_lure(record: FishRecord) -> str:
    return " / ".join(record.lure)


def format_spots(record: FishRecord) -> str:
    if isinstance(record.spots, AnySpots):
        return "Any spot"
    return ", ".join(str(spot) for spot in record.spots.to_raw())


def map_fish_to_row(record: FishRecord) -> dict[str, str]:
    """Map a record to the columns of the table view."""
    return {
        "Name": record.name,
        "Lure": format_lure(record),
        "Spots": format_spots(record),
        "Circle": record.circle,
        "Event Only": "Yes" if record.event_only else "No",
    }


def map_fish_to_raw(record: FishRecord) -> dict[str, Any]:
    """Map a record back to the catalog document's wire shape."""
    return {
        "id": record.id,
        "name": record.name,
        "lure": list(record.lure),
        "spots": record.spots.to_raw(),
        "circle": record.circle,
        "eventOnly": record.event_only,
    }
