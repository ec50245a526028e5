"""
Filtering functions for FishFinder.

Pure functions for searching the fish catalog by name, spot or lure colour.
Every filter keeps catalog order and returns a new tuple; a blank query
always yields no fish.
"""

import math
from collections.abc import Sequence
from enum import Enum

from .models import FishRecord


class SearchMode(str, Enum):
    """What the query is matched against."""

    NAME = "name"
    SPOT = "spot"
    LURE = "lure"


class SpotPolicy(str, Enum):
    """How fish catchable at any spot are treated by a spot search."""

    INCLUDE_ANY = "include-any"
    SPECIFIC_ONLY = "specific-only"


def _normalise_query(query: str) -> str:
    return query.strip().lower()


def filter_by_name(
    catalog: Sequence[FishRecord], query: str
) -> tuple[FishRecord, ...]:
    """Filter fish whose name contains the query, ignoring case."""
    needle = _normalise_query(query)
    if not needle:
        return ()

    return tuple(fish for fish in catalog if needle in fish.name.lower())


def filter_by_lure(
    catalog: Sequence[FishRecord], query: str
) -> tuple[FishRecord, ...]:
    """Filter fish where any required lure contains the query, ignoring case."""
    needle = _normalise_query(query)
    if not needle:
        return ()

    def lure_matches(fish: FishRecord) -> bool:
        return any(needle in lure.lower() for lure in fish.lure)

    return tuple(fish for fish in catalog if lure_matches(fish))


def parse_spot(query: str) -> float | None:
    """
    Parse a spot number from free text.

    Integral values come back as ``int`` ("3", " 3 ", "3.0"). Fractions and
    infinities are still numbers and come back as ``float``; they never match
    a listed spot but are not "no spot" either. Non-numeric text and NaN give
    ``None``.
    """
    text = query.strip()
    # int() and float() accept digit separators, spot numbers do not
    if not text or "_" in text:
        return None

    try:
        return int(text)
    except ValueError:
        pass

    try:
        value = float(text)
    except ValueError:
        return None

    if math.isnan(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def filter_by_spot(
    catalog: Sequence[FishRecord],
    query: str,
    policy: SpotPolicy = SpotPolicy.INCLUDE_ANY,
) -> tuple[FishRecord, ...]:
    """
    Filter fish catchable at the spot number in the query.

    An unparsable query and spot 0 both mean "no spot entered" and give no
    fish. Under ``include-any`` fish catchable anywhere always match; under
    ``specific-only`` only fish listing the spot explicitly do.
    """
    spot = parse_spot(query)
    if not spot:
        return ()

    policy = SpotPolicy(policy)

    def spot_matches(fish: FishRecord) -> bool:
        if fish.catchable_anywhere:
            return policy is SpotPolicy.INCLUDE_ANY
        return fish.spots.contains(spot)

    return tuple(fish for fish in catalog if spot_matches(fish))


def table_view(catalog: Sequence[FishRecord]) -> tuple[FishRecord, ...]:
    """Return the whole catalog, unfiltered and in catalog order."""
    return tuple(catalog)


def search(
    catalog: Sequence[FishRecord],
    mode: SearchMode | str,
    query: str,
    policy: SpotPolicy | str = SpotPolicy.INCLUDE_ANY,
) -> tuple[FishRecord, ...]:
    """Run a search in the given mode."""
    mode = SearchMode(mode)

    if mode is SearchMode.NAME:
        return filter_by_name(catalog, query)
    if mode is SearchMode.LURE:
        return filter_by_lure(catalog, query)
    return filter_by_spot(catalog, query, SpotPolicy(policy))
