"""
Domain models for FishFinder.

Immutable Pydantic models for catalog entries. A fish's spots are a tagged
variant: ``AnySpots`` for fish catchable everywhere, ``SpecificSpots`` for a
concrete set of spot numbers.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ANY_SPOT = "any"


class AnySpots(BaseModel):
    """The fish can be caught at every spot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["any"] = "any"

    def contains(self, spot: float) -> bool:
        return True

    def to_raw(self) -> str:
        return ANY_SPOT


class SpecificSpots(BaseModel):
    """The fish can only be caught at the listed spots."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["specific"] = "specific"
    spots: frozenset[int]

    @field_validator("spots")
    @classmethod
    def _check_spots(cls, value: frozenset[int]) -> frozenset[int]:
        if not value:
            raise ValueError("spots must not be empty")
        if any(spot <= 0 for spot in value):
            raise ValueError("spot numbers must be positive")
        return value

    def contains(self, spot: float) -> bool:
        return spot in self.spots

    def to_raw(self) -> list[int]:
        return sorted(self.spots)


Spots = Annotated[AnySpots | SpecificSpots, Field(discriminator="kind")]


class FishRecord(BaseModel):
    """One fish from the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    lure: tuple[str, ...]
    spots: Spots
    circle: str
    event_only: bool = Field(alias="eventOnly")

    @field_validator("lure")
    @classmethod
    def _check_lure(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("a fish needs at least one lure")
        return value

    @property
    def catchable_anywhere(self) -> bool:
        return isinstance(self.spots, AnySpots)
