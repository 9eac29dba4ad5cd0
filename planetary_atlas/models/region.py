"""Bounding boxes and the large named regions described by them.

Longitudes follow one convention throughout: a box whose ``west`` edge is
greater than its ``east`` edge crosses the antimeridian (e.g. ``west=170,
east=-170`` spans 20 degrees around 180).
"""

from __future__ import annotations

from dataclasses import dataclass

from planetary_atlas.models.validation import ModelValidationError, check_non_empty


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """An axis-aligned latitude/longitude box in degrees.

    Attributes:
        north: Northern latitude edge.
        south: Southern latitude edge.
        east: Eastern longitude edge.
        west: Western longitude edge.
    """

    north: float
    south: float
    east: float
    west: float

    def __post_init__(self) -> None:
        if self.south > self.north:
            raise ModelValidationError(
                "BoundingBox", "south", self.south, f"must be <= north ({self.north})"
            )

    @property
    def crosses_antimeridian(self) -> bool:
        """Whether the box wraps across the +/-180 degree meridian."""
        return self.west > self.east

    def to_dict(self) -> dict[str, float]:
        """Serialise to a ``{north, south, east, west}`` dict."""
        return {"north": self.north, "south": self.south, "east": self.east, "west": self.west}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> BoundingBox:
        """Deserialise from a ``{north, south, east, west}`` dict.

        Raises:
            KeyError: If an edge is missing.
        """
        return cls(
            north=float(data["north"]),  # type: ignore[arg-type]
            south=float(data["south"]),  # type: ignore[arg-type]
            east=float(data["east"]),  # type: ignore[arg-type]
            west=float(data["west"]),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class Region:
    """A large named geographic area of a body.

    Attributes:
        name: Region name (e.g. ``"Mare Imbrium"``).
        region_type: Classification (e.g. ``"Mare"``, ``"Planitia"``).
        description: Short human-readable description.
        bounds: Bounding box enclosing the region.
    """

    name: str
    region_type: str
    bounds: BoundingBox
    description: str = ""

    def __post_init__(self) -> None:
        check_non_empty("Region", "name", self.name)
