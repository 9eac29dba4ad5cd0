"""Data model for a named surface feature.

A Feature is a single named point on a body's surface, either parsed from
a USGS nomenclature archive or taken from the curated catalog. Archive and
curated records share this one shape; nothing downstream branches on
where a feature came from except through ``source``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from planetary_atlas.models.validation import ModelValidationError, check_range

UNKNOWN_FEATURE_TYPE = "Unknown"


class FeatureSource(enum.Enum):
    """Provenance of a feature record.

    Values:
        ARCHIVE: Parsed from the body's nomenclature archive.
        CURATED: Taken from the hand-maintained catalog.
    """

    ARCHIVE = "archive"
    CURATED = "curated"


@dataclass(frozen=True, slots=True)
class Feature:
    """A named point feature on a body's surface.

    Attributes:
        name: Feature name (e.g. ``"Tycho"``). Unique within one body.
        feature_type: Open classification string (e.g. ``"Crater, craters"``).
        latitude: Planetocentric latitude in degrees, within [-90, 90].
        longitude: Longitude in degrees. Any range; normalised where consumed.
        diameter_km: Diameter in kilometres, or ``None`` when unknown.
        origin: Origin of the name, as published by the archive.
        approval_date: Date the name was approved.
        source: Where the record came from.
        within_region: Name of the containing region, once known.
    """

    name: str
    feature_type: str = UNKNOWN_FEATURE_TYPE
    latitude: float = 0.0
    longitude: float = 0.0
    diameter_km: float | None = None
    origin: str | None = None
    approval_date: str | None = None
    source: FeatureSource = FeatureSource.ARCHIVE
    within_region: str | None = None

    def __post_init__(self) -> None:
        check_range("Feature", "latitude", self.latitude, -90.0, 90.0)
        if self.diameter_km is not None and not self.diameter_km > 0:
            raise ModelValidationError(
                "Feature", "diameter_km", self.diameter_km, "must be > 0 or None"
            )

    @property
    def position(self) -> tuple[float, float]:
        """``(latitude, longitude)`` in degrees."""
        return (self.latitude, self.longitude)

    def with_region(self, region_name: str) -> Feature:
        """Return a copy placed within *region_name*.

        An already-populated ``within_region`` is authoritative and is kept.
        """
        if self.within_region:
            return self
        return replace(self, within_region=region_name)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "name": self.name,
            "feature_type": self.feature_type,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "diameter_km": self.diameter_km,
            "origin": self.origin,
            "approval_date": self.approval_date,
            "source": self.source.value,
            "within_region": self.within_region,
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Feature:
        """Deserialise from a dict payload.

        Missing fields are defaulted (for example, an absent ``name``
        becomes ``""``) rather than raising an error.

        Raises:
            ValueError: If ``source`` is not a known ``FeatureSource`` value
                or a numeric field cannot be converted.
        """
        diameter_raw = data.get("diameter_km")
        return cls(
            name=str(data.get("name", "")),
            feature_type=str(data.get("feature_type", UNKNOWN_FEATURE_TYPE)),
            latitude=float(data.get("latitude", 0.0)),  # type: ignore[arg-type]
            longitude=float(data.get("longitude", 0.0)),  # type: ignore[arg-type]
            diameter_km=None if diameter_raw is None else float(diameter_raw),  # type: ignore[arg-type]
            origin=_optional_str(data.get("origin")),
            approval_date=_optional_str(data.get("approval_date")),
            source=FeatureSource(data.get("source", FeatureSource.ARCHIVE.value)),
            within_region=_optional_str(data.get("within_region")),
        )


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)
