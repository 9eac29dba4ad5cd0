"""Coordinate and attribute normalization helpers for KMZ parsing.

Responsibilities:
- Parse KML point coordinate text to a ``(lon, lat)`` pair
- Extract ExtendedData attributes from a Placemark (typed + untyped)
- Coerce the optional attributes to the Feature field types
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from planetary_atlas.activities.parse_kmz._validation import InvalidPlacemarkError

if TYPE_CHECKING:
    from lxml.etree import _Element

_COORDINATE_SPLIT = re.compile(r"[\s,]+")

# ---------------------------------------------------------------------------
# Coordinate text
# ---------------------------------------------------------------------------


def parse_point_coordinates(text: str, placemark_name: str) -> tuple[float, float]:
    """Parse KML point text ``lon,lat[,alt]`` to ``(lon, lat)``.

    Altitude, when present, is ignored.

    Raises:
        InvalidPlacemarkError: If fewer than two fields are present or
            either field is not a number.
    """
    fields = [part for part in _COORDINATE_SPLIT.split(text.strip()) if part]
    if len(fields) < 2:
        msg = f"Expected 'lon,lat[,alt]' in Placemark '{placemark_name}', got {text!r}"
        raise InvalidPlacemarkError(msg, key=placemark_name)
    try:
        lon = float(fields[0])
        lat = float(fields[1])
    except ValueError as exc:
        msg = (
            f"Cannot convert coordinates to float in Placemark '{placemark_name}' "
            f"(lon={fields[0]!r}, lat={fields[1]!r})"
        )
        raise InvalidPlacemarkError(msg, key=placemark_name) from exc
    return (lon, lat)


# ---------------------------------------------------------------------------
# ExtendedData
# ---------------------------------------------------------------------------


def extract_extended_data(placemark: _Element) -> dict[str, str]:
    """Extract ExtendedData attributes from a Placemark element.

    Handles both KML metadata patterns, in any namespace:
    - ``ExtendedData/SchemaData/SimpleData``: typed fields (USGS archives).
    - ``ExtendedData/Data/value``: untyped key-value pairs.

    Blank values are dropped. An absent ExtendedData block yields ``{}``.
    """
    metadata: dict[str, str] = {}
    extended = placemark.find("{*}ExtendedData")
    if extended is None:
        return metadata

    for simple_data in extended.iter("{*}SimpleData"):
        key = simple_data.get("name", "")
        if key and simple_data.text and simple_data.text.strip():
            metadata[key] = simple_data.text.strip()

    for data_elem in extended.iter("{*}Data"):
        key = data_elem.get("name", "")
        value_elem = data_elem.find("{*}value")
        if key and value_elem is not None and value_elem.text and value_elem.text.strip():
            metadata.setdefault(key, value_elem.text.strip())

    return metadata


def coerce_diameter(raw: str | None) -> float | None:
    """Return a positive finite diameter in km, or ``None`` for unknown."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value
