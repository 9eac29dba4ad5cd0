"""lxml-based KML placemark walker.

Walks every ``Placemark`` in the document (namespace-agnostic, through any
Folder nesting) and turns the usable ones into ``Feature`` records. A bad
placemark is skipped and counted, never raised.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from planetary_atlas.activities.parse_kmz._constants import (
    ATTR_APPROVAL_DATE,
    ATTR_DIAMETER,
    ATTR_FEATURE_TYPE,
    ATTR_ORIGIN,
)
from planetary_atlas.activities.parse_kmz._normalization import (
    coerce_diameter,
    extract_extended_data,
    parse_point_coordinates,
)
from planetary_atlas.activities.parse_kmz._validation import (
    InvalidPlacemarkError,
    load_kml_root,
    validate_position,
)
from planetary_atlas.models.feature import UNKNOWN_FEATURE_TYPE, Feature, FeatureSource

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("planetary_atlas.activities.parse_kmz")


def parse_kml_document(content: bytes, *, source_filename: str = "") -> tuple[list[Feature], int]:
    """Parse raw KML bytes into point features.

    Args:
        content: KML document bytes.
        source_filename: Entry name, used only for log context.

    Returns:
        ``(features, skipped_count)`` in document order.

    Raises:
        KmzParseError: If the document is not well-formed KML.
    """
    root = load_kml_root(content)

    features: list[Feature] = []
    skipped = 0
    for idx, placemark in enumerate(root.iter("{*}Placemark")):
        try:
            features.append(_placemark_to_feature(placemark, idx))
        except InvalidPlacemarkError as exc:
            skipped += 1
            logger.debug("Skipping placemark %d in %s: %s", idx, source_filename, exc)

    if skipped:
        logger.warning(
            "Skipped %d malformed placemark(s) in %s", skipped, source_filename or "<kml>"
        )
    return features, skipped


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _placemark_to_feature(placemark: _Element, idx: int) -> Feature:
    name_elem = placemark.find("{*}name")
    name = (name_elem.text or "").strip() if name_elem is not None else ""
    if not name:
        msg = f"Placemark {idx} has no name"
        raise InvalidPlacemarkError(msg)

    coords_elem = placemark.find(".//{*}Point/{*}coordinates")
    if coords_elem is None:
        coords_elem = placemark.find(".//{*}coordinates")
    if coords_elem is None or not (coords_elem.text or "").strip():
        msg = f"Placemark '{name}' has no coordinates"
        raise InvalidPlacemarkError(msg, key=name)

    lon, lat = parse_point_coordinates(coords_elem.text or "", name)
    validate_position(lon, lat, name)

    attrs = extract_extended_data(placemark)
    return Feature(
        name=name,
        feature_type=attrs.get(ATTR_FEATURE_TYPE, UNKNOWN_FEATURE_TYPE),
        latitude=lat,
        longitude=lon,
        diameter_km=coerce_diameter(attrs.get(ATTR_DIAMETER)),
        origin=attrs.get(ATTR_ORIGIN),
        approval_date=attrs.get(ATTR_APPROVAL_DATE),
        source=FeatureSource.ARCHIVE,
    )
