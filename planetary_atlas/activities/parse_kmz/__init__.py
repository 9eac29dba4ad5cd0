"""KMZ parsing activity.

Extracts named point features and embedded images from a USGS
nomenclature archive (a zipped KML document).

The parsing pipeline is split into focused stages:
- **_archive**: zip container, KML entry lookup, image assets
- **_validation**: XML/KML check, placemark position checks
- **_normalization**: coordinate text, ExtendedData attributes
- **_lxml_parser**: placemark walk producing ``Feature`` records

Malformed placemarks are skipped and counted. Whole-document failures
surface as ``ArchiveContents.error`` so the loader can fall back to
curated data.
"""

from __future__ import annotations

from planetary_atlas.activities.parse_kmz._archive import (
    ArchiveContents,
    AuxiliaryAsset,
    parse_kmz,
)
from planetary_atlas.activities.parse_kmz._constants import (
    IMAGE_EXTENSIONS,
    KML_NAMESPACE,
    MAX_LATITUDE,
    MIN_LATITUDE,
)
from planetary_atlas.activities.parse_kmz._lxml_parser import parse_kml_document
from planetary_atlas.activities.parse_kmz._normalization import (
    coerce_diameter,
    extract_extended_data,
    parse_point_coordinates,
)
from planetary_atlas.activities.parse_kmz._validation import (
    InvalidPlacemarkError,
    KmzParseError,
    load_kml_root,
    validate_position,
)

__all__ = [
    "IMAGE_EXTENSIONS",
    "KML_NAMESPACE",
    "MAX_LATITUDE",
    "MIN_LATITUDE",
    "ArchiveContents",
    "AuxiliaryAsset",
    "InvalidPlacemarkError",
    "KmzParseError",
    "coerce_diameter",
    "extract_extended_data",
    "load_kml_root",
    "parse_kml_document",
    "parse_kmz",
    "parse_point_coordinates",
    "validate_position",
]
