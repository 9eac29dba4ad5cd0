"""Shared constants for KMZ parsing."""

from __future__ import annotations

# KML 2.2 namespace
KML_NAMESPACE = "http://www.opengis.net/kml/2.2"

KML_EXTENSION = ".kml"

# Embedded raster assets kept alongside the features
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# ExtendedData keys published by the USGS nomenclature archives
ATTR_FEATURE_TYPE = "feature_type"
ATTR_DIAMETER = "diameter"
ATTR_ORIGIN = "origin"
ATTR_APPROVAL_DATE = "approval_date"
