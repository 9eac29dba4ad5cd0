"""Validation helpers for KMZ parsing.

Responsibilities:
- XML well-formedness and KML root check
- Placemark position checks (finite numbers, latitude range)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from planetary_atlas.activities.parse_kmz._constants import MAX_LATITUDE, MIN_LATITUDE
from planetary_atlas.core.exceptions import PermanentError

if TYPE_CHECKING:
    from lxml.etree import _Element


# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class KmzParseError(PermanentError):
    """Raised when an archive or its KML document cannot be read.

    Recoverable at the loader: the caller falls back to curated data.
    """

    default_stage = "parse_kmz"
    default_code = "KMZ_PARSE_FAILED"


class InvalidPlacemarkError(KmzParseError):
    """Raised for a single placemark that cannot become a feature."""

    default_code = "KMZ_PLACEMARK_INVALID"


# ---------------------------------------------------------------------------
# XML / KML document validation
# ---------------------------------------------------------------------------


def load_kml_root(content: bytes) -> _Element:
    """Parse *content* as XML and check it is a KML document.

    Raises:
        KmzParseError: If the content is empty, not well-formed XML, or
            its root element is not ``<kml>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = "KML document is empty"
        raise KmzParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmzParseError(msg) from exc

    tag = root.tag if isinstance(root.tag, str) else ""
    if not tag or etree.QName(root).localname != "kml":
        msg = f"Not a KML document: root element is <{tag}>"
        raise KmzParseError(msg)
    return root


# ---------------------------------------------------------------------------
# Position validation
# ---------------------------------------------------------------------------


def validate_position(lon: float, lat: float, placemark_name: str) -> None:
    """Check a parsed position is usable.

    Longitude may use any range (some bodies publish 0-360); latitude must
    lie within [-90, 90]. Both must be finite.

    Raises:
        InvalidPlacemarkError: If the position is unusable.
    """
    if not (math.isfinite(lon) and math.isfinite(lat)):
        msg = f"Non-finite coordinates (lon={lon}, lat={lat}) in Placemark '{placemark_name}'"
        raise InvalidPlacemarkError(msg, key=placemark_name)
    if not (MIN_LATITUDE <= lat <= MAX_LATITUDE):
        msg = (
            f"Latitude {lat} out of range [{MIN_LATITUDE}, {MAX_LATITUDE}] "
            f"in Placemark '{placemark_name}'"
        )
        raise InvalidPlacemarkError(msg, key=placemark_name)
