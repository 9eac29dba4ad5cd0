"""Shared atlas constants.

Centralises endpoint defaults, archive naming, and the provenance labels
carried in ``TimelineEvent.source``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# External endpoints
# ---------------------------------------------------------------------------

DEFAULT_ARCHIVE_BASE_URL: str = "https://planetarynames.wr.usgs.gov/shapefiles"
"""USGS Gazetteer of Planetary Nomenclature download area."""

DEFAULT_KNOWLEDGE_BASE_URL: str = "https://en.wikipedia.org/w/api.php"
"""MediaWiki action API used for feature summaries."""

DEFAULT_KNOWLEDGE_BASE_PROVIDER: str = "wikipedia"

DEFAULT_USER_AGENT: str = "planetary-atlas/0.1 (+https://planetarynames.wr.usgs.gov)"

ARCHIVE_NAME_TEMPLATE: str = "{usgs_name}_nomenclature_center_pts.kmz"
"""File name of a body's nomenclature archive under the archive base URL."""

# ---------------------------------------------------------------------------
# Timeline provenance labels
# ---------------------------------------------------------------------------

SOURCE_KNOWLEDGE_BASE: str = "Wikipedia"
SOURCE_KNOWLEDGE_BASE_INFOBOX: str = "Wikipedia (Infobox)"
SOURCE_ESTIMATED: str = "Estimated"

PHASE_FORMATION: str = "Formation"
PHASE_LAST_ERUPTION: str = "Last Eruption"
PHASE_LAST_MAJOR_ACTIVITY: str = "Last Major Activity"
PHASE_MAJOR_ACTIVITY: str = "Major Activity"
PHASE_CURRENT_STATE: str = "Current State"

# ---------------------------------------------------------------------------
# Time units (years before present)
# ---------------------------------------------------------------------------

BILLION: float = 1e9
MILLION: float = 1e6
THOUSAND: float = 1e3
