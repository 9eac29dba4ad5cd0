"""Reconcile activity: merge archive and curated features.

Archive records win over curated records with the same exact name. The
merged list is sorted by a deterministic, accent- and case-insensitive key
so repeated calls produce identical output. Region assignment is
first-match in catalog order.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import TYPE_CHECKING

from planetary_atlas.geometry.bounds import point_in_bounds
from planetary_atlas.models.feature import FeatureSource

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from planetary_atlas.models.feature import Feature
    from planetary_atlas.models.region import Region

logger = logging.getLogger("planetary_atlas.activities.reconcile")

DEFAULT_NOTABLE_DIAMETER_KM = 50.0

# Types that always get a timeline regardless of size
NOTABLE_FEATURE_TYPES = ("Mons", "Tholus", "Patera", "Planum", "Mare", "Vallis", "Chasma")


def name_sort_key(name: str) -> tuple[str, str]:
    """Collation key: accent-stripped casefolded name, then the raw name."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), name)


def reconcile(archive: Iterable[Feature], curated: Iterable[Feature]) -> list[Feature]:
    """Merge archive and curated features into one sorted list.

    - Archive features take priority by exact, case-sensitive name.
    - Duplicate names inside the archive keep the first occurrence.
    - A curated feature is kept only if no archive feature shares its name.

    Inputs are not modified.
    """
    merged: dict[str, Feature] = {}
    for feature in archive:
        merged.setdefault(feature.name, feature)
    archive_count = len(merged)

    for feature in curated:
        merged.setdefault(feature.name, feature)

    result = sorted(merged.values(), key=lambda f: name_sort_key(f.name))
    logger.debug(
        "Reconciled %d archive + %d curated-only feature(s)",
        archive_count,
        len(result) - archive_count,
    )
    return result


def assign_regions(features: Iterable[Feature], regions: Sequence[Region]) -> list[Feature]:
    """Return a new list with ``within_region`` filled where it was unset.

    Each such feature takes the first region, in catalog order, whose
    bounds contain its position. Features with no containing region and
    features that already name a region are returned unchanged.
    """
    assigned: list[Feature] = []
    for feature in features:
        if feature.within_region is None:
            for region in regions:
                if point_in_bounds(feature.latitude, feature.longitude, region.bounds):
                    feature = feature.with_region(region.name)
                    break
        assigned.append(feature)
    return assigned


def is_notable_feature(feature: Feature, threshold_km: float = DEFAULT_NOTABLE_DIAMETER_KM) -> bool:
    """Return whether *feature* is worth a timeline.

    Curated features, features wider than *threshold_km*, and volcanic,
    plain, mare, valley and chasm types are notable.
    """
    if feature.source is FeatureSource.CURATED:
        return True
    if feature.diameter_km is not None and feature.diameter_km > threshold_km:
        return True
    return any(kind in feature.feature_type for kind in NOTABLE_FEATURE_TYPES)
