"""Static reference data: bodies, curated features, regions, timelines, chronology."""

from planetary_atlas.catalogs.bodies import BODIES, BodyConfig, get_body, list_bodies
from planetary_atlas.catalogs.chronology import GeologicPeriod, period_for_age
from planetary_atlas.catalogs.curated import CURATED_FEATURES, curated_features
from planetary_atlas.catalogs.regions import REGIONS, regions_for
from planetary_atlas.catalogs.timelines import STRUCTURED_TIMELINES, structured_timeline

__all__ = [
    "BODIES",
    "CURATED_FEATURES",
    "REGIONS",
    "STRUCTURED_TIMELINES",
    "BodyConfig",
    "GeologicPeriod",
    "curated_features",
    "get_body",
    "list_bodies",
    "period_for_age",
    "regions_for",
    "structured_timeline",
]
