"""Data models and schemas.

Defines the data structures used throughout the atlas:
- Feature: A named point on a body's surface
- Region / BoundingBox: Large named areas and selection boxes
- TimelineEvent: One dated phase of a feature's history
- ProviderConfig / KnowledgeBasePage: Knowledge-base provider inputs and outputs
"""

from planetary_atlas.models.feature import UNKNOWN_FEATURE_TYPE, Feature, FeatureSource
from planetary_atlas.models.region import BoundingBox, Region
from planetary_atlas.models.timeline import (
    Confidence,
    Hit,
    Miss,
    TierOutcome,
    TimelineEvent,
    TimelineTier,
)
from planetary_atlas.models.validation import ModelValidationError

__all__ = [
    "UNKNOWN_FEATURE_TYPE",
    "BoundingBox",
    "Confidence",
    "Feature",
    "FeatureSource",
    "Hit",
    "Miss",
    "ModelValidationError",
    "Region",
    "TierOutcome",
    "TimelineEvent",
    "TimelineTier",
]
