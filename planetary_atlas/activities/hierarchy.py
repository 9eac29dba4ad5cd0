"""Group lettered satellite features under their parent.

USGS names satellite craters ``"<parent> <letters>"`` (``"Tycho A"``,
``"Copernicus AB"``). A satellite is nested under its parent only when a
feature with the parent name exists in the same set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from planetary_atlas.models.feature import Feature

SATELLITE_NAME_PATTERN = re.compile(r"^(.+?)\s+([A-Z]{1,2})$")


@dataclass(slots=True)
class FeatureGroup:
    """A feature and its lettered satellites."""

    feature: Feature
    children: list[FeatureGroup] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.feature.name


def split_satellite_name(name: str) -> tuple[str, str] | None:
    """Return ``(parent, suffix)`` for a satellite name, else ``None``."""
    match = SATELLITE_NAME_PATTERN.match(name)
    if match is None:
        return None
    return (match.group(1), match.group(2))


def organize_feature_hierarchy(features: Sequence[Feature]) -> list[FeatureGroup]:
    """Nest satellites under their parents.

    Children are ordered by suffix length, then suffix (``A < B < AA``).
    Satellites whose parent is absent stay top-level. Top-level order
    follows the input.
    """
    by_name = {f.name: f for f in features}
    children: dict[str, list[tuple[str, Feature]]] = {}
    nested: set[str] = set()

    for feature in features:
        split = split_satellite_name(feature.name)
        if split is None:
            continue
        parent, suffix = split
        if parent == feature.name or parent not in by_name:
            continue
        children.setdefault(parent, []).append((suffix, feature))
        nested.add(feature.name)

    def build(feature: Feature) -> FeatureGroup:
        # A child name is strictly longer than its parent, so this terminates.
        kids = sorted(children.get(feature.name, []), key=lambda item: (len(item[0]), item[0]))
        return FeatureGroup(feature, [build(child) for _, child in kids])

    return [build(feature) for feature in features if feature.name not in nested]
