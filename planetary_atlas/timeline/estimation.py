"""Scientific estimation model: the terminal timeline tier.

Derives a timeline from a feature's type, diameter and body alone, with
no external dependency. Every event carries a ``Confidence`` that is also
folded into its ``source`` label, e.g. ``"Crater chronology model (high
confidence)"``.

Crater ages use diameter as a proxy for surface age (larger is older)
with body-specific buckets. Volcanic, channel, mare and plain features
follow fixed narratives with body-specific ages.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from planetary_atlas.catalogs.chronology import period_for_age
from planetary_atlas.core.constants import PHASE_CURRENT_STATE, PHASE_FORMATION, SOURCE_ESTIMATED
from planetary_atlas.models.feature import UNKNOWN_FEATURE_TYPE
from planetary_atlas.models.timeline import Confidence, TimelineEvent

if TYPE_CHECKING:
    from collections.abc import Callable

    from planetary_atlas.models.feature import Feature

logger = logging.getLogger("planetary_atlas.timeline.estimation")

DEFAULT_CRATER_DIAMETER_KM = 10.0
DEFAULT_VOLCANO_DIAMETER_KM = 100.0
DEFAULT_PLAIN_EXTENT_KM = 500.0

DEFAULT_CRATER_AGE = 2.0e9
EROSION_AGE_THRESHOLD = 2.0e9
GENERIC_FORMATION_AGE = 3.5e9

# (minimum diameter exclusive, age); first match wins, last entry is the floor
CRATER_AGE_BUCKETS: dict[str, tuple[tuple[float, float], ...]] = {
    "MARS": ((100.0, 4.0e9), (50.0, 3.7e9), (20.0, 3.2e9), (5.0, 1.5e9), (0.0, 0.5e9)),
    "MOON": ((100.0, 3.95e9), (50.0, 3.7e9), (20.0, 2.5e9), (0.0, 0.8e9)),
}

# (formation, peak activity, late activity)
MARS_LARGE_SHIELD_AGES = (3.7e9, 3.0e9, 0.5e9)
MARS_SMALL_SHIELD_AGES = (3.5e9, 3.2e9, 2.9e9)
GENERIC_VOLCANO_AGES = (3.5e9, 3.0e9, 1.0e9)
LARGE_SHIELD_DIAMETER_KM = 200.0


def estimate_crater_age(usgs_name: str, diameter_km: float) -> float:
    """Return the estimated age of a crater of *diameter_km* on a body."""
    buckets = CRATER_AGE_BUCKETS.get(usgs_name)
    if buckets is None:
        return DEFAULT_CRATER_AGE
    for minimum, age in buckets:
        if diameter_km > minimum:
            return age
    return buckets[-1][1]


def classify_from_name(name: str) -> str:
    """Guess a feature type from its name when the type is unknown."""
    lowered = name.lower()
    for keyword, feature_type in (
        ("mons", "Mons"),
        ("crater", "Crater"),
        ("vallis", "Vallis"),
        ("mare", "Mare"),
        ("planitia", "Planitia"),
        ("planum", "Planum"),
    ):
        if keyword in lowered:
            return feature_type
    return UNKNOWN_FEATURE_TYPE


def estimate_timeline(feature: Feature, usgs_name: str) -> tuple[TimelineEvent, ...]:
    """Return the model timeline for *feature* on body *usgs_name*.

    Always returns at least a formation event and a current-state event.
    """
    feature_type = feature.feature_type
    if not feature_type or feature_type == UNKNOWN_FEATURE_TYPE:
        feature_type = classify_from_name(feature.name)

    lowered = feature_type.lower()
    for keywords, model in _MODELS:
        if any(keyword in lowered for keyword in keywords):
            events = model(feature, usgs_name)
            break
    else:
        events = _generic(feature, usgs_name)

    logger.debug(
        "Estimated %d event(s) for %s (%s) on %s", len(events), feature.name, feature_type, usgs_name
    )
    return tuple(_annotate_period(event, usgs_name) for event in events)


def estimate_formation_years(feature: Feature, usgs_name: str) -> float:
    """Return the formation age the model assigns to *feature*."""
    return estimate_timeline(feature, usgs_name)[0].years


# ---------------------------------------------------------------------------
# Per-type models
# ---------------------------------------------------------------------------


def _crater(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    known = feature.diameter_km is not None
    diameter = feature.diameter_km if feature.diameter_km is not None else DEFAULT_CRATER_DIAMETER_KM
    age = estimate_crater_age(usgs_name, diameter)

    formation_confidence = Confidence.HIGH if diameter > 50 else Confidence.MEDIUM
    if not known:
        formation_confidence = Confidence.LOW

    events = [
        _model_event(
            "Impact Formation",
            age,
            f"High-velocity asteroid or comet impact creates a {diameter:g} km crater",
            "Crater chronology model",
            formation_confidence,
        ),
        _model_event(
            "Crater Modification",
            age,
            "Wall collapse, central peak rebound, ejecta emplacement",
            "Impact mechanics",
            Confidence.HIGH,
        ),
    ]
    if age > EROSION_AGE_THRESHOLD:
        events.append(
            _model_event(
                "Erosion Period",
                age / 2,
                "Wind, water and mass wasting modify crater morphology",
                "Erosion models",
                Confidence.MEDIUM,
            )
        )
    events.append(
        _model_event(
            PHASE_CURRENT_STATE,
            0,
            f"Preserved crater, {diameter:g} km diameter",
            "Current observations",
            Confidence.HIGH,
        )
    )
    return events


def _volcano(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    diameter = feature.diameter_km if feature.diameter_km is not None else DEFAULT_VOLCANO_DIAMETER_KM
    if usgs_name == "MARS":
        ages = MARS_LARGE_SHIELD_AGES if diameter > LARGE_SHIELD_DIAMETER_KM else MARS_SMALL_SHIELD_AGES
        confidences = (Confidence.MEDIUM, Confidence.HIGH, Confidence.MEDIUM)
    else:
        ages = GENERIC_VOLCANO_AGES
        confidences = (Confidence.LOW, Confidence.LOW, Confidence.LOW)

    formation, peak, late = ages
    return [
        _model_event(
            "Volcanic Province Formation",
            formation,
            "Regional mantle upwelling initiates volcanism",
            "Tectonic models",
            confidences[0],
        ),
        _model_event(
            "Shield Building",
            peak,
            "Repeated basaltic eruptions construct the main edifice",
            "Volcanic stratigraphy",
            confidences[1],
        ),
        _model_event(
            "Late Activity",
            late,
            "Declining eruption rate, summit caldera formation",
            "Crater counting on flows",
            confidences[2],
        ),
        _model_event(
            PHASE_CURRENT_STATE,
            0,
            f"Volcanic edifice, {diameter:g} km diameter, possibly dormant",
            "Modern imaging",
            Confidence.HIGH,
        ),
    ]


def _channel(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    if usgs_name != "MARS":
        return _generic(feature, usgs_name)
    return [
        _model_event(
            "Tectonic Initiation",
            3.7e9,
            "Crustal stress creates initial fractures",
            "Structural geology",
            Confidence.MEDIUM,
        ),
        _model_event(
            "Water Flow Period",
            3.5e9,
            "Liquid water carves and widens the channel system",
            "Hydrological models",
            Confidence.MEDIUM,
        ),
        _model_event(
            "Desiccation",
            3.0e9,
            "Climate change causes surface water to disappear",
            "Climate models",
            Confidence.LOW,
        ),
        _model_event(
            PHASE_CURRENT_STATE,
            0,
            "Dry channel preserved under a thin atmosphere",
            "Current observations",
            Confidence.HIGH,
        ),
    ]


def _mare(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    return [
        _model_event(
            "Basin Impact",
            3.9e9,
            "Large impact excavates the basin during the Late Heavy Bombardment",
            "Lunar chronology",
            Confidence.HIGH,
        ),
        _model_event(
            "Mare Flooding",
            3.7e9,
            "Basaltic lava from the mantle floods the low-lying basin",
            "Apollo sample dating",
            Confidence.HIGH,
        ),
        _model_event(
            "Volcanic Cessation",
            3.2e9,
            "Mantle cooling ends volcanic activity",
            "Thermal models",
            Confidence.HIGH,
        ),
        _model_event(
            PHASE_CURRENT_STATE,
            0,
            "Dark basaltic plain, heavily cratered",
            "Orbital imaging",
            Confidence.HIGH,
        ),
    ]


def _plain(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    extent = feature.diameter_km if feature.diameter_km is not None else DEFAULT_PLAIN_EXTENT_KM
    formation = _model_event(
        "Surface Formation",
        3.5e9,
        "Volcanic flows or sedimentary deposition create the plains",
        "Geological mapping",
        Confidence.MEDIUM if usgs_name == "MARS" else Confidence.LOW,
    )
    current = _model_event(
        PHASE_CURRENT_STATE,
        0,
        f"Smooth plains, {extent:g} km extent",
        "Orbital imaging",
        Confidence.HIGH,
    )
    if usgs_name != "MARS":
        return [formation, current]
    modification = _model_event(
        "Modification",
        3.0e9,
        "Wind erosion and dust deposition alter the surface",
        "Aeolian studies",
        Confidence.MEDIUM,
    )
    return [formation, modification, current]


def _generic(feature: Feature, usgs_name: str) -> list[TimelineEvent]:
    return [
        _model_event(
            PHASE_FORMATION,
            GENERIC_FORMATION_AGE,
            "Geological feature formed during planetary evolution",
            SOURCE_ESTIMATED,
            Confidence.LOW,
        ),
        _model_event(
            PHASE_CURRENT_STATE,
            0,
            f"Observable feature on {usgs_name}",
            "Observations",
            Confidence.HIGH,
        ),
    ]


_MODELS: tuple[tuple[tuple[str, ...], Callable[[Feature, str], list[TimelineEvent]]], ...] = (
    (("crater",), _crater),
    (("mons", "tholus", "patera"), _volcano),
    (("vallis", "valles", "fossa"), _channel),
    (("mare",), _mare),
    (("planitia", "planum"), _plain),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _model_event(
    phase: str, years: float, description: str, label: str, confidence: Confidence
) -> TimelineEvent:
    return TimelineEvent(
        phase=phase,
        years=years,
        description=description,
        source=f"{label} ({confidence.value} confidence)",
        confidence=confidence,
    )


def _annotate_period(event: TimelineEvent, usgs_name: str) -> TimelineEvent:
    if event.years == 0:
        return event
    period = period_for_age(usgs_name, event.years)
    if period is None:
        return event
    return TimelineEvent(
        phase=event.phase,
        years=event.years,
        description=f"{event.description} ({period.name})",
        source=event.source,
        url=event.url,
        confidence=event.confidence,
    )
