"""Hand-curated timelines for features with well-dated histories.

Keyed by USGS body identifier, then exact feature name. A timeline here
is returned verbatim and bypasses the knowledge base and the estimation
model.
"""

from __future__ import annotations

from planetary_atlas.models.timeline import TimelineEvent

_PUBLISHED = "Published chronology"


def _event(phase: str, years: float, description: str, source: str = _PUBLISHED) -> TimelineEvent:
    return TimelineEvent(phase=phase, years=years, description=description, source=source)


STRUCTURED_TIMELINES: dict[str, dict[str, tuple[TimelineEvent, ...]]] = {
    "MARS": {
        "Olympus Mons": (
            _event("Volcanic Province Formation", 3.7e9, "Tharsis volcanism begins"),
            _event("Shield Building", 3.0e9, "Repeated basaltic eruptions build the edifice"),
            _event("Aureole Formation", 1.0e9, "Flank collapse deposits spread around the base"),
            _event("Last Eruption", 2.5e7, "Youngest dated lava flows on the caldera floor"),
            _event("Current State", 0, "Dormant shield volcano, 22 km high"),
        ),
        "Valles Marineris": (
            _event("Tectonic Initiation", 3.7e9, "Tharsis loading fractures the crust"),
            _event("Chasma Widening", 3.5e9, "Rifting and collapse widen the troughs"),
            _event("Outflow Flooding", 3.0e9, "Catastrophic floods drain east into Chryse"),
            _event("Current State", 0, "Canyon system about 4000 km long and up to 7 km deep"),
        ),
        "Gale": (
            _event("Impact Formation", 3.7e9, "Impact excavates the basin"),
            _event("Lake Period", 3.5e9, "Lakes deposit layered sediments of Aeolis Mons"),
            _event("Wind Erosion", 3.0e9, "Wind sculpts the central mound"),
            _event("Current State", 0, "Explored by the Curiosity rover since 2012"),
        ),
        "Jezero": (
            _event("Impact Formation", 3.9e9, "Impact forms the crater on the rim of Isidis"),
            _event("Delta Deposition", 3.5e9, "River inflow builds the western fan delta"),
            _event("Current State", 0, "Explored by the Perseverance rover since 2021"),
        ),
    },
    "MOON": {
        "Tycho": (
            _event("Impact Formation", 1.08e8, "Exposure age of ejecta sampled by Apollo 17"),
            _event("Ray System Emplacement", 1.08e8, "Bright ejecta rays spread across the nearside"),
            _event("Current State", 0, "Young, sharply defined crater 85 km across"),
        ),
        "Copernicus": (
            _event("Impact Formation", 8.0e8, "Age of ray material sampled by Apollo 12"),
            _event("Terrace Collapse", 8.0e8, "Walls slump into terraces, central peaks rise"),
            _event("Current State", 0, "Rayed crater 93 km across"),
        ),
        "Mare Imbrium": (
            _event("Basin Impact", 3.85e9, "Imbrium impact excavates the basin"),
            _event("Mare Flooding", 3.3e9, "Basaltic lava floods the basin floor"),
            _event("Volcanic Cessation", 2.0e9, "Last flows in the western basin"),
            _event("Current State", 0, "Second largest lunar mare"),
        ),
    },
}


def structured_timeline(usgs_name: str, feature_name: str) -> tuple[TimelineEvent, ...] | None:
    """Return the curated timeline for a feature, or ``None`` if none exists."""
    return STRUCTURED_TIMELINES.get(usgs_name, {}).get(feature_name)
