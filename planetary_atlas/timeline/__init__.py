"""Timeline resolution.

- engine: Three-tier cascade and caller entry point
- cache: Single-flight per-session cache
- extraction: Knowledge-base date extraction rules
- estimation: Scientific estimation model
- timeframes: Age parsing and formatting
"""

from planetary_atlas.timeline.cache import TimelineCache
from planetary_atlas.timeline.engine import TimelineEngine, first_hit
from planetary_atlas.timeline.estimation import classify_from_name, estimate_timeline
from planetary_atlas.timeline.extraction import (
    ACTIVITY_RULES,
    FORMATION_RULES,
    DateRule,
    build_knowledge_base_events,
    parse_infobox,
)
from planetary_atlas.timeline.timeframes import (
    format_years,
    format_years_to_timeframe,
    parse_timeframe_to_years,
    sort_for_display,
)

__all__ = [
    "ACTIVITY_RULES",
    "FORMATION_RULES",
    "DateRule",
    "TimelineCache",
    "TimelineEngine",
    "build_knowledge_base_events",
    "classify_from_name",
    "estimate_timeline",
    "first_hit",
    "format_years",
    "format_years_to_timeframe",
    "parse_infobox",
    "parse_timeframe_to_years",
    "sort_for_display",
]
