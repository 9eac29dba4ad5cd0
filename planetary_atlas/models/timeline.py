"""Typed models for geological timelines.

Defines the data structures exchanged between the timeline tiers and the
caller:

- ``TimelineEvent``: One dated phase in a feature's history
- ``Confidence``: How directly an estimate maps from the feature's data
- ``TimelineTier``: Which evidence source resolved a timeline
- ``Hit`` / ``Miss``: Tagged outcome of one cascade tier

A timeline is an ordered-by-creation tuple of events. Display ordering
(oldest first) is applied by ``timeframes.sort_for_display``.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from planetary_atlas.models.validation import ModelValidationError, check_min, check_non_empty


class Confidence(enum.Enum):
    """Confidence qualifier for an estimated event."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimelineTier(enum.Enum):
    """Evidence source of a resolved timeline, in cascade order."""

    STRUCTURED = "structured"
    KNOWLEDGE_BASE = "knowledge_base"
    ESTIMATED = "estimated"


@dataclass(frozen=True, slots=True)
class TimelineEvent:
    """A single phase in a feature's geological history.

    Attributes:
        phase: Phase label (e.g. ``"Impact Formation"``).
        years: Years before present. ``0`` is the present day.
        description: Human-readable description of the phase.
        source: Provenance label, with any confidence qualifier folded in.
        url: Link to the supporting document, when there is one.
        confidence: Confidence qualifier for model estimates.
    """

    phase: str
    years: float
    description: str
    source: str
    url: str | None = None
    confidence: Confidence | None = None

    def __post_init__(self) -> None:
        check_non_empty("TimelineEvent", "phase", self.phase)
        if not math.isfinite(self.years):
            raise ModelValidationError("TimelineEvent", "years", self.years, "must be finite")
        check_min("TimelineEvent", "years", self.years, 0)

    @property
    def timeframe(self) -> str:
        """Human-readable age (e.g. ``"3.7 billion years ago"``)."""
        from planetary_atlas.timeline.timeframes import format_years_to_timeframe

        return format_years_to_timeframe(self.years)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "phase": self.phase,
            "years": self.years,
            "timeframe": self.timeframe,
            "description": self.description,
            "source": self.source,
            "url": self.url,
            "confidence": self.confidence.value if self.confidence else None,
        }


# ---------------------------------------------------------------------------
# Tier outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Hit:
    """A tier that produced a timeline."""

    tier: TimelineTier
    events: tuple[TimelineEvent, ...]


@dataclass(frozen=True, slots=True)
class Miss:
    """A tier that had nothing to offer, with the reason for diagnostics."""

    tier: TimelineTier
    reason: str = ""


TierOutcome = Hit | Miss
