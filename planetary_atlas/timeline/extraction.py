"""Knowledge-base extraction: dated events from an infobox and page text.

Date phrases are recognised by a table of ``DateRule`` regular
expressions. Adding a phrasing means adding a rule, not changing the
extraction flow. Every match is converted to years before comparison, so
``"500 million"`` is correctly more recent than ``"1.2 billion"``.

Event derivation for one page:

1. Formation: infobox ``age`` or ``formed``, else the first formation
   phrase in the text, else the estimation model's formation age.
2. Activity: infobox ``last eruption``, else the most recent activity
   phrase in the text, else a midpoint estimate when the text mentions
   volcanism at all.
3. Current state: always present, taken from the page introduction.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planetary_atlas.core.constants import (
    PHASE_CURRENT_STATE,
    PHASE_FORMATION,
    PHASE_LAST_ERUPTION,
    PHASE_LAST_MAJOR_ACTIVITY,
    PHASE_MAJOR_ACTIVITY,
    SOURCE_ESTIMATED,
    SOURCE_KNOWLEDGE_BASE,
    SOURCE_KNOWLEDGE_BASE_INFOBOX,
)
from planetary_atlas.models.timeline import TimelineEvent
from planetary_atlas.timeline.estimation import estimate_formation_years
from planetary_atlas.timeline.timeframes import parse_timeframe_to_years, to_years

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from planetary_atlas.models.feature import Feature
    from planetary_atlas.models.knowledge import KnowledgeBasePage

logger = logging.getLogger("planetary_atlas.timeline.extraction")

INFOBOX_AGE = "age"
INFOBOX_FORMED = "formed"
INFOBOX_LAST_ERUPTION = "last_eruption"

CONTEXT_BEFORE = 50
CONTEXT_AFTER = 100

_INFOBOX_BLOCK = re.compile(r"\{\{Infobox[^\n]*\n([\s\S]*?)\n\}\}", re.IGNORECASE)
_INFOBOX_FIELDS = {
    INFOBOX_AGE: re.compile(r"\|\s*age\s*=\s*([^\n|]+)", re.IGNORECASE),
    INFOBOX_LAST_ERUPTION: re.compile(r"\|\s*last[_\s]eruption\s*=\s*([^\n|]+)", re.IGNORECASE),
    INFOBOX_FORMED: re.compile(r"\|\s*formed\s*=\s*([^\n|]+)", re.IGNORECASE),
}
_VOLCANISM = re.compile(r"volcan|erupt|lava", re.IGNORECASE)

_QUANTITY = r"([\d.]+)\s*(billion|million|thousand)\s*years?\s*ago"
_APPROX = r"(?:about|around|approximately)?\s*"


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DateRule:
    """A date phrase pattern. Group 1 is the magnitude, group 2 the unit word."""

    name: str
    pattern: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class DateMatch:
    """One date phrase found in text."""

    rule: str
    years: float
    magnitude: str
    unit: str
    start: int
    text: str

    @property
    def timeframe(self) -> str:
        return f"~{self.magnitude} {self.unit} years ago"


FORMATION_RULES: tuple[DateRule, ...] = (
    DateRule("formed", re.compile(rf"formed?\s+{_APPROX}{_QUANTITY}", re.IGNORECASE)),
)

ACTIVITY_RULES: tuple[DateRule, ...] = (
    DateRule(
        "last_activity",
        re.compile(
            rf"last\s+(?:eruption|erupted|active|activity)\s+(?:was\s+)?{_APPROX}{_QUANTITY}",
            re.IGNORECASE,
        ),
    ),
    DateRule(
        "activity",
        re.compile(rf"(?:eruption|erupted|active|activity)\s+{_APPROX}{_QUANTITY}", re.IGNORECASE),
    ),
    DateRule(
        "volcanic_activity",
        re.compile(rf"volcanic\s+activity.*?{_QUANTITY}", re.IGNORECASE),
    ),
)


def find_date_matches(text: str, rules: Iterable[DateRule]) -> list[DateMatch]:
    """Return every match of *rules* in *text*, in rule then text order.

    Matches whose magnitude is not a finite number (``"..."``) are ignored.
    """
    matches: list[DateMatch] = []
    for rule in rules:
        for match in rule.pattern.finditer(text):
            magnitude, unit = match.group(1), match.group(2).lower()
            try:
                years = to_years(magnitude, unit)
            except ValueError:
                continue
            if not math.isfinite(years):
                continue
            matches.append(
                DateMatch(
                    rule=rule.name,
                    years=years,
                    magnitude=magnitude,
                    unit=unit,
                    start=match.start(),
                    text=match.group(0),
                )
            )
    return matches


def most_recent(matches: Sequence[DateMatch]) -> DateMatch | None:
    """Return the match with the fewest years; the earliest listed wins ties."""
    if not matches:
        return None
    return min(matches, key=lambda m: m.years)


def context_sentence(text: str, start: int) -> str:
    """Return the sentence fragment around *start* (50 chars before, 100 after)."""
    window = text[max(0, start - CONTEXT_BEFORE) : start + CONTEXT_AFTER].strip()
    return window.split(".")[0].strip()


# ---------------------------------------------------------------------------
# Infobox
# ---------------------------------------------------------------------------


def parse_infobox(wikitext: str) -> dict[str, str]:
    """Extract ``age``, ``formed`` and ``last_eruption`` from an infobox.

    Only fields present and non-blank are returned. Text without an
    infobox yields ``{}``.
    """
    block = _INFOBOX_BLOCK.search(wikitext or "")
    if block is None:
        return {}
    content = block.group(1)
    fields: dict[str, str] = {}
    for key, pattern in _INFOBOX_FIELDS.items():
        match = pattern.search(content)
        if match and match.group(1).strip():
            fields[key] = match.group(1).strip()
    return fields


# ---------------------------------------------------------------------------
# Event derivation
# ---------------------------------------------------------------------------


def build_knowledge_base_events(
    page: KnowledgeBasePage,
    feature: Feature,
    usgs_name: str,
    *,
    formation_rules: Sequence[DateRule] = FORMATION_RULES,
    activity_rules: Sequence[DateRule] = ACTIVITY_RULES,
) -> tuple[TimelineEvent, ...]:
    """Derive formation, activity and current-state events from *page*."""
    text = page.full_text or page.intro
    formation = _formation_event(page, feature, usgs_name, text, formation_rules)
    events = [formation]

    activity = _activity_event(page, text, formation.years, activity_rules)
    if activity is not None:
        events.append(activity)

    events.append(_current_state_event(page, feature))
    return tuple(events)


def _formation_event(
    page: KnowledgeBasePage,
    feature: Feature,
    usgs_name: str,
    text: str,
    rules: Sequence[DateRule],
) -> TimelineEvent:
    for key in (INFOBOX_AGE, INFOBOX_FORMED):
        value = page.infobox.get(key)
        if not value:
            continue
        years = parse_timeframe_to_years(value)
        if years is not None:
            return TimelineEvent(
                phase=PHASE_FORMATION,
                years=years,
                description=f"Formed {value}",
                source=SOURCE_KNOWLEDGE_BASE_INFOBOX,
                url=page.url or None,
            )
        logger.debug("Unparseable infobox %s %r for %s", key, value, page.title)

    matches = find_date_matches(text, rules)
    if matches:
        first = matches[0]
        return TimelineEvent(
            phase=PHASE_FORMATION,
            years=first.years,
            description=context_sentence(text, first.start) or f"Formed {first.timeframe}",
            source=SOURCE_KNOWLEDGE_BASE,
            url=page.url or None,
        )

    return TimelineEvent(
        phase=PHASE_FORMATION,
        years=estimate_formation_years(feature, usgs_name),
        description=f"{feature.feature_type} formation",
        source=SOURCE_ESTIMATED,
    )


def _activity_event(
    page: KnowledgeBasePage,
    text: str,
    formation_years: float,
    rules: Sequence[DateRule],
) -> TimelineEvent | None:
    value = page.infobox.get(INFOBOX_LAST_ERUPTION)
    if value:
        years = parse_timeframe_to_years(value)
        if years is not None:
            return TimelineEvent(
                phase=PHASE_LAST_ERUPTION,
                years=years,
                description=f"Last eruption: {value}",
                source=SOURCE_KNOWLEDGE_BASE_INFOBOX,
                url=page.url or None,
            )

    latest = most_recent(find_date_matches(text, rules))
    if latest is not None:
        return TimelineEvent(
            phase=PHASE_LAST_MAJOR_ACTIVITY,
            years=latest.years,
            description=context_sentence(text, latest.start) or latest.timeframe,
            source=SOURCE_KNOWLEDGE_BASE,
            url=page.url or None,
        )

    if _VOLCANISM.search(text) and formation_years > 0:
        return TimelineEvent(
            phase=PHASE_MAJOR_ACTIVITY,
            years=formation_years / 2,
            description="Volcanic activity period",
            source=SOURCE_ESTIMATED,
        )
    return None


def _current_state_event(page: KnowledgeBasePage, feature: Feature) -> TimelineEvent:
    intro = (page.intro or page.full_text).strip()
    first_sentence = intro.split(".")[0].strip()
    description = f"{first_sentence}." if first_sentence else feature.name
    return TimelineEvent(
        phase=PHASE_CURRENT_STATE,
        years=0,
        description=description,
        source=SOURCE_KNOWLEDGE_BASE,
        url=page.url or None,
    )
