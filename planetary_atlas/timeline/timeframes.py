"""Parsing and formatting of human-readable geological ages."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from planetary_atlas.core.constants import BILLION, MILLION, THOUSAND

if TYPE_CHECKING:
    from collections.abc import Iterable

    from planetary_atlas.models.timeline import TimelineEvent

PRESENT_DAY = "Present day"

# Unrecognised "ancient" ages are placed at 4 billion years
ANCIENT_YEARS = 4 * BILLION

UNIT_MULTIPLIERS: dict[str, float] = {
    "billion": BILLION,
    "million": MILLION,
    "thousand": THOUSAND,
}

# "3.5 billion", "~2 million", "0.1-4 billion": a range takes its first bound
_UNIT_PATTERNS = tuple(
    (re.compile(rf"([\d.]+)(?:-[\d.]+)?\s*{unit}", re.IGNORECASE), multiplier)
    for unit, multiplier in UNIT_MULTIPLIERS.items()
)


def to_years(value: str | float, unit: str) -> float:
    """Convert a magnitude and unit word (``"billion"``, ...) to years."""
    return float(value) * UNIT_MULTIPLIERS[unit.lower()]


def parse_timeframe_to_years(timeframe: str | None) -> float | None:
    """Parse a timeframe such as ``"~3.5 billion years ago"`` to years.

    Units are tried largest first. ``"Present day"`` and empty input are
    ``0``; text mentioning an ancient age without a number is
    ``ANCIENT_YEARS``. Anything else returns ``None``.
    """
    if not timeframe or timeframe == PRESENT_DAY:
        return 0.0

    for pattern, multiplier in _UNIT_PATTERNS:
        match = pattern.search(timeframe)
        if match is None:
            continue
        try:
            years = float(match.group(1)) * multiplier
        except ValueError:
            # "1.2.3 billion": malformed number, try the next unit
            continue
        if math.isfinite(years):
            return years

    lowered = timeframe.lower()
    if "ancient" in lowered or "billions of years ago" in lowered:
        return ANCIENT_YEARS
    return None


def format_years(years: float) -> str:
    """Compact label: ``"3.70 Bya"``, ``"25.0 Mya"``, ``"12 Kya"``, ``"Present"``."""
    if years == 0:
        return "Present"
    if years >= BILLION:
        return f"{years / BILLION:.2f} Bya"
    if years >= MILLION:
        return f"{years / MILLION:.1f} Mya"
    if years >= THOUSAND:
        return f"{years / THOUSAND:.0f} Kya"
    return f"{_plain_number(years)} years ago"


def format_years_to_timeframe(years: float) -> str:
    """Long label: ``"3.7 billion years ago"``, ``"Present day"``."""
    if years == 0:
        return PRESENT_DAY
    if years >= BILLION:
        return f"{years / BILLION:.1f} billion years ago"
    if years >= MILLION:
        return f"{years / MILLION:.0f} million years ago"
    if years >= THOUSAND:
        return f"{years / THOUSAND:.0f} thousand years ago"
    return f"{_plain_number(years)} years ago"


def sort_for_display(events: Iterable[TimelineEvent]) -> list[TimelineEvent]:
    """Return events oldest first. Ties keep their creation order."""
    return sorted(events, key=lambda event: -event.years)


def _plain_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
