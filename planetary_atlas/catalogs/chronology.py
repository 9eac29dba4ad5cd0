"""Geologic period tables for Mars and the Moon.

Ages are years before present. Mars periods follow Tanaka et al. (2014)
and Hartmann & Neukum (2001); lunar periods follow the standard
Wilhelms system.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeologicPeriod:
    """A named interval of a body's history, ``start`` older than ``end``."""

    name: str
    start: float
    end: float
    description: str = ""

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2

    def contains(self, years: float) -> bool:
        return self.end <= years <= self.start


MARS_PERIODS: tuple[GeologicPeriod, ...] = (
    GeologicPeriod("Pre-Noachian", 4.5e9, 4.1e9, "Planet formation to earliest preserved crust"),
    GeologicPeriod("Noachian", 4.1e9, 3.7e9, "Heavy bombardment, valley networks, possible oceans"),
    GeologicPeriod("Hesperian", 3.7e9, 3.0e9, "Widespread volcanism, outflow channels"),
    GeologicPeriod("Amazonian", 3.0e9, 0, "Cold, dry climate with limited volcanism"),
)

LUNAR_PERIODS: tuple[GeologicPeriod, ...] = (
    GeologicPeriod("Pre-Nectarian", 4.5e9, 3.92e9, "Moon formation to the Nectaris impact"),
    GeologicPeriod("Nectarian", 3.92e9, 3.85e9, "Major basin-forming impacts"),
    GeologicPeriod("Lower Imbrian", 3.85e9, 3.8e9, "Imbrium impact and early mare volcanism"),
    GeologicPeriod("Upper Imbrian", 3.8e9, 3.2e9, "Peak mare volcanism"),
    GeologicPeriod("Eratosthenian", 3.2e9, 1.1e9, "Declining volcanism, moderate cratering"),
    GeologicPeriod("Copernican", 1.1e9, 0, "Recent craters, minimal volcanism"),
)

PERIODS_BY_BODY: dict[str, tuple[GeologicPeriod, ...]] = {
    "MARS": MARS_PERIODS,
    "MOON": LUNAR_PERIODS,
}


def period_for_age(usgs_name: str, years: float) -> GeologicPeriod | None:
    """Return the period of *usgs_name* that contains *years*, if tabulated.

    At a boundary the younger period wins.
    """
    for period in reversed(PERIODS_BY_BODY.get(usgs_name, ())):
        if period.contains(years):
            return period
    return None
