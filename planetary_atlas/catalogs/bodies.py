"""Configured celestial bodies.

A body is the namespace for features, regions and timeline overrides.
Lookups accept the display key (``"Mars"``) or the USGS identifier
(``"MARS"``) in any letter case.
"""

from __future__ import annotations

from dataclasses import dataclass

from planetary_atlas.core.constants import ARCHIVE_NAME_TEMPLATE
from planetary_atlas.core.exceptions import UnknownBodyError


@dataclass(frozen=True, slots=True)
class BodyConfig:
    """Static configuration of one body.

    Attributes:
        key: Display key, also the key of the per-body catalogs.
        usgs_name: USGS nomenclature identifier (``"MARS"``); keys the
            estimation model and timeline overrides.
    """

    key: str
    usgs_name: str

    @property
    def archive_name(self) -> str:
        """File name of the body's nomenclature archive."""
        return ARCHIVE_NAME_TEMPLATE.format(usgs_name=self.usgs_name)


BODIES: dict[str, BodyConfig] = {
    body.key: body
    for body in (
        BodyConfig("Moon", "MOON"),
        BodyConfig("Mars", "MARS"),
        BodyConfig("Mercury", "MERCURY"),
        BodyConfig("Vesta", "VESTA"),
        BodyConfig("Europa", "EUROPA"),
        BodyConfig("Io", "IO"),
    )
}

_BY_IDENTIFIER = {
    alias.casefold(): body for body in BODIES.values() for alias in (body.key, body.usgs_name)
}


def get_body(identifier: object) -> BodyConfig:
    """Return the body for a display key or USGS identifier.

    Raises:
        UnknownBodyError: If *identifier* is not a configured body.
    """
    if isinstance(identifier, BodyConfig):
        return identifier
    if not isinstance(identifier, str) or not identifier.strip():
        raise UnknownBodyError(identifier)
    body = _BY_IDENTIFIER.get(identifier.strip().casefold())
    if body is None:
        raise UnknownBodyError(identifier)
    return body


def list_bodies() -> list[str]:
    """Return the configured display keys, in catalog order."""
    return list(BODIES)
