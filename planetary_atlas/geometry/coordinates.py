"""Conversions between latitude/longitude and points on a sphere.

Convention (shared with the globe renderer): the polar axis is ``y``,
``phi = 90 - lat`` is the polar angle and ``theta = -lon`` the azimuth, so
longitude increases clockwise when viewed from above the north pole:

    x = r * sin(phi) * cos(theta)
    y = r * cos(phi)
    z = r * sin(phi) * sin(theta)

``to_cartesian`` and ``to_spherical`` use the same convention and invert
each other to floating-point tolerance. Longitude is undefined at the
poles. NaN inputs propagate as NaN; nothing here raises.
"""

from __future__ import annotations

import math


def to_cartesian(lat: float, lon: float, radius: float = 1.0) -> tuple[float, float, float]:
    """Map ``(lat, lon)`` in degrees to ``(x, y, z)`` on a sphere of *radius*."""
    phi = math.radians(90.0 - lat)
    theta = math.radians(-lon)
    return (
        radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
    )


def to_spherical(x: float, y: float, z: float) -> tuple[float, float]:
    """Map a point ``(x, y, z)`` back to ``(lat, lon)`` in degrees.

    Longitude is returned in ``(-180, 180]``. The origin has no direction
    and maps to ``(nan, nan)``.
    """
    r = math.sqrt(x * x + y * y + z * z)
    if r == 0:
        return (math.nan, math.nan)
    ratio = y / r
    # Rounding can push |y / r| a hair past 1.
    if ratio > 1.0:
        ratio = 1.0
    elif ratio < -1.0:
        ratio = -1.0
    lat = 90.0 - math.degrees(math.acos(ratio))
    lon = -math.degrees(math.atan2(z, x))
    if lon <= -180.0:
        lon += 360.0
    return (lat, lon)


def normalize_longitude(lon: float) -> float:
    """Wrap *lon* into ``[-180, 180]``. Values already in range are unchanged."""
    if not math.isfinite(lon):
        return lon
    while lon > 180.0:
        lon -= 360.0
    while lon < -180.0:
        lon += 360.0
    return lon
