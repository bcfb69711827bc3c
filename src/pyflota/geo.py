"""Geodesic helpers for generated positions.

Positions are ``(lat, lng)`` tuples in degrees.
"""

from __future__ import annotations

import math

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Great-circle distance between *a* and *b* in meters."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def positions_close(a: tuple[float, float], b: tuple[float, float], threshold_m: float) -> bool:
    return haversine_m(a, b) <= threshold_m


def midpoint(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float]:
    """Geographic midpoint of *a* and *b*."""
    lat1, lon1 = math.radians(a[0]), math.radians(a[1])
    lat2, lon2 = math.radians(b[0]), math.radians(b[1])
    bx = math.cos(lat2) * math.cos(lon2 - lon1)
    by = math.cos(lat2) * math.sin(lon2 - lon1)
    lat3 = math.atan2(math.sin(lat1) + math.sin(lat2), math.sqrt((math.cos(lat1) + bx) ** 2 + by**2))
    lon3 = lon1 + math.atan2(by, math.cos(lat1) + bx)
    return (math.degrees(lat3), math.degrees(lon3))


def destination_point(
    origin: tuple[float, float],
    distance_m: float,
    bearing_deg: float,
) -> tuple[float, float]:
    """Point *distance_m* meters from *origin* along *bearing_deg* (0 = north).

    Great-circle destination on the same sphere as :func:`haversine_m`, so
    ``haversine_m(origin, destination_point(origin, d, b))`` is ``d``.
    """
    lat1, lon1 = math.radians(origin[0]), math.radians(origin[1])
    bearing = math.radians(bearing_deg)
    angular = distance_m / EARTH_RADIUS_M
    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular) + math.cos(lat1) * math.sin(angular) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(angular) * math.cos(lat1),
        math.cos(angular) - math.sin(lat1) * math.sin(lat2),
    )
    return (math.degrees(lat2), math.degrees(lon2))


def jitter(origin: tuple[float, float], lat_draw: float, lng_draw: float, span_deg: float) -> tuple[float, float]:
    """Offset *origin* by ``(draw - 0.5) * span_deg`` on each axis."""
    return (
        origin[0] + (lat_draw - 0.5) * span_deg,
        origin[1] + (lng_draw - 0.5) * span_deg,
    )
