"""Zones: named polygon geofences and the geometry used to query them.

Positions are ``(lat, lng)`` tuples in degrees throughout, including
zone rings.  :data:`GUADALAJARA_ZONES` is the shipped set of ten
districts around the default base coordinate.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pyflota.models.zone import Zone, ZoneOccupancy


def create_rectangle(
    north_west: tuple[float, float],
    south_east: tuple[float, float],
) -> tuple[tuple[float, float], ...]:
    """Closed ring for the axis-aligned rectangle spanned by two corners."""
    north, west = north_west
    south, east = south_east
    return (
        (north, west),
        (north, east),
        (south, east),
        (south, west),
        (north, west),
    )


def _zone(
    zone_id: str,
    name: str,
    north_west: tuple[float, float],
    south_east: tuple[float, float],
    *tags: str,
) -> Zone:
    return Zone(id=zone_id, name=name, ring=create_rectangle(north_west, south_east), tags=tags)


GUADALAJARA_ZONES: tuple[Zone, ...] = (
    _zone("zona-centro", "ZONA CENTRO", (20.685, -103.360), (20.665, -103.340), "comercial", "centro", "historico"),
    _zone("zona-zapopan", "ZAPOPAN", (20.750, -103.420), (20.710, -103.380), "residencial", "zona-norte"),
    _zone(
        "zona-tlaquepaque",
        "TLAQUEPAQUE",
        (20.650, -103.320),
        (20.610, -103.280),
        "industrial",
        "artesanal",
        "zona-sur",
    ),
    _zone("zona-tonala", "TONALÁ", (20.640, -103.260), (20.600, -103.220), "comercial", "zona-este"),
    _zone(
        "zona-gdl-oeste",
        "GUADALAJARA OESTE",
        (20.690, -103.400),
        (20.650, -103.360),
        "residencial",
        "parques",
        "zona-oeste",
    ),
    _zone("zona-gdl-norte", "GUADALAJARA NORTE", (20.720, -103.380), (20.680, -103.340), "mixto", "zona-norte"),
    _zone("zona-gdl-sur", "GUADALAJARA SUR", (20.660, -103.380), (20.620, -103.340), "servicios", "zona-sur"),
    _zone("zona-aeropuerto", "AEROPUERTO", (20.540, -103.330), (20.500, -103.280), "aeropuerto", "transporte"),
    _zone(
        "zona-universidad",
        "UNIVERSIDAD",
        (20.750, -103.380),
        (20.710, -103.340),
        "educacion",
        "universidad",
        "zona-oeste",
    ),
    _zone("zona-periferico", "PERIFÉRICO", (20.730, -103.450), (20.690, -103.410), "transporte", "periferico"),
)


def zone_centroid(zone: Zone) -> tuple[float, float]:
    """Vertex average of *zone*, used to anchor its map label."""
    vertices = zone.vertices
    lat = sum(vertex[0] for vertex in vertices) / len(vertices)
    lng = sum(vertex[1] for vertex in vertices) / len(vertices)
    return (lat, lng)


def point_in_zone(point: tuple[float, float], zone: Zone) -> bool:
    """Ray-casting test for *point* against the zone ring.

    Points exactly on an edge may fall either way.
    """
    lat, lng = point
    ring = zone.ring
    inside = False
    j = len(ring) - 1
    for i in range(len(ring)):
        lat_i, lng_i = ring[i]
        lat_j, lng_j = ring[j]
        if (lat_i > lat) != (lat_j > lat):
            crossing = (lng_j - lng_i) * (lat - lat_i) / (lat_j - lat_i) + lng_i
            if lng < crossing:
                inside = not inside
        j = i
    return inside


def zone_bounds(zone: Zone) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return ``((south, west), (north, east))`` for *zone*."""
    lats = [vertex[0] for vertex in zone.ring]
    lngs = [vertex[1] for vertex in zone.ring]
    return ((min(lats), min(lngs)), (max(lats), max(lngs)))


def unique_tags(zones: Iterable[Zone]) -> list[str]:
    return sorted({tag for zone in zones for tag in zone.tags})


def filter_zones(zones: Iterable[Zone], query: str = "", tags: Sequence[str] = ()) -> list[Zone]:
    """Zones whose name contains *query* (case-insensitive) and that carry any of *tags*.

    An empty query or an empty tag list does not filter.
    """
    needle = query.strip().casefold()
    wanted = set(tags)
    return [
        zone
        for zone in zones
        if (not needle or needle in zone.name.casefold()) and (not wanted or wanted.intersection(zone.tags))
    ]


def zones_containing(point: tuple[float, float], zones: Iterable[Zone]) -> list[Zone]:
    return [zone for zone in zones if point_in_zone(point, zone)]


def zone_occupancy(
    zones: Iterable[Zone],
    vehicle_positions: Sequence[tuple[float, float]],
    event_positions: Sequence[tuple[float, float]],
) -> list[ZoneOccupancy]:
    """Count the vehicles and events inside each zone.

    A position inside overlapping zones counts toward each of them.
    """
    return [
        ZoneOccupancy(
            zone=zone,
            vehicle_count=sum(1 for position in vehicle_positions if point_in_zone(position, zone)),
            event_count=sum(1 for position in event_positions if point_in_zone(position, zone)),
        )
        for zone in zones
    ]
