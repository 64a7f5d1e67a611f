"""
Proximity Ranking
=================

Orders a set of schools by great-circle distance from a reference point.

1. Reject a reference point whose components are not finite numbers.
2. Compute the full-precision Haversine distance for every school.
3. Stable sort ascending on that distance.  Schools at equal distance keep
   their input order (the store returns them by primary key).

Stored coordinates are not re-validated here: an out-of-range latitude
that somehow reached the table is ranked with the same formula.

Complexity: O(N log N) for N schools.
"""

from __future__ import annotations

from typing import Iterable

from .distance import haversine_km
from .entities import Location, RankedSchool, School
from .errors import InvalidCoordinate

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def validate_coordinates(latitude: float, longitude: float) -> Location:
    """Write-time check: both components finite and inside their ranges."""
    try:
        location = Location(float(latitude), float(longitude))
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(
            "Latitude and longitude must be numbers"
        ) from exc
    if not location.is_finite():
        raise InvalidCoordinate("Latitude and longitude must be finite numbers")
    if not LATITUDE_RANGE[0] <= location.latitude <= LATITUDE_RANGE[1]:
        raise InvalidCoordinate("Latitude must be between -90 and 90")
    if not LONGITUDE_RANGE[0] <= location.longitude <= LONGITUDE_RANGE[1]:
        raise InvalidCoordinate("Longitude must be between -180 and 180")
    return location


def rank_by_proximity(
    origin: Location, schools: Iterable[School]
) -> list[RankedSchool]:
    """Return every school paired with its distance from *origin*, nearest first."""
    if not (
        isinstance(origin.latitude, (int, float))
        and isinstance(origin.longitude, (int, float))
        and origin.is_finite()
    ):
        raise InvalidCoordinate(
            "Reference latitude and longitude must be finite numbers"
        )

    ranked = []
    for s in schools:
        loc = s.location
        ranked.append(
            RankedSchool(
                school=s,
                distance_km=haversine_km(
                    origin.latitude, origin.longitude, loc.latitude, loc.longitude
                ),
            )
        )
    # sorted() is stable, so ties preserve input order.
    return sorted(ranked, key=lambda r: r.distance_km)


__all__ = [
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
    "rank_by_proximity",
    "validate_coordinates",
]
