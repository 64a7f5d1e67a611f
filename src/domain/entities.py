"""
Domain entities.

``School`` is immutable once created: the service only ever inserts and
reads schools, so the entity is a frozen dataclass.  ``RankedSchool``
pairs a school with its full-precision distance from a reference point;
rounding is applied only when the result is serialised.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class School:
    id: Optional[int]
    name: str
    address: str
    latitude: float
    longitude: float

    @property
    def location(self) -> Location:
        return Location(self.latitude, self.longitude)


@dataclass(frozen=True)
class RankedSchool:
    school: School
    distance_km: float

    @property
    def rounded_distance(self) -> float:
        """Distance in km quantised to 2 decimals for display."""
        return round(self.distance_km, 2)

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self.school)
        data["distance"] = self.rounded_distance
        return data
