"""
Purpose: Domain models for the routing capability.
What it does:
- Coordinate (lat, lon) with range checks, so bad points are rejected at the boundary
- RouteSummary: the normalized OSRM /route output
- PlaceCandidate: one geocoder hit (label + coordinate)

Rule: No HTTP calls here. Models only.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class InvalidCoordinateError(ValueError):
    """Raised when a latitude/longitude pair is not a usable point."""
    pass


@dataclass(frozen=True)
class Coordinate:
    """
    A point on the map in decimal degrees.
    Latitude in [-90, 90], longitude in [-180, 180], both finite.
    """
    lat: float
    lon: float

    def __post_init__(self):
        if not (math.isfinite(self.lat) and math.isfinite(self.lon)):
            raise InvalidCoordinateError(f"Coordinate must be finite, got ({self.lat}, {self.lon})")
        if not -90 <= self.lat <= 90:
            raise InvalidCoordinateError(f"Latitude out of range: {self.lat}")
        if not -180 <= self.lon <= 180:
            raise InvalidCoordinateError(f"Longitude out of range: {self.lon}")

    @classmethod
    def parse(cls, lat, lon) -> Coordinate:
        """
        Build a coordinate from numbers or numeric strings
        (Nominatim returns "10.7769", "106.7009").
        """
        try:
            return cls(float(lat), float(lon))
        except (TypeError, ValueError) as exc:
            if isinstance(exc, InvalidCoordinateError):
                raise
            raise InvalidCoordinateError(f"Not a coordinate: ({lat!r}, {lon!r})") from exc

    def as_tuple(self) -> LatLon:
        return (self.lat, self.lon)

    def label(self) -> str:
        """Display text used when a point comes from a map click."""
        return f"{self.lat:.6f}, {self.lon:.6f}"


@dataclass(frozen=True)
class RouteSummary:
    """
    What we keep from an OSRM route.
    geometry is only filled when the client asked for it.
    """
    distance_m: float
    duration_s: float
    geometry: List[LatLon] = field(default_factory=list)

    @property
    def distance_km(self) -> float:
        return self.distance_m / 1000.0

    @property
    def duration_min(self) -> float:
        return self.duration_s / 60.0


@dataclass(frozen=True)
class PlaceCandidate:
    """
    One geocoding hit, in the order the provider ranked it.
    """
    label: str
    coordinate: Coordinate
