"""
Purpose: Display payload for a finished quote.
Echoes the inputs next to the fare; number formatting beyond that
(currency, locale) belongs to whatever renders it.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from pricing.fare import round_fare
from routing.models import RouteSummary

from .inputs import BookingOptions, vehicle_label


@dataclass(frozen=True)
class FareSummary:
    fare: int
    distance_km: float
    duration_min: float
    vehicle: str
    vehicle_label: str
    hour_of_day: int
    traffic_level: int

    @classmethod
    def from_route(cls, route: RouteSummary, options: BookingOptions, fare: int) -> FareSummary:
        return cls(
            fare=fare,
            distance_km=route.distance_km,
            duration_min=route.duration_min,
            vehicle=options.vehicle,
            vehicle_label=vehicle_label(options.vehicle),
            hour_of_day=options.hour_of_day,
            traffic_level=options.traffic_level,
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def lines(self) -> List[str]:
        return [
            f"Distance: {self.distance_km:.2f} km (~{round_fare(self.duration_min)} min)",
            f"Vehicle: {self.vehicle_label}",
            f"Departure: {self.hour_of_day}:00 | Traffic: {self.traffic_level}/10",
            f"Estimated fare: {self.fare:,} VND",
        ]
