"""
Purpose: Core data models for the pricing domain.
What it does:
Defines vehicle classes, the per-class fare table record and the fare query.

Rule: No pricing math here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VehicleClass(str, Enum):
    """
    Vehicle classes a rider can book.
    Values are the raw strings the booking form sends.
    """
    BIKE = "bike"
    BIKE_PREMIUM = "bike_premium"
    CAR4 = "car4"
    CAR7 = "car7"
    CAR_LUXURY = "car_luxury"

    @classmethod
    def lookup(cls, value: str | VehicleClass) -> VehicleClass | None:
        """Returns the matching class, or None for an unknown string."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class FareTable:
    """
    Pricing parameters for one vehicle class, in VND.
    """
    base: int
    per_km: int
    minimum: int


@dataclass(frozen=True)
class FareQuery:
    """
    Everything the estimator needs for one quote.
    vehicle stays a plain string when the form sends something unknown.
    """
    distance_km: float
    vehicle: str | VehicleClass
    hour_of_day: int = 8
    traffic_level: int = 3
