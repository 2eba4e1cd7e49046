"""
Purpose: Boundary parsing for the booking form.
What it does:
Turns raw form values (strings from the hour box / traffic slider / vehicle
select) into BookingOptions. Unset or unparsable numbers fall back to the
defaults; nothing here raises.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from pricing.models import VehicleClass

DEFAULT_VEHICLE = VehicleClass.BIKE.value
DEFAULT_HOUR = 8
DEFAULT_TRAFFIC_LEVEL = 3

# leading integer, the way a browser's parseInt reads "18:00" or " 7 "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

logger = logging.getLogger(__name__)


def parse_int(raw, default: int) -> int:
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else default

    match = _LEADING_INT.match(str(raw))
    if not match:
        logger.debug("Unparsable number %r, using default %s", raw, default)
        return default
    return int(match.group(1))


def parse_hour(raw) -> int:
    hour = parse_int(raw, DEFAULT_HOUR)
    if not 0 <= hour <= 23:
        logger.debug("Hour %s outside 0-23, using default %s", hour, DEFAULT_HOUR)
        return DEFAULT_HOUR
    return hour


def parse_traffic_level(raw) -> int:
    # no clamping here, the fare estimator clamps
    return parse_int(raw, DEFAULT_TRAFFIC_LEVEL)


@dataclass(frozen=True)
class BookingOptions:
    """
    Options of one booking request.
    vehicle stays the raw string so unknown values reach the default fare table.
    """
    vehicle: str = DEFAULT_VEHICLE
    hour_of_day: int = DEFAULT_HOUR
    traffic_level: int = DEFAULT_TRAFFIC_LEVEL

    @classmethod
    def from_raw(cls, vehicle=None, hour=None, traffic=None) -> BookingOptions:
        if isinstance(vehicle, VehicleClass):
            vehicle = vehicle.value
        return cls(
            vehicle=vehicle or DEFAULT_VEHICLE,
            hour_of_day=parse_hour(hour),
            traffic_level=parse_traffic_level(traffic),
        )

    def replace(self, vehicle=None, hour=None, traffic=None) -> BookingOptions:
        """New options with only the given raw values re-parsed."""
        return BookingOptions.from_raw(
            vehicle=vehicle if vehicle is not None else self.vehicle,
            hour=hour if hour is not None else self.hour_of_day,
            traffic=traffic if traffic is not None else self.traffic_level,
        )


VEHICLE_LABELS = {
    VehicleClass.BIKE: "Motorbike",
    VehicleClass.BIKE_PREMIUM: "Premium motorbike",
    VehicleClass.CAR4: "Car (4 seats)",
    VehicleClass.CAR7: "Car (7 seats)",
    VehicleClass.CAR_LUXURY: "Luxury car",
}


def vehicle_label(vehicle: str, fallback: Optional[str] = "Car") -> str:
    vehicle_class = VehicleClass.lookup(vehicle)
    if vehicle_class is None:
        return fallback
    return VEHICLE_LABELS[vehicle_class]
