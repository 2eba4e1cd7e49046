"""
Purpose: Fare estimation.
Turns a trip distance, vehicle class, departure hour and traffic level into
an integer VND amount.

Pure function, no I/O. Every numeric input is accepted: traffic is clamped,
a negative distance just lowers the fare until the minimum kicks in.
"""

from __future__ import annotations

import math
import sys
from typing import Optional

from .models import FareQuery, FareTable, VehicleClass
from .policy import FarePolicy, default_fare_policy

_DEFAULT_POLICY = default_fare_policy()


def fare_table_for(vehicle: str | VehicleClass, policy: Optional[FarePolicy] = None) -> FareTable:
    """
    Fare table for a vehicle class. Unknown strings get the default table.
    """
    policy = policy or _DEFAULT_POLICY
    vehicle_class = VehicleClass.lookup(vehicle)
    if vehicle_class is None or vehicle_class not in policy.tables:
        return policy.default_table
    return policy.tables[vehicle_class]


def is_peak_hour(hour_of_day: int, policy: Optional[FarePolicy] = None) -> bool:
    policy = policy or _DEFAULT_POLICY
    return any(start <= hour_of_day <= end for start, end in policy.peak_windows)


def traffic_multiplier(traffic_level: float, policy: Optional[FarePolicy] = None) -> float:
    policy = policy or _DEFAULT_POLICY
    level = min(policy.max_traffic_level, max(policy.min_traffic_level, traffic_level))
    return 1 + level * policy.traffic_rate / 2


def round_fare(amount: float) -> int:
    """
    Round half up to a whole currency unit (2.5 -> 3, 149040.5 -> 149041).
    """
    return int(math.floor(amount + 0.5))


def estimate_fare(
        distance_km: float,
        vehicle: str | VehicleClass,
        hour_of_day: int,
        traffic_level: int,
        policy: Optional[FarePolicy] = None,
) -> int:
    """
    Estimate the fare for one trip.

    Args:
        distance_km: route length in kilometres
        vehicle: VehicleClass or raw form value ("bike", "car4", ...)
        hour_of_day: departure hour, 0-23
        traffic_level: congestion level, clamped to 0-10
        policy: FarePolicy override (tests / tuning)

    Returns:
        fare in VND, never below the vehicle's minimum.
    """
    policy = policy or _DEFAULT_POLICY
    table = fare_table_for(vehicle, policy)

    fare = table.base + distance_km * table.per_km

    if is_peak_hour(hour_of_day, policy):
        fare *= policy.peak_multiplier

    fare *= traffic_multiplier(traffic_level, policy)

    # a NaN distance falls through to the minimum as well
    if math.isnan(fare) or fare < table.minimum:
        fare = table.minimum
    # an infinite distance saturates at the largest float
    if math.isinf(fare):
        fare = sys.float_info.max

    return round_fare(fare)


def estimate(query: FareQuery, policy: Optional[FarePolicy] = None) -> int:
    """Convenience wrapper over estimate_fare for a FareQuery."""
    return estimate_fare(
        query.distance_km,
        query.vehicle,
        query.hour_of_day,
        query.traffic_level,
        policy=policy,
    )
