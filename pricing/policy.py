"""
Purpose: Central configuration for fare estimation.
What it does:

Stores all tunable pricing parameters:

FARE_TABLES per vehicle class (base, per km, minimum)
DEFAULT_TABLE for unknown vehicle strings
PEAK_WINDOWS = [(7, 9), (17, 19)], PEAK_MULTIPLIER = 1.2
TRAFFIC_LEVEL range 0..10, 2.5% per level

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .models import FareTable, VehicleClass


def _standard_tables() -> Dict[VehicleClass, FareTable]:
    return {
        VehicleClass.BIKE: FareTable(base=10000, per_km=8000, minimum=15000),
        VehicleClass.BIKE_PREMIUM: FareTable(base=15000, per_km=10000, minimum=20000),
        VehicleClass.CAR4: FareTable(base=20000, per_km=12000, minimum=30000),
        VehicleClass.CAR7: FareTable(base=25000, per_km=15000, minimum=40000),
        VehicleClass.CAR_LUXURY: FareTable(base=50000, per_km=25000, minimum=100000),
    }


@dataclass(frozen=True)
class FarePolicy:
    """
    Central configuration for fare estimation.

    Notes:
    - peak windows are closed integer hour ranges, both ends included.
    - the traffic multiplier is 1 + level * traffic_rate / 2, with level
      clamped to [min_traffic_level, max_traffic_level].
    """

    # --- Fare tables ---
    tables: Dict[VehicleClass, FareTable] = field(default_factory=_standard_tables)

    # Used when the vehicle string is not a known class.
    default_table: FareTable = FareTable(base=15000, per_km=12000, minimum=30000)

    # --- Peak hours ---
    peak_windows: List[Tuple[int, int]] = field(default_factory=lambda: [(7, 9), (17, 19)])
    peak_multiplier: float = 1.2

    # --- Traffic ---
    # Each level adds traffic_rate / 2 (2.5%) to the running fare.
    min_traffic_level: int = 0
    max_traffic_level: int = 10
    traffic_rate: float = 0.05

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        missing = [vehicle.value for vehicle in VehicleClass if vehicle not in self.tables]
        if missing:
            raise ValueError(f"Missing fare tables for: {', '.join(missing)}")

        for table in list(self.tables.values()) + [self.default_table]:
            if table.base < 0 or table.per_km < 0 or table.minimum < 0:
                raise ValueError(f"Fare table values must be >= 0, got {table}")

        for start, end in self.peak_windows:
            if not 0 <= start <= end <= 23:
                raise ValueError(f"Invalid peak window ({start}, {end})")

        if self.peak_multiplier < 1:
            raise ValueError("peak_multiplier must be >= 1")

        if self.min_traffic_level > self.max_traffic_level:
            raise ValueError("min_traffic_level must be <= max_traffic_level")


def default_fare_policy() -> FarePolicy:
    """
    Convenience factory for the default policy.
    """
    policy = FarePolicy()
    policy.validate()
    return policy
