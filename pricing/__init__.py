"""
Pricing domain package.

Public API:
- Models: VehicleClass, FareTable, FareQuery
- Policy: FarePolicy, default_fare_policy
- Estimation: estimate_fare, estimate, fare_table_for
"""
from .models import VehicleClass, FareTable, FareQuery
from .policy import FarePolicy, default_fare_policy
from .fare import estimate_fare, estimate, fare_table_for

__all__ = ["VehicleClass",
           "FareTable",
             "FareQuery",
               "FarePolicy",
               "default_fare_policy",
               "estimate_fare",
               "estimate",
               "fare_table_for",
               ]
