"""
Purpose: Domain models for the booking capability.
What it does:
- Defines core data structures:
- Place (coordinate + display label)
- Selection (explicit state, pickup place, drop place)

Defines enums/constants:
- Role = PICKUP | DROP
- SelectionState = EMPTY | PICKUP_ONLY | DROP_ONLY | BOTH

Rule: No routing calls, no transition logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from routing.models import Coordinate


class Role(str, Enum):
    PICKUP = "pickup"
    DROP = "drop"


class SelectionState(Enum):
    EMPTY = "EMPTY"
    PICKUP_ONLY = "PICKUP_ONLY"
    DROP_ONLY = "DROP_ONLY"
    BOTH = "BOTH"


def state_for(pickup: Optional[Place], drop: Optional[Place]) -> SelectionState:
    if pickup is None:
        return SelectionState.EMPTY if drop is None else SelectionState.DROP_ONLY
    return SelectionState.PICKUP_ONLY if drop is None else SelectionState.BOTH


@dataclass(frozen=True)
class Place:
    """
    A chosen point plus the text shown in its input box
    (geocoder label, or "lat, lon" for a map click).
    """
    coordinate: Coordinate
    label: str

    @classmethod
    def from_click(cls, coordinate: Coordinate) -> Place:
        return cls(coordinate=coordinate, label=coordinate.label())


@dataclass(frozen=True)
class Selection:
    """
    The pickup/drop pair of one booking session.
    state is stored, not guessed from the slots, and must agree with them.
    """
    state: SelectionState = SelectionState.EMPTY
    pickup: Optional[Place] = None
    drop: Optional[Place] = None

    def __post_init__(self):
        expected = state_for(self.pickup, self.drop)
        if self.state is not expected:
            raise ValueError(f"Selection state {self.state.value} does not match slots ({expected.value})")

    @staticmethod
    def of(pickup: Optional[Place], drop: Optional[Place]) -> Selection:
        return Selection(state=state_for(pickup, drop), pickup=pickup, drop=drop)

    def place_for(self, role: Role) -> Optional[Place]:
        return self.pickup if role is Role.PICKUP else self.drop
