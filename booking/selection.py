"""
Pickup/drop selection state machine.

    EMPTY --click--> PICKUP_ONLY --click--> BOTH --click--> PICKUP_ONLY (new cycle)
    DROP_ONLY --click--> BOTH

Search picks set either role from any state, swap exchanges the two slots,
reset goes back to EMPTY. Every transition is a pure function returning a new
Selection; nothing here calls routing.
"""
from booking.models import Place, Role, Selection, SelectionState


def reset() -> Selection:
    return Selection()


def pick_search_result(selection: Selection, role: Role, place: Place) -> Selection:
    """
    Search can fill either role at any time, overwriting what was there.
    """
    if role is Role.PICKUP:
        return Selection.of(place, selection.drop)
    return Selection.of(selection.pickup, place)


def click_map(selection: Selection, place: Place) -> Selection:
    """
    Rotating assignment: first free slot wins, pickup before drop.
    A click when both are set starts over with only the new pickup.
    """
    if selection.state is SelectionState.EMPTY:
        return Selection(SelectionState.PICKUP_ONLY, pickup=place)
    if selection.state is SelectionState.DROP_ONLY:
        return Selection(SelectionState.BOTH, pickup=place, drop=selection.drop)
    if selection.state is SelectionState.PICKUP_ONLY:
        return Selection(SelectionState.BOTH, pickup=selection.pickup, drop=place)
    return Selection(SelectionState.PICKUP_ONLY, pickup=place)


def swap(selection: Selection) -> Selection:
    """Exchange pickup and drop, labels included. Holes move too."""
    return Selection.of(selection.drop, selection.pickup)


def can_route(selection: Selection) -> bool:
    return selection.state is SelectionState.BOTH
