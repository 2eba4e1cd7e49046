"""
Purpose: Orchestrator for one rider's booking (the "glue").
What it does:
Owns the selection, the map-picking toggle, the booking options and the
currently shown route. Feeds user events through the selection state machine
and, on book(), asks the router for a route and prices it.

One BookingSession per user; nothing here is module-level state.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from pricing.fare import estimate_fare
from pricing.policy import FarePolicy
from routing.models import Coordinate, PlaceCandidate, RouteSummary
from routing.osrm_client import OSRMError

from . import selection as transitions
from .errors import IncompleteSelectionError, RouteUnavailableError
from .inputs import BookingOptions
from .models import Place, Role, Selection, SelectionState
from .summary import FareSummary

logger = logging.getLogger(__name__)


def _endpoints(selection: Selection):
    return tuple(place.coordinate if place else None for place in (selection.pickup, selection.drop))


class BookingSession:
    """
    Coordinates pickup/drop selection, routing and pricing for one rider.
    """
    def __init__(self, options: Optional[BookingOptions] = None, fare_policy: Optional[FarePolicy] = None):
        self.selection: Selection = transitions.reset()
        self.options = options or BookingOptions()
        self.fare_policy = fare_policy
        self.map_picking = False
        self.route: Optional[RouteSummary] = None
        self.summary: Optional[FareSummary] = None

    @property
    def state(self) -> SelectionState:
        return self.selection.state

    def _discard_route(self) -> None:
        self.route = None
        self.summary = None

    def _select(self, selection: Selection) -> Selection:
        # a route only stays while both endpoints are unchanged
        if _endpoints(selection) != _endpoints(self.selection):
            self._discard_route()
        self.selection = selection
        return selection

    # --- selection events ---

    def pick_search_result(self, role: Role | str, candidate: PlaceCandidate) -> Selection:
        role = Role(role)
        place = Place(coordinate=candidate.coordinate, label=candidate.label)
        return self._select(transitions.pick_search_result(self.selection, role, place))

    def toggle_map_picking(self) -> bool:
        self.map_picking = not self.map_picking
        logger.debug("Map picking %s", "on" if self.map_picking else "off")
        return self.map_picking

    def click_map(self, coordinate: Coordinate) -> bool:
        """
        Returns False when map picking is off and the click was ignored.
        """
        if not self.map_picking:
            return False
        self._select(transitions.click_map(self.selection, Place.from_click(coordinate)))
        return True

    def swap(self) -> Selection:
        self.selection = transitions.swap(self.selection)
        # the old route runs the wrong way now
        self._discard_route()
        return self.selection

    def reset(self) -> Selection:
        self.selection = transitions.reset()
        self._discard_route()
        return self.selection

    def update_options(self, vehicle=None, hour=None, traffic=None) -> BookingOptions:
        self.options = self.options.replace(vehicle=vehicle, hour=hour, traffic=traffic)
        return self.options

    # --- booking ---

    def book(self, router) -> FareSummary:
        """
        Route the current pickup/drop and price the trip.

        Args:
            router: anything with fetch_route(pickup, drop) -> RouteSummary
                    (routing.RouteService in production)

        Raises:
            IncompleteSelectionError: pickup or drop missing, nothing changes
            RouteUnavailableError: provider failed, selection kept, no fare
        """
        if not transitions.can_route(self.selection):
            raise IncompleteSelectionError(
                "Please choose both a pickup and a drop-off point (search or click on the map)."
            )

        self._discard_route()
        pickup = self.selection.pickup.coordinate
        drop = self.selection.drop.coordinate

        try:
            route = router.fetch_route(pickup, drop)
        except (OSRMError, requests.RequestException) as exc:
            logger.warning("No route from %s to %s: %s", pickup.label(), drop.label(), exc)
            raise RouteUnavailableError("No route found between the chosen points.") from exc

        fare = estimate_fare(
            route.distance_km,
            self.options.vehicle,
            self.options.hour_of_day,
            self.options.traffic_level,
            policy=self.fare_policy,
        )
        self.route = route
        self.summary = FareSummary.from_route(route, self.options, fare)
        logger.info("Quoted %s VND for %.2f km (%s)", fare, route.distance_km, self.options.vehicle)
        return self.summary
