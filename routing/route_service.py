#Purpose: Route computation for a booking.
#Returns the route information the booking flow needs:
#distance / duration for pricing
#polyline geometry for the map (when requested)
#Uses OSRM /route through OSRMClient; callers never see OSRM's dict shape.

from typing import Optional

from .models import Coordinate, RouteSummary
from .osrm_client import OSRMClient


class RouteService:
    """
    Turns two booking points into a RouteSummary.
    Anything with a compute_route(coords, include_geometry=...) method works
    as the client, so tests can pass a mock.
    """
    def __init__(self, osrm: Optional[OSRMClient] = None, include_geometry: bool = True):
        self.osrm = osrm or OSRMClient()
        self.include_geometry = include_geometry

    def fetch_route(self, pickup: Coordinate, drop: Coordinate) -> RouteSummary:
        """
        Raises OSRMError when OSRM cannot route between the points.
        """
        route = self.osrm.compute_route(
            [pickup.as_tuple(), drop.as_tuple()],
            include_geometry=self.include_geometry,
        )
        return RouteSummary(
            distance_m=route["distance"],
            duration_s=route["duration"],
            geometry=list(route.get("geometry") or []),
        )
