#Marks routing as a package.
#Re-exports clean public APIs (OSRMClient, RouteService, NominatimClient, models)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .models import Coordinate, InvalidCoordinateError, LatLon, PlaceCandidate, RouteSummary
from .osrm_client import OSRMClient, OSRMError
from .route_service import RouteService
from .nominatim_client import NominatimClient

__all__ = [
           "Coordinate",
             "InvalidCoordinateError",
             "LatLon",
             "PlaceCandidate",
             "RouteSummary",
             "OSRMClient",
             "OSRMError",
             "RouteService",
             "NominatimClient",
             ]
