#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#error handling (non-Ok codes, bad JSON)
#parsing response JSON into our internal shape
#It should not contain booking rules or pricing.


from dotenv import load_dotenv
import logging
import os
from typing import List, Dict, Any, Optional
import requests

from .models import LatLon

# Read OSRM base URL from environment
# Example in .env:
# BASE_URL=http://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("BASE_URL", "https://router.project-osrm.org")

logger = logging.getLogger(__name__)


class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, profile: str = "driving", timeout: int = 5, base_url: Optional[str] = None):
        self.base_url = (base_url or BASE_URL or "").rstrip("/")
        self.timeout = timeout #the time to wait for a response from OSRM before giving up
        self.profile = profile #the mode of transportation (driving, walking, cycling)

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set BASE_URL in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get(self, url: str, params: Dict[str, str]) -> Dict[str, Any]:
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise OSRMError(f"OSRM request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise OSRMError(f"OSRM returned non-JSON response (HTTP {response.status_code})") from exc

        #validating OSRM response
        if not isinstance(data, dict):
            raise OSRMError(f"OSRM returned an unexpected payload: {type(data).__name__}")
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', data.get('code', 'Unknown error'))}")
        return data

    #----------------
    # Public methods
    #----------------
    def compute_route(self, coordinates: List[LatLon],
                      include_geometry: bool = False,
                      ) -> Dict[str, Any]:
        """
        calls the OSRM /route endpoint with the given coordinates and
        returns a dict with distance, duration and (optionally) geometry

        Returns:
            {
                "distance": float, # in meters
                "duration": float, # in seconds
                "geometry": [(lat, lon), ...], # empty unless include_geometry
            }
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"
        params = {"overview": "false"}
        if include_geometry:
            params = {"overview": "full", "geometries": "geojson"}

        logger.debug("OSRM route request: %s", url)
        data = self._get(url, params)

        routes = data.get("routes") or []
        if not routes:
            raise OSRMError("OSRM returned no routes")
        try:
            route = routes[0] #take the first route (OSRM may return alternatives)

            geometry = []
            if include_geometry and route.get("geometry"):
                # GeoJSON LineString is [lon, lat]; flip back to our (lat, lon)
                geometry = [(lat, lon) for lon, lat in route["geometry"]["coordinates"]]

            #Normalize output to internal format
            return {
                "distance": float(route["distance"]),
                "duration": float(route["duration"]),
                "geometry": geometry,
            }
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise OSRMError(f"Malformed OSRM route: {exc!r}") from exc
