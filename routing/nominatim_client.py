#Purpose: The Nominatim (OpenStreetMap geocoder) adapter.
#Sole responsibility: turn a free-text query into ranked place candidates.
#Encapsulates Nominatim-specific details:
#query params (format, countrycodes, limit, addressdetails)
#headers (Accept-Language, User-Agent required by the usage policy)
#parsing "lat"/"lon" numeric strings into Coordinates
#A failed lookup is "no results", never an exception for the caller.

from dotenv import load_dotenv
import logging
import os
from typing import List, Optional
import requests

from .models import Coordinate, InvalidCoordinateError, PlaceCandidate

# Example in .env:
# NOMINATIM_URL=https://nominatim.openstreetmap.org
# NOMINATIM_COUNTRY_CODES=vn
load_dotenv()
NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org")
NOMINATIM_COUNTRY_CODES = os.getenv("NOMINATIM_COUNTRY_CODES", "vn")
NOMINATIM_LANGUAGE = os.getenv("NOMINATIM_LANGUAGE", "vi")
NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "ride-fare-estimator/0.1")

# shorter queries are never sent
MIN_QUERY_LENGTH = 3

logger = logging.getLogger(__name__)


class NominatimClient:
    """
    Nominatim Adapter / Client

    search("Ben Thanh") -> [PlaceCandidate(label=..., coordinate=...), ...]
    """
    def __init__(self,
                 base_url: Optional[str] = None,
                 country_codes: str = NOMINATIM_COUNTRY_CODES,
                 limit: int = 5,
                 language: str = NOMINATIM_LANGUAGE,
                 timeout: int = 5):
        self.base_url = (base_url or NOMINATIM_URL).rstrip("/")
        self.country_codes = country_codes
        self.limit = limit
        self.language = language
        self.timeout = timeout

    def search(self, query: str) -> List[PlaceCandidate]:
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []

        try:
            response = requests.get(
                f"{self.base_url}/search",
                params={
                    "format": "json",
                    "q": query,
                    "countrycodes": self.country_codes,
                    "limit": self.limit,
                    "addressdetails": 1,
                },
                headers={
                    "Accept-Language": self.language,
                    "User-Agent": NOMINATIM_USER_AGENT,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            items = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Nominatim search failed for %r: %s", query, exc)
            return []

        if not isinstance(items, list):
            logger.warning("Unexpected Nominatim payload for %r: %r", query, items)
            return []

        candidates = []
        for item in items:
            if not isinstance(item, dict):
                logger.info("Skipping non-object Nominatim hit %r", item)
                continue
            try:
                coordinate = Coordinate.parse(item.get("lat"), item.get("lon"))
            except InvalidCoordinateError as exc:
                logger.info("Skipping Nominatim hit %r: %s", item.get("display_name"), exc)
                continue
            candidates.append(PlaceCandidate(label=item.get("display_name", ""), coordinate=coordinate))
        return candidates
