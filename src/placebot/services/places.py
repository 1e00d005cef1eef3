"""
Foursquare Places search.

Any failure (network, HTTP status, unexpected body) is logged and comes
back as a FAILED result with no places. Callers treat "nothing found" and
"lookup failed" the same way.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..config import FoursquareSettings
from ..core.models import Place, PlacesResult

logger = logging.getLogger(__name__)


class PlacesClient:
    """Searches for places around a coordinate."""

    def __init__(
        self,
        settings: FoursquareSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.base_url,
            headers={
                "Authorization": f"Bearer {settings.api_key.get_secret_value()}",
                "X-Places-Api-Version": settings.api_version,
                "Accept": "application/json",
            },
        )

    async def search(self, latitude: float, longitude: float, query: str) -> PlacesResult:
        """
        Search for places matching a query near a coordinate.

        Args:
            latitude: Latitude of the search center
            longitude: Longitude of the search center
            query: Free-text search term

        Returns:
            PlacesResult with places in provider order
        """
        logger.info(
            f"🔍 Searching places for '{query}' at {latitude},{longitude}",
            extra={"radius": self.settings.radius},
        )
        params = {
            "query": query,
            "ll": f"{latitude},{longitude}",
            "radius": str(self.settings.radius),
            "limit": str(self.settings.limit),
        }

        try:
            response = await self._client.get("/places/search", params=params)
            response.raise_for_status()
            places = self._parse_results(response.json())
        except httpx.HTTPError as e:
            logger.error(f"❌ Places search failed for '{query}': {e}")
            return PlacesResult.failed(str(e))
        except (ValueError, ValidationError) as e:
            logger.error(f"❌ Malformed places response for '{query}': {e}")
            return PlacesResult.failed(f"Malformed response: {e}")

        logger.info(f"✅ Places search completed: {len(places)} results")
        return PlacesResult.found(places)

    @staticmethod
    def _parse_results(data: object) -> List[Place]:
        """Pull named places out of a search response body."""
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise ValueError("response has no 'results' list")

        places = []
        for item in data["results"]:
            if not isinstance(item, dict) or not item.get("name"):
                continue
            try:
                places.append(Place.model_validate(item))
            except ValidationError as e:
                logger.warning(f"⚠️ Skipping unusable place {item.get('name')!r}: {e}")
        return places

    async def aclose(self) -> None:
        await self._client.aclose()
