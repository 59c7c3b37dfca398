"""Client for the favorites REST service (GET/POST /favorites)."""
import logging
from typing import List

import httpx

from moviefaves.config import SERVER_URL
from moviefaves.errors import FavoritesServiceError
from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)


class FavoritesClient:
    def __init__(self, http: httpx.AsyncClient, *, base_url: str = SERVER_URL) -> None:
        self._http = http
        self._url = f"{base_url.rstrip('/')}/favorites"

    @staticmethod
    def _parse(response: httpx.Response) -> List[FavoriteRecord]:
        """Decode a favorites collection; the service's plain error body is not JSON."""
        try:
            data = response.json()
        except ValueError:
            raise FavoritesServiceError(
                f"Favorites service error ({response.status_code}): {response.text.strip()}"
            ) from None
        if response.is_error or not isinstance(data, list):
            raise FavoritesServiceError(f"Favorites service error ({response.status_code})")
        try:
            return [FavoriteRecord.from_dict(item) for item in data]
        except (KeyError, TypeError) as e:
            raise FavoritesServiceError(f"Malformed favorites payload: {e}") from e

    async def list_favorites(self) -> List[FavoriteRecord]:
        try:
            response = await self._http.get(self._url)
        except httpx.HTTPError as e:
            raise FavoritesServiceError(f"Favorites request failed: {e}") from e
        return self._parse(response)

    async def add_favorite(self, name: str, oid: str) -> List[FavoriteRecord]:
        """POST {name, oid}. Returns the full updated collection (new record last)."""
        try:
            response = await self._http.post(self._url, json={"name": name, "oid": oid})
        except httpx.HTTPError as e:
            raise FavoritesServiceError(f"Favorites request failed: {e}") from e
        favorites = self._parse(response)
        logger.debug("Added favorite %s; service now holds %d", oid, len(favorites))
        return favorites
