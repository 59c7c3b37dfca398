"""Movie catalog client (OMDb-compatible search and lookup) via httpx."""
import logging
from typing import Any, Optional

import httpx

from moviefaves.config import OMDB_API_KEY, OMDB_BASE_URL
from moviefaves.errors import CatalogError
from moviefaves.models.catalog import DetailRecord, SearchPage, SearchResultItem

logger = logging.getLogger(__name__)

# Error text the catalog sends with Response=False when a search has no hits
_NO_RESULTS_ERROR = "Movie not found!"


class CatalogClient:
    """Issues search-by-term-and-page and lookup-by-id requests."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        *,
        api_key: str = OMDB_API_KEY,
        base_url: str = OMDB_BASE_URL,
    ) -> None:
        self._http = http
        self._api_key = api_key
        self._base_url = base_url

    async def _get(self, params: dict[str, Any]) -> dict:
        query = {"apikey": self._api_key, **params}
        try:
            response = await self._http.get(self._base_url, params=query)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise CatalogError(f"Catalog request failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Catalog returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CatalogError("Catalog returned an unexpected payload")
        return data

    async def search(self, terms: str, page: int) -> SearchPage:
        """Return one page (at most 10 items) of results for terms."""
        logger.debug("Catalog search %r page %d", terms, page)
        data = await self._get({"s": terms, "page": page})
        if data.get("Response") == "False":
            error: Optional[str] = data.get("Error")
            if error == _NO_RESULTS_ERROR:
                return SearchPage(items=(), total_results=0)
            raise CatalogError(error or "Catalog search failed")
        try:
            total = int(data.get("totalResults") or 0)
            items = tuple(SearchResultItem.from_catalog(item) for item in data.get("Search") or [])
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed search response: {e}") from e
        logger.info("Catalog search %r page %d: %d of %d results", terms, page, len(items), total)
        return SearchPage(items=items, total_results=total)

    async def lookup(self, item_id: str) -> DetailRecord:
        """Return the full detail record for one catalog id."""
        logger.debug("Catalog lookup %s", item_id)
        data = await self._get({"i": item_id})
        if data.get("Response") == "False":
            raise CatalogError(data.get("Error") or f"Catalog lookup failed for {item_id}")
        ratings = data.get("Ratings") or []
        if not isinstance(ratings, list) or not all(isinstance(r, dict) for r in ratings):
            raise CatalogError(f"Malformed ratings in lookup response for {item_id}")
        return DetailRecord.from_catalog(data)
