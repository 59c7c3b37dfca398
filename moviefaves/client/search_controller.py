"""Search and page navigation against the catalog."""
import logging
from typing import Optional

from moviefaves.client.renderer import ResultRenderer
from moviefaves.client.session import (
    Direction,
    PaginationControls,
    SearchSessionState,
    pagination_visibility,
)
from moviefaves.core.catalog_client import CatalogClient

logger = logging.getLogger(__name__)


class SearchController:
    """Owns the SearchSessionState; only this class replaces it.

    Catalog failures propagate (CatalogError) and leave the state untouched.
    Overlapping requests are not cancelled: whichever response arrives last
    becomes the session state.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        renderer: ResultRenderer,
        state: Optional[SearchSessionState] = None,
    ) -> None:
        self._catalog = catalog
        self._renderer = renderer
        self._state = state or SearchSessionState()

    @property
    def state(self) -> SearchSessionState:
        return self._state

    async def submit_search(self, terms: str) -> SearchSessionState:
        """Start a new search at page 1."""
        result = await self._catalog.search(terms, 1)
        self._state = SearchSessionState.first_page(terms, result)
        logger.info("Search %r: %d total results", terms, self._state.total_results)
        self._render()
        return self._state

    async def go_to_adjacent_page(self, direction: Direction) -> SearchSessionState:
        """Fetch page ± 1 for the last search terms.

        No bounds check: callers only offer the direction when its pagination
        control is visible. total_results is kept from the first page.
        """
        page = self._state.page + direction.value
        result = await self._catalog.search(self._state.search_terms, page)
        self._state = self._state.with_page(page, result)
        logger.info("Search %r: page %d", self._state.search_terms, page)
        self._render()
        return self._state

    def recompute_pagination_visibility(self) -> PaginationControls:
        return pagination_visibility(self._state)

    def _render(self) -> None:
        self._renderer.render_search_results(
            self._state.current_page_items, self.recompute_pagination_visibility
        )
