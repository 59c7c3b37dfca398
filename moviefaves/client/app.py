"""Client wiring: routes user actions to the controllers and reports failures."""
import logging
from typing import Awaitable, Optional, TypeVar

from moviefaves.client.modal import DetailModalController
from moviefaves.client.renderer import ResultRenderer
from moviefaves.client.scheduler import AsyncioScheduler, Scheduler
from moviefaves.client.search_controller import SearchController
from moviefaves.client.session import Direction
from moviefaves.client.view import InteractionZone, ModalTarget, View
from moviefaves.core.catalog_client import CatalogClient
from moviefaves.core.favorites_client import FavoritesClient
from moviefaves.errors import MovieFavesError
from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ClientApp:
    """Event handlers for the search page.

    Controller errors stop at this boundary: they are logged and the view
    shows a neutral error message. Nothing is retried.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        favorites: FavoritesClient,
        view: View,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self._view = view
        self._favorites = favorites
        self.renderer = ResultRenderer(
            view,
            on_favorite=self._add_favorite,
            on_open_detail=self._open_detail,
        )
        self.search = SearchController(catalog, self.renderer)
        self.modal = DetailModalController(
            catalog,
            favorites,
            view,
            scheduler or AsyncioScheduler(),
            session=lambda: self.search.state,
        )

    async def _add_favorite(self, item_id: str) -> FavoriteRecord:
        return await self.modal.add_favorite(item_id)

    async def _open_detail(self, item_id: str) -> None:
        await self.modal.open_detail(item_id)

    async def _guarded(self, action: str, call: Awaitable[T]) -> Optional[T]:
        try:
            return await call
        except MovieFavesError as e:
            logger.warning("%s failed: %s", action, e)
            self._view.show_error(f"Could not {action}. Please try again.")
            return None

    async def search_for(self, terms: str) -> None:
        await self._guarded("search", self.search.submit_search(terms))

    async def next_page(self) -> None:
        if self.renderer.pagination.next_visible:
            await self._guarded("load the next page", self.search.go_to_adjacent_page(Direction.NEXT))

    async def previous_page(self) -> None:
        if self.renderer.pagination.previous_visible:
            await self._guarded("load the previous page", self.search.go_to_adjacent_page(Direction.PREVIOUS))

    async def show_favorites(self) -> None:
        favorites = await self._guarded("load favorites", self._favorites.list_favorites())
        if favorites is not None:
            self.renderer.render_favorites(favorites)

    async def interact(self, position: int, zone: InteractionZone) -> None:
        """Dispatch a click on the zone of the item at position (0-based)."""
        items = self.renderer.items
        if not 0 <= position < len(items):
            self._view.show_error(f"No item #{position + 1}.")
            return
        action = "add favorite" if zone is InteractionZone.FAVORITE_ACTION else "load details"
        await self._guarded(action, items[position].interact(zone))

    def click_modal(self, target: ModalTarget) -> None:
        self.modal.click(target)

    def dismiss_modal(self) -> None:
        self.modal.dismiss()
