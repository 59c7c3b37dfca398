"""Turn search results and favorites into display items on the view."""
import logging
from typing import Callable, Iterable, List

from moviefaves.client.session import HIDDEN_PAGINATION, PaginationControls
from moviefaves.client.view import DisplayItem, InteractionZone, ItemAction, View
from moviefaves.models.catalog import SearchResultItem
from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)


class ResultRenderer:
    """Each render call replaces the whole displayed list."""

    def __init__(self, view: View, *, on_favorite: ItemAction, on_open_detail: ItemAction) -> None:
        self._view = view
        self._on_favorite = on_favorite
        self._on_open_detail = on_open_detail
        self._items: List[DisplayItem] = []
        self._pagination = HIDDEN_PAGINATION

    @property
    def items(self) -> List[DisplayItem]:
        """Items currently on screen, in display order."""
        return list(self._items)

    @property
    def pagination(self) -> PaginationControls:
        """Pagination controls currently shown on the view."""
        return self._pagination

    def _set_pagination(self, controls: PaginationControls) -> None:
        self._pagination = controls
        self._view.set_pagination(controls)

    def _reset(self) -> None:
        self._items = []
        self._view.clear_results()
        self._set_pagination(HIDDEN_PAGINATION)

    def _show(self, item: DisplayItem) -> None:
        self._items.append(item)
        self._view.show_item(item)

    def render_search_results(
        self,
        results: Iterable[SearchResultItem],
        recompute_pagination: Callable[[], PaginationControls],
    ) -> None:
        self._reset()
        for result in results:
            self._show(
                DisplayItem(
                    item_id=result.id,
                    title=result.title,
                    poster_url=result.poster_url,
                    actions={
                        InteractionZone.FAVORITE_ACTION: self._on_favorite,
                        InteractionZone.OPEN_DETAIL: self._on_open_detail,
                    },
                )
            )
        controls = recompute_pagination()
        self._set_pagination(controls)
        logger.debug("Rendered %d results (next=%s previous=%s)",
                     len(self._items), controls.next_visible, controls.previous_visible)

    def render_favorites(self, favorites: Iterable[FavoriteRecord]) -> None:
        """Favorites are title-only, not paginated and not interactive."""
        self._reset()
        for favorite in favorites:
            self._show(DisplayItem(item_id=favorite.oid, title=favorite.name))
