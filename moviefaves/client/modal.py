"""Detail modal: item details, favorite confirmations and dismissal."""
import logging
from enum import Enum
from typing import Any, Callable, Iterable, List, Tuple
from urllib.parse import unquote

from moviefaves.client.scheduler import Scheduler
from moviefaves.client.session import SearchSessionState
from moviefaves.client.view import ModalEntry, ModalTarget, View
from moviefaves.config import CONFIRMATION_DISMISS_SEC
from moviefaves.core.catalog_client import CatalogClient
from moviefaves.core.favorites_client import FavoritesClient
from moviefaves.errors import FavoritesServiceError
from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)

# Catalog fields never shown to the user
_HIDDEN_FIELDS = frozenset({"Response", "Poster"})


class ModalState(Enum):
    HIDDEN = "hidden"
    SHOWING_DETAIL = "showing_detail"
    SHOWING_CONFIRMATION = "showing_confirmation"


def format_detail(attributes: Iterable[Tuple[str, Any]]) -> List[ModalEntry]:
    """Build modal entries from catalog fields, in catalog order.

    Ratings become a nested list of "Source: Value" lines and BoxOffice is
    percent-decoded.
    """
    entries = []
    for name, value in attributes:
        if name in _HIDDEN_FIELDS:
            continue
        if name == "Ratings":
            children = tuple(f"{r.get('Source', '')}: {r.get('Value', '')}" for r in value or [])
            entries.append(ModalEntry(label=name, children=children))
        elif name == "BoxOffice":
            entries.append(ModalEntry(label=name, value=unquote(str(value))))
        else:
            entries.append(ModalEntry(label=name, value=str(value)))
    return entries


class DetailModalController:
    """Hidden -> ShowingDetail / ShowingConfirmation -> Hidden.

    Confirmations close themselves after ``dismiss_after`` seconds. Each new
    display invalidates dismissal timers scheduled for earlier displays, so a
    stale timer never closes content shown after it was set.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        favorites: FavoritesClient,
        view: View,
        scheduler: Scheduler,
        session: Callable[[], SearchSessionState],
        dismiss_after: float = CONFIRMATION_DISMISS_SEC,
    ) -> None:
        self._catalog = catalog
        self._favorites = favorites
        self._view = view
        self._scheduler = scheduler
        self._session = session
        self._dismiss_after = dismiss_after
        self._state = ModalState.HIDDEN
        self._display_token = 0

    @property
    def state(self) -> ModalState:
        return self._state

    def _display(self, entries: List[ModalEntry], state: ModalState) -> int:
        self._display_token += 1
        self._state = state
        self._view.show_modal(entries)
        return self._display_token

    async def open_detail(self, item_id: str) -> None:
        record = await self._catalog.lookup(item_id)
        self._display(format_detail(record.attributes), ModalState.SHOWING_DETAIL)
        logger.debug("Showing detail for %s", item_id)

    async def add_favorite(self, item_id: str) -> FavoriteRecord:
        """Save the item as a favorite and show a confirmation.

        Raises ItemNotFoundError if item_id is not on the current page.
        """
        title = self._session().find_item(item_id).title
        favorites = await self._favorites.add_favorite(title, item_id)
        if not favorites:
            raise FavoritesServiceError("Favorites service returned an empty collection")
        # Service appends in order, so the last record is the one just added
        added = favorites[-1]
        self.show_confirmation(added.name)
        return added

    def show_confirmation(self, name: str) -> None:
        token = self._display([ModalEntry(label="Added", value=name)], ModalState.SHOWING_CONFIRMATION)
        self._scheduler.call_later(self._dismiss_after, lambda: self._dismiss_if_current(token))
        logger.info("Added %s to favorites", name)

    def _dismiss_if_current(self, token: int) -> None:
        if token == self._display_token:
            self.dismiss()

    def dismiss(self) -> None:
        if self._state is ModalState.HIDDEN:
            return
        self._state = ModalState.HIDDEN
        self._view.hide_modal()

    def click(self, target: ModalTarget) -> None:
        """Clicks on the backdrop close the modal; clicks on its content do not."""
        if target is ModalTarget.SURFACE:
            self.dismiss()
