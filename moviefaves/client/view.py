"""Display items, modal entries and the view interface the controllers render to."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Protocol, Sequence, Tuple

from moviefaves.client.session import PaginationControls

ItemAction = Callable[[str], Awaitable[object]]


class InteractionZone(Enum):
    """Named regions of a rendered result item."""
    FAVORITE_ACTION = "favorite-action"
    OPEN_DETAIL = "open-detail"


class ModalTarget(Enum):
    """Where a click on the modal landed."""
    SURFACE = "surface"  # backdrop around the content box
    CONTENT = "content"


@dataclass(frozen=True)
class DisplayItem:
    """One rendered result: title, optional poster, and the actions its zones trigger."""
    item_id: str
    title: str
    poster_url: Optional[str] = None
    actions: Dict[InteractionZone, ItemAction] = field(default_factory=dict, compare=False)

    @property
    def interactive(self) -> bool:
        return bool(self.actions)

    async def interact(self, zone: InteractionZone) -> object:
        """Run the action for zone. Zones without their own action open the detail view."""
        if not self.actions:
            return None
        action = self.actions.get(zone) or self.actions.get(InteractionZone.OPEN_DETAIL)
        if action is None:
            return None
        return await action(self.item_id)


@dataclass(frozen=True)
class ModalEntry:
    label: str
    value: str = ""
    children: Tuple[str, ...] = ()


class View(Protocol):
    def clear_results(self) -> None: ...

    def show_item(self, item: DisplayItem) -> None: ...

    def set_pagination(self, controls: PaginationControls) -> None: ...

    def show_modal(self, entries: Sequence[ModalEntry]) -> None: ...

    def hide_modal(self) -> None: ...

    def show_error(self, message: str) -> None: ...
