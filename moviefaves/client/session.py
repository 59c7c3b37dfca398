"""Search session state and pagination rules."""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from moviefaves.config import PAGE_SIZE
from moviefaves.errors import ItemNotFoundError
from moviefaves.models.catalog import SearchPage, SearchResultItem


class Direction(Enum):
    NEXT = 1
    PREVIOUS = -1


@dataclass(frozen=True)
class PaginationControls:
    next_visible: bool
    previous_visible: bool


HIDDEN_PAGINATION = PaginationControls(next_visible=False, previous_visible=False)


@dataclass(frozen=True)
class SearchSessionState:
    """Current browsing context: last search terms, page, total hits and page items.

    Values are replaced, never mutated: every completed fetch produces a new
    state for ``(search_terms, page)``.
    """
    search_terms: str = ""
    page: int = 1
    total_results: int = 0
    current_page_items: Tuple[SearchResultItem, ...] = ()

    @classmethod
    def first_page(cls, terms: str, result: SearchPage) -> "SearchSessionState":
        return cls(
            search_terms=terms,
            page=1,
            total_results=result.total_results,
            current_page_items=result.items,
        )

    def with_page(self, page: int, result: SearchPage) -> "SearchSessionState":
        """State after moving to another page; total_results keeps the first page's count."""
        return replace(self, page=page, current_page_items=result.items)

    def find_item(self, item_id: str) -> SearchResultItem:
        for item in self.current_page_items:
            if item.id == item_id:
                return item
        raise ItemNotFoundError(item_id)


def pagination_visibility(state: SearchSessionState, page_size: int = PAGE_SIZE) -> PaginationControls:
    """Next is shown while results remain past this page; previous on any page after the first."""
    seen = (state.page - 1) * page_size + len(state.current_page_items)
    return PaginationControls(
        next_visible=seen < state.total_results,
        previous_visible=state.page > 1,
    )
