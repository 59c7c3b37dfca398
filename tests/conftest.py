"""Shared fixtures: temp favorites file, API client, and in-memory client collaborators."""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest
from fastapi.testclient import TestClient

from moviefaves.api.app import app
from moviefaves.api.state import AppState, get_state
from moviefaves.client.session import PaginationControls
from moviefaves.client.view import DisplayItem, ModalEntry
from moviefaves.errors import CatalogError
from moviefaves.models.catalog import DetailRecord, SearchPage, SearchResultItem
from moviefaves.models.favorite import FavoriteRecord


def make_items(count: int, start: int = 1) -> Tuple[SearchResultItem, ...]:
    return tuple(
        SearchResultItem(id=f"tt{n:07d}", title=f"Movie {n}", poster_url=f"https://img.example/{n}.jpg")
        for n in range(start, start + count)
    )


@pytest.fixture
def favorites_path(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def app_state(favorites_path):
    return AppState(favorites_path)


@pytest.fixture
def client(app_state):
    app.dependency_overrides[get_state] = lambda: app_state
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


class FakeView:
    """Records what the controllers render."""

    def __init__(self) -> None:
        self.items: List[DisplayItem] = []
        self.pagination: Optional[PaginationControls] = None
        self.modal: Optional[List[ModalEntry]] = None
        self.errors: List[str] = []
        self.clear_count = 0

    def clear_results(self) -> None:
        self.items = []
        self.clear_count += 1

    def show_item(self, item: DisplayItem) -> None:
        self.items.append(item)

    def set_pagination(self, controls: PaginationControls) -> None:
        self.pagination = controls

    def show_modal(self, entries: Sequence[ModalEntry]) -> None:
        self.modal = list(entries)

    def hide_modal(self) -> None:
        self.modal = None

    def show_error(self, message: str) -> None:
        self.errors.append(message)


class _Timer:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an explicit clock (advance())."""

    def __init__(self) -> None:
        self.now = 0.0
        self._timers: List[_Timer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> _Timer:
        timer = _Timer(self.now + delay, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted((t for t in self._timers if t.when <= self.now), key=lambda t: t.when)
        for timer in due:
            self._timers.remove(timer)
            if not timer.cancelled:
                timer.callback()


class FakeCatalog:
    def __init__(self) -> None:
        self.pages: Dict[Tuple[str, int], SearchPage] = {}
        self.details: Dict[str, dict] = {}
        self.calls: List[tuple] = []
        self.fail = False

    async def search(self, terms: str, page: int) -> SearchPage:
        self.calls.append(("search", terms, page))
        if self.fail:
            raise CatalogError("catalog down")
        return self.pages[(terms, page)]

    async def lookup(self, item_id: str) -> DetailRecord:
        self.calls.append(("lookup", item_id))
        if self.fail:
            raise CatalogError("catalog down")
        return DetailRecord.from_catalog(self.details[item_id])


class FakeFavorites:
    def __init__(self) -> None:
        self.records: List[FavoriteRecord] = []

    async def list_favorites(self) -> List[FavoriteRecord]:
        return list(self.records)

    async def add_favorite(self, name: str, oid: str) -> List[FavoriteRecord]:
        self.records.append(FavoriteRecord(name=name, oid=oid))
        return list(self.records)


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def favorites():
    return FakeFavorites()


@pytest.fixture(name="make_items")
def make_items_fixture():
    return make_items
