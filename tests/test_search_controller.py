"""Tests for SearchController against an in-memory catalog."""

import pytest

from moviefaves.client.renderer import ResultRenderer
from moviefaves.client.search_controller import SearchController
from moviefaves.client.session import Direction
from moviefaves.errors import CatalogError
from moviefaves.models.catalog import SearchPage


async def _noop(item_id):
    return None


@pytest.fixture
def controller(catalog, view):
    renderer = ResultRenderer(view, on_favorite=_noop, on_open_detail=_noop)
    return SearchController(catalog, renderer)


@pytest.fixture
def three_pages(catalog, make_items):
    catalog.pages[("alien", 1)] = SearchPage(make_items(10), 23)
    catalog.pages[("alien", 2)] = SearchPage(make_items(10, start=11), 23)
    catalog.pages[("alien", 3)] = SearchPage(make_items(3, start=21), 23)
    return catalog


class TestSubmitSearch:
    @pytest.mark.asyncio
    async def test_first_page_rendered(self, controller, three_pages, view):
        state = await controller.submit_search("alien")

        assert state.page == 1
        assert state.search_terms == "alien"
        assert state.total_results == 23
        assert len(view.items) == 10
        assert view.pagination.next_visible and not view.pagination.previous_visible

    @pytest.mark.asyncio
    async def test_new_search_resets_page(self, controller, three_pages, catalog, make_items):
        await controller.submit_search("alien")
        await controller.go_to_adjacent_page(Direction.NEXT)
        catalog.pages[("heat", 1)] = SearchPage(make_items(2), 2)

        state = await controller.submit_search("heat")

        assert state.page == 1
        assert state.total_results == 2
        assert catalog.calls[-1] == ("search", "heat", 1)

    @pytest.mark.asyncio
    async def test_failure_propagates_and_keeps_state(self, controller, three_pages, catalog):
        await controller.submit_search("alien")
        before = controller.state
        catalog.fail = True

        with pytest.raises(CatalogError):
            await controller.submit_search("heat")
        assert controller.state is before


class TestAdjacentPages:
    @pytest.mark.asyncio
    async def test_next_then_last(self, controller, three_pages, view):
        await controller.submit_search("alien")
        await controller.go_to_adjacent_page(Direction.NEXT)
        state = await controller.go_to_adjacent_page(Direction.NEXT)

        assert state.page == 3
        assert len(view.items) == 3
        assert not view.pagination.next_visible
        assert view.pagination.previous_visible

    @pytest.mark.asyncio
    async def test_previous(self, controller, three_pages, catalog):
        await controller.submit_search("alien")
        await controller.go_to_adjacent_page(Direction.NEXT)
        state = await controller.go_to_adjacent_page(Direction.PREVIOUS)

        assert state.page == 1
        assert catalog.calls[-1] == ("search", "alien", 1)

    @pytest.mark.asyncio
    async def test_total_not_refreshed_on_page_change(self, controller, three_pages, catalog, make_items):
        await controller.submit_search("alien")
        catalog.pages[("alien", 2)] = SearchPage(make_items(10, start=11), 500)

        state = await controller.go_to_adjacent_page(Direction.NEXT)

        assert state.total_results == 23

    @pytest.mark.asyncio
    async def test_no_clamping(self, controller, three_pages, catalog, make_items):
        await controller.submit_search("alien")
        catalog.pages[("alien", 0)] = SearchPage((), 23)

        state = await controller.go_to_adjacent_page(Direction.PREVIOUS)

        assert state.page == 0
        assert catalog.calls[-1] == ("search", "alien", 0)

    @pytest.mark.asyncio
    async def test_recompute_matches_state(self, controller, three_pages):
        await controller.submit_search("alien")
        controls = controller.recompute_pagination_visibility()
        assert controls.next_visible and not controls.previous_visible
