"""Search client: session state, controllers, renderer and views."""
from moviefaves.client.app import ClientApp
from moviefaves.client.modal import DetailModalController, ModalState
from moviefaves.client.renderer import ResultRenderer
from moviefaves.client.search_controller import SearchController
from moviefaves.client.session import Direction, PaginationControls, SearchSessionState

__all__ = [
    "ClientApp",
    "DetailModalController",
    "Direction",
    "ModalState",
    "PaginationControls",
    "ResultRenderer",
    "SearchController",
    "SearchSessionState",
]
