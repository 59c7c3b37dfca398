"""Shared application state (injected into routes)."""
from pathlib import Path
from typing import List, Optional

from moviefaves.config import FAVORITES_PATH
from moviefaves.core.favorites_store import FavoritesStore
from moviefaves.models.favorite import FavoriteRecord


class AppState:
    def __init__(self, favorites_path: Optional[Path] = None) -> None:
        self.favorites_store = FavoritesStore(favorites_path or FAVORITES_PATH)

    def get_favorites(self) -> List[FavoriteRecord]:
        return self.favorites_store.read_all()

    def add_favorite(self, name: str, oid: str) -> List[FavoriteRecord]:
        return self.favorites_store.append(FavoriteRecord(name=name, oid=oid))


_state = AppState()


def get_state() -> AppState:
    return _state
