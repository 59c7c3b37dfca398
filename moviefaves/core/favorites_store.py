"""Persist and load favorites (JSON array of {name, oid})."""
import json
import logging
import threading
from pathlib import Path
from typing import List

from moviefaves.models.favorite import FavoriteRecord

logger = logging.getLogger(__name__)


def load_favorites(path: Path) -> List[FavoriteRecord]:
    """Load all favorites from disk; a missing file means no favorites yet.

    Unreadable or malformed files raise (OSError, ValueError, KeyError).
    """
    if not path.exists():
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of favorites")
    return [FavoriteRecord.from_dict(item) for item in data]


def save_favorites(path: Path, favorites: List[FavoriteRecord]) -> None:
    """Write the full favorites collection to disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([f.to_dict() for f in favorites], indent=2), encoding="utf-8")


class FavoritesStore:
    """Ordered, append-only favorites collection backed by one JSON file.

    Appends are read-modify-write. The lock serializes them within this
    process only; separate processes writing the same file can still lose
    updates.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def read_all(self) -> List[FavoriteRecord]:
        with self._lock:
            return load_favorites(self._path)

    def append(self, record: FavoriteRecord) -> List[FavoriteRecord]:
        """Append record and save. Returns the updated collection, record last."""
        with self._lock:
            favorites = load_favorites(self._path)
            favorites.append(record)
            save_favorites(self._path, favorites)
        logger.info("Saved favorite %s (%s); %d total", record.name, record.oid, len(favorites))
        return favorites
