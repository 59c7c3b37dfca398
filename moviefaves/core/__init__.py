"""Core services: favorites store, catalog client, favorites client."""
from moviefaves.core.catalog_client import CatalogClient
from moviefaves.core.favorites_client import FavoritesClient
from moviefaves.core.favorites_store import FavoritesStore

__all__ = ["CatalogClient", "FavoritesClient", "FavoritesStore"]
