"""Data models for catalog results and favorites."""
from moviefaves.models.catalog import DetailRecord, Rating, SearchPage, SearchResultItem
from moviefaves.models.favorite import FavoriteRecord

__all__ = [
    "DetailRecord",
    "FavoriteRecord",
    "Rating",
    "SearchPage",
    "SearchResultItem",
]
