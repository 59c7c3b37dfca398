"""Exceptions raised by the catalog client, favorites client and controllers."""


class MovieFavesError(Exception):
    """Base class for moviefaves errors."""


class CatalogError(MovieFavesError):
    """Catalog request failed (network, HTTP status, bad JSON, or catalog-reported error)."""


class FavoritesServiceError(MovieFavesError):
    """Favorites service request failed or answered with its plain error body."""


class ItemNotFoundError(MovieFavesError, LookupError):
    """Item id is not on the current page of search results."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"No result with id {item_id!r} on the current page")
        self.item_id = item_id
