"""Catalog search results and detail records."""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

# Catalog uses this placeholder for missing values (e.g. no poster)
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SearchResultItem:
    """One entry of a catalog search page."""
    id: str
    title: str
    poster_url: Optional[str] = None

    @classmethod
    def from_catalog(cls, item: Mapping[str, Any]) -> "SearchResultItem":
        poster = item.get("Poster")
        return cls(
            id=item["imdbID"],
            title=item.get("Title", ""),
            poster_url=poster if poster and poster != NOT_AVAILABLE else None,
        )


@dataclass(frozen=True)
class SearchPage:
    """Items of one result page plus the catalog's total hit count."""
    items: Tuple[SearchResultItem, ...]
    total_results: int


@dataclass(frozen=True)
class Rating:
    source: str
    value: str


@dataclass(frozen=True)
class DetailRecord:
    """Full catalog record for one item.

    ``attributes`` keeps every field in catalog order (including ``Ratings``,
    ``Response`` and ``Poster``); display rules are applied by the modal.
    """
    id: str
    title: str
    attributes: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    @classmethod
    def from_catalog(cls, data: Mapping[str, Any]) -> "DetailRecord":
        return cls(
            id=data.get("imdbID", ""),
            title=data.get("Title", ""),
            attributes=tuple(data.items()),
        )

    @property
    def ratings(self) -> List[Rating]:
        for name, value in self.attributes:
            if name == "Ratings":
                return [Rating(source=r.get("Source", ""), value=r.get("Value", "")) for r in value or []]
        return []
