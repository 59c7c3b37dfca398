"""Favorite records persisted by the favorites service."""
from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteRecord:
    """Saved reference to a catalog item: display name + catalog id (oid)."""
    name: str
    oid: str

    def to_dict(self) -> dict:
        return {"name": self.name, "oid": self.oid}

    @classmethod
    def from_dict(cls, data: dict) -> "FavoriteRecord":
        return cls(name=data["name"], oid=data["oid"])
