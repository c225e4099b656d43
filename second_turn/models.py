"""
Shared data models for the Second Turn package.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class ItemKind(str, Enum):
    """Whether a catalog entry is a standalone game or an add-on."""
    BASE_GAME = "base game"
    EXPANSION = "expansion"

    @classmethod
    def from_bgg_type(cls, bgg_type: Optional[str]) -> "ItemKind":
        if bgg_type == "boardgameexpansion":
            return cls.EXPANSION
        return cls.BASE_GAME


@dataclass(frozen=True)
class LocalIndexRecord:
    """One game from the local rank dump."""
    id: str
    name: str
    year_published: Optional[int] = None
    rank: Optional[int] = None
    average_rating: Optional[float] = None
    kind: ItemKind = ItemKind.BASE_GAME

    def to_dict(self) -> dict:
        data = asdict(self)
        data["kind"] = self.kind.value
        return data
