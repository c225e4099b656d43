"""
Typed catalog models, validated from decoded API payloads.
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import UNKNOWN_GAME_NAME
from ..models import ItemKind
from .decoder import coerce_float, coerce_int, link_values, normalize_name, pick_name, unwrap


class CatalogItem(BaseModel):
    """A search hit."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = UNKNOWN_GAME_NAME
    year_published: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("year_published", "yearpublished")
    )
    kind: ItemKind = Field(default=ItemKind.BASE_GAME, validation_alias=AliasChoices("kind", "type"))

    @field_validator("id", mode="before")
    @classmethod
    def _require_id(cls, value: Any) -> str:
        text = "" if value is None else str(value).strip()
        if not text:
            raise ValueError("catalog item has no id")
        return text

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        return normalize_name(value)

    @field_validator("year_published", mode="before")
    @classmethod
    def _year(cls, value: Any) -> Optional[int]:
        return coerce_int(value)

    @field_validator("kind", mode="before")
    @classmethod
    def _kind(cls, value: Any) -> ItemKind:
        if isinstance(value, ItemKind):
            return value
        if value in (ItemKind.BASE_GAME.value, ItemKind.EXPANSION.value):
            return ItemKind(value)
        return ItemKind.from_bgg_type(value)


class CatalogLink(BaseModel):
    """A typed relationship (publisher, designer, expansion, ...)."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = ""
    id: str = ""
    value: str = ""

    @field_validator("type", "id", "value", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return "" if value is None else str(value)


class CatalogDetails(CatalogItem):
    """Full record of a single catalog item, requested with statistics."""

    min_players: Optional[int] = Field(default=None, validation_alias=AliasChoices("min_players", "minplayers"))
    max_players: Optional[int] = Field(default=None, validation_alias=AliasChoices("max_players", "maxplayers"))
    playing_time: Optional[int] = Field(default=None, validation_alias=AliasChoices("playing_time", "playingtime"))
    min_play_time: Optional[int] = Field(default=None, validation_alias=AliasChoices("min_play_time", "minplaytime"))
    max_play_time: Optional[int] = Field(default=None, validation_alias=AliasChoices("max_play_time", "maxplaytime"))
    min_age: Optional[int] = Field(default=None, validation_alias=AliasChoices("min_age", "minage"))
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    image: Optional[str] = None
    average_rating: Optional[float] = None
    users_rated: Optional[int] = None
    rank: Optional[int] = None
    links: List[CatalogLink] = Field(default_factory=list, validation_alias=AliasChoices("links", "link"))

    @model_validator(mode="before")
    @classmethod
    def _flatten_statistics(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "statistics" not in data:
            return data
        data = dict(data)
        statistics = data.pop("statistics")
        ratings = statistics.get("ratings") if isinstance(statistics, dict) else None
        if not isinstance(ratings, dict):
            return data
        data.setdefault("average_rating", ratings.get("average"))
        data.setdefault("users_rated", ratings.get("usersrated"))
        ranks = ratings.get("ranks")
        if isinstance(ranks, dict):
            data.setdefault("rank", _overall_rank(ranks.get("rank") or []))
        return data

    @field_validator("min_players", "max_players", "playing_time", "min_play_time",
                     "max_play_time", "min_age", "users_rated", mode="before")
    @classmethod
    def _count(cls, value: Any) -> Optional[int]:
        return coerce_int(value)

    @field_validator("average_rating", mode="before")
    @classmethod
    def _rating(cls, value: Any) -> Optional[float]:
        return coerce_float(value)

    @field_validator("rank", mode="before")
    @classmethod
    def _rank(cls, value: Any) -> Optional[int]:
        rank = coerce_int(value)
        return rank if rank is not None and rank > 0 else None

    @field_validator("description", "thumbnail", "image", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        value = unwrap(value)
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("links", mode="before")
    @classmethod
    def _link_list(cls, value: Any) -> Any:
        if value is None:
            return []
        return value if isinstance(value, list) else [value]

    def link_values(self, link_type: str) -> List[str]:
        return link_values(self.links, link_type)

    @property
    def publishers(self) -> List[str]:
        return self.link_values("boardgamepublisher")

    @property
    def designers(self) -> List[str]:
        return self.link_values("boardgamedesigner")

    @property
    def categories(self) -> List[str]:
        return self.link_values("boardgamecategory")

    @property
    def mechanics(self) -> List[str]:
        return self.link_values("boardgamemechanic")

    @property
    def families(self) -> List[str]:
        return self.link_values("boardgamefamily")

    @property
    def expansion_ids(self) -> List[str]:
        return [link.id for link in self.links if link.type == "boardgameexpansion" and link.id]


class VersionRecord(BaseModel):
    """One published edition of a game."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: Optional[str] = None
    year_published: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("year_published", "yearpublished")
    )
    publisher: str = ""
    thumbnail: str = ""
    image: str = ""

    @model_validator(mode="before")
    @classmethod
    def _publisher_from_links(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "publisher" in data:
            return data
        data = dict(data)
        links = data.get("link") or []
        publishers = link_values(links if isinstance(links, list) else [links], "boardgamepublisher")
        data["publisher"] = publishers[0] if publishers else ""
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _require_id(cls, value: Any) -> str:
        text = "" if value is None else str(value).strip()
        if not text:
            raise ValueError("version has no id")
        return text

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Optional[str]:
        return pick_name(value)

    @field_validator("year_published", mode="before")
    @classmethod
    def _year(cls, value: Any) -> Optional[int]:
        return coerce_int(value)

    @field_validator("thumbnail", "image", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        value = unwrap(value)
        return "" if value is None else str(value).strip()


def _overall_rank(ranks: List[Any]) -> Any:
    """The ``boardgame`` subtype rank, else the first rank listed."""
    entries = [entry for entry in ranks if isinstance(entry, dict)]
    if not entries:
        return None
    overall = next((entry for entry in entries if entry.get("name") == "boardgame"), entries[0])
    return overall.get("value")
