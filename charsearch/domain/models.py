"""Pydantic models shared across the search pipeline."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StatusFilter(str, Enum):
    ALL = "All"
    ALIVE = "Alive"
    DEAD = "Dead"
    UNKNOWN = "Unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def api_value(self) -> str | None:
        if self is StatusFilter.ALL:
            return None
        return self.value.lower()

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None


COMMON_SPECIES: tuple[str, ...] = (
    "Human",
    "Alien",
    "Humanoid",
    "Robot",
    "Cronenberg",
    "Animal",
    "Disease",
    "Mythological Creature",
)


class CharacterFilters(BaseModel):
    """Structured refinement applied on top of the free-text query."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: StatusFilter = StatusFilter.ALL
    species: str | None = None
    type: str | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value):
        if value is None:
            return StatusFilter.ALL
        if isinstance(value, str) and not isinstance(value, StatusFilter):
            return StatusFilter(value)
        return value

    @field_validator("species", "type", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @property
    def active_filter_count(self) -> int:
        return sum(
            (
                self.status is not StatusFilter.ALL,
                self.species is not None,
                self.type is not None,
            )
        )

    @property
    def is_active(self) -> bool:
        return self.active_filter_count > 0

    def to_query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.status.api_value is not None:
            params["status"] = self.status.api_value
        if self.species is not None:
            params["species"] = self.species
        if self.type is not None:
            params["type"] = self.type
        return params


class SearchParams(BaseModel):
    """The single input to a fetch decision; compared by value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str = ""
    filters: CharacterFilters = Field(default_factory=CharacterFilters)

    @field_validator("query", mode="before")
    @classmethod
    def _strip_query(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def is_default(self) -> bool:
        return not self.query and not self.filters.is_active

    def to_query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.query:
            params["name"] = self.query
        params.update(self.filters.to_query_params())
        return params


class Place(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    url: str = ""


class Character(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    status: str
    species: str
    gender: str = ""
    origin: Place = Field(default_factory=Place)
    location: Place = Field(default_factory=Place)
    image: str
    episode: tuple[str, ...] = ()
    url: str = ""
    created: str
    type: str = ""

    @property
    def origin_name(self) -> str:
        return self.origin.name


class PageInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    count: int = 0
    pages: int = 0
    next: str | None = None
    prev: str | None = None


class CharacterPage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    info: PageInfo = Field(default_factory=PageInfo)
    results: list[Character] = Field(default_factory=list)


__all__ = [
    "COMMON_SPECIES",
    "Character",
    "CharacterFilters",
    "CharacterPage",
    "PageInfo",
    "Place",
    "SearchParams",
    "StatusFilter",
]
