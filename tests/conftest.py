"""Shared pytest fixtures and doubles for search pipeline tests."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Sequence

import pytest

from charsearch.domain.models import Character, Place, SearchParams

SearchHandler = Callable[[SearchParams], Awaitable[Sequence[Character]]]


def _build_character(character_id: int = 1, name: str = "Rick Sanchez", **overrides) -> Character:
    payload = {
        "id": character_id,
        "name": name,
        "status": "Alive",
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": Place(name="Earth (C-137)", url=""),
        "location": Place(name="Citadel of Ricks", url=""),
        "image": f"https://rickandmortyapi.com/api/character/avatar/{character_id}.jpeg",
        "episode": (),
        "url": "",
        "created": "2017-11-04T18:48:46.250Z",
    }
    payload.update(overrides)
    return Character(**payload)


class ScriptedFetcher:
    """In-memory ``CharacterFetcher`` recording every call.

    Each call is answered by ``handler``; by default every search succeeds
    with no results.
    """

    def __init__(self, handler: SearchHandler | None = None) -> None:
        self.calls: list[SearchParams] = []
        self.call_times: list[float] = []
        self.cancelled: list[SearchParams] = []
        self._handler = handler

    async def search(self, params: SearchParams) -> Sequence[Character]:
        self.calls.append(params)
        self.call_times.append(time.monotonic())
        if self._handler is None:
            return []
        try:
            return await self._handler(params)
        except asyncio.CancelledError:
            self.cancelled.append(params)
            raise


@pytest.fixture
def characters() -> list[Character]:
    return [_build_character(1, "Rick Sanchez"), _build_character(2, "Rick Prime")]


@pytest.fixture
def make_character() -> Callable[..., Character]:
    return _build_character


@pytest.fixture
def fetcher_factory() -> Callable[..., ScriptedFetcher]:
    return ScriptedFetcher
