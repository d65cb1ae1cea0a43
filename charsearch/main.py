"""Application entrypoint."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager

import httpx

from charsearch.config import AppSettings, get_settings
from charsearch.domain.state import SearchState, Success
from charsearch.logging import configure_logging, logger
from charsearch.services.characters import CharacterDirectoryService
from charsearch.services.coordinator import SearchCoordinator


@asynccontextmanager
async def search_session(
    settings: AppSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> AsyncIterator[SearchCoordinator]:
    """Yield a coordinator wired to the character directory.

    The coordinator is disposed on every exit path; a client created here is
    closed as well, while a caller-supplied one is left open.
    """

    settings = settings or get_settings()
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient()
    service = CharacterDirectoryService(client, settings=settings.directory)
    coordinator = SearchCoordinator(
        service, debounce_seconds=settings.search.debounce_seconds
    )
    try:
        yield coordinator
    finally:
        coordinator.dispose()
        if owns_client:
            await client.aclose()


def _log_state(state: SearchState) -> None:
    if isinstance(state, Success):
        logger.info(
            "search_state",
            kind=state.kind,
            count=len(state.results),
            names=[character.name for character in state.results],
        )
        return
    logger.info("search_state", **state.model_dump())


async def main(argv: Sequence[str] | None = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level, environment=settings.environment)

    words = list(sys.argv[1:] if argv is None else argv)
    query = " ".join(words)

    logger.info("search_session_starting", query=query)
    async with search_session(settings) as coordinator:
        coordinator.subscribe(_log_state)
        coordinator.update_query(query)
        await coordinator.wait_idle()


if __name__ == "__main__":
    asyncio.run(main())
