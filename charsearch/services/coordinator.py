"""Debounced, last-writer-wins search coordination.

A ``SearchCoordinator`` owns the current query text and filter selection for
one UI session. Every mutation restarts a debounce window; once the inputs
have been quiet for the whole window the coordinator either resets to
``Initial`` (default inputs) or issues exactly one fetch. Each fetch is tagged
with a generation number and its outcome is dropped unless that generation is
still the latest when it resolves.

All methods must be called from the event loop that runs the coordinator.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from charsearch.domain.models import CharacterFilters, SearchParams
from charsearch.domain.state import (
    INITIAL,
    LOADING,
    SearchState,
    state_from_error,
    state_from_results,
)
from charsearch.logging import logger
from charsearch.services.characters import CharacterFetcher

DEFAULT_DEBOUNCE_SECONDS = 0.3

StateListener = Callable[[SearchState], None]


class SearchCoordinator:
    def __init__(
        self,
        fetcher: CharacterFetcher,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._fetcher = fetcher
        self._debounce_seconds = max(0.0, debounce_seconds)
        self._params = SearchParams()
        self._state: SearchState = INITIAL
        self._listeners: list[StateListener] = []
        self._generation = 0
        self._timer: asyncio.TimerHandle | None = None
        self._fetch_task: asyncio.Task[None] | None = None
        self._idle = asyncio.Event()
        self._idle.set()
        self._disposed = False

    async def __aenter__(self) -> "SearchCoordinator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.dispose()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def params(self) -> SearchParams:
        return self._params

    @property
    def query(self) -> str:
        return self._params.query

    @property
    def filters(self) -> CharacterFilters:
        return self._params.filters

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for future transitions; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update_query(self, text: str) -> None:
        self._replace_params(self._params.model_copy(update={"query": (text or "").strip()}))

    def update_filters(self, **changes: Any) -> None:
        """Replace the given filter fields, keeping the others.

        Raises ``pydantic.ValidationError`` for unknown fields or values; the
        current inputs stay untouched in that case.
        """

        merged = {**self._params.filters.model_dump(), **changes}
        filters = CharacterFilters.model_validate(merged)
        self._replace_params(self._params.model_copy(update={"filters": filters}))

    def clear_filters(self) -> None:
        self._replace_params(self._params.model_copy(update={"filters": CharacterFilters()}))

    async def wait_idle(self) -> None:
        """Wait until no debounce window is open and no current fetch is in flight."""

        await self._idle.wait()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._cancel_pending()
        self._generation += 1
        self._listeners.clear()
        self._idle.set()
        logger.debug("search_coordinator_disposed", generation=self._generation)

    def _replace_params(self, params: SearchParams) -> None:
        if self._disposed:
            logger.warning("search_update_after_dispose", query=params.query)
            return

        loop = asyncio.get_running_loop()
        self._cancel_pending()
        # Any fetch still resolving belongs to an older generation from here on.
        self._generation += 1
        self._params = params
        self._idle.clear()
        self._timer = loop.call_later(self._debounce_seconds, self._on_settled)

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()
        self._fetch_task = None

    def _on_settled(self) -> None:
        self._timer = None
        if self._disposed:
            return

        params = self._params
        logger.debug("search_settled", query=params.query, default=params.is_default)
        if params.is_default:
            self._set_state(INITIAL)
            self._mark_idle_if_quiet()
            return

        self._generation += 1
        generation = self._generation
        self._set_state(LOADING)
        if generation != self._generation:
            # A listener changed the inputs while being told about Loading.
            return
        logger.info(
            "search_dispatched",
            generation=generation,
            query=params.query,
            filters=params.filters.to_query_params(),
        )
        self._fetch_task = asyncio.get_running_loop().create_task(
            self._run_fetch(params, generation)
        )

    async def _run_fetch(self, params: SearchParams, generation: int) -> None:
        failed: Exception | None = None
        try:
            results = await self._fetcher.search(params)
            outcome = state_from_results(results)
        except Exception as exc:
            outcome = state_from_error(exc)
            failed = exc

        if self._disposed or generation != self._generation:
            logger.debug(
                "stale_search_result_discarded",
                generation=generation,
                latest_generation=self._generation,
            )
            return

        if failed is not None:
            logger.warning(
                "search_failed",
                generation=generation,
                query=params.query,
                error=outcome.message,
                error_type=failed.__class__.__name__,
            )
        self._fetch_task = None
        self._set_state(outcome)
        self._mark_idle_if_quiet()

    def _mark_idle_if_quiet(self) -> None:
        # Listeners may have started a new debounce window while being notified.
        if self._timer is None and self._fetch_task is None:
            self._idle.set()

    def _set_state(self, state: SearchState) -> None:
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("search_state_listener_failed", state=state.kind)


__all__ = ["DEFAULT_DEBOUNCE_SECONDS", "SearchCoordinator", "StateListener"]
