"""Character directory integration (the remote side of a search)."""

from __future__ import annotations

from typing import Protocol, Sequence

import httpx
from pydantic import ValidationError

from charsearch.config import DirectorySettings
from charsearch.domain.models import Character, CharacterPage, SearchParams
from charsearch.logging import logger
from charsearch.services.exceptions import CharacterSearchError


class CharacterFetcher(Protocol):
    """Performs one asynchronous search; raises on failure."""

    async def search(self, params: SearchParams) -> Sequence[Character]: ...


class CharacterDirectoryService:
    """Search the character directory over HTTPS."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: DirectorySettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or DirectorySettings()

    async def search(self, params: SearchParams) -> list[Character]:
        if params.is_default:
            return []

        query_params = params.to_query_params()
        try:
            response = await self._client.get(
                self._endpoint(),
                params=query_params,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise CharacterSearchError(f"Failed to contact character directory: {exc}") from exc

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500]
            status_code = exc.response.status_code
            raise CharacterSearchError(
                f"Character search failed ({status_code}): {detail}",
                status_code=status_code,
            ) from exc

        page = self._decode_page(response)
        logger.debug(
            "character_search_completed",
            params=query_params,
            returned=len(page.results),
            total=page.info.count,
        )
        return page.results

    def _endpoint(self) -> str:
        return f"{str(self._settings.base_url).rstrip('/')}/character/"

    @staticmethod
    def _decode_page(response: httpx.Response) -> CharacterPage:
        try:
            data = response.json()
        except ValueError as exc:
            raise CharacterSearchError("Character directory response is not valid JSON.") from exc
        try:
            return CharacterPage.model_validate(data)
        except ValidationError as exc:
            raise CharacterSearchError("Character directory response format is invalid.") from exc


__all__ = ["CharacterDirectoryService", "CharacterFetcher"]
