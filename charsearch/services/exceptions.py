"""Domain-specific exceptions."""

from __future__ import annotations


class ServiceError(Exception):
    pass


class CharacterSearchError(ServiceError):
    """Raised when the character directory cannot answer a search."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = ["ServiceError", "CharacterSearchError"]
