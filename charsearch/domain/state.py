"""Search state exposed to the presentation layer.

Each variant is a frozen model carrying a ``kind`` discriminator so the
union can be validated or serialised as a whole.
"""

from __future__ import annotations

from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from charsearch.domain.models import Character

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class _StateBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class Initial(_StateBase):
    kind: Literal["initial"] = "initial"


class Loading(_StateBase):
    kind: Literal["loading"] = "loading"


class Success(_StateBase):
    kind: Literal["success"] = "success"
    results: tuple[Character, ...] = Field(min_length=1)


class Empty(_StateBase):
    kind: Literal["empty"] = "empty"


class Error(_StateBase):
    kind: Literal["error"] = "error"
    message: str


SearchState = Annotated[
    Union[Initial, Loading, Success, Empty, Error],
    Field(discriminator="kind"),
]

INITIAL = Initial()
LOADING = Loading()
EMPTY = Empty()


def state_from_results(results: Sequence[Character]) -> Success | Empty:
    """Map a successful fetch onto a terminal state; zero hits is never ``Success``."""

    if not results:
        return EMPTY
    return Success(results=tuple(results))


def state_from_error(exc: BaseException) -> Error:
    message = str(exc).strip()
    return Error(message=message or UNKNOWN_ERROR_MESSAGE)


__all__ = [
    "EMPTY",
    "INITIAL",
    "LOADING",
    "UNKNOWN_ERROR_MESSAGE",
    "Empty",
    "Error",
    "Initial",
    "Loading",
    "SearchState",
    "Success",
    "state_from_error",
    "state_from_results",
]
