"""Raw outcome markers and the canonical result shapes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel


class Marker(Enum):
    """Tags used by the native side to wrap outcomes.

    Wrappers are 2-tuples ``(Marker.OK, payload)`` / ``(Marker.ERROR, reason)``.
    Being enum members, they can never collide with a string payload.
    """

    OK = "ok"
    ERROR = "error"

    def __repr__(self) -> str:
        return f":{self.value}"


OK = Marker.OK
ERROR = Marker.ERROR


class Convention(str, Enum):
    """Calling convention an operation commits to at definition time."""

    COMMAND = "command"
    FALLIBLE_QUERY = "fallible_query"
    INFALLIBLE_QUERY = "infallible_query"


class ErrorCode(str, Enum):
    INVALID_HANDLE = "INVALID_HANDLE"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION = "VALIDATION"
    NATIVE = "NATIVE"
    GENERIC_FAILURE = "GENERIC_FAILURE"


class CommandOk(BaseModel):
    """Operation succeeded, no payload."""

    model_config = {"frozen": True}

    __match_args__ = ()

    @property
    def ok(self) -> bool:
        return True


class QueryOk(BaseModel):
    """Operation succeeded and carries a value."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    __match_args__ = ("value",)

    value: Any = None

    @property
    def ok(self) -> bool:
        return True


class Err(BaseModel):
    """Operation failed; ``reason`` is surfaced verbatim from its source."""

    model_config = {"frozen": True}

    __match_args__ = ("code", "reason")

    code: ErrorCode
    reason: str

    @property
    def ok(self) -> bool:
        return False


CanonicalResult = Union[CommandOk, QueryOk, Err]

COMMAND_OK = CommandOk()


def is_ok(result: Any) -> bool:
    """True for CommandOk/QueryOk, False for Err. Bare values count as ok."""
    return not isinstance(result, Err)

