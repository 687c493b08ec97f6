"""Collapse raw boundary outcomes into one canonical result per convention.

The native side answers with a handful of shapes: a bare ``Marker.OK``,
``(OK, OK)``, ``(OK, value)``, ``(ERROR, (ERROR, reason))``, ``(ERROR, ERROR)``,
``(ERROR, reason)`` or an unwrapped value.  :func:`classify` applies the
decision table in order (first match wins); :func:`normalize` then projects
the classified shape onto the operation's declared convention.

Projection per convention::

    shape            COMMAND            FALLIBLE_QUERY        INFALLIBLE_QUERY
    unit             CommandOk          defect -> QueryOk(None)   None
    value            CommandOk          QueryOk(value)        value
    failure/generic  Err                Err                   ContractViolation
    bare None        CommandOk          defect -> QueryOk(None)   None
    bare str         Err(reason)        defect -> QueryOk(str)    str
    bare other       defect -> CommandOk  defect -> QueryOk(v)  v

A *defect* raises :class:`ContractViolation` when ``strict_contracts`` is
configured and is otherwise reported as a ``contract.violation`` event.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from xlbridge.config import get_config
from xlbridge.contracts.common import ContractViolation
from xlbridge.contracts.results import (
    COMMAND_OK,
    Convention,
    Err,
    ErrorCode,
    Marker,
    QueryOk,
)
from xlbridge.observe.events import emitter

INVALID_HANDLE_REASON = "invalid handle"

NOT_FOUND_MARKERS = ("not found", "not_found", "does not exist", "no such")


class Shape(str, Enum):
    UNIT = "unit"
    VALUE = "value"
    FAILURE = "failure"
    GENERIC_FAILURE = "generic_failure"
    BARE = "bare"


def _is_wrapper(raw: Any) -> bool:
    return type(raw) is tuple and len(raw) == 2 and isinstance(raw[0], Marker)


def classify(raw: Any) -> tuple[Shape, Any]:
    """Apply the decision table. Returns the shape and its payload."""
    if raw is Marker.OK:
        return Shape.UNIT, None
    if _is_wrapper(raw):
        tag, payload = raw
        if tag is Marker.OK:
            if payload is Marker.OK:
                return Shape.UNIT, None
            return Shape.VALUE, payload
        if _is_wrapper(payload) and payload[0] is Marker.ERROR:
            # one nesting level only
            inner = payload[1]
            if inner is Marker.ERROR:
                return Shape.GENERIC_FAILURE, None
            return Shape.FAILURE, inner
        if payload is Marker.ERROR:
            return Shape.GENERIC_FAILURE, None
        return Shape.FAILURE, payload
    if raw is Marker.ERROR:
        # a bare error marker carries no reason
        return Shape.GENERIC_FAILURE, None
    return Shape.BARE, raw


def reason_text(reason: Any) -> str:
    """Flatten a native reason term into text."""
    if isinstance(reason, str):
        return reason
    if isinstance(reason, Marker):
        return reason.value
    if isinstance(reason, tuple):
        return ": ".join(reason_text(part) for part in reason)
    if isinstance(reason, (bytes, bytearray)):
        return bytes(reason).decode("utf-8", errors="replace")
    return str(reason)


def code_for(reason: str) -> ErrorCode:
    """Classify a reason string into the error taxonomy."""
    lowered = reason.lower()
    if lowered.startswith(INVALID_HANDLE_REASON):
        return ErrorCode.INVALID_HANDLE
    if any(marker in lowered for marker in NOT_FOUND_MARKERS):
        return ErrorCode.NOT_FOUND
    return ErrorCode.NATIVE


def _defect(operation: str, message: str, raw: Any) -> None:
    if get_config().strict_contracts:
        raise ContractViolation(operation, message, raw)
    emitter().emit("contract.violation", {
        "operation": operation,
        "message": message,
        "raw": repr(raw),
    })


def normalize(
    raw: Any,
    convention: Convention,
    *,
    operation: str = "<anonymous>",
    generic_reason: str | None = None,
) -> Any:
    """Map a raw outcome to the canonical result of ``convention``."""
    shape, payload = classify(raw)

    if shape in (Shape.FAILURE, Shape.GENERIC_FAILURE):
        if convention is Convention.INFALLIBLE_QUERY:
            raise ContractViolation(operation, f"error outcome from an infallible query: {raw!r}", raw)
        if shape is Shape.GENERIC_FAILURE:
            return Err(code=ErrorCode.GENERIC_FAILURE, reason=generic_reason or f"{operation} failed")
        text = reason_text(payload)
        return Err(code=code_for(text), reason=text)

    if convention is Convention.INFALLIBLE_QUERY:
        return payload

    if convention is Convention.COMMAND:
        if shape is not Shape.BARE or payload is None:
            return COMMAND_OK
        if isinstance(payload, str):
            return Err(code=code_for(payload), reason=payload)
        _defect(operation, f"unwrapped value from a command: {payload!r}", raw)
        return COMMAND_OK

    if shape is Shape.VALUE:
        return QueryOk(value=payload)
    _defect(operation, f"{shape.value} outcome from a fallible query", raw)
    return QueryOk(value=payload)
