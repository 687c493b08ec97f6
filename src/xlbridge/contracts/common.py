"""Common Pydantic models: response envelope, errors, metrics, exceptions."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from xlbridge.contracts.results import CommandOk, Err, QueryOk


class BridgeError(Exception):
    """Base class for errors raised by this package itself."""


class ArgumentError(BridgeError, ValueError):
    """An argument failed a precondition checked before the boundary call."""


class ContractViolation(BridgeError, AssertionError):
    """The native side returned an outcome the declared convention forbids."""

    def __init__(self, operation: str, message: str, raw: Any = None) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.raw = raw


class OperationFailed(BridgeError):
    """Raised by :func:`unwrap_value` when asked to unwrap an ``Err``."""

    def __init__(self, error: Err) -> None:
        super().__init__(f"{error.code.value}: {error.reason}")
        self.error = error


def unwrap_value(result: Any) -> Any:
    """Return the payload of a QueryOk (or a bare value); raise on Err."""
    if isinstance(result, Err):
        raise OperationFailed(result)
    if isinstance(result, QueryOk):
        return result.value
    if isinstance(result, CommandOk):
        return None
    return result


class Target(BaseModel):
    """Identifies what a request addressed."""

    handle: dict[str, Any] | None = None
    file: str | None = None
    sheet: str | None = None
    ref: str | None = None


class WarningDetail(BaseModel):
    """Structured warning."""

    code: str
    message: str
    path: str | None = None


class ErrorDetail(BaseModel):
    """Structured error."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class Metrics(BaseModel):
    """Execution metrics."""

    duration_ms: int = 0


class ResponseEnvelope(BaseModel):
    """Standard response envelope returned by every CLI command and server request."""

    ok: bool = True
    command: str = ""
    target: Target = Field(default_factory=Target)
    convention: str | None = None
    result: Any = None
    warnings: list[WarningDetail] = Field(default_factory=list)
    errors: list[ErrorDetail] = Field(default_factory=list)
    metrics: Metrics = Field(default_factory=Metrics)
