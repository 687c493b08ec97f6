"""Operation declaration: each public operation commits to one convention.

A domain function performs its argument checks and returns the raw outcome
of a boundary call.  The decorator owns everything after that: precondition
failures become ``Err(VALIDATION)``, enrolled getters get their documented
default, and the raw outcome is normalized for the declared convention.

    @query("row height unavailable")
    def get_row_height(book: Handle, sheet: str, row: int):
        check_sheet_name(sheet)
        check_positive(row, "row")
        return call("get_row_height", book, sheet, row)
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.contracts.responses import OperationSpec
from xlbridge.contracts.results import Convention, Err, ErrorCode
from xlbridge.engine.boundary import current_operation
from xlbridge.engine.defaults import apply_default
from xlbridge.engine.normalizer import normalize

OPERATIONS: dict[str, OperationSpec] = {}


def _handle_params(fn: Callable[..., Any]) -> tuple[inspect.Signature, tuple[str, ...]]:
    sig = inspect.signature(fn)
    names = tuple(
        name for name, param in sig.parameters.items()
        if param.annotation in (Handle, "Handle")
    )
    return sig, names


def _check_handles(sig: inspect.Signature, names: tuple[str, ...], args: tuple, kwargs: dict) -> None:
    try:
        bound = sig.bind(*args, **kwargs)
    except TypeError as exc:
        raise ArgumentError(str(exc)) from exc
    for name in names:
        value = bound.arguments.get(name)
        if not isinstance(value, Handle):
            raise ArgumentError(f"{name} must be a Handle, got {type(value).__name__}")


def _declare(convention: Convention, generic_reason: str | None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        name = fn.__name__
        if name in OPERATIONS:
            raise RuntimeError(f"Operation declared twice: {name}")
        spec = OperationSpec(
            name=name,
            group=fn.__module__.rsplit(".", 1)[-1],
            convention=convention,
            generic_reason=generic_reason,
            summary=(inspect.getdoc(fn) or "").split("\n", 1)[0],
        )
        OPERATIONS[name] = spec
        sig, handle_names = _handle_params(fn)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            token = current_operation.set(name)
            try:
                _check_handles(sig, handle_names, args, kwargs)
                raw = fn(*args, **kwargs)
            except ArgumentError as exc:
                if convention is Convention.INFALLIBLE_QUERY:
                    raise
                return Err(code=ErrorCode.VALIDATION, reason=str(exc))
            finally:
                current_operation.reset(token)
            raw = apply_default(name, raw)
            return normalize(raw, convention, operation=name, generic_reason=generic_reason)

        wrapper.spec = spec  # type: ignore[attr-defined]
        return wrapper

    return decorator


def command(generic_reason: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare a Command: ``CommandOk`` or ``Err``."""
    return _declare(Convention.COMMAND, generic_reason)


def query(generic_reason: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare a Fallible Query: ``QueryOk(value)`` or ``Err``."""
    return _declare(Convention.FALLIBLE_QUERY, generic_reason)


def infallible() -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare an Infallible Query: a bare value, no error path."""
    return _declare(Convention.INFALLIBLE_QUERY, None)
