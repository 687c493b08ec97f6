"""Native resource registry and the table of native entry points.

Everything in ``xlbridge.adapters`` is the far side of the boundary: it owns
the openpyxl objects, mints identifiers for them and answers calls with raw
outcomes.  Nothing here knows about calling conventions.
"""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable

from xlbridge.contracts.handles import HandleKind


class NativeFault(Exception):
    """Raised inside native code; ``term`` becomes the error payload verbatim."""

    def __init__(self, term: Any) -> None:
        super().__init__(term)
        self.term = term


class UnknownResource(KeyError):
    """Identifier unknown to the registry, or addressing another kind."""


class ResourceRegistry:
    """Identifier -> (kind, object) table owned by the native side."""

    def __init__(self) -> None:
        self._objects: dict[int, tuple[HandleKind, Any]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def mint(self, kind: HandleKind, obj: Any) -> int:
        with self._lock:
            ident = next(self._ids)
            self._objects[ident] = (kind, obj)
        return ident

    def resolve(self, ident: Any, kind: HandleKind) -> Any:
        entry = self._objects.get(ident) if type(ident) is int else None
        if entry is None:
            raise UnknownResource(f"{kind.value}#{ident}")
        stored_kind, obj = entry
        if stored_kind is not kind:
            raise UnknownResource(f"{kind.value}#{ident} addresses a {stored_kind.value}")
        return obj

    def kind_of(self, ident: Any) -> HandleKind | None:
        entry = self._objects.get(ident) if type(ident) is int else None
        return entry[0] if entry else None

    def drop(self, ident: Any) -> bool:
        """Forget an identifier. Returns False if it was not live."""
        with self._lock:
            return self._objects.pop(ident, None) is not None

    def __len__(self) -> int:
        return len(self._objects)


REGISTRY = ResourceRegistry()

NATIVE: dict[str, Callable[..., Any]] = {}


def native(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Register a function as a native entry point under its own name."""
    if fn.__name__ in NATIVE:
        raise RuntimeError(f"Native entry point registered twice: {fn.__name__}")
    NATIVE[fn.__name__] = fn
    return fn


def mint(kind: HandleKind, obj: Any) -> int:
    return REGISTRY.mint(kind, obj)


def resolve(ident: Any, kind: HandleKind) -> Any:
    return REGISTRY.resolve(ident, kind)
