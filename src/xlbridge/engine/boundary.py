"""The single crossing point into the native engine.

``call`` lowers handles to their raw identifiers, invokes the registered
native entry point and always hands back a raw outcome.  Exceptions that
escape native code are converted to error wrappers here, so nothing above
this module ever sees a native exception.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

from xlbridge.contracts.handles import Handle, HandleKind, unwrap, wrap
from xlbridge.contracts.results import ERROR, OK, Marker
from xlbridge.engine.normalizer import INVALID_HANDLE_REASON, classify
from xlbridge.observe.events import Timer, observe_call

# public operation currently running in this context, for event tagging
current_operation: ContextVar[str | None] = ContextVar("current_operation", default=None)


def _lower(value: Any) -> Any:
    if isinstance(value, Handle):
        return unwrap(value)
    if isinstance(value, list):
        return [_lower(v) for v in value]
    return value


def _native_table() -> dict[str, Any]:
    import xlbridge.adapters  # noqa: F401  (registers every native entry point)
    from xlbridge.adapters.registry import NATIVE

    return NATIVE


def call(native_name: str, *args: Any, **kwargs: Any) -> Any:
    """Invoke one native entry point and return its raw outcome."""
    from xlbridge.adapters.registry import NativeFault, UnknownResource

    entry = _native_table().get(native_name)
    if entry is None:
        return (ERROR, f"native entry point not found: {native_name}")

    lowered = [_lower(a) for a in args]
    lowered_kw = {k: _lower(v) for k, v in kwargs.items()}

    with Timer() as timer:
        try:
            raw = entry(*lowered, **lowered_kw)
        except UnknownResource as exc:
            raw = (ERROR, f"{INVALID_HANDLE_REASON}: {exc.args[0]}")
        except NativeFault as exc:
            raw = (ERROR, exc.term)
        except Exception as exc:  # noqa: BLE001
            raw = (ERROR, str(exc) or type(exc).__name__)

    observe_call(current_operation.get(), native_name, classify(raw)[0].value, timer.elapsed_ms)
    return raw


def minted(raw: Any, kind: HandleKind) -> Any:
    """Wrap identifiers inside a success outcome as handles of ``kind``."""
    if type(raw) is tuple and len(raw) == 2 and raw[0] is Marker.OK and raw[1] is not Marker.OK:
        payload = raw[1]
        if isinstance(payload, list):
            return (OK, [wrap(ident, kind) for ident in payload])
        return (OK, wrap(payload, kind))
    return raw
