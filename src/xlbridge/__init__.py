"""xlbridge: a typed, handle-based surface over an openpyxl spreadsheet engine.

Every routed operation is reachable as a module attribute::

    import xlbridge as xb

    book = xb.new().value
    xb.set_cell_value(book, "Sheet1", "A1", "hello")
"""

from __future__ import annotations

import importlib
from typing import Any

from xlbridge.contracts import (
    CommandOk,
    Err,
    ErrorCode,
    Handle,
    HandleKind,
    QueryOk,
    unwrap_value,
)

__version__ = "0.1.0"

__all__ = [
    "CommandOk",
    "Err",
    "ErrorCode",
    "Handle",
    "HandleKind",
    "QueryOk",
    "__version__",
    "unwrap_value",
]


def _router():
    # import_module, not "from xlbridge import router": the from-form looks up
    # this module's attributes and would re-enter __getattr__
    return importlib.import_module("xlbridge.router")


def __getattr__(name: str) -> Any:
    if name.startswith("_") or name == "router":
        raise AttributeError(f"module 'xlbridge' has no attribute {name!r}")
    router = _router()
    if name in router.ROUTES or name in router.ALIASES:
        fn = router.resolve(name)
        globals()[name] = fn
        return fn
    raise AttributeError(f"module 'xlbridge' has no attribute {name!r}")


def __dir__() -> list[str]:
    router = _router()
    return sorted({*globals(), *router.ROUTES, *router.ALIASES})
