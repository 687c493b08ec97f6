"""Response envelope helpers shared by the CLI and the stdio server."""

from __future__ import annotations

import base64
import sys
from typing import Any, Callable

import orjson

from xlbridge.contracts.common import (
    ErrorDetail,
    Metrics,
    ResponseEnvelope,
    Target,
)
from xlbridge.contracts.handles import Handle
from xlbridge.contracts.results import CommandOk, Err, ErrorCode, QueryOk

# Exit code mapping
EXIT_CODES = {
    "success": 0,
    "validation": 10,
    "not_found": 30,
    "invalid_handle": 40,
    "io": 50,
    "unsupported": 70,
    "native": 80,
    "internal": 90,
}

IO_CODE_MARKERS = ("ERR_IO", "LOCK", "FILE_NOT_FOUND")


def to_wire(value: Any) -> Any:
    """Make a result JSON-safe: handles and bytes get tagged objects."""
    if isinstance(value, Handle):
        return {"$handle": {"kind": value.kind.value, "id": value.ident}}
    if isinstance(value, (bytes, bytearray)):
        return {"$bytes": base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, dict):
        return {str(k): to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value


def _envelope(command: str, *, target, convention, duration_ms, **fields: Any) -> ResponseEnvelope:
    return ResponseEnvelope(
        command=command,
        target=target or Target(),
        convention=convention,
        metrics=Metrics(duration_ms=duration_ms),
        **fields,
    )


def success_envelope(
    command: str,
    result: Any,
    *,
    target: Target | None = None,
    convention: str | None = None,
    warnings: list | None = None,
    duration_ms: int = 0,
) -> ResponseEnvelope:
    return _envelope(
        command, target=target, convention=convention, duration_ms=duration_ms,
        ok=True, result=to_wire(result), warnings=warnings or [],
    )


def error_envelope(
    command: str,
    code: str,
    message: str,
    *,
    target: Target | None = None,
    convention: str | None = None,
    details: dict | None = None,
    duration_ms: int = 0,
) -> ResponseEnvelope:
    return _envelope(
        command, target=target, convention=convention, duration_ms=duration_ms,
        ok=False, errors=[ErrorDetail(code=code, message=message, details=details)],
    )


def envelope_for(
    command: str,
    result: Any,
    *,
    target: Target | None = None,
    convention: str | None = None,
    duration_ms: int = 0,
) -> ResponseEnvelope:
    """Render a canonical result (or a bare infallible value) as an envelope."""
    context = {"target": target, "convention": convention, "duration_ms": duration_ms}
    if isinstance(result, Err):
        return error_envelope(command, result.code.value, result.reason, **context)
    if isinstance(result, CommandOk):
        return success_envelope(command, None, **context)
    if isinstance(result, QueryOk):
        return success_envelope(command, result.value, **context)
    return success_envelope(command, result, **context)


def output_json(envelope: ResponseEnvelope) -> str:
    """Serialize envelope to JSON string using orjson."""
    return orjson.dumps(envelope.model_dump(mode="json"), option=orjson.OPT_INDENT_2).decode()


def print_response(envelope: ResponseEnvelope) -> None:
    sys.stdout.write(output_json(envelope) + "\n")


# First matching rule wins; each rule sees the upper-cased code and lower-cased message.
_EXIT_RULES: list[tuple[str, Callable[[str, str], bool]]] = [
    ("validation", lambda code, msg: code == ErrorCode.VALIDATION.value or "USAGE" in code),
    ("invalid_handle", lambda code, msg: code == ErrorCode.INVALID_HANDLE.value),
    ("io", lambda code, msg: any(marker in code for marker in IO_CODE_MARKERS)),
    ("not_found", lambda code, msg: ErrorCode.NOT_FOUND.value in code),
    ("unsupported", lambda code, msg: "UNSUPPORTED" in code or "not supported" in msg),
    ("native", lambda code, msg: code in (ErrorCode.NATIVE.value, ErrorCode.GENERIC_FAILURE.value)),
]


def exit_code_for(envelope: ResponseEnvelope) -> int:
    """Process exit code for an envelope; 0 on success."""
    if envelope.ok:
        return EXIT_CODES["success"]
    if not envelope.errors:
        return EXIT_CODES["internal"]
    first = envelope.errors[0]
    code, message = first.code.upper(), first.message.lower()
    for category, matches in _EXIT_RULES:
        if matches(code, message):
            return EXIT_CODES[category]
    return EXIT_CODES["internal"]
