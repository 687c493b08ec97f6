"""stdio server mode: JSON line-delimited protocol over stdin/stdout.

Each request line is ``{"id": ..., "op": "<operation>", "args": [...], "kwargs": {...}}``.
Handles travel as ``{"$handle": {"kind": ..., "id": ...}}`` and bytes as
``{"$bytes": "<base64>"}`` in both directions.  Two extra ops are served
here rather than routed: ``ops`` lists the routed names and ``release``
drops a handle's identifier on the native side when the handle's kind matches.
"""

from __future__ import annotations

import base64
import binascii
import sys
from typing import Any, TextIO

import orjson

from xlbridge import router
from xlbridge.contracts.common import BridgeError, ContractViolation, Target
from xlbridge.contracts.handles import Handle, HandleKind, wrap
from xlbridge.engine.dispatcher import envelope_for, error_envelope, success_envelope
from xlbridge.engine.operation import OPERATIONS
from xlbridge.observe.events import Timer


class RequestError(BridgeError):
    """A request line that cannot be turned into a call."""


def decode(value: Any) -> Any:
    """Turn wire-tagged objects back into handles and bytes."""
    if isinstance(value, dict):
        if set(value) == {"$handle"}:
            tag = value["$handle"]
            if not isinstance(tag, dict) or "kind" not in tag or "id" not in tag:
                raise RequestError(f"malformed handle: {tag!r}")
            try:
                kind = HandleKind(tag["kind"])
            except ValueError as exc:
                raise RequestError(f"unknown handle kind: {tag['kind']!r}") from exc
            return wrap(tag["id"], kind)
        if set(value) == {"$bytes"}:
            try:
                return base64.b64decode(value["$bytes"], validate=True)
            except (binascii.Error, TypeError) as exc:
                raise RequestError("malformed $bytes payload") from exc
        return {k: decode(v) for k, v in value.items()}
    if isinstance(value, list):
        return [decode(v) for v in value]
    return value


class StdioServer:
    """Serve routed operations over stdin/stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _ops(self) -> Any:
        router.load_all()
        return success_envelope("ops", [
            {"name": name, "group": group, "convention": OPERATIONS[name].convention.value}
            for name, group in router.ROUTES.items()
        ])

    def _release(self, args: list[Any]) -> Any:
        from xlbridge.adapters.registry import REGISTRY

        if len(args) != 1 or not isinstance(args[0], Handle):
            raise RequestError("release takes exactly one handle")
        handle = args[0]
        stored = REGISTRY.kind_of(handle.ident)
        if stored is not None and stored is not handle.kind:
            raise RequestError(f"{handle.kind.value}#{handle.ident} addresses a {stored.value}")
        dropped = REGISTRY.drop(handle.ident)
        return success_envelope(
            "release", {"released": dropped},
            target=Target(handle={"kind": handle.kind.value, "id": handle.ident}),
        )

    def handle_request(self, request: dict[str, Any]) -> dict[str, Any]:
        req_id = request.get("id", "")
        op = request.get("op", "")

        with Timer() as t:
            try:
                args = decode(request.get("args", []))
                kwargs = decode(request.get("kwargs", {}))
                if not isinstance(args, list) or not isinstance(kwargs, dict):
                    raise RequestError("'args' must be a list and 'kwargs' an object")

                if op == "ops":
                    env = self._ops()
                elif op == "release":
                    env = self._release(args)
                elif op in router.ROUTES or op in router.ALIASES:
                    fn = router.resolve(op)
                    result = fn(*args, **kwargs)
                    name = router.canonical(op)
                    env = envelope_for(name, result, convention=OPERATIONS[name].convention.value)
                else:
                    env = error_envelope(op, "ERR_UNKNOWN_OPERATION", f"Unknown operation: {op}")
            except RequestError as e:
                env = error_envelope(op, "ERR_REQUEST_INVALID", str(e))
            except ContractViolation as e:
                env = error_envelope(op, "ERR_CONTRACT_VIOLATION", str(e))
            except (BridgeError, TypeError, ValueError) as e:
                env = error_envelope(op, "VALIDATION", str(e))

        env.metrics.duration_ms = t.elapsed_ms
        return {"id": req_id, **env.model_dump(mode="json")}

    def _write(self, response: dict[str, Any]) -> None:
        self.stdout.write(orjson.dumps(response, default=str).decode() + "\n")
        self.stdout.flush()

    def run(self) -> None:
        """Main server loop: read JSON lines from stdin, write responses to stdout."""
        for line in self.stdin:
            line = line.strip()
            if not line:
                continue
            try:
                request = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                self._write({"ok": False, "errors": [{"code": "ERR_REQUEST_INVALID", "message": f"Invalid JSON: {e}"}]})
                continue
            if not isinstance(request, dict):
                self._write({"ok": False, "errors": [{"code": "ERR_REQUEST_INVALID", "message": "Request must be an object"}]})
                continue
            self._write(self.handle_request(request))
