"""Tests for response envelopes and exit codes."""

from __future__ import annotations

import json

import pytest

from xlbridge.contracts.common import Target
from xlbridge.contracts.handles import HandleKind, wrap
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk
from xlbridge.engine.dispatcher import (
    EXIT_CODES,
    envelope_for,
    error_envelope,
    exit_code_for,
    output_json,
    success_envelope,
    to_wire,
)


class TestToWire:
    def test_handles_and_bytes_are_tagged(self):
        value = {"book": wrap(3, HandleKind.SPREADSHEET), "data": b"\x00\x01", "n": [1, (2, 3)]}
        assert to_wire(value) == {
            "book": {"$handle": {"kind": "spreadsheet", "id": 3}},
            "data": {"$bytes": "AAE="},
            "n": [1, [2, 3]],
        }

    def test_dict_keys_become_strings(self):
        assert to_wire({1: "a"}) == {"1": "a"}

    def test_scalars_pass_through(self):
        assert to_wire("x") == "x"
        assert to_wire(None) is None


class TestEnvelopeFor:
    def test_command_ok(self):
        env = envelope_for("set_font_bold", COMMAND_OK, convention="command")
        assert env.ok is True
        assert env.result is None
        assert env.convention == "command"

    def test_query_ok(self):
        env = envelope_for("get_font_size", QueryOk(value=11.0))
        assert env.result == 11.0

    def test_falsy_query_value(self):
        assert envelope_for("get_font_bold", QueryOk(value=False)).result is False

    def test_bare_value(self):
        assert envelope_for("get_sheet_names", ["Sheet"]).result == ["Sheet"]

    def test_err(self):
        env = envelope_for(
            "get_table", Err(code=ErrorCode.NOT_FOUND, reason="Table not found: T"),
            target=Target(sheet="Data"),
        )
        assert env.ok is False
        assert env.errors[0].code == "NOT_FOUND"
        assert env.errors[0].message == "Table not found: T"
        assert env.target.sheet == "Data"

    def test_output_json(self):
        text = output_json(success_envelope("new", wrap(1, HandleKind.SPREADSHEET), duration_ms=4))
        data = json.loads(text)
        assert data["result"] == {"$handle": {"kind": "spreadsheet", "id": 1}}
        assert data["metrics"] == {"duration_ms": 4}
        assert data["errors"] == [] and data["warnings"] == []


class TestExitCodes:
    def test_success(self):
        assert exit_code_for(success_envelope("x", 1)) == 0

    @pytest.mark.parametrize(
        "code, message, expected",
        [
            ("VALIDATION", "bad", EXIT_CODES["validation"]),
            ("ERR_USAGE", "bad", EXIT_CODES["validation"]),
            ("INVALID_HANDLE", "invalid handle: spreadsheet#9", EXIT_CODES["invalid_handle"]),
            ("NOT_FOUND", "Sheet not found: X", EXIT_CODES["not_found"]),
            ("ERR_GROUP_NOT_FOUND", "Unknown group: x", EXIT_CODES["not_found"]),
            ("ERR_LOCK_HELD", "busy", EXIT_CODES["io"]),
            ("NATIVE", "password protected files are not supported by this engine", EXIT_CODES["unsupported"]),
            ("NATIVE", "Table with name T already exists", EXIT_CODES["native"]),
            ("GENERIC_FAILURE", "failed to add chart", EXIT_CODES["native"]),
            ("ERR_CONTRACT_VIOLATION", "get_sheet_names: ...", EXIT_CODES["internal"]),
        ],
    )
    def test_mapping(self, code, message, expected):
        assert exit_code_for(error_envelope("x", code, message)) == expected

    def test_failure_without_errors(self):
        env = success_envelope("x", None)
        env.ok = False
        assert exit_code_for(env) == EXIT_CODES["internal"]
