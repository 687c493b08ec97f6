"""Tests for CLI commands via Typer test runner."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

import xlbridge
from xlbridge.cli import app

runner = CliRunner()


def _run(*args: str):
    result = runner.invoke(app, list(args))
    return result, json.loads(result.stdout)


def test_version():
    result, data = _run("version")
    assert result.exit_code == 0
    assert data["ok"] is True
    assert data["result"] == {"version": xlbridge.__version__}


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == xlbridge.__version__


def test_groups():
    result, data = _run("groups")
    assert result.exit_code == 0
    assert len(data["result"]) == 27
    first = data["result"][0]
    assert first == {"name": "workbook", "module": "xlbridge.ops.workbook", "count": 8}
    assert sum(g["count"] for g in data["result"]) == 337


def test_ops_for_group():
    result, data = _run("ops", "--group", "csv_export")
    assert result.exit_code == 0
    assert data["result"] == [
        {"name": "write_csv", "group": "csv_export", "convention": "command"},
        {"name": "write_csv_with_options", "group": "csv_export", "convention": "command"},
    ]


def test_ops_unknown_group():
    result, data = _run("ops", "--group", "charts2")
    assert result.exit_code == 30
    assert data["errors"][0]["code"] == "ERR_GROUP_NOT_FOUND"


def test_describe_enrolled_getter():
    result, data = _run("describe", "get_row_height")
    assert result.exit_code == 0
    info = data["result"]
    assert info["group"] == "rows_columns"
    assert info["convention"] == "fallible_query"
    assert [p["name"] for p in info["parameters"]] == ["book", "sheet", "row"]
    assert info["default_policy"] == {
        "operation": "get_row_height", "sentinel": 0.0, "default": 15.0, "ambiguous": True,
    }


def test_describe_alias():
    result, data = _run("describe", "get_hyperlinks")
    assert result.exit_code == 0
    assert data["result"]["name"] == "get_all_hyperlinks"
    assert "get_hyperlinks" in data["result"]["aliases"]


def test_describe_unknown():
    result, data = _run("describe", "frobnicate")
    assert result.exit_code == 30
    assert data["errors"][0]["code"] == "ERR_OPERATION_NOT_FOUND"


def test_defaults():
    result, data = _run("defaults")
    assert result.exit_code == 0
    by_op = {entry["operation"]: entry for entry in data["result"]}
    assert by_op["get_font_name"]["default"] == "Calibri"
    assert "get_title" not in by_op


def test_sheets(sales_file: Path):
    result, data = _run("sheets", "--file", str(sales_file))
    assert result.exit_code == 0
    assert data["command"] == "sheets"
    assert data["result"] == ["Data", "Summary"]
    assert data["target"]["file"] == str(sales_file)


def test_sheets_missing_file(tmp_path: Path):
    result, data = _run("sheets", "--file", str(tmp_path / "nope.xlsx"))
    assert result.exit_code == 30
    assert data["ok"] is False
    assert data["errors"][0]["code"] == "NOT_FOUND"
    assert data["errors"][0]["message"].startswith("File not found")


def test_cell(sales_file: Path):
    result, data = _run("cell", "-f", str(sales_file), "--sheet", "Data", "--ref", "C2")
    assert result.exit_code == 0
    assert data["result"] == 1000
    assert data["target"]["ref"] == "C2"


def test_cell_missing_sheet(sales_file: Path):
    result, data = _run("cell", "-f", str(sales_file), "--sheet", "Ghost", "--ref", "A1")
    assert result.exit_code == 30
    assert data["errors"][0]["message"] == "Sheet not found: Ghost"


def test_cell_bad_ref(sales_file: Path):
    result, data = _run("cell", "-f", str(sales_file), "--sheet", "Data", "--ref", "1A")
    assert result.exit_code == 10
    assert data["errors"][0]["code"] == "VALIDATION"


def test_csv(sales_file: Path, tmp_path: Path):
    out = tmp_path / "data.csv"
    result, data = _run("csv", "-f", str(sales_file), "-s", "Data", "-o", str(out), "--delimiter", ";")
    assert result.exit_code == 0
    assert data["result"] is None
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Region;Product;Sales;Cost"
    assert lines[1] == "North;Widget;1000;600"


def test_csv_bad_encoding(sales_file: Path, tmp_path: Path):
    result, data = _run(
        "csv", "-f", str(sales_file), "-s", "Data", "-o", str(tmp_path / "x.csv"), "--encoding", "latin9",
    )
    assert result.exit_code == 10
    assert data["ok"] is False


def test_compress(sales_file: Path, tmp_path: Path):
    out = tmp_path / "small.xlsx"
    result, data = _run("compress", "-f", str(sales_file), "-o", str(out), "--level", "9")
    assert result.exit_code == 0
    assert data["result"]["level"] == 9
    assert data["result"]["size"] == out.stat().st_size
    assert data["result"]["fingerprint"].startswith("sha256:")
    again = xlbridge.read(out).value
    assert xlbridge.get_sheet_names(again) == ["Data", "Summary"]


def test_compress_level_checked(sales_file: Path, tmp_path: Path):
    result, data = _run("compress", "-f", str(sales_file), "-o", str(tmp_path / "x.xlsx"), "--level", "12")
    assert result.exit_code == 10
    assert data["errors"][0]["code"] == "VALIDATION"


def test_serve_writes_trace(tmp_path: Path):
    trace = tmp_path / "trace.json"
    lines = '{"id": "1", "op": "new"}\n{"id": "2", "op": "get_sheet_count", "args": [{"$handle": {"kind": "spreadsheet", "id": 999999}}]}\n'
    result = runner.invoke(app, ["serve", "--stdio", "--trace-out", str(trace)], input=lines)
    assert result.exit_code == 0
    responses = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["id"] for r in responses] == ["1", "2"]
    saved = json.loads(trace.read_text())
    assert [e["native"] for e in saved["entries"]] == ["new", "get_sheet_count"]
    assert saved["entries"][1]["shape"] == "failure"
