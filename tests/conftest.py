"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook

import xlbridge
from xlbridge.config import configure, reset_config

ENV_VARS = ("XLBRIDGE_STRICT", "XLBRIDGE_EVENTS", "XLBRIDGE_TRACE", "XLBRIDGE_LOCK_TIMEOUT")


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Every test starts from built-in settings, ignoring the caller's env and cwd."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture()
def strict():
    """Turn contract defects into exceptions."""
    return configure(strict_contracts=True)


@pytest.fixture()
def book():
    """A fresh in-memory spreadsheet with the default sheet named ``Sheet``."""
    return xlbridge.new().value


@pytest.fixture()
def sales_file(tmp_path: Path) -> Path:
    """A small workbook on disk: a ``Data`` sheet with a header row and a ``Summary`` sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Data"
    ws.append(["Region", "Product", "Sales", "Cost"])
    ws.append(["North", "Widget", 1000, 600])
    ws.append(["South", "Widget", 1500, 900])
    ws.append(["East", "Gadget", 2000, 1100])
    ws.append(["West", "Gadget", 800, 500])

    ws2 = wb.create_sheet("Summary")
    ws2["A1"] = "Total Sales"
    ws2["B1"] = "=SUM(Data!C2:C5)"

    path = tmp_path / "sales.xlsx"
    wb.save(str(path))
    return path


@pytest.fixture()
def sales_book(sales_file: Path):
    return xlbridge.read(sales_file).value
