"""Tests for document properties and protection."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest

import xlbridge
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk


class TestCustomProperties:
    @pytest.mark.parametrize(
        "value",
        ["Finance", 42, 2.5, True, datetime.datetime(2024, 1, 2, 3, 4, 5)],
    )
    def test_typed_values(self, book, value):
        assert xlbridge.set_custom_property(book, "Prop", value) == COMMAND_OK
        assert xlbridge.get_custom_property(book, "Prop") == QueryOk(value=value)

    def test_replace_keeps_one_entry(self, book):
        xlbridge.set_custom_property(book, "Dept", "Sales")
        xlbridge.set_custom_property(book, "Dept", 7)
        assert xlbridge.get_custom_property_names(book).value == ["Dept"]
        assert xlbridge.get_custom_property(book, "Dept").value == 7

    def test_missing(self, book):
        result = xlbridge.get_custom_property(book, "Nope")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Custom property not found: Nope")
        assert xlbridge.remove_custom_property(book, "Nope").code is ErrorCode.NOT_FOUND

    def test_remove_and_clear(self, book):
        xlbridge.set_custom_property(book, "A", "1")
        xlbridge.set_custom_property(book, "B", "2")
        assert xlbridge.get_custom_properties_count(book).value == 2
        xlbridge.remove_custom_property(book, "A")
        assert xlbridge.has_custom_property(book, "A").value is False
        assert xlbridge.clear_custom_properties(book) == COMMAND_OK
        assert xlbridge.get_custom_properties_count(book).value == 0

    def test_unsupported_type(self, book):
        assert xlbridge.set_custom_property(book, "Data", [1, 2]).code is ErrorCode.VALIDATION

    def test_survive_save(self, book, tmp_path: Path):
        xlbridge.set_custom_property(book, "Reviewed", True)
        out = tmp_path / "props.xlsx"
        xlbridge.write(book, out)
        again = xlbridge.read(out).value
        assert xlbridge.get_custom_property(again, "Reviewed").value is True


class TestCoreProperties:
    def test_unset_text_reads_empty(self, book):
        assert xlbridge.get_title(book) == QueryOk(value="")
        assert xlbridge.get_category(book).value == ""

    @pytest.mark.parametrize(
        "field", ["title", "description", "subject", "keywords", "creator", "last_modified_by", "category"],
    )
    def test_text_fields(self, book, field):
        assert getattr(xlbridge, f"set_{field}")(book, f"some {field}") == COMMAND_OK
        assert getattr(xlbridge, f"get_{field}")(book).value == f"some {field}"

    def test_timestamps(self, book):
        xlbridge.set_created(book, "2024-01-02T03:04:05Z")
        xlbridge.set_modified(book, datetime.datetime(2024, 6, 1, 12, 0, 0))
        assert xlbridge.get_created(book).value == "2024-01-02T03:04:05Z"
        assert xlbridge.get_modified(book).value == "2024-06-01T12:00:00Z"

    @pytest.mark.parametrize("value", ["yesterday", 20240102])
    def test_bad_timestamp(self, book, value):
        assert xlbridge.set_created(book, value).code is ErrorCode.VALIDATION

    def test_set_properties(self, book):
        xlbridge.set_properties(book, {"title": "Budget", "subject": "FY24", "created": "2024-02-03T00:00:00"})
        everything = xlbridge.get_all_properties(book).value
        assert everything["title"] == "Budget"
        assert everything["subject"] == "FY24"
        assert everything["created"] == "2024-02-03T00:00:00Z"
        assert set(everything) == {
            "title", "description", "subject", "keywords", "creator",
            "last_modified_by", "category", "created", "modified",
        }

    @pytest.mark.parametrize("properties", [{}, {"company": "Acme"}, {"title": 3}, ["title"]])
    def test_set_properties_checked(self, book, properties):
        assert xlbridge.set_properties(book, properties).code is ErrorCode.VALIDATION


class TestProtection:
    def test_sheet_protection(self, book):
        assert xlbridge.is_sheet_protected(book, "Sheet").value is False
        assert xlbridge.set_sheet_protection(book, "Sheet", "secret") == COMMAND_OK
        details = xlbridge.get_sheet_protection(book, "Sheet").value
        assert details["protected"] is True
        assert details["has_password"] is True
        assert details["format_cells"] is True
        assert xlbridge.set_sheet_protection(book, "Sheet", protected=False) == COMMAND_OK
        assert xlbridge.is_sheet_protected(book, "Sheet").value is False

    def test_workbook_protection(self, book):
        assert xlbridge.is_workbook_protected(book).value is False
        xlbridge.set_workbook_protection(book, "secret")
        assert xlbridge.is_workbook_protected(book).value is True
        assert xlbridge.get_workbook_protection_details(book).value == {
            "lock_structure": True,
            "lock_windows": False,
            "lock_revision": False,
            "has_password": True,
        }

    def test_workbook_password_required(self, book):
        assert xlbridge.set_workbook_protection(book, "").code is ErrorCode.VALIDATION

    def test_cells_are_locked_by_default(self, book):
        assert xlbridge.get_cell_locked(book, "Sheet", "A1").value is True
        assert xlbridge.get_cell_hidden(book, "Sheet", "A1").value is False

    def test_cell_flags(self, book):
        xlbridge.set_cell_locked(book, "Sheet", "B2", False)
        xlbridge.set_cell_hidden(book, "Sheet", "B2", True)
        assert xlbridge.get_cell_locked(book, "Sheet", "B2").value is False
        assert xlbridge.get_cell_hidden(book, "Sheet", "B2").value is True

    def test_protection_missing_sheet(self, book):
        result = xlbridge.set_sheet_protection(book, "Ghost")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Sheet not found: Ghost")
