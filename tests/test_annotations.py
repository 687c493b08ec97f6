"""Tests for comments, hyperlinks, formulas, defined names and auto filters."""

from __future__ import annotations

from pathlib import Path

import pytest

import xlbridge
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk


class TestComments:
    def test_add_and_read(self, book):
        assert xlbridge.add_comment(book, "Sheet", "B2", "Check this", "Ann") == COMMAND_OK
        assert xlbridge.get_comment(book, "Sheet", "B2") == QueryOk(value=("Check this", "Ann"))
        assert xlbridge.has_comments(book, "Sheet").value is True

    def test_update_keeps_author(self, book):
        xlbridge.add_comment(book, "Sheet", "A1", "draft", "Ann")
        xlbridge.update_comment(book, "Sheet", "A1", "final")
        assert xlbridge.get_comment(book, "Sheet", "A1").value == ("final", "Ann")
        xlbridge.update_comment(book, "Sheet", "A1", "final", author="Bo")
        assert xlbridge.get_comment(book, "Sheet", "A1").value == ("final", "Bo")

    def test_missing_comment(self, book):
        result = xlbridge.get_comment(book, "Sheet", "A1")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Comment not found: Sheet!A1")
        assert xlbridge.update_comment(book, "Sheet", "A1", "x").code is ErrorCode.NOT_FOUND

    def test_listing_is_row_major(self, book):
        xlbridge.add_comment(book, "Sheet", "B3", "third", "c")
        xlbridge.add_comment(book, "Sheet", "C1", "first", "a")
        xlbridge.add_comment(book, "Sheet", "A2", "second", "b")
        listed = xlbridge.get_all_comments(book, "Sheet").value
        assert [c["cell"] for c in listed] == ["C1", "A2", "B3"]
        assert listed[0] == {"cell": "C1", "text": "first", "author": "a"}
        assert xlbridge.get_comments_count(book, "Sheet").value == 3

    def test_remove(self, book):
        xlbridge.add_comment(book, "Sheet", "A1", "note", "Ann")
        assert xlbridge.remove_comment(book, "Sheet", "A1") == COMMAND_OK
        assert xlbridge.has_comments(book, "Sheet").value is False
        assert xlbridge.remove_comment(book, "Sheet", "A1").code is ErrorCode.NOT_FOUND

    def test_comments_survive_save(self, book, tmp_path: Path):
        xlbridge.add_comment(book, "Sheet", "D4", "kept", "Ann")
        out = tmp_path / "notes.xlsx"
        xlbridge.write(book, out)
        again = xlbridge.read(out).value
        assert xlbridge.get_comment(again, "Sheet", "D4").value[0].startswith("kept")


class TestHyperlinks:
    def test_external_link(self, book):
        xlbridge.add_hyperlink(book, "Sheet", "A1", "https://example.com", tooltip="Home")
        assert xlbridge.get_hyperlink(book, "Sheet", "A1").value == {
            "cell": "A1", "url": "https://example.com", "tooltip": "Home", "is_internal": False,
        }

    def test_link_on_empty_cell_shows_url(self, book):
        xlbridge.add_hyperlink(book, "Sheet", "A1", "https://example.com")
        assert xlbridge.get_cell_value(book, "Sheet", "A1").value == "https://example.com"

    def test_link_keeps_existing_value(self, book):
        xlbridge.set_cell_value(book, "Sheet", "A1", "Docs")
        xlbridge.add_hyperlink(book, "Sheet", "A1", "https://example.com/docs")
        assert xlbridge.get_cell_value(book, "Sheet", "A1").value == "Docs"

    def test_internal_link(self, book):
        xlbridge.add_hyperlink(book, "Sheet", "A1", "#Sheet!C3", is_internal=True)
        link = xlbridge.get_hyperlink(book, "Sheet", "A1").value
        assert link["url"] == "Sheet!C3"
        assert link["is_internal"] is True

    def test_missing_link(self, book):
        assert xlbridge.has_hyperlink(book, "Sheet", "A1") == QueryOk(value=False)
        result = xlbridge.get_hyperlink(book, "Sheet", "A1")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Hyperlink not found: Sheet!A1")

    def test_update_and_remove(self, book):
        xlbridge.add_hyperlink(book, "Sheet", "B2", "https://old.example.com")
        assert xlbridge.update_hyperlink(book, "Sheet", "B2", "https://new.example.com") == COMMAND_OK
        assert xlbridge.get_hyperlink(book, "Sheet", "B2").value["url"] == "https://new.example.com"
        assert xlbridge.remove_hyperlink(book, "Sheet", "B2") == COMMAND_OK
        assert xlbridge.has_hyperlinks(book, "Sheet").value is False

    def test_bulk(self, book):
        entries = [
            {"cell": "A2", "url": "https://b.example.com"},
            {"cell": "A1", "url": "https://a.example.com", "tooltip": "first"},
            {"cell": "C1", "url": "Sheet!A1", "is_internal": True},
        ]
        assert xlbridge.add_bulk_hyperlinks(book, "Sheet", entries) == COMMAND_OK
        assert xlbridge.count_hyperlinks(book, "Sheet").value == 3
        cells = [link["cell"] for link in xlbridge.get_all_hyperlinks(book, "Sheet").value]
        assert cells == ["A1", "C1", "A2"]
        xlbridge.remove_all_hyperlinks(book, "Sheet")
        assert xlbridge.count_hyperlinks(book, "Sheet").value == 0

    @pytest.mark.parametrize(
        "entries",
        [
            [{"url": "https://example.com"}],
            [{"cell": "A1", "url": "https://example.com", "is_internal": "yes"}],
            "A1",
        ],
    )
    def test_bulk_entries_checked(self, book, entries):
        assert xlbridge.add_bulk_hyperlinks(book, "Sheet", entries).code is ErrorCode.VALIDATION

    def test_url_required(self, book):
        assert xlbridge.add_hyperlink(book, "Sheet", "A1", "").code is ErrorCode.VALIDATION


class TestFormulas:
    def test_set_formula_adds_equals(self, book):
        xlbridge.set_formula(book, "Sheet", "A3", "SUM(A1:A2)")
        assert xlbridge.get_cell_formula(book, "Sheet", "A3") == QueryOk(value="=SUM(A1:A2)")

    def test_plain_value_has_no_formula(self, book):
        xlbridge.set_cell_value(book, "Sheet", "A1", 5)
        assert xlbridge.get_cell_formula(book, "Sheet", "A1").value == ""
        assert xlbridge.get_cell_formula(book, "Sheet", "Z99").value == ""

    def test_array_formula(self, book):
        assert xlbridge.set_array_formula(book, "Sheet", "D1:D3", "B1:B3*C1:C3") == COMMAND_OK
        assert xlbridge.get_cell_formula(book, "Sheet", "D1").value == "=B1:B3*C1:C3"

    def test_existing_formula(self, sales_book):
        assert xlbridge.get_cell_formula(sales_book, "Summary", "B1").value == "=SUM(Data!C2:C5)"


class TestDefinedNames:
    def test_named_range(self, sales_book):
        assert xlbridge.create_named_range(sales_book, "Sales", "Data", "C2:C5") == COMMAND_OK
        assert xlbridge.get_defined_names(sales_book).value == [
            {"name": "Sales", "value": "'Data'!$C$2:$C$5", "scope": ""},
        ]

    def test_duplicate_named_range(self, book):
        xlbridge.create_named_range(book, "Block", "Sheet", "A1:B2")
        result = xlbridge.create_named_range(book, "Block", "Sheet", "C1:D2")
        assert result == Err(code=ErrorCode.NATIVE, reason="Defined name already exists: Block")

    def test_named_range_on_missing_sheet(self, book):
        result = xlbridge.create_named_range(book, "Block", "Ghost", "A1:B2")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Sheet not found: Ghost")

    def test_defined_name_scopes(self, book):
        xlbridge.create_defined_name(book, "Rate", "=0.2")
        xlbridge.create_defined_name(book, "Local", "Sheet!$A$1", local_sheet="Sheet")
        assert xlbridge.get_defined_names(book).value == [
            {"name": "Rate", "value": "0.2", "scope": ""},
            {"name": "Local", "value": "Sheet!$A$1", "scope": "Sheet"},
        ]

    def test_remove(self, book):
        xlbridge.create_defined_name(book, "Local", "1", local_sheet="Sheet")
        assert xlbridge.remove_defined_name(book, "Local") == COMMAND_OK
        assert xlbridge.get_defined_names(book).value == []
        result = xlbridge.remove_defined_name(book, "Local")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Defined name not found: Local")

    @pytest.mark.parametrize("name", ["AB12", "1st", "has space", ""])
    def test_invalid_names(self, book, name):
        assert xlbridge.create_defined_name(book, name, "1").code is ErrorCode.VALIDATION


class TestAutoFilters:
    def test_set_and_read(self, sales_book):
        assert xlbridge.get_auto_filter_range(sales_book, "Data") == QueryOk(value=None)
        assert xlbridge.set_auto_filter(sales_book, "Data", "A1:D5") == COMMAND_OK
        assert xlbridge.has_auto_filter(sales_book, "Data").value is True
        assert xlbridge.get_auto_filter_range(sales_book, "Data").value == "A1:D5"

    def test_remove(self, sales_book):
        xlbridge.set_auto_filter(sales_book, "Data", "A1:D5")
        assert xlbridge.remove_auto_filter(sales_book, "Data") == COMMAND_OK
        assert xlbridge.has_auto_filter(sales_book, "Data").value is False

    def test_remove_when_unset(self, book):
        result = xlbridge.remove_auto_filter(book, "Sheet")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Auto filter not found: Sheet")

    def test_bad_range(self, book):
        assert xlbridge.set_auto_filter(book, "Sheet", "A1:").code is ErrorCode.VALIDATION
