"""Tests for structured tables and pivot tables."""

from __future__ import annotations

from pathlib import Path

import pytest

import xlbridge
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk


@pytest.fixture
def sales_table(sales_book):
    xlbridge.add_table(sales_book, "Data", "Sales", "Sales", "A1", "D5", ["Region", "Product", "Sales", "Cost"])
    return sales_book


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TestTables:
    def test_add_and_read(self, sales_table):
        assert xlbridge.get_table(sales_table, "Data", "Sales") == QueryOk(value={
            "name": "Sales",
            "display_name": "Sales",
            "ref": "A1:D5",
            "columns": ["Region", "Product", "Sales", "Cost"],
            "has_totals_row": False,
            "style": None,
        })
        assert xlbridge.has_tables(sales_table, "Data").value is True
        assert xlbridge.count_tables(sales_table, "Data").value == 1

    def test_columns_written_as_header(self, book):
        xlbridge.add_table(book, "Sheet", "T1", "People", "B2", "C4", ["Name", "Age"])
        assert xlbridge.get_cell_value(book, "Sheet", "B2").value == "Name"
        assert xlbridge.get_cell_value(book, "Sheet", "C2").value == "Age"

    def test_lookup_by_display_name(self, book):
        xlbridge.add_table(book, "Sheet", "T1", "People", "A1", "B3", ["Name", "Age"])
        assert xlbridge.get_table(book, "Sheet", "People").value["name"] == "T1"

    def test_duplicate_name(self, sales_table):
        result = xlbridge.add_table(sales_table, "Summary", "Sales", "Sales", "D1", "D2", ["X"])
        assert result == Err(code=ErrorCode.NATIVE, reason="Table with name Sales already exists")

    def test_width_must_match_columns(self, book):
        result = xlbridge.add_table(book, "Sheet", "T1", "T1", "A1", "C3", ["One", "Two"])
        assert result == Err(code=ErrorCode.NATIVE, reason="table spans 3 columns but 2 names were given")

    @pytest.mark.parametrize(
        "name, columns",
        [("has space", ["A"]), ("1st", ["A"]), ("T1", []), ("T1", ["A", "A"])],
    )
    def test_arguments_checked(self, book, name, columns):
        result = xlbridge.add_table(book, "Sheet", name, "T1", "A1", "A3", columns)
        assert result.code is ErrorCode.VALIDATION

    def test_remove(self, sales_table):
        assert xlbridge.remove_table(sales_table, "Data", "Sales") == COMMAND_OK
        assert xlbridge.get_tables(sales_table, "Data").value == []
        result = xlbridge.remove_table(sales_table, "Data", "Sales")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Table not found: Sales")

    def test_style(self, sales_table):
        assert xlbridge.get_table_style(sales_table, "Data", "Sales").value is None
        xlbridge.set_table_style(sales_table, "Data", "Sales", "TableStyleMedium9", show_first_col=True)
        assert xlbridge.get_table_style(sales_table, "Data", "Sales").value == {
            "name": "TableStyleMedium9",
            "show_first_col": True,
            "show_last_col": False,
            "show_row_stripes": True,
            "show_col_stripes": False,
        }
        assert xlbridge.remove_table_style(sales_table, "Data", "Sales") == COMMAND_OK
        assert xlbridge.get_table(sales_table, "Data", "Sales").value["style"] is None

    def test_add_column_extends_ref(self, sales_table):
        assert xlbridge.add_table_column(sales_table, "Data", "Sales", "Margin", "sum") == COMMAND_OK
        assert xlbridge.get_table(sales_table, "Data", "Sales").value["ref"] == "A1:E5"
        assert xlbridge.get_cell_value(sales_table, "Data", "E1").value == "Margin"
        assert xlbridge.get_table_columns(sales_table, "Data", "Sales").value[-1] == {
            "name": "Margin", "totals_row_function": "sum", "totals_row_label": None,
        }

    def test_add_existing_column(self, sales_table):
        result = xlbridge.add_table_column(sales_table, "Data", "Sales", "Cost")
        assert result == Err(code=ErrorCode.NATIVE, reason="Column already exists in table Sales: Cost")

    def test_modify_column(self, sales_table):
        xlbridge.modify_table_column(sales_table, "Data", "Sales", "Cost", new_name="COGS", totals_row_label="Total")
        columns = xlbridge.get_table_columns(sales_table, "Data", "Sales").value
        assert columns[3] == {"name": "COGS", "totals_row_function": None, "totals_row_label": "Total"}
        assert xlbridge.get_cell_value(sales_table, "Data", "D1").value == "COGS"

    def test_modify_missing_column(self, sales_table):
        result = xlbridge.modify_table_column(sales_table, "Data", "Sales", "Nope", new_name="X")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Table column not found: Nope")

    def test_totals_function_checked(self, sales_table):
        result = xlbridge.add_table_column(sales_table, "Data", "Sales", "Margin", "median")
        assert result.code is ErrorCode.VALIDATION

    def test_totals_row(self, sales_table):
        assert xlbridge.get_table_totals_row(sales_table, "Data", "Sales").value is False
        xlbridge.set_table_totals_row(sales_table, "Data", "Sales", True)
        assert xlbridge.get_table_totals_row(sales_table, "Data", "Sales").value is True
        xlbridge.set_table_totals_row(sales_table, "Data", "Sales", False)
        assert xlbridge.get_table(sales_table, "Data", "Sales").value["has_totals_row"] is False

    def test_tables_survive_save(self, sales_table, tmp_path: Path):
        out = tmp_path / "tables.xlsx"
        xlbridge.write(sales_table, out)
        again = xlbridge.read(out).value
        assert xlbridge.get_table(again, "Data", "Sales").value["columns"] == ["Region", "Product", "Sales", "Cost"]


# ---------------------------------------------------------------------------
# Pivot tables
# ---------------------------------------------------------------------------


@pytest.fixture
def pivot_book(sales_book):
    xlbridge.add_pivot_table(
        sales_book, "Summary", "ByProduct", "Data", "A1:D5", "D1",
        [1], [], [(2, "sum", "Total Sales")],
    )
    return sales_book


class TestPivotTables:
    def test_add_and_inspect(self, pivot_book):
        assert xlbridge.has_pivot_tables(pivot_book, "Summary").value is True
        assert xlbridge.get_pivot_table_names(pivot_book, "Summary").value == ["ByProduct"]
        assert xlbridge.get_pivot_table_info(pivot_book, "Summary", "ByProduct").value == (
            "ByProduct", "D1", "A1:D5", "1",
        )
        assert xlbridge.get_pivot_table_source_range(pivot_book, "Summary", "ByProduct").value == ("Data", "A1:D5")
        assert xlbridge.get_pivot_table_target_cell(pivot_book, "Summary", "ByProduct").value == "D1"
        assert xlbridge.get_pivot_table_fields(pivot_book, "Summary", "ByProduct").value == (
            [1], [], [(2, "sum", "Total Sales")],
        )

    def test_refresh_writes_summary(self, pivot_book):
        assert xlbridge.refresh_all_pivot_tables(pivot_book) == COMMAND_OK
        values = [
            [xlbridge.get_cell_value(pivot_book, "Summary", f"{col}{row}").value for col in "DE"]
            for row in (1, 2, 3)
        ]
        assert values == [["Product", "Total Sales"], ["Gadget", 2800], ["Widget", 2500]]

    def test_count_and_average(self, sales_book):
        added = xlbridge.add_pivot_table(
            sales_book, "Summary", "ByRegion", "Data", "A1:D5", "A5",
            [], [], [(3, "count", "Rows"), (3, "average", "")],
        )
        assert added == COMMAND_OK
        assert xlbridge.refresh_all_pivot_tables(sales_book) == COMMAND_OK
        assert xlbridge.get_cell_value(sales_book, "Summary", "A5").value == "Rows"
        assert xlbridge.get_cell_value(sales_book, "Summary", "B5").value == "average of Cost"
        assert xlbridge.get_cell_value(sales_book, "Summary", "A6").value == 4
        assert xlbridge.get_cell_value(sales_book, "Summary", "B6").value == 775

    def test_caption_must_be_text(self, sales_book):
        result = xlbridge.add_pivot_table(
            sales_book, "Summary", "P", "Data", "A1:D5", "A5", [], [], [(3, "sum", None)],
        )
        assert result.code is ErrorCode.VALIDATION

    def test_cache_ids_increase(self, pivot_book):
        xlbridge.add_pivot_table(pivot_book, "Data", "Second", "Data", "A1:D5", "G1", [0], [], [(2, "max", "Top")])
        assert xlbridge.get_pivot_table_info(pivot_book, "Data", "Second").value[3] == "2"

    def test_duplicate_name(self, pivot_book):
        result = xlbridge.add_pivot_table(
            pivot_book, "Summary", "ByProduct", "Data", "A1:D5", "H1", [0], [], [(2, "sum", "S")],
        )
        assert result == Err(code=ErrorCode.NATIVE, reason="Pivot table already exists: ByProduct")

    def test_field_outside_source(self, sales_book):
        result = xlbridge.add_pivot_table(
            sales_book, "Summary", "P", "Data", "A1:D5", "H1", [7], [], [(2, "sum", "S")],
        )
        assert result == Err(code=ErrorCode.NATIVE, reason="field index 7 is outside the source range A1:D5")

    @pytest.mark.parametrize(
        "rows, data",
        [([-1], [(2, "sum", "S")]), ([0], []), ([0], [(2, "median", "S")]), ([0], [(2, "sum")])],
    )
    def test_arguments_checked(self, sales_book, rows, data):
        result = xlbridge.add_pivot_table(sales_book, "Summary", "P", "Data", "A1:D5", "H1", rows, [], data)
        assert result.code is ErrorCode.VALIDATION

    def test_missing_source_sheet(self, sales_book):
        result = xlbridge.add_pivot_table(sales_book, "Summary", "P", "Ghost", "A1:D5", "H1", [0], [], [(2, "sum", "S")])
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Sheet not found: Ghost")

    def test_remove(self, pivot_book):
        assert xlbridge.remove_pivot_table(pivot_book, "Summary", "ByProduct") == COMMAND_OK
        assert xlbridge.count_pivot_tables(pivot_book, "Summary").value == 0
        result = xlbridge.get_pivot_table_info(pivot_book, "Summary", "ByProduct")
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Pivot table not found: ByProduct")
