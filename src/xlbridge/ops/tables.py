"""Structured tables (ListObjects)."""

from __future__ import annotations

import re

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_bool, check_cell, check_choice, check_name, check_sheet_name

TOTALS_ROW_FUNCTIONS = ("sum", "min", "max", "average", "count", "countNums", "stdDev", "var", "custom")
TABLE_NAME_RE = re.compile(r"^[A-Za-z_\\][A-Za-z0-9_.]*$")


def _table_name(name: str, field: str = "name") -> str:
    check_name(name, field)
    if not TABLE_NAME_RE.match(name) or " " in name:
        raise ArgumentError(f"{field} must start with a letter or underscore and contain no spaces, got {name!r}")
    return name


def _totals(function: str | None, label: str | None) -> None:
    if function is not None:
        check_choice(function, TOTALS_ROW_FUNCTIONS, "totals_row_function")
    if label is not None:
        check_name(label, "totals_row_label")


@command("failed to add table")
def add_table(
    book: Handle,
    sheet: str,
    table_name: str,
    display_name: str,
    start_cell: str,
    end_cell: str,
    columns: list[str],
    has_totals_row: bool = False,
):
    """Create a table over ``start_cell:end_cell``; ``columns`` become the header row."""
    check_sheet_name(sheet)
    _table_name(table_name, "table_name")
    _table_name(display_name, "display_name")
    check_cell(start_cell, "start_cell")
    check_cell(end_cell, "end_cell")
    if not isinstance(columns, (list, tuple)) or not columns:
        raise ArgumentError("columns must be a non-empty list of names")
    names = [check_name(c, "column") for c in columns]
    if len(set(names)) != len(names):
        raise ArgumentError("column names must be unique")
    check_bool(has_totals_row, "has_totals_row")
    return call("add_table", book, sheet, table_name, display_name, start_cell, end_cell, names, has_totals_row)


@query("failed to list tables")
def get_tables(book: Handle, sheet: str):
    return call("get_tables", book, check_sheet_name(sheet))


@query("failed to read table")
def get_table(book: Handle, sheet: str, table: str):
    """``{"name", "display_name", "ref", "columns", "has_totals_row", "style"}``."""
    check_sheet_name(sheet)
    return call("get_table", book, sheet, check_name(table, "table"))


@command("failed to remove table")
def remove_table(book: Handle, sheet: str, table: str):
    check_sheet_name(sheet)
    return call("remove_table", book, sheet, check_name(table, "table"))


@query("failed to check tables")
def has_tables(book: Handle, sheet: str):
    return call("has_tables", book, check_sheet_name(sheet))


@query("failed to count tables")
def count_tables(book: Handle, sheet: str):
    return call("count_tables", book, check_sheet_name(sheet))


@command("failed to set table style")
def set_table_style(
    book: Handle,
    sheet: str,
    table: str,
    style_name: str,
    show_first_col: bool = False,
    show_last_col: bool = False,
    show_row_stripes: bool = True,
    show_col_stripes: bool = False,
):
    check_sheet_name(sheet)
    check_name(table, "table")
    check_name(style_name, "style_name")
    flags = [
        check_bool(value, field)
        for value, field in (
            (show_first_col, "show_first_col"),
            (show_last_col, "show_last_col"),
            (show_row_stripes, "show_row_stripes"),
            (show_col_stripes, "show_col_stripes"),
        )
    ]
    return call("set_table_style", book, sheet, table, style_name, *flags)


@query("failed to read table style")
def get_table_style(book: Handle, sheet: str, table: str):
    check_sheet_name(sheet)
    return call("get_table_style", book, sheet, check_name(table, "table"))


@command("failed to remove table style")
def remove_table_style(book: Handle, sheet: str, table: str):
    check_sheet_name(sheet)
    return call("remove_table_style", book, sheet, check_name(table, "table"))


@command("failed to add table column")
def add_table_column(
    book: Handle,
    sheet: str,
    table: str,
    column_name: str,
    totals_row_function: str | None = None,
    totals_row_label: str | None = None,
):
    """Append a column to the right edge of the table."""
    check_sheet_name(sheet)
    check_name(table, "table")
    check_name(column_name, "column_name")
    _totals(totals_row_function, totals_row_label)
    return call("add_table_column", book, sheet, table, column_name, totals_row_function, totals_row_label)


@query("failed to list table columns")
def get_table_columns(book: Handle, sheet: str, table: str):
    check_sheet_name(sheet)
    return call("get_table_columns", book, sheet, check_name(table, "table"))


@command("failed to modify table column")
def modify_table_column(
    book: Handle,
    sheet: str,
    table: str,
    old_name: str,
    new_name: str | None = None,
    totals_row_function: str | None = None,
    totals_row_label: str | None = None,
):
    check_sheet_name(sheet)
    check_name(table, "table")
    check_name(old_name, "old_name")
    if new_name is not None:
        check_name(new_name, "new_name")
    _totals(totals_row_function, totals_row_label)
    return call(
        "modify_table_column", book, sheet, table, old_name,
        new_name, totals_row_function, totals_row_label,
    )


@command("failed to set totals row")
def set_table_totals_row(book: Handle, sheet: str, table: str, show: bool):
    check_sheet_name(sheet)
    check_name(table, "table")
    return call("set_table_totals_row", book, sheet, table, check_bool(show, "show"))


@query("failed to read totals row")
def get_table_totals_row(book: Handle, sheet: str, table: str):
    check_sheet_name(sheet)
    return call("get_table_totals_row", book, sheet, check_name(table, "table"))
