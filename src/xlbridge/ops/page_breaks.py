"""Manual page breaks.

A row break at ``n`` starts a new printed page after row ``n``; column
breaks work the same way with one-based column indexes.  Listings are
``(index, manual)`` pairs in ascending order.
"""

from __future__ import annotations

from collections.abc import Sequence

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_bool, check_column_index, check_row, check_sheet_name


def _many(values: Sequence[int], check, name: str) -> list[int]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise ArgumentError(f"{name} must be a list of integers")
    return [check(v, name) for v in values]


@command("failed to add row page break")
def add_row_page_break(book: Handle, sheet: str, row: int, manual: bool = True):
    check_sheet_name(sheet)
    return call("add_row_page_break", book, sheet, check_row(row), check_bool(manual, "manual"))


@command("failed to add column page break")
def add_column_page_break(book: Handle, sheet: str, column: int, manual: bool = True):
    check_sheet_name(sheet)
    return call("add_column_page_break", book, sheet, check_column_index(column), check_bool(manual, "manual"))


@command("failed to remove row page break")
def remove_row_page_break(book: Handle, sheet: str, row: int):
    check_sheet_name(sheet)
    return call("remove_row_page_break", book, sheet, check_row(row))


@command("failed to remove column page break")
def remove_column_page_break(book: Handle, sheet: str, column: int):
    check_sheet_name(sheet)
    return call("remove_column_page_break", book, sheet, check_column_index(column))


@query("failed to list row page breaks")
def get_row_page_breaks(book: Handle, sheet: str):
    return call("get_row_page_breaks", book, check_sheet_name(sheet))


@query("failed to list column page breaks")
def get_column_page_breaks(book: Handle, sheet: str):
    return call("get_column_page_breaks", book, check_sheet_name(sheet))


@command("failed to clear row page breaks")
def clear_row_page_breaks(book: Handle, sheet: str):
    return call("clear_row_page_breaks", book, check_sheet_name(sheet))


@command("failed to clear column page breaks")
def clear_column_page_breaks(book: Handle, sheet: str):
    return call("clear_column_page_breaks", book, check_sheet_name(sheet))


@query("failed to check row page break")
def has_row_page_break(book: Handle, sheet: str, row: int):
    check_sheet_name(sheet)
    return call("has_row_page_break", book, sheet, check_row(row))


@query("failed to check column page break")
def has_column_page_break(book: Handle, sheet: str, column: int):
    check_sheet_name(sheet)
    return call("has_column_page_break", book, sheet, check_column_index(column))


@query("failed to count row page breaks")
def count_row_page_breaks(book: Handle, sheet: str):
    return call("count_row_page_breaks", book, check_sheet_name(sheet))


@query("failed to count column page breaks")
def count_column_page_breaks(book: Handle, sheet: str):
    return call("count_column_page_breaks", book, check_sheet_name(sheet))


@command("failed to add row page breaks")
def add_row_page_breaks(book: Handle, sheet: str, rows: list[int]):
    check_sheet_name(sheet)
    return call("add_row_page_breaks", book, sheet, _many(rows, check_row, "rows"))


@command("failed to add column page breaks")
def add_column_page_breaks(book: Handle, sheet: str, columns: list[int]):
    check_sheet_name(sheet)
    return call("add_column_page_breaks", book, sheet, _many(columns, check_column_index, "columns"))


@command("failed to remove row page breaks")
def remove_row_page_breaks(book: Handle, sheet: str, rows: list[int]):
    """Remove the listed breaks; indexes without a break are ignored."""
    check_sheet_name(sheet)
    return call("remove_row_page_breaks", book, sheet, _many(rows, check_row, "rows"))


@command("failed to remove column page breaks")
def remove_column_page_breaks(book: Handle, sheet: str, columns: list[int]):
    check_sheet_name(sheet)
    return call("remove_column_page_breaks", book, sheet, _many(columns, check_column_index, "columns"))


@command("failed to clear page breaks")
def clear_all_page_breaks(book: Handle, sheet: str):
    return call("clear_all_page_breaks", book, check_sheet_name(sheet))


@query("failed to list page breaks")
def get_all_page_breaks(book: Handle, sheet: str):
    """``{"rows": [...], "columns": [...]}``."""
    return call("get_all_page_breaks", book, check_sheet_name(sheet))
