"""Worksheet management: naming, visibility, merges and structural edits."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, infallible, query
from xlbridge.validation.arguments import (
    MAX_COLUMN,
    MAX_ROW,
    check_choice,
    check_column,
    check_column_index,
    check_int_range,
    check_new_sheet_name,
    check_positive,
    check_range,
    check_row,
    check_sheet_name,
)

SHEET_STATES = ("visible", "hidden", "veryHidden")


@infallible()
def get_sheet_names(book: Handle):
    """Sheet names in workbook order."""
    return call("get_sheet_names", book)


@infallible()
def get_sheet_count(book: Handle):
    return call("get_sheet_count", book)


@command("failed to add sheet")
def add_sheet(book: Handle, name: str):
    return call("add_sheet", book, check_new_sheet_name(name))


@command("failed to clone sheet")
def clone_sheet(book: Handle, source: str, new_name: str):
    check_sheet_name(source, "source")
    return call("clone_sheet", book, source, check_new_sheet_name(new_name, "new_name"))


@command("failed to remove sheet")
def remove_sheet(book: Handle, sheet: str):
    return call("remove_sheet", book, check_sheet_name(sheet))


@command("failed to rename sheet")
def rename_sheet(book: Handle, old_name: str, new_name: str):
    check_sheet_name(old_name, "old_name")
    return call("rename_sheet", book, old_name, check_new_sheet_name(new_name, "new_name"))


@command("failed to set sheet state")
def set_sheet_state(book: Handle, sheet: str, state: str):
    """Show or hide a sheet; the last visible sheet cannot be hidden."""
    check_sheet_name(sheet)
    return call("set_sheet_state", book, sheet, check_choice(state, SHEET_STATES, "state"))


@query("failed to read sheet state")
def get_sheet_state(book: Handle, sheet: str):
    return call("get_sheet_state", book, check_sheet_name(sheet))


@command("failed to move range")
def move_range(book: Handle, sheet: str, range: str, rows: int, columns: int):
    """Shift a block by ``rows`` down and ``columns`` right (negative moves up/left)."""
    check_sheet_name(sheet)
    ref = check_range(range)
    check_int_range(rows, -MAX_ROW, MAX_ROW, "rows")
    check_int_range(columns, -MAX_COLUMN, MAX_COLUMN, "columns")
    return call("move_range", book, sheet, ref, rows, columns)


@command("failed to merge cells")
def add_merge_cells(book: Handle, sheet: str, range: str):
    check_sheet_name(sheet)
    return call("add_merge_cells", book, sheet, check_range(range))


@command("failed to unmerge cells")
def remove_merge_cells(book: Handle, sheet: str, range: str):
    check_sheet_name(sheet)
    return call("remove_merge_cells", book, sheet, check_range(range))


@query("failed to read merged cells")
def get_merge_cells(book: Handle, sheet: str):
    return call("get_merge_cells", book, check_sheet_name(sheet))


@command("failed to insert rows")
def insert_new_row(book: Handle, sheet: str, row: int, amount: int = 1):
    check_sheet_name(sheet)
    return call("insert_new_row", book, sheet, check_row(row), check_positive(amount, "amount"))


@command("failed to insert columns")
def insert_new_column(book: Handle, sheet: str, column: str, amount: int = 1):
    check_sheet_name(sheet)
    return call("insert_new_column", book, sheet, check_column(column), check_positive(amount, "amount"))


@command("failed to insert columns")
def insert_new_column_by_index(book: Handle, sheet: str, index: int, amount: int = 1):
    check_sheet_name(sheet)
    return call(
        "insert_new_column_by_index", book, sheet,
        check_column_index(index, "index"), check_positive(amount, "amount"),
    )


@command("failed to remove rows")
def remove_row(book: Handle, sheet: str, row: int, amount: int = 1):
    check_sheet_name(sheet)
    return call("remove_row", book, sheet, check_row(row), check_positive(amount, "amount"))


@command("failed to remove columns")
def remove_column(book: Handle, sheet: str, column: str, amount: int = 1):
    check_sheet_name(sheet)
    return call("remove_column", book, sheet, check_column(column), check_positive(amount, "amount"))


@command("failed to remove columns")
def remove_column_by_index(book: Handle, sheet: str, index: int, amount: int = 1):
    check_sheet_name(sheet)
    return call(
        "remove_column_by_index", book, sheet,
        check_column_index(index, "index"), check_positive(amount, "amount"),
    )


@query("failed to read sheet dimensions")
def get_sheet_dimensions(book: Handle, sheet: str):
    """Used extent: ``{"ref", "min_row", "max_row", "min_column", "max_column"}``."""
    return call("get_sheet_dimensions", book, check_sheet_name(sheet))
