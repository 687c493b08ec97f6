"""Row heights, column widths, visibility and style copying."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_column,
    check_column_index,
    check_number,
    check_row,
    check_sheet_name,
    normalize_color,
)


def _column(column: str | int, name: str = "column") -> str | int:
    if isinstance(column, int) and not isinstance(column, bool):
        return check_column_index(column, name)
    return check_column(column, name)


def _optional_row(value: int | None, name: str) -> int | None:
    return None if value is None else check_row(value, name)


def _optional_column(value: str | int | None, name: str) -> str | int | None:
    return None if value is None else _column(value, name)


@command("failed to set row height")
def set_row_height(book: Handle, sheet: str, row: int, height: float):
    check_sheet_name(sheet)
    return call("set_row_height", book, sheet, check_row(row), check_number(height, "height", low=0, high=409))


@query("failed to read row height")
def get_row_height(book: Handle, sheet: str, row: int):
    check_sheet_name(sheet)
    return call("get_row_height", book, sheet, check_row(row))


@command("failed to set row visibility")
def set_row_hidden(book: Handle, sheet: str, row: int, hidden: bool):
    check_sheet_name(sheet)
    return call("set_row_hidden", book, sheet, check_row(row), check_bool(hidden, "hidden"))


@query("failed to read row visibility")
def get_row_hidden(book: Handle, sheet: str, row: int):
    check_sheet_name(sheet)
    return call("get_row_hidden", book, sheet, check_row(row))


@command("failed to style row")
def set_row_style(book: Handle, sheet: str, row: int, bg_color: str, font_color: str):
    """Fill every used cell of ``row`` with ``bg_color`` and recolour its font."""
    check_sheet_name(sheet)
    return call(
        "set_row_style", book, sheet, check_row(row),
        normalize_color(bg_color, "bg_color"), normalize_color(font_color, "font_color"),
    )


@command("failed to set column width")
def set_column_width(book: Handle, sheet: str, column: str | int, width: float):
    check_sheet_name(sheet)
    return call("set_column_width", book, sheet, _column(column), check_number(width, "width", low=0, high=255))


@query("failed to read column width")
def get_column_width(book: Handle, sheet: str, column: str | int):
    check_sheet_name(sheet)
    return call("get_column_width", book, sheet, _column(column))


@command("failed to set column auto width")
def set_column_auto_width(book: Handle, sheet: str, column: str | int, auto: bool):
    check_sheet_name(sheet)
    return call("set_column_auto_width", book, sheet, _column(column), check_bool(auto, "auto"))


@query("failed to read column auto width")
def get_column_auto_width(book: Handle, sheet: str, column: str | int):
    check_sheet_name(sheet)
    return call("get_column_auto_width", book, sheet, _column(column))


@command("failed to set column visibility")
def set_column_hidden(book: Handle, sheet: str, column: str | int, hidden: bool):
    check_sheet_name(sheet)
    return call("set_column_hidden", book, sheet, _column(column), check_bool(hidden, "hidden"))


@query("failed to read column visibility")
def get_column_hidden(book: Handle, sheet: str, column: str | int):
    check_sheet_name(sheet)
    return call("get_column_hidden", book, sheet, _column(column))


@command("failed to copy row styling")
def copy_row_styling(
    book: Handle,
    sheet: str,
    source_row: int,
    target_row: int,
    start_column: str | int | None = None,
    end_column: str | int | None = None,
):
    check_sheet_name(sheet)
    return call(
        "copy_row_styling", book, sheet,
        check_row(source_row, "source_row"), check_row(target_row, "target_row"),
        _optional_column(start_column, "start_column"), _optional_column(end_column, "end_column"),
    )


@command("failed to copy column styling")
def copy_column_styling(
    book: Handle,
    sheet: str,
    source_column: str | int,
    target_column: str | int,
    start_row: int | None = None,
    end_row: int | None = None,
):
    check_sheet_name(sheet)
    return call(
        "copy_column_styling", book, sheet,
        _column(source_column, "source_column"), _column(target_column, "target_column"),
        _optional_row(start_row, "start_row"), _optional_row(end_row, "end_row"),
    )
