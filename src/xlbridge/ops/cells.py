"""Cell values, number formats and alignment."""

from __future__ import annotations

from typing import Any

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_cell,
    check_choice,
    check_int_range,
    check_sheet_name,
    check_text,
)

HORIZONTAL_ALIGNMENTS = (
    "general", "left", "center", "right", "fill", "justify", "centerContinuous", "distributed",
)
VERTICAL_ALIGNMENTS = ("top", "center", "bottom", "justify", "distributed")


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


@query("failed to read cell value")
def get_cell_value(book: Handle, sheet: str, cell: str):
    """The stored value; ``""`` for an empty cell."""
    return call("get_cell_value", book, sheet, _at(sheet, cell))


@query("failed to read formatted value")
def get_formatted_value(book: Handle, sheet: str, cell: str):
    """The value rendered through the cell's number format."""
    return call("get_formatted_value", book, sheet, _at(sheet, cell))


@command("failed to set cell value")
def set_cell_value(book: Handle, sheet: str, cell: str, value: Any):
    return call("set_cell_value", book, sheet, _at(sheet, cell), value)


@command("failed to remove cell")
def remove_cell(book: Handle, sheet: str, cell: str):
    return call("remove_cell", book, sheet, _at(sheet, cell))


@command("failed to set number format")
def set_number_format(book: Handle, sheet: str, cell: str, format_code: str):
    address = _at(sheet, cell)
    if not check_text(format_code, "format_code"):
        raise ArgumentError("format_code must not be empty")
    return call("set_number_format", book, sheet, address, format_code)


@command("failed to set wrap text")
def set_wrap_text(book: Handle, sheet: str, cell: str, wrap: bool):
    return call("set_wrap_text", book, sheet, _at(sheet, cell), check_bool(wrap, "wrap"))


@command("failed to set alignment")
def set_cell_alignment(book: Handle, sheet: str, cell: str, horizontal: str, vertical: str):
    address = _at(sheet, cell)
    check_choice(horizontal, HORIZONTAL_ALIGNMENTS, "horizontal")
    check_choice(vertical, VERTICAL_ALIGNMENTS, "vertical")
    return call("set_cell_alignment", book, sheet, address, horizontal, vertical)


@command("failed to set text rotation")
def set_cell_rotation(book: Handle, sheet: str, cell: str, rotation: int):
    """Rotation in degrees: 0-90 counter-clockwise, 91-180 clockwise, 255 stacked."""
    address = _at(sheet, cell)
    if rotation != 255:
        check_int_range(rotation, 0, 180, "rotation")
    return call("set_cell_rotation", book, sheet, address, rotation)


@command("failed to set indent")
def set_cell_indent(book: Handle, sheet: str, cell: str, indent: int):
    address = _at(sheet, cell)
    check_int_range(indent, 0, 250, "indent")
    return call("set_cell_indent", book, sheet, address, indent)


@query("failed to read horizontal alignment")
def get_cell_horizontal_alignment(book: Handle, sheet: str, cell: str):
    return call("get_cell_horizontal_alignment", book, sheet, _at(sheet, cell))


@query("failed to read vertical alignment")
def get_cell_vertical_alignment(book: Handle, sheet: str, cell: str):
    return call("get_cell_vertical_alignment", book, sheet, _at(sheet, cell))


@query("failed to read wrap text")
def get_cell_wrap_text(book: Handle, sheet: str, cell: str):
    return call("get_cell_wrap_text", book, sheet, _at(sheet, cell))


@query("failed to read text rotation")
def get_cell_text_rotation(book: Handle, sheet: str, cell: str):
    return call("get_cell_text_rotation", book, sheet, _at(sheet, cell))


@query("failed to read indent")
def get_cell_indent(book: Handle, sheet: str, cell: str):
    return call("get_cell_indent", book, sheet, _at(sheet, cell))


@query("failed to read number format id")
def get_cell_number_format_id(book: Handle, sheet: str, cell: str):
    return call("get_cell_number_format_id", book, sheet, _at(sheet, cell))


@query("failed to read format code")
def get_cell_format_code(book: Handle, sheet: str, cell: str):
    return call("get_cell_format_code", book, sheet, _at(sheet, cell))
