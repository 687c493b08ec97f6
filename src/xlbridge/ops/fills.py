"""Background colours, pattern fills and gradient fills."""

from __future__ import annotations

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_cell,
    check_choice,
    check_number,
    check_sheet_name,
    normalize_color,
)

PATTERN_TYPES = (
    "none", "solid", "darkDown", "darkGray", "darkGrid", "darkHorizontal", "darkTrellis",
    "darkUp", "darkVertical", "gray0625", "gray125", "lightDown", "lightGray", "lightGrid",
    "lightHorizontal", "lightTrellis", "lightUp", "lightVertical", "mediumGray",
)


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


def _optional_color(value: str | None, name: str) -> str | None:
    return None if value is None else normalize_color(value, name)


@command("failed to set background color")
def set_background_color(book: Handle, sheet: str, cell: str, color: str):
    """Solid fill in ``color``."""
    address = _at(sheet, cell)
    return call("set_background_color", book, sheet, address, normalize_color(color))


@query("failed to read background color")
def get_cell_background_color(book: Handle, sheet: str, cell: str):
    return call("get_cell_background_color", book, sheet, _at(sheet, cell))


@query("failed to read foreground color")
def get_cell_foreground_color(book: Handle, sheet: str, cell: str):
    return call("get_cell_foreground_color", book, sheet, _at(sheet, cell))


@query("failed to read pattern type")
def get_cell_pattern_type(book: Handle, sheet: str, cell: str):
    return call("get_cell_pattern_type", book, sheet, _at(sheet, cell))


@command("failed to set pattern fill")
def set_pattern_fill(
    book: Handle,
    sheet: str,
    cell: str,
    pattern_type: str,
    fg_color: str | None = None,
    bg_color: str | None = None,
):
    address = _at(sheet, cell)
    check_choice(pattern_type, PATTERN_TYPES, "pattern_type")
    return call(
        "set_pattern_fill", book, sheet, address, pattern_type,
        _optional_color(fg_color, "fg_color"), _optional_color(bg_color, "bg_color"),
    )


@query("failed to read pattern fill")
def get_pattern_fill(book: Handle, sheet: str, cell: str):
    """``{"pattern_type", "fg_color", "bg_color"}`` of the cell's pattern fill."""
    return call("get_pattern_fill", book, sheet, _at(sheet, cell))


@command("failed to set gradient fill")
def set_gradient_fill(book: Handle, sheet: str, cell: str, degree: float, stops: list[tuple[float, str]]):
    """Linear gradient through ``stops``, a list of ``(position, color)`` with positions in 0..1."""
    address = _at(sheet, cell)
    check_number(degree, "degree")
    if not isinstance(stops, (list, tuple)) or len(stops) < 2:
        raise ArgumentError("stops must hold at least two (position, color) pairs")
    normalized = []
    for stop in stops:
        if not isinstance(stop, (list, tuple)) or len(stop) != 2:
            raise ArgumentError(f"each stop must be a (position, color) pair, got {stop!r}")
        position, color = stop
        normalized.append((check_number(position, "stop position", low=0, high=1), normalize_color(color)))
    return call("set_gradient_fill", book, sheet, address, degree, normalized)


@command("failed to set gradient fill")
def set_linear_gradient_fill(book: Handle, sheet: str, cell: str, start_color: str, end_color: str, angle: float = 90.0):
    address = _at(sheet, cell)
    return call(
        "set_linear_gradient_fill", book, sheet, address,
        normalize_color(start_color, "start_color"), normalize_color(end_color, "end_color"),
        check_number(angle, "angle"),
    )


@command("failed to set gradient fill")
def set_radial_gradient_fill(book: Handle, sheet: str, cell: str, center_color: str, edge_color: str):
    address = _at(sheet, cell)
    return call(
        "set_radial_gradient_fill", book, sheet, address,
        normalize_color(center_color, "center_color"), normalize_color(edge_color, "edge_color"),
    )


@command("failed to set gradient fill")
def set_three_color_gradient_fill(
    book: Handle,
    sheet: str,
    cell: str,
    start_color: str,
    middle_color: str,
    end_color: str,
    angle: float = 90.0,
):
    address = _at(sheet, cell)
    return call(
        "set_three_color_gradient_fill", book, sheet, address,
        normalize_color(start_color, "start_color"),
        normalize_color(middle_color, "middle_color"),
        normalize_color(end_color, "end_color"),
        check_number(angle, "angle"),
    )


@query("failed to read gradient fill")
def get_gradient_fill(book: Handle, sheet: str, cell: str):
    """Gradient description, or ``None`` when the cell has no gradient fill."""
    return call("get_gradient_fill", book, sheet, _at(sheet, cell))


@command("failed to clear fill")
def clear_fill(book: Handle, sheet: str, cell: str):
    return call("clear_fill", book, sheet, _at(sheet, cell))
