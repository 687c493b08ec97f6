"""Cell border line styles and colours."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_cell, check_choice, check_sheet_name, normalize_color

BORDER_POSITIONS = ("left", "right", "top", "bottom", "diagonal")
BORDER_STYLES = (
    "none", "thin", "medium", "thick", "dashed", "dotted", "double", "hair",
    "mediumDashed", "dashDot", "mediumDashDot", "dashDotDot", "mediumDashDotDot", "slantDashDot",
)


def _side(sheet: str, cell: str, position: str) -> str:
    check_sheet_name(sheet)
    address = check_cell(cell)
    check_choice(position, BORDER_POSITIONS, "position")
    return address


@command("failed to set border style")
def set_border_style(book: Handle, sheet: str, cell: str, position: str, style: str):
    address = _side(sheet, cell, position)
    check_choice(style, BORDER_STYLES, "style")
    return call("set_border_style", book, sheet, address, position, style)


@command("failed to set border color")
def set_border_color(book: Handle, sheet: str, cell: str, position: str, color: str):
    """Colour one side; a side without a line style gets a thin line."""
    address = _side(sheet, cell, position)
    return call("set_border_color", book, sheet, address, position, normalize_color(color))


@query("failed to read border style")
def get_border_style(book: Handle, sheet: str, cell: str, position: str):
    return call("get_border_style", book, sheet, _side(sheet, cell, position), position)


@query("failed to read border color")
def get_border_color(book: Handle, sheet: str, cell: str, position: str):
    return call("get_border_color", book, sheet, _side(sheet, cell, position), position)
