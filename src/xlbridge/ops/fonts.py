"""Font properties of a single cell."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_cell,
    check_choice,
    check_name,
    check_number,
    check_sheet_name,
    normalize_color,
)

UNDERLINE_STYLES = ("none", "single", "double", "singleAccounting", "doubleAccounting")
FONT_FAMILIES = ("auto", "roman", "swiss", "modern", "script", "decorative")
FONT_SCHEMES = ("none", "major", "minor")


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


@command("failed to set font color")
def set_font_color(book: Handle, sheet: str, cell: str, color: str):
    address = _at(sheet, cell)
    return call("set_font_color", book, sheet, address, normalize_color(color))


@command("failed to set font size")
def set_font_size(book: Handle, sheet: str, cell: str, size: float):
    address = _at(sheet, cell)
    return call("set_font_size", book, sheet, address, check_number(size, "size", low=1, high=409))


@command("failed to set font bold")
def set_font_bold(book: Handle, sheet: str, cell: str, bold: bool):
    return call("set_font_bold", book, sheet, _at(sheet, cell), check_bool(bold, "bold"))


@command("failed to set font name")
def set_font_name(book: Handle, sheet: str, cell: str, name: str):
    return call("set_font_name", book, sheet, _at(sheet, cell), check_name(name, "font name"))


@command("failed to set font italic")
def set_font_italic(book: Handle, sheet: str, cell: str, italic: bool):
    return call("set_font_italic", book, sheet, _at(sheet, cell), check_bool(italic, "italic"))


@command("failed to set font underline")
def set_font_underline(book: Handle, sheet: str, cell: str, underline: str):
    address = _at(sheet, cell)
    return call("set_font_underline", book, sheet, address, check_choice(underline, UNDERLINE_STYLES, "underline"))


@command("failed to set font strikethrough")
def set_font_strikethrough(book: Handle, sheet: str, cell: str, strikethrough: bool):
    address = _at(sheet, cell)
    return call("set_font_strikethrough", book, sheet, address, check_bool(strikethrough, "strikethrough"))


@command("failed to set font family")
def set_font_family(book: Handle, sheet: str, cell: str, family: str):
    address = _at(sheet, cell)
    return call("set_font_family", book, sheet, address, check_choice(family, FONT_FAMILIES, "family"))


@command("failed to set font scheme")
def set_font_scheme(book: Handle, sheet: str, cell: str, scheme: str):
    address = _at(sheet, cell)
    return call("set_font_scheme", book, sheet, address, check_choice(scheme, FONT_SCHEMES, "scheme"))


@query("failed to read font color")
def get_font_color(book: Handle, sheet: str, cell: str):
    return call("get_font_color", book, sheet, _at(sheet, cell))


@query("failed to read font size")
def get_font_size(book: Handle, sheet: str, cell: str):
    return call("get_font_size", book, sheet, _at(sheet, cell))


@query("failed to read font bold")
def get_font_bold(book: Handle, sheet: str, cell: str):
    return call("get_font_bold", book, sheet, _at(sheet, cell))


@query("failed to read font name")
def get_font_name(book: Handle, sheet: str, cell: str):
    return call("get_font_name", book, sheet, _at(sheet, cell))


@query("failed to read font italic")
def get_font_italic(book: Handle, sheet: str, cell: str):
    return call("get_font_italic", book, sheet, _at(sheet, cell))


@query("failed to read font underline")
def get_font_underline(book: Handle, sheet: str, cell: str):
    return call("get_font_underline", book, sheet, _at(sheet, cell))


@query("failed to read font strikethrough")
def get_font_strikethrough(book: Handle, sheet: str, cell: str):
    return call("get_font_strikethrough", book, sheet, _at(sheet, cell))


@query("failed to read font family")
def get_font_family(book: Handle, sheet: str, cell: str):
    return call("get_font_family", book, sheet, _at(sheet, cell))


@query("failed to read font scheme")
def get_font_scheme(book: Handle, sheet: str, cell: str):
    return call("get_font_scheme", book, sheet, _at(sheet, cell))
