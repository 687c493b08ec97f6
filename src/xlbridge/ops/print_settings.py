"""Page setup, margins, headers and print ranges."""

from __future__ import annotations

import re

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_choice,
    check_int_range,
    check_number,
    check_ranges,
    check_sheet_name,
    check_text,
)

ORIENTATIONS = ("portrait", "landscape")
ROW_SPAN_RE = re.compile(r"^\$?[1-9][0-9]*:\$?[1-9][0-9]*$")
COLUMN_SPAN_RE = re.compile(r"^\$?[A-Za-z]{1,3}:\$?[A-Za-z]{1,3}$")


def _margin(value: float, name: str) -> float:
    return check_number(value, name, low=0, high=49)


def _span(value: str | None, pattern: re.Pattern, name: str, example: str) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not pattern.match(value):
        raise ArgumentError(f"{name} must look like {example!r}, got {value!r}")
    return value.replace("$", "").upper()


@command("failed to set orientation")
def set_page_orientation(book: Handle, sheet: str, orientation: str):
    check_sheet_name(sheet)
    return call("set_page_orientation", book, sheet, check_choice(orientation, ORIENTATIONS, "orientation"))


@query("failed to read orientation")
def get_page_orientation(book: Handle, sheet: str):
    return call("get_page_orientation", book, check_sheet_name(sheet))


@command("failed to set paper size")
def set_paper_size(book: Handle, sheet: str, paper_size: int):
    """Paper size code (1 letter, 9 A4, ...)."""
    check_sheet_name(sheet)
    return call("set_paper_size", book, sheet, check_int_range(paper_size, 1, 118, "paper_size"))


@query("failed to read paper size")
def get_paper_size(book: Handle, sheet: str):
    return call("get_paper_size", book, check_sheet_name(sheet))


@command("failed to set page scale")
def set_page_scale(book: Handle, sheet: str, scale: int):
    check_sheet_name(sheet)
    return call("set_page_scale", book, sheet, check_int_range(scale, 10, 400, "scale"))


@query("failed to read page scale")
def get_page_scale(book: Handle, sheet: str):
    return call("get_page_scale", book, check_sheet_name(sheet))


@command("failed to set fit to page")
def set_fit_to_page(book: Handle, sheet: str, width: int, height: int):
    """Fit the print area to ``width`` x ``height`` pages (0 leaves an axis free)."""
    check_sheet_name(sheet)
    return call(
        "set_fit_to_page", book, sheet,
        check_int_range(width, 0, 32767, "width"), check_int_range(height, 0, 32767, "height"),
    )


@query("failed to read fit to page")
def get_fit_to_page(book: Handle, sheet: str):
    return call("get_fit_to_page", book, check_sheet_name(sheet))


@command("failed to set page margins")
def set_page_margins(book: Handle, sheet: str, top: float, right: float, bottom: float, left: float):
    """Margins in inches."""
    check_sheet_name(sheet)
    return call(
        "set_page_margins", book, sheet,
        _margin(top, "top"), _margin(right, "right"), _margin(bottom, "bottom"), _margin(left, "left"),
    )


@query("failed to read page margins")
def get_page_margins(book: Handle, sheet: str):
    return call("get_page_margins", book, check_sheet_name(sheet))


@command("failed to set header/footer margins")
def set_header_footer_margins(book: Handle, sheet: str, header: float, footer: float):
    check_sheet_name(sheet)
    return call("set_header_footer_margins", book, sheet, _margin(header, "header"), _margin(footer, "footer"))


@query("failed to read header/footer margins")
def get_header_footer_margins(book: Handle, sheet: str):
    return call("get_header_footer_margins", book, check_sheet_name(sheet))


@command("failed to set header")
def set_header(book: Handle, sheet: str, text: str):
    check_sheet_name(sheet)
    return call("set_header", book, sheet, check_text(text))


@query("failed to read header")
def get_header(book: Handle, sheet: str):
    return call("get_header", book, check_sheet_name(sheet))


@command("failed to set footer")
def set_footer(book: Handle, sheet: str, text: str):
    check_sheet_name(sheet)
    return call("set_footer", book, sheet, check_text(text))


@query("failed to read footer")
def get_footer(book: Handle, sheet: str):
    return call("get_footer", book, check_sheet_name(sheet))


@command("failed to set print centering")
def set_print_centered(book: Handle, sheet: str, horizontal: bool, vertical: bool):
    check_sheet_name(sheet)
    return call(
        "set_print_centered", book, sheet,
        check_bool(horizontal, "horizontal"), check_bool(vertical, "vertical"),
    )


@query("failed to read print centering")
def get_print_centered(book: Handle, sheet: str):
    return call("get_print_centered", book, check_sheet_name(sheet))


@command("failed to set print area")
def set_print_area(book: Handle, sheet: str, area: str):
    check_sheet_name(sheet)
    ranges = check_ranges(area.replace(",", " ") if isinstance(area, str) else area, "area")
    return call("set_print_area", book, sheet, ",".join(ranges.split()))


@query("failed to read print area")
def get_print_area(book: Handle, sheet: str):
    return call("get_print_area", book, check_sheet_name(sheet))


@command("failed to set print titles")
def set_print_titles(book: Handle, sheet: str, rows: str | None, columns: str | None):
    """Repeat ``rows`` (``"1:2"``) and/or ``columns`` (``"A:B"``) on every printed page."""
    check_sheet_name(sheet)
    row_span = _span(rows, ROW_SPAN_RE, "rows", "1:2")
    column_span = _span(columns, COLUMN_SPAN_RE, "columns", "A:B")
    if row_span is None and column_span is None:
        raise ArgumentError("rows or columns must be given")
    return call("set_print_titles", book, sheet, row_span, column_span)


@query("failed to read print titles")
def get_print_titles(book: Handle, sheet: str):
    return call("get_print_titles", book, check_sheet_name(sheet))
