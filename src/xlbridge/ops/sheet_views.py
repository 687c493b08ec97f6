"""How a worksheet is displayed: grid lines, zoom, panes, tab, selection."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    MAX_COLUMN,
    MAX_ROW,
    check_bool,
    check_cell,
    check_choice,
    check_int_range,
    check_ranges,
    check_sheet_name,
    normalize_color,
)

SHEET_VIEWS = ("normal", "page_break_preview", "page_layout")


def _zoom(scale: int) -> int:
    return check_int_range(scale, 10, 400, "zoom scale")


@command("failed to set grid lines")
def set_show_grid_lines(book: Handle, sheet: str, show: bool):
    check_sheet_name(sheet)
    return call("set_show_grid_lines", book, sheet, check_bool(show, "show"))


@query("failed to read grid lines")
def get_show_grid_lines(book: Handle, sheet: str):
    return call("get_show_grid_lines", book, check_sheet_name(sheet))


@command("failed to set tab selection")
def set_tab_selected(book: Handle, sheet: str, selected: bool):
    check_sheet_name(sheet)
    return call("set_tab_selected", book, sheet, check_bool(selected, "selected"))


@query("failed to read tab selection")
def get_tab_selected(book: Handle, sheet: str):
    return call("get_tab_selected", book, check_sheet_name(sheet))


@command("failed to set top left cell")
def set_top_left_cell(book: Handle, sheet: str, cell: str):
    check_sheet_name(sheet)
    return call("set_top_left_cell", book, sheet, check_cell(cell))


@query("failed to read top left cell")
def get_top_left_cell(book: Handle, sheet: str):
    return call("get_top_left_cell", book, check_sheet_name(sheet))


@command("failed to set zoom")
def set_zoom_scale(book: Handle, sheet: str, scale: int):
    check_sheet_name(sheet)
    return call("set_zoom_scale", book, sheet, _zoom(scale))


@query("failed to read zoom")
def get_zoom_scale(book: Handle, sheet: str):
    return call("get_zoom_scale", book, check_sheet_name(sheet))


@command("failed to set zoom")
def set_zoom_scale_normal(book: Handle, sheet: str, scale: int):
    check_sheet_name(sheet)
    return call("set_zoom_scale_normal", book, sheet, _zoom(scale))


@query("failed to read zoom")
def get_zoom_scale_normal(book: Handle, sheet: str):
    return call("get_zoom_scale_normal", book, check_sheet_name(sheet))


@command("failed to set zoom")
def set_zoom_scale_page_layout(book: Handle, sheet: str, scale: int):
    check_sheet_name(sheet)
    return call("set_zoom_scale_page_layout", book, sheet, _zoom(scale))


@query("failed to read zoom")
def get_zoom_scale_page_layout(book: Handle, sheet: str):
    return call("get_zoom_scale_page_layout", book, check_sheet_name(sheet))


@command("failed to set zoom")
def set_zoom_scale_page_break(book: Handle, sheet: str, scale: int):
    check_sheet_name(sheet)
    return call("set_zoom_scale_page_break", book, sheet, _zoom(scale))


@query("failed to read zoom")
def get_zoom_scale_page_break(book: Handle, sheet: str):
    return call("get_zoom_scale_page_break", book, check_sheet_name(sheet))


@command("failed to freeze panes")
def freeze_panes(book: Handle, sheet: str, rows: int, cols: int):
    """Freeze the top ``rows`` rows and the left ``cols`` columns."""
    check_sheet_name(sheet)
    return call(
        "freeze_panes", book, sheet,
        check_int_range(rows, 0, MAX_ROW - 1, "rows"), check_int_range(cols, 0, MAX_COLUMN - 1, "cols"),
    )


@query("failed to read frozen panes")
def get_freeze_panes(book: Handle, sheet: str):
    """``(rows, cols)`` currently frozen; ``(0, 0)`` when nothing is."""
    return call("get_freeze_panes", book, check_sheet_name(sheet))


@command("failed to split panes")
def split_panes(book: Handle, sheet: str, height: int, width: int):
    """Split the window at ``height`` / ``width`` in twips (0 leaves an axis unsplit)."""
    check_sheet_name(sheet)
    return call(
        "split_panes", book, sheet,
        check_int_range(height, 0, 10_000_000, "height"), check_int_range(width, 0, 10_000_000, "width"),
    )


@command("failed to set tab color")
def set_tab_color(book: Handle, sheet: str, color: str):
    check_sheet_name(sheet)
    return call("set_tab_color", book, sheet, normalize_color(color))


@query("failed to read tab color")
def get_tab_color(book: Handle, sheet: str):
    """``"#RRGGBB"``, or ``""`` when the tab has no colour."""
    return call("get_tab_color", book, check_sheet_name(sheet))


@command("failed to set sheet view")
def set_sheet_view(book: Handle, sheet: str, view: str):
    check_sheet_name(sheet)
    return call("set_sheet_view", book, sheet, check_choice(view, SHEET_VIEWS, "view"))


@query("failed to read sheet view")
def get_sheet_view(book: Handle, sheet: str):
    return call("get_sheet_view", book, check_sheet_name(sheet))


@command("failed to set selection")
def set_selection(book: Handle, sheet: str, active_cell: str, sqref: str):
    check_sheet_name(sheet)
    return call(
        "set_selection", book, sheet,
        check_cell(active_cell, "active_cell"), check_ranges(sqref, "sqref"),
    )


@query("failed to read selection")
def get_selection(book: Handle, sheet: str):
    """``{"active_cell", "sqref"}`` of the current selection."""
    return call("get_selection", book, check_sheet_name(sheet))
