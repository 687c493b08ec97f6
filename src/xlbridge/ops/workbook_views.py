"""Workbook window state."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_int_range

WINDOW_LIMIT = 2_147_483_647


@command("failed to set active tab")
def set_active_tab(book: Handle, index: int):
    """Activate the sheet at zero-based ``index``."""
    return call("set_active_tab", book, check_int_range(index, 0, 65_535, "index"))


@query("failed to read active tab")
def get_active_tab(book: Handle):
    return call("get_active_tab", book)


@command("failed to set window position")
def set_workbook_window_position(book: Handle, x: int, y: int, width: int, height: int):
    return call(
        "set_workbook_window_position", book,
        check_int_range(x, -WINDOW_LIMIT, WINDOW_LIMIT, "x"),
        check_int_range(y, -WINDOW_LIMIT, WINDOW_LIMIT, "y"),
        check_int_range(width, 0, WINDOW_LIMIT, "width"),
        check_int_range(height, 0, WINDOW_LIMIT, "height"),
    )


@query("failed to read window position")
def get_workbook_window_position(book: Handle):
    """``{"x", "y", "width", "height"}`` of the workbook window."""
    return call("get_workbook_window_position", book)
