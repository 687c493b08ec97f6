"""Native workbook window state."""

from __future__ import annotations

from openpyxl.workbook.views import BookView

from xlbridge.adapters.helpers import book, fault
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _book_view(wb) -> BookView:
    if not wb.views:
        wb.views.append(BookView())
    return wb.views[0]


@native
def set_active_tab(ident, index):
    wb = book(ident).wb
    if not 0 <= index < len(wb.sheetnames):
        raise fault(f"Sheet index out of range: {index}")
    wb.active = index
    _book_view(wb).activeTab = index
    return (OK, OK)


@native
def get_active_tab(ident):
    return (OK, int(book(ident).wb._active_sheet_index))


@native
def set_workbook_window_position(ident, x, y, width, height):
    view = _book_view(book(ident).wb)
    view.xWindow, view.yWindow = x, y
    view.windowWidth, view.windowHeight = width, height
    return OK


@native
def get_workbook_window_position(ident):
    view = _book_view(book(ident).wb)
    return (OK, {
        "x": view.xWindow or 0,
        "y": view.yWindow or 0,
        "width": view.windowWidth or 0,
        "height": view.windowHeight or 0,
    })
