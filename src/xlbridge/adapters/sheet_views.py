"""Native sheet view state: grid lines, zoom, panes, selection."""

from __future__ import annotations

from openpyxl.styles.colors import Color
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.views import Pane, Selection

from xlbridge.adapters.helpers import sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

VIEW_KINDS = {"normal": "normal", "page_break_preview": "pageBreakPreview", "page_layout": "pageLayout"}
VIEW_NAMES = {v: k for k, v in VIEW_KINDS.items()}

ZOOM_ATTRS = {
    "zoom_scale": "zoomScale",
    "zoom_scale_normal": "zoomScaleNormal",
    "zoom_scale_page_layout": "zoomScalePageLayoutView",
    "zoom_scale_page_break": "zoomScaleSheetLayoutView",
}


def _view(ident, name):
    return sheet(ident, name).sheet_view


@native
def set_show_grid_lines(ident, name, show):
    _view(ident, name).showGridLines = show
    return OK


@native
def get_show_grid_lines(ident, name):
    value = _view(ident, name).showGridLines
    return (OK, None if value is None else bool(value))


@native
def set_tab_selected(ident, name, selected):
    _view(ident, name).tabSelected = selected
    return OK


@native
def get_tab_selected(ident, name):
    return (OK, bool(_view(ident, name).tabSelected))


@native
def set_top_left_cell(ident, name, address):
    _view(ident, name).topLeftCell = address
    return OK


@native
def get_top_left_cell(ident, name):
    return (OK, _view(ident, name).topLeftCell or "")


def _set_zoom(kind, ident, name, scale):
    setattr(_view(ident, name), ZOOM_ATTRS[kind], scale)
    return (OK, OK)


def _get_zoom(kind, ident, name):
    return (OK, int(getattr(_view(ident, name), ZOOM_ATTRS[kind]) or 0))


@native
def set_zoom_scale(ident, name, scale):
    return _set_zoom("zoom_scale", ident, name, scale)


@native
def get_zoom_scale(ident, name):
    return _get_zoom("zoom_scale", ident, name)


@native
def set_zoom_scale_normal(ident, name, scale):
    return _set_zoom("zoom_scale_normal", ident, name, scale)


@native
def get_zoom_scale_normal(ident, name):
    return _get_zoom("zoom_scale_normal", ident, name)


@native
def set_zoom_scale_page_layout(ident, name, scale):
    return _set_zoom("zoom_scale_page_layout", ident, name, scale)


@native
def get_zoom_scale_page_layout(ident, name):
    return _get_zoom("zoom_scale_page_layout", ident, name)


@native
def set_zoom_scale_page_break(ident, name, scale):
    return _set_zoom("zoom_scale_page_break", ident, name, scale)


@native
def get_zoom_scale_page_break(ident, name):
    return _get_zoom("zoom_scale_page_break", ident, name)


@native
def freeze_panes(ident, name, rows, cols):
    ws = sheet(ident, name)
    ws.freeze_panes = f"{get_column_letter(cols + 1)}{rows + 1}"
    return (OK, OK)


@native
def get_freeze_panes(ident, name):
    pane = _view(ident, name).pane
    if pane is None or pane.state not in ("frozen", "frozenSplit"):
        return (OK, (0, 0))
    return (OK, (int(pane.ySplit or 0), int(pane.xSplit or 0)))


@native
def split_panes(ident, name, height, width):
    view = _view(ident, name)
    view.pane = Pane(xSplit=width or None, ySplit=height or None, activePane="bottomRight", state="split")
    return (OK, OK)


@native
def set_tab_color(ident, name, color):
    sheet(ident, name).sheet_properties.tabColor = Color(rgb=color)
    return OK


@native
def get_tab_color(ident, name):
    color = sheet(ident, name).sheet_properties.tabColor
    if color is None or not isinstance(color.rgb, str):
        return (OK, "")
    return (OK, "#" + color.rgb[-6:])


@native
def set_sheet_view(ident, name, kind):
    _view(ident, name).view = VIEW_KINDS[kind]
    return OK


@native
def get_sheet_view(ident, name):
    view = _view(ident, name).view
    return (OK, VIEW_NAMES.get(view, view) if view else "")


@native
def set_selection(ident, name, active_cell, sqref):
    view = _view(ident, name)
    if view.selection:
        current = view.selection[-1]
        current.activeCell = active_cell
        current.sqref = sqref
    else:
        view.selection = [Selection(activeCell=active_cell, sqref=sqref)]
    return (OK, OK)


@native
def get_selection(ident, name):
    selection = _view(ident, name).selection
    if not selection:
        return (OK, {})
    current = selection[-1]
    return (OK, {"active_cell": current.activeCell or "", "sqref": current.sqref or ""})
