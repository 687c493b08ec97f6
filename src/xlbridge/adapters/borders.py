"""Native border sides of a single cell."""

from __future__ import annotations

from openpyxl.styles.borders import Side
from openpyxl.styles.colors import Color

from xlbridge.adapters.helpers import cell, color_text, restyle, styled_cell
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _side(ident, sheet_name, address, position):
    c = styled_cell(ident, sheet_name, address)
    return getattr(c.border, position) if c is not None else None


@native
def set_border_style(ident, sheet_name, address, position, style):
    c = cell(ident, sheet_name, address)
    current = getattr(c.border, position)
    color = current.color if current is not None else None
    side = Side(style=None if style == "none" else style, color=color)
    restyle(c, "border", **{position: side})
    return OK


@native
def set_border_color(ident, sheet_name, address, position, color):
    c = cell(ident, sheet_name, address)
    current = getattr(c.border, position)
    # a colour without a line style is invisible; give it a thin line
    style = current.style if current is not None and current.style else "thin"
    restyle(c, "border", **{position: Side(style=style, color=Color(rgb=color))})
    return (OK, OK)


@native
def get_border_style(ident, sheet_name, address, position):
    side = _side(ident, sheet_name, address, position)
    return (OK, (side.style or "") if side is not None else "")


@native
def get_border_color(ident, sheet_name, address, position):
    side = _side(ident, sheet_name, address, position)
    return (OK, color_text(side.color) if side is not None else "")
