"""Native pattern and gradient fills."""

from __future__ import annotations

from openpyxl.styles.colors import Color
from openpyxl.styles.fills import GradientFill, PatternFill, Stop

from xlbridge.adapters.helpers import cell, color_text, styled_cell
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _pattern(ident, sheet_name, address) -> PatternFill | None:
    c = styled_cell(ident, sheet_name, address)
    # cell.fill is a StyleProxy, so the fill kind is read from its tag
    if c is None or c.fill.tagname != "patternFill" or not c.fill.fill_type:
        return None
    return c.fill


def _gradient(kind: str, colors: list[str], degree: float = 0.0, **box) -> GradientFill:
    step = 1.0 / (len(colors) - 1)
    stops = [Stop(Color(rgb=color), round(i * step, 6)) for i, color in enumerate(colors)]
    return GradientFill(type=kind, degree=degree, stop=stops, **box)


@native
def set_background_color(ident, sheet_name, address, color):
    cell(ident, sheet_name, address).fill = PatternFill(
        fill_type="solid", fgColor=Color(rgb=color), bgColor=Color(rgb=color)
    )
    return (OK, OK)


@native
def get_cell_background_color(ident, sheet_name, address):
    fill = _pattern(ident, sheet_name, address)
    return (OK, color_text(fill.bgColor) if fill else "")


@native
def get_cell_foreground_color(ident, sheet_name, address):
    fill = _pattern(ident, sheet_name, address)
    return (OK, color_text(fill.fgColor) if fill else "")


@native
def get_cell_pattern_type(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    if c is None:
        return (OK, "")
    if c.fill.tagname == "gradientFill":
        return (OK, "gradient")
    return (OK, c.fill.fill_type or "")


@native
def set_pattern_fill(ident, sheet_name, address, pattern_type, fg_color=None, bg_color=None):
    fill = PatternFill(fill_type=None if pattern_type == "none" else pattern_type)
    if fg_color:
        fill.fgColor = Color(rgb=fg_color)
    if bg_color:
        fill.bgColor = Color(rgb=bg_color)
    cell(ident, sheet_name, address).fill = fill
    return OK


@native
def get_pattern_fill(ident, sheet_name, address):
    fill = _pattern(ident, sheet_name, address)
    if fill is None:
        return (OK, {"pattern_type": "none", "fg_color": "", "bg_color": ""})
    return (OK, {
        "pattern_type": fill.fill_type,
        "fg_color": color_text(fill.fgColor),
        "bg_color": color_text(fill.bgColor),
    })


@native
def set_gradient_fill(ident, sheet_name, address, degree, stops):
    fill = GradientFill(
        type="linear",
        degree=degree,
        stop=[Stop(Color(rgb=color), position) for position, color in stops],
    )
    cell(ident, sheet_name, address).fill = fill
    return (OK, OK)


@native
def set_linear_gradient_fill(ident, sheet_name, address, start_color, end_color, angle=90.0):
    cell(ident, sheet_name, address).fill = _gradient("linear", [start_color, end_color], angle)
    return (OK, OK)


@native
def set_radial_gradient_fill(ident, sheet_name, address, center_color, edge_color):
    cell(ident, sheet_name, address).fill = _gradient(
        "path", [center_color, edge_color], left=0.5, right=0.5, top=0.5, bottom=0.5
    )
    return (OK, OK)


@native
def set_three_color_gradient_fill(ident, sheet_name, address, start_color, middle_color, end_color, angle=90.0):
    cell(ident, sheet_name, address).fill = _gradient("linear", [start_color, middle_color, end_color], angle)
    return (OK, OK)


@native
def get_gradient_fill(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    if c is None or c.fill.tagname != "gradientFill":
        return (OK, None)
    fill = c.fill
    return (OK, {
        "type": fill.type,
        "degree": float(fill.degree or 0.0),
        "left": float(fill.left or 0.0),
        "right": float(fill.right or 0.0),
        "top": float(fill.top or 0.0),
        "bottom": float(fill.bottom or 0.0),
        "stops": [{"position": float(s.position), "color": color_text(s.color)} for s in fill.stop],
    })


@native
def clear_fill(ident, sheet_name, address):
    cell(ident, sheet_name, address).fill = PatternFill()
    return OK
