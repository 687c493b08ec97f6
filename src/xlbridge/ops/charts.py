"""Charts anchored on a worksheet."""

from __future__ import annotations

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_cell,
    check_choice,
    check_int_range,
    check_name,
    check_sheet_name,
    check_text,
)

CHART_TYPES = (
    "bar", "col", "line", "pie", "area", "scatter", "doughnut", "radar",
    "bar3d", "line3d", "pie3d", "area3d",
)
LEGEND_POSITIONS = ("right", "left", "top", "bottom", "top_right")
LABEL_POSITIONS = (
    "best_fit", "bottom", "center", "inside_base", "inside_end", "left", "outside_end", "right", "top",
)


def _index(sheet: str, chart_index: int) -> int:
    check_sheet_name(sheet)
    return check_int_range(chart_index, 0, 10_000, "chart_index")


def _strings(values, name: str) -> list[str]:
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise ArgumentError(f"{name} must be a list of strings")
    return [check_text(v, name) for v in values]


@command("failed to add chart")
def add_chart(
    book: Handle,
    sheet: str,
    chart_type: str,
    from_cell: str,
    to_cell: str,
    title: str,
    data_series: list[str],
    series_titles: list[str] = (),
    point_titles: list[str] = (),
):
    """Add a chart spanning ``from_cell``..``to_cell``.

    ``data_series`` are value ranges such as ``"Sheet1!$B$2:$B$5"``; an
    unqualified range refers to ``sheet``.  ``point_titles`` label the
    categories of every series.
    """
    check_sheet_name(sheet)
    check_choice(chart_type, CHART_TYPES, "chart_type")
    start = check_cell(from_cell, "from_cell")
    end = check_cell(to_cell, "to_cell")
    check_text(title, "title")
    series = [check_name(ref, "data_series") for ref in _strings(data_series, "data_series")]
    if not series:
        raise ArgumentError("data_series must name at least one range")
    return call(
        "add_chart", book, sheet, chart_type, start, end, title, series,
        _strings(series_titles, "series_titles"), _strings(point_titles, "point_titles"),
    )


def _options(value, name: str, checks: dict) -> dict | None:
    """Validate an option mapping key by key; None or {} means "leave unset"."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ArgumentError(f"{name} must be a mapping, got {type(value).__name__}")
    unknown = sorted(set(value) - set(checks))
    if unknown:
        raise ArgumentError(f"{name} has unknown keys: {', '.join(unknown)}")
    return {key: checks[key](v) for key, v in value.items() if v is not None} or None


VIEW_3D_CHECKS = {
    "rot_x": lambda v: check_int_range(v, -90, 90, "rot_x"),
    "rot_y": lambda v: check_int_range(v, 0, 360, "rot_y"),
    "perspective": lambda v: check_int_range(v, 0, 240, "perspective"),
    "right_angle_axes": lambda v: check_bool(v, "right_angle_axes"),
    "height_percent": lambda v: check_int_range(v, 5, 500, "height_percent"),
}
LEGEND_CHECKS = {
    "position": lambda v: check_choice(v, LEGEND_POSITIONS, "position"),
    "overlay": lambda v: check_bool(v, "overlay"),
}
AXES_CHECKS = {
    "category_axis_title": lambda v: check_text(v, "category_axis_title"),
    "value_axis_title": lambda v: check_text(v, "value_axis_title"),
}
DATA_LABEL_CHECKS = {
    "show_values": lambda v: check_bool(v, "show_values"),
    "show_percent": lambda v: check_bool(v, "show_percent"),
    "show_category_name": lambda v: check_bool(v, "show_category_name"),
    "show_series_name": lambda v: check_bool(v, "show_series_name"),
    "position": lambda v: check_choice(v, LABEL_POSITIONS, "position"),
}


@command("failed to add chart")
def add_chart_with_options(
    book: Handle,
    sheet: str,
    chart_type: str,
    from_cell: str,
    to_cell: str,
    title: str,
    data_series: list[str],
    series_titles: list[str],
    point_titles: list[str],
    style: int,
    vary_colors: bool,
    view_3d: dict | None = None,
    legend: dict | None = None,
    axes: dict | None = None,
    data_labels: dict | None = None,
):
    """``add_chart`` plus style, colouring, 3D view, legend, axis titles and data labels in one step.

    Option mappings use the keyword names of the matching ``set_chart_*``
    operation (``axes`` takes ``category_axis_title`` and
    ``value_axis_title``).  The 3D view needs a 3D chart type and a legend
    needs ``position``.  Nothing is added when any option is rejected.
    """
    check_sheet_name(sheet)
    check_choice(chart_type, CHART_TYPES, "chart_type")
    start = check_cell(from_cell, "from_cell")
    end = check_cell(to_cell, "to_cell")
    check_text(title, "title")
    series = [check_name(ref, "data_series") for ref in _strings(data_series, "data_series")]
    if not series:
        raise ArgumentError("data_series must name at least one range")
    view = _options(view_3d, "view_3d", VIEW_3D_CHECKS)
    if view is not None and not {"rot_x", "rot_y", "perspective"} <= set(view):
        raise ArgumentError("view_3d needs rot_x, rot_y and perspective")
    placed = _options(legend, "legend", LEGEND_CHECKS)
    if placed is not None and "position" not in placed:
        raise ArgumentError("legend needs a position")
    labels = _options(data_labels, "data_labels", DATA_LABEL_CHECKS)
    if labels is not None and "show_values" not in labels:
        raise ArgumentError("data_labels needs show_values")
    return call(
        "add_chart_with_options", book, sheet, chart_type, start, end, title, series,
        _strings(series_titles, "series_titles"), _strings(point_titles, "point_titles"),
        check_int_range(style, 1, 48, "style"), check_bool(vary_colors, "vary_colors"),
        view, placed, _options(axes, "axes", AXES_CHECKS), labels,
    )


@command("failed to set chart style")
def set_chart_style(book: Handle, sheet: str, chart_index: int, style: int):
    index = _index(sheet, chart_index)
    return call("set_chart_style", book, sheet, index, check_int_range(style, 1, 48, "style"))


@command("failed to set chart data labels")
def set_chart_data_labels(
    book: Handle,
    sheet: str,
    chart_index: int,
    show_values: bool,
    show_percent: bool = False,
    show_category_name: bool = False,
    show_series_name: bool = False,
    position: str | None = None,
):
    index = _index(sheet, chart_index)
    if position is not None:
        check_choice(position, LABEL_POSITIONS, "position")
    return call(
        "set_chart_data_labels", book, sheet, index,
        check_bool(show_values, "show_values"),
        check_bool(show_percent, "show_percent"),
        check_bool(show_category_name, "show_category_name"),
        check_bool(show_series_name, "show_series_name"),
        position,
    )


@command("failed to set legend position")
def set_chart_legend_position(book: Handle, sheet: str, chart_index: int, position: str, overlay: bool = False):
    index = _index(sheet, chart_index)
    check_choice(position, LEGEND_POSITIONS, "position")
    return call("set_chart_legend_position", book, sheet, index, position, check_bool(overlay, "overlay"))


@command("failed to set 3D view")
def set_chart_3d_view(
    book: Handle,
    sheet: str,
    chart_index: int,
    rot_x: int,
    rot_y: int,
    perspective: int,
    right_angle_axes: bool | None = None,
):
    """Rotation and perspective of a 3D chart; other chart kinds are rejected by the engine."""
    index = _index(sheet, chart_index)
    check_int_range(rot_x, -90, 90, "rot_x")
    check_int_range(rot_y, 0, 360, "rot_y")
    check_int_range(perspective, 0, 240, "perspective")
    if right_angle_axes is not None:
        check_bool(right_angle_axes, "right_angle_axes")
    return call("set_chart_3d_view", book, sheet, index, rot_x, rot_y, perspective, right_angle_axes)


@command("failed to set axis titles")
def set_chart_axis_titles(book: Handle, sheet: str, chart_index: int, x_title: str, y_title: str):
    index = _index(sheet, chart_index)
    return call(
        "set_chart_axis_titles", book, sheet, index,
        check_text(x_title, "x_title"), check_text(y_title, "y_title"),
    )


@query("failed to count charts")
def get_chart_count(book: Handle, sheet: str):
    return call("get_chart_count", book, check_sheet_name(sheet))


@query("failed to list charts")
def get_charts(book: Handle, sheet: str):
    return call("get_charts", book, check_sheet_name(sheet))
