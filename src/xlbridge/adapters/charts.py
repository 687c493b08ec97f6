"""Native charts anchored on a worksheet."""

from __future__ import annotations

from openpyxl.chart import (
    AreaChart,
    AreaChart3D,
    BarChart,
    BarChart3D,
    DoughnutChart,
    LineChart,
    LineChart3D,
    PieChart,
    PieChart3D,
    RadarChart,
    ScatterChart,
    Series,
)
from openpyxl.chart._3d import View3D
from openpyxl.chart.data_source import AxDataSource, StrData, StrVal
from openpyxl.chart.label import DataLabelList
from openpyxl.chart.legend import Legend
from openpyxl.drawing.spreadsheet_drawing import AnchorMarker, TwoCellAnchor
from openpyxl.utils import get_column_letter, quote_sheetname

from xlbridge.adapters.helpers import coordinate, fault, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

CHART_TYPES = {
    "bar": lambda: BarChart(barDir="bar"),
    "col": lambda: BarChart(barDir="col"),
    "line": LineChart,
    "pie": PieChart,
    "area": AreaChart,
    "scatter": ScatterChart,
    "doughnut": DoughnutChart,
    "radar": RadarChart,
    "bar3d": lambda: BarChart3D(barDir="col"),
    "line3d": LineChart3D,
    "pie3d": PieChart3D,
    "area3d": AreaChart3D,
}

KIND_NAMES = {
    "BarChart": "bar",
    "LineChart": "line",
    "PieChart": "pie",
    "AreaChart": "area",
    "ScatterChart": "scatter",
    "DoughnutChart": "doughnut",
    "RadarChart": "radar",
    "BarChart3D": "bar3d",
    "LineChart3D": "line3d",
    "PieChart3D": "pie3d",
    "AreaChart3D": "area3d",
}

LABEL_POSITIONS = {
    "best_fit": "bestFit",
    "bottom": "b",
    "center": "ctr",
    "inside_base": "inBase",
    "inside_end": "inEnd",
    "left": "l",
    "outside_end": "outEnd",
    "right": "r",
    "top": "t",
}

LEGEND_POSITIONS = {"right": "r", "left": "l", "top": "t", "bottom": "b", "top_right": "tr"}


def _chart(ws, index):
    charts = ws._charts
    if not 0 <= index < len(charts):
        raise fault(f"Chart index out of range: {index}")
    return charts[index]


def _title_text(title) -> str:
    if title is None:
        return ""
    if isinstance(title, str):
        return title
    rich = title.tx.rich if title.tx is not None else None
    if rich is None:
        return ""
    return "".join(run.t for p in rich.p for run in (p.r or []))


def _kind(chart) -> str:
    name = type(chart).__name__
    if name == "BarChart" and chart.barDir == "col":
        return "col"
    return KIND_NAMES.get(name, name)


def _anchor_ref(marker: AnchorMarker) -> str:
    return f"{get_column_letter(marker.col + 1)}{marker.row + 1}"


def _qualified(ws, ref: str) -> str:
    if "!" in ref:
        return ref
    return f"{quote_sheetname(ws.title)}!{ref}"


def _build(ws, chart_type, from_cell, to_cell, title, data_series, series_titles, point_titles):
    chart = CHART_TYPES[chart_type]()
    chart.title = title
    categories = None
    if point_titles:
        categories = AxDataSource(strLit=StrData(
            ptCount=len(point_titles),
            pt=[StrVal(idx=i, v=str(t)) for i, t in enumerate(point_titles)],
        ))
    for i, ref in enumerate(data_series):
        label = series_titles[i] if i < len(series_titles) else None
        series = Series(_qualified(ws, ref), title=label)
        if categories is not None:
            series.cat = categories
        chart.series.append(series)
    top, left = coordinate(from_cell)
    bottom, right = coordinate(to_cell)
    chart.anchor = TwoCellAnchor(
        _from=AnchorMarker(col=left - 1, row=top - 1),
        to=AnchorMarker(col=right - 1, row=bottom - 1),
    )
    return chart


def _labels(chart, show_values, show_percent=False, show_category_name=False, show_series_name=False, position=None):
    chart.dataLabels = DataLabelList(
        showVal=show_values,
        showPercent=show_percent,
        showCatName=show_category_name,
        showSerName=show_series_name,
        dLblPos=LABEL_POSITIONS[position] if position else None,
    )


def _legend(chart, position, overlay=False):
    chart.legend = Legend(legendPos=LEGEND_POSITIONS[position], overlay=overlay)


def _view(chart, rot_x, rot_y, perspective, right_angle_axes=None, height_percent=None):
    if not hasattr(type(chart), "view3D"):
        raise fault(f"3D view is not supported for {_kind(chart)} charts")
    chart.view3D = View3D(
        rotX=rot_x, rotY=rot_y, perspective=perspective, rAngAx=right_angle_axes, hPercent=height_percent,
    )


def _axis_titles(chart, x_title, y_title):
    if not hasattr(chart, "x_axis") or not hasattr(chart, "y_axis"):
        raise fault("chart has no axes")
    chart.x_axis.title = x_title
    chart.y_axis.title = y_title


@native
def add_chart(ident, sheet_name, chart_type, from_cell, to_cell, title, data_series, series_titles=(), point_titles=()):
    ws = sheet(ident, sheet_name)
    ws.add_chart(_build(ws, chart_type, from_cell, to_cell, title, data_series, series_titles, point_titles))
    return (OK, OK)


@native
def add_chart_with_options(
    ident, sheet_name, chart_type, from_cell, to_cell, title, data_series, series_titles, point_titles,
    style, vary_colors, view_3d, legend, axes, data_labels,
):
    ws = sheet(ident, sheet_name)
    chart = _build(ws, chart_type, from_cell, to_cell, title, data_series, series_titles, point_titles)
    chart.style = style
    if hasattr(type(chart), "varyColors"):
        chart.varyColors = vary_colors
    # every option is applied before the chart is anchored, so a rejected one adds nothing
    if view_3d:
        _view(chart, **view_3d)
    if legend:
        _legend(chart, **legend)
    if axes:
        _axis_titles(chart, axes.get("category_axis_title", ""), axes.get("value_axis_title", ""))
    if data_labels:
        _labels(chart, **data_labels)
    ws.add_chart(chart)
    return (OK, OK)


@native
def set_chart_style(ident, sheet_name, chart_index, style):
    _chart(sheet(ident, sheet_name), chart_index).style = style
    return OK


@native
def set_chart_data_labels(
    ident, sheet_name, chart_index, show_values,
    show_percent=False, show_category_name=False, show_series_name=False, position=None,
):
    chart = _chart(sheet(ident, sheet_name), chart_index)
    _labels(chart, show_values, show_percent, show_category_name, show_series_name, position)
    return (OK, OK)


@native
def set_chart_legend_position(ident, sheet_name, chart_index, position, overlay=False):
    _legend(_chart(sheet(ident, sheet_name), chart_index), position, overlay)
    return (OK, OK)


@native
def set_chart_3d_view(ident, sheet_name, chart_index, rot_x, rot_y, perspective, right_angle_axes=None):
    _view(_chart(sheet(ident, sheet_name), chart_index), rot_x, rot_y, perspective, right_angle_axes)
    return (OK, OK)


@native
def set_chart_axis_titles(ident, sheet_name, chart_index, x_title, y_title):
    _axis_titles(_chart(sheet(ident, sheet_name), chart_index), x_title, y_title)
    return (OK, OK)


@native
def get_chart_count(ident, sheet_name):
    return (OK, len(sheet(ident, sheet_name)._charts))


@native
def get_charts(ident, sheet_name):
    out = []
    for index, chart in enumerate(sheet(ident, sheet_name)._charts):
        anchor = chart.anchor
        info = {
            "index": index,
            "type": _kind(chart),
            "title": _title_text(chart.title),
            "series_count": len(chart.series),
            "style": chart.style,
        }
        if isinstance(anchor, TwoCellAnchor):
            info["from_cell"] = _anchor_ref(anchor._from)
            info["to_cell"] = _anchor_ref(anchor.to)
        elif isinstance(anchor, str):
            info["from_cell"] = anchor
            info["to_cell"] = ""
        else:
            info["from_cell"] = _anchor_ref(anchor._from)
            info["to_cell"] = ""
        out.append(info)
    return (OK, out)
