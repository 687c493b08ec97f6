"""Native conditional formatting rules and their read-back."""

from __future__ import annotations

from openpyxl.formatting.rule import (
    ColorScale,
    DataBar,
    FormatObject,
    IconSet,
    Rule,
)
from openpyxl.styles import PatternFill
from openpyxl.styles.colors import Color
from openpyxl.styles.differential import DifferentialStyle
from openpyxl.worksheet.cell_range import CellRange

from xlbridge.adapters.helpers import color_text, plain_ref, sheet
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import OK

OPERATORS = {
    "between": "between",
    "not_between": "notBetween",
    "equal": "equal",
    "not_equal": "notEqual",
    "greater_than": "greaterThan",
    "less_than": "lessThan",
    "greater_than_or_equal": "greaterThanOrEqual",
    "less_than_or_equal": "lessThanOrEqual",
}
OPERATOR_NAMES = {v: k for k, v in OPERATORS.items()}

# public text operator -> (rule type, rule operator, formula template)
TEXT_RULES = {
    "contains": ("containsText", "containsText", 'NOT(ISERROR(SEARCH("{text}",{cell})))'),
    "not_contains": ("notContainsText", "notContains", 'ISERROR(SEARCH("{text}",{cell}))'),
    "begins_with": ("beginsWith", "beginsWith", 'LEFT({cell},LEN("{text}"))="{text}"'),
    "ends_with": ("endsWith", "endsWith", 'RIGHT({cell},LEN("{text}"))="{text}"'),
}
TEXT_NAMES = {spec[0]: name for name, spec in TEXT_RULES.items()}

AVERAGE_RULES = {
    "above": (True, False),
    "below": (False, False),
    "above_equal": (True, True),
    "below_equal": (False, True),
}

RULE_KINDS = {
    "cellIs": "cell_is",
    "colorScale": "color_scale",
    "dataBar": "data_bar",
    "iconSet": "icon_set",
    "top10": "top_bottom",
    "aboveAverage": "above_below_average",
    **{t: "text" for t in TEXT_NAMES},
}


def _style(color):
    fill = PatternFill(fill_type="solid", bgColor=Color(rgb=color), fgColor=Color(rgb=color))
    return DifferentialStyle(fill=fill)


def _format_style(rule: Rule) -> str:
    if rule.dxf is None or rule.dxf.fill is None:
        return ""
    return color_text(rule.dxf.fill.bgColor) or color_text(rule.dxf.fill.fgColor)


def _operator(name):
    if name not in OPERATORS:
        raise NativeFault(f"unknown conditional format operator: {name}")
    return OPERATORS[name]


def _literal(value):
    if value is None:
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    text = str(value)
    try:
        float(text)
    except ValueError:
        return '"' + text.replace('"', '""') + '"'
    return text


def _threshold(spec):
    if spec is None:
        return None
    kind, value = spec
    return FormatObject(type=kind, val=value)


def _cfvo(obj: FormatObject):
    return (obj.type, obj.val)


def _add(ws, cell_range, rule):
    ws.conditional_formatting.add(cell_range, rule)
    return (OK, OK)


@native
def add_cell_value_rule(ident, sheet_name, cell_range, operator, value1, value2, format_style):
    formula = [f for f in (_literal(value1), _literal(value2)) if f is not None]
    rule = Rule(type="cellIs", operator=_operator(operator), formula=formula, dxf=_style(format_style))
    return _add(sheet(ident, sheet_name), cell_range, rule)


@native
def add_cell_is_rule(ident, sheet_name, cell_range, operator, value1, value2, format_style):
    formula = [str(f).lstrip("=") for f in (value1, value2) if f is not None]
    rule = Rule(type="cellIs", operator=_operator(operator), formula=formula, dxf=_style(format_style))
    return _add(sheet(ident, sheet_name), cell_range, rule)


@native
def add_text_rule(ident, sheet_name, cell_range, operator, text, format_style):
    if operator not in TEXT_RULES:
        raise NativeFault(f"unknown text rule operator: {operator}")
    rule_type, rule_operator, template = TEXT_RULES[operator]
    first = CellRange(cell_range.split(",")[0]).coord.split(":")[0]
    escaped = text.replace('"', '""')
    rule = Rule(
        type=rule_type,
        operator=rule_operator,
        text=text,
        formula=[template.format(text=escaped, cell=first)],
        dxf=_style(format_style),
    )
    return _add(sheet(ident, sheet_name), cell_range, rule)


@native
def add_data_bar(ident, sheet_name, cell_range, min_value, max_value, color):
    low = _threshold(min_value) or FormatObject(type="min")
    high = _threshold(max_value) or FormatObject(type="max")
    bar = DataBar(cfvo=[low, high], color=Color(rgb=color))
    return _add(sheet(ident, sheet_name), cell_range, Rule(type="dataBar", dataBar=bar))


@native
def add_color_scale(
    ident, sheet_name, cell_range,
    min_type, min_value, min_color,
    max_type, max_value, max_color,
    mid_type=None, mid_value=None, mid_color=None,
):
    stops = [(min_type, min_value, min_color)]
    if mid_type is not None:
        stops.append((mid_type, mid_value, mid_color))
    stops.append((max_type, max_value, max_color))
    scale = ColorScale(
        cfvo=[FormatObject(type=kind, val=value) for kind, value, _ in stops],
        color=[Color(rgb=color) for _, _, color in stops],
    )
    return _add(sheet(ident, sheet_name), cell_range, Rule(type="colorScale", colorScale=scale))


@native
def add_icon_set(ident, sheet_name, cell_range, icon_style, thresholds):
    icons = IconSet(iconSet=icon_style, cfvo=[_threshold(t) for t in thresholds])
    return _add(sheet(ident, sheet_name), cell_range, Rule(type="iconSet", iconSet=icons))


@native
def add_top_bottom_rule(ident, sheet_name, cell_range, rule_type, rank, percent, format_style):
    if rule_type not in ("top", "bottom"):
        raise NativeFault(f"unknown top/bottom rule type: {rule_type}")
    rule = Rule(
        type="top10",
        rank=rank,
        percent=bool(percent) or None,
        bottom=(rule_type == "bottom") or None,
        dxf=_style(format_style),
    )
    return _add(sheet(ident, sheet_name), cell_range, rule)


@native
def add_above_below_average_rule(ident, sheet_name, cell_range, rule_type, std_dev, format_style):
    if rule_type not in AVERAGE_RULES:
        raise NativeFault(f"unknown average rule type: {rule_type}")
    above, equal = AVERAGE_RULES[rule_type]
    rule = Rule(
        type="aboveAverage",
        aboveAverage=above,
        equalAverage=equal or None,
        stdDev=std_dev,
        dxf=_style(format_style),
    )
    return _add(sheet(ident, sheet_name), cell_range, rule)


def _describe(rule: Rule, ref: str) -> dict:
    kind = RULE_KINDS.get(rule.type, rule.type)
    info = {"rule_type": kind, "range": ref}
    if kind == "cell_is":
        info.update(
            operator=OPERATOR_NAMES.get(rule.operator, rule.operator),
            formula=list(rule.formula),
            format_style=_format_style(rule),
        )
    elif kind == "text":
        info.update(operator=TEXT_NAMES[rule.type], text=rule.text, format_style=_format_style(rule))
    elif kind == "color_scale":
        scale = rule.colorScale
        points = [
            {"type": obj.type, "value": obj.val, "color": color_text(color)}
            for obj, color in zip(scale.cfvo, scale.color)
        ]
        info["min"], info["max"] = points[0], points[-1]
        info["mid"] = points[1] if len(points) == 3 else None
    elif kind == "data_bar":
        low, high = rule.dataBar.cfvo[0], rule.dataBar.cfvo[-1]
        info.update(
            min=None if low.type == "min" and low.val is None else _cfvo(low),
            max=None if high.type == "max" and high.val is None else _cfvo(high),
            color=color_text(rule.dataBar.color),
        )
    elif kind == "icon_set":
        info.update(
            icon_style=rule.iconSet.iconSet or "",
            thresholds=[_cfvo(obj) for obj in rule.iconSet.cfvo],
        )
    elif kind == "top_bottom":
        info.update(
            kind="bottom" if rule.bottom else "top",
            rank=rule.rank,
            percent=bool(rule.percent),
            format_style=_format_style(rule),
        )
    elif kind == "above_below_average":
        # absent aboveAverage attribute means "above"
        above = rule.aboveAverage is not False
        name = ("above" if above else "below") + ("_equal" if rule.equalAverage else "")
        info.update(kind=name, std_dev=rule.stdDev, format_style=_format_style(rule))
    return info


def _rules(ident, sheet_name, cell_range, kind=None):
    found = []
    target = CellRange(cell_range) if cell_range else None
    for cf in sheet(ident, sheet_name).conditional_formatting:
        if target is not None and all(target.isdisjoint(r) for r in cf.sqref.ranges):
            continue
        ref = plain_ref(str(cf.sqref))
        for rule in cf.rules:
            info = _describe(rule, ref)
            if kind is None or info["rule_type"] == kind:
                found.append(info)
    return (OK, found)


@native
def get_conditional_formatting_rules(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range)


@native
def get_cell_value_rules(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "cell_is")


@native
def get_color_scales(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "color_scale")


@native
def get_data_bars(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "data_bar")


@native
def get_icon_sets(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "icon_set")


@native
def get_top_bottom_rules(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "top_bottom")


@native
def get_above_below_average_rules(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "above_below_average")


@native
def get_text_rules(ident, sheet_name, cell_range=None):
    return _rules(ident, sheet_name, cell_range, "text")
