"""Conditional formatting rules.

``format_style`` is a fill colour applied to matching cells.  Threshold
specs for data bars, colour scales and icon sets are ``(type, value)``
pairs with ``type`` one of ``THRESHOLD_TYPES``.  Getters return one mapping
per rule, tagged with ``rule_type`` and ``range``; passing ``range`` keeps
only rules whose range overlaps it.
"""

from __future__ import annotations

from typing import Any

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import (
    check_bool,
    check_choice,
    check_int_range,
    check_name,
    check_number,
    check_range,
    check_ranges,
    check_sheet_name,
    normalize_color,
)

OPERATORS = (
    "between",
    "not_between",
    "equal",
    "not_equal",
    "greater_than",
    "less_than",
    "greater_than_or_equal",
    "less_than_or_equal",
)
TWO_VALUE_OPERATORS = ("between", "not_between")
TEXT_OPERATORS = ("contains", "not_contains", "begins_with", "ends_with")
THRESHOLD_TYPES = ("min", "max", "num", "percent", "percentile", "formula")
ICON_STYLES = (
    "3Arrows", "3ArrowsGray", "3Flags", "3TrafficLights1", "3TrafficLights2",
    "3Signs", "3Symbols", "3Symbols2", "4Arrows", "4ArrowsGray", "4RedToBlack",
    "4Rating", "4TrafficLights", "5Arrows", "5ArrowsGray", "5Rating", "5Quarters",
)
TOP_BOTTOM = ("top", "bottom")
AVERAGE_RULES = ("above", "below", "above_equal", "below_equal")


def _where(sheet: str, range: str) -> str:
    check_sheet_name(sheet)
    return check_ranges(range)


def _values(operator: str, value1: Any, value2: Any) -> None:
    check_choice(operator, OPERATORS, "operator")
    if value1 is None:
        raise ArgumentError("value1 is required")
    if operator in TWO_VALUE_OPERATORS and value2 is None:
        raise ArgumentError(f"operator {operator} needs value2")
    if operator not in TWO_VALUE_OPERATORS and value2 is not None:
        raise ArgumentError(f"operator {operator} takes a single value")


def _threshold(spec: Any, name: str) -> tuple[str, Any]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ArgumentError(f"{name} must be a (type, value) pair, got {spec!r}")
    kind, value = spec
    check_choice(kind, THRESHOLD_TYPES, f"{name} type")
    if kind in ("min", "max"):
        return kind, value
    if kind == "formula":
        return kind, check_name(value, f"{name} value")
    return kind, check_number(value, f"{name} value")


def _stop(kind: str, value: Any, name: str) -> tuple[str, Any]:
    return _threshold((kind, value), name)


def _filtered(sheet: str, range: str | None) -> None:
    check_sheet_name(sheet)
    if range is not None:
        check_range(range)


@command("failed to add cell value rule")
def add_cell_value_rule(
    book: Handle,
    sheet: str,
    range: str,
    operator: str,
    value1: Any,
    value2: Any,
    format_style: str,
):
    """Compare cells with literal values; text values are quoted for you."""
    where = _where(sheet, range)
    _values(operator, value1, value2)
    return call(
        "add_cell_value_rule", book, sheet, where, operator,
        value1, value2, normalize_color(format_style, "format_style"),
    )


@command("failed to add cell rule")
def add_cell_is_rule(
    book: Handle,
    sheet: str,
    range: str,
    operator: str,
    value1: str,
    value2: str | None,
    format_style: str,
):
    """Compare cells with formulas such as ``"$B$1"`` or ``"AVERAGE(A:A)"``."""
    where = _where(sheet, range)
    _values(operator, value1, value2)
    check_name(str(value1), "value1")
    return call(
        "add_cell_is_rule", book, sheet, where, operator,
        value1, value2, normalize_color(format_style, "format_style"),
    )


@command("failed to add text rule")
def add_text_rule(book: Handle, sheet: str, range: str, operator: str, text: str, format_style: str):
    where = _where(sheet, range)
    check_choice(operator, TEXT_OPERATORS, "operator")
    check_name(text, "text")
    return call(
        "add_text_rule", book, sheet, where, operator, text,
        normalize_color(format_style, "format_style"),
    )


@command("failed to add data bar")
def add_data_bar(
    book: Handle,
    sheet: str,
    range: str,
    min_value: tuple[str, Any] | None,
    max_value: tuple[str, Any] | None,
    color: str,
):
    """``None`` bounds fall back to the lowest and highest value in range."""
    where = _where(sheet, range)
    low = None if min_value is None else _threshold(min_value, "min_value")
    high = None if max_value is None else _threshold(max_value, "max_value")
    return call("add_data_bar", book, sheet, where, low, high, normalize_color(color))


@command("failed to add color scale")
def add_color_scale(
    book: Handle,
    sheet: str,
    range: str,
    min_type: str,
    min_value: Any,
    min_color: str,
    max_type: str,
    max_value: Any,
    max_color: str,
    mid_type: str | None = None,
    mid_value: Any = None,
    mid_color: str | None = None,
):
    """Two-colour scale, or three-colour when the ``mid_*`` stop is given."""
    where = _where(sheet, range)
    min_type, min_value = _stop(min_type, min_value, "min")
    max_type, max_value = _stop(max_type, max_value, "max")
    min_color = normalize_color(min_color, "min_color")
    max_color = normalize_color(max_color, "max_color")
    if mid_type is not None:
        mid_type, mid_value = _stop(mid_type, mid_value, "mid")
        if mid_color is None:
            raise ArgumentError("mid_color is required with mid_type")
        mid_color = normalize_color(mid_color, "mid_color")
    elif mid_color is not None or mid_value is not None:
        raise ArgumentError("mid_type is required with mid_value or mid_color")
    return call(
        "add_color_scale", book, sheet, where,
        min_type, min_value, min_color,
        max_type, max_value, max_color,
        mid_type, mid_value, mid_color,
    )


@command("failed to add icon set")
def add_icon_set(book: Handle, sheet: str, range: str, icon_style: str, thresholds: list[tuple[str, Any]]):
    where = _where(sheet, range)
    check_choice(icon_style, ICON_STYLES, "icon_style")
    if not isinstance(thresholds, (list, tuple)):
        raise ArgumentError("thresholds must be a list of (type, value) pairs")
    expected = int(icon_style[0])
    if len(thresholds) != expected:
        raise ArgumentError(f"icon style {icon_style} needs {expected} thresholds, got {len(thresholds)}")
    cutoffs = [_threshold(t, "threshold") for t in thresholds]
    return call("add_icon_set", book, sheet, where, icon_style, cutoffs)


@command("failed to add top/bottom rule")
def add_top_bottom_rule(
    book: Handle,
    sheet: str,
    range: str,
    rule_type: str,
    rank: int,
    percent: bool,
    format_style: str,
):
    where = _where(sheet, range)
    check_choice(rule_type, TOP_BOTTOM, "rule_type")
    check_bool(percent, "percent")
    check_int_range(rank, 1, 100 if percent else 1000, "rank")
    return call(
        "add_top_bottom_rule", book, sheet, where, rule_type, rank, percent,
        normalize_color(format_style, "format_style"),
    )


@command("failed to add average rule")
def add_above_below_average_rule(
    book: Handle,
    sheet: str,
    range: str,
    rule_type: str,
    std_dev: int | None,
    format_style: str,
):
    where = _where(sheet, range)
    check_choice(rule_type, AVERAGE_RULES, "rule_type")
    if std_dev is not None:
        check_int_range(std_dev, 1, 3, "std_dev")
    return call(
        "add_above_below_average_rule", book, sheet, where, rule_type, std_dev,
        normalize_color(format_style, "format_style"),
    )


@query("failed to list conditional formats")
def get_conditional_formatting_rules(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_conditional_formatting_rules", book, sheet, range)


@query("failed to list cell value rules")
def get_cell_value_rules(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_cell_value_rules", book, sheet, range)


@query("failed to list color scales")
def get_color_scales(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_color_scales", book, sheet, range)


@query("failed to list data bars")
def get_data_bars(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_data_bars", book, sheet, range)


@query("failed to list icon sets")
def get_icon_sets(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_icon_sets", book, sheet, range)


@query("failed to list top/bottom rules")
def get_top_bottom_rules(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_top_bottom_rules", book, sheet, range)


@query("failed to list average rules")
def get_above_below_average_rules(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_above_below_average_rules", book, sheet, range)


@query("failed to list text rules")
def get_text_rules(book: Handle, sheet: str, range: str | None = None):
    _filtered(sheet, range)
    return call("get_text_rules", book, sheet, range)
