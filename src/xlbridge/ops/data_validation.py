"""Data validation rules.

Every adder takes the same optional message block: ``allow_blank`` plus
error and input-prompt titles and texts.  Operators are the snake_case names
in ``OPERATORS``.
"""

from __future__ import annotations

import datetime
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
    check_text,
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
MAX_LIST_LENGTH = 255
MAX_TEXT_LENGTH = 32767


def _messages(
    allow_blank: bool,
    error_title: str | None,
    error_message: str | None,
    prompt_title: str | None,
    prompt_message: str | None,
) -> dict[str, Any]:
    check_bool(allow_blank, "allow_blank")
    block = {
        "error_title": error_title,
        "error_message": error_message,
        "prompt_title": prompt_title,
        "prompt_message": prompt_message,
    }
    for field, value in block.items():
        if value is not None:
            check_text(value, field)
    return {"allow_blank": allow_blank, **block}


def _where(sheet: str, range: str) -> str:
    check_sheet_name(sheet)
    return check_ranges(range)


def _bounds(operator: str, value1: Any, value2: Any, check) -> tuple[Any, Any]:
    check_choice(operator, OPERATORS, "operator")
    first = check(value1, "value1")
    if operator in TWO_VALUE_OPERATORS:
        if value2 is None:
            raise ArgumentError(f"operator {operator} needs value2")
        return first, check(value2, "value2")
    if value2 is not None:
        raise ArgumentError(f"operator {operator} takes a single value")
    return first, None


def _number(value: Any, name: str) -> float | int:
    check_number(value, name)
    return value


def _length(value: Any, name: str) -> int:
    return check_int_range(value, 0, MAX_TEXT_LENGTH, name)


def _date(value: Any, name: str) -> str:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str):
        try:
            return datetime.date.fromisoformat(value).isoformat()
        except ValueError as exc:
            raise ArgumentError(f"{name} must be an ISO date (YYYY-MM-DD), got {value!r}") from exc
    raise ArgumentError(f"{name} must be a date, got {type(value).__name__}")


@command("failed to add list validation")
def add_list_validation(
    book: Handle,
    sheet: str,
    range: str,
    options: list[str],
    allow_blank: bool = True,
    error_title: str | None = None,
    error_message: str | None = None,
    prompt_title: str | None = None,
    prompt_message: str | None = None,
):
    """Restrict ``range`` to a dropdown of ``options``."""
    where = _where(sheet, range)
    if not isinstance(options, (list, tuple)) or not options:
        raise ArgumentError("options must be a non-empty list")
    items = [str(o) for o in options]
    if any("," in item for item in items):
        raise ArgumentError("list options cannot contain commas")
    if len(",".join(items)) > MAX_LIST_LENGTH:
        raise ArgumentError(f"list options exceed {MAX_LIST_LENGTH} characters")
    messages = _messages(allow_blank, error_title, error_message, prompt_title, prompt_message)
    return call("add_list_validation", book, sheet, where, items, **messages)


@command("failed to add number validation")
def add_number_validation(
    book: Handle,
    sheet: str,
    range: str,
    operator: str,
    value1: float,
    value2: float | None = None,
    allow_blank: bool = True,
    error_title: str | None = None,
    error_message: str | None = None,
    prompt_title: str | None = None,
    prompt_message: str | None = None,
):
    where = _where(sheet, range)
    low, high = _bounds(operator, value1, value2, _number)
    messages = _messages(allow_blank, error_title, error_message, prompt_title, prompt_message)
    return call("add_number_validation", book, sheet, where, operator, low, high, **messages)


@command("failed to add date validation")
def add_date_validation(
    book: Handle,
    sheet: str,
    range: str,
    operator: str,
    value1: str | datetime.date,
    value2: str | datetime.date | None = None,
    allow_blank: bool = True,
    error_title: str | None = None,
    error_message: str | None = None,
    prompt_title: str | None = None,
    prompt_message: str | None = None,
):
    """Dates are ``datetime.date`` values or ISO ``YYYY-MM-DD`` strings."""
    where = _where(sheet, range)
    low, high = _bounds(operator, value1, value2, _date)
    messages = _messages(allow_blank, error_title, error_message, prompt_title, prompt_message)
    return call("add_date_validation", book, sheet, where, operator, low, high, **messages)


@command("failed to add text length validation")
def add_text_length_validation(
    book: Handle,
    sheet: str,
    range: str,
    operator: str,
    value1: int,
    value2: int | None = None,
    allow_blank: bool = True,
    error_title: str | None = None,
    error_message: str | None = None,
    prompt_title: str | None = None,
    prompt_message: str | None = None,
):
    where = _where(sheet, range)
    low, high = _bounds(operator, value1, value2, _length)
    messages = _messages(allow_blank, error_title, error_message, prompt_title, prompt_message)
    return call("add_text_length_validation", book, sheet, where, operator, low, high, **messages)


@command("failed to add custom validation")
def add_custom_validation(
    book: Handle,
    sheet: str,
    range: str,
    formula: str,
    allow_blank: bool = True,
    error_title: str | None = None,
    error_message: str | None = None,
    prompt_title: str | None = None,
    prompt_message: str | None = None,
):
    where = _where(sheet, range)
    check_name(formula, "formula")
    messages = _messages(allow_blank, error_title, error_message, prompt_title, prompt_message)
    return call("add_custom_validation", book, sheet, where, formula, **messages)


@command("failed to remove data validation")
def remove_data_validation(book: Handle, sheet: str, range: str):
    """Drop every rule whose range is exactly ``range``."""
    return call("remove_data_validation", book, sheet, _where(sheet, range))


@query("failed to list data validations")
def get_data_validations(book: Handle, sheet: str, range: str | None = None):
    """Rules on the sheet, or only those overlapping ``range``."""
    check_sheet_name(sheet)
    if range is not None:
        check_range(range)
    return call("get_data_validations", book, sheet, range)


@query("failed to check data validations")
def has_data_validations(book: Handle, sheet: str):
    return call("has_data_validations", book, check_sheet_name(sheet))


@query("failed to count data validations")
def count_data_validations(book: Handle, sheet: str):
    return call("count_data_validations", book, check_sheet_name(sheet))
