"""Native data validation rules."""

from __future__ import annotations

import datetime

from openpyxl.utils.datetime import to_excel
from openpyxl.worksheet.cell_range import CellRange
from openpyxl.worksheet.datavalidation import DataValidation

from xlbridge.adapters.helpers import plain_ref, sheet
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


def _operator(name):
    if name not in OPERATORS:
        raise NativeFault(f"unknown validation operator: {name}")
    return OPERATORS[name]


def _date_formula(value):
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.date.fromisoformat(value)
    return str(int(to_excel(value)))


def _number_formula(value):
    if value is None:
        return None
    return str(value)


def _add(ws, ref, messages, **rule):
    dv = DataValidation(
        sqref=ref,
        allow_blank=messages.get("allow_blank", True),
        errorTitle=messages.get("error_title"),
        error=messages.get("error_message"),
        promptTitle=messages.get("prompt_title"),
        prompt=messages.get("prompt_message"),
        showErrorMessage=bool(messages.get("error_title") or messages.get("error_message")),
        showInputMessage=bool(messages.get("prompt_title") or messages.get("prompt_message")),
        **rule,
    )
    ws.data_validations.append(dv)


def _info(dv: DataValidation) -> dict:
    return {
        "range": plain_ref(str(dv.sqref)),
        "type": dv.type or "",
        "operator": OPERATOR_NAMES.get(dv.operator, dv.operator or ""),
        "formula1": dv.formula1,
        "formula2": dv.formula2,
        "allow_blank": bool(dv.allowBlank),
        "error_title": dv.errorTitle,
        "error_message": dv.error,
        "prompt_title": dv.promptTitle,
        "prompt_message": dv.prompt,
    }


def _overlaps(dv: DataValidation, ref: str) -> bool:
    target = CellRange(ref)
    return any(not target.isdisjoint(r) for r in dv.sqref.ranges)


@native
def add_list_validation(ident, sheet_name, cell_range, options, **messages):
    formula = '"' + ",".join(str(o) for o in options) + '"'
    _add(sheet(ident, sheet_name), cell_range, messages, type="list", formula1=formula)
    return (OK, OK)


@native
def add_number_validation(ident, sheet_name, cell_range, operator, value1, value2=None, **messages):
    _add(
        sheet(ident, sheet_name), cell_range, messages,
        type="decimal", operator=_operator(operator),
        formula1=_number_formula(value1), formula2=_number_formula(value2),
    )
    return (OK, OK)


@native
def add_date_validation(ident, sheet_name, cell_range, operator, value1, value2=None, **messages):
    _add(
        sheet(ident, sheet_name), cell_range, messages,
        type="date", operator=_operator(operator),
        formula1=_date_formula(value1), formula2=_date_formula(value2),
    )
    return (OK, OK)


@native
def add_text_length_validation(ident, sheet_name, cell_range, operator, value1, value2=None, **messages):
    _add(
        sheet(ident, sheet_name), cell_range, messages,
        type="textLength", operator=_operator(operator),
        formula1=_number_formula(value1), formula2=_number_formula(value2),
    )
    return (OK, OK)


@native
def add_custom_validation(ident, sheet_name, cell_range, formula, **messages):
    _add(sheet(ident, sheet_name), cell_range, messages, type="custom", formula1=formula.lstrip("="))
    return (OK, OK)


@native
def remove_data_validation(ident, sheet_name, cell_range):
    ws = sheet(ident, sheet_name)
    ws.data_validations.dataValidation = [
        dv for dv in ws.data_validations.dataValidation if plain_ref(str(dv.sqref)) != cell_range
    ]
    return OK


@native
def get_data_validations(ident, sheet_name, cell_range=None):
    rules = sheet(ident, sheet_name).data_validations.dataValidation
    if cell_range is not None:
        rules = [dv for dv in rules if _overlaps(dv, cell_range)]
    return (OK, [_info(dv) for dv in rules])


@native
def has_data_validations(ident, sheet_name):
    return (OK, bool(sheet(ident, sheet_name).data_validations.dataValidation))


@native
def count_data_validations(ident, sheet_name):
    return (OK, len(sheet(ident, sheet_name).data_validations.dataValidation))
