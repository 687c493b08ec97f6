"""Formulas, array formulas and defined names."""

from __future__ import annotations

import re

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_cell, check_name, check_range, check_sheet_name

DEFINED_NAME_RE = re.compile(r"^[A-Za-z_\\][A-Za-z0-9_.\\]*$")


def _defined_name(name: str) -> str:
    check_name(name)
    if not DEFINED_NAME_RE.match(name) or re.match(r"^[A-Za-z]{1,3}[0-9]+$", name):
        raise ArgumentError(f"Invalid defined name: {name!r}")
    return name


@command("failed to set formula")
def set_formula(book: Handle, sheet: str, cell: str, formula: str):
    """Store ``formula`` in ``cell``; a leading ``=`` is optional."""
    check_sheet_name(sheet)
    return call("set_formula", book, sheet, check_cell(cell), check_name(formula, "formula"))


@query("failed to read formula")
def get_cell_formula(book: Handle, sheet: str, cell: str):
    check_sheet_name(sheet)
    return call("get_cell_formula", book, sheet, check_cell(cell))


@command("failed to set array formula")
def set_array_formula(book: Handle, sheet: str, range: str, formula: str):
    check_sheet_name(sheet)
    return call("set_array_formula", book, sheet, check_range(range), check_name(formula, "formula"))


@command("failed to create named range")
def create_named_range(book: Handle, name: str, sheet: str, range: str):
    check_sheet_name(sheet)
    return call("create_named_range", book, _defined_name(name), sheet, check_range(range))


@command("failed to create defined name")
def create_defined_name(book: Handle, name: str, formula: str, local_sheet: str | None = None):
    """Define ``name`` for ``formula``, workbook-wide or scoped to ``local_sheet``."""
    if local_sheet is not None:
        check_sheet_name(local_sheet, "local_sheet")
    return call("create_defined_name", book, _defined_name(name), check_name(formula, "formula"), local_sheet)


@query("failed to list defined names")
def get_defined_names(book: Handle):
    """Each name as ``{"name", "value", "scope"}``; scope is a sheet name, or ``""`` for workbook names."""
    return call("get_defined_names", book)


@command("failed to remove defined name")
def remove_defined_name(book: Handle, name: str):
    return call("remove_defined_name", book, check_name(name))
