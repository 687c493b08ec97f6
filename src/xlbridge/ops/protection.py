"""Sheet, workbook and cell protection."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_bool, check_cell, check_name, check_sheet_name


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


@command("failed to protect sheet")
def set_sheet_protection(book: Handle, sheet: str, password: str | None = None, protected: bool = True):
    """Turn sheet protection on or off; ``password`` is stored hashed."""
    check_sheet_name(sheet)
    if password is not None:
        check_name(password, "password")
    return call("set_sheet_protection", book, sheet, password, check_bool(protected, "protected"))


@query("failed to read sheet protection")
def get_sheet_protection(book: Handle, sheet: str):
    return call("get_sheet_protection", book, check_sheet_name(sheet))


@query("failed to read sheet protection")
def is_sheet_protected(book: Handle, sheet: str):
    return call("is_sheet_protected", book, check_sheet_name(sheet))


@command("failed to protect workbook")
def set_workbook_protection(book: Handle, password: str):
    """Lock the workbook structure under ``password``."""
    return call("set_workbook_protection", book, check_name(password, "password"))


@query("failed to read workbook protection")
def is_workbook_protected(book: Handle):
    return call("is_workbook_protected", book)


@query("failed to read workbook protection")
def get_workbook_protection_details(book: Handle):
    return call("get_workbook_protection_details", book)


@command("failed to lock cell")
def set_cell_locked(book: Handle, sheet: str, cell: str, locked: bool):
    address = _at(sheet, cell)
    return call("set_cell_locked", book, sheet, address, check_bool(locked, "locked"))


@query("failed to read cell lock")
def get_cell_locked(book: Handle, sheet: str, cell: str):
    return call("get_cell_locked", book, sheet, _at(sheet, cell))


@command("failed to hide cell formula")
def set_cell_hidden(book: Handle, sheet: str, cell: str, hidden: bool):
    address = _at(sheet, cell)
    return call("set_cell_hidden", book, sheet, address, check_bool(hidden, "hidden"))


@query("failed to read cell hidden flag")
def get_cell_hidden(book: Handle, sheet: str, cell: str):
    return call("get_cell_hidden", book, sheet, _at(sheet, cell))
