"""Native sheet, workbook and cell protection."""

from __future__ import annotations

from openpyxl.workbook.protection import WorkbookProtection

from xlbridge.adapters.helpers import book, cell, existing_cell, restyle, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

SHEET_FLAGS = {
    "objects": "objects",
    "scenarios": "scenarios",
    "format_cells": "formatCells",
    "format_columns": "formatColumns",
    "format_rows": "formatRows",
    "insert_columns": "insertColumns",
    "insert_rows": "insertRows",
    "insert_hyperlinks": "insertHyperlinks",
    "delete_columns": "deleteColumns",
    "delete_rows": "deleteRows",
    "select_locked_cells": "selectLockedCells",
    "select_unlocked_cells": "selectUnlockedCells",
    "sort": "sort",
    "auto_filter": "autoFilter",
    "pivot_tables": "pivotTables",
}


@native
def set_sheet_protection(ident, sheet_name, password=None, protected=True):
    ws = sheet(ident, sheet_name)
    ws.protection.sheet = bool(protected)
    if password is not None:
        ws.protection.password = password
    return (OK, OK)


@native
def get_sheet_protection(ident, sheet_name):
    prot = sheet(ident, sheet_name).protection
    details = {"protected": bool(prot.sheet), "has_password": bool(prot.password)}
    details.update({name: bool(getattr(prot, attr)) for name, attr in SHEET_FLAGS.items()})
    return (OK, details)


@native
def is_sheet_protected(ident, sheet_name):
    return (OK, bool(sheet(ident, sheet_name).protection.sheet))


@native
def set_workbook_protection(ident, password):
    wb = book(ident).wb
    wb.security = WorkbookProtection(workbookPassword=password, lockStructure=True)
    return (OK, OK)


@native
def is_workbook_protected(ident):
    security = book(ident).wb.security
    return (OK, bool(security and (security.lockStructure or security.lockWindows)))


@native
def get_workbook_protection_details(ident):
    security = book(ident).wb.security
    if security is None:
        security = WorkbookProtection()
    return (OK, {
        "lock_structure": bool(security.lockStructure),
        "lock_windows": bool(security.lockWindows),
        "lock_revision": bool(security.lockRevision),
        "has_password": bool(security.workbookPassword or security.workbookHashValue),
    })


@native
def set_cell_locked(ident, sheet_name, address, locked):
    restyle(cell(ident, sheet_name, address), "protection", locked=bool(locked))
    return (OK, OK)


@native
def get_cell_locked(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    # unformatted cells are locked
    return (OK, True if c is None else bool(c.protection.locked))


@native
def set_cell_hidden(ident, sheet_name, address, hidden):
    restyle(cell(ident, sheet_name, address), "protection", hidden=bool(hidden))
    return (OK, OK)


@native
def get_cell_hidden(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    return (OK, False if c is None else bool(c.protection.hidden))
