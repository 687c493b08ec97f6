"""Native sheet management: naming, state, merges, structural edits."""

from __future__ import annotations

import uuid

from openpyxl.utils import range_boundaries

from xlbridge.adapters.helpers import book, column_index, not_found, sheet
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import ERROR, OK


def _exists(doc, name, ws=None):
    # workbook sheet names are compared without case
    if any(s.title.lower() == name.lower() for s in doc.wb.worksheets + doc.wb.chartsheets if s is not ws):
        raise NativeFault((ERROR, f"Sheet already exists: {name}"))


def _retitle(ws, name):
    # openpyxl de-duplicates a new title against every sheet, the sheet itself
    # included, so "Data Copy" -> "Data copy" would come out as "Data copy1"
    ws.title = f"xlbridge-{uuid.uuid4().hex[:12]}"
    ws.title = name


@native
def get_sheet_names(ident):
    return list(book(ident).wb.sheetnames)


@native
def get_sheet_count(ident):
    return len(book(ident).wb.sheetnames)


@native
def add_sheet(ident, name):
    doc = book(ident)
    _exists(doc, name)
    doc.wb.create_sheet(title=name)
    return (OK, OK)


@native
def clone_sheet(ident, source, new_name):
    doc = book(ident)
    ws = doc.sheet(source)
    _exists(doc, new_name)
    _retitle(doc.wb.copy_worksheet(ws), new_name)
    return (OK, OK)


@native
def remove_sheet(ident, name):
    doc = book(ident)
    ws = doc.sheet(name)
    doc.forget_sheet(ws)
    doc.wb.remove(ws)
    return OK


@native
def rename_sheet(ident, old_name, new_name):
    doc = book(ident)
    ws = doc.sheet(old_name)
    if new_name != old_name:
        _exists(doc, new_name, ws)
        _retitle(ws, new_name)
    return (OK, OK)


@native
def set_sheet_state(ident, name, state):
    doc = book(ident)
    ws = doc.sheet(name)
    if state != "visible":
        visible = [s for s in doc.wb.worksheets if s.sheet_state == "visible" and s is not ws]
        if not visible:
            raise NativeFault("cannot hide the last visible sheet")
    ws.sheet_state = state
    return OK


@native
def get_sheet_state(ident, name):
    return (OK, sheet(ident, name).sheet_state)


@native
def move_range(ident, name, cell_range, rows, columns):
    sheet(ident, name).move_range(cell_range, rows=rows, cols=columns)
    return (OK, OK)


@native
def add_merge_cells(ident, name, cell_range):
    sheet(ident, name).merge_cells(cell_range)
    return (OK, OK)


@native
def remove_merge_cells(ident, name, cell_range):
    ws = sheet(ident, name)
    if cell_range not in {str(r) for r in ws.merged_cells.ranges}:
        raise not_found("Merged range", cell_range)
    ws.unmerge_cells(cell_range)
    return (OK, OK)


@native
def get_merge_cells(ident, name):
    return (OK, sorted(str(r) for r in sheet(ident, name).merged_cells.ranges))


@native
def insert_new_row(ident, name, row, amount):
    sheet(ident, name).insert_rows(row, amount)
    return OK


@native
def insert_new_column(ident, name, column, amount):
    sheet(ident, name).insert_cols(column_index(column), amount)
    return OK


@native
def insert_new_column_by_index(ident, name, index, amount):
    sheet(ident, name).insert_cols(index, amount)
    return OK


@native
def remove_row(ident, name, row, amount):
    sheet(ident, name).delete_rows(row, amount)
    return OK


@native
def remove_column(ident, name, column, amount):
    sheet(ident, name).delete_cols(column_index(column), amount)
    return OK


@native
def remove_column_by_index(ident, name, index, amount):
    sheet(ident, name).delete_cols(index, amount)
    return OK


@native
def get_sheet_dimensions(ident, name):
    ws = sheet(ident, name)
    if not ws._cells:
        return (OK, {"ref": "A1", "min_row": 1, "max_row": 1, "min_column": 1, "max_column": 1})
    ref = ws.calculate_dimension()
    min_col, min_row, max_col, max_row = range_boundaries(ref)
    return (OK, {
        "ref": ref,
        "min_row": min_row,
        "max_row": max_row,
        "min_column": min_col,
        "max_column": max_col,
    })
