"""Native manual page breaks."""

from __future__ import annotations

from openpyxl.worksheet.pagebreak import Break

from xlbridge.adapters.helpers import not_found, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

# column breaks span every row; row breaks span every column
MAX_ROW_INDEX = 1048575
MAX_COLUMN_INDEX = 16383


def _breaks(ws, axis):
    return ws.row_breaks if axis == "row" else ws.col_breaks


def _add(ws, axis, index, manual=True):
    holder = _breaks(ws, axis)
    existing = [b for b in holder.brk if b.id != index]
    top = MAX_COLUMN_INDEX if axis == "row" else MAX_ROW_INDEX
    existing.append(Break(id=index, min=0, max=top, man=manual))
    holder.brk = sorted(existing, key=lambda b: b.id)


def _remove(ws, axis, index):
    holder = _breaks(ws, axis)
    remaining = [b for b in holder.brk if b.id != index]
    if len(remaining) == len(holder.brk):
        raise not_found(f"{axis.capitalize()} page break", index)
    holder.brk = remaining


def _listing(ws, axis):
    return [(int(b.id), bool(b.man)) for b in _breaks(ws, axis).brk]


@native
def add_row_page_break(ident, sheet_name, row, manual=True):
    _add(sheet(ident, sheet_name), "row", row, manual)
    return (OK, OK)


@native
def add_column_page_break(ident, sheet_name, column, manual=True):
    _add(sheet(ident, sheet_name), "column", column, manual)
    return (OK, OK)


@native
def remove_row_page_break(ident, sheet_name, row):
    _remove(sheet(ident, sheet_name), "row", row)
    return OK


@native
def remove_column_page_break(ident, sheet_name, column):
    _remove(sheet(ident, sheet_name), "column", column)
    return OK


@native
def get_row_page_breaks(ident, sheet_name):
    return (OK, _listing(sheet(ident, sheet_name), "row"))


@native
def get_column_page_breaks(ident, sheet_name):
    return (OK, _listing(sheet(ident, sheet_name), "column"))


@native
def clear_row_page_breaks(ident, sheet_name):
    sheet(ident, sheet_name).row_breaks.brk = []
    return OK


@native
def clear_column_page_breaks(ident, sheet_name):
    sheet(ident, sheet_name).col_breaks.brk = []
    return OK


@native
def has_row_page_break(ident, sheet_name, row):
    return (OK, any(b.id == row for b in sheet(ident, sheet_name).row_breaks.brk))


@native
def has_column_page_break(ident, sheet_name, column):
    return (OK, any(b.id == column for b in sheet(ident, sheet_name).col_breaks.brk))


@native
def count_row_page_breaks(ident, sheet_name):
    return (OK, len(sheet(ident, sheet_name).row_breaks.brk))


@native
def count_column_page_breaks(ident, sheet_name):
    return (OK, len(sheet(ident, sheet_name).col_breaks.brk))


@native
def add_row_page_breaks(ident, sheet_name, rows):
    ws = sheet(ident, sheet_name)
    for row in rows:
        _add(ws, "row", row)
    return (OK, OK)


@native
def add_column_page_breaks(ident, sheet_name, columns):
    ws = sheet(ident, sheet_name)
    for column in columns:
        _add(ws, "column", column)
    return (OK, OK)


@native
def remove_row_page_breaks(ident, sheet_name, rows):
    ws = sheet(ident, sheet_name)
    wanted = set(rows)
    ws.row_breaks.brk = [b for b in ws.row_breaks.brk if b.id not in wanted]
    return OK


@native
def remove_column_page_breaks(ident, sheet_name, columns):
    ws = sheet(ident, sheet_name)
    wanted = set(columns)
    ws.col_breaks.brk = [b for b in ws.col_breaks.brk if b.id not in wanted]
    return OK


@native
def clear_all_page_breaks(ident, sheet_name):
    ws = sheet(ident, sheet_name)
    ws.row_breaks.brk = []
    ws.col_breaks.brk = []
    return (OK, OK)


@native
def get_all_page_breaks(ident, sheet_name):
    ws = sheet(ident, sheet_name)
    return (OK, {"rows": _listing(ws, "row"), "columns": _listing(ws, "column")})
