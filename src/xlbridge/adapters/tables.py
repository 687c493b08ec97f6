"""Native worksheet tables (list objects)."""

from __future__ import annotations

from openpyxl.utils import get_column_letter, range_boundaries
from openpyxl.worksheet.table import Table, TableColumn, TableStyleInfo

from xlbridge.adapters.helpers import book, coordinate, not_found
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.contracts.results import ERROR, OK


def _find(ws, name) -> Table:
    table = ws.tables.get(name)
    if table is None:
        table = next((t for t in ws.tables.values() if t.displayName == name), None)
    if table is None:
        raise not_found("Table", name)
    return table


def _lookup(ident, sheet_name, name):
    ws = book(ident).sheet(sheet_name)
    return ws, _find(ws, name)


def _info(table: Table) -> dict:
    return {
        "name": table.name,
        "display_name": table.displayName,
        "ref": table.ref,
        "columns": [tc.name for tc in table.tableColumns],
        "has_totals_row": bool(table.totalsRowCount),
        "style": table.tableStyleInfo.name if table.tableStyleInfo is not None else None,
    }


def _column_info(tc: TableColumn) -> dict:
    return {
        "name": tc.name,
        "totals_row_function": tc.totalsRowFunction,
        "totals_row_label": tc.totalsRowLabel,
    }


def _ensure_columns(ws, table: Table) -> None:
    """Populate tableColumns from the header row when openpyxl left them empty."""
    if table.tableColumns:
        return
    min_col, min_row, max_col, _ = range_boundaries(table.ref)
    for idx, col in enumerate(range(min_col, max_col + 1), start=1):
        header = ws.cell(row=min_row, column=col).value
        table.tableColumns.append(TableColumn(id=idx, name=str(header) if header is not None else f"Column{idx}"))


@native
def add_table(ident, sheet_name, table_name, display_name, start_cell, end_cell, columns, has_totals_row=False):
    doc = book(ident)
    ws = doc.sheet(sheet_name)
    top, left = coordinate(start_cell)
    bottom, right = coordinate(end_cell)
    if right - left + 1 != len(columns):
        raise NativeFault(f"table spans {right - left + 1} columns but {len(columns)} names were given")
    ref = f"{get_column_letter(left)}{top}:{get_column_letter(right)}{bottom}"
    taken = sum(len(s.tables) for s in doc.wb.worksheets)
    table = Table(id=taken + 1, displayName=display_name, name=table_name, ref=ref)
    for offset, column in enumerate(columns):
        ws.cell(row=top, column=left + offset, value=column)
        table.tableColumns.append(TableColumn(id=offset + 1, name=column))
    if has_totals_row:
        table.totalsRowCount = 1
    ws.add_table(table)
    return (OK, OK)


@native
def get_tables(ident, sheet_name):
    ws = book(ident).sheet(sheet_name)
    for table in ws.tables.values():
        _ensure_columns(ws, table)
    return (OK, [_info(t) for t in ws.tables.values()])


@native
def get_table(ident, sheet_name, name):
    ws, table = _lookup(ident, sheet_name, name)
    _ensure_columns(ws, table)
    return (OK, _info(table))


@native
def remove_table(ident, sheet_name, name):
    ws, table = _lookup(ident, sheet_name, name)
    del ws.tables[table.name]
    return OK


@native
def has_tables(ident, sheet_name):
    return (OK, bool(book(ident).sheet(sheet_name).tables))


@native
def count_tables(ident, sheet_name):
    return (OK, len(book(ident).sheet(sheet_name).tables))


@native
def set_table_style(ident, sheet_name, name, style_name, show_first_col, show_last_col, show_row_stripes, show_col_stripes):
    _, table = _lookup(ident, sheet_name, name)
    table.tableStyleInfo = TableStyleInfo(
        name=style_name,
        showFirstColumn=show_first_col,
        showLastColumn=show_last_col,
        showRowStripes=show_row_stripes,
        showColumnStripes=show_col_stripes,
    )
    return (OK, OK)


@native
def get_table_style(ident, sheet_name, name):
    _, table = _lookup(ident, sheet_name, name)
    info = table.tableStyleInfo
    if info is None:
        return (OK, None)
    return (OK, {
        "name": info.name,
        "show_first_col": bool(info.showFirstColumn),
        "show_last_col": bool(info.showLastColumn),
        "show_row_stripes": bool(info.showRowStripes),
        "show_col_stripes": bool(info.showColumnStripes),
    })


@native
def remove_table_style(ident, sheet_name, name):
    _, table = _lookup(ident, sheet_name, name)
    table.tableStyleInfo = None
    return OK


@native
def add_table_column(ident, sheet_name, name, column_name, totals_row_function=None, totals_row_label=None):
    ws, table = _lookup(ident, sheet_name, name)
    _ensure_columns(ws, table)
    if any(tc.name == column_name for tc in table.tableColumns):
        raise NativeFault((ERROR, f"Column already exists in table {name}: {column_name}"))
    min_col, min_row, max_col, max_row = range_boundaries(table.ref)
    new_col = max_col + 1
    ws.cell(row=min_row, column=new_col, value=column_name)
    table.ref = f"{get_column_letter(min_col)}{min_row}:{get_column_letter(new_col)}{max_row}"
    table.tableColumns.append(TableColumn(
        id=len(table.tableColumns) + 1,
        name=column_name,
        totalsRowFunction=totals_row_function,
        totalsRowLabel=totals_row_label,
    ))
    if table.autoFilter is not None:
        table.autoFilter.ref = table.ref
    return (OK, OK)


@native
def get_table_columns(ident, sheet_name, name):
    ws, table = _lookup(ident, sheet_name, name)
    _ensure_columns(ws, table)
    return (OK, [_column_info(tc) for tc in table.tableColumns])


@native
def modify_table_column(ident, sheet_name, name, old_name, new_name=None, totals_row_function=None, totals_row_label=None):
    ws, table = _lookup(ident, sheet_name, name)
    _ensure_columns(ws, table)
    column = next((tc for tc in table.tableColumns if tc.name == old_name), None)
    if column is None:
        raise not_found("Table column", old_name)
    if new_name is not None:
        min_col, min_row, _, _ = range_boundaries(table.ref)
        position = list(table.tableColumns).index(column)
        ws.cell(row=min_row, column=min_col + position, value=new_name)
        column.name = new_name
    if totals_row_function is not None:
        column.totalsRowFunction = totals_row_function
    if totals_row_label is not None:
        column.totalsRowLabel = totals_row_label
    return (OK, OK)


@native
def set_table_totals_row(ident, sheet_name, name, show):
    _, table = _lookup(ident, sheet_name, name)
    table.totalsRowCount = 1 if show else None
    table.totalsRowShown = bool(show)
    return OK


@native
def get_table_totals_row(ident, sheet_name, name):
    _, table = _lookup(ident, sheet_name, name)
    return (OK, bool(table.totalsRowCount))
