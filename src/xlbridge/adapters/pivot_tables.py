"""Native pivot tables.

Pivots created here are kept in the book's sidecar; refreshing one writes a
flat summary (grouping keys followed by one aggregate per data field) at its
target cell.  Pivots loaded from a file are listed but never recomputed.
"""

from __future__ import annotations

from collections import defaultdict
from statistics import mean

from openpyxl.utils import range_boundaries

from xlbridge.adapters.helpers import book, coordinate, not_found
from xlbridge.adapters.registry import NativeFault, native
from xlbridge.adapters.resources import PivotRecord
from xlbridge.contracts.results import ERROR, OK

AGGREGATES = {
    "sum": sum,
    "count": len,
    "average": mean,
    "max": max,
    "min": min,
}


def _find(doc, sheet_name, name) -> PivotRecord:
    ws = doc.sheet(sheet_name)
    for record in doc.pivots(ws):
        if record.name == name:
            return record
    raise not_found("Pivot table", name)


def _source_rows(doc, record: PivotRecord) -> list[list]:
    ws = doc.sheet(record.source_sheet)
    min_col, min_row, max_col, max_row = range_boundaries(record.source_range)
    # first row holds the headers
    return [
        [c.value for c in row]
        for row in ws.iter_rows(min_row=min_row + 1, max_row=max_row, min_col=min_col, max_col=max_col)
    ]


def _numeric(value):
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _summarise(doc, record: PivotRecord) -> list[list]:
    keys = record.row_fields + record.column_fields
    groups: dict[tuple, list[list]] = defaultdict(list)
    for row in _source_rows(doc, record):
        groups[tuple(row[k] for k in keys)].append(row)
    ws = doc.sheet(record.source_sheet)
    min_col, min_row, _, _ = range_boundaries(record.source_range)
    headers = [ws.cell(row=min_row, column=min_col + k).value for k in keys]
    headers += [caption or f"{fn} of {ws.cell(row=min_row, column=min_col + fld).value}"
                for fld, fn, caption in record.data_fields]
    table = [headers]
    for key in sorted(groups, key=lambda k: tuple(str(v) for v in k)):
        line = list(key)
        for fld, fn, _ in record.data_fields:
            values = [row[fld] for row in groups[key]]
            if fn == "count":
                line.append(len([v for v in values if v is not None]))
                continue
            numbers = [n for n in map(_numeric, values) if n is not None]
            line.append(AGGREGATES[fn](numbers) if numbers else 0)
        table.append(line)
    return table


def _render(doc, sheet_name, record: PivotRecord) -> None:
    ws = doc.sheet(sheet_name)
    top, left = coordinate(record.target_cell)
    for r, line in enumerate(_summarise(doc, record)):
        for c, value in enumerate(line):
            ws.cell(row=top + r, column=left + c, value=value)
    record.refreshed = True


@native
def add_pivot_table(ident, sheet_name, name, source_sheet, source_range, target_cell, row_fields, column_fields, data_fields):
    doc = book(ident)
    ws = doc.sheet(sheet_name)
    doc.sheet(source_sheet)
    records = doc.pivots(ws)
    if any(r.name == name for r in records):
        raise NativeFault((ERROR, f"Pivot table already exists: {name}"))
    min_col, _, max_col, _ = range_boundaries(source_range)
    width = max_col - min_col + 1
    triples = [(int(f), str(fn).lower(), str(caption)) for f, fn, caption in data_fields]
    for offset in [*row_fields, *column_fields, *(t[0] for t in triples)]:
        if not 0 <= offset < width:
            raise NativeFault(f"field index {offset} is outside the source range {source_range}")
    for _, fn, _ in triples:
        if fn not in AGGREGATES:
            raise NativeFault(f"unsupported pivot function: {fn}")
    cache_id = 1 + max(
        (r.cache_id for s in doc.wb.worksheets for r in doc.pivots(s)),
        default=0,
    )
    records.append(PivotRecord(
        name, source_sheet, source_range, target_cell,
        list(row_fields), list(column_fields), triples, cache_id=cache_id,
    ))
    return (OK, OK)


@native
def has_pivot_tables(ident, sheet_name):
    doc = book(ident)
    return (OK, bool(doc.pivots(doc.sheet(sheet_name))))


@native
def count_pivot_tables(ident, sheet_name):
    doc = book(ident)
    return (OK, len(doc.pivots(doc.sheet(sheet_name))))


@native
def refresh_all_pivot_tables(ident):
    doc = book(ident)
    for ws in doc.wb.worksheets:
        for record in doc.pivots(ws):
            if not record.from_file:
                _render(doc, ws.title, record)
    return (OK, OK)


@native
def remove_pivot_table(ident, sheet_name, name):
    doc = book(ident)
    ws = doc.sheet(sheet_name)
    record = _find(doc, sheet_name, name)
    doc.pivots(ws).remove(record)
    if record.from_file:
        ws._pivots = [p for p in ws._pivots if p.name != name]
    return (OK, OK)


@native
def get_pivot_table_names(ident, sheet_name):
    doc = book(ident)
    return (OK, [r.name for r in doc.pivots(doc.sheet(sheet_name))])


@native
def get_pivot_table_info(ident, sheet_name, name):
    return (OK, _find(book(ident), sheet_name, name).info())


@native
def get_pivot_table_source_range(ident, sheet_name, name):
    record = _find(book(ident), sheet_name, name)
    return (OK, (record.source_sheet, record.source_range))


@native
def get_pivot_table_target_cell(ident, sheet_name, name):
    return (OK, _find(book(ident), sheet_name, name).target_cell)


@native
def get_pivot_table_fields(ident, sheet_name, name):
    return (OK, _find(book(ident), sheet_name, name).fields())
