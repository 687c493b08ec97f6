"""Native worksheet auto filter."""

from __future__ import annotations

from xlbridge.adapters.helpers import not_found, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


@native
def set_auto_filter(ident, sheet_name, cell_range):
    sheet(ident, sheet_name).auto_filter.ref = cell_range
    return (OK, OK)


@native
def remove_auto_filter(ident, sheet_name):
    ws = sheet(ident, sheet_name)
    if not ws.auto_filter.ref:
        raise not_found("Auto filter", sheet_name)
    ws.auto_filter.ref = None
    ws.auto_filter.filterColumn = []
    ws.auto_filter.sortState = None
    return OK


@native
def has_auto_filter(ident, sheet_name):
    return (OK, bool(sheet(ident, sheet_name).auto_filter.ref))


@native
def get_auto_filter_range(ident, sheet_name):
    ref = sheet(ident, sheet_name).auto_filter.ref
    return (OK, ref or None)
