"""Native cell hyperlinks, external and internal."""

from __future__ import annotations

from openpyxl.worksheet.hyperlink import Hyperlink

from xlbridge.adapters.helpers import cell, existing_cell, not_found, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _link(url, tooltip, is_internal) -> Hyperlink:
    if is_internal:
        return Hyperlink(ref="", location=url.lstrip("#"), tooltip=tooltip)
    return Hyperlink(ref="", target=url, tooltip=tooltip)


def _info(c) -> dict:
    link = c.hyperlink
    internal = bool(link.location) and not link.target
    return {
        "cell": c.coordinate,
        "url": link.location if internal else (link.target or ""),
        "tooltip": link.tooltip or "",
        "is_internal": internal,
    }


def _linked_cells(ws):
    linked = [c for c in ws._cells.values() if c.hyperlink is not None]
    return sorted(linked, key=lambda c: (c.row, c.column))


def _linked(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    if c is None or c.hyperlink is None:
        raise not_found("Hyperlink", f"{sheet_name}!{address}")
    return c


@native
def add_hyperlink(ident, sheet_name, address, url, tooltip=None, is_internal=False):
    cell(ident, sheet_name, address).hyperlink = _link(url, tooltip, is_internal)
    return (OK, OK)


@native
def get_hyperlink(ident, sheet_name, address):
    return (OK, _info(_linked(ident, sheet_name, address)))


@native
def remove_hyperlink(ident, sheet_name, address):
    _linked(ident, sheet_name, address).hyperlink = None
    return OK


@native
def has_hyperlink(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    return (OK, c is not None and c.hyperlink is not None)


@native
def has_hyperlinks(ident, sheet_name):
    return (OK, bool(_linked_cells(sheet(ident, sheet_name))))


@native
def get_all_hyperlinks(ident, sheet_name):
    return (OK, [_info(c) for c in _linked_cells(sheet(ident, sheet_name))])


@native
def update_hyperlink(ident, sheet_name, address, url, tooltip=None, is_internal=False):
    _linked(ident, sheet_name, address).hyperlink = _link(url, tooltip, is_internal)
    return (OK, OK)


@native
def add_bulk_hyperlinks(ident, sheet_name, hyperlinks):
    ws = sheet(ident, sheet_name)
    for entry in hyperlinks:
        ws[entry["cell"]].hyperlink = _link(entry["url"], entry.get("tooltip"), entry.get("is_internal", False))
    return (OK, OK)


@native
def remove_all_hyperlinks(ident, sheet_name):
    for c in _linked_cells(sheet(ident, sheet_name)):
        c.hyperlink = None
    return OK


@native
def count_hyperlinks(ident, sheet_name):
    return (OK, len(_linked_cells(sheet(ident, sheet_name))))
