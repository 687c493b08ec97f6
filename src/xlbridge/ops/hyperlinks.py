"""Hyperlinks on cells, external URLs or internal sheet locations."""

from __future__ import annotations

from typing import Any

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_bool, check_cell, check_name, check_sheet_name, check_text


def _at(sheet: str, cell: str) -> str:
    check_sheet_name(sheet)
    return check_cell(cell)


def _link(url: str, tooltip: str | None, is_internal: bool) -> None:
    check_name(url, "url")
    if tooltip is not None:
        check_text(tooltip, "tooltip")
    check_bool(is_internal, "is_internal")


@command("failed to add hyperlink")
def add_hyperlink(
    book: Handle,
    sheet: str,
    cell: str,
    url: str,
    tooltip: str | None = None,
    is_internal: bool = False,
):
    """Link ``cell`` to ``url``; internal links take a location like ``"Sheet2!A1"``."""
    address = _at(sheet, cell)
    _link(url, tooltip, is_internal)
    return call("add_hyperlink", book, sheet, address, url, tooltip, is_internal)


@query("failed to read hyperlink")
def get_hyperlink(book: Handle, sheet: str, cell: str):
    return call("get_hyperlink", book, sheet, _at(sheet, cell))


@command("failed to remove hyperlink")
def remove_hyperlink(book: Handle, sheet: str, cell: str):
    return call("remove_hyperlink", book, sheet, _at(sheet, cell))


@query("failed to check hyperlink")
def has_hyperlink(book: Handle, sheet: str, cell: str):
    return call("has_hyperlink", book, sheet, _at(sheet, cell))


@query("failed to check hyperlinks")
def has_hyperlinks(book: Handle, sheet: str):
    return call("has_hyperlinks", book, check_sheet_name(sheet))


@query("failed to list hyperlinks")
def get_all_hyperlinks(book: Handle, sheet: str):
    return call("get_all_hyperlinks", book, check_sheet_name(sheet))


@command("failed to update hyperlink")
def update_hyperlink(
    book: Handle,
    sheet: str,
    cell: str,
    url: str,
    tooltip: str | None = None,
    is_internal: bool = False,
):
    address = _at(sheet, cell)
    _link(url, tooltip, is_internal)
    return call("update_hyperlink", book, sheet, address, url, tooltip, is_internal)


@command("failed to add hyperlinks")
def add_bulk_hyperlinks(book: Handle, sheet: str, hyperlinks: list[dict[str, Any]]):
    """Add many links at once; each entry has ``cell``, ``url`` and optional ``tooltip``/``is_internal``."""
    check_sheet_name(sheet)
    if not isinstance(hyperlinks, (list, tuple)):
        raise ArgumentError("hyperlinks must be a list of mappings")
    entries = []
    for entry in hyperlinks:
        if not isinstance(entry, dict) or "cell" not in entry or "url" not in entry:
            raise ArgumentError(f"each hyperlink needs 'cell' and 'url', got {entry!r}")
        tooltip = entry.get("tooltip")
        is_internal = entry.get("is_internal", False)
        _link(entry["url"], tooltip, is_internal)
        entries.append({
            "cell": check_cell(entry["cell"]),
            "url": entry["url"],
            "tooltip": tooltip,
            "is_internal": is_internal,
        })
    return call("add_bulk_hyperlinks", book, sheet, entries)


@command("failed to remove hyperlinks")
def remove_all_hyperlinks(book: Handle, sheet: str):
    return call("remove_all_hyperlinks", book, check_sheet_name(sheet))


@query("failed to count hyperlinks")
def count_hyperlinks(book: Handle, sheet: str):
    return call("count_hyperlinks", book, check_sheet_name(sheet))
