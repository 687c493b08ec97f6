"""Worksheet auto filter."""

from __future__ import annotations

from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_range, check_sheet_name


@command("failed to set auto filter")
def set_auto_filter(book: Handle, sheet: str, range: str):
    check_sheet_name(sheet)
    return call("set_auto_filter", book, sheet, check_range(range))


@command("failed to remove auto filter")
def remove_auto_filter(book: Handle, sheet: str):
    return call("remove_auto_filter", book, check_sheet_name(sheet))


@query("failed to check auto filter")
def has_auto_filter(book: Handle, sheet: str):
    return call("has_auto_filter", book, check_sheet_name(sheet))


@query("failed to read auto filter range")
def get_auto_filter_range(book: Handle, sheet: str):
    """The filtered range, or ``None`` when the sheet has no auto filter."""
    return call("get_auto_filter_range", book, check_sheet_name(sheet))
