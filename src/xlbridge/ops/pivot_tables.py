"""Pivot tables.

Fields are zero-based column offsets into the source range.  Data fields are
``(offset, function, caption)`` triples, ``function`` being one of
``AGGREGATES``.  An empty caption is rendered as ``"<function> of <header>"``.
"""

from __future__ import annotations

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle
from xlbridge.engine.boundary import call
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_cell, check_choice, check_int_range, check_name, check_range, check_sheet_name, check_text

AGGREGATES = ("sum", "count", "average", "max", "min")
MAX_FIELD = 16383


def _offsets(values: list[int], name: str) -> list[int]:
    if not isinstance(values, (list, tuple)):
        raise ArgumentError(f"{name} must be a list of column offsets")
    return [check_int_range(v, 0, MAX_FIELD, name) for v in values]


def _data_fields(values: list[tuple[int, str, str]]) -> list[tuple[int, str, str]]:
    if not isinstance(values, (list, tuple)) or not values:
        raise ArgumentError("data_fields must be a non-empty list of (offset, function, caption)")
    triples = []
    for entry in values:
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise ArgumentError(f"data field must be (offset, function, caption), got {entry!r}")
        offset, function, caption = entry
        triples.append((
            check_int_range(offset, 0, MAX_FIELD, "data_fields"),
            check_choice(function, AGGREGATES, "function"),
            check_text(caption, "caption"),
        ))
    return triples


def _named(sheet: str, name: str) -> None:
    check_sheet_name(sheet)
    check_name(name)


@command("failed to add pivot table")
def add_pivot_table(
    book: Handle,
    sheet: str,
    name: str,
    source_sheet: str,
    source_range: str,
    target_cell: str,
    row_fields: list[int],
    column_fields: list[int],
    data_fields: list[tuple[int, str, str]],
):
    _named(sheet, name)
    check_sheet_name(source_sheet, "source_sheet")
    check_range(source_range, "source_range")
    check_cell(target_cell, "target_cell")
    return call(
        "add_pivot_table", book, sheet, name, source_sheet, source_range, target_cell,
        _offsets(row_fields, "row_fields"),
        _offsets(column_fields, "column_fields"),
        _data_fields(data_fields),
    )


@query("failed to check pivot tables")
def has_pivot_tables(book: Handle, sheet: str):
    return call("has_pivot_tables", book, check_sheet_name(sheet))


@query("failed to count pivot tables")
def count_pivot_tables(book: Handle, sheet: str):
    return call("count_pivot_tables", book, check_sheet_name(sheet))


@command("failed to refresh pivot tables")
def refresh_all_pivot_tables(book: Handle):
    """Recompute every pivot created in this session and write its summary."""
    return call("refresh_all_pivot_tables", book)


@command("failed to remove pivot table")
def remove_pivot_table(book: Handle, sheet: str, name: str):
    _named(sheet, name)
    return call("remove_pivot_table", book, sheet, name)


@query("failed to list pivot tables")
def get_pivot_table_names(book: Handle, sheet: str):
    return call("get_pivot_table_names", book, check_sheet_name(sheet))


@query("failed to read pivot table")
def get_pivot_table_info(book: Handle, sheet: str, name: str):
    """``(name, target_cell, source_range, cache_id)``, all strings."""
    _named(sheet, name)
    return call("get_pivot_table_info", book, sheet, name)


@query("failed to read pivot table source")
def get_pivot_table_source_range(book: Handle, sheet: str, name: str):
    _named(sheet, name)
    return call("get_pivot_table_source_range", book, sheet, name)


@query("failed to read pivot table target")
def get_pivot_table_target_cell(book: Handle, sheet: str, name: str):
    _named(sheet, name)
    return call("get_pivot_table_target_cell", book, sheet, name)


@query("failed to read pivot table fields")
def get_pivot_table_fields(book: Handle, sheet: str, name: str):
    """``(row_fields, column_fields, data_fields)``."""
    _named(sheet, name)
    return call("get_pivot_table_fields", book, sheet, name)
