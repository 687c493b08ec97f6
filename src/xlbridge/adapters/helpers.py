"""Shared lookups for native entry points."""

from __future__ import annotations

from copy import copy
from typing import Any

from openpyxl.cell.cell import Cell
from openpyxl.styles.colors import Color
from openpyxl.utils import column_index_from_string, get_column_letter, range_boundaries
from openpyxl.worksheet.worksheet import Worksheet

from xlbridge.adapters.registry import NativeFault, resolve
from xlbridge.adapters.resources import Book
from xlbridge.contracts.handles import HandleKind
from xlbridge.contracts.results import ERROR


def book(ident: Any) -> Book:
    return resolve(ident, HandleKind.SPREADSHEET)


def sheet(ident: Any, name: str) -> Worksheet:
    return book(ident).sheet(name)


def cell(ident: Any, sheet_name: str, address: str) -> Cell:
    ws = sheet(ident, sheet_name)
    return ws[address.replace("$", "")]


def existing_cell(ws: Worksheet, address: str) -> Cell | None:
    """Return a cell only if it is already materialised (no implicit creation)."""
    row, col = coordinate(address)
    return ws._cells.get((row, col))


def styled_cell(ident: Any, sheet_name: str, address: str) -> Cell | None:
    """The cell at ``address`` if it carries explicit formatting, else None."""
    c = existing_cell(sheet(ident, sheet_name), address)
    if c is None or not c.has_style:
        return None
    return c


def coordinate(address: str) -> tuple[int, int]:
    min_col, min_row, _, _ = range_boundaries(address.replace("$", ""))
    return min_row, min_col


def column_index(column: str | int) -> int:
    if isinstance(column, int):
        return column
    return column_index_from_string(column.upper())


def column_letter(column: str | int) -> str:
    if isinstance(column, int):
        return get_column_letter(column)
    return column.upper()


def iter_range(ws: Worksheet, ref: str):
    """Yield every cell of an ``A1:B2`` range, row-major."""
    min_col, min_row, max_col, max_row = range_boundaries(ref.replace("$", ""))
    for row in ws.iter_rows(min_row=min_row, max_row=max_row, min_col=min_col, max_col=max_col):
        yield from row


def plain_ref(ref: str | None) -> str:
    """Strip sheet prefixes and ``$`` anchors: ``'Sheet 1'!$A$1:$B$2`` -> ``A1:B2``."""
    if not ref:
        return ""
    parts = []
    for part in ref.split(","):
        if "!" in part:
            part = part.rsplit("!", 1)[1]
        parts.append(part.replace("$", ""))
    return ",".join(parts)


def color_text(color: Color | None) -> str:
    """Render an openpyxl colour the way getters report it; "" when absent."""
    if color is None:
        return ""
    if color.type == "rgb" and isinstance(color.rgb, str):
        return color.rgb
    if color.type == "theme":
        return f"theme:{color.theme}"
    if color.type == "indexed":
        return f"indexed:{color.indexed}"
    return ""


def restyle(target: Any, attr: str, **changes: Any) -> None:
    """Replace an immutable style object on a cell with a modified copy."""
    updated = copy(getattr(target, attr))
    for key, value in changes.items():
        setattr(updated, key, value)
    setattr(target, attr, updated)


def fault(reason: str) -> NativeFault:
    return NativeFault(reason)


def not_found(what: str, name: Any) -> NativeFault:
    return NativeFault((ERROR, f"{what} not found: {name}"))
