"""Native row and column dimensions."""

from __future__ import annotations

from copy import copy

from openpyxl.styles import PatternFill
from openpyxl.styles.colors import Color
from openpyxl.worksheet.dimensions import ColumnDimension

from xlbridge.adapters.helpers import column_index, column_letter, sheet
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK


def _column(ws, column):
    """Column dimension for writing; new entries carry no width of their own."""
    letter = column_letter(column)
    if letter not in ws.column_dimensions:
        ws.column_dimensions[letter] = ColumnDimension(ws, index=letter, width=0)
    return ws.column_dimensions[letter]


@native
def set_row_height(ident, name, row, height):
    sheet(ident, name).row_dimensions[row].height = height
    return (OK, OK)


@native
def get_row_height(ident, name, row):
    dim = sheet(ident, name).row_dimensions.get(row)
    return (OK, float(dim.height) if dim is not None and dim.height else 0.0)


@native
def set_row_hidden(ident, name, row, hidden):
    sheet(ident, name).row_dimensions[row].hidden = hidden
    return OK


@native
def get_row_hidden(ident, name, row):
    dim = sheet(ident, name).row_dimensions.get(row)
    return (OK, bool(dim is not None and dim.hidden))


@native
def set_row_style(ident, name, row, bg_color, font_color):
    ws = sheet(ident, name)
    fill = PatternFill(fill_type="solid", fgColor=Color(rgb=bg_color), bgColor=Color(rgb=bg_color))
    last = max(ws.max_column, 1)
    for col in range(1, last + 1):
        c = ws.cell(row=row, column=col)
        c.fill = fill
        font = copy(c.font)
        font.color = Color(rgb=font_color)
        c.font = font
    return (OK, OK)


@native
def set_column_width(ident, name, column, width):
    sheet(ident, name).column_dimensions[column_letter(column)].width = width
    return (OK, OK)


@native
def get_column_width(ident, name, column):
    dim = sheet(ident, name).column_dimensions.get(column_letter(column))
    return (OK, float(dim.width) if dim is not None and dim.customWidth else 0.0)


@native
def set_column_auto_width(ident, name, column, auto):
    _column(sheet(ident, name), column).bestFit = auto
    return OK


@native
def get_column_auto_width(ident, name, column):
    dim = sheet(ident, name).column_dimensions.get(column_letter(column))
    return (OK, bool(dim is not None and dim.bestFit))


@native
def set_column_hidden(ident, name, column, hidden):
    _column(sheet(ident, name), column).hidden = hidden
    return OK


@native
def get_column_hidden(ident, name, column):
    dim = sheet(ident, name).column_dimensions.get(column_letter(column))
    return (OK, bool(dim is not None and dim.hidden))


def _copy_style(src, dst):
    if src.has_style:
        dst._style = copy(src._style)


@native
def copy_row_styling(ident, name, source_row, target_row, start_column=None, end_column=None):
    ws = sheet(ident, name)
    first = column_index(start_column) if start_column is not None else 1
    last = column_index(end_column) if end_column is not None else max(ws.max_column, 1)
    for col in range(first, last + 1):
        _copy_style(ws.cell(row=source_row, column=col), ws.cell(row=target_row, column=col))
    src_dim = ws.row_dimensions.get(source_row)
    if src_dim is not None and src_dim.height:
        ws.row_dimensions[target_row].height = src_dim.height
    return (OK, OK)


@native
def copy_column_styling(ident, name, source_column, target_column, start_row=None, end_row=None):
    ws = sheet(ident, name)
    src_idx = column_index(source_column)
    dst_idx = column_index(target_column)
    first = start_row if start_row is not None else 1
    last = end_row if end_row is not None else max(ws.max_row, 1)
    for row in range(first, last + 1):
        _copy_style(ws.cell(row=row, column=src_idx), ws.cell(row=row, column=dst_idx))
    src_dim = ws.column_dimensions.get(column_letter(source_column))
    if src_dim is not None and src_dim.customWidth:
        ws.column_dimensions[column_letter(target_column)].width = src_dim.width
    return (OK, OK)

