"""Native cell values, number formats and alignment."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta
from typing import Any

from openpyxl.cell.rich_text import CellRichText

from xlbridge.adapters.helpers import cell, coordinate, existing_cell, restyle, sheet, styled_cell
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

DECIMALS_RE = re.compile(r"0\.(0+)")
DATE_TOKEN_RE = re.compile(r"yyyy|yy|mmmm|mmm|mm|m|dddd|ddd|dd|d|hh|h|ss|s", re.IGNORECASE)
LOCALE_RE = re.compile(r"\[[^\]]*\]")


def _plain(value: Any) -> Any:
    if isinstance(value, CellRichText):
        return str(value)
    return value


def _date_part(value: date | datetime | time, token: str) -> str:
    year = getattr(value, "year", 1900)
    month = getattr(value, "month", 1)
    day = getattr(value, "day", 1)
    if token == "yyyy":
        return f"{year:04d}"
    if token == "yy":
        return f"{year % 100:02d}"
    if token == "mmmm":
        return calendar.month_name[month]
    if token == "mmm":
        return calendar.month_abbr[month]
    if token in ("mm", "m"):
        return f"{month:0{len(token)}d}"
    if token in ("dddd", "ddd"):
        weekday = date(year, month, day).weekday()
        return (calendar.day_name if token == "dddd" else calendar.day_abbr)[weekday]
    if token in ("dd", "d"):
        return f"{day:0{len(token)}d}"
    # minutes are spelled "n" once disambiguated from months
    unit = {"h": "hour", "n": "minute", "s": "second"}[token[0]]
    return f"{getattr(value, unit, 0):0{len(token)}d}"


def _format_date(value: date | datetime | time, code: str) -> str:
    fmt = LOCALE_RE.sub("", code.split(";")[0]).replace("\\", "").replace('"', "")
    parts: list[str] = []
    pos = 0
    last = ""
    for m in DATE_TOKEN_RE.finditer(fmt):
        parts.append(fmt[pos:m.start()])
        token = m.group(0).lower()
        if token in ("mm", "m") and last == "h":
            token = "n" * len(token)
        parts.append(_date_part(value, token))
        last = token[0]
        pos = m.end()
    parts.append(fmt[pos:])
    return "".join(parts)


def format_value(value: Any, code: str) -> str:
    """Render a value with the common built-in number format codes."""
    value = _plain(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (datetime, date, time)):
        if code in ("General", ""):
            return value.isoformat()
        return _format_date(value, code)
    if isinstance(value, timedelta):
        return str(value)
    if not isinstance(value, (int, float)):
        return str(value)
    section = code.split(";")[0]
    if section in ("General", ""):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if section == "@":
        return str(value)
    m = DECIMALS_RE.search(section)
    places = len(m.group(1)) if m else 0
    if "%" in section:
        return f"{value * 100:.{places}f}%"
    if "E+" in section.upper():
        return f"{value:.{places}E}"
    grouped = "," in section
    text = f"{value:,.{places}f}" if grouped else f"{value:.{places}f}"
    prefix = "$" if "$" in section else ""
    if prefix and text.startswith("-"):
        return "-" + prefix + text[1:]
    return prefix + text


@native
def get_cell_value(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    if c is None or c.value is None:
        return (OK, "")
    return (OK, _plain(c.value))


@native
def get_formatted_value(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    if c is None:
        return (OK, "")
    return (OK, format_value(c.value, c.number_format))


@native
def set_cell_value(ident, sheet_name, address, value):
    cell(ident, sheet_name, address).value = value
    return (OK, OK)


@native
def remove_cell(ident, sheet_name, address):
    ws = sheet(ident, sheet_name)
    ws._cells.pop(coordinate(address), None)
    return OK


@native
def set_number_format(ident, sheet_name, address, format_code):
    cell(ident, sheet_name, address).number_format = format_code
    return (OK, OK)


@native
def set_wrap_text(ident, sheet_name, address, wrap):
    restyle(cell(ident, sheet_name, address), "alignment", wrap_text=wrap)
    return (OK, OK)


@native
def set_cell_alignment(ident, sheet_name, address, horizontal, vertical):
    restyle(cell(ident, sheet_name, address), "alignment", horizontal=horizontal, vertical=vertical)
    return OK


@native
def set_cell_rotation(ident, sheet_name, address, rotation):
    restyle(cell(ident, sheet_name, address), "alignment", textRotation=rotation)
    return OK


@native
def set_cell_indent(ident, sheet_name, address, indent):
    restyle(cell(ident, sheet_name, address), "alignment", indent=indent)
    return OK


@native
def get_cell_horizontal_alignment(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, (c.alignment.horizontal or "") if c else "")


@native
def get_cell_vertical_alignment(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, (c.alignment.vertical or "") if c else "")


@native
def get_cell_wrap_text(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, bool(c and c.alignment.wrap_text))


@native
def get_cell_text_rotation(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, int(c.alignment.textRotation or 0) if c else 0)


@native
def get_cell_indent(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, int(c.alignment.indent or 0) if c else 0)


@native
def get_cell_number_format_id(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, int(c._style.numFmtId) if c else 0)


@native
def get_cell_format_code(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return (OK, c.number_format if c else "")
