"""Argument preconditions checked before any boundary call.

Every check raises :class:`ArgumentError`; the operation decorator turns it
into ``Err(VALIDATION, detail)`` so bad input never reaches the engine.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable

from xlbridge.contracts.common import ArgumentError

CELL_RE = re.compile(r"^\$?([A-Za-z]{1,3})\$?([1-9][0-9]{0,6})$")
COLUMN_RE = re.compile(r"^[A-Za-z]{1,3}$")
HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")

MAX_ROW = 1_048_576
MAX_COLUMN = 16_384

NAMED_COLORS = {
    "black": "000000",
    "white": "FFFFFF",
    "red": "FF0000",
    "green": "00FF00",
    "blue": "0000FF",
    "yellow": "FFFF00",
    "cyan": "00FFFF",
    "magenta": "FF00FF",
    "gray": "808080",
    "grey": "808080",
    "orange": "FFA500",
    "purple": "800080",
}

INVALID_SHEET_CHARS = set("[]:*?/\\")


def _column_number(letters: str) -> int:
    n = 0
    for ch in letters.upper():
        n = n * 26 + (ord(ch) - 64)
    return n


def check_cell(ref: Any, name: str = "cell") -> str:
    """Validate an ``A1`` address and return it upper-cased without anchors."""
    if not isinstance(ref, str):
        raise ArgumentError(f"{name} must be a string like 'A1', got {type(ref).__name__}")
    m = CELL_RE.match(ref.strip())
    if not m or _column_number(m.group(1)) > MAX_COLUMN or int(m.group(2)) > MAX_ROW:
        raise ArgumentError(f"Invalid {name} reference: {ref!r}")
    return f"{m.group(1).upper()}{m.group(2)}"


def check_range(ref: Any, name: str = "range") -> str:
    """Validate an ``A1:B5`` range (a single cell is accepted too)."""
    if not isinstance(ref, str) or not ref.strip():
        raise ArgumentError(f"{name} must be a non-empty string like 'A1:B5'")
    parts = ref.strip().split(":")
    if len(parts) > 2:
        raise ArgumentError(f"Invalid {name}: {ref!r}")
    try:
        cells = [check_cell(p, name) for p in parts]
    except ArgumentError:
        raise ArgumentError(f"Invalid {name}: {ref!r}") from None
    return ":".join(cells)


def check_ranges(ref: Any, name: str = "range") -> str:
    """Validate a space separated list of ranges (an sqref)."""
    if not isinstance(ref, str) or not ref.strip():
        raise ArgumentError(f"{name} must be a non-empty string")
    return " ".join(check_range(part, name) for part in ref.split())


def check_column(column: Any, name: str = "column") -> str:
    if not isinstance(column, str) or not COLUMN_RE.match(column):
        raise ArgumentError(f"Invalid {name}: {column!r}")
    if _column_number(column) > MAX_COLUMN:
        raise ArgumentError(f"{name} out of range: {column!r}")
    return column.upper()


def check_sheet_name(sheet: Any, name: str = "sheet") -> str:
    if not isinstance(sheet, str) or not sheet:
        raise ArgumentError(f"{name} must be a non-empty string")
    return sheet


def check_new_sheet_name(sheet: Any, name: str = "name") -> str:
    """Names for sheets being created: 1-31 chars, none of ``[]:*?/\\``."""
    check_sheet_name(sheet, name)
    if len(sheet) > 31:
        raise ArgumentError(f"{name} exceeds 31 characters: {sheet!r}")
    if INVALID_SHEET_CHARS & set(sheet):
        raise ArgumentError(f"{name} contains an invalid character: {sheet!r}")
    return sheet


def check_name(value: Any, name: str = "name") -> str:
    if not isinstance(value, str) or not value.strip():
        raise ArgumentError(f"{name} must be a non-empty string")
    return value


def check_text(value: Any, name: str = "text") -> str:
    if not isinstance(value, str):
        raise ArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def check_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ArgumentError(f"{name} must be a boolean, got {type(value).__name__}")
    return value


def check_int_range(value: Any, low: int, high: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise ArgumentError(f"{name} must be between {low} and {high}, got {value}")
    return value


def check_number(value: Any, name: str, *, low: float | None = None, high: float | None = None) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ArgumentError(f"{name} must be a number, got {type(value).__name__}")
    if low is not None and value < low:
        raise ArgumentError(f"{name} must be >= {low}, got {value}")
    if high is not None and value > high:
        raise ArgumentError(f"{name} must be <= {high}, got {value}")
    return float(value)


def check_positive(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ArgumentError(f"{name} must be a positive integer, got {value!r}")
    return value


def check_row(value: Any, name: str = "row") -> int:
    return check_int_range(value, 1, MAX_ROW, name)


def check_column_index(value: Any, name: str = "column") -> int:
    return check_int_range(value, 1, MAX_COLUMN, name)


def check_choice(value: Any, choices: Iterable[str], name: str) -> str:
    allowed = tuple(choices)
    if value not in allowed:
        raise ArgumentError(f"{name} must be one of {', '.join(allowed)}; got {value!r}")
    return value


def check_path(value: Any, name: str = "path") -> str:
    if isinstance(value, Path):
        return str(value)
    if not isinstance(value, str) or not value:
        raise ArgumentError(f"{name} must be a non-empty path")
    return value


def normalize_color(value: Any, name: str = "color") -> str:
    """Accept ``#RRGGBB``, ``RRGGBB``, ``AARRGGBB`` or a named colour.

    Returns the ARGB form the engine stores, e.g. ``"FFFF0000"``.
    """
    if not isinstance(value, str) or not value:
        raise ArgumentError(f"{name} must be a colour string")
    text = value.strip()
    if text.lower() in NAMED_COLORS:
        return "FF" + NAMED_COLORS[text.lower()]
    if text.startswith("#"):
        text = text[1:]
    if not HEX_RE.match(text) or len(text) not in (6, 8):
        raise ArgumentError(f"Invalid {name}: {value!r}")
    if len(text) == 6:
        text = "FF" + text
    return text.upper()
