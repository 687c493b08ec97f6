"""Documented defaults for optional properties the native side reports as unset.

Each enrolled getter names the payload the native side uses for "never set"
and the literal the host application renders in its place.  The lookup is a
static table; nothing here is computed per call.

Several sentinels are also legal explicit values (a ``False`` flag, a 0.0
height).  Those rows are marked ``ambiguous``: an explicit falsy value and an
absent one are indistinguishable and both read back as the default.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from xlbridge.contracts.responses import PropertyDefault
from xlbridge.contracts.results import Marker

BLACK = "FF000000"
WHITE = "FFFFFFFF"


def _entries() -> list[PropertyDefault]:
    rows: list[tuple[str, Any, Any, bool]] = [
        # rows and columns
        ("get_row_height", 0.0, 15.0, True),
        ("get_column_width", 0.0, 8.43, True),
        ("get_row_hidden", False, False, True),
        ("get_column_hidden", False, False, True),
        ("get_column_auto_width", False, False, True),
        # borders
        ("get_border_color", "", BLACK, False),
        ("get_border_style", "", "none", False),
        # fonts
        ("get_font_color", "", BLACK, False),
        ("get_font_name", "", "Calibri", False),
        ("get_font_size", 0.0, 11.0, True),
        ("get_font_bold", False, False, True),
        ("get_font_italic", False, False, True),
        ("get_font_strikethrough", False, False, True),
        ("get_font_underline", "", "none", False),
        ("get_font_family", "", "auto", False),
        ("get_font_scheme", "", "none", False),
        # alignment and number format
        ("get_cell_horizontal_alignment", "", "general", False),
        ("get_cell_vertical_alignment", "", "bottom", False),
        ("get_cell_wrap_text", False, False, True),
        ("get_cell_format_code", "", "General", False),
        # fills
        ("get_cell_background_color", "", WHITE, False),
        ("get_cell_foreground_color", "", WHITE, False),
        ("get_cell_pattern_type", "", "none", False),
        # print settings
        ("get_page_orientation", "", "portrait", False),
        ("get_paper_size", 0, 1, False),
        ("get_page_scale", 0, 100, False),
        ("get_fit_to_page", (0, 0), (1, 1), True),
        # sheet views
        ("get_show_grid_lines", None, True, False),
        ("get_top_left_cell", "", "A1", False),
        ("get_zoom_scale", 0, 100, False),
        ("get_zoom_scale_normal", 0, 100, False),
        ("get_zoom_scale_page_layout", 0, 100, False),
        ("get_zoom_scale_page_break", 0, 100, False),
        ("get_sheet_view", "", "normal", False),
        ("get_selection", {}, {"active_cell": "A1", "sqref": "A1"}, False),
    ]
    return [
        PropertyDefault(operation=op, sentinel=sentinel, default=default, ambiguous=ambiguous)
        for op, sentinel, default, ambiguous in rows
    ]


PROPERTY_DEFAULTS: dict[str, PropertyDefault] = {entry.operation: entry for entry in _entries()}


def is_enrolled(operation: str) -> bool:
    return operation in PROPERTY_DEFAULTS


def default_for(operation: str) -> Any:
    """The documented default of an enrolled getter (a fresh copy)."""
    return deepcopy(PROPERTY_DEFAULTS[operation].default)


def matches_sentinel(payload: Any, sentinel: Any) -> bool:
    """Type-strict equality: ``0`` never matches ``False`` and ``0.0`` never matches ``0``."""
    return type(payload) is type(sentinel) and payload == sentinel


def apply_default(operation: str, raw: Any) -> Any:
    """Swap an "unset" success payload for the documented default.

    Only ``(OK, sentinel)`` is rewritten; errors and every other shape pass
    through untouched so the normalizer still sees them.
    """
    entry = PROPERTY_DEFAULTS.get(operation)
    if entry is None:
        return raw
    if type(raw) is tuple and len(raw) == 2 and raw[0] is Marker.OK:
        if matches_sentinel(raw[1], entry.sentinel):
            return (Marker.OK, deepcopy(entry.default))
    return raw
