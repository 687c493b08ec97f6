"""Native font properties of a single cell."""

from __future__ import annotations

from openpyxl.styles.colors import Color

from xlbridge.adapters.helpers import cell, color_text, restyle, styled_cell
from xlbridge.adapters.registry import native
from xlbridge.contracts.results import OK

FAMILY_NAMES = {0: "auto", 1: "roman", 2: "swiss", 3: "modern", 4: "script", 5: "decorative"}
FAMILY_CODES = {name: code for code, name in FAMILY_NAMES.items()}


def _set(ident, sheet_name, address, **changes):
    restyle(cell(ident, sheet_name, address), "font", **changes)
    return (OK, OK)


def _font(ident, sheet_name, address):
    c = styled_cell(ident, sheet_name, address)
    return c.font if c is not None else None


@native
def set_font_color(ident, sheet_name, address, color):
    return _set(ident, sheet_name, address, color=Color(rgb=color))


@native
def set_font_size(ident, sheet_name, address, size):
    return _set(ident, sheet_name, address, sz=float(size))


@native
def set_font_bold(ident, sheet_name, address, bold):
    return _set(ident, sheet_name, address, b=bold)


@native
def set_font_name(ident, sheet_name, address, name):
    return _set(ident, sheet_name, address, name=name)


@native
def set_font_italic(ident, sheet_name, address, italic):
    return _set(ident, sheet_name, address, i=italic)


@native
def set_font_underline(ident, sheet_name, address, underline):
    return _set(ident, sheet_name, address, u=None if underline == "none" else underline)


@native
def set_font_strikethrough(ident, sheet_name, address, strike):
    return _set(ident, sheet_name, address, strike=strike)


@native
def set_font_family(ident, sheet_name, address, family):
    return _set(ident, sheet_name, address, family=FAMILY_CODES[family])


@native
def set_font_scheme(ident, sheet_name, address, scheme):
    return _set(ident, sheet_name, address, scheme=None if scheme == "none" else scheme)


@native
def get_font_color(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, color_text(font.color) if font else "")


@native
def get_font_size(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, float(font.sz) if font and font.sz else 0.0)


@native
def get_font_bold(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, bool(font and font.b))


@native
def get_font_name(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, (font.name or "") if font else "")


@native
def get_font_italic(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, bool(font and font.i))


@native
def get_font_underline(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, (font.u or "") if font else "")


@native
def get_font_strikethrough(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, bool(font and font.strike))


@native
def get_font_family(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    if font is None or font.family is None:
        return (OK, "")
    return (OK, FAMILY_NAMES.get(int(font.family), str(int(font.family))))


@native
def get_font_scheme(ident, sheet_name, address):
    font = _font(ident, sheet_name, address)
    return (OK, (font.scheme or "") if font else "")
