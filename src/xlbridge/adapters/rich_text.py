"""Native rich text buffers and their formatted runs."""

from __future__ import annotations

import html
import re
from typing import Any

import lxml.html
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.cell.text import InlineFont
from openpyxl.styles.colors import Color

from xlbridge.adapters.helpers import cell, existing_cell, sheet
from xlbridge.adapters.registry import mint, native, resolve
from xlbridge.contracts.handles import HandleKind
from xlbridge.contracts.results import OK

DEFAULT_SIZE = 11.0
DEFAULT_NAME = "Calibri"

STYLE_DECL_RE = re.compile(r"\s*([a-zA-Z-]+)\s*:\s*([^;]+)")
SIZE_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)")

_TRUE = {"true", "1", "yes", "on"}


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE
    return bool(value)


def _argb(color: str) -> str:
    text = color.strip().lstrip("#")
    return ("FF" + text if len(text) == 6 else text).upper()


def font_from_props(props: dict[str, Any] | None) -> InlineFont:
    """Build an inline font from a property map (bold, italic, size, name, color...)."""
    font = InlineFont()
    for key, value in (props or {}).items():
        if value is None:
            continue
        if key == "bold":
            font.b = _flag(value)
        elif key == "italic":
            font.i = _flag(value)
        elif key == "strikethrough":
            font.strike = _flag(value)
        elif key == "underline":
            u = value if isinstance(value, str) else ("single" if value else "none")
            u = {"true": "single", "false": "none"}.get(u.lower(), u)
            font.u = None if u == "none" else u
        elif key == "size":
            font.sz = float(value)
        elif key == "name":
            font.rFont = str(value)
        elif key == "color":
            font.color = Color(rgb=_argb(str(value)))
    return font


def font_properties(font: InlineFont | None) -> dict[str, str]:
    """Render an inline font as a string map with host defaults filled in."""
    props = {
        "bold": "false",
        "italic": "false",
        "strikethrough": "false",
        "underline": "false",
        "size": str(DEFAULT_SIZE),
        "name": DEFAULT_NAME,
    }
    if font is None:
        return props
    props["bold"] = "true" if font.b else "false"
    props["italic"] = "true" if font.i else "false"
    props["strikethrough"] = "true" if font.strike else "false"
    props["underline"] = "true" if font.u else "false"
    if font.sz:
        props["size"] = str(float(font.sz))
    if font.rFont:
        props["name"] = font.rFont
    if font.color is not None and isinstance(font.color.rgb, str):
        props["color"] = font.color.rgb
    return props


def _element(item: Any) -> TextBlock:
    if isinstance(item, TextBlock):
        return item
    return TextBlock(InlineFont(), str(item))


def _append(runs: list, text: str, state: dict[str, Any]) -> None:
    if not text:
        return
    runs.append(TextBlock(font_from_props(state), text) if state else text)


def _style_state(style: str, state: dict[str, Any]) -> dict[str, Any]:
    state = dict(state)
    for prop, value in STYLE_DECL_RE.findall(style or ""):
        prop, value = prop.lower(), value.strip()
        if prop == "color":
            state["color"] = value
        elif prop == "font-size":
            m = SIZE_RE.search(value)
            if m:
                state["size"] = float(m.group(1))
        elif prop == "font-family":
            state["name"] = value.split(",")[0].strip().strip("'\"")
        elif prop == "font-weight" and value in ("bold", "700", "800", "900"):
            state["bold"] = True
        elif prop == "font-style" and value == "italic":
            state["italic"] = True
        elif prop == "text-decoration":
            if "underline" in value:
                state["underline"] = True
            if "line-through" in value:
                state["strikethrough"] = True
    return state


def _walk(el, state: dict[str, Any], runs: list) -> None:
    tag = el.tag.lower() if isinstance(el.tag, str) else ""
    inner = dict(state)
    if tag in ("b", "strong"):
        inner["bold"] = True
    elif tag in ("i", "em"):
        inner["italic"] = True
    elif tag == "u":
        inner["underline"] = True
    elif tag in ("s", "strike", "del"):
        inner["strikethrough"] = True
    elif tag == "font":
        if el.get("color"):
            inner["color"] = el.get("color")
        if el.get("size") and SIZE_RE.search(el.get("size")):
            inner["size"] = float(SIZE_RE.search(el.get("size")).group(1))
        if el.get("face"):
            inner["name"] = el.get("face")
    if el.get("style"):
        inner = _style_state(el.get("style"), inner)
    if tag == "br":
        _append(runs, "\n", state)
    elif tag:
        _append(runs, el.text or "", inner)
        for child in el:
            _walk(child, inner, runs)
    _append(runs, el.tail or "", state)


def parse_html(markup: str) -> CellRichText:
    root = lxml.html.fragment_fromstring(markup or "<span></span>", create_parent="div")
    runs: list = []
    _append(runs, root.text or "", {})
    for child in root:
        _walk(child, {}, runs)
    return CellRichText(runs)


def _wrap(text: str, font: InlineFont) -> str:
    out = html.escape(text)
    attrs = []
    if font.color is not None and isinstance(font.color.rgb, str):
        attrs.append(f'color="#{font.color.rgb[-6:]}"')
    if font.sz:
        attrs.append(f'size="{float(font.sz)}"')
    if font.rFont:
        attrs.append(f'face="{html.escape(font.rFont)}"')
    if attrs:
        out = f"<font {' '.join(attrs)}>{out}</font>"
    if font.strike:
        out = f"<s>{out}</s>"
    if font.u:
        out = f"<u>{out}</u>"
    if font.i:
        out = f"<i>{out}</i>"
    if font.b:
        out = f"<b>{out}</b>"
    return out


def to_html(rich: CellRichText) -> str:
    parts = []
    for item in rich:
        if isinstance(item, TextBlock):
            parts.append(_wrap(item.text, item.font))
        else:
            parts.append(html.escape(str(item)))
    return "".join(parts)


def _rich(ident) -> CellRichText:
    return resolve(ident, HandleKind.RICH_TEXT)


def _text_element(ident) -> TextBlock:
    return resolve(ident, HandleKind.TEXT_ELEMENT)


@native
def create_rich_text():
    return (OK, mint(HandleKind.RICH_TEXT, CellRichText()))


@native
def create_rich_text_from_html(markup):
    return (OK, mint(HandleKind.RICH_TEXT, parse_html(markup)))


@native
def create_text_element(text, font_props=None):
    return (OK, mint(HandleKind.TEXT_ELEMENT, TextBlock(font_from_props(font_props), text)))


@native
def add_text_element_to_rich_text(rich_ident, element_ident):
    _rich(rich_ident).append(_text_element(element_ident))
    return (OK, OK)


@native
def add_formatted_text_to_rich_text(rich_ident, text, font_props=None):
    rich = _rich(rich_ident)
    rich.append(TextBlock(font_from_props(font_props), text) if font_props else text)
    return OK


@native
def set_cell_rich_text(ident, sheet_name, address, rich_ident):
    rich = _rich(rich_ident)
    cell(ident, sheet_name, address).value = CellRichText(list(rich))
    return (OK, OK)


@native
def get_cell_rich_text(ident, sheet_name, address):
    c = existing_cell(sheet(ident, sheet_name), address)
    value = c.value if c is not None else None
    if isinstance(value, CellRichText):
        rich = CellRichText(list(value))
    elif value is None:
        rich = CellRichText()
    else:
        rich = CellRichText([str(value)])
    return (OK, mint(HandleKind.RICH_TEXT, rich))


@native
def get_rich_text_plain_text(rich_ident):
    return (OK, str(_rich(rich_ident)))


@native
def rich_text_to_html(rich_ident):
    return (OK, to_html(_rich(rich_ident)))


@native
def get_rich_text_elements(rich_ident):
    return (OK, [mint(HandleKind.TEXT_ELEMENT, _element(item)) for item in _rich(rich_ident)])


@native
def get_text_element_text(element_ident):
    return (OK, _text_element(element_ident).text)


@native
def get_text_element_font_properties(element_ident):
    return (OK, font_properties(_text_element(element_ident).font))
