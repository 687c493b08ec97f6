"""Rich text values: runs of text that each carry their own font."""

from __future__ import annotations

from typing import Any

from xlbridge.contracts.common import ArgumentError
from xlbridge.contracts.handles import Handle, HandleKind
from xlbridge.engine.boundary import call, minted
from xlbridge.engine.operation import command, query
from xlbridge.validation.arguments import check_cell, check_sheet_name, check_text, normalize_color

FONT_PROPERTIES = ("bold", "italic", "underline", "strikethrough", "size", "color", "name")


def _font_props(props: dict[str, Any] | None) -> dict[str, Any] | None:
    if props is None:
        return None
    if not isinstance(props, dict):
        raise ArgumentError("font_props must be a mapping")
    unknown = sorted(set(props) - set(FONT_PROPERTIES))
    if unknown:
        raise ArgumentError(f"unknown font properties: {', '.join(unknown)}")
    clean = dict(props)
    if "color" in clean:
        clean["color"] = normalize_color(clean["color"])
    return clean


@query("failed to create rich text")
def create_rich_text():
    return minted(call("create_rich_text"), HandleKind.RICH_TEXT)


@query("failed to parse rich text markup")
def create_rich_text_from_html(html: str):
    """Build rich text from a small HTML subset (``b``, ``i``, ``u``, ``s``, ``font``, ``span style``)."""
    return minted(call("create_rich_text_from_html", check_text(html, "html")), HandleKind.RICH_TEXT)


@query("failed to create text element")
def create_text_element(text: str, font_props: dict[str, Any] | None = None):
    return minted(
        call("create_text_element", check_text(text), _font_props(font_props)),
        HandleKind.TEXT_ELEMENT,
    )


@command("failed to add text element")
def add_text_element_to_rich_text(rich_text: Handle, element: Handle):
    return call("add_text_element_to_rich_text", rich_text, element)


@command("failed to add formatted text")
def add_formatted_text_to_rich_text(rich_text: Handle, text: str, font_props: dict[str, Any] | None = None):
    return call("add_formatted_text_to_rich_text", rich_text, check_text(text), _font_props(font_props))


@command("failed to set rich text")
def set_cell_rich_text(book: Handle, sheet: str, cell: str, rich_text: Handle):
    check_sheet_name(sheet)
    return call("set_cell_rich_text", book, sheet, check_cell(cell), rich_text)


@query("failed to read rich text")
def get_cell_rich_text(book: Handle, sheet: str, cell: str):
    """A fresh rich text handle; plain values come back as a single run."""
    check_sheet_name(sheet)
    return minted(call("get_cell_rich_text", book, sheet, check_cell(cell)), HandleKind.RICH_TEXT)


@query("failed to read rich text")
def get_rich_text_plain_text(rich_text: Handle):
    return call("get_rich_text_plain_text", rich_text)


@query("failed to render rich text")
def rich_text_to_html(rich_text: Handle):
    return call("rich_text_to_html", rich_text)


@query("failed to list text elements")
def get_rich_text_elements(rich_text: Handle):
    return minted(call("get_rich_text_elements", rich_text), HandleKind.TEXT_ELEMENT)


@query("failed to read text element")
def get_text_element_text(element: Handle):
    return call("get_text_element_text", element)


@query("failed to read text element font")
def get_text_element_font_properties(element: Handle):
    """Font of the run as a string mapping, host defaults filled in."""
    return call("get_text_element_font_properties", element)
