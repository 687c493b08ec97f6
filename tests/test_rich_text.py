"""Tests for rich text buffers, formatted runs and the HTML bridge."""

from __future__ import annotations

import pytest

import xlbridge
from xlbridge.contracts.handles import Handle, HandleKind
from xlbridge.contracts.results import COMMAND_OK, ErrorCode, QueryOk

PLAIN_FONT = {
    "bold": "false",
    "italic": "false",
    "strikethrough": "false",
    "underline": "false",
    "size": "11.0",
    "name": "Calibri",
}


@pytest.fixture
def rich():
    return xlbridge.create_rich_text().value


class TestBuilding:
    def test_new_buffer_is_empty(self, rich):
        assert isinstance(rich, Handle)
        assert rich.kind is HandleKind.RICH_TEXT
        assert xlbridge.get_rich_text_plain_text(rich) == QueryOk(value="")

    def test_runs_concatenate(self, rich):
        assert xlbridge.add_formatted_text_to_rich_text(rich, "Total: ", {"bold": True}) == COMMAND_OK
        xlbridge.add_formatted_text_to_rich_text(rich, "42")
        assert xlbridge.get_rich_text_plain_text(rich).value == "Total: 42"

    def test_text_elements(self, rich):
        element = xlbridge.create_text_element("warn", {"color": "red", "italic": True}).value
        assert element.kind is HandleKind.TEXT_ELEMENT
        assert xlbridge.add_text_element_to_rich_text(rich, element) == COMMAND_OK
        assert xlbridge.get_text_element_text(element).value == "warn"
        props = xlbridge.get_text_element_font_properties(element).value
        assert props["italic"] == "true"
        assert props["color"] == "FFFF0000"

    def test_plain_run_reads_default_font(self, rich):
        xlbridge.add_formatted_text_to_rich_text(rich, "plain")
        (element,) = xlbridge.get_rich_text_elements(rich).value
        assert xlbridge.get_text_element_font_properties(element).value == PLAIN_FONT

    def test_elements_listed_in_order(self, rich):
        xlbridge.add_formatted_text_to_rich_text(rich, "a", {"bold": True})
        xlbridge.add_formatted_text_to_rich_text(rich, "b", {"size": 14})
        elements = xlbridge.get_rich_text_elements(rich).value
        assert [xlbridge.get_text_element_text(e).value for e in elements] == ["a", "b"]
        assert xlbridge.get_text_element_font_properties(elements[1]).value["size"] == "14.0"

    @pytest.mark.parametrize("props", [{"glow": True}, "bold", {"color": "nope"}])
    def test_font_props_checked(self, rich, props):
        assert xlbridge.add_formatted_text_to_rich_text(rich, "x", props).code is ErrorCode.VALIDATION

    def test_wrong_handle_kind(self, rich):
        result = xlbridge.add_text_element_to_rich_text(rich, rich)
        assert result.code is ErrorCode.INVALID_HANDLE


class TestCells:
    def test_set_and_read_back(self, book, rich):
        xlbridge.add_formatted_text_to_rich_text(rich, "Hello ", {"bold": True})
        xlbridge.add_formatted_text_to_rich_text(rich, "world")
        assert xlbridge.set_cell_rich_text(book, "Sheet", "A1", rich) == COMMAND_OK
        copy = xlbridge.get_cell_rich_text(book, "Sheet", "A1").value
        assert copy != rich
        assert xlbridge.get_rich_text_plain_text(copy).value == "Hello world"

    def test_cell_keeps_its_own_copy(self, book, rich):
        xlbridge.add_formatted_text_to_rich_text(rich, "first")
        xlbridge.set_cell_rich_text(book, "Sheet", "A1", rich)
        xlbridge.add_formatted_text_to_rich_text(rich, " later")
        copy = xlbridge.get_cell_rich_text(book, "Sheet", "A1").value
        assert xlbridge.get_rich_text_plain_text(copy).value == "first"

    def test_plain_value_is_a_single_run(self, book):
        xlbridge.set_cell_value(book, "Sheet", "B2", 12.5)
        copy = xlbridge.get_cell_rich_text(book, "Sheet", "B2").value
        assert xlbridge.get_rich_text_plain_text(copy).value == "12.5"
        assert len(xlbridge.get_rich_text_elements(copy).value) == 1

    def test_empty_cell(self, book):
        copy = xlbridge.get_cell_rich_text(book, "Sheet", "C3").value
        assert xlbridge.get_rich_text_elements(copy).value == []


class TestHtml:
    def test_parse_and_render(self):
        rich = xlbridge.create_rich_text_from_html("<b>Bold</b> and <i>italic</i>").value
        assert xlbridge.get_rich_text_plain_text(rich).value == "Bold and italic"
        assert xlbridge.rich_text_to_html(rich).value == "<b>Bold</b> and <i>italic</i>"

    def test_font_and_style_attributes(self):
        markup = '<font color="#0000FF" face="Arial">blue</font><span style="font-weight: bold">!</span>'
        rich = xlbridge.create_rich_text_from_html(markup).value
        first, second = xlbridge.get_rich_text_elements(rich).value
        props = xlbridge.get_text_element_font_properties(first).value
        assert props["color"] == "FF0000FF"
        assert props["name"] == "Arial"
        assert xlbridge.get_text_element_font_properties(second).value["bold"] == "true"

    def test_escaping(self, rich):
        xlbridge.add_formatted_text_to_rich_text(rich, "a < b & c")
        assert xlbridge.rich_text_to_html(rich).value == "a &lt; b &amp; c"
