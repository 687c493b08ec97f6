"""Tests for print settings, sheet views, workbook views and manual page breaks."""

from __future__ import annotations

from pathlib import Path

import pytest

import xlbridge
from xlbridge.contracts.results import COMMAND_OK, Err, ErrorCode, QueryOk

# ---------------------------------------------------------------------------
# Print settings
# ---------------------------------------------------------------------------


class TestPrintSettings:
    def test_unset_page_setup_reads_defaults(self, book):
        assert xlbridge.get_page_orientation(book, "Sheet") == QueryOk(value="portrait")
        assert xlbridge.get_paper_size(book, "Sheet").value == 1
        assert xlbridge.get_page_scale(book, "Sheet").value == 100
        assert xlbridge.get_fit_to_page(book, "Sheet").value == (1, 1)

    def test_page_setup(self, book):
        xlbridge.set_page_orientation(book, "Sheet", "landscape")
        xlbridge.set_paper_size(book, "Sheet", 9)
        xlbridge.set_page_scale(book, "Sheet", 75)
        xlbridge.set_fit_to_page(book, "Sheet", 2, 0)
        assert xlbridge.get_page_orientation(book, "Sheet").value == "landscape"
        assert xlbridge.get_paper_size(book, "Sheet").value == 9
        assert xlbridge.get_page_scale(book, "Sheet").value == 75
        assert xlbridge.get_fit_to_page(book, "Sheet").value == (2, 0)

    @pytest.mark.parametrize(
        "op, args",
        [
            ("set_page_orientation", ("sideways",)),
            ("set_paper_size", (0,)),
            ("set_page_scale", (5,)),
            ("set_fit_to_page", (-1, 1)),
            ("set_page_margins", (1, 1, 1, 50)),
            ("set_header", (None,)),
            ("set_print_centered", (True, "no")),
        ],
    )
    def test_arguments_checked(self, book, op, args):
        assert getattr(xlbridge, op)(book, "Sheet", *args).code is ErrorCode.VALIDATION

    def test_margins(self, book):
        xlbridge.set_page_margins(book, "Sheet", 1, 0.5, 1.25, 0.5)
        xlbridge.set_header_footer_margins(book, "Sheet", 0.3, 0.4)
        assert xlbridge.get_page_margins(book, "Sheet").value == {
            "top": 1.0, "right": 0.5, "bottom": 1.25, "left": 0.5,
        }
        assert xlbridge.get_header_footer_margins(book, "Sheet").value == {"header": 0.3, "footer": 0.4}

    def test_header_and_footer(self, book):
        assert xlbridge.get_header(book, "Sheet").value == ""
        xlbridge.set_header(book, "Sheet", "Quarterly report")
        xlbridge.set_footer(book, "Sheet", "Page &P")
        assert xlbridge.get_header(book, "Sheet").value == "Quarterly report"
        assert xlbridge.get_footer(book, "Sheet").value == "Page &P"

    def test_print_centered(self, book):
        assert xlbridge.get_print_centered(book, "Sheet").value == (False, False)
        xlbridge.set_print_centered(book, "Sheet", True, False)
        assert xlbridge.get_print_centered(book, "Sheet").value == (True, False)

    def test_print_area(self, book):
        assert xlbridge.get_print_area(book, "Sheet").value == ""
        assert xlbridge.set_print_area(book, "Sheet", "A1:D10") == COMMAND_OK
        assert xlbridge.get_print_area(book, "Sheet").value == "A1:D10"

    def test_print_area_with_several_ranges(self, book):
        xlbridge.set_print_area(book, "Sheet", "A1:B2,D1:E2")
        assert xlbridge.get_print_area(book, "Sheet").value == "A1:B2,D1:E2"

    def test_print_titles(self, book):
        xlbridge.set_print_titles(book, "Sheet", "1:2", "A:B")
        assert xlbridge.get_print_titles(book, "Sheet").value == ("1:2", "A:B")

    def test_print_titles_rows_only(self, book):
        xlbridge.set_print_titles(book, "Sheet", "$1:$1", None)
        assert xlbridge.get_print_titles(book, "Sheet").value == ("1:1", "")

    def test_print_titles_need_one_axis(self, book):
        assert xlbridge.set_print_titles(book, "Sheet", None, None).code is ErrorCode.VALIDATION
        assert xlbridge.set_print_titles(book, "Sheet", "A:B", None).code is ErrorCode.VALIDATION


# ---------------------------------------------------------------------------
# Sheet views
# ---------------------------------------------------------------------------


class TestSheetViews:
    def test_unset_view_reads_defaults(self, book):
        assert xlbridge.get_show_grid_lines(book, "Sheet") == QueryOk(value=True)
        assert xlbridge.get_top_left_cell(book, "Sheet").value == "A1"
        assert xlbridge.get_zoom_scale(book, "Sheet").value == 100
        assert xlbridge.get_zoom_scale_page_break(book, "Sheet").value == 100
        assert xlbridge.get_sheet_view(book, "Sheet").value == "normal"
        assert xlbridge.get_selection(book, "Sheet").value == {"active_cell": "A1", "sqref": "A1"}

    def test_explicitly_hidden_grid_lines(self, book):
        xlbridge.set_show_grid_lines(book, "Sheet", False)
        assert xlbridge.get_show_grid_lines(book, "Sheet").value is False

    def test_zoom_scales(self, book):
        xlbridge.set_zoom_scale(book, "Sheet", 150)
        xlbridge.set_zoom_scale_normal(book, "Sheet", 90)
        xlbridge.set_zoom_scale_page_layout(book, "Sheet", 60)
        xlbridge.set_zoom_scale_page_break(book, "Sheet", 55)
        assert xlbridge.get_zoom_scale(book, "Sheet").value == 150
        assert xlbridge.get_zoom_scale_normal(book, "Sheet").value == 90
        assert xlbridge.get_zoom_scale_page_layout(book, "Sheet").value == 60
        assert xlbridge.get_zoom_scale_page_break(book, "Sheet").value == 55

    def test_zoom_range(self, book):
        assert xlbridge.set_zoom_scale(book, "Sheet", 500).code is ErrorCode.VALIDATION

    def test_freeze_panes(self, book):
        assert xlbridge.get_freeze_panes(book, "Sheet").value == (0, 0)
        xlbridge.freeze_panes(book, "Sheet", 2, 1)
        assert xlbridge.get_freeze_panes(book, "Sheet").value == (2, 1)
        xlbridge.freeze_panes(book, "Sheet", 0, 0)
        assert xlbridge.get_freeze_panes(book, "Sheet").value == (0, 0)

    def test_split_panes_are_not_frozen(self, book):
        assert xlbridge.split_panes(book, "Sheet", 1200, 3000) == COMMAND_OK
        assert xlbridge.get_freeze_panes(book, "Sheet").value == (0, 0)

    def test_tab_color_and_selection_flag(self, book):
        xlbridge.set_tab_color(book, "Sheet", "#FF8800")
        xlbridge.set_tab_selected(book, "Sheet", True)
        assert xlbridge.get_tab_color(book, "Sheet").value == "#FF8800"
        assert xlbridge.get_tab_selected(book, "Sheet").value is True

    def test_view_kind_and_top_left(self, book):
        xlbridge.set_sheet_view(book, "Sheet", "page_break_preview")
        xlbridge.set_top_left_cell(book, "Sheet", "c5")
        assert xlbridge.get_sheet_view(book, "Sheet").value == "page_break_preview"
        assert xlbridge.get_top_left_cell(book, "Sheet").value == "C5"

    def test_selection(self, book):
        xlbridge.set_selection(book, "Sheet", "B2", "B2:C3 E5")
        assert xlbridge.get_selection(book, "Sheet").value == {"active_cell": "B2", "sqref": "B2:C3 E5"}


# ---------------------------------------------------------------------------
# Workbook views
# ---------------------------------------------------------------------------


class TestWorkbookViews:
    def test_active_tab(self, book):
        xlbridge.add_sheet(book, "Second")
        assert xlbridge.get_active_tab(book).value == 0
        assert xlbridge.set_active_tab(book, 1) == COMMAND_OK
        assert xlbridge.get_active_tab(book).value == 1

    def test_active_tab_out_of_range(self, book):
        assert xlbridge.set_active_tab(book, 3) == Err(code=ErrorCode.NATIVE, reason="Sheet index out of range: 3")

    def test_window_position(self, book, tmp_path: Path):
        xlbridge.set_workbook_window_position(book, 10, 20, 800, 600)
        assert xlbridge.get_workbook_window_position(book).value == {"x": 10, "y": 20, "width": 800, "height": 600}


# ---------------------------------------------------------------------------
# Page breaks
# ---------------------------------------------------------------------------


class TestPageBreaks:
    def test_add_list_remove(self, book):
        xlbridge.add_row_page_break(book, "Sheet", 20)
        xlbridge.add_row_page_break(book, "Sheet", 10, manual=False)
        xlbridge.add_column_page_break(book, "Sheet", 4)
        assert xlbridge.get_row_page_breaks(book, "Sheet").value == [(10, False), (20, True)]
        assert xlbridge.get_column_page_breaks(book, "Sheet").value == [(4, True)]
        assert xlbridge.has_row_page_break(book, "Sheet", 10).value is True
        assert xlbridge.has_column_page_break(book, "Sheet", 5).value is False
        assert xlbridge.remove_row_page_break(book, "Sheet", 10) == COMMAND_OK
        assert xlbridge.count_row_page_breaks(book, "Sheet").value == 1

    def test_adding_twice_keeps_one_break(self, book):
        xlbridge.add_row_page_break(book, "Sheet", 5)
        xlbridge.add_row_page_break(book, "Sheet", 5)
        assert xlbridge.count_row_page_breaks(book, "Sheet").value == 1

    def test_remove_missing_break(self, book):
        result = xlbridge.remove_column_page_break(book, "Sheet", 7)
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Column page break not found: 7")

    def test_bulk_operations(self, book):
        xlbridge.add_row_page_breaks(book, "Sheet", [30, 10, 20])
        xlbridge.add_column_page_breaks(book, "Sheet", [2, 3])
        xlbridge.remove_row_page_breaks(book, "Sheet", [10, 99])
        xlbridge.remove_column_page_breaks(book, "Sheet", [3])
        assert xlbridge.get_all_page_breaks(book, "Sheet").value == {
            "rows": [(20, True), (30, True)],
            "columns": [(2, True)],
        }
        assert xlbridge.count_column_page_breaks(book, "Sheet").value == 1

    def test_clearing(self, book):
        xlbridge.add_row_page_breaks(book, "Sheet", [5, 6])
        xlbridge.add_column_page_breaks(book, "Sheet", [5])
        xlbridge.clear_column_page_breaks(book, "Sheet")
        assert xlbridge.count_column_page_breaks(book, "Sheet").value == 0
        xlbridge.clear_row_page_breaks(book, "Sheet")
        assert xlbridge.count_row_page_breaks(book, "Sheet").value == 0
        xlbridge.add_row_page_break(book, "Sheet", 3)
        assert xlbridge.clear_all_page_breaks(book, "Sheet") == COMMAND_OK
        assert xlbridge.get_all_page_breaks(book, "Sheet").value == {"rows": [], "columns": []}

    @pytest.mark.parametrize(
        "op, arg",
        [
            ("add_row_page_break", 0),
            ("add_column_page_break", 16385),
            ("add_row_page_breaks", [1, "2"]),
            ("add_column_page_breaks", 3),
        ],
    )
    def test_arguments_checked(self, book, op, arg):
        assert getattr(xlbridge, op)(book, "Sheet", arg).code is ErrorCode.VALIDATION

    def test_breaks_survive_save(self, book, tmp_path: Path):
        xlbridge.add_row_page_break(book, "Sheet", 12)
        out = tmp_path / "breaks.xlsx"
        xlbridge.write(book, out)
        again = xlbridge.read(out).value
        assert xlbridge.has_row_page_break(again, "Sheet", 12).value is True
