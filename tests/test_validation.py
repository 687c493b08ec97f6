"""Tests for argument preconditions."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st
from openpyxl.utils import get_column_letter

from xlbridge.contracts.common import ArgumentError
from xlbridge.validation.arguments import (
    MAX_COLUMN,
    MAX_ROW,
    check_bool,
    check_cell,
    check_choice,
    check_column,
    check_int_range,
    check_new_sheet_name,
    check_number,
    check_path,
    check_positive,
    check_range,
    check_ranges,
    normalize_color,
)


class TestCells:
    @pytest.mark.parametrize(
        "ref, expected",
        [("A1", "A1"), ("b2", "B2"), ("$C$3", "C3"), (" xfd1048576 ", "XFD1048576")],
    )
    def test_valid(self, ref, expected):
        assert check_cell(ref) == expected

    @pytest.mark.parametrize("ref", ["", "A0", "1A", "A", "XFE1", "A1048577", "A1:B2", 5, None])
    def test_invalid(self, ref):
        with pytest.raises(ArgumentError):
            check_cell(ref)

    def test_message_names_the_argument(self):
        with pytest.raises(ArgumentError, match="Invalid from_cell reference: 'A0'"):
            check_cell("A0", "from_cell")

    @given(
        col=st.integers(min_value=1, max_value=MAX_COLUMN),
        row=st.integers(min_value=1, max_value=MAX_ROW),
    )
    def test_every_address_on_the_grid(self, col, row):
        ref = f"{get_column_letter(col)}{row}"
        assert check_cell(ref.lower()) == ref


class TestRanges:
    @pytest.mark.parametrize(
        "ref, expected",
        [("A1:B5", "A1:B5"), ("a1", "A1"), ("$A$1:$C$3", "A1:C3")],
    )
    def test_valid(self, ref, expected):
        assert check_range(ref) == expected

    @pytest.mark.parametrize("ref", ["", "A1:", ":B2", "A1:B2:C3", "nope", None])
    def test_invalid(self, ref):
        with pytest.raises(ArgumentError):
            check_range(ref)

    def test_sqref(self):
        assert check_ranges("a1:b2  D4") == "A1:B2 D4"
        with pytest.raises(ArgumentError):
            check_ranges("A1 nope")


class TestScalars:
    def test_column(self):
        assert check_column("xfd") == "XFD"
        for bad in ("", "A1", "XFE", 3):
            with pytest.raises(ArgumentError):
                check_column(bad)

    @pytest.mark.parametrize("value", [1, "true", None])
    def test_bool(self, value):
        with pytest.raises(ArgumentError):
            check_bool(value, "flag")

    def test_int_range_rejects_bool(self):
        with pytest.raises(ArgumentError, match="must be an integer"):
            check_int_range(True, 0, 10, "n")
        with pytest.raises(ArgumentError, match="between 0 and 10, got 11"):
            check_int_range(11, 0, 10, "n")

    def test_number(self):
        assert check_number(3, "size") == 3.0
        assert isinstance(check_number(3, "size"), float)
        with pytest.raises(ArgumentError):
            check_number(-1, "size", low=0)
        with pytest.raises(ArgumentError):
            check_number(410, "size", high=409)
        with pytest.raises(ArgumentError):
            check_number("3", "size")

    def test_positive(self):
        assert check_positive(1, "n") == 1
        for bad in (0, -2, 1.5, False):
            with pytest.raises(ArgumentError):
                check_positive(bad, "n")

    def test_choice(self):
        assert check_choice("top", ("top", "bottom"), "kind") == "top"
        with pytest.raises(ArgumentError, match="one of top, bottom; got 'left'"):
            check_choice("left", ("top", "bottom"), "kind")

    def test_path(self, tmp_path: Path):
        assert check_path(tmp_path / "x.xlsx") == str(tmp_path / "x.xlsx")
        for bad in ("", None, 3):
            with pytest.raises(ArgumentError):
                check_path(bad)


class TestSheetNames:
    def test_new_sheet_name(self):
        assert check_new_sheet_name("Q1 Report") == "Q1 Report"

    @pytest.mark.parametrize("name", ["", "x" * 32, "a/b", "[x]", "what?", "a:b"])
    def test_invalid(self, name):
        with pytest.raises(ArgumentError):
            check_new_sheet_name(name)


class TestColors:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("red", "FFFF0000"),
            ("Grey", "FF808080"),
            ("#00ff00", "FF00FF00"),
            ("0000FF", "FF0000FF"),
            ("80112233", "80112233"),
        ],
    )
    def test_valid(self, value, expected):
        assert normalize_color(value) == expected

    @pytest.mark.parametrize("value", ["", "#12345", "GGGGGG", "burgundy", None, 0xFF0000])
    def test_invalid(self, value):
        with pytest.raises(ArgumentError):
            normalize_color(value)
