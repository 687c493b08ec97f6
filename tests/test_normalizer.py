"""Tests for raw outcome classification and per-convention projection.

The normalizer must be total: every raw outcome maps to exactly one
canonical result for each convention, or to a ContractViolation where the
convention forbids the outcome.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xlbridge.contracts.common import ContractViolation
from xlbridge.contracts.results import (
    COMMAND_OK,
    ERROR,
    OK,
    CommandOk,
    Convention,
    Err,
    ErrorCode,
    QueryOk,
    is_ok,
)
from xlbridge.engine.normalizer import Shape, classify, code_for, normalize, reason_text

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

payloads = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=20),
    st.binary(max_size=8),
    st.lists(st.integers(), max_size=4),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
)

reasons = st.one_of(st.text(max_size=30), st.just(ERROR), st.tuples(st.just(ERROR), st.text(max_size=30)))

raw_outcomes = st.one_of(
    st.just(OK),
    st.just(ERROR),
    st.tuples(st.just(OK), st.one_of(st.just(OK), payloads)),
    st.tuples(st.just(ERROR), reasons),
    payloads,
)

conventions = st.sampled_from(list(Convention))


# ---------------------------------------------------------------------------
# Totality
# ---------------------------------------------------------------------------


class TestTotality:
    @given(raw=raw_outcomes)
    def test_classify_every_outcome(self, raw):
        shape, _ = classify(raw)
        assert isinstance(shape, Shape)

    @given(raw=raw_outcomes)
    def test_command_is_ok_or_err(self, raw):
        result = normalize(raw, Convention.COMMAND, operation="op")
        assert isinstance(result, (CommandOk, Err))

    @given(raw=raw_outcomes)
    def test_fallible_query_is_value_or_err(self, raw):
        result = normalize(raw, Convention.FALLIBLE_QUERY, operation="op")
        assert isinstance(result, (QueryOk, Err))

    @given(raw=raw_outcomes)
    def test_infallible_query_never_returns_err(self, raw):
        shape, _ = classify(raw)
        if shape in (Shape.FAILURE, Shape.GENERIC_FAILURE):
            with pytest.raises(ContractViolation):
                normalize(raw, Convention.INFALLIBLE_QUERY, operation="op")
        else:
            assert not isinstance(normalize(raw, Convention.INFALLIBLE_QUERY, operation="op"), (Err, CommandOk, QueryOk))

    @given(raw=raw_outcomes, convention=conventions)
    def test_err_reason_is_text(self, raw, convention):
        try:
            result = normalize(raw, convention, operation="op")
        except ContractViolation:
            return
        if isinstance(result, Err):
            assert isinstance(result.reason, str)
            assert not is_ok(result)


# ---------------------------------------------------------------------------
# Decision table
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        "raw, shape, payload",
        [
            (OK, Shape.UNIT, None),
            ((OK, OK), Shape.UNIT, None),
            ((OK, 5), Shape.VALUE, 5),
            ((OK, None), Shape.VALUE, None),
            ((ERROR, (ERROR, "Sheet not found: X")), Shape.FAILURE, "Sheet not found: X"),
            ((ERROR, (ERROR, ERROR)), Shape.GENERIC_FAILURE, None),
            ((ERROR, ERROR), Shape.GENERIC_FAILURE, None),
            ((ERROR, "boom"), Shape.FAILURE, "boom"),
            (ERROR, Shape.GENERIC_FAILURE, None),
            ("ok", Shape.BARE, "ok"),
            (None, Shape.BARE, None),
            (42, Shape.BARE, 42),
            (("ok", 1), Shape.BARE, ("ok", 1)),
        ],
    )
    def test_table(self, raw, shape, payload):
        assert classify(raw) == (shape, payload)

    def test_only_one_level_of_nesting_is_unwrapped(self):
        shape, payload = classify((ERROR, (ERROR, (ERROR, "deep"))))
        assert shape is Shape.FAILURE
        assert payload == (ERROR, "deep")
        assert reason_text(payload) == "error: deep"

    def test_three_tuple_is_not_a_wrapper(self):
        assert classify((OK, 1, 2))[0] is Shape.BARE


class TestReasonCodes:
    @pytest.mark.parametrize(
        "reason, code",
        [
            ("invalid handle: spreadsheet#7", ErrorCode.INVALID_HANDLE),
            ("Sheet not found: Q3", ErrorCode.NOT_FOUND),
            ("table_not_found", ErrorCode.NOT_FOUND),
            ("file does not exist", ErrorCode.NOT_FOUND),
            ("no such comment", ErrorCode.NOT_FOUND),
            ("disk full", ErrorCode.NATIVE),
            ("", ErrorCode.NATIVE),
        ],
    )
    def test_code_for(self, reason, code):
        assert code_for(reason) is code

    def test_reason_text_flattens_terms(self):
        assert reason_text(b"bytes reason") == "bytes reason"
        assert reason_text(ERROR) == "error"
        assert reason_text(17) == "17"


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


class TestCommand:
    @pytest.mark.parametrize("raw", [OK, (OK, OK), (OK, "ignored"), None])
    def test_success_shapes(self, raw):
        assert normalize(raw, Convention.COMMAND) == COMMAND_OK

    def test_bare_string_is_an_error_reason(self):
        assert normalize("oops", Convention.COMMAND) == Err(code=ErrorCode.NATIVE, reason="oops")

    def test_nested_error_keeps_reason_verbatim(self):
        result = normalize((ERROR, (ERROR, "Table not found: T1")), Convention.COMMAND)
        assert result == Err(code=ErrorCode.NOT_FOUND, reason="Table not found: T1")

    def test_generic_failure_uses_declared_reason(self):
        result = normalize((ERROR, ERROR), Convention.COMMAND, operation="write", generic_reason="failed to write")
        assert result == Err(code=ErrorCode.GENERIC_FAILURE, reason="failed to write")

    def test_generic_failure_without_declared_reason(self):
        result = normalize(ERROR, Convention.COMMAND, operation="write")
        assert result == Err(code=ErrorCode.GENERIC_FAILURE, reason="write failed")

    def test_unwrapped_value_is_tolerated(self):
        assert normalize(42, Convention.COMMAND) == COMMAND_OK

    def test_unwrapped_value_is_a_defect_when_strict(self, strict):
        with pytest.raises(ContractViolation, match="unwrapped value"):
            normalize(42, Convention.COMMAND, operation="set_thing")


class TestFallibleQuery:
    def test_value(self):
        assert normalize((OK, [1, 2]), Convention.FALLIBLE_QUERY) == QueryOk(value=[1, 2])

    def test_falsy_values_survive(self):
        assert normalize((OK, 0), Convention.FALLIBLE_QUERY) == QueryOk(value=0)
        assert normalize((OK, ""), Convention.FALLIBLE_QUERY) == QueryOk(value="")
        assert normalize((OK, None), Convention.FALLIBLE_QUERY) == QueryOk(value=None)

    def test_error_string(self):
        result = normalize((ERROR, "invalid handle: spreadsheet#3"), Convention.FALLIBLE_QUERY)
        assert result == Err(code=ErrorCode.INVALID_HANDLE, reason="invalid handle: spreadsheet#3")

    def test_unit_is_a_tolerated_defect(self):
        assert normalize(OK, Convention.FALLIBLE_QUERY) == QueryOk(value=None)

    def test_bare_value_is_a_tolerated_defect(self):
        assert normalize("ok", Convention.FALLIBLE_QUERY) == QueryOk(value="ok")

    def test_defects_raise_when_strict(self, strict):
        with pytest.raises(ContractViolation):
            normalize((OK, OK), Convention.FALLIBLE_QUERY, operation="get_thing")
        with pytest.raises(ContractViolation):
            normalize(3, Convention.FALLIBLE_QUERY, operation="get_thing")


class TestInfallibleQuery:
    @pytest.mark.parametrize("raw, expected", [((OK, 3), 3), (3, 3), ((OK, OK), None), (OK, None), (None, None)])
    def test_bare_values(self, raw, expected):
        assert normalize(raw, Convention.INFALLIBLE_QUERY) == expected

    def test_error_outcome_always_raises(self):
        with pytest.raises(ContractViolation) as exc_info:
            normalize((ERROR, "invalid handle: spreadsheet#1"), Convention.INFALLIBLE_QUERY, operation="get_sheet_count")
        assert exc_info.value.operation == "get_sheet_count"
        assert exc_info.value.raw == (ERROR, "invalid handle: spreadsheet#1")
