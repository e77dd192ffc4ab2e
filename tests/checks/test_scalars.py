"""
Unit tests for scalar type checks.
"""

import pytest

from rsv.catalog.catalog import ScalarKind
from rsv.checks.scalars import (
    check_scalar,
    check_type,
    is_boolean,
    is_double,
    is_int32,
    is_int64,
    is_offset_date_time,
)
from rsv.core.diagnostics import DiagnosticCode


class TestIntegerKinds:
    """Tests for Integer and BigInteger."""

    @pytest.mark.parametrize("value", ["12", "-5", "+7", "0", "2147483647", "-2147483648"])
    def test_int32_accepts(self, value):
        assert is_int32(value)

    @pytest.mark.parametrize("value", ["12.5", "abc", "", " 12", "1_000", "2147483648", "-2147483649"])
    def test_int32_rejects(self, value):
        assert not is_int32(value)

    def test_big_integer_covers_64_bit_range(self):
        assert is_int64("9223372036854775807")
        assert is_int64("-9223372036854775808")
        assert is_int64("2147483648")

    def test_big_integer_rejects_overflow_and_text(self):
        assert not is_int64("9223372036854775808")
        assert not is_int64("-9223372036854775809")
        assert not is_int64("lots")

    def test_very_long_digit_strings_are_out_of_range(self):
        assert not is_int32("1" * 5000)
        assert not is_int64("-" + "9" * 5000)

        failure = check_type(ScalarKind.BIG_INTEGER, "1" * 5000)
        assert failure.code == DiagnosticCode.TYPE_ERROR

    def test_leading_zeros_do_not_count_toward_length(self):
        assert is_int32("0" * 40 + "42")
        assert is_int64("-" + "0" * 40 + "9223372036854775808")


class TestDouble:
    """Tests for Double."""

    @pytest.mark.parametrize("value", ["1", "12.5", "-0.25", "1e10", "3.4E-5"])
    def test_accepts_numbers(self, value):
        assert is_double(value)

    @pytest.mark.parametrize("value", ["abc", "", "1.2.3", "1_0.5"])
    def test_rejects_non_numbers(self, value):
        assert not is_double(value)


class TestBoolean:
    """Tests for Boolean."""

    @pytest.mark.parametrize("value", ["true", "True", "TRUE", "false", "False"])
    def test_accepts_literals(self, value):
        assert is_boolean(value)

    @pytest.mark.parametrize("value", ["1", "0", "yes", "no", "", "truthy"])
    def test_rejects_everything_else(self, value):
        assert not is_boolean(value)


class TestOffsetDateTime:
    """Tests for OffsetDateTime."""

    @pytest.mark.parametrize("value", [
        "2021-01-01T00:00:00+00:00",
        "2021-01-01T00:00:00Z",
        "2021-06-30T23:59:59.123-05:00",
        "2021-06-30T23:59:59.123456789+09:30",
        "2021-06-30T23:59+01:00",
    ])
    def test_accepts_offset_date_times(self, value):
        assert is_offset_date_time(value)

    @pytest.mark.parametrize("value", [
        "2021-01-01",
        "2021-01-01T00:00:00",
        "2021-01-01 00:00:00+00:00",
        "2021-13-01T00:00:00+00:00",
        "2021-02-30T00:00:00+00:00",
        "2021-01-01T25:00:00+00:00",
        "yesterday",
    ])
    def test_rejects_incomplete_or_invalid(self, value):
        assert not is_offset_date_time(value)


class TestCheckScalar:
    """Tests for the combined type and rule check."""

    def test_string_always_passes_type_check(self):
        assert check_type(ScalarKind.STRING, "anything at all") is None

    def test_type_failure_carries_value_and_kind(self):
        failure = check_type(ScalarKind.INTEGER, "abc")

        assert failure.code == DiagnosticCode.TYPE_ERROR
        assert failure.value == "abc"
        assert "Integer" in failure.message

    def test_no_rule_is_a_no_op(self):
        assert check_scalar(ScalarKind.INTEGER, "42", None) == []

    def test_type_and_rule_failures_are_both_reported(self):
        failures = check_scalar(ScalarKind.INTEGER, "abc", "$REGEX$^[0-9]+$")

        codes = [f.code for f in failures]
        assert codes == [DiagnosticCode.TYPE_ERROR, DiagnosticCode.RULE_ERROR]

    def test_rule_checked_even_when_type_passes(self):
        failures = check_scalar(ScalarKind.INTEGER, "42", "$EQUAL$41")

        assert [f.code for f in failures] == [DiagnosticCode.RULE_ERROR]
