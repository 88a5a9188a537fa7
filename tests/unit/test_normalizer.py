"""
Tests for the Value Normalizer

Checks:
1. Classification into NATIVE / DECIMAL_STRING / BIG_INTEGER
2. Identity for plain int inputs, bounded by the int-to-str digit limit
3. Strict decimal literal parsing
4. Native number conversion (numpy integers, integral floats)
5. Rejection of fractional, non-finite and unsafe floats
6. Policy switches
"""

import dataclasses
import sys
from decimal import Decimal
from enum import IntEnum

import numpy as np
import pytest

from bigcheck.core.math.normalizer import (
    MAX_SAFE_INTEGER,
    NumericInput,
    NumericKind,
    NumericPolicy,
    classify,
    normalize,
)
from bigcheck.exceptions import InvalidNumericLiteral, UnsupportedNumericType

BIG = 2**200 + 7
BIG_TEXT = "1606938044258990275541962092341162602522202993782792835301383"

no_digit_limit_skip = pytest.mark.skipif(
    getattr(sys, "get_int_max_str_digits", lambda: 0)() == 0,
    reason="interpreter has no int digit limit",
)


class Colour(IntEnum):
    RED = 3


# =============================================================================
# CLASSIFICATION
# =============================================================================


class TestClassify:
    """Tests for classify / NumericInput.of"""

    def test_python_int_is_big_integer(self) -> None:
        assert classify(10) is NumericKind.BIG_INTEGER
        assert classify(BIG) is NumericKind.BIG_INTEGER

    def test_string_is_decimal_string(self) -> None:
        assert classify("10") is NumericKind.DECIMAL_STRING
        # malformed strings are still strings; parsing fails later
        assert classify("abc") is NumericKind.DECIMAL_STRING

    def test_machine_numbers_are_native(self) -> None:
        assert classify(np.int64(10)) is NumericKind.NATIVE
        assert classify(np.uint8(10)) is NumericKind.NATIVE
        assert classify(10.0) is NumericKind.NATIVE
        assert classify(np.float32(10.0)) is NumericKind.NATIVE

    def test_bool_rejected(self) -> None:
        """bool is an int subclass but not a number here"""
        with pytest.raises(UnsupportedNumericType):
            classify(True)
        with pytest.raises(UnsupportedNumericType):
            classify(np.bool_(False))

    @pytest.mark.parametrize("value", [None, Decimal("10"), [10], b"10", 10j])
    def test_other_types_rejected(self, value) -> None:
        with pytest.raises(UnsupportedNumericType, match="Unsupported numeric input"):
            classify(value)

    def test_numeric_input_of(self) -> None:
        numeric = NumericInput.of("42")
        assert numeric.kind is NumericKind.DECIMAL_STRING
        assert numeric.raw == "42"

    def test_numeric_input_is_frozen(self) -> None:
        numeric = NumericInput.of(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            numeric.raw = 43  # type: ignore[misc]


# =============================================================================
# BIG_INTEGER
# =============================================================================


class TestNormalizeBigInteger:
    """Tests for int inputs"""

    def test_identity(self) -> None:
        """Plain int is returned unchanged (same object)"""
        assert normalize(BIG) is BIG

    def test_negative_and_zero(self) -> None:
        assert normalize(-BIG) == -BIG
        assert normalize(0) == 0

    def test_int_subclass_reduced_to_int(self) -> None:
        result = normalize(Colour.RED)
        assert result == 3
        assert type(result) is int

    def test_accepts_classified_input(self) -> None:
        assert normalize(NumericInput.of(BIG)) == BIG

    @no_digit_limit_skip
    def test_largest_formattable_int_accepted(self) -> None:
        largest = 10 ** sys.get_int_max_str_digits() - 1
        assert normalize(largest) is largest
        assert normalize(-largest) == -largest

    @no_digit_limit_skip
    def test_int_beyond_digit_limit_rejected(self) -> None:
        """Such an int could never be formatted into a failure message"""
        too_long = 10 ** sys.get_int_max_str_digits()
        with pytest.raises(InvalidNumericLiteral, match="integer string conversion"):
            normalize(too_long)
        with pytest.raises(InvalidNumericLiteral, match="integer string conversion"):
            normalize(-too_long)


# =============================================================================
# DECIMAL_STRING
# =============================================================================


class TestNormalizeDecimalString:
    """Tests for string inputs"""

    def test_plain_literal(self) -> None:
        assert normalize("10") == 10

    def test_signed_literals(self) -> None:
        assert normalize("+10") == 10
        assert normalize("-10") == -10
        assert normalize("-0") == 0

    def test_leading_zeros(self) -> None:
        assert normalize("007") == 7

    def test_beyond_64_bits(self) -> None:
        assert normalize(BIG_TEXT) == BIG

    def test_never_goes_through_float(self) -> None:
        """2**53 + 1 is not representable as a double"""
        assert normalize("9007199254740993") == 2**53 + 1

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "1.5", "10.0", "1e3", "0x10", " 10", "10 ", "1_000", "--1", "+", "١٠"],
    )
    def test_malformed_literals_rejected(self, text: str) -> None:
        with pytest.raises(InvalidNumericLiteral, match="not a base-10 integer literal"):
            normalize(text)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            normalize("ten")

    def test_error_keeps_value(self) -> None:
        with pytest.raises(InvalidNumericLiteral) as exc_info:
            normalize("ten")
        assert exc_info.value.value == "ten"

    @no_digit_limit_skip
    def test_digit_limit_reported_as_invalid_literal(self) -> None:
        text = "1" * (sys.get_int_max_str_digits() + 1)
        with pytest.raises(InvalidNumericLiteral) as exc_info:
            normalize(text)
        assert isinstance(exc_info.value.__cause__, ValueError)


# =============================================================================
# NATIVE
# =============================================================================


class TestNormalizeNative:
    """Tests for numpy scalars and floats"""

    def test_numpy_integers(self) -> None:
        assert normalize(np.int64(10)) == 10
        assert normalize(np.int8(-5)) == -5
        assert normalize(np.uint64(2**64 - 1)) == 2**64 - 1

    def test_numpy_result_is_plain_int(self) -> None:
        assert type(normalize(np.int32(1))) is int

    def test_integral_floats(self) -> None:
        assert normalize(10.0) == 10
        assert normalize(-0.0) == 0
        assert normalize(np.float32(3.0)) == 3
        assert normalize(np.float64(-12.0)) == -12

    def test_max_safe_integer_accepted(self) -> None:
        assert normalize(float(MAX_SAFE_INTEGER)) == MAX_SAFE_INTEGER
        assert normalize(-float(MAX_SAFE_INTEGER)) == -MAX_SAFE_INTEGER

    def test_unsafe_float_rejected(self) -> None:
        with pytest.raises(InvalidNumericLiteral, match="outside safe integer range"):
            normalize(2.0**53)
        with pytest.raises(InvalidNumericLiteral, match="outside safe integer range"):
            normalize(-1e20)

    @pytest.mark.parametrize("value", [0.5, 10.25, -1.5, np.float32(2.5)])
    def test_fractional_rejected_not_truncated(self, value) -> None:
        with pytest.raises(InvalidNumericLiteral, match="fractional value"):
            normalize(value)

    @pytest.mark.skipif(
        np.finfo(np.longdouble).nmant <= np.finfo(np.float64).nmant,
        reason="longdouble is no wider than float64 on this platform",
    )
    def test_longdouble_fraction_not_rounded_away(self) -> None:
        """2**52 + 0.5 is exact in longdouble but rounds to 2**52 as a float64"""
        value = np.longdouble(2**52) + np.longdouble(0.5)
        with pytest.raises(InvalidNumericLiteral, match="fractional value"):
            normalize(value)
        assert normalize(np.longdouble(2**52)) == 2**52

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf"), np.nan])
    def test_non_finite_rejected(self, value) -> None:
        with pytest.raises(InvalidNumericLiteral, match="not a finite number"):
            normalize(value)


# =============================================================================
# POLICY
# =============================================================================


class TestNumericPolicy:
    """Tests for NumericPolicy switches"""

    def test_floats_can_be_disabled(self) -> None:
        policy = NumericPolicy(allow_native_floats=False)
        with pytest.raises(InvalidNumericLiteral, match="float inputs are disabled"):
            normalize(10.0, policy)

    def test_disabled_floats_keep_numpy_integers(self) -> None:
        policy = NumericPolicy(allow_native_floats=False)
        assert normalize(np.int64(10), policy) == 10

    def test_custom_safe_bound(self) -> None:
        policy = NumericPolicy(max_safe_integer=1000)
        assert normalize(1000.0, policy) == 1000
        with pytest.raises(InvalidNumericLiteral):
            normalize(1001.0, policy)

    def test_policy_does_not_affect_strings_and_ints(self) -> None:
        policy = NumericPolicy(allow_native_floats=False, max_safe_integer=1)
        assert normalize(BIG_TEXT, policy) == BIG
        assert normalize(BIG, policy) == BIG
