"""
Value Normalizer: NumericInput to CanonicalValue

Every accepted representation of an integer is reduced to one canonical
arbitrary-precision value (Python ``int``) before any comparison:

- NATIVE:          float, numpy.floating, numpy.integer (fixed-width machine numbers)
- DECIMAL_STRING:  base-10, optionally signed, ASCII digits only
- BIG_INTEGER:     int (Python's unbounded integer), bool excluded

INVARIANTS:
1. normalize() is pure: the input is never mutated, the same input always
   yields the same integer
2. Fractional values are rejected, never truncated
3. Decimal strings never pass through float conversion
4. Floats outside the safe integer range are rejected (not exactly representable)
5. Every canonical value fits the interpreter's int-to-str digit limit, so it
   can always be formatted
"""

import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Final, Union

import numpy as np

from bigcheck.exceptions import InvalidNumericLiteral, UnsupportedNumericType

# =============================================================================
# CONSTANTS
# =============================================================================

# Largest integer n such that n and n + 1 are both exactly representable
# as IEEE-754 doubles (2**53 - 1)
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Optionally signed base-10 literal, ASCII digits only
_DECIMAL_LITERAL: Final = re.compile(r"[+-]?[0-9]+")

NumericValue = Union[int, float, str, np.integer, np.floating]

# 0 means unlimited (and interpreters without the limit behave that way)
_int_max_str_digits: Final[Callable[[], int]] = getattr(
    sys, "get_int_max_str_digits", lambda: 0
)


# =============================================================================
# TAGGED UNION
# =============================================================================


class NumericKind(str, Enum):
    """Representation tag of a NumericInput."""

    NATIVE = "NATIVE"
    DECIMAL_STRING = "DECIMAL_STRING"
    BIG_INTEGER = "BIG_INTEGER"


def classify(value: Any) -> NumericKind:
    """
    Determine the representation tag of a raw value.

    Args:
        value: Raw value supplied by a test author

    Returns:
        NumericKind of the value

    Raises:
        UnsupportedNumericType: If the value is not one of the accepted shapes
            (bool, None, Decimal, containers, ...)
    """
    # bool is an int subclass; numpy.bool_ is its own scalar type
    if isinstance(value, (bool, np.bool_)):
        raise UnsupportedNumericType(value)
    if isinstance(value, (np.integer, np.floating, float)):
        return NumericKind.NATIVE
    if isinstance(value, int):
        return NumericKind.BIG_INTEGER
    if isinstance(value, str):
        return NumericKind.DECIMAL_STRING
    raise UnsupportedNumericType(value)


@dataclass(frozen=True)
class NumericInput:
    """Raw value together with its representation tag."""

    kind: NumericKind
    raw: Any

    @classmethod
    def of(cls, value: Any) -> "NumericInput":
        return cls(kind=classify(value), raw=value)


# =============================================================================
# POLICY
# =============================================================================


@dataclass(frozen=True)
class NumericPolicy:
    """
    Normalization policy.

    allow_native_floats: accept float / numpy.floating inputs at all
    max_safe_integer: largest magnitude accepted from a float input
    """

    allow_native_floats: bool = True
    max_safe_integer: int = MAX_SAFE_INTEGER


DEFAULT_POLICY: Final[NumericPolicy] = NumericPolicy()


# =============================================================================
# NORMALIZERS (one per NumericKind)
# =============================================================================


def _normalize_native(value: Any, policy: NumericPolicy) -> int:
    if isinstance(value, np.integer):
        return int(value)

    if not policy.allow_native_floats:
        raise InvalidNumericLiteral(value, "float inputs are disabled")

    # Checks run on the original scalar; narrowing a longdouble to float
    # first would round fractions away
    if not np.isfinite(value):
        raise InvalidNumericLiteral(value, "not a finite number")
    if value != np.floor(value):
        raise InvalidNumericLiteral(value, "fractional value")
    # exact for any finite integral scalar
    as_int = int(value)
    if abs(as_int) > policy.max_safe_integer:
        raise InvalidNumericLiteral(
            value, f"outside safe integer range (|x| <= {policy.max_safe_integer})"
        )
    return as_int


def _normalize_decimal_string(value: str, policy: NumericPolicy) -> int:
    if _DECIMAL_LITERAL.fullmatch(value) is None:
        raise InvalidNumericLiteral(value, "not a base-10 integer literal")
    try:
        return int(value, 10)
    except ValueError as e:
        # int() still refuses literals above the interpreter's digit limit
        raise InvalidNumericLiteral(value, str(e)) from e


def _exceeds_str_digit_limit(value: int) -> bool:
    limit = _int_max_str_digits()
    if not limit:
        return False
    # fewer than 3 bits per digit can never reach the limit; skip the power
    if value.bit_length() <= 3 * limit:
        return False
    return abs(value) >= 10**limit


def _normalize_big_integer(value: int, policy: NumericPolicy) -> int:
    result = value if type(value) is int else int(value)
    # Same bound as decimal strings, so every canonical value can be formatted
    if _exceeds_str_digit_limit(result):
        raise InvalidNumericLiteral(
            f"<int with {result.bit_length()} bits>",
            f"exceeds the limit ({_int_max_str_digits()} digits) for integer string conversion",
        )
    return result


_NORMALIZERS: Final[Dict[NumericKind, Callable[[Any, NumericPolicy], int]]] = {
    NumericKind.NATIVE: _normalize_native,
    NumericKind.DECIMAL_STRING: _normalize_decimal_string,
    NumericKind.BIG_INTEGER: _normalize_big_integer,
}


# =============================================================================
# PUBLIC API
# =============================================================================


def normalize(
    value: Union[NumericValue, NumericInput],
    policy: NumericPolicy = DEFAULT_POLICY,
) -> int:
    """
    Convert any accepted representation to its canonical integer.

    Args:
        value: Raw value or an already classified NumericInput
        policy: Normalization policy (default: DEFAULT_POLICY)

    Returns:
        Canonical integer (the same object for a plain int input)

    Raises:
        InvalidNumericLiteral: Malformed string, fractional or unsafe float
        UnsupportedNumericType: Value outside the accepted shapes

    Examples:
        >>> normalize("10")
        10
        >>> normalize(np.int64(-7))
        -7
        >>> normalize(12.0)
        12
        >>> normalize("1.5")
        Traceback (most recent call last):
        ...
        bigcheck.exceptions.InvalidNumericLiteral: Invalid numeric literal '1.5': not a base-10 integer literal
    """
    numeric = value if isinstance(value, NumericInput) else NumericInput.of(value)
    return _NORMALIZERS[numeric.kind](numeric.raw, policy)

