"""
Exceptions for bigcheck.

Two families:
- input errors (value cannot become a canonical integer), raised before any
  comparator runs
- assertion failures (comparison did not hold), raised through the grammar
"""

from typing import Optional


# =============================================================================
# INPUT ERRORS
# =============================================================================


class InvalidNumericLiteral(ValueError):
    """
    Value cannot be read as an integer.

    Raised for malformed decimal strings ("abc", "1.5", "0x10") and for native
    numbers that are not exact integers (fractional, NaN/Inf, outside the safe
    integer range).
    """

    def __init__(self, value: object, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid numeric literal {value!r}: {reason}")


class UnsupportedNumericType(TypeError):
    """Value is not one of the accepted numeric shapes."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Unsupported numeric input of type {type(value).__name__}: {value!r}"
        )


# =============================================================================
# ASSERTION FAILURES
# =============================================================================


class AssertionFailed(AssertionError):
    """
    Comparison did not hold (after applying negation).

    Subclasses AssertionError so pytest reports it like a plain assert.
    actual/expected carry the canonical decimal strings for diagnostics.
    """

    def __init__(
        self,
        message: str,
        actual: Optional[str] = None,
        expected: Optional[str] = None,
    ):
        self.message = message
        self.actual = actual
        self.expected = expected
        super().__init__(message)
