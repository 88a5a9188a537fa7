"""
Core math modules for bigcheck

Normalization, comparison and formatting of arbitrary-precision integers.
"""

# Value Normalizer
from bigcheck.core.math.normalizer import (
    DEFAULT_POLICY,
    MAX_SAFE_INTEGER,
    NumericInput,
    NumericKind,
    NumericPolicy,
    NumericValue,
    classify,
    normalize,
)

# Comparator Set
from bigcheck.core.math.comparators import (
    at_least,
    at_most,
    equal,
    greater_than,
    in_range,
    less_than,
)

# Message Formatter
from bigcheck.core.math.formatting import format_canonical, format_value

__all__ = [
    # Normalizer: Constants
    "DEFAULT_POLICY",
    "MAX_SAFE_INTEGER",
    # Normalizer: Types
    "NumericInput",
    "NumericKind",
    "NumericPolicy",
    "NumericValue",
    # Normalizer: Functions
    "classify",
    "normalize",
    # Comparators
    "at_least",
    "at_most",
    "equal",
    "greater_than",
    "in_range",
    "less_than",
    # Formatter
    "format_canonical",
    "format_value",
]
