"""
bigcheck: arbitrary-precision integer matchers for expect()-style assertions.

    from bigcheck import expect

    expect(10).to.equal("10")
    expect("340282366920938463463374607431768211456").to.be.above(2**64)
    expect(np.int64(10)).not_.to.be.at.least(11)
"""

from bigcheck.exceptions import AssertionFailed, InvalidNumericLiteral, UnsupportedNumericType
from bigcheck.core.math import MAX_SAFE_INTEGER, NumericKind, NumericPolicy, format_value, normalize
from bigcheck.grammar import Assertion, Grammar
from bigcheck.matchers import MatcherConfig, bignumber_plugin, make_bignumber_plugin

# Default grammar with the bignumber matchers installed once at import
grammar_instance = Grammar().use(bignumber_plugin)
expect = grammar_instance.expect

__all__ = [
    # Exceptions
    "AssertionFailed",
    "InvalidNumericLiteral",
    "UnsupportedNumericType",
    # Numeric core
    "MAX_SAFE_INTEGER",
    "NumericKind",
    "NumericPolicy",
    "format_value",
    "normalize",
    # Grammar
    "Assertion",
    "Grammar",
    "grammar_instance",
    "expect",
    # Matchers
    "MatcherConfig",
    "bignumber_plugin",
    "make_bignumber_plugin",
]
