"""
Matcher Registrations

Binds every comparator (plus negation and aliases) into a host grammar:

    equal  / eq    ->  equal
    above  / gt    ->  greater_than
    below  / lt    ->  less_than
    least  / gte   ->  at_least      (expect(x).to.be.at.least(y))
    most   / lte   ->  at_most       (expect(x).to.be.at.most(y))
    within         ->  in_range      (expect(x).to.be.within(lo, hi))

Each matcher:
1. Normalizes the subject and every expected argument independently
   (any pairing of native number / decimal string / int)
2. Evaluates the bound comparator, inverted under the "negate" flag
3. On mismatch calls context.fail() with
   Expected "<actual>" to be <phrase> <expected>
   Expected "<actual>" NOT to be <phrase> <expected>

Registration is a plugin applied through Grammar.use(); the plugin only sees
the grammar's extension API.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Final, Iterable, Optional, Tuple

from bigcheck.core.domain.binding import MatcherBinding, RangeBinding, Relation
from bigcheck.core.math.comparators import (
    at_least,
    at_most,
    equal,
    greater_than,
    in_range,
    less_than,
)
from bigcheck.core.math.formatting import format_canonical
from bigcheck.core.math.normalizer import DEFAULT_POLICY, NumericPolicy, normalize
from bigcheck.grammar.chain import NEGATE_FLAG
from bigcheck.grammar.protocol import AssertionContext, ExtensionAPI, MatcherMethod

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class MatcherConfig:
    """Registration settings."""

    register_aliases: bool = True  # eq, gt, lt, gte, lte
    policy: NumericPolicy = DEFAULT_POLICY


# =============================================================================
# BINDINGS
# =============================================================================

DEFAULT_BINDINGS: Final[Tuple[MatcherBinding, ...]] = (
    MatcherBinding(name="equal", aliases=("eq",), relation=Relation.EQUAL, comparator=equal),
    MatcherBinding(
        name="above", aliases=("gt",), relation=Relation.ABOVE, comparator=greater_than
    ),
    MatcherBinding(name="below", aliases=("lt",), relation=Relation.BELOW, comparator=less_than),
    MatcherBinding(
        name="least", aliases=("gte",), relation=Relation.AT_LEAST, comparator=at_least
    ),
    MatcherBinding(name="most", aliases=("lte",), relation=Relation.AT_MOST, comparator=at_most),
)

DEFAULT_RANGE_BINDINGS: Final[Tuple[RangeBinding, ...]] = (
    RangeBinding(name="within", relation=Relation.WITHIN, comparator=in_range),
)


# =============================================================================
# FAILURE MESSAGES
# =============================================================================


def _verb(negated: bool) -> str:
    return "NOT to be" if negated else "to be"


def failure_message(actual: str, relation: Relation, expected: str, negated: bool) -> str:
    """
    Message for a failed binary matcher.

    Examples:
        >>> failure_message("10", Relation.EQUAL, "11", negated=False)
        'Expected "10" to be equal 11'
        >>> failure_message("10", Relation.ABOVE, "9", negated=True)
        'Expected "10" NOT to be above 9'
    """
    return f'Expected "{actual}" {_verb(negated)} {relation.phrase} {expected}'


def range_failure_message(actual: str, start: str, finish: str, negated: bool) -> str:
    """Message for a failed range matcher: Expected "5" to be within [6,9]."""
    return f'Expected "{actual}" {_verb(negated)} {Relation.WITHIN.phrase} [{start},{finish}]'


def _is_negated(context: AssertionContext, negatable: bool) -> bool:
    return negatable and bool(context.flag(NEGATE_FLAG, False))


# =============================================================================
# MATCHER FACTORIES
# =============================================================================


def build_matcher(binding: MatcherBinding, policy: NumericPolicy = DEFAULT_POLICY) -> MatcherMethod:
    """
    Create the grammar method for a binary binding.

    Args:
        binding: Binding to expose
        policy: Normalization policy for both sides

    Returns:
        Callable (context, expected) -> None
    """

    def matcher(context: AssertionContext, expected: Any) -> None:
        actual_value = normalize(context.subject, policy)
        expected_value = normalize(expected, policy)

        negated = _is_negated(context, binding.negatable)
        if binding.comparator(actual_value, expected_value) != negated:
            return

        actual_text = format_canonical(actual_value)
        expected_text = format_canonical(expected_value)
        message = failure_message(actual_text, binding.relation, expected_text, negated)
        logger.debug("Matcher %r failed: %s", binding.name, message)
        context.fail(message, actual=actual_text, expected=expected_text)

    matcher.__name__ = binding.name
    matcher.__qualname__ = binding.name
    return matcher


def build_range_matcher(binding: RangeBinding, policy: NumericPolicy = DEFAULT_POLICY) -> MatcherMethod:
    """Create the grammar method for a range binding: (context, start, finish) -> None."""

    def matcher(context: AssertionContext, start: Any, finish: Any) -> None:
        actual_value = normalize(context.subject, policy)
        start_value = normalize(start, policy)
        finish_value = normalize(finish, policy)

        negated = _is_negated(context, binding.negatable)
        if binding.comparator(actual_value, start_value, finish_value) != negated:
            return

        actual_text = format_canonical(actual_value)
        start_text = format_canonical(start_value)
        finish_text = format_canonical(finish_value)
        message = range_failure_message(actual_text, start_text, finish_text, negated)
        logger.debug("Matcher %r failed: %s", binding.name, message)
        context.fail(message, actual=actual_text, expected=f"[{start_text},{finish_text}]")

    matcher.__name__ = binding.name
    matcher.__qualname__ = binding.name
    return matcher


# =============================================================================
# REGISTRATION
# =============================================================================


def register_matchers(
    api: ExtensionAPI,
    config: Optional[MatcherConfig] = None,
    bindings: Iterable[MatcherBinding] = DEFAULT_BINDINGS,
    range_bindings: Iterable[RangeBinding] = DEFAULT_RANGE_BINDINGS,
) -> None:
    """
    Register all matchers into a grammar.

    Args:
        api: Grammar extension API (add_method)
        config: Registration settings (default: MatcherConfig())
        bindings: Binary bindings to register
        range_bindings: Range bindings to register
    """
    config = config or MatcherConfig()

    pairs = [(b, build_matcher(b, config.policy)) for b in bindings]
    pairs += [(b, build_range_matcher(b, config.policy)) for b in range_bindings]

    for binding, method in pairs:
        names = binding.names if config.register_aliases else (binding.name,)
        for name in names:
            api.add_method(name, method)
            logger.debug("Registered matcher %r (%s)", name, binding.relation.phrase)


def make_bignumber_plugin(config: Optional[MatcherConfig] = None) -> Callable[[ExtensionAPI], None]:
    """Build a plugin bound to a specific MatcherConfig."""
    config = config or MatcherConfig()

    def bignumber_plugin(api: ExtensionAPI) -> None:
        register_matchers(api, config)

    return bignumber_plugin


def bignumber_plugin(api: ExtensionAPI) -> None:
    """Default plugin: all matchers, aliases on, default numeric policy."""
    register_matchers(api)
