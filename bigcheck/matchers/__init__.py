"""Matchers: bignumber comparisons registered into a chaining grammar."""

from .registry import (
    DEFAULT_BINDINGS,
    DEFAULT_RANGE_BINDINGS,
    MatcherConfig,
    bignumber_plugin,
    build_matcher,
    build_range_matcher,
    failure_message,
    make_bignumber_plugin,
    range_failure_message,
    register_matchers,
)

__all__ = [
    "DEFAULT_BINDINGS",
    "DEFAULT_RANGE_BINDINGS",
    "MatcherConfig",
    "bignumber_plugin",
    "build_matcher",
    "build_range_matcher",
    "failure_message",
    "make_bignumber_plugin",
    "range_failure_message",
    "register_matchers",
]
