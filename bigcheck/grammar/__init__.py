"""Grammar: chaining assertion grammar and the interfaces matchers depend on.

- chain.Grammar / chain.Assertion: expect()-style grammar with plugin support
- protocol.ExtensionAPI / protocol.AssertionContext: what matchers consume
"""

from .chain import CHAIN_WORDS, MESSAGE_FLAG, NEGATE_FLAG, Assertion, Grammar, Plugin
from .protocol import AssertionContext, ExtensionAPI, MatcherMethod

__all__ = [
    "CHAIN_WORDS",
    "MESSAGE_FLAG",
    "NEGATE_FLAG",
    "Assertion",
    "Grammar",
    "Plugin",
    "AssertionContext",
    "ExtensionAPI",
    "MatcherMethod",
]
