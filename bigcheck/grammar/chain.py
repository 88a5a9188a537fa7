"""
Chaining assertion grammar

Minimal expect()-style grammar that hosts matchers registered by plugins:

    expect(actual).to.be.at.least(expected)
    expect(actual).not_.to.equal(expected)
    expect(actual, "balance after mint").to.eq(expected)

Structure:
- language chains (to, be, at, ...) return the same Assertion
- properties (not_) set flags on the Assertion and return it
- methods are looked up in the Grammar's method table, called with the
  Assertion as context, and return the Assertion so chains continue

A Grammar instance owns its tables; plugins extend it through use(plugin).
Nothing is registered globally.
"""

import keyword
import logging
from typing import Any, Callable, Dict, Final, FrozenSet, List, NoReturn, Optional, Tuple

from bigcheck.exceptions import AssertionFailed
from bigcheck.grammar.protocol import MatcherMethod

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Words that only improve readability; Python keywords carry a trailing "_"
CHAIN_WORDS: Final[FrozenSet[str]] = frozenset(
    {
        "to",
        "be",
        "been",
        "is_",
        "that",
        "which",
        "and_",
        "has",
        "have",
        "with_",
        "at",
        "of",
        "same",
        "does",
        "still",
        "also",
    }
)

NEGATE_FLAG: Final[str] = "negate"
MESSAGE_FLAG: Final[str] = "message"

PropertyHook = Callable[["Assertion"], None]
Plugin = Callable[["Grammar"], None]


def _negate(assertion: "Assertion") -> None:
    assertion.set_flag(NEGATE_FLAG, True)


# =============================================================================
# GRAMMAR
# =============================================================================


class Grammar:
    """
    Method and property tables for one assertion grammar.

    Exposes the extension API (add_method, add_property) to plugins and
    creates Assertions through expect().
    """

    def __init__(self):
        self._methods: Dict[str, MatcherMethod] = {}
        self._properties: Dict[str, PropertyHook] = {}
        self._plugins: List[Plugin] = []

        self.add_property("not_", _negate)

    @staticmethod
    def _check_name(name: str) -> None:
        if not name.isidentifier() or keyword.iskeyword(name):
            raise ValueError(f"{name!r} is not a usable attribute name")
        if name.startswith("_"):
            raise ValueError(f"{name!r}: names starting with '_' are reserved")
        if name in CHAIN_WORDS:
            raise ValueError(f"{name!r} is a language chain")
        # Real attributes win over __getattr__, so such an entry is unreachable
        if hasattr(Assertion, name):
            raise ValueError(f"{name!r} is reserved by Assertion")

    def add_method(self, name: str, method: MatcherMethod) -> None:
        """
        Register a chainable method.

        Re-registering a name replaces the previous method.

        Args:
            name: Attribute name used in chains
            method: Callable (context, *args, **kwargs) -> None

        Raises:
            ValueError: If the name is not usable or is already a property
        """
        self._check_name(name)
        if name in self._properties:
            raise ValueError(f"{name!r} is already registered as a property")
        if name in self._methods:
            logger.debug("Overwriting assertion method %r", name)
        self._methods[name] = method

    def add_property(self, name: str, hook: PropertyHook) -> None:
        """
        Register a property (attribute access without call, e.g. not_).

        Raises:
            ValueError: If the name is not usable or is already a method
        """
        self._check_name(name)
        if name in self._methods:
            raise ValueError(f"{name!r} is already registered as a method")
        self._properties[name] = hook

    def has_method(self, name: str) -> bool:
        return name in self._methods

    @property
    def method_names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._methods))

    def use(self, plugin: Plugin) -> "Grammar":
        """
        Apply a plugin once; later calls with the same plugin are no-ops.

        Returns:
            self, so calls can be chained
        """
        if plugin in self._plugins:
            return self
        plugin(self)
        self._plugins.append(plugin)
        logger.debug(
            "Applied plugin %s (%d methods registered)",
            getattr(plugin, "__name__", repr(plugin)),
            len(self._methods),
        )
        return self

    def expect(self, value: Any, message: Optional[str] = None) -> "Assertion":
        """
        Start an assertion chain.

        Args:
            value: Actual value under test
            message: Optional prefix for failure messages
        """
        return Assertion(self, value, message)

    def _resolve(self, name: str) -> Optional[Tuple[str, Callable[..., Any]]]:
        if name in self._properties:
            return "property", self._properties[name]
        if name in self._methods:
            return "method", self._methods[name]
        return None


# =============================================================================
# ASSERTION
# =============================================================================


class Assertion:
    """
    One assertion chain: the subject plus its flags.

    Implements grammar.protocol.AssertionContext.
    """

    __slots__ = ("_grammar", "_subject", "_flags")

    def __init__(self, grammar: Grammar, subject: Any, message: Optional[str] = None):
        self._grammar = grammar
        self._subject = subject
        self._flags: Dict[str, Any] = {}
        if message:
            self._flags[MESSAGE_FLAG] = message

    @property
    def subject(self) -> Any:
        return self._subject

    def flag(self, name: str, default: Any = None) -> Any:
        return self._flags.get(name, default)

    def set_flag(self, name: str, value: Any) -> None:
        self._flags[name] = value

    def fail(
        self,
        message: str,
        actual: Optional[str] = None,
        expected: Optional[str] = None,
    ) -> NoReturn:
        custom = self.flag(MESSAGE_FLAG)
        if custom:
            message = f"{custom}: {message}"
        raise AssertionFailed(message, actual=actual, expected=expected)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        if name in CHAIN_WORDS:
            return self

        resolved = self._grammar._resolve(name)
        if resolved is None:
            raise AttributeError(f"Unknown assertion {name!r}")

        kind, target = resolved
        if kind == "property":
            target(self)
            return self

        def call(*args: Any, **kwargs: Any) -> "Assertion":
            target(self, *args, **kwargs)
            return self

        call.__name__ = name
        return call

    def __repr__(self) -> str:
        return f"Assertion(subject={self._subject!r}, flags={self._flags!r})"
