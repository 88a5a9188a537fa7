"""
Narrow interfaces between matchers and a host assertion grammar.

Matchers only depend on these Protocols, so any grammar (or a test double)
that provides them can host the bignumber matchers.
"""

from typing import Any, Callable, Optional, Protocol


class AssertionContext(Protocol):
    """One in-flight assertion, as seen by a matcher."""

    @property
    def subject(self) -> Any:
        """Actual value captured by expect(...)."""
        ...

    def flag(self, name: str, default: Any = None) -> Any:
        """Read a chaining flag (e.g. "negate")."""
        ...

    def fail(
        self,
        message: str,
        actual: Optional[str] = None,
        expected: Optional[str] = None,
    ) -> None:
        """Raise the grammar's assertion failure. Never returns."""
        ...


# Matcher body: (context, *expected_args) -> None, raising through context.fail
MatcherMethod = Callable[..., None]


class ExtensionAPI(Protocol):
    """Capability handed to plugins at registration time."""

    def add_method(self, name: str, method: MatcherMethod) -> None:
        ...
