"""
MatcherBinding: how a comparator is exposed in the chaining grammar

Immutable Pydantic models, built once at import time and shared read-only by
every assertion in the process.

- MatcherBinding: binary relation (actual vs one expected value)
- RangeBinding:   inclusive range relation (actual vs start and finish)
"""

from enum import Enum
from typing import Callable, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class Relation(str, Enum):
    """
    Relation phrase used in failure messages.

    Rendered as: Expected "<actual>" to be <phrase> <expected>
    """

    EQUAL = "equal"
    ABOVE = "above"
    BELOW = "below"
    AT_LEAST = "at least"
    AT_MOST = "at most"
    WITHIN = "within"

    @property
    def phrase(self) -> str:
        return self.value


# =============================================================================
# HELPERS
# =============================================================================


def _check_identifier(name: str) -> str:
    if not name.isidentifier():
        raise ValueError(f"matcher name {name!r} is not a valid identifier")
    return name


# =============================================================================
# BINDING MODELS
# =============================================================================


class _BaseBinding(BaseModel):
    name: str = Field(..., min_length=1, description="Canonical method name")
    aliases: Tuple[str, ...] = Field(default=(), description="Alternative method names")
    relation: Relation = Field(..., description="Relation phrase for messages")
    negatable: bool = Field(True, description="Honours the grammar's negate flag")

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_identifier(v)

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        for alias in v:
            _check_identifier(alias)
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate aliases in {v}")
        return v

    @model_validator(mode="after")
    def validate_name_not_aliased(self):
        """Canonical name must not reappear among the aliases."""
        if self.name in self.aliases:
            raise ValueError(f"name {self.name!r} repeated in aliases")
        return self

    @property
    def names(self) -> Tuple[str, ...]:
        """Canonical name followed by aliases."""
        return (self.name,) + self.aliases


class MatcherBinding(_BaseBinding):
    """
    Binary matcher: comparator(actual, expected) -> bool.

    Examples:
        >>> MatcherBinding(name="above", aliases=("gt",), relation=Relation.ABOVE,
        ...                comparator=greater_than)
    """

    comparator: Callable[[int, int], bool] = Field(
        ..., description="Pure predicate over canonical integers"
    )


class RangeBinding(_BaseBinding):
    """Range matcher: comparator(actual, start, finish) -> bool."""

    comparator: Callable[[int, int, int], bool] = Field(
        ..., description="Pure predicate over canonical integers"
    )
