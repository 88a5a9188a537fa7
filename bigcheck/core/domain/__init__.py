"""
Domain models.

Contains the immutable matcher binding records.
"""

from bigcheck.core.domain.binding import MatcherBinding, RangeBinding, Relation

__all__ = [
    "MatcherBinding",
    "RangeBinding",
    "Relation",
]
