"""
Comparator Set

Five binary predicates over canonical integers with standard total order.
Inputs are always normalized first (see normalizer.normalize); no NaN-like
values exist in this domain, so every predicate is total.

Relations:
- equal          actual == expected
- greater_than   actual >  expected
- less_than      actual <  expected
- at_least       actual >= expected
- at_most        actual <= expected
"""


def equal(actual: int, expected: int) -> bool:
    return actual == expected


def greater_than(actual: int, expected: int) -> bool:
    return actual > expected


def less_than(actual: int, expected: int) -> bool:
    return actual < expected


def at_least(actual: int, expected: int) -> bool:
    return actual >= expected


def at_most(actual: int, expected: int) -> bool:
    return actual <= expected


def in_range(actual: int, start: int, finish: int) -> bool:
    """
    Inclusive range check: start <= actual <= finish.

    An empty range (start > finish) contains nothing.
    """
    return start <= actual <= finish
