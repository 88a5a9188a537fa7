"""
Hypothesis configuration and shared strategies for property tests.

Profile is chosen with HYPOTHESIS_PROFILE (default / ci / dev).
"""

import os
from typing import Any, Callable, List, Tuple

import numpy as np
from hypothesis import HealthCheck, Verbosity, settings
from hypothesis import strategies as st

from bigcheck.core.math.normalizer import MAX_SAFE_INTEGER

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "ci",
    max_examples=500,
    verbosity=Verbosity.quiet,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "dev",
    max_examples=25,
    verbosity=Verbosity.normal,
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# STRATEGIES
# =============================================================================

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

# Well past 64 bits on both sides, kept under the interpreter's str digit limit
BIG_BOUND = 10**80

big_integers = st.integers(min_value=-BIG_BOUND, max_value=BIG_BOUND)

# Small range so equal / adjacent pairs show up often
close_integers = st.integers(min_value=-3, max_value=3)


def available_shapes(value: int) -> List[Tuple[str, Callable[[int], Any]]]:
    """Representations that can hold value exactly."""
    shapes: List[Tuple[str, Callable[[int], Any]]] = [
        ("bigint", int),
        ("string", str),
    ]
    if INT64_MIN <= value <= INT64_MAX:
        shapes.append(("int64", np.int64))
    if abs(value) <= MAX_SAFE_INTEGER:
        shapes.append(("float", float))
    return shapes


@st.composite
def shaped_integers(draw: st.DrawFn, elements: st.SearchStrategy = big_integers) -> Tuple[int, Any]:
    """Strategy for (value, value in a randomly chosen representation)."""
    value = draw(elements)
    _, shape = draw(st.sampled_from(available_shapes(value)))
    return value, shape(value)
