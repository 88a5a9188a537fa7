"""
Message Formatter

Canonical base-10 rendering of integers for failure messages:
- leading "-" for negative values, no "+" for positive ones
- no leading zeros (zero renders as bare "0")
- reversible: normalize(format_canonical(v)) == v
"""

from bigcheck.core.math.normalizer import DEFAULT_POLICY, NumericPolicy, NumericValue, normalize


def format_canonical(value: int) -> str:
    """
    Render a canonical integer as a decimal string.

    Args:
        value: Canonical integer

    Returns:
        Base-10 representation

    Examples:
        >>> format_canonical(-42)
        '-42'
        >>> format_canonical(0)
        '0'
    """
    # int() first: IntEnum and friends override __str__
    return str(int(value))


def format_value(value: NumericValue, policy: NumericPolicy = DEFAULT_POLICY) -> str:
    """Normalize a raw value and render it (e.g. "007" -> "7", 12.0 -> "12")."""
    return format_canonical(normalize(value, policy))
