"""
Engineering value parsing.

Converts component value strings such as ``"100k"`` or ``"22pF"`` into
numbers so components can be ordered by value.
"""

import re

from .constants import SI_MULTIPLIERS

_VALUE_RE = re.compile(
    r"^\s*(\d+)(?:\.\d*)?\s*([" + "".join(SI_MULTIPLIERS) + r"])?"
)


def value_to_number(value: str | None) -> float | None:
    """
    Convert an engineering value string to a number.

    Only the leading integer digits and an optional single SI prefix are
    used. A fractional part after the integer digits is skipped, so
    ``"4.7u"`` yields ``4e-6``. Trailing unit text (``"Ω"``, ``"F"``) is
    ignored.

    Args:
        value: The raw value string.

    Returns:
        The scaled magnitude, or ``None`` if the string does not start
        with digits.

    Example::

        value_to_number("100k")   # 100000.0
        value_to_number("10nF")   # 1e-08
        value_to_number("DNP")    # None
    """
    if value is None:
        return None

    m = _VALUE_RE.match(value)
    if m is None:
        return None

    multiplier = SI_MULTIPLIERS[m.group(2)] if m.group(2) else 1.0
    return float(int(m.group(1))) * multiplier
