"""
Strategy selectors for conflict fixing and annotation.

Selectors are plain strings so they can come straight from a UI or a
command line. Unknown selectors are ignored unless ``strict`` is set.
"""

from pyschemaannotate.exceptions import UnknownStrategyError


class FixStrategy:
    """How a duplicate designator problem is resolved."""

    # Renumber duplicates to follow the canonical one, shifting later parts up
    INCREMENT_ALL = "increment_all"
    # Give each duplicate the first free number after the canonical one
    NEXT_AVAILABLE = "next_available"

    ALL = (INCREMENT_ALL, NEXT_AVAILABLE)


class AnnotateStrategy:
    """Order in which value groups receive designator numbers."""

    MOST_COMMON_FIRST = "most_common_first"
    LEAST_COMMON_FIRST = "least_common_first"
    LOWEST_VALUE_FIRST = "lowest_value_first"
    HIGHEST_VALUE_FIRST = "highest_value_first"

    ALL = (
        MOST_COMMON_FIRST,
        LEAST_COMMON_FIRST,
        LOWEST_VALUE_FIRST,
        HIGHEST_VALUE_FIRST,
    )


def check_strategy(strategy: str, valid: tuple[str, ...], strict: bool) -> bool:
    """
    Check a selector against the known strategies.

    Returns:
        True if the strategy is known, False if it is unknown and
        ``strict`` is off.

    Raises:
        UnknownStrategyError: If the strategy is unknown and ``strict`` is on.
    """
    if strategy in valid:
        return True
    if strict:
        raise UnknownStrategyError(strategy, valid)
    return False
