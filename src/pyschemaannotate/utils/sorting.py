"""
Display ordering for component lists.
"""

from __future__ import annotations

import re

from pyschemaannotate.model.component import SchematicComponent


def natural_sort_key(text: str) -> list:
    """Natural sort key for designators and values.

    Splits *text* on digit boundaries so that numeric parts compare as
    integers rather than lexicographically.

    Example:
        >>> natural_sort_key("2k2") < natural_sort_key("10k")
        True
    """
    return [int(p) if p.isdecimal() else p for p in re.split(r"(\d+)", text)]


def _none_last(value):
    return (value is None, value if value is not None else "")


def component_sort_key(comp: SchematicComponent) -> tuple:
    """
    Sort key grouping components by symbol, then designator, then value.

    Designator numbers compare numerically so ``R2`` sorts before ``R10``;
    unassigned designators sort after numbered ones.

    Example::

        sorted(components, key=component_sort_key)
    """
    number = comp.ref_number
    value = comp.value
    return (
        _none_last(comp.name),
        _none_last(comp.ref_letters),
        (number is None, number if number is not None else 0),
        (value is None, natural_sort_key(value) if value is not None else []),
    )
