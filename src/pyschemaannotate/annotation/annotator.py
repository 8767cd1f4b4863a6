"""
Full schematic annotation.

Renumbers every designator, restarting at 1 for each letter prefix.
Within a prefix, components are grouped by value and the groups are
numbered in the order chosen by the strategy, so that e.g. all 100k
resistors receive consecutive designators. Units of one multi-unit part
always share a number.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from pyschemaannotate.analysis.conflicts import find_problems
from pyschemaannotate.model.component import SchematicComponent
from pyschemaannotate.model.problem import Problem

from .resolver import increment_all
from .strategies import AnnotateStrategy, check_strategy

PartBucket = list[SchematicComponent]


@dataclass
class ValueGroup:
    """Components of one letter prefix sharing the same value text."""

    value: str | None
    buckets: list[PartBucket] = field(default_factory=list)

    @property
    def part_count(self) -> int:
        return len(self.buckets)

    @property
    def numeric_value(self) -> float | None:
        return self.buckets[0][0].numeric_value


def _most_common_key(group: ValueGroup) -> int:
    return -group.part_count


def _least_common_key(group: ValueGroup) -> int:
    return group.part_count


def _lowest_value_key(group: ValueGroup) -> tuple[bool, float]:
    # Unparsable values go last
    num = group.numeric_value
    return (num is None, num if num is not None else 0.0)


def _highest_value_key(group: ValueGroup) -> tuple[bool, float]:
    num = group.numeric_value
    return (num is None, -num if num is not None else 0.0)


_ORDER_KEYS: dict[str, Callable[[ValueGroup], object]] = {
    AnnotateStrategy.MOST_COMMON_FIRST: _most_common_key,
    AnnotateStrategy.LEAST_COMMON_FIRST: _least_common_key,
    AnnotateStrategy.LOWEST_VALUE_FIRST: _lowest_value_key,
    AnnotateStrategy.HIGHEST_VALUE_FIRST: _highest_value_key,
}


def group_by_letters(
    components: Sequence[SchematicComponent],
) -> dict[str, list[SchematicComponent]]:
    """Group components by designator letters, skipping letterless ones."""
    groups: dict[str, list[SchematicComponent]] = {}
    for comp in components:
        if comp.ref_letters is None:
            continue
        groups.setdefault(comp.ref_letters, []).append(comp)
    return groups


def part_buckets(components: Sequence[SchematicComponent]) -> list[PartBucket]:
    """
    Cluster unit records into physical parts.

    Units with the same designator join one bucket, as long as the bucket
    does not already hold that unit number.
    """
    buckets: list[PartBucket] = []
    for comp in components:
        for bucket in buckets:
            if bucket[0].reference != comp.reference:
                continue
            if any(b.unit_number == comp.unit_number for b in bucket):
                continue
            bucket.append(comp)
            break
        else:
            buckets.append([comp])
    return buckets


def value_groups(components: Sequence[SchematicComponent]) -> list[ValueGroup]:
    """Split one letter group into value groups, in first-seen order."""
    by_value: dict[str | None, list[SchematicComponent]] = {}
    for comp in components:
        by_value.setdefault(comp.value, []).append(comp)
    return [
        ValueGroup(value=value, buckets=part_buckets(members))
        for value, members in by_value.items()
    ]


def order_value_groups(groups: list[ValueGroup], strategy: str) -> list[ValueGroup]:
    """Sort value groups for a strategy; equal groups keep their order."""
    return sorted(groups, key=_ORDER_KEYS[strategy])


def annotate(
    components: Sequence[SchematicComponent],
    strategy: str,
    strict: bool = False,
) -> list[Problem] | None:
    """
    Renumber all components.

    Existing duplicates are first resolved with
    :func:`~pyschemaannotate.annotation.resolver.increment_all` so that
    every part can be told apart, then each letter group is renumbered
    from 1.

    Args:
        components: All components of the schematic.
        strategy: One of the :class:`AnnotateStrategy` values.
        strict: Raise on unknown strategies instead of doing nothing.

    Returns:
        The problem list after annotation, or ``None`` if the strategy was
        not recognized and nothing was changed.

    Raises:
        UnknownStrategyError: If ``strict`` is set and the strategy is unknown.
    """
    if not check_strategy(strategy, AnnotateStrategy.ALL, strict):
        return None

    for problem in find_problems(components):
        increment_all(components, problem)
    find_problems(components)

    for letter_group in group_by_letters(components).values():
        number = 0
        for group in order_value_groups(value_groups(letter_group), strategy):
            for bucket in group.buckets:
                number += 1
                for comp in bucket:
                    comp.set_ref_number(number)

    return find_problems(components)
