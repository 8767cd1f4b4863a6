"""
Conflict analysis.

Finds components that share both designator and unit number. Components
whose designator has no number yet (``"R?"``) are not annotated and are
never reported.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyschemaannotate.model.component import SchematicComponent
from pyschemaannotate.model.problem import Problem, ProblemKind


def find_problems(components: Sequence[SchematicComponent]) -> list[Problem]:
    """
    Detect duplicate designators and flag the components involved.

    Every component's ``has_conflict`` is recomputed. The returned list is
    ordered by the position of the first duplicate of each designator.

    Args:
        components: The components in file order.

    Returns:
        list[Problem]: One problem per duplicated (reference, unit) pair,
        canonical component first.
    """
    first_seen: dict[tuple[str, str | None], SchematicComponent] = {}
    groups: dict[tuple[str, str | None], list[SchematicComponent]] = {}

    for comp in components:
        comp.has_conflict = False

    for comp in components:
        if not comp.has_designator:
            continue

        key = (comp.reference, comp.unit_number)
        canonical = first_seen.get(key)
        if canonical is None:
            first_seen[key] = comp
            continue

        canonical.has_conflict = True
        comp.has_conflict = True
        groups.setdefault(key, [canonical]).append(comp)

    return [
        Problem(kind=ProblemKind.DUPLICATE_DESIGNATOR, members=members)
        for members in groups.values()
    ]


def distinct_components(
    components: Sequence[SchematicComponent],
) -> list[SchematicComponent]:
    """
    Collapse units to one entry per physical part.

    The first unit seen for each designator represents the part.
    Components without an assigned number are always kept separately.
    """
    seen: set[str] = set()
    distinct = []
    for comp in components:
        if comp.has_designator:
            if comp.reference in seen:
                continue
            seen.add(comp.reference)
        distinct.append(comp)
    return distinct


def count_units(
    components: Sequence[SchematicComponent],
) -> dict[str, int]:
    """Number of unit records per assigned designator."""
    counts: dict[str, int] = {}
    for comp in components:
        if comp.has_designator:
            counts[comp.reference] = counts.get(comp.reference, 0) + 1
    return counts
