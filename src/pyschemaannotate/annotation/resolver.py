"""
Duplicate designator resolution.

Both strategies renumber components in place. Conflict flags on the
other components and the problem list are left as they were; run the
conflict analyzer again before relying on them.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyschemaannotate.model.component import SchematicComponent
from pyschemaannotate.model.problem import Problem

from .strategies import FixStrategy, check_strategy


def _used_numbers(
    components: Sequence[SchematicComponent], ref_letters: str | None
) -> set[int]:
    return {
        c.ref_number
        for c in components
        if c.ref_letters == ref_letters and c.has_designator
    }


def increment_all(
    components: Sequence[SchematicComponent], problem: Problem
) -> None:
    """
    Renumber duplicates as a consecutive run after the canonical component.

    Components with the same letters and a higher number are first moved
    up to make room, e.g. for duplicates ``R1, R1`` and an existing ``R2``,
    ``R2`` becomes ``R3`` and the duplicates become ``R1`` and ``R2``.
    """
    canonical = problem.canonical
    base = canonical.ref_number
    letters = canonical.ref_letters
    shift = len(problem.members) - 1
    member_ids = {id(m) for m in problem.members}

    for comp in components:
        if id(comp) in member_ids or not comp.has_designator:
            continue
        if comp.ref_letters == letters and comp.ref_number >= base + 1:
            comp.set_ref_number(comp.ref_number + shift)

    for offset, member in enumerate(problem.members):
        member.set_ref_number(base + offset)
        member.has_conflict = False


def next_available(
    components: Sequence[SchematicComponent], problem: Problem
) -> None:
    """
    Give each duplicate the lowest unused number above the canonical one.

    The canonical component keeps its designator. Numbers handed out to
    earlier duplicates count as used for later ones.
    """
    canonical = problem.canonical
    used = _used_numbers(components, canonical.ref_letters)

    for member in problem.duplicates:
        number = canonical.ref_number + 1
        while number in used:
            number += 1
        member.set_ref_number(number)
        used.add(number)

    for member in problem.members:
        member.has_conflict = False


_RESOLVERS = {
    FixStrategy.INCREMENT_ALL: increment_all,
    FixStrategy.NEXT_AVAILABLE: next_available,
}


def resolve_problem(
    components: Sequence[SchematicComponent],
    problem: Problem,
    strategy: str,
    strict: bool = False,
) -> bool:
    """
    Resolve one duplicate designator problem.

    Args:
        components: All components of the schematic.
        problem: The problem to fix.
        strategy: One of the :class:`FixStrategy` values.
        strict: Raise on unknown strategies instead of doing nothing.

    Returns:
        bool: True if components were renumbered.

    Raises:
        UnknownStrategyError: If ``strict`` is set and the strategy is unknown.
    """
    if not check_strategy(strategy, FixStrategy.ALL, strict):
        return False
    _RESOLVERS[strategy](components, problem)
    return True
