"""Problems found by the conflict analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .component import SchematicComponent


class ProblemKind:
    """Kinds of problem the analyzer reports."""

    DUPLICATE_DESIGNATOR = "duplicate_designator"


def describe_component(comp: SchematicComponent) -> str:
    """
    Short human-readable description of one component unit.

    Example::

        describe_component(r1)  # "R1 Unit A (value 100k)"
    """
    return f"{comp.reference} Unit {comp.unit_letter} (value {comp.value})"


@dataclass(eq=False)
class Problem:
    """
    A group of components that share a designator and unit.

    Attributes:
        kind: One of the :class:`ProblemKind` values.
        members: The conflicting components; the first one is the
            canonical component, the others follow in file order.
    """

    kind: str
    members: list[SchematicComponent] = field(default_factory=list)

    @property
    def canonical(self) -> SchematicComponent:
        return self.members[0]

    @property
    def duplicates(self) -> list[SchematicComponent]:
        return self.members[1:]

    def describe(self) -> str:
        """
        Human-readable summary, listing members with an Oxford comma.

        Example::

            "Duplicate component references: R1 Unit A (value 10k), "
            "R1 Unit A (value 1k), and R1 Unit A (value 22k)"
        """
        if self.kind != ProblemKind.DUPLICATE_DESIGNATOR:
            return ""

        descriptions = [describe_component(c) for c in self.members]
        head = ", ".join(descriptions[:-1])
        if len(descriptions) > 2:
            head += ","
        return f"Duplicate component references: {head} and {descriptions[-1]}"
