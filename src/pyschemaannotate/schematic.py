"""
Schematic document.

The :class:`Schematic` owns the original text of a legacy ``.sch`` file,
the components parsed from it and the problems found among them. It is
the only object the outside world needs: load text, inspect components
and problems, fix or annotate, and regenerate the file.

Regeneration walks the original lines again and swaps every tracked
component block for its current state, so everything the model does not
own (wires, labels, sheet headers, power flags) is written back byte for
byte.
"""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from pyschemaannotate.analysis.conflicts import distinct_components, find_problems
from pyschemaannotate.analysis.scanner import scan_document, segment_lines
from pyschemaannotate.annotation.annotator import annotate as annotate_components
from pyschemaannotate.annotation.resolver import resolve_problem
from pyschemaannotate.annotation.strategies import FixStrategy
from pyschemaannotate.exceptions import (
    ComponentIndexError,
    SchematicError,
    SchematicFormatWarning,
    StaleAnalysisError,
)
from pyschemaannotate.model.component import SchematicComponent, component_from_lines
from pyschemaannotate.model.constants import DEFAULT_FILENAME
from pyschemaannotate.model.problem import Problem
from pyschemaannotate.utils.sorting import component_sort_key

ANALYZED = "analyzed"
DIRTY = "dirty"


class Schematic:
    """
    A parsed legacy schematic.

    Args:
        text: Full contents of the ``.sch`` file.
        filename: Name the file was loaded from, if known.

    Raises:
        SchematicFormatError: If a component block cannot be parsed.

    Example::

        sch = Schematic(text, "amp.sch")
        for problem in sch.problems:
            print(problem.describe())
        sch.annotate(AnnotateStrategy.MOST_COMMON_FIRST)
        Path(sch.suggested_filename()).write_text(sch.generate_file())
    """

    def __init__(self, text: str, filename: str | None = None):
        self.original_filename = filename
        self._original_text = text

        scan = scan_document(text)
        self._original_lines = tuple(scan.lines)
        self._line_endings = tuple(scan.line_endings)
        self._components = tuple(scan.components)

        self._problems: list[Problem] = []
        self._state = DIRTY
        self.analyze()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def original_text(self) -> str:
        return self._original_text

    @property
    def original_lines(self) -> tuple[str, ...]:
        return self._original_lines

    @property
    def components(self) -> tuple[SchematicComponent, ...]:
        """Tracked components in file order. The order never changes."""
        return self._components

    @property
    def state(self) -> str:
        """``"analyzed"`` or ``"dirty"``."""
        return self._state

    @property
    def is_dirty(self) -> bool:
        return self._state == DIRTY

    @property
    def problems(self) -> tuple[Problem, ...]:
        """
        Problems found by the last analysis.

        Raises:
            StaleAnalysisError: If components were modified since then.
        """
        if self.is_dirty:
            raise StaleAnalysisError("problems")
        return tuple(self._problems)

    def component_at(self, index: int) -> SchematicComponent:
        """
        Return the component correlated with the index-th non-power block.

        Raises:
            ComponentIndexError: If the index is out of range, or the
                component stored there was created for another block.
        """
        if not 0 <= index < len(self._components):
            raise ComponentIndexError(index, len(self._components))
        comp = self._components[index]
        if comp.component_index != index:
            raise ComponentIndexError(index, len(self._components), comp.component_index)
        return comp

    def distinct_components(self) -> list[SchematicComponent]:
        """One component per physical part (multi-unit parts collapsed)."""
        return distinct_components(self._components)

    def sorted_components(self, distinct: bool = True) -> list[SchematicComponent]:
        """Components ordered for display by symbol, designator and value."""
        comps: Sequence[SchematicComponent] = (
            self.distinct_components() if distinct else self._components
        )
        return sorted(comps, key=component_sort_key)

    # ------------------------------------------------------------------
    # Analysis and mutation
    # ------------------------------------------------------------------

    def analyze(self) -> tuple[Problem, ...]:
        """Recompute conflict flags and problems."""
        self._problems = find_problems(self._components)
        self._state = ANALYZED
        return tuple(self._problems)

    def mark_dirty(self) -> None:
        """Record that designators changed outside the schematic's own methods."""
        self._state = DIRTY

    def _check_owned(self, problem: Problem) -> None:
        ids = {id(c) for c in self._components}
        if any(id(m) not in ids for m in problem.members):
            raise ValueError("Problem does not belong to this schematic")

    def fix_problem(self, problem: Problem, strategy: str, strict: bool = False) -> bool:
        """
        Resolve one duplicate designator problem and re-analyze.

        Args:
            problem: A problem from :attr:`problems`.
            strategy: One of the :class:`FixStrategy` values.
            strict: Raise on unknown strategies instead of doing nothing.

        Returns:
            bool: True if designators were changed.
        """
        self._check_owned(problem)
        changed = resolve_problem(self._components, problem, strategy, strict)
        if changed:
            self.mark_dirty()
            self.analyze()
        return changed

    def fix_all_problems(
        self, strategy: str = FixStrategy.INCREMENT_ALL, strict: bool = False
    ) -> int:
        """
        Resolve every current problem with one strategy.

        Returns:
            int: Number of problems resolved.
        """
        fixed = 0
        for problem in self.problems:
            if resolve_problem(self._components, problem, strategy, strict):
                fixed += 1
                self.mark_dirty()
        if self.is_dirty:
            self.analyze()
        return fixed

    def annotate(self, strategy: str, strict: bool = False) -> bool:
        """
        Renumber every component with an annotation strategy.

        Args:
            strategy: One of the :class:`AnnotateStrategy` values.
            strict: Raise on unknown strategies instead of doing nothing.

        Returns:
            bool: True if the schematic was annotated.
        """
        problems = annotate_components(self._components, strategy, strict)
        if problems is None:
            return False
        self._problems = problems
        self._state = ANALYZED
        return True

    # ------------------------------------------------------------------
    # Regeneration
    # ------------------------------------------------------------------

    def suggested_filename(self) -> str:
        return self.original_filename or DEFAULT_FILENAME

    def generate_file(self) -> str:
        """
        Produce the file text for the current component state.

        Unmodified schematics regenerate to exactly ``original_text``.

        Raises:
            SchematicError: If the component list no longer matches
                the blocks of the original text.
        """
        lines = self._original_lines
        endings = self._line_endings
        out: list[str] = []
        next_index = 0

        # Structural warnings were already reported on load
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", SchematicFormatWarning)
            for segment in segment_lines(list(lines)):
                block = lines[segment.start : segment.end]
                block_endings = endings[segment.start : segment.end]

                if segment.is_block and component_from_lines(list(block)) is not None:
                    block = self.component_at(next_index).build_lines()
                    next_index += 1

                out.extend(
                    line + ending for line, ending in zip(block, block_endings)
                )

        if next_index != len(self._components):
            raise SchematicError(
                f"Regenerated {next_index} component blocks but the schematic "
                f"holds {len(self._components)} components"
            )

        return "".join(out)
