"""
Document scanner.

Splits schematic text into lines and finds the component blocks in it.
The same segmentation is used when loading and when regenerating a file,
so the k-th parsed block always lines up with the k-th component.
"""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterator
from dataclasses import dataclass

from pyschemaannotate.exceptions import SchematicFormatWarning
from pyschemaannotate.model.component import SchematicComponent, component_from_lines
from pyschemaannotate.model.constants import COMP_END, COMP_START

_LINE_BREAK_RE = re.compile(r"(\r\n|\r|\n)")


@dataclass(frozen=True)
class Segment:
    """
    A run of lines: either one line outside any block, or a whole block.

    ``start`` and ``end`` are line indices (end exclusive).
    """

    start: int
    end: int
    is_block: bool


@dataclass
class ScanResult:
    lines: list[str]
    line_endings: list[str]
    components: list[SchematicComponent]


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """
    Split text into lines and their terminators.

    ``"".join(l + e for l, e in zip(lines, endings)) == text`` always
    holds, whatever mix of ``\\n``, ``\\r\\n`` and ``\\r`` the text uses.

    Returns:
        (lines, endings): Lines without terminators, and the terminator
        that followed each line (``""`` for a last line without one).
    """
    parts = _LINE_BREAK_RE.split(text)
    lines = parts[0::2]
    endings = parts[1::2] + [""]
    if lines[-1] == "":
        lines.pop()
        endings.pop()
    return lines, endings


def segment_lines(lines: list[str]) -> Iterator[Segment]:
    """
    Walk the lines and yield text lines and component blocks in order.

    A ``$Comp`` seen while a block is still open, or a block still open at
    the end of the input, closes the open block early and emits a
    :class:`SchematicFormatWarning`.
    """
    pending_start = None

    for i, line in enumerate(lines):
        if line == COMP_START:
            if pending_start is not None:
                warnings.warn(
                    f"Block starting at line {pending_start + 1} has no "
                    f"'{COMP_END}' before the next '{COMP_START}' at line {i + 1}",
                    SchematicFormatWarning,
                    stacklevel=2,
                )
                yield Segment(pending_start, i, True)
            pending_start = i
        elif pending_start is None:
            yield Segment(i, i + 1, False)
        elif line == COMP_END:
            yield Segment(pending_start, i + 1, True)
            pending_start = None

    if pending_start is not None:
        warnings.warn(
            f"Block starting at line {pending_start + 1} has no '{COMP_END}' "
            f"before the end of the file",
            SchematicFormatWarning,
            stacklevel=2,
        )
        yield Segment(pending_start, len(lines), True)


def scan_document(text: str) -> ScanResult:
    """
    Parse the full schematic text.

    Args:
        text: The complete file contents.

    Returns:
        ScanResult: The raw lines, their terminators and the tracked
        components in file order, each with its ``component_index`` set.

    Raises:
        SchematicFormatError: If a block cannot be parsed.
    """
    lines, endings = split_lines(text)
    components: list[SchematicComponent] = []

    for segment in segment_lines(lines):
        if not segment.is_block:
            continue
        comp = component_from_lines(lines[segment.start : segment.end])
        if comp is None:
            continue
        comp.component_index = len(components)
        components.append(comp)

    return ScanResult(lines=lines, line_endings=endings, components=components)
