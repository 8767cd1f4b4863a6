"""
Component records and the component block builder.

A component block in a legacy schematic looks like::

    $Comp
    L Device:R R1
    U 1 1 5C8A3F2B
    P 5000 3000
    F 0 "R1" H 5070 3046 50  0000 L CNN
    F 1 "10k" H 5070 2955 50  0000 L CNN
    F 2 "Resistor_SMD:R_0603_1608Metric" V 4930 3000 50  0001 C CNN
    F 3 "~" H 5000 3000 50  0001 C CNN
    	1    5000 3000
    	1    0    0    -1
    $EndComp

:func:`component_from_lines` turns such a block into a
:class:`SchematicComponent`, and :meth:`SchematicComponent.build_lines`
turns the (possibly renumbered) record back into block lines.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field, replace

from pyschemaannotate.exceptions import SchematicFormatError, SchematicFormatWarning

from .constants import (
    COMP_END,
    COMP_START,
    FIELD_FOOTPRINT,
    FIELD_REFERENCE,
    FIELD_VALUE,
    POWER_FLAG_PREFIX,
    TAG_FIELD,
    TAG_LIBRARY,
    TAG_POSITION,
    TAG_UNIT,
    UNIT_LETTERS,
)
from .fields import FieldEntry
from .reference import ParsedReference, format_reference
from .values import value_to_number

# Layout slots, in the order the lines appeared in the block
_SLOT_START = "start"
_SLOT_END = "end"
_SLOT_LIBRARY = "library"
_SLOT_UNIT = "unit"
_SLOT_POSITION = "position"
_SLOT_FIELD = "field"
_SLOT_EXTRA = "extra"

LayoutSlot = tuple[str, int]


@dataclass(eq=False)
class SchematicComponent:
    """
    One unit of an electrically relevant part placed in the schematic.

    Units of a multi-unit part (e.g. the gates of a quad NAND) are
    separate records sharing ``reference`` and differing in
    ``unit_number``.

    Attributes:
        component_index: Position in the schematic's component list,
            assigned once at load time.
        component_library: Library part of ``lib:name`` (``None`` for old
            files that write the name alone).
        component_name: Symbol name.
        reference: Full designator, e.g. ``"R3"`` or ``"U?"``.
        ref_letters: Designator letters.
        ref_number: Designator number, ``None`` while unassigned.
        value: Raw value text (field 1).
        numeric_value: Value converted with SI prefixes, or ``None``.
        footprint_library: Library part of the footprint (field 2).
        footprint_name: Footprint name.
        unit_number: Unit token from the ``U`` line.
        unit_timestamp: Timestamp token from the ``U`` line.
        field_entries: All ``F`` lines as :class:`FieldEntry` objects.
        additional_lines: Block lines that are not L/U/P/F, kept verbatim.
        has_conflict: Set by the conflict analyzer only.
    """

    component_index: int | None = None
    component_library: str | None = None
    component_name: str | None = None
    reference: str | None = None
    ref_letters: str | None = None
    ref_number: int | None = None
    value: str | None = None
    numeric_value: float | None = None
    footprint_library: str | None = None
    footprint_name: str | None = None
    unit_number: str | None = None
    unit_timestamp: str | None = None
    field_entries: list[FieldEntry] = field(default_factory=list)
    additional_lines: list[str] = field(default_factory=list)
    has_conflict: bool = False
    unit_line: str | None = None
    position_line: str | None = None
    _layout: list[LayoutSlot] = field(default_factory=list, repr=False)
    # Designator and L line as read, reused while the designator and
    # symbol are unchanged so that unusual spacing survives a round trip.
    _source_reference: str | None = field(default=None, repr=False)
    _source_library: tuple[str | None, str] | None = field(default=None, repr=False)

    # ------------------------------------------------------------------
    # Designator helpers
    # ------------------------------------------------------------------

    @property
    def has_designator(self) -> bool:
        """True once the component has been given a number."""
        return self.ref_number is not None

    @property
    def name(self) -> str | None:
        """The ``lib:name`` token of the ``L`` line."""
        if self.component_name is None:
            return None
        if self.component_library is None:
            return self.component_name
        return f"{self.component_library}:{self.component_name}"

    @property
    def footprint(self) -> str | None:
        if self.footprint_name is None:
            return None
        if self.footprint_library is None:
            return self.footprint_name
        return f"{self.footprint_library}:{self.footprint_name}"

    @property
    def unit_letter(self) -> str:
        """Unit as a letter (``"A"`` for unit 1), or the raw token."""
        if self.unit_number and self.unit_number.isdigit():
            n = int(self.unit_number)
            if 1 <= n <= len(UNIT_LETTERS):
                return UNIT_LETTERS[n - 1]
        return self.unit_number or ""

    def set_reference(self, reference: str) -> None:
        """Replace the designator and re-derive its letters and number."""
        parsed = ParsedReference.parse(reference)
        self.reference = reference
        self.ref_letters = parsed.ref_letters
        self.ref_number = parsed.ref_number

    def set_ref_number(self, ref_number: int) -> None:
        """Give the component a new number, keeping its letters."""
        self.ref_number = ref_number
        self.reference = format_reference(self.ref_letters, ref_number)

    # ------------------------------------------------------------------
    # Regeneration
    # ------------------------------------------------------------------

    def _default_layout(self) -> list[LayoutSlot]:
        layout: list[LayoutSlot] = [(_SLOT_START, 0), (_SLOT_LIBRARY, 0)]
        if self.unit_line is not None:
            layout.append((_SLOT_UNIT, 0))
        if self.position_line is not None:
            layout.append((_SLOT_POSITION, 0))
        layout.extend((_SLOT_FIELD, i) for i in range(len(self.field_entries)))
        layout.extend((_SLOT_EXTRA, i) for i in range(len(self.additional_lines)))
        layout.append((_SLOT_END, 0))
        return layout

    @property
    def is_renumbered(self) -> bool:
        """True if the designator differs from the one read from the file."""
        return self.reference != self._source_reference

    def _library_line(self) -> str:
        source = self._source_library
        if source is not None and not self.is_renumbered and source[0] == self.name:
            return source[1]
        return f"{TAG_LIBRARY} {self.name} {self.reference}"

    def _field_line(self, entry: FieldEntry) -> str:
        if (
            entry.index == FIELD_REFERENCE
            and self.reference is not None
            and self.is_renumbered
        ):
            entry = replace(entry, text=self.reference)
        return entry.to_line()

    def build_lines(self) -> list[str]:
        """
        Render the component back to block lines.

        Once the component is renumbered, the ``L`` line and field 0 carry
        the new designator. Every other line, and those two while the
        designator is unchanged, is re-emitted as read, in the order it
        was read.
        """
        lines = []
        for slot, i in self._layout or self._default_layout():
            if slot == _SLOT_START:
                lines.append(COMP_START)
            elif slot == _SLOT_END:
                lines.append(COMP_END)
            elif slot == _SLOT_LIBRARY:
                lines.append(self._library_line())
            elif slot == _SLOT_UNIT:
                lines.append(self.unit_line)
            elif slot == _SLOT_POSITION:
                lines.append(self.position_line)
            elif slot == _SLOT_FIELD:
                lines.append(self._field_line(self.field_entries[i]))
            else:
                lines.append(self.additional_lines[i])
        return lines


# ----------------------------------------------------------------------
# Builder
# ----------------------------------------------------------------------


def _has_tag(line: str, tag: str) -> bool:
    return line.startswith(tag + " ")


def _process_library_line(comp: SchematicComponent, line: str) -> None:
    # Tokens past the designator are ignored
    parts = line.split()
    if len(parts) < 3:
        raise SchematicFormatError("'L' line has no symbol or designator", line)

    lib, sep, name = parts[1].partition(":")
    if sep:
        comp.component_library = lib
        comp.component_name = name
    else:
        comp.component_name = parts[1]
    comp.set_reference(parts[2])
    comp._source_reference = comp.reference
    comp._source_library = (comp.name, line)


def _process_unit_line(comp: SchematicComponent, line: str) -> None:
    parts = line.split(" ")
    comp.unit_line = line
    comp.unit_number = parts[1] if len(parts) > 1 else None
    comp.unit_timestamp = parts[3] if len(parts) > 3 else None


def _keep_line(comp: SchematicComponent, line: str) -> None:
    comp._layout.append((_SLOT_EXTRA, len(comp.additional_lines)))
    comp.additional_lines.append(line)


def _process_fields(comp: SchematicComponent) -> None:
    """Pull the value and footprint out of the parsed fields."""
    for entry in comp.field_entries:
        if entry.index == FIELD_VALUE:
            comp.value = entry.text
            comp.numeric_value = value_to_number(entry.text)
        elif entry.index == FIELD_FOOTPRINT:
            if not entry.text:
                continue
            lib, sep, name = entry.text.partition(":")
            if sep:
                comp.footprint_library = lib
                comp.footprint_name = name
            else:
                comp.footprint_name = entry.text


def component_from_lines(lines: list[str]) -> SchematicComponent | None:
    """
    Build a component from the raw lines of one block.

    Args:
        lines: Block lines from ``$Comp`` to ``$EndComp`` inclusive,
            without line terminators.

    Returns:
        The parsed component, or ``None`` if the block is a power flag.

    Raises:
        SchematicFormatError: If ``lines`` is empty, does not start with
            ``$Comp``, or has no usable ``L`` line.
    """
    if not lines:
        raise SchematicFormatError("lines are empty")

    if lines[0] != COMP_START:
        raise SchematicFormatError(f"does not start with '{COMP_START}'", lines[0])

    comp = SchematicComponent()
    layout = comp._layout
    seen_library = False

    for line in lines:
        if line == COMP_START:
            layout.append((_SLOT_START, 0))
        elif line == COMP_END:
            layout.append((_SLOT_END, 0))
        elif _has_tag(line, TAG_LIBRARY) and not seen_library:
            _process_library_line(comp, line)
            seen_library = True
            layout.append((_SLOT_LIBRARY, 0))
        elif _has_tag(line, TAG_UNIT) and comp.unit_line is None:
            _process_unit_line(comp, line)
            layout.append((_SLOT_UNIT, 0))
        elif _has_tag(line, TAG_POSITION) and comp.position_line is None:
            comp.position_line = line
            layout.append((_SLOT_POSITION, 0))
        elif _has_tag(line, TAG_FIELD):
            entry = FieldEntry.parse(line)
            if entry is None:
                warnings.warn(
                    f"Unreadable field line kept as-is: {line!r}",
                    SchematicFormatWarning,
                    stacklevel=2,
                )
                _keep_line(comp, line)
            else:
                layout.append((_SLOT_FIELD, len(comp.field_entries)))
                comp.field_entries.append(entry)
        else:
            _keep_line(comp, line)

    if not seen_library:
        raise SchematicFormatError(f"no '{TAG_LIBRARY}' line in block")

    if lines[-1] != COMP_END:
        warnings.warn(
            f"Last line of component {comp.reference} wasn't '{COMP_END}' "
            f"but {lines[-1]!r}",
            SchematicFormatWarning,
            stacklevel=2,
        )

    # Power symbols and power flags are not components we track
    if comp.reference.startswith(POWER_FLAG_PREFIX):
        return None

    _process_fields(comp)
    return comp
