"""
Component field lines (``F`` lines) of a legacy schematic block.

A field line looks like::

    F 1 "10k" H 5070 2955 50  0000 L CNN

i.e. field number, quoted text, orientation, x, y, text size, flags,
horizontal justification and a three-character group of vertical
justification, italic and bold. User fields (number 4 and up) carry
their quoted name as a trailing token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .constants import TAG_FIELD

_QUOTED = r'"((?:\\.|[^"\\])*)"'

_FIELD_RE = re.compile(
    r"^" + TAG_FIELD + r" (\S+) " + _QUOTED
    + r" (\S+) (\S+) (\S+) (\S+)  (\S+) (\S+) (\S)(\S)(\S)"
    + r"(?: " + _QUOTED + r")?$"
)

_UNESCAPE_RE = re.compile(r'\\(["\\])')


def unescape_text(quoted: str) -> str:
    """Turn the content between the quotes of a field into plain text."""
    return _UNESCAPE_RE.sub(r"\1", quoted)


def escape_text(text: str) -> str:
    """Escape plain text so it can be written between quotes."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


@dataclass
class FieldEntry:
    """
    One positional field of a component.

    Attributes:
        index: Field number as written in the file (``"0"`` reference,
            ``"1"`` value, ``"2"`` footprint, ``"3"`` datasheet, ...).
        text: Unescaped field text.
        orientation: ``"H"`` or ``"V"``.
        x, y: Text position, kept as written.
        size: Text size, kept as written.
        flags: Visibility flags (e.g. ``"0000"``).
        hjustify: Horizontal justification (``L``, ``C``, ``R``).
        vjustify: Vertical justification (``T``, ``C``, ``B``).
        italic: ``"I"`` or ``"N"``.
        bold: ``"B"`` or ``"N"``.
        name: Field name for user fields, or ``None``.
    """

    index: str
    text: str
    orientation: str
    x: str
    y: str
    size: str
    flags: str
    hjustify: str
    vjustify: str
    italic: str
    bold: str
    name: str | None = None
    # Quoted forms as read, reused while the text is unchanged so that
    # unusual escapes survive a round trip.
    _source_text: tuple[str, str] | None = field(
        default=None, repr=False, compare=False
    )
    _source_name: tuple[str, str] | None = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def parse(cls, line: str) -> "FieldEntry | None":
        """
        Parse a raw ``F`` line.

        Returns:
            A :class:`FieldEntry`, or ``None`` if the line does not follow
            the field grammar.
        """
        m = _FIELD_RE.match(line)
        if m is None:
            return None

        raw_text = m.group(2)
        raw_name = m.group(12)
        text = unescape_text(raw_text)
        name = unescape_text(raw_name) if raw_name is not None else None

        return cls(
            index=m.group(1),
            text=text,
            orientation=m.group(3),
            x=m.group(4),
            y=m.group(5),
            size=m.group(6),
            flags=m.group(7),
            hjustify=m.group(8),
            vjustify=m.group(9),
            italic=m.group(10),
            bold=m.group(11),
            name=name,
            _source_text=(text, raw_text),
            _source_name=(name, raw_name) if raw_name is not None else None,
        )

    @staticmethod
    def _quote(value: str, source: tuple[str, str] | None) -> str:
        if source is not None and source[0] == value:
            return f'"{source[1]}"'
        return f'"{escape_text(value)}"'

    def to_line(self) -> str:
        """Render this field back to its ``F`` line."""
        parts = [
            TAG_FIELD,
            self.index,
            self._quote(self.text, self._source_text),
            self.orientation,
            self.x,
            self.y,
            self.size,
            "",  # the format puts two spaces before the flags
            self.flags,
            self.hjustify,
            f"{self.vjustify}{self.italic}{self.bold}",
        ]
        if self.name is not None:
            parts.append(self._quote(self.name, self._source_name))
        return " ".join(parts)
