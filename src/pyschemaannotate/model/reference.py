"""
Designator (reference) parsing.

A designator such as ``"R3"`` is made of a letter prefix and a number.
Designators that have not been annotated yet end in one or more ``?``
characters (``"U?"``) and carry no number.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_REFERENCE_RE = re.compile(r"([A-Za-z]+)?(\d+|\?+)?")


@dataclass(frozen=True)
class ParsedReference:
    """
    Parsed representation of a designator string.

    Attributes:
        reference: The original designator string.
        ref_letters: Leading letters (e.g. ``"R"``), or ``None`` if the
            designator does not start with a letter.
        ref_number: Numeric suffix, or ``None`` if the designator is
            unassigned (``"R?"``) or has no numeric suffix.
    """

    reference: str
    ref_letters: str | None
    ref_number: int | None

    @classmethod
    def parse(cls, reference: str) -> "ParsedReference":
        """
        Split a designator into its letters and number.

        Never raises: malformed designators degrade to ``None`` parts.

        Examples::

            ParsedReference.parse("R3")      # ref_letters="R", ref_number=3
            ParsedReference.parse("U?")      # ref_letters="U", ref_number=None
            ParsedReference.parse("#PWR01")  # ref_letters=None, ref_number=None
        """
        m = _REFERENCE_RE.match(reference)
        letters = m.group(1) if m else None
        suffix = m.group(2) if m else None

        number = None
        if suffix is not None and suffix.isdigit():
            number = int(suffix)

        return cls(reference=reference, ref_letters=letters, ref_number=number)

    @property
    def is_assigned(self) -> bool:
        return self.ref_number is not None


def format_reference(ref_letters: str | None, ref_number: int | None) -> str:
    """
    Build a designator from its parts.

    Args:
        ref_letters: The letter prefix (e.g. ``"C"``).
        ref_number: The designator number, or ``None`` to omit it.

    Returns:
        str: Formatted designator (e.g. ``"C12"``).
    """
    letters = ref_letters or ""
    if ref_number is None:
        return letters
    return f"{letters}{ref_number}"
