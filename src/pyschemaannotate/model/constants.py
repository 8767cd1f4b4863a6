"""
Constants for the legacy KiCad schematic (.sch) text format.

Block markers, line tags and the SI prefix table used to compare
component values.
"""

# Block delimiters
COMP_START = "$Comp"
COMP_END = "$EndComp"

# Line tags inside a component block
TAG_LIBRARY = "L"  # L <lib>:<name> <reference>
TAG_UNIT = "U"  # U <unit> <convert> <timestamp>
TAG_POSITION = "P"  # P <x> <y>
TAG_FIELD = "F"  # F <n> "<text>" <orient> <x> <y> <size>  <flags> <hjust> <vjust+style> ["name"]

# Field numbers with a fixed meaning
FIELD_REFERENCE = "0"
FIELD_VALUE = "1"
FIELD_FOOTPRINT = "2"

# Designators starting with this are power symbols / power flags
POWER_FLAG_PREFIX = "#"

# Unassigned designator numbers are written as one or more of these
UNASSIGNED_MARK = "?"

# SI prefixes used in component values. Deci, centi, deca and hecto are
# left out as they are not used in electronics. Micro is accepted as
# both 'u' and 'μ'.
SI_MULTIPLIERS: dict[str, float] = {
    "y": 1e-24,
    "z": 1e-21,
    "a": 1e-18,
    "f": 1e-15,
    "p": 1e-12,
    "n": 1e-9,
    "u": 1e-6,
    "μ": 1e-6,
    "m": 1e-3,
    "k": 1e3,
    "M": 1e6,
    "G": 1e9,
    "T": 1e12,
    "P": 1e15,
    "E": 1e18,
    "Z": 1e21,
    "Y": 1e24,
}

# Unit letters for display ("R1 Unit A")
UNIT_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Filename offered for saving when the input had none
DEFAULT_FILENAME = "schematic.sch"

# Component list export
COMPONENT_EXPORT_HEADERS = [
    "Reference",
    "Value",
    "Component",
    "Footprint",
    "Units",
    "Conflict",
]
