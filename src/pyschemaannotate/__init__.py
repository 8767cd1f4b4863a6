"""
pyschemaannotate Library.

Conflict detection and annotation for legacy KiCad (.sch) schematics.
"""

from .analysis.conflicts import distinct_components, find_problems
from .analysis.scanner import scan_document
from .annotation.annotator import annotate
from .annotation.resolver import increment_all, next_available, resolve_problem
from .annotation.strategies import AnnotateStrategy, FixStrategy
from .exceptions import (
    ComponentIndexError,
    SchematicError,
    SchematicFormatError,
    SchematicFormatWarning,
    StaleAnalysisError,
    UnknownStrategyError,
)
from .model.component import SchematicComponent, component_from_lines
from .model.fields import FieldEntry
from .model.problem import Problem, ProblemKind, describe_component
from .model.reference import ParsedReference, format_reference
from .model.values import value_to_number
from .schematic import Schematic
from .utils.export_utils import (
    export_components_to_csv,
    export_components_to_excel,
    read_schematic,
    write_schematic,
)
from .utils.sorting import component_sort_key, natural_sort_key
