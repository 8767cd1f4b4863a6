from .component import SchematicComponent, component_from_lines
from .fields import FieldEntry
from .problem import Problem, ProblemKind, describe_component
from .reference import ParsedReference, format_reference
from .values import value_to_number
