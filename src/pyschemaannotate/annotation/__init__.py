from .annotator import annotate
from .resolver import increment_all, next_available, resolve_problem
from .strategies import AnnotateStrategy, FixStrategy
