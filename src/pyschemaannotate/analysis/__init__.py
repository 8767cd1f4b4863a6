from .conflicts import count_units, distinct_components, find_problems
from .scanner import ScanResult, Segment, scan_document, segment_lines, split_lines
