from markers.scanner import Marker, MarkerKind, MARKER_PATTERNS, classify, scan
from markers.cutter import CutSection, compute_cut_lines, find_cut_sections

__all__ = [
    "Marker",
    "MarkerKind",
    "MARKER_PATTERNS",
    "classify",
    "scan",
    "CutSection",
    "compute_cut_lines",
    "find_cut_sections",
]
