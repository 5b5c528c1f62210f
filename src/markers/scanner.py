"""
Marker scanner — classify control-comment lines in a raw code block.

Markers are whole-line comments (surrounding whitespace ignored):

    // @strict                  compiler flag / tag / include   FLAG
    // ^?    // ^|              extraction / completion query   QUERY_MARK
    // ---cut--- / ---cut-before---                             CUT_BEFORE
    // ---cut-after---                                          CUT_AFTER
    // ---cut-start---                                          CUT_START
    // ---cut-end---                                            CUT_END

The ``---`` fences around cut delimiters are optional (``//cut-start``).
Classification is table-driven: the first pattern in
:data:`MARKER_PATTERNS` that matches the stripped line wins, so a line
yields at most one marker.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class MarkerKind(Enum):
    FLAG = "flag"
    QUERY_MARK = "query-mark"
    CUT_BEFORE = "cut-before"
    CUT_AFTER = "cut-after"
    CUT_START = "cut-start"
    CUT_END = "cut-end"


@dataclass(frozen=True, slots=True)
class Marker:
    line_index: int
    kind: MarkerKind


MARKER_PATTERNS: tuple[tuple[re.Pattern, MarkerKind], ...] = (
    (re.compile(r"^//\s*(?:---)?cut(?:-before)?(?:---)?$"), MarkerKind.CUT_BEFORE),
    (re.compile(r"^//\s*(?:---)?cut-after(?:---)?$"), MarkerKind.CUT_AFTER),
    (re.compile(r"^//\s*(?:---)?cut-start(?:---)?$"), MarkerKind.CUT_START),
    (re.compile(r"^//\s*(?:---)?cut-end(?:---)?$"), MarkerKind.CUT_END),
    (re.compile(r"^//\s*\^\?\s*$"), MarkerKind.QUERY_MARK),
    (re.compile(r"^//\s*\^\|\s*$"), MarkerKind.QUERY_MARK),
    (re.compile(r"^//\s*@\w+\b.*$"), MarkerKind.FLAG),
)

# Marker kinds whose own line is always removed.
STRIPPED_KINDS: frozenset[MarkerKind] = frozenset({MarkerKind.FLAG, MarkerKind.QUERY_MARK})


def classify(line: str) -> MarkerKind | None:
    """Return the marker kind of *line*, or ``None`` for ordinary code."""
    content = line.strip()
    if not content.startswith("//"):
        return None
    for pattern, kind in MARKER_PATTERNS:
        if pattern.match(content):
            return kind
    return None


def scan(lines: Sequence[str]) -> list[Marker]:
    """Single pass over *lines*; markers come back in line order."""
    markers: list[Marker] = []
    for index, line in enumerate(lines):
        kind = classify(line)
        if kind is not None:
            markers.append(Marker(index, kind))
    return markers
