"""
Region cutter — decide which raw lines disappear from the rendered block.

Removed lines are the union of:

- every FLAG / QUERY_MARK line,
- ``[0, k]`` for the first CUT_BEFORE marker at ``k`` (leading cut),
- ``[k, last]`` for the first CUT_AFTER marker at ``k`` (trailing cut),
- ``[start, end]`` for every interior CUT_START … CUT_END pair.

Interior pairs are matched greedily: from a cursor, take the next
CUT_START, then the next CUT_END after it; continue after that end.  A
CUT_START with no later CUT_END stops the search, so any pairs after it
are not cut either.

The result is applied by the caller as one batch deletion.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from markers.scanner import Marker, MarkerKind, STRIPPED_KINDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CutSection:
    """Inclusive line range ``[start, end]`` removed by a start/end pair."""
    start: int
    end: int

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"CutSection start ({self.start}) must precede end ({self.end})")

    def lines(self) -> range:
        return range(self.start, self.end + 1)


def _first(markers: Sequence[Marker], kind: MarkerKind) -> int | None:
    for marker in markers:
        if marker.kind is kind:
            return marker.line_index
    return None


def find_cut_sections(markers: Sequence[Marker]) -> list[CutSection]:
    """Pair CUT_START / CUT_END markers in scan order."""
    starts = [m.line_index for m in markers if m.kind is MarkerKind.CUT_START]
    ends = [m.line_index for m in markers if m.kind is MarkerKind.CUT_END]

    sections: list[CutSection] = []
    cursor = -1
    while True:
        start = next((s for s in starts if s > cursor), None)
        if start is None:
            break
        end = next((e for e in ends if e > start), None)
        if end is None:
            logger.debug("Unmatched cut-start at line %d; interior scan stopped", start)
            break
        sections.append(CutSection(start, end))
        cursor = end
    return sections


def compute_cut_lines(lines: Sequence[str], markers: Sequence[Marker]) -> set[int]:
    """Return the full set of raw line indices to delete."""
    last = len(lines) - 1
    doomed: set[int] = {m.line_index for m in markers if m.kind in STRIPPED_KINDS}

    cut_before = _first(markers, MarkerKind.CUT_BEFORE)
    if cut_before is not None:
        doomed.update(range(0, cut_before + 1))

    cut_after = _first(markers, MarkerKind.CUT_AFTER)
    if cut_after is not None:
        doomed.update(range(cut_after, last + 1))

    for section in find_cut_sections(markers):
        doomed.update(section.lines())

    logger.debug("Cutting %d of %d line(s)", len(doomed), len(lines))
    return doomed
