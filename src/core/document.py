"""
SourceDocument — ordered collection of SourceLines for one code block.

This is the host document model the compositor works against.  It
exposes exactly the operations the pipeline needs:

- ``get_line``        → look up a surviving line by position
- ``edit_text``       → replace a column range of a line
- ``delete_lines``    → remove a batch of lines in one step
- ``add_annotation``  → attach an annotation to a line

Deletion is done as tombstone + compaction: all requested positions are
resolved against the *current* layout, marked, and removed in a single
pass, after which every surviving line gets its new ``index``.  Callers
never see an intermediate layout.

Every mutation is appended to ``history`` as a :class:`MutationRecord`
so callers can inspect the exact sequence of calls that was issued.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, TYPE_CHECKING

from core.source_line import SourceLine

if TYPE_CHECKING:
    from core.annotation import Annotation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MutationRecord:
    """Describes a mutation that was applied to a :class:`SourceDocument`.

    Attributes:
        kind:       ``"delete"`` | ``"edit"`` | ``"attach"``
        positions:  Positions targeted, valid at the time of the call.
                    Deletes may target several; edits and attaches one.
        old_text:   Text before an edit (``None`` otherwise).
        new_text:   Text after an edit (``None`` otherwise).
        annotation: The attached annotation (``None`` unless attach).
    """
    kind: str
    positions: tuple[int, ...]
    old_text: Optional[str] = None
    new_text: Optional[str] = None
    annotation: Optional[Annotation] = None


class SourceDocument:
    """
    Mutable ordered collection of :class:`SourceLine` objects.

    Internal invariant: ``_lines[i].index == i`` and
    ``_index[line.line_id] == line.index`` for every line.
    """

    __slots__ = ("language", "meta", "_lines", "_index", "_lines_cache", "_history")

    def __init__(
        self,
        lines: Optional[Iterable[str]] = None,
        *,
        language: str = "",
        meta: str = "",
    ):
        self.language: str = language
        self.meta: str = meta
        self._lines: list[SourceLine] = [
            SourceLine(index=i, text=text) for i, text in enumerate(lines or ())
        ]
        self._index: dict[str, int] = {}
        self._lines_cache: tuple[SourceLine, ...] | None = None
        self._history: list[MutationRecord] = []
        self._rebuild_index()

    @classmethod
    def from_code(cls, code: str, *, language: str = "", meta: str = "") -> SourceDocument:
        """Split *code* on ``\\n`` (one line per segment, empty code → one empty line)."""
        return cls(code.split("\n"), language=language, meta=meta)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def lines(self) -> tuple[SourceLine, ...]:
        """Return a cached tuple so callers cannot break internal ordering."""
        if self._lines_cache is None:
            self._lines_cache = tuple(self._lines)
        return self._lines_cache

    @property
    def code(self) -> str:
        return "\n".join(line.text for line in self._lines)

    @property
    def texts(self) -> list[str]:
        return [line.text for line in self._lines]

    @property
    def history(self) -> tuple[MutationRecord, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, position: int) -> SourceLine:
        return self._lines[position]

    def get_line(self, position: int) -> SourceLine | None:
        """Return the line at *position*, or ``None`` if it does not exist."""
        if 0 <= position < len(self._lines):
            return self._lines[position]
        return None

    def get_position(self, line_id: str) -> int:
        """Return the 0-based position of a line.  Raises KeyError."""
        return self._index[line_id]

    def has_line(self, line_id: str) -> bool:
        return line_id in self._index

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def edit_text(self, position: int, start: int, end: int, replacement: str) -> None:
        """Replace columns ``[start, end)`` of the line at *position*."""
        line = self._require(position)
        old = line.text
        if start < 0 or end < start:
            raise ValueError(f"Invalid column range [{start}, {end})")
        line.text = old[:start] + replacement + old[end:]
        self._history.append(MutationRecord(
            "edit", (position,), old_text=old, new_text=line.text,
        ))

    def set_text(self, position: int, text: str) -> None:
        """Replace the full text of the line at *position*."""
        self.edit_text(position, 0, len(self._require(position).text), text)

    def delete_lines(self, positions: Iterable[int]) -> list[SourceLine]:
        """Delete all *positions* in one step and return the removed lines.

        Positions are interpreted against the layout *before* the call.
        Duplicates are ignored.  Raises ``IndexError`` for any position
        out of range, before anything is removed.
        """
        doomed = sorted(set(positions))
        if not doomed:
            return []
        for pos in doomed:
            self._require(pos)

        tombstones = set(doomed)
        removed: list[SourceLine] = []
        survivors: list[SourceLine] = []
        for line in self._lines:
            (removed if line.index in tombstones else survivors).append(line)

        self._lines = survivors
        self._rebuild_index()
        self._history.append(MutationRecord("delete", tuple(doomed)))
        logger.debug("Deleted %d line(s), %d remain", len(removed), len(self._lines))
        return removed

    def add_annotation(self, position: int, annotation: Annotation) -> None:
        """Attach *annotation* to the line at *position*."""
        line = self._require(position)
        line.annotations.append(annotation)
        self._history.append(MutationRecord("attach", (position,), annotation=annotation))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, position: int) -> SourceLine:
        if not (0 <= position < len(self._lines)):
            raise IndexError(f"Position {position} out of range")
        return self._lines[position]

    def _rebuild_index(self) -> None:
        for i, line in enumerate(self._lines):
            line.index = i
        self._index = {line.line_id: i for i, line in enumerate(self._lines)}
        self._lines_cache = None
