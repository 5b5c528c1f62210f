"""
Includes cache — share code between blocks of one document.

A block whose meta contains ``include <name>`` is stored under
``name``.  Inside it, a ``// - <key>`` line stores everything above it
as ``<name>-<key>`` as well, and is itself left out.  Later blocks pull
stored code in with ``// @include: <name>`` (or ``<name>-<key>``).

The cache belongs to the caller: create one per document, pass it to
every block of that document, discard it afterwards.  Re-adding a name
overwrites it.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

INCLUDE_META_RE = re.compile(r"\binclude\s+([\w-]+)\b")
INCLUDE_MARKER_RE = re.compile(r"^[ \t]*//[ \t]*@include:[ \t]*(\S+)[ \t]*$", re.MULTILINE)
SECTION_PREFIX = "// - "


def parse_include_meta(meta: str) -> str | None:
    """Return the include name declared in a block's meta, if any."""
    match = INCLUDE_META_RE.search(meta or "")
    return match.group(1) if match else None


class IncludesCache:

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map: dict[str, str] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._map

    def __len__(self) -> int:
        return len(self._map)

    def get(self, name: str) -> str | None:
        return self._map.get(name)

    def keys(self) -> list[str]:
        return list(self._map)

    def add(self, name: str, code: str) -> None:
        lines: list[str] = []
        for line in code.split("\n"):
            stripped = line.strip()
            if stripped.startswith(SECTION_PREFIX):
                key = stripped[len(SECTION_PREFIX):].split(" ")[0]
                self._map[f"{name}-{key}"] = "\n".join(lines)
            else:
                lines.append(line)
        self._map[name] = "\n".join(lines)
        logger.debug("Stored include %r (%d line(s))", name, len(lines))

    def apply(self, code: str) -> str:
        """Replace every ``// @include: <key>`` line with the stored code."""

        def _substitute(match: re.Match) -> str:
            key = match.group(1)
            stored = self._map.get(key)
            if stored is None:
                logger.warning("Unknown include %r (known: %s)", key, ", ".join(self._map) or "none")
                return match.group(0)
            return stored

        return INCLUDE_MARKER_RE.sub(_substitute, code)
