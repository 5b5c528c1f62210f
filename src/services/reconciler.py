"""
Text reconciler — make the document's text match the analyzer's output.

Runs after cuts, when the document and the rewritten code are expected
to have the same line structure.  Surviving lines get their text
replaced in place (so attached state and line ids are kept); surplus
trailing lines are deleted one by one at the first surplus index.
"""
from __future__ import annotations

import logging

from core.document import SourceDocument

logger = logging.getLogger(__name__)


def reconcile(document: SourceDocument, rewritten_text: str) -> None:
    rewritten = rewritten_text.split("\n")
    current = len(document)
    keep = len(rewritten)

    if keep > current:
        logger.warning(
            "Rewritten code has %d line(s) but only %d survive; dropping %d",
            keep, current, keep - current,
        )

    for position in range(min(current, keep)):
        document.set_text(position, rewritten[position])

    for _ in range(current - keep):
        document.delete_lines([keep])
