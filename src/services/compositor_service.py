"""
CompositorService — run the annotation pipeline over code blocks.

Per block, strictly in this order:

    includes.apply / includes.add       (when a cache is passed)
    analyzer.analyze(code)              → rewritten code + facts
    scan → compute_cut_lines → delete   (one batch)
    reconcile(rewritten code)
    normalize → resolve → emit

Blocks are processed one at a time; nothing is shared between blocks
except the caller's :class:`IncludesCache`.  A
:class:`core.errors.MarkupRenderError` raised while rendering
documentation aborts the block and reaches the caller unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from annotation_kinds.context import NormalizeContext
from core.annotation import Annotation
from core.document import SourceDocument
from core.facts import AnalysisResult
from core.interfaces import IMarkupRenderer, IStaticAnalyzer
from core.options import CompositorOptions
from infrastructure.markdown_renderer import MarkdownRenderer
from markers import compute_cut_lines, scan
from services.emitter import emit_all
from services.includes import IncludesCache, parse_include_meta
from services.normalizer import normalize_all
from services.overlap_resolver import EqualityPolicy, resolve
from services.reconciler import reconcile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CodeBlock:
    code: str
    language: str
    meta: str = ""


class CompositorService:
    """
    Facade over the whole pipeline.  One instance per configuration.
    """

    def __init__(
        self,
        analyzer: IStaticAnalyzer,
        renderer: Optional[IMarkupRenderer] = None,
        options: Optional[CompositorOptions] = None,
    ):
        self._analyzer: IStaticAnalyzer = analyzer
        self._renderer: IMarkupRenderer = renderer or MarkdownRenderer()
        self._options: CompositorOptions = options or CompositorOptions()
        self._query_policy = EqualityPolicy(self._options.query_equality)
        self._diagnostic_policy = EqualityPolicy(self._options.diagnostic_equality)

    @property
    def options(self) -> CompositorOptions:
        return self._options

    # ------------------------------------------------------------------
    # Block processing
    # ------------------------------------------------------------------

    def process(
        self,
        block: CodeBlock,
        includes: Optional[IncludesCache] = None,
    ) -> SourceDocument:
        """Process one code block and return its annotated document.

        Blocks that are not in an enabled language, or that lack the
        trigger in their meta, come back as an untouched document.
        """
        if not self._options.should_transform(block.language, block.meta):
            logger.debug("Skipping %s block (not triggered)", block.language or "plain")
            return SourceDocument.from_code(block.code, language=block.language, meta=block.meta)

        code = block.code
        if includes is not None:
            code = includes.apply(code)
            name = parse_include_meta(block.meta)
            if name:
                includes.add(name, code)

        analysis = self._analyzer.analyze(
            code, block.language, self._options.merged_compiler_options(),
        )
        document = SourceDocument.from_code(code, language=block.language, meta=block.meta)
        annotations = self.compose(document, analysis)
        logger.info(
            "Processed %s block: %d line(s), %d annotation(s)",
            block.language, len(document), len(annotations),
        )
        return document

    def compose(self, document: SourceDocument, analysis: AnalysisResult) -> list[Annotation]:
        """Apply cuts, reconcile text, and attach annotations to *document*.

        Returns the annotations that were attached, in attachment order
        per line.
        """
        texts = document.texts
        markers = scan(texts)
        document.delete_lines(compute_cut_lines(texts, markers))

        reconcile(document, analysis.code)

        ctx = NormalizeContext(document=document, renderer=self._renderer, options=self._options)
        annotations = normalize_all(analysis.facts(), ctx)
        resolved = resolve(annotations, self._query_policy, self._diagnostic_policy)
        emit_all(document, resolved)
        return [a for line in document.lines for a in line.annotations]
