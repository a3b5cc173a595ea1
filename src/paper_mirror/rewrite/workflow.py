"""
Migration Workflow

Sample paper + draft in, three rewritten variants and an analysis
report out. The LLM does the rewriting; the report is computed locally.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from paper_mirror.analysis.analyzer import AnalysisProgress, PaperAnalyzer
from paper_mirror.analysis.report import AnalysisMode, AnalysisReport
from paper_mirror.config import Settings, get_settings
from paper_mirror.ingest.chunker import chunk_document, context_window
from paper_mirror.models.style import DocumentContext, StyleGuide
from paper_mirror.rewrite.service import RewriteService

logger = logging.getLogger(__name__)


@dataclass
class ProgressUpdate:
    stage: str
    current: Optional[int] = None
    total: Optional[int] = None


@dataclass
class MigrationResult:
    conservative: str
    standard: str
    enhanced: str
    style_guide: StyleGuide
    document_context: DocumentContext
    report: AnalysisReport

    def to_dict(self) -> dict:
        return {
            "conservative": self.conservative,
            "standard": self.standard,
            "enhanced": self.enhanced,
            "styleGuide": self.style_guide.model_dump(by_alias=True),
            "documentContext": self.document_context.model_dump(by_alias=True),
            "analysisReport": self.report.to_dict(),
        }


class MigrationWorkflow:
    """
    Runs style extraction, chunked rewriting and local analysis.

    Usage:
        workflow = MigrationWorkflow()
        result = workflow.run(sample_text, draft_text)
    """

    def __init__(
        self,
        service: Optional[RewriteService] = None,
        analyzer: Optional[PaperAnalyzer] = None,
        settings: Optional[Settings] = None,
        progress_callback: Optional[Callable[[ProgressUpdate], None]] = None,
    ):
        self.settings = settings or get_settings()
        self.service = service or RewriteService()
        self.progress_callback = progress_callback

        analyzer = analyzer or PaperAnalyzer(weights=self.settings.mirror_weights)
        if analyzer.progress_callback is None and progress_callback:
            # Injected analyzers are left untouched
            analyzer = PaperAnalyzer(analyzer.rules, analyzer.weights, self._forward_analysis_progress)
        self.analyzer = analyzer

    def _report_progress(self, stage: str, current: Optional[int] = None, total: Optional[int] = None):
        logger.info("%s%s", stage, f" ({current}/{total})" if total else "")
        if self.progress_callback:
            self.progress_callback(ProgressUpdate(stage, current, total))

    def _forward_analysis_progress(self, progress: AnalysisProgress):
        self._report_progress(progress.message, progress.current, progress.total)

    def run(
        self,
        sample_text: str,
        draft_text: str,
        mode: Optional[AnalysisMode] = None,
    ) -> MigrationResult:
        """
        Rewrite the draft in the sample's style and analyze the result.

        Raises:
            LLMError: any backend failure; partial output is discarded
        """
        mode = mode or self.settings.analysis_mode

        self._report_progress("Extracting style guide from sample...")
        style_guide = self.service.extract_style_guide(sample_text)

        self._report_progress("Summarizing draft...")
        document_context = self.service.generate_document_context(draft_text)

        chunks = chunk_document(draft_text, self.settings.chunk_max_chars)
        conservative: list[str] = []
        standard: list[str] = []
        enhanced: list[str] = []

        for chunk in chunks:
            self._report_progress("Rewriting chunks...", chunk.index + 1, len(chunks))
            before, after = context_window(chunks, chunk.index, self.settings.context_chars)
            variants = self.service.rewrite_chunk(
                chunk.text,
                before,
                after,
                style_guide,
                document_context,
                chunk.section_title,
            )
            conservative.append(variants.conservative.strip())
            standard.append(variants.standard.strip())
            enhanced.append(variants.enhanced.strip())

        standard_text = "\n\n".join(standard)
        report = self.analyzer.analyze(sample_text, draft_text, standard_text, mode)

        return MigrationResult(
            conservative="\n\n".join(conservative),
            standard=standard_text,
            enhanced="\n\n".join(enhanced),
            style_guide=style_guide,
            document_context=document_context,
            report=report,
        )
