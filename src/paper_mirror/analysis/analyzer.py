"""
Paper Analyzer

Stateless entry point that runs the stylometric analyses with one
injected ruleset and weight set and assembles the composite report.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .citations import CitationReport, generate_citation_suggestions
from .fidelity import FidelityGuardrails, calculate_fidelity_guardrails
from .metrics import DetailedMetrics, calculate_metrics
from .mirror import DEFAULT_WEIGHTS, MirrorScore, MirrorWeights, generate_mirror_score
from .report import AnalysisMode, AnalysisReport, StyleComparison
from .rules import AnalysisRules, DEFAULT_RULES


@dataclass
class AnalysisProgress:
    """Progress tracking for report analysis."""
    phase: str
    current: int
    total: int
    message: str = ""


class PaperAnalyzer:
    """
    Runs metrics, mirror score, fidelity and citation analyses.

    Usage:
        analyzer = PaperAnalyzer()
        report = analyzer.analyze(sample, draft, standard)
    """

    def __init__(
        self,
        rules: AnalysisRules = DEFAULT_RULES,
        weights: MirrorWeights = DEFAULT_WEIGHTS,
        progress_callback: Optional[Callable[[AnalysisProgress], None]] = None,
    ):
        self.rules = rules
        self.weights = weights
        self.progress_callback = progress_callback

    def _report_progress(self, phase: str, current: int, total: int, message: str = ""):
        if self.progress_callback:
            self.progress_callback(AnalysisProgress(phase, current, total, message))

    def metrics(self, text: str) -> DetailedMetrics:
        return calculate_metrics(text, self.rules)

    def mirror_score(
        self,
        sample: DetailedMetrics,
        draft: DetailedMetrics,
        standard: DetailedMetrics,
    ) -> MirrorScore:
        return generate_mirror_score(sample, draft, standard, self.weights)

    def fidelity(self, draft_text: str, standard_text: str) -> FidelityGuardrails:
        return calculate_fidelity_guardrails(draft_text, standard_text, self.rules)

    def citations(self, draft_text: str) -> CitationReport:
        return generate_citation_suggestions(draft_text, self.rules)

    def analyze(
        self,
        sample_text: str,
        draft_text: str,
        standard_text: str,
        mode: AnalysisMode = AnalysisMode.FULL,
    ) -> AnalysisReport:
        """
        Build the composite report for one rewrite.

        Args:
            sample_text: Reference paper whose style is the target
            draft_text: Original draft
            standard_text: Rewritten standard variant
            mode: none, fidelity only, or full analysis

        Returns:
            AnalysisReport; status "partial" when there is no rewritten text
        """
        if mode is AnalysisMode.NONE:
            return AnalysisReport(status="complete", message="Local analysis disabled.")

        if not standard_text.strip():
            return AnalysisReport(
                status="partial",
                message="No rewritten standard text; analysis skipped.",
            )

        total = 2 if mode is AnalysisMode.FIDELITY_ONLY else 5
        self._report_progress("fidelity", 1, total, "Running fidelity checks...")
        fidelity = self.fidelity(draft_text, standard_text)

        if mode is AnalysisMode.FIDELITY_ONLY:
            self._report_progress("complete", total, total, "Analysis complete!")
            return AnalysisReport(status="complete", fidelity_guardrails=fidelity)

        self._report_progress("metrics", 2, total, "Calculating style metrics...")
        comparison = StyleComparison(
            sample=self.metrics(sample_text),
            draft=self.metrics(draft_text),
            rewritten_standard=self.metrics(standard_text),
        )

        self._report_progress("mirror", 3, total, "Calculating mirror score...")
        mirror = self.mirror_score(comparison.sample, comparison.draft, comparison.rewritten_standard)

        self._report_progress("citations", 4, total, "Scanning for citation needs...")
        citations = self.citations(draft_text)

        self._report_progress("complete", total, total, "Analysis complete!")
        return AnalysisReport(
            status="complete",
            mirror_score=mirror,
            style_comparison=comparison,
            fidelity_guardrails=fidelity,
            citation_suggestions=citations,
        )
