"""Composite analysis report and its Markdown rendering."""

from dataclasses import dataclass
from enum import Enum
import json
from typing import Optional

from .citations import CitationReport
from .fidelity import FidelityGuardrails
from .metrics import DetailedMetrics
from .mirror import MirrorScore


class AnalysisMode(Enum):
    """How much local analysis to run after rewriting."""
    NONE = "none"
    FIDELITY_ONLY = "fidelityOnly"
    FULL = "full"


@dataclass(frozen=True)
class StyleComparison:
    sample: DetailedMetrics
    draft: DetailedMetrics
    rewritten_standard: DetailedMetrics

    def to_dict(self) -> dict:
        return {
            "sample": self.sample.to_dict(),
            "draft": self.draft.to_dict(),
            "rewrittenStandard": self.rewritten_standard.to_dict(),
        }


@dataclass(frozen=True)
class AnalysisReport:
    status: str = "complete"  # complete | partial | error
    message: Optional[str] = None
    mirror_score: Optional[MirrorScore] = None
    style_comparison: Optional[StyleComparison] = None
    fidelity_guardrails: Optional[FidelityGuardrails] = None
    citation_suggestions: Optional[CitationReport] = None

    def to_dict(self) -> dict:
        """Convert to a dictionary, omitting sections that were not computed."""
        d: dict = {"status": self.status}
        if self.message:
            d["message"] = self.message
        if self.mirror_score:
            d["mirrorScore"] = self.mirror_score.to_dict()
        if self.style_comparison:
            d["styleComparison"] = self.style_comparison.to_dict()
        if self.fidelity_guardrails:
            d["fidelityGuardrails"] = self.fidelity_guardrails.to_dict()
        if self.citation_suggestions:
            d["citationSuggestions"] = self.citation_suggestions.to_dict()
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def render_markdown(report: AnalysisReport) -> str:
    """Generate a human-readable Markdown report."""
    lines = [
        "# PaperMirror Analysis Report",
        "",
        f"**Status:** {report.status}",
        "",
    ]
    if report.message:
        lines.extend([f"> {report.message}", ""])

    if report.mirror_score:
        ms = report.mirror_score
        lines.extend([
            "## Mirror Score",
            "",
            "| Comparison | Score |",
            "|------------|-------|",
            f"| Draft vs sample | {ms.draft_to_sample:.1f} |",
            f"| Standard vs sample | {ms.standard_to_sample:.1f} |",
            f"| Improvement | {ms.improvement:+.1f} |",
            "",
        ])

    if report.style_comparison:
        sc = report.style_comparison
        rows = [
            ("Sentences", lambda m: m.sentence_count),
            ("Mean sentence length", lambda m: m.sentence_length.mean),
            ("P50 sentence length", lambda m: m.sentence_length.p50),
            ("P90 sentence length", lambda m: m.sentence_length.p90),
            ("Long sentences (>50) %", lambda m: m.sentence_length.long_rate_50),
            ("Commas / 1k chars", lambda m: m.punctuation_density.comma),
            ("Semicolons / 1k chars", lambda m: m.punctuation_density.semicolon),
            ("Parentheses / 1k chars", lambda m: m.punctuation_density.parenthesis),
            ("Connectors", lambda m: m.connector_counts.total),
            ("Template phrases / 1k chars", lambda m: m.template_counts.per_thousand_chars),
        ]
        lines.extend([
            "## Style Comparison",
            "",
            "| Metric | Sample | Draft | Standard |",
            "|--------|--------|-------|----------|",
        ])
        for label, getter in rows:
            lines.append(
                f"| {label} | {getter(sc.sample)} | {getter(sc.draft)} | {getter(sc.rewritten_standard)} |"
            )
        lines.append("")

    if report.fidelity_guardrails:
        fg = report.fidelity_guardrails
        lines.extend([
            "## Fidelity Guardrails",
            "",
            f"- Number retention: {fg.number_retention_rate:.1f}%",
            f"- Acronym retention: {fg.acronym_retention_rate:.1f}%",
            "",
        ])
        if fg.alerts:
            lines.append("### Alerts")
            lines.append("")
            for alert in fg.alerts:
                where = f"sentence {alert.sentence_index}" if alert.sentence_index >= 0 else "unlocated"
                lines.append(f"- `{alert.type.value}` ({where}): {alert.detail}")
            lines.append("")

    if report.citation_suggestions:
        cs = report.citation_suggestions
        lines.extend([
            "## Citation Suggestions",
            "",
            f"_Rules version {cs.rules_version}_",
            "",
        ])
        if not cs.items:
            lines.append("No sentences flagged.")
        for item in cs.items:
            lines.append(f"- **[{item.reason.value}]** #{item.sentence_index}: {item.sentence_text}")
            for query in item.queries:
                lines.append(f"  - {query}")
        lines.append("")

    return "\n".join(lines)
