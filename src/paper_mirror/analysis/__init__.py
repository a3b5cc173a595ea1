"""
Stylometric Analysis Module

Segmentation, style metrics, mirror scoring, fidelity guardrails and
citation hints for Chinese academic text.
"""

from .text import Sentence, normalize_text, is_markdown_heading, get_body_text, split_sentences
from .rules import AnalysisRules, CitationReason, ConnectorCategory, DEFAULT_RULES
from .metrics import DetailedMetrics, calculate_metrics
from .mirror import (
    DEFAULT_WEIGHTS,
    MirrorScore,
    MirrorWeights,
    calculate_mirror_score,
    generate_mirror_score,
)
from .fidelity import (
    AlertType,
    FidelityAlert,
    FidelityGuardrails,
    calculate_fidelity_guardrails,
    extract_acronyms,
    extract_numbers,
)
from .citations import CitationReport, CitationSuggestion, generate_citation_suggestions
from .report import AnalysisMode, AnalysisReport, StyleComparison, render_markdown
from .analyzer import AnalysisProgress, PaperAnalyzer

__all__ = [
    # Text
    "Sentence",
    "normalize_text",
    "is_markdown_heading",
    "get_body_text",
    "split_sentences",
    # Rules
    "AnalysisRules",
    "CitationReason",
    "ConnectorCategory",
    "DEFAULT_RULES",
    # Metrics
    "DetailedMetrics",
    "calculate_metrics",
    # Mirror score
    "DEFAULT_WEIGHTS",
    "MirrorScore",
    "MirrorWeights",
    "calculate_mirror_score",
    "generate_mirror_score",
    # Fidelity
    "AlertType",
    "FidelityAlert",
    "FidelityGuardrails",
    "calculate_fidelity_guardrails",
    "extract_acronyms",
    "extract_numbers",
    # Citations
    "CitationReport",
    "CitationSuggestion",
    "generate_citation_suggestions",
    # Report
    "AnalysisMode",
    "AnalysisReport",
    "StyleComparison",
    "render_markdown",
    "AnalysisProgress",
    "PaperAnalyzer",
]
