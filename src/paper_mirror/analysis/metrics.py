"""
Stylometric Metrics

Document-level style profile used for the three-way comparison
(sample vs draft vs rewritten standard).
"""

from dataclasses import dataclass, asdict
import math
import re

from .rules import AnalysisRules, ConnectorCategory, DEFAULT_RULES
from .text import get_body_text, split_sentences


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with .5 going up, so 0.25 -> 0.3 rather than banker's 0.2."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def percentile(sorted_values: list[float], p: float) -> float:
    """
    Percentile by linear interpolation between order statistics.

    index = p/100 * (n - 1), interpolated between floor and ceil.
    """
    if not sorted_values:
        return 0
    index = (p / 100) * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return sorted_values[lower]
    return sorted_values[lower] + (sorted_values[upper] - sorted_values[lower]) * (index - lower)


def count_occurrences(text: str, pattern: str | re.Pattern) -> int:
    """Count non-overlapping literal occurrences, or regex matches for a compiled pattern."""
    if isinstance(pattern, str):
        return text.count(pattern) if pattern else 0
    return sum(1 for _ in pattern.finditer(text))


@dataclass(frozen=True)
class SentenceLengthStats:
    mean: float = 0
    p50: float = 0
    p90: float = 0
    long_rate_50: float = 0  # % of sentences longer than 50 chars


@dataclass(frozen=True)
class PunctuationDensity:
    """Occurrences per 1000 characters of body text."""
    comma: float = 0
    semicolon: float = 0
    parenthesis: float = 0


@dataclass(frozen=True)
class ConnectorCounts:
    causal: int = 0
    adversative: int = 0
    additive: int = 0
    emphatic: int = 0
    total: int = 0

    def get(self, category: ConnectorCategory) -> int:
        return getattr(self, category.value)


@dataclass(frozen=True)
class TemplateCounts:
    count: int = 0
    per_thousand_chars: float = 0


@dataclass(frozen=True)
class DetailedMetrics:
    """Style fingerprint of one document."""

    sentence_length: SentenceLengthStats = SentenceLengthStats()
    punctuation_density: PunctuationDensity = PunctuationDensity()
    connector_counts: ConnectorCounts = ConnectorCounts()
    template_counts: TemplateCounts = TemplateCounts()
    text_length_chars: int = 0
    sentence_count: int = 0

    def to_dict(self) -> dict:
        """Convert to the camelCase report shape."""
        sl = self.sentence_length
        tc = self.template_counts
        return {
            "sentenceLength": {
                "mean": sl.mean,
                "p50": sl.p50,
                "p90": sl.p90,
                "longRate50": sl.long_rate_50,
            },
            "punctuationDensity": asdict(self.punctuation_density),
            "connectorCounts": asdict(self.connector_counts),
            "templateCounts": {
                "count": tc.count,
                "perThousandChars": tc.per_thousand_chars,
            },
            "textLengthChars": self.text_length_chars,
            "sentenceCount": self.sentence_count,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "DetailedMetrics":
        """Create from the camelCase report shape."""
        sl = d.get("sentenceLength", {})
        tc = d.get("templateCounts", {})
        return cls(
            sentence_length=SentenceLengthStats(
                mean=sl.get("mean", 0),
                p50=sl.get("p50", 0),
                p90=sl.get("p90", 0),
                long_rate_50=sl.get("longRate50", 0),
            ),
            punctuation_density=PunctuationDensity(**d.get("punctuationDensity", {})),
            connector_counts=ConnectorCounts(**d.get("connectorCounts", {})),
            template_counts=TemplateCounts(
                count=tc.get("count", 0),
                per_thousand_chars=tc.get("perThousandChars", 0),
            ),
            text_length_chars=d.get("textLengthChars", 0),
            sentence_count=d.get("sentenceCount", 0),
        )


def calculate_metrics(text: str, rules: AnalysisRules = DEFAULT_RULES) -> DetailedMetrics:
    """
    Calculate the style profile of a document.

    Sentences come from the full normalized text; every density is taken
    over the body text (headings removed).

    Args:
        text: Raw document text (Markdown allowed)
        rules: Word lists and thresholds to use

    Returns:
        DetailedMetrics, all zeros for empty input
    """
    body_text = get_body_text(text)
    sentences = split_sentences(text)
    text_length = len(body_text)

    # Sentence length statistics
    lengths = [len(s.text) for s in sentences]
    sorted_lengths = sorted(lengths)
    long_count = sum(1 for n in lengths if n > rules.long_sentence_chars)

    sentence_length = SentenceLengthStats(
        mean=round_half_up(sum(lengths) / len(lengths)) if lengths else 0,
        p50=round_half_up(percentile(sorted_lengths, 50)),
        p90=round_half_up(percentile(sorted_lengths, 90)),
        long_rate_50=round_half_up(long_count / len(lengths) * 100) if lengths else 0,
    )

    # Punctuation density per 1000 chars, full-width and ASCII forms together
    comma = count_occurrences(body_text, "，") + count_occurrences(body_text, ",")
    semicolon = count_occurrences(body_text, "；") + count_occurrences(body_text, ";")
    parenthesis = sum(count_occurrences(body_text, ch) for ch in "（）()")

    per_thousand = 1000 / text_length if text_length > 0 else 0
    punctuation_density = PunctuationDensity(
        comma=round_half_up(comma * per_thousand),
        semicolon=round_half_up(semicolon * per_thousand),
        parenthesis=round_half_up(parenthesis * per_thousand),
    )

    # Connector words
    per_category = {
        category: sum(count_occurrences(body_text, word) for word in words)
        for category, words in rules.connector_words.items()
    }
    connector_counts = ConnectorCounts(
        causal=per_category.get(ConnectorCategory.CAUSAL, 0),
        adversative=per_category.get(ConnectorCategory.ADVERSATIVE, 0),
        additive=per_category.get(ConnectorCategory.ADDITIVE, 0),
        emphatic=per_category.get(ConnectorCategory.EMPHATIC, 0),
        total=sum(per_category.values()),
    )

    # Template phrases
    template_count = sum(
        count_occurrences(body_text, re.compile(phrase)) for phrase in rules.template_phrases
    )
    template_counts = TemplateCounts(
        count=template_count,
        per_thousand_chars=(
            round_half_up(template_count * 1000 / text_length, 2) if text_length > 0 else 0
        ),
    )

    return DetailedMetrics(
        sentence_length=sentence_length,
        punctuation_density=punctuation_density,
        connector_counts=connector_counts,
        template_counts=template_counts,
        text_length_chars=text_length,
        sentence_count=len(sentences),
    )
