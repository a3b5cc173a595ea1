"""
Mirror Score

How close a text's style profile sits to the sample's, on a 0-100 scale.
The rewritten standard version is expected to score higher than the draft.
"""

from dataclasses import dataclass, asdict

from .metrics import (
    ConnectorCounts,
    DetailedMetrics,
    PunctuationDensity,
    SentenceLengthStats,
    TemplateCounts,
    round_half_up,
)
from .rules import ConnectorCategory


# Differences at or above these values saturate to a distance of 1
SENTENCE_LENGTH_MAX_EXPECTED = {
    "mean": 50,
    "p50": 50,
    "p90": 100,
    "long_rate": 100,
}

PUNCTUATION_MAX_EXPECTED = {
    "comma": 30,
    "semicolon": 10,
    "parenthesis": 20,
}

TEMPLATE_MAX_EXPECTED = 5  # per 1000 chars


@dataclass(frozen=True)
class MirrorWeights:
    """Relative weight of each sub-distance. Defaults sum to 1."""
    sentence: float = 0.4
    connectors: float = 0.25
    punctuation: float = 0.15
    templates: float = 0.2

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_WEIGHTS = MirrorWeights()


@dataclass(frozen=True)
class MirrorScore:
    draft_to_sample: float
    standard_to_sample: float
    improvement: float
    weights: MirrorWeights = DEFAULT_WEIGHTS

    def to_dict(self) -> dict:
        return {
            "draftToSample": self.draft_to_sample,
            "standardToSample": self.standard_to_sample,
            "improvement": self.improvement,
            "weights": self.weights.to_dict(),
        }


def normalized_diff(a: float, b: float, max_expected: float) -> float:
    """0 when equal, 1 when the gap reaches max_expected."""
    if max_expected == 0:
        return 0
    return min(abs(a - b) / max_expected, 1)


def sentence_length_distance(target: SentenceLengthStats, sample: SentenceLengthStats) -> float:
    mean_diff = normalized_diff(target.mean, sample.mean, SENTENCE_LENGTH_MAX_EXPECTED["mean"])
    p50_diff = normalized_diff(target.p50, sample.p50, SENTENCE_LENGTH_MAX_EXPECTED["p50"])
    p90_diff = normalized_diff(target.p90, sample.p90, SENTENCE_LENGTH_MAX_EXPECTED["p90"])
    long_rate_diff = normalized_diff(
        target.long_rate_50, sample.long_rate_50, SENTENCE_LENGTH_MAX_EXPECTED["long_rate"]
    )
    return mean_diff * 0.4 + p50_diff * 0.3 + p90_diff * 0.2 + long_rate_diff * 0.1


def connector_distance(target: ConnectorCounts, sample: ConnectorCounts) -> float:
    """Half the L1 distance between the two category distributions."""
    target_total = target.total or 1
    sample_total = sample.total or 1

    l1 = sum(
        abs(target.get(c) / target_total - sample.get(c) / sample_total)
        for c in ConnectorCategory
    )
    return min(l1 / 2, 1)


def punctuation_distance(target: PunctuationDensity, sample: PunctuationDensity) -> float:
    comma_diff = normalized_diff(target.comma, sample.comma, PUNCTUATION_MAX_EXPECTED["comma"])
    semicolon_diff = normalized_diff(
        target.semicolon, sample.semicolon, PUNCTUATION_MAX_EXPECTED["semicolon"]
    )
    parenthesis_diff = normalized_diff(
        target.parenthesis, sample.parenthesis, PUNCTUATION_MAX_EXPECTED["parenthesis"]
    )
    return comma_diff * 0.5 + semicolon_diff * 0.25 + parenthesis_diff * 0.25


def template_distance(target: TemplateCounts, sample: TemplateCounts) -> float:
    return normalized_diff(target.per_thousand_chars, sample.per_thousand_chars, TEMPLATE_MAX_EXPECTED)


def calculate_mirror_score(
    target: DetailedMetrics,
    sample: DetailedMetrics,
    weights: MirrorWeights = DEFAULT_WEIGHTS,
) -> float:
    """
    Score how closely target mirrors sample (100 = identical profile).

    Weights are applied as given; they are not renormalized.
    """
    weighted_distance = (
        sentence_length_distance(target.sentence_length, sample.sentence_length) * weights.sentence
        + connector_distance(target.connector_counts, sample.connector_counts) * weights.connectors
        + punctuation_distance(target.punctuation_density, sample.punctuation_density) * weights.punctuation
        + template_distance(target.template_counts, sample.template_counts) * weights.templates
    )
    return round_half_up((1 - weighted_distance) * 100)


def generate_mirror_score(
    sample: DetailedMetrics,
    draft: DetailedMetrics,
    standard: DetailedMetrics,
    weights: MirrorWeights = DEFAULT_WEIGHTS,
) -> MirrorScore:
    """Score draft and standard against the sample and report the gain."""
    draft_to_sample = calculate_mirror_score(draft, sample, weights)
    standard_to_sample = calculate_mirror_score(standard, sample, weights)

    return MirrorScore(
        draft_to_sample=draft_to_sample,
        standard_to_sample=standard_to_sample,
        improvement=round_half_up(standard_to_sample - draft_to_sample),
        weights=weights,
    )
