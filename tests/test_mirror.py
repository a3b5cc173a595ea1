"""Tests for the mirror score."""

from paper_mirror.analysis.metrics import (
    ConnectorCounts,
    DetailedMetrics,
    PunctuationDensity,
    SentenceLengthStats,
    TemplateCounts,
    calculate_metrics,
    round_half_up,
)
from paper_mirror.analysis.mirror import (
    MirrorWeights,
    calculate_mirror_score,
    connector_distance,
    generate_mirror_score,
    normalized_diff,
)

SAMPLE = "因此，本方法在多个数据集上取得了稳定的效果。然而，在小样本场景下仍存在不足；此外，训练成本较高。"
DRAFT = "综上所述，随着技术的发展，研究表明这个方法很好。这个方法很好。这个方法很好。"

EMPTY = DetailedMetrics()


class TestDistances:
    """Test the individual sub-distances."""

    def test_normalized_diff(self):
        assert normalized_diff(10, 10, 50) == 0
        assert normalized_diff(0, 25, 50) == 0.5
        assert normalized_diff(0, 500, 50) == 1
        assert normalized_diff(3, 7, 0) == 0

    def test_connector_distance_disjoint(self):
        target = ConnectorCounts(causal=4, total=4)
        sample = ConnectorCounts(adversative=2, total=2)
        assert connector_distance(target, sample) == 1

    def test_connector_distance_uses_proportions(self):
        target = ConnectorCounts(causal=2, additive=2, total=4)
        sample = ConnectorCounts(causal=1, additive=1, total=2)
        assert connector_distance(target, sample) == 0

    def test_connector_distance_no_connectors(self):
        assert connector_distance(ConnectorCounts(), ConnectorCounts()) == 0


class TestMirrorScore:
    """Test the weighted 0-100 score."""

    def test_identical_profiles(self):
        metrics = calculate_metrics(SAMPLE)
        assert calculate_mirror_score(metrics, metrics) == 100.0

    def test_empty_profiles(self):
        assert calculate_mirror_score(EMPTY, EMPTY) == 100.0

    def test_sentence_length_saturates(self):
        target = DetailedMetrics(
            sentence_length=SentenceLengthStats(mean=60, p50=60, p90=120, long_rate_50=100)
        )
        assert calculate_mirror_score(target, EMPTY) == 60.0

    def test_connector_component(self):
        target = DetailedMetrics(connector_counts=ConnectorCounts(causal=4, total=4))
        sample = DetailedMetrics(connector_counts=ConnectorCounts(adversative=2, total=2))
        assert calculate_mirror_score(target, sample) == 75.0

    def test_punctuation_component(self):
        target = DetailedMetrics(punctuation_density=PunctuationDensity(comma=30))
        assert calculate_mirror_score(target, EMPTY) == 92.5

    def test_template_component(self):
        target = DetailedMetrics(template_counts=TemplateCounts(count=1, per_thousand_chars=5))
        assert calculate_mirror_score(target, EMPTY) == 80.0

    def test_custom_weights(self):
        target = DetailedMetrics(
            sentence_length=SentenceLengthStats(mean=60, p50=60, p90=120, long_rate_50=100)
        )
        weights = MirrorWeights(sentence=1, connectors=0, punctuation=0, templates=0)
        assert calculate_mirror_score(target, EMPTY, weights) == 0.0

    def test_score_within_bounds(self):
        score = calculate_mirror_score(calculate_metrics(DRAFT), calculate_metrics(SAMPLE))
        assert 0 <= score <= 100


class TestGenerateMirrorScore:
    """Test the draft/standard comparison."""

    def test_improvement_is_difference(self):
        sample = calculate_metrics(SAMPLE)
        draft = calculate_metrics(DRAFT)
        standard = calculate_metrics(SAMPLE + "这一结论具有一定的参考价值。")

        score = generate_mirror_score(sample, draft, standard)

        assert score.improvement == round_half_up(score.standard_to_sample - score.draft_to_sample)

    def test_standard_equal_to_sample(self):
        sample = calculate_metrics(SAMPLE)
        draft = calculate_metrics(DRAFT)

        score = generate_mirror_score(sample, draft, sample)

        assert score.standard_to_sample == 100.0
        assert score.improvement >= 0

    def test_negative_improvement(self):
        sample = calculate_metrics(SAMPLE)
        far = calculate_metrics(DRAFT)

        score = generate_mirror_score(sample, sample, far)

        assert score.draft_to_sample == 100.0
        assert score.improvement <= 0

    def test_to_dict(self):
        metrics = calculate_metrics(SAMPLE)
        d = generate_mirror_score(metrics, metrics, metrics).to_dict()
        assert d["draftToSample"] == 100.0
        assert d["standardToSample"] == 100.0
        assert d["improvement"] == 0
        assert d["weights"] == {
            "sentence": 0.4, "connectors": 0.25, "punctuation": 0.15, "templates": 0.2,
        }
