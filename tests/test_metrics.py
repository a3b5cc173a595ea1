"""Tests for document style metrics."""

import pytest
from paper_mirror.analysis.metrics import (
    DetailedMetrics,
    calculate_metrics,
    count_occurrences,
    percentile,
    round_half_up,
)


class TestHelpers:
    """Test rounding, percentile and counting helpers."""

    def test_round_half_up(self):
        assert round_half_up(0.25) == 0.3
        assert round_half_up(-0.25) == -0.2
        assert round_half_up(142.857142, 2) == 142.86

    def test_percentile_linear_interpolation(self):
        assert percentile([], 50) == 0
        assert percentile([10], 90) == 10
        assert percentile([1, 2, 3, 4], 50) == 2.5
        assert percentile([10, 18], 90) == pytest.approx(17.2)

    def test_count_literal_non_overlapping(self):
        assert count_occurrences("啊啊啊啊", "啊啊") == 2
        assert count_occurrences("文本", "") == 0


class TestCalculateMetrics:
    """Test the full metrics profile."""

    def test_empty_text(self):
        m = calculate_metrics("")
        assert m.text_length_chars == 0
        assert m.sentence_count == 0
        assert m.sentence_length.mean == 0
        assert m.sentence_length.p50 == 0
        assert m.sentence_length.p90 == 0
        assert m.sentence_length.long_rate_50 == 0
        assert m.punctuation_density.comma == 0
        assert m.connector_counts.total == 0
        assert m.template_counts.per_thousand_chars == 0

    def test_sentence_stats_and_density(self):
        text = "因此，我们得到结果。然而，问题仍然存在；需要进一步研究。"
        m = calculate_metrics(text)

        assert m.text_length_chars == 28
        assert m.sentence_count == 2
        assert m.sentence_length.mean == 14.0
        assert m.sentence_length.p50 == 14.0
        assert m.sentence_length.p90 == 17.2
        assert m.sentence_length.long_rate_50 == 0

        assert m.punctuation_density.comma == 71.4
        assert m.punctuation_density.semicolon == 35.7
        assert m.punctuation_density.parenthesis == 0

        assert m.connector_counts.causal == 1
        assert m.connector_counts.adversative == 1
        assert m.connector_counts.total == 2

    def test_long_rate(self):
        text = "甲" * 50 + "。短句。"
        m = calculate_metrics(text)
        assert m.sentence_count == 2
        assert m.sentence_length.long_rate_50 == 50.0

    def test_parentheses_full_and_half_width(self):
        text = "模型（A）与模型(B)。"
        m = calculate_metrics(text)
        # 4 brackets over 12 chars
        assert m.punctuation_density.parenthesis == 333.3

    def test_headings_excluded_from_body(self):
        m = calculate_metrics("正文内容。\n\n# 标题")
        assert m.text_length_chars == 5
        assert m.sentence_count == 1

    def test_connector_substrings_counted(self):
        # "但是" also contains "但"
        m = calculate_metrics("但是结果。")
        assert m.connector_counts.adversative == 2

    def test_template_phrases(self):
        text = "综上所述，随着技术的发展，研究表明效果好。"
        m = calculate_metrics(text)
        assert m.template_counts.count == 3
        assert m.template_counts.per_thousand_chars == pytest.approx(142.86)

    def test_to_dict_shape(self):
        d = calculate_metrics("因此，结果很好。").to_dict()
        assert set(d) == {
            "sentenceLength", "punctuationDensity", "connectorCounts",
            "templateCounts", "textLengthChars", "sentenceCount",
        }
        assert "longRate50" in d["sentenceLength"]
        assert "perThousandChars" in d["templateCounts"]

    def test_from_dict(self):
        original = calculate_metrics("然而，这种方法（见上文）仍有不足。")
        assert DetailedMetrics.from_dict(original.to_dict()) == original
