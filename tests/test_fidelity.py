"""Tests for number and acronym fidelity checks."""

from paper_mirror.analysis.fidelity import (
    AlertType,
    calculate_fidelity_guardrails,
    extract_acronyms,
    extract_numbers,
    find_sentence_index,
    retention_rate,
)
from paper_mirror.analysis.rules import AnalysisRules


class TestExtractNumbers:
    """Test numeric token extraction."""

    def test_mixed_formats(self):
        text = "温度为100℃，误差1.5e-3，长度10mm，耗时20ms，共计2024年。"
        assert extract_numbers(text) == {"100℃", "1.5e-3", "10mm", "20ms", "2024"}

    def test_percentages(self):
        assert extract_numbers("准确率为95.5%，召回率为80％。") == {"95.5%", "80%"}

    def test_trailing_zero_decimals(self):
        assert extract_numbers("增长12.0倍，误差3.00。") == {"12", "3"}

    def test_single_digits_ignored(self):
        assert extract_numbers("第3章介绍了2种方法。") == set()

    def test_units_lowercased(self):
        assert extract_numbers("频率为5GHz。") == {"5ghz"}

    def test_identifier_digits_ignored(self):
        assert extract_numbers("VGG16与ResNet-50的对比。") == set()


class TestExtractAcronyms:
    """Test acronym and technical name extraction."""

    def test_caps_and_camel_case(self):
        assert extract_acronyms("CNN和LSTM以及IoT设备") == {"CNN", "LSTM", "IoT"}

    def test_hyphenated_names(self):
        assert extract_acronyms("使用ResNet-50和Transformer-XL。") == {"ResNet-50", "Transformer-XL"}

    def test_caps_with_digits(self):
        assert extract_acronyms("VGG16与GPT-4") == {"VGG16", "GPT-4"}

    def test_stoplisted_head_word_ignored(self):
        assert extract_acronyms("This-Is the approach of CNN") == {"CNN"}

    def test_custom_stoplist(self):
        rules = AnalysisRules(acronym_stoplist=frozenset({"CNN"}))
        assert extract_acronyms("CNN and GPT-4", rules) == {"GPT-4"}

    def test_plain_capitalized_word_ignored(self):
        assert extract_acronyms("Adam优化器") == set()

    def test_empty(self):
        assert extract_acronyms("") == set()


class TestRetention:
    """Test retention rates and sentence lookup."""

    def test_nothing_to_retain(self):
        assert retention_rate(set(), {"12"}) == 100

    def test_partial(self):
        assert retention_rate({"12", "34", "56"}, {"12"}) == 33.3

    def test_find_sentence_index(self):
        text = "第一句没有数字。第二句有123。"
        assert find_sentence_index(text, "123") == 1
        assert find_sentence_index(text, "456") == -1


class TestGuardrails:
    """Test the draft vs rewrite comparison."""

    def test_acronym_rewritten_away(self):
        draft = "我们使用了ResNet-50模型，准确率达到95.5%。"
        standard = "我们使用了残差网络模型，准确率达到95.5%。"

        result = calculate_fidelity_guardrails(draft, standard)

        assert result.number_retention_rate == 100
        assert result.acronym_retention_rate == 0
        assert len(result.alerts) == 1
        alert = result.alerts[0]
        assert alert.type == AlertType.ACRONYM_CHANGE
        assert alert.sentence_index == 0
        assert "ResNet-50" in alert.detail

    def test_identical_texts(self):
        text = "CNN模型在2023年的测试中取得了98.2%的准确率。"
        result = calculate_fidelity_guardrails(text, text)
        assert result.number_retention_rate == 100
        assert result.acronym_retention_rate == 100
        assert result.alerts == ()

    def test_empty_draft(self):
        result = calculate_fidelity_guardrails("", "任意改写。")
        assert result.number_retention_rate == 100
        assert result.acronym_retention_rate == 100
        assert result.alerts == ()

    def test_number_loss(self):
        result = calculate_fidelity_guardrails("数值为12和34。", "数值为12。")
        assert result.number_retention_rate == 50.0
        assert [a.type for a in result.alerts] == [AlertType.NUMBER_LOSS]
        assert result.alerts[0].detail == "missing number: 34"

    def test_unit_loss(self):
        result = calculate_fidelity_guardrails("背景。长度为10mm。", "长度较短。")
        assert result.number_retention_rate == 0
        alert = result.alerts[0]
        assert alert.type == AlertType.UNIT_LOSS
        assert alert.sentence_index == 1
        assert "10mm" in alert.detail

    def test_unlocatable_token(self):
        # Normalized "5ghz" does not appear verbatim in the draft
        result = calculate_fidelity_guardrails("频率为5GHz。", "频率较高。")
        assert result.alerts[0].sentence_index == -1

    def test_alerts_capped_per_kind(self):
        draft = "数据为11、22、33、44、55、66、77。模型有AA、BB、CC、DD、EE、FF。"
        result = calculate_fidelity_guardrails(draft, "数据若干。")

        number_alerts = [a for a in result.alerts if a.type == AlertType.NUMBER_LOSS]
        acronym_alerts = [a for a in result.alerts if a.type == AlertType.ACRONYM_CHANGE]
        assert len(number_alerts) == 5
        assert len(acronym_alerts) == 5
        assert number_alerts[0].detail == "missing number: 11"
        assert result.number_retention_rate == 0

    def test_to_dict(self):
        d = calculate_fidelity_guardrails("数值为12。", "数值。").to_dict()
        assert d["numberRetentionRate"] == 0
        assert d["acronymRetentionRate"] == 100
        assert d["alerts"] == [
            {"type": "number_loss", "sentenceIndex": 0, "detail": "missing number: 12"}
        ]
