"""Tests for document loading and chunking."""

import pytest
from paper_mirror.ingest.chunker import (
    chunk_document,
    context_window,
    split_into_paragraphs,
    split_into_sections,
)
from paper_mirror.ingest.loader import load_document
from paper_mirror.analysis.metrics import calculate_metrics


class TestSections:
    """Test heading-based section splitting."""

    def test_sections(self):
        text = "前言。\n\n# 引言\n\n段一。\n\n## 方法\n\n段二。"
        assert split_into_sections(text) == [
            (None, "前言。"),
            ("引言", "# 引言\n\n段一。"),
            ("方法", "## 方法\n\n段二。"),
        ]

    def test_no_headings(self):
        assert split_into_sections("只有正文。") == [(None, "只有正文。")]

    def test_empty(self):
        assert split_into_sections("") == []

    def test_paragraphs(self):
        assert split_into_paragraphs("段一。\n\n段二。\n \n段三。") == ["段一。", "段二。", "段三。"]


class TestChunking:
    """Test packing paragraphs into chunks."""

    def test_packs_until_limit(self):
        text = "# 引言\n\n" + "甲" * 10 + "\n\n" + "乙" * 10 + "\n\n" + "丙" * 10
        chunks = chunk_document(text, max_chars=25)

        assert len(chunks) == 2
        assert chunks[0].text == "# 引言\n\n" + "甲" * 10 + "\n\n" + "乙" * 10
        assert chunks[1].text == "丙" * 10
        assert [c.index for c in chunks] == [0, 1]
        assert all(c.section_title == "引言" for c in chunks)

    def test_never_crosses_heading(self):
        text = "# 引言\n\n段一。\n\n# 方法\n\n段二。"
        chunks = chunk_document(text, max_chars=3000)
        assert [c.section_title for c in chunks] == ["引言", "方法"]

    def test_oversized_paragraph(self):
        chunks = chunk_document("长" * 50, max_chars=10)
        assert len(chunks) == 1
        assert chunks[0].text == "长" * 50

    def test_empty(self):
        assert chunk_document("") == []


class TestContextWindow:
    """Test neighbouring context around a chunk."""

    @pytest.fixture
    def chunks(self):
        text = "# 一\n\n" + "甲" * 20 + "\n\n# 二\n\n" + "乙" * 20 + "\n\n# 三\n\n" + "丙" * 20
        return chunk_document(text)

    def test_middle(self, chunks):
        before, after = context_window(chunks, 1, chars=5)
        assert before == "甲" * 5
        assert after == "# 三\n\n"

    def test_edges(self, chunks):
        assert context_window(chunks, 0, chars=5)[0] == ""
        assert context_window(chunks, 2, chars=5)[1] == ""

    def test_zero_chars(self, chunks):
        assert context_window(chunks, 1, chars=0) == ("", "")


class TestLoader:
    """Test reading papers from disk."""

    def test_utf8(self, tmp_path):
        path = tmp_path / "paper.md"
        path.write_text("# 标题\n\n正文。", encoding="utf-8")
        assert load_document(path) == "# 标题\n\n正文。"

    def test_utf8_bom_heading(self, tmp_path):
        path = tmp_path / "paper.md"
        path.write_text("# 引言标题\n\n正文内容。", encoding="utf-8-sig")

        text = load_document(path)

        assert text == "# 引言标题\n\n正文内容。"
        metrics = calculate_metrics(text)
        assert metrics.text_length_chars == 5

    def test_gb18030(self, tmp_path):
        path = tmp_path / "paper.txt"
        path.write_bytes("中文论文正文。".encode("gb18030"))
        assert load_document(path) == "中文论文正文。"

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "paper.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(ValueError, match="Unsupported"):
            load_document(path)
