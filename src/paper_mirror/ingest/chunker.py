"""Split a draft into ordered chunks for chunk-by-chunk rewriting."""

import re
from dataclasses import dataclass
from typing import Optional

from paper_mirror.analysis.text import is_markdown_heading, normalize_text


@dataclass(frozen=True)
class Chunk:
    """A slice of the draft sent to the LLM in one request."""

    index: int
    text: str
    section_title: Optional[str] = None


def split_into_sections(text: str) -> list[tuple[Optional[str], str]]:
    """
    Split text at Markdown headings.

    Returns list of (section_title, section_text) tuples. The heading line
    stays at the top of its section text; the title is the heading without
    its leading #'s. Text before the first heading has no title.
    """
    sections: list[tuple[Optional[str], list[str]]] = []
    current_title: Optional[str] = None
    current_lines: list[str] = []

    for line in normalize_text(text).split("\n"):
        if is_markdown_heading(line):
            if any(l.strip() for l in current_lines):
                sections.append((current_title, current_lines))
            current_title = line.strip().lstrip("#").strip()
            current_lines = [line]
        else:
            current_lines.append(line)

    if any(l.strip() for l in current_lines):
        sections.append((current_title, current_lines))

    return [(title, "\n".join(lines).strip()) for title, lines in sections]


def split_into_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs."""
    paragraphs = re.split(r"\n\s*\n+", text)
    return [p.strip() for p in paragraphs if p.strip()]


def chunk_document(text: str, max_chars: int = 3000) -> list[Chunk]:
    """
    Split a document into chunks at heading or paragraph boundaries.

    Chunks never cross a heading. Paragraphs of a section are packed
    until adding the next would exceed max_chars; a single paragraph
    longer than max_chars becomes its own chunk.
    """
    chunks: list[Chunk] = []

    for title, section_text in split_into_sections(text):
        current: list[str] = []
        current_size = 0

        for para in split_into_paragraphs(section_text):
            if current and current_size + len(para) > max_chars:
                chunks.append(Chunk(len(chunks), "\n\n".join(current), title))
                current = []
                current_size = 0

            current.append(para)
            current_size += len(para)

        if current:
            chunks.append(Chunk(len(chunks), "\n\n".join(current), title))

    return chunks


def context_window(chunks: list[Chunk], index: int, chars: int = 400) -> tuple[str, str]:
    """Return (tail of previous chunk, head of next chunk) around chunks[index]."""
    before = chunks[index - 1].text[-chars:] if index > 0 and chars > 0 else ""
    after = chunks[index + 1].text[:chars] if index + 1 < len(chunks) and chars > 0 else ""
    return before, after
