"""Text normalization and sentence segmentation for Chinese academic prose."""

import re
from dataclasses import dataclass

HEADING_PATTERN = re.compile(r"^#+\s")

# Split right after a Chinese terminal mark so each part keeps its punctuation.
# The full-width semicolon stays inside the sentence.
SENTENCE_BOUNDARY = re.compile(r"(?<=[。？！])")


@dataclass(frozen=True)
class Sentence:
    """A retained sentence and its position among retained sentences."""

    text: str
    index: int

    def to_dict(self) -> dict:
        return {"text": self.text, "index": self.index}


def normalize_text(text: str) -> str:
    """
    Canonicalize line endings and whitespace.

    Markdown headings are kept; only spacing is cleaned up.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    return text.strip()


def is_markdown_heading(line: str) -> bool:
    """Check whether a line is a Markdown ATX heading."""
    return bool(HEADING_PATTERN.match(line.strip()))


def get_body_text(text: str) -> str:
    """Normalized text with every heading line removed, for statistics."""
    lines = normalize_text(text).split("\n")
    return "\n".join(line for line in lines if not is_markdown_heading(line)).strip()


def split_sentences(text: str) -> list[Sentence]:
    """
    Split Chinese text into sentences.

    Rules:
    - boundaries are 。？！, and the mark stays with its sentence
    - parts that look like a Markdown heading are dropped
    - parts shorter than 2 characters are treated as artifacts and dropped
    """
    sentences: list[Sentence] = []

    for part in SENTENCE_BOUNDARY.split(normalize_text(text)):
        trimmed = part.strip()

        if not trimmed:
            continue
        if HEADING_PATTERN.match(trimmed):
            continue
        if len(trimmed) < 2:
            continue

        sentences.append(Sentence(text=trimmed, index=len(sentences)))

    return sentences
