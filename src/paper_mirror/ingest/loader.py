"""Load draft and sample papers from disk."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".md", ".markdown", ".txt")


def load_document(path: Path) -> str:
    """
    Load a Markdown or plain text paper and return its text.

    Raises:
        ValueError: unsupported suffix or no encoding could decode the file
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {suffix} (expected .md or .txt)")

    # utf-8-sig also reads BOM-less UTF-8; GBK covers papers saved on Chinese Windows
    for encoding in ["utf-8-sig", "gb18030", "latin-1"]:
        try:
            text = path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
        logger.debug("Loaded %s (%d chars, %s)", path, len(text), encoding)
        return text

    raise ValueError(f"Could not decode {path} with any common encoding")
