"""Document loading and chunking."""

from paper_mirror.ingest.chunker import Chunk, chunk_document, context_window
from paper_mirror.ingest.loader import load_document

__all__ = ["Chunk", "chunk_document", "context_window", "load_document"]
