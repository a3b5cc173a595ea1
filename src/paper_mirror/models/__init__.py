"""Data models exchanged with the LLM backend."""
