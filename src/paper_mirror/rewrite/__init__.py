"""LLM-backed rewriting of a draft in a sample paper's style."""
