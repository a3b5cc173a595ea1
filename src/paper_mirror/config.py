"""Configuration management for PaperMirror."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from paper_mirror.analysis.mirror import MirrorWeights
from paper_mirror.analysis.report import AnalysisMode

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PM_",
        extra="ignore",
    )

    # Ollama (local LLM)
    ollama_base_url: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="qwen2.5:7b")

    # Hugging Face Inference API
    hf_api_key: str = Field(default="")
    hf_model: str = Field(default="Qwen/Qwen2.5-72B-Instruct")
    llm_provider: str = Field(default="ollama", description="ollama or huggingface")

    llm_temperature: float = Field(default=0.2)
    llm_max_tokens: int = Field(default=4000)
    llm_timeout: float = Field(default=300.0, description="Seconds per LLM request")

    # Local analysis after rewriting
    analysis_mode: AnalysisMode = Field(default=AnalysisMode.FULL)

    # Mirror score weights
    weight_sentence: float = Field(default=0.4)
    weight_connectors: float = Field(default=0.25)
    weight_punctuation: float = Field(default=0.15)
    weight_templates: float = Field(default=0.2)

    # Chunking
    chunk_max_chars: int = Field(default=3000, description="Max characters per rewrite chunk")
    context_chars: int = Field(default=400, description="Neighbouring context passed with each chunk")

    output_dir: Path = Field(default=Path("output"))

    @field_validator("analysis_mode", mode="before")
    @classmethod
    def _parse_analysis_mode(cls, v: Any) -> Any:
        """Unknown modes fall back to full analysis instead of failing."""
        if v is None or v == "":
            return AnalysisMode.FULL
        if isinstance(v, AnalysisMode):
            return v
        valid = {m.value for m in AnalysisMode}
        if v not in valid:
            logger.warning("Invalid analysis mode %r, using 'full'", v)
            return AnalysisMode.FULL
        return v

    @field_validator("llm_provider")
    @classmethod
    def _validate_provider(cls, v: str) -> str:
        if v not in ("ollama", "huggingface"):
            raise ValueError(f"llm_provider must be 'ollama' or 'huggingface', got {v!r}")
        return v

    @property
    def mirror_weights(self) -> MirrorWeights:
        return MirrorWeights(
            sentence=self.weight_sentence,
            connectors=self.weight_connectors,
            punctuation=self.weight_punctuation,
            templates=self.weight_templates,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
