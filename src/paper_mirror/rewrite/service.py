"""Typed calls to the LLM rewrite backend."""

import logging
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from paper_mirror.llm import LLMClient, LLMResponseError
from paper_mirror.models.style import DocumentContext, RewriteVariants, StyleGuide
from paper_mirror.rewrite import prompts

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class RewriteService:
    """
    Style-guide extraction, draft summarization and chunk rewriting.

    Every call asks for JSON and validates it into a pydantic model.
    """

    def __init__(self, client: Optional[LLMClient] = None):
        self._client = client

    @property
    def client(self) -> LLMClient:
        """Lazy-create the LLM client."""
        if self._client is None:
            self._client = LLMClient()
        return self._client

    def _generate(self, prompt: str, system: str, model: type[ModelT]) -> ModelT:
        raw = self.client.generate(prompt, system=system, json_mode=True)
        if not raw:
            raise LLMResponseError(f"Empty response while requesting {model.__name__}")

        data = self.client.extract_json(raw)
        if not isinstance(data, dict):
            logger.debug("Unparseable LLM payload: %s", raw[:500])
            raise LLMResponseError(f"No JSON object in response for {model.__name__}")

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise LLMResponseError(f"Invalid {model.__name__} from LLM: {e}") from e

    def extract_style_guide(self, sample_text: str) -> StyleGuide:
        return self._generate(
            prompts.style_guide_prompt(sample_text),
            prompts.STYLE_GUIDE_SYSTEM,
            StyleGuide,
        )

    def generate_document_context(self, draft_text: str) -> DocumentContext:
        return self._generate(
            prompts.document_context_prompt(draft_text),
            prompts.DOCUMENT_CONTEXT_SYSTEM,
            DocumentContext,
        )

    def rewrite_chunk(
        self,
        chunk_text: str,
        context_before: str,
        context_after: str,
        style_guide: StyleGuide,
        document_context: DocumentContext,
        section_title: Optional[str] = None,
    ) -> RewriteVariants:
        """Rewrite one chunk into conservative, standard and enhanced variants."""
        prompt = prompts.rewrite_chunk_prompt(
            chunk_text,
            context_before,
            context_after,
            style_guide,
            document_context,
            section_title,
        )
        return self._generate(prompt, prompts.REWRITE_SYSTEM, RewriteVariants)
