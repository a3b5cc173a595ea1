"""HTTP client for the rewrite backend.

Two providers are supported: a local Ollama server and the Hugging Face
inference router (OpenAI-compatible chat completions).
"""

import json
import logging
import re
from typing import Optional

import httpx

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

HF_CHAT_URL = "https://router.huggingface.co/v1/chat/completions"


class LLMError(RuntimeError):
    """The LLM backend could not be reached or returned an HTTP error."""


class LLMResponseError(LLMError):
    """The LLM answered, but not with usable content."""


class LLMClient:
    """Single-prompt text generation against the configured provider.

    Usage:
        client = LLMClient(settings=get_settings())
        raw = client.generate(prompt, system=REWRITE_SYSTEM, json_mode=True)
        data = client.extract_json(raw)
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize LLM client.

        Args:
            provider: "ollama" or "huggingface" (default from config)
            model: Model name (default from config)
            settings: Settings to use instead of the cached global ones
        """
        self.settings = settings or get_settings()
        self.provider = provider or self.settings.llm_provider

        if model:
            self.model = model
        elif self.provider == "huggingface":
            self.model = self.settings.hf_model
        else:
            self.model = self.settings.ollama_model

    def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        json_mode: bool = False,
    ) -> str:
        """Generate text from prompt.

        Args:
            prompt: The user prompt
            system: Optional system instruction
            json_mode: Ask the backend for a JSON object

        Returns:
            Generated text, stripped

        Raises:
            LLMError: transport failure or non-200 response
        """
        if self.provider == "huggingface":
            return self._generate_hf(prompt, system, json_mode)
        return self._generate_ollama(prompt, system, json_mode)

    def _generate_ollama(self, prompt: str, system: Optional[str], json_mode: bool) -> str:
        """Generate using Ollama."""
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self.settings.llm_temperature,
                "num_predict": self.settings.llm_max_tokens,
            },
        }
        if system:
            payload["system"] = system
        if json_mode:
            payload["format"] = "json"

        try:
            response = httpx.post(
                f"{self.settings.ollama_base_url}/api/generate",
                json=payload,
                timeout=self.settings.llm_timeout,
            )
        except (httpx.RequestError, httpx.TimeoutException) as e:
            logger.error("Ollama request failed: %s", e)
            raise LLMError(f"Ollama request failed: {e}") from e

        if response.status_code != 200:
            raise LLMError(f"Ollama error {response.status_code}: {response.text[:200]}")

        return response.json().get("response", "").strip()

    def _generate_hf(self, prompt: str, system: Optional[str], json_mode: bool) -> str:
        """Generate using Hugging Face Inference API (OpenAI-compatible)."""
        if not self.settings.hf_api_key:
            raise LLMError("HF API key not set (PM_HF_API_KEY)")

        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.settings.llm_temperature,
            "max_tokens": self.settings.llm_max_tokens,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {
            "Authorization": f"Bearer {self.settings.hf_api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = httpx.post(
                HF_CHAT_URL,
                headers=headers,
                json=payload,
                timeout=self.settings.llm_timeout,
            )
        except (httpx.RequestError, httpx.TimeoutException) as e:
            logger.error("HF API request failed: %s", e)
            raise LLMError(f"HF API request failed: {e}") from e

        if response.status_code != 200:
            raise LLMError(f"HF API error {response.status_code}: {response.text[:200]}")

        result = response.json()
        choices = result.get("choices") or []
        if not choices:
            return ""
        return (choices[0].get("message", {}).get("content") or "").strip()

    def extract_json(self, response: str) -> list | dict | None:
        """Parse the JSON payload of a model reply.

        Accepts a bare object, a fenced ```json block, or an object or array
        surrounded by chatter.

        Args:
            response: Raw LLM response

        Returns:
            Parsed JSON or None
        """
        if not response:
            return None

        # Try to extract from code block
        if "```" in response:
            match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", response)
            if match:
                response = match.group(1)

        try:
            return json.loads(response)
        except json.JSONDecodeError:
            pass

        # Outermost object, then array
        for pattern in (r"\{[\s\S]*\}", r"\[[\s\S]*\]"):
            match = re.search(pattern, response)
            if match:
                try:
                    return json.loads(match.group(0))
                except json.JSONDecodeError:
                    pass

        return None

    @property
    def is_available(self) -> bool:
        """True when Ollama answers /api/tags, or an HF key is configured."""
        if self.provider == "huggingface":
            return bool(self.settings.hf_api_key)
        try:
            response = httpx.get(
                f"{self.settings.ollama_base_url}/api/tags",
                timeout=5.0,
            )
            return response.status_code == 200
        except (httpx.RequestError, httpx.TimeoutException):
            return False
