"""OpenAI LLM provider."""

from __future__ import annotations

import logging
from typing import Any

from resume_parser.api.config import Settings
from resume_parser.api.llm.provider import LLMProvider, ProviderFamily
from resume_parser.lib.errors import ConfigurationError
from resume_parser.lib.prompts import build_prompt

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """OpenAI GPT provider using the Responses API."""

    family = ProviderFamily.OPENAI

    def __init__(self, settings: Settings, client: Any = None) -> None:
        super().__init__(settings.llm_model)
        if client is None:
            if not settings.openai_api_key:
                raise ConfigurationError("OPENAI_API_KEY not set")
            from openai import OpenAI

            client = OpenAI(api_key=settings.openai_api_key)
        self.client = client

    def construct_prompt(self, extracted_text: str) -> dict[str, Any]:
        prompt = build_prompt(extracted_text)
        return {
            "model": self.model,
            "instructions": prompt.instructions,
            "input": prompt.input,
        }

    def send_message(self, prompt: dict[str, Any]) -> Any:
        """Send the prompt to OpenAI."""
        return self.client.responses.create(**prompt)

    def validate_response(self, response: Any) -> bool:
        error = getattr(response, "error", None)
        if error:
            logger.error(f"OpenAI response reported an error: {error}")
            return False
        if not (getattr(response, "output_text", None) or "").strip():
            logger.error("OpenAI response contained no output text")
            return False
        return True

    def get_response_text(self, response: Any) -> str:
        # output_text already concatenates every output_text block in order.
        return response.output_text
