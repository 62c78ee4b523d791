"""Google Gemini LLM provider."""

from __future__ import annotations

import logging
from typing import Any

from resume_parser.api.config import Settings
from resume_parser.api.llm.provider import LLMProvider, ProviderFamily
from resume_parser.lib.errors import ConfigurationError
from resume_parser.lib.prompts import build_prompt

logger = logging.getLogger(__name__)


def _text_parts(response: Any) -> list[str]:
    """Text parts of the first candidate, skipping model thoughts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    return [
        part.text
        for part in parts
        if getattr(part, "text", None) is not None and not getattr(part, "thought", False)
    ]


class GeminiProvider(LLMProvider):
    """Gemini provider using the google-genai SDK."""

    family = ProviderFamily.GEMINI

    def __init__(self, settings: Settings, client: Any = None) -> None:
        super().__init__(settings.llm_model)
        if client is None:
            if not settings.gemini_api_key:
                raise ConfigurationError("GEMINI_API_KEY not set")
            from google import genai

            client = genai.Client(api_key=settings.gemini_api_key)
        self.client = client

    def construct_prompt(self, extracted_text: str) -> dict[str, Any]:
        from google.genai import types

        prompt = build_prompt(extracted_text)
        return {
            "model": self.model,
            "contents": prompt.input,
            "config": types.GenerateContentConfig(
                system_instruction=prompt.instructions,
                response_mime_type="application/json",
            ),
        }

    def send_message(self, prompt: dict[str, Any]) -> Any:
        """Send the prompt to Gemini."""
        return self.client.models.generate_content(**prompt)

    def validate_response(self, response: Any) -> bool:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            logger.error(f"Gemini blocked the prompt: {block_reason}")
            return False
        if not any(text for text in _text_parts(response)):
            logger.error("No text in Gemini response")
            return False
        return True

    def get_response_text(self, response: Any) -> str:
        return "".join(_text_parts(response))
