"""Anthropic Claude LLM provider."""

from __future__ import annotations

import logging
from typing import Any

from resume_parser.api.config import Settings
from resume_parser.api.llm.provider import LLMProvider, ProviderFamily
from resume_parser.lib.errors import ConfigurationError
from resume_parser.lib.prompts import build_prompt, inline_prompt

logger = logging.getLogger(__name__)


def _text_blocks(response: Any) -> list[str]:
    """Text of every text-typed content block, in response order."""
    return [
        block.text
        for block in getattr(response, "content", None) or []
        if getattr(block, "type", None) == "text"
    ]


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    family = ProviderFamily.ANTHROPIC

    def __init__(self, settings: Settings, client: Any = None) -> None:
        super().__init__(settings.llm_model)
        self.max_tokens = settings.anthropic_max_tokens
        if client is None:
            if not settings.anthropic_api_key:
                raise ConfigurationError("ANTHROPIC_API_KEY not set")
            from anthropic import Anthropic

            client = Anthropic(api_key=settings.anthropic_api_key)
        self.client = client

    def construct_prompt(self, extracted_text: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [
                {"role": "user", "content": inline_prompt(build_prompt(extracted_text))},
            ],
        }

    def send_message(self, prompt: dict[str, Any]) -> Any:
        """Send the prompt to Anthropic."""
        return self.client.messages.create(**prompt)

    def validate_response(self, response: Any) -> bool:
        if getattr(response, "type", "message") == "error":
            logger.error(f"Anthropic response reported an error: {getattr(response, 'error', None)}")
            return False
        if not any(text for text in _text_blocks(response)):
            logger.error("No text in Anthropic response")
            return False
        if getattr(response, "stop_reason", None) == "max_tokens":
            logger.warning(f"Anthropic response truncated at max_tokens={self.max_tokens}")
        return True

    def get_response_text(self, response: Any) -> str:
        return "".join(_text_blocks(response))
