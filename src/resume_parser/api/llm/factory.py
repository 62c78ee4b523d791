"""LLM provider factory."""

from __future__ import annotations

from resume_parser.api.config import Settings
from resume_parser.api.llm.anthropic_provider import AnthropicProvider
from resume_parser.api.llm.gemini_provider import GeminiProvider
from resume_parser.api.llm.openai_provider import OpenAIProvider
from resume_parser.api.llm.provider import LLMProvider, ProviderFamily

PROVIDERS: dict[ProviderFamily, type[LLMProvider]] = {
    ProviderFamily.OPENAI: OpenAIProvider,
    ProviderFamily.ANTHROPIC: AnthropicProvider,
    ProviderFamily.GEMINI: GeminiProvider,
}


def get_llm_provider(settings: Settings) -> LLMProvider:
    """Get the provider for the configured model.

    The model prefix is resolved before any client is built, so an unknown
    model fails without touching the network.

    Raises:
        UnsupportedProviderError: If the model prefix is not recognized.
        ConfigurationError: If the provider's API key is not set.
    """
    family = ProviderFamily.from_model(settings.llm_model)
    return PROVIDERS[family](settings)
