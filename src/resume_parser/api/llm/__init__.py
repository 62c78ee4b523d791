"""LLM provider abstractions."""

from resume_parser.api.llm.provider import LLMProvider, ProviderFamily
from resume_parser.api.llm.openai_provider import OpenAIProvider
from resume_parser.api.llm.anthropic_provider import AnthropicProvider
from resume_parser.api.llm.gemini_provider import GeminiProvider
from resume_parser.api.llm.factory import get_llm_provider

__all__ = [
    "LLMProvider",
    "ProviderFamily",
    "OpenAIProvider",
    "AnthropicProvider",
    "GeminiProvider",
    "get_llm_provider",
]
