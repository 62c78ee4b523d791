"""Abstract LLM provider interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from resume_parser.lib.errors import InvalidResponseError, UnsupportedProviderError

logger = logging.getLogger(__name__)


class ProviderFamily(str, Enum):
    """Backend families sharing one request/response shape."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"

    @classmethod
    def from_model(cls, model: str) -> ProviderFamily:
        """Pick the family from the first hyphen-delimited token of a model name.

        Raises:
            UnsupportedProviderError: If the prefix is not recognized.
        """
        prefix = model.strip().split("-", 1)[0].lower()
        family = MODEL_PREFIXES.get(prefix)
        if family is None:
            raise UnsupportedProviderError(model)
        return family


MODEL_PREFIXES: dict[str, ProviderFamily] = {
    "gpt": ProviderFamily.OPENAI,
    "chatgpt": ProviderFamily.OPENAI,
    "o1": ProviderFamily.OPENAI,
    "o3": ProviderFamily.OPENAI,
    "o4": ProviderFamily.OPENAI,
    "claude": ProviderFamily.ANTHROPIC,
    "gemini": ProviderFamily.GEMINI,
}


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses translate extracted resume text into their native request,
    call the backend, and reduce a valid response to plain text.
    """

    family: ProviderFamily

    def __init__(self, model: str) -> None:
        self.model = model

    @abstractmethod
    def construct_prompt(self, extracted_text: str) -> Any:
        """Build the backend-native request payload.

        Args:
            extracted_text: Plain text extracted from the resume.

        Returns:
            Request payload accepted by ``send_message``.
        """
        pass

    @abstractmethod
    def send_message(self, prompt: Any) -> Any:
        """Call the backend and return its native response."""
        pass

    @abstractmethod
    def validate_response(self, response: Any) -> bool:
        """Return True if the response carries usable text and no error."""
        pass

    @abstractmethod
    def get_response_text(self, response: Any) -> str:
        """Reduce a valid native response to a single string."""
        pass

    def send(self, prompt: Any) -> str:
        """Send a prompt and return the validated response text.

        Raises:
            InvalidResponseError: If the backend returned no usable text.
        """
        logger.info(f"Sending resume prompt to {self.family.value} model {self.model}")
        response = self.send_message(prompt)
        if not self.validate_response(response):
            raise InvalidResponseError(
                f"{self.family.value} model {self.model} returned no usable text"
            )
        text = self.get_response_text(response)
        logger.info(f"Received {len(text)} characters from {self.model}")
        return text
