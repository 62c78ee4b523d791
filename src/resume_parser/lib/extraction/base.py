"""Abstract text extractor interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextExtractor(ABC):
    """Turns raw document bytes into plain text."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> str:
        """Extract linearized text from a document.

        Args:
            raw_bytes: Raw file content.

        Returns:
            Extracted text. Empty string if the document holds no text.

        Raises:
            FormatError: If the bytes are not a valid container of this format.
        """
        pass
