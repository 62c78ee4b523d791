"""Error types raised by the resume parsing pipeline."""

from __future__ import annotations


class ResumeParserError(Exception):
    """Base class for all resume parser errors."""


class UnsupportedFormatError(ResumeParserError):
    """File type tag is not one of the supported document formats."""

    def __init__(self, file_type: object) -> None:
        self.file_type = file_type
        super().__init__(f"Unsupported document format: {file_type!r} (supported: pdf, docx)")


class FormatError(ResumeParserError):
    """Raw bytes could not be decoded as the claimed container format."""


class UnsupportedProviderError(ResumeParserError):
    """Model identifier does not map to a known LLM provider family."""

    def __init__(self, model: str) -> None:
        self.model = model
        super().__init__(f"Unsupported LLM provider for model: {model!r}")


class InvalidResponseError(ResumeParserError):
    """LLM backend returned no usable text or reported an error."""


class NotFoundError(ResumeParserError):
    """Requested object does not exist in storage."""

    def __init__(self, bucket: str, key: str) -> None:
        self.bucket = bucket
        self.key = key
        super().__init__(f"Object not found: s3://{bucket}/{key}")


class ConfigurationError(ResumeParserError):
    """Required setting (API key, bucket name) is missing."""
