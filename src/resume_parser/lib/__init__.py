"""Resume parser library module."""

from resume_parser.lib.errors import (
    ConfigurationError,
    FormatError,
    InvalidResponseError,
    NotFoundError,
    ResumeParserError,
    UnsupportedFormatError,
    UnsupportedProviderError,
)
from resume_parser.lib.models.models import DocumentReference, FileType, ParsedResume, PromptRequest
from resume_parser.lib.extraction import DocxExtractor, PDFExtractor, extract_text
from resume_parser.lib.prompts import BASE_PROMPT, build_prompt
from resume_parser.lib.storage import ObjectStore, S3ObjectStore

__all__ = [
    # Errors
    "ConfigurationError",
    "FormatError",
    "InvalidResponseError",
    "NotFoundError",
    "ResumeParserError",
    "UnsupportedFormatError",
    "UnsupportedProviderError",
    # Models
    "DocumentReference",
    "FileType",
    "ParsedResume",
    "PromptRequest",
    # Extraction
    "DocxExtractor",
    "PDFExtractor",
    "extract_text",
    # Prompts
    "BASE_PROMPT",
    "build_prompt",
    # Storage
    "ObjectStore",
    "S3ObjectStore",
]
