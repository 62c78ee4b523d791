"""Resume parser: structured JSON from stored PDF and DOCX resumes.

Example:
    >>> from resume_parser import extract_text
    >>> with open("jane.pdf", "rb") as f:
    ...     text = extract_text("pdf", f.read())
"""

from resume_parser.lib.errors import (
    ConfigurationError,
    FormatError,
    InvalidResponseError,
    NotFoundError,
    ResumeParserError,
    UnsupportedFormatError,
    UnsupportedProviderError,
)
from resume_parser.lib.extraction import extract_text
from resume_parser.lib.models.models import DocumentReference, FileType, ParsedResume
from resume_parser.lib.prompts import build_prompt

__version__ = "0.1.0"
__all__ = [
    "extract_text",
    "build_prompt",
    "DocumentReference",
    "FileType",
    "ParsedResume",
    "ResumeParserError",
    "ConfigurationError",
    "FormatError",
    "InvalidResponseError",
    "NotFoundError",
    "UnsupportedFormatError",
    "UnsupportedProviderError",
]
