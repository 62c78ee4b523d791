"""Select an extraction strategy by file type."""

from __future__ import annotations

import logging
import time

from resume_parser.lib.extraction.base import TextExtractor
from resume_parser.lib.extraction.docx_extractor import DocxExtractor
from resume_parser.lib.extraction.pdf_extractor import PDFExtractor
from resume_parser.lib.models.models import FileType

logger = logging.getLogger(__name__)

EXTRACTORS: dict[FileType, type[TextExtractor]] = {
    FileType.PDF: PDFExtractor,
    FileType.DOCX: DocxExtractor,
}


def get_extractor(file_type: FileType | str) -> TextExtractor:
    """Return a fresh extractor for ``file_type``.

    Raises:
        UnsupportedFormatError: If the tag is not ``pdf`` or ``docx``.
    """
    return EXTRACTORS[FileType.parse(file_type)]()


def extract_text(file_type: FileType | str, raw_bytes: bytes) -> str:
    """Extract plain text from a document.

    Args:
        file_type: Declared document type (``pdf`` or ``docx``).
        raw_bytes: Raw file content.

    Returns:
        Linearized text; empty string for documents without text.

    Raises:
        UnsupportedFormatError: If the file type is not supported.
        FormatError: If the bytes cannot be parsed as that format.
    """
    extractor = get_extractor(file_type)
    start = time.monotonic()
    text = extractor.extract(raw_bytes)
    elapsed_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        f"Extracted {len(text)} characters from {len(raw_bytes)} bytes "
        f"using {type(extractor).__name__} in {elapsed_ms}ms"
    )
    return text
