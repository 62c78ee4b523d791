"""Text extraction for resume documents."""

from resume_parser.lib.extraction.base import TextExtractor
from resume_parser.lib.extraction.dispatch import EXTRACTORS, extract_text, get_extractor
from resume_parser.lib.extraction.docx_extractor import DocxExtractor
from resume_parser.lib.extraction.pdf_extractor import PDFExtractor

__all__ = [
    "EXTRACTORS",
    "DocxExtractor",
    "PDFExtractor",
    "TextExtractor",
    "extract_text",
    "get_extractor",
]
