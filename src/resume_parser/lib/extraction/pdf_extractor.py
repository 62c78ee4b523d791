"""PDF text extraction backed by pypdf."""

from __future__ import annotations

import io
import logging
from typing import Any

from pypdf import PdfReader
from pypdf.errors import FileNotDecryptedError, PyPdfError

from resume_parser.lib.errors import FormatError
from resume_parser.lib.extraction.base import TextExtractor

logger = logging.getLogger(__name__)


class PDFExtractor(TextExtractor):
    """Linearize a PDF into text, one line per page.

    Each page contributes the items of its text layer in the order pypdf
    reports them, joined by single spaces. Layout and font information is
    discarded.
    """

    def extract(self, raw_bytes: bytes) -> str:
        reader = self._open(raw_bytes)
        try:
            pages = [self._page_text(page) for page in reader.pages]
        except (PyPdfError, ValueError, KeyError) as exc:
            raise FormatError(f"Unable to read PDF content: {exc}") from exc

        text = "\n".join(pages)
        logger.debug(f"Extracted {len(text)} characters from {len(pages)} PDF pages")
        return text

    @staticmethod
    def _open(raw_bytes: bytes) -> PdfReader:
        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
            if reader.is_encrypted:
                # Resumes exported with owner-only restrictions open with an empty password.
                reader.decrypt("")
            # Touch the page tree so structural errors surface here.
            len(reader.pages)
        except FileNotDecryptedError as exc:
            raise FormatError("PDF is encrypted and cannot be opened") from exc
        except (PyPdfError, ValueError, KeyError) as exc:
            raise FormatError(f"Not a valid PDF document: {exc}") from exc
        return reader

    @staticmethod
    def _page_text(page: Any) -> str:
        items: list[str] = []

        def visit(text: str, *_: Any) -> None:
            if text and text.strip():
                items.append(text.strip())

        page.extract_text(visitor_text=visit)
        return " ".join(items)
