"""DOCX text extraction from the raw OOXML parts."""

from __future__ import annotations

import io
import logging
import re
import zipfile
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from resume_parser.lib.errors import FormatError
from resume_parser.lib.extraction.base import TextExtractor

logger = logging.getLogger(__name__)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
MC_NS = "http://schemas.openxmlformats.org/markup-compatibility/2006"

DOCUMENT_PART = "word/document.xml"
SUPPLEMENTARY_PART_RE = re.compile(r"^word/(?:header\d+|footer\d+|footnotes|endnotes)\.xml$")

# Containers whose runs belong to the enclosing paragraph.
RUN_CONTAINERS = {"hyperlink", "ins", "smartTag", "fldSimple", "sdtContent", "sdt"}


def _w(tag: str) -> str:
    return f"{{{W_NS}}}{tag}"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


class DocxExtractor(TextExtractor):
    """Read paragraph text from a .docx archive.

    The main document body is read first, followed by headers, footers,
    footnotes and endnotes in archive order. Runs inside a paragraph are
    joined without separators, paragraphs with newlines, and parts with a
    blank line. Parts without text are left out.
    """

    def extract(self, raw_bytes: bytes) -> str:
        try:
            archive = zipfile.ZipFile(io.BytesIO(raw_bytes))
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
            raise FormatError(f"Not a valid DOCX archive: {exc}") from exc

        with archive:
            names = archive.namelist()
            if DOCUMENT_PART not in names:
                logger.debug("Archive has no word/document.xml, returning empty text")
                return ""

            part_names = [DOCUMENT_PART] + [n for n in names if SUPPLEMENTARY_PART_RE.match(n)]
            texts = [self._part_text(archive, name) for name in part_names]

        # Default footnote separators leave notes parts with only empty paragraphs.
        parts = [text for text in texts if text.strip()]
        logger.debug(
            f"Extracted {len(parts)} of {len(part_names)} DOCX parts with text"
        )
        return "\n\n".join(parts)

    def _part_text(self, archive: zipfile.ZipFile, name: str) -> str:
        try:
            root = ET.fromstring(archive.read(name))
        except (ParseError, DefusedXmlException) as exc:
            raise FormatError(f"Malformed XML in {name}: {exc}") from exc
        except (zipfile.BadZipFile, OSError) as exc:
            raise FormatError(f"Unable to read {name} from archive: {exc}") from exc

        container = self._paragraph_container(root)
        if container is None:
            return ""
        return "\n".join(self._paragraph_texts(container))

    @staticmethod
    def _paragraph_container(root: Element) -> Element | None:
        # The main document nests paragraphs under w:body; header, footer and
        # note parts hold them directly under the root.
        if root.tag == _w("document"):
            return root.find(_w("body"))
        return root

    def _paragraph_texts(self, element: Element) -> list[str]:
        """Paragraph lines under ``element`` in document order.

        Text boxes are written twice by Word, once under ``mc:Choice`` and once
        as a VML copy under ``mc:Fallback``; only the first is read. A paragraph
        that merely anchors text boxes yields their lines and no line of its own.
        """
        lines: list[str] = []
        for child in list(element):
            if child.tag == f"{{{MC_NS}}}Fallback":
                continue
            if child.tag == _w("p"):
                own = "".join(self._run_texts(child))
                nested = self._paragraph_texts(child)
                if own or not nested:
                    lines.append(own)
                lines.extend(nested)
            else:
                lines.extend(self._paragraph_texts(child))
        return lines

    def _run_texts(self, element: Element) -> list[str]:
        texts: list[str] = []
        for child in list(element):
            name = _local(child.tag)
            if name == "r":
                texts.extend(self._run_content(child))
            elif name in RUN_CONTAINERS:
                texts.extend(self._run_texts(child))
        return texts

    @staticmethod
    def _run_content(run: Element) -> list[str]:
        texts: list[str] = []
        for child in list(run):
            name = _local(child.tag)
            if name == "t":
                texts.append(child.text or "")
            elif name == "tab":
                texts.append("\t")
            elif name in ("br", "cr"):
                texts.append("\n")
        return texts
