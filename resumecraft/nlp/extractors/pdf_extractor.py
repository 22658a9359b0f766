"""
PDF document access.

Page text comes from pdfplumber, with pypdf as a per-page fallback when
pdfplumber finds nothing. Pages are rendered for OCR with pdfplumber.
"""

from pathlib import Path
from typing import Any, Optional

import pdfplumber
from pypdf import PdfReader

from resumecraft.exceptions import DocumentUnreadable
from resumecraft.utils.config import ExtractionSettings
from resumecraft.utils.logger import get_logger

from .base import DocumentHandle, validate_document

logger = get_logger(__name__)


class PDFDocument(DocumentHandle):
    """An open PDF file."""

    def __init__(self, path: Path):
        self.path = path
        try:
            self._pdf = pdfplumber.open(path)
            self._page_count = len(self._pdf.pages)
        except Exception as e:
            logger.error(f"Cannot open PDF {path}: {e}")
            raise DocumentUnreadable(f"Cannot open PDF {path.name}: {e}") from e
        self._reader: Optional[PdfReader] = None

    @property
    def page_count(self) -> int:
        return self._page_count

    @property
    def metadata(self) -> dict:
        if not self._pdf.metadata:
            return {}
        return {k: v for k, v in self._pdf.metadata.items() if v and isinstance(v, str)}

    def page_text(self, index: int) -> str:
        text = self._text_with_pdfplumber(index)
        if text.strip():
            return text
        return self._text_with_pypdf(index)

    def render_page(self, index: int, resolution: int) -> Any:
        return self._pdf.pages[index].to_image(resolution=resolution).original

    def close(self) -> None:
        self._pdf.close()

    def _text_with_pdfplumber(self, index: int) -> str:
        try:
            return self._pdf.pages[index].extract_text() or ""
        except Exception as e:
            logger.debug(f"pdfplumber extraction error on page {index + 1}: {e}")
            return ""

    def _text_with_pypdf(self, index: int) -> str:
        try:
            if self._reader is None:
                self._reader = PdfReader(self.path)
            return self._reader.pages[index].extract_text() or ""
        except Exception as e:
            logger.debug(f"pypdf extraction error on page {index + 1}: {e}")
            return ""


def open_document(
    file_path: str | Path, settings: Optional[ExtractionSettings] = None
) -> PDFDocument:
    """
    Validate and open a document.

    Raises:
        DocumentUnreadable: If the file fails validation or cannot be parsed
    """
    path = validate_document(file_path, settings)
    logger.debug(f"Opening document {path}")
    return PDFDocument(path)
