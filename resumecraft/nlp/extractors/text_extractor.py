"""
Raw text extraction with per-page OCR fallback.

Every page is read from its native text layer first. Pages whose text is
blank are rendered and sent to OCR; those OCR calls run concurrently and
each one suppresses its own failure, so one bad page never aborts the
document.
"""

import asyncio
from pathlib import Path
from typing import Optional

from resumecraft.utils.config import ExtractionSettings, get_settings
from resumecraft.utils.logger import LoggerMixin

from .base import DocumentHandle, ExtractionResult, OCRService
from .ocr import TesseractOCR
from .pdf_extractor import open_document


class TextExtractor(LoggerMixin):
    """Produces the raw text blob of a resume document."""

    def __init__(
        self,
        ocr: Optional[OCRService] = None,
        settings: Optional[ExtractionSettings] = None,
    ):
        self.settings = settings or get_settings().extraction
        self.ocr = ocr or TesseractOCR()

    async def extract(self, source: str | Path | DocumentHandle) -> ExtractionResult:
        """
        Extract text from a document path or an open document handle.

        Non-empty page texts are joined with newlines. An all-empty
        document returns an empty result; deciding whether that is fatal
        is up to the caller.

        Raises:
            DocumentUnreadable: If a path cannot be opened as a document
        """
        if isinstance(source, DocumentHandle):
            return await self._extract_document(source)

        with open_document(source, self.settings) as document:
            result = await self._extract_document(document)
            result.metadata.update(getattr(document, "metadata", {}))
            return result

    async def _extract_document(self, document: DocumentHandle) -> ExtractionResult:
        page_count = document.page_count
        page_texts = [document.page_text(i).strip() for i in range(page_count)]
        empty_pages = [i for i, text in enumerate(page_texts) if not text]
        warnings: list[str] = []

        if empty_pages:
            self.logger.info(f"{len(empty_pages)} of {page_count} pages have no text layer, running OCR")
            recognized = await asyncio.gather(
                *(self._recognize_page(document, i, warnings) for i in empty_pages)
            )
            for index, text in zip(empty_pages, recognized):
                page_texts[index] = text

        text = "\n".join(t for t in page_texts if t)
        self.logger.debug(f"Extracted {len(text)} characters from {page_count} pages")

        return ExtractionResult(
            text=text,
            page_count=page_count,
            ocr_pages=empty_pages,
            warnings=warnings,
        )

    async def _recognize_page(
        self, document: DocumentHandle, index: int, warnings: list[str]
    ) -> str:
        try:
            # Rendering stays on the event loop thread; only recognition is offloaded
            image = document.render_page(index, self.settings.render_resolution)
            lines = await self.ocr.recognize(image)
        except Exception as e:
            self.logger.warning(f"OCR failed on page {index + 1}: {e}")
            warnings.append(f"OCR failed on page {index + 1}")
            return ""
        return "\n".join(lines).strip()
