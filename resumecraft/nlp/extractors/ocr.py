"""
Tesseract OCR adapter.
"""

import asyncio
from typing import Any, Optional

import pytesseract

from resumecraft.utils.config import OCRSettings, get_settings
from resumecraft.utils.logger import get_logger

from .base import OCRService

logger = get_logger(__name__)


class TesseractOCR(OCRService):
    """
    Accurate-mode recognition with dictionary correction.

    pytesseract shells out to the tesseract binary, so each call runs in
    a worker thread.
    """

    def __init__(self, settings: Optional[OCRSettings] = None):
        self.settings = settings or get_settings().ocr
        if self.settings.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.settings.tesseract_cmd

    async def recognize(self, image: Any) -> list[str]:
        text = await asyncio.to_thread(
            pytesseract.image_to_string,
            image,
            lang=self.settings.languages,
            config=self.settings.tesseract_config,
        )
        lines = [line.strip() for line in text.splitlines()]
        return [line for line in lines if line]
