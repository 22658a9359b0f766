"""
Document text extraction for the import pipeline.
"""

from .base import DocumentHandle, ExtractionResult, OCRService, validate_document
from .ocr import TesseractOCR
from .pdf_extractor import PDFDocument, open_document
from .text_extractor import TextExtractor

__all__ = [
    "DocumentHandle",
    "ExtractionResult",
    "OCRService",
    "PDFDocument",
    "TesseractOCR",
    "TextExtractor",
    "open_document",
    "validate_document",
]
