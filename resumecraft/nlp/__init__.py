"""
Text processing for the resume import pipeline.

Submodules:
- extractors: Document text extraction with OCR fallback
- canonicalizer: Generation-service reformatting into the canonical layout
- section_splitter: Header-based section splitting
- parsers: Per-section draft record parsers
- patterns: Shared regular expressions
"""

from .canonicalizer import Canonicalizer, clean_canonical_text
from .section_splitter import SectionSplitter, TextSection

__all__ = [
    "Canonicalizer",
    "SectionSplitter",
    "TextSection",
    "clean_canonical_text",
]
