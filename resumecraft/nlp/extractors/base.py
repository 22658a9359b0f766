"""
Base types for document text extraction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from resumecraft.exceptions import DocumentUnreadable
from resumecraft.utils.config import ExtractionSettings
from resumecraft.utils.constants import SUPPORTED_DOCUMENT_FORMATS


@dataclass
class ExtractionResult:
    """Result of text extraction from a document."""

    text: str
    page_count: int = 0
    # Zero-based indexes of pages whose text came from OCR
    ocr_pages: list[int] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        """Count words in extracted text."""
        return len(self.text.split())

    @property
    def is_empty(self) -> bool:
        """Check if extraction resulted in empty text."""
        return len(self.text.strip()) == 0


class DocumentHandle(ABC):
    """
    An open paginated document.

    Implementations return the embedded text of a page (empty for an
    image-only page) and render a page to an image for OCR.
    """

    @property
    @abstractmethod
    def page_count(self) -> int:
        pass

    @abstractmethod
    def page_text(self, index: int) -> str:
        """Return the native text layer of a page, or an empty string."""
        pass

    @abstractmethod
    def render_page(self, index: int, resolution: int) -> Any:
        """Render a page to an image at the given DPI."""
        pass

    def close(self) -> None:
        pass

    def __enter__(self) -> "DocumentHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class OCRService(ABC):
    """Recognizes text lines in a rendered page image."""

    @abstractmethod
    async def recognize(self, image: Any) -> list[str]:
        pass


def validate_document(
    file_path: str | Path, settings: Optional[ExtractionSettings] = None
) -> Path:
    """
    Validate that a document exists, is a supported format and fits the
    size limit.

    Raises:
        DocumentUnreadable: If any check fails
    """
    path = Path(file_path)

    try:
        path = path.resolve(strict=False)
    except (OSError, ValueError) as e:
        raise DocumentUnreadable(f"Invalid file path: {file_path}") from e

    if not path.exists():
        raise DocumentUnreadable(f"File not found: {file_path}")
    if not path.is_file():
        raise DocumentUnreadable(f"Path is not a file: {file_path}")
    if path.suffix.lower() not in SUPPORTED_DOCUMENT_FORMATS:
        raise DocumentUnreadable(f"Unsupported document format: {path.suffix or file_path}")

    max_size = (settings or ExtractionSettings()).max_file_size_bytes
    size = path.stat().st_size
    if size > max_size:
        raise DocumentUnreadable(f"File too large: {size} bytes (max: {max_size})")

    return path
