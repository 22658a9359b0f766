"""
ResumeCraft import pipeline.

Turns an unstructured resume document into structured, de-duplicated
resume records: text extraction with OCR fallback, LLM canonicalization,
section splitting, per-section extraction, and merge.
"""

from resumecraft.utils.constants import APP_NAME as __app_name__
from resumecraft.utils.constants import VERSION as __version__

__all__ = ["__app_name__", "__version__"]
