"""
Exception hierarchy for the resume import pipeline.

Only stage boundaries raise these. Extraction heuristics and the merge
engine are total and never raise.
"""


class ResumeImportError(Exception):
    """Base class for all import pipeline failures."""


class DocumentUnreadable(ResumeImportError):
    """The source document could not be opened at all."""


# Name used by the text extractor for the same condition
EmptyDocument = DocumentUnreadable


class EmptyExtraction(ResumeImportError):
    """Every page yielded no text, including after OCR."""


class GenerationFailure(ResumeImportError):
    """The text-generation service failed or was unavailable."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.provider = provider


class EmptyCanonicalization(ResumeImportError):
    """The generation service replied with whitespace only."""
