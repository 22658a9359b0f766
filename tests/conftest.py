"""
Shared test fixtures for the ResumeCraft test suite.

Sets environment variables before any resumecraft imports so settings
never touch real log files or services, then provides fakes for the
document, OCR and generation collaborators.
"""

import os

# === Set environment BEFORE any resumecraft imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LLM_PROVIDER", "openai")

from typing import Any, Optional

import pytest

from resumecraft.core.importer import ResumeImporter
from resumecraft.core.merge import MergeEngine
from resumecraft.data.models import Resume
from resumecraft.nlp.extractors import DocumentHandle, OCRService, TextExtractor
from resumecraft.services.generation import GenerationService
from resumecraft.utils.config import ExtractionSettings


SAMPLE_CANONICAL_TEXT = """CONTACT:
Jane Doe
jane.doe@example.com
+49 170 1234567
Berlin, Germany
linkedin.com/in/janedoe
https://github.com/janedoe

SKILLS:
Languages: Python, Go
Docker, Kubernetes

WORK EXPERIENCE:
Software Engineer at Acme Corp
Berlin | Jan 2020 - Present
• Built the billing API
• Led a team of four

Intern at Beta GmbH
Munich | Jun 2019 - Dec 2019
• Wrote integration tests

EDUCATION:
BSc Computer Science, MIT
Sep 2016 - Jun 2020

PROJECTS:
Resume Parser
Parses resumes into structured records
Link: https://example.com/parser

EXTRACURRICULAR:
Captain at Chess Club
Organized weekly tournaments

LANGUAGES:
English (Native), German (Fluent)
"""


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------


class FakeDocument(DocumentHandle):
    """In-memory document; `None` or blank page text means image-only."""

    def __init__(self, pages: list[Optional[str]], broken_renders: tuple[int, ...] = ()):
        self.pages = pages
        self.broken_renders = set(broken_renders)
        self.rendered: list[int] = []
        self.closed = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_text(self, index: int) -> str:
        return self.pages[index] or ""

    def render_page(self, index: int, resolution: int) -> Any:
        if index in self.broken_renders:
            raise RuntimeError(f"cannot render page {index}")
        self.rendered.append(index)
        return f"image-{index}"

    def close(self) -> None:
        self.closed = True


class FakeOCR(OCRService):
    """Returns canned lines per rendered image and records every call."""

    def __init__(self, lines: Optional[dict[str, list[str]]] = None, failing: tuple[str, ...] = ()):
        self.lines = lines or {}
        self.failing = set(failing)
        self.calls: list[Any] = []

    async def recognize(self, image: Any) -> list[str]:
        self.calls.append(image)
        if image in self.failing:
            raise RuntimeError(f"tesseract crashed on {image}")
        return self.lines.get(image, [])


class FakeGenerationService(GenerationService):
    """Replies with a fixed text, or raises a fixed error."""

    provider = "fake"

    def __init__(self, reply: str = "", error: Optional[BaseException] = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_canonical_text() -> str:
    return SAMPLE_CANONICAL_TEXT


@pytest.fixture
def resume() -> Resume:
    return Resume()


@pytest.fixture
def fake_ocr() -> FakeOCR:
    return FakeOCR()


@pytest.fixture
def make_document():
    """Factory that builds FakeDocument instances."""

    def _factory(pages: list[Optional[str]], broken_renders: tuple[int, ...] = ()) -> FakeDocument:
        return FakeDocument(pages, broken_renders)

    return _factory


@pytest.fixture
def make_generation_service():
    """Factory that builds FakeGenerationService instances."""

    def _factory(reply: str = "", error: Optional[BaseException] = None) -> FakeGenerationService:
        return FakeGenerationService(reply, error)

    return _factory


@pytest.fixture
def text_extractor(fake_ocr) -> TextExtractor:
    return TextExtractor(ocr=fake_ocr, settings=ExtractionSettings(render_resolution=72))


@pytest.fixture
def make_importer(fake_ocr):
    """Factory for a ResumeImporter wired to fakes only."""

    def _factory(reply: str = SAMPLE_CANONICAL_TEXT, error: Optional[BaseException] = None):
        service = FakeGenerationService(reply, error)
        importer = ResumeImporter(
            generation_service=service,
            text_extractor=TextExtractor(ocr=fake_ocr, settings=ExtractionSettings()),
            merge_engine=MergeEngine(),
        )
        return importer, service

    return _factory
