"""
Tests for resumecraft.nlp.extractors: TextExtractor and document validation.
"""

import asyncio

import pytest

from resumecraft.exceptions import DocumentUnreadable
from resumecraft.nlp.extractors import ExtractionResult, TextExtractor, validate_document
from resumecraft.utils.config import ExtractionSettings


def run(coro):
    return asyncio.run(coro)


class TestNativeText:
    def test_pages_with_text_are_never_ocrd(self, text_extractor, fake_ocr, make_document):
        document = make_document(["Jane Doe\n", "  SKILLS:\nPython  "])

        result = run(text_extractor.extract(document))

        assert result.text == "Jane Doe\nSKILLS:\nPython"
        assert result.page_count == 2
        assert result.ocr_pages == []
        assert fake_ocr.calls == []
        assert document.rendered == []

    def test_blank_pages_are_dropped_from_the_join(self, text_extractor, fake_ocr, make_document):
        fake_ocr.lines = {"image-1": []}
        document = make_document(["first", "   ", "third"])

        result = run(text_extractor.extract(document))

        assert result.text == "first\nthird"


class TestOCRFallback:
    def test_every_empty_page_is_ocrd_exactly_once(self, text_extractor, fake_ocr, make_document):
        fake_ocr.lines = {
            "image-0": ["Jane Doe", "jane@x.com"],
            "image-1": ["SKILLS:", "Python"],
        }
        document = make_document([None, ""])

        result = run(text_extractor.extract(document))

        assert sorted(fake_ocr.calls) == ["image-0", "image-1"]
        assert result.text == "Jane Doe\njane@x.com\nSKILLS:\nPython"
        assert result.ocr_pages == [0, 1]

    def test_mixed_document_keeps_page_order(self, text_extractor, fake_ocr, make_document):
        fake_ocr.lines = {"image-1": ["scanned page"]}
        document = make_document(["native one", None, "native three"])

        result = run(text_extractor.extract(document))

        assert result.text == "native one\nscanned page\nnative three"
        assert fake_ocr.calls == ["image-1"]
        assert document.rendered == [1]
        assert result.ocr_pages == [1]

    def test_render_uses_configured_resolution(self, fake_ocr, make_document, monkeypatch):
        seen = []
        document = make_document([None])
        render = document.render_page

        def recording_render(index, resolution):
            seen.append(resolution)
            return render(index, resolution)

        monkeypatch.setattr(document, "render_page", recording_render)
        extractor = TextExtractor(ocr=fake_ocr, settings=ExtractionSettings(render_resolution=150))
        run(extractor.extract(document))

        assert seen == [150]

    def test_ocr_failure_on_one_page_keeps_the_rest(self, text_extractor, fake_ocr, make_document):
        fake_ocr.lines = {"image-0": ["good page"]}
        fake_ocr.failing = {"image-1"}
        document = make_document([None, None, "native"])

        result = run(text_extractor.extract(document))

        assert result.text == "good page\nnative"
        assert result.warnings == ["OCR failed on page 2"]

    def test_render_failure_is_suppressed(self, text_extractor, fake_ocr, make_document):
        document = make_document([None, "native"], broken_renders=(0,))

        result = run(text_extractor.extract(document))

        assert result.text == "native"
        assert fake_ocr.calls == []
        assert result.warnings == ["OCR failed on page 1"]

    def test_all_empty_document_gives_empty_result(self, text_extractor, make_document):
        result = run(text_extractor.extract(make_document([None, "  "])))

        assert result.is_empty
        assert result.word_count == 0
        assert result.page_count == 2

    def test_zero_page_document_is_empty(self, text_extractor, fake_ocr, make_document):
        result = run(text_extractor.extract(make_document([])))

        assert result.is_empty
        assert fake_ocr.calls == []


class TestExtractionResult:
    def test_word_count(self):
        assert ExtractionResult(text="one two\nthree").word_count == 3

    def test_is_empty_for_whitespace(self):
        assert ExtractionResult(text=" \n\t").is_empty


class TestValidateDocument:
    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentUnreadable, match="File not found"):
            validate_document(tmp_path / "missing.pdf")

    def test_directory_is_rejected(self, tmp_path):
        folder = tmp_path / "folder.pdf"
        folder.mkdir()
        with pytest.raises(DocumentUnreadable, match="not a file"):
            validate_document(folder)

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "resume.docx"
        path.write_bytes(b"data")
        with pytest.raises(DocumentUnreadable, match="Unsupported"):
            validate_document(path)

    def test_too_large(self, tmp_path):
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"x" * 2048)
        settings = ExtractionSettings(max_file_size_mb=0)
        with pytest.raises(DocumentUnreadable, match="too large"):
            validate_document(path, settings)

    def test_valid_path_is_resolved(self, tmp_path):
        path = tmp_path / "resume.PDF"
        path.write_bytes(b"%PDF-1.4")
        assert validate_document(path) == path.resolve()

    def test_extractor_rejects_corrupt_pdf(self, tmp_path, text_extractor):
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"this is not a pdf at all")
        with pytest.raises(DocumentUnreadable):
            run(text_extractor.extract(path))

    def test_extractor_rejects_missing_path(self, tmp_path, text_extractor):
        with pytest.raises(DocumentUnreadable):
            run(text_extractor.extract(str(tmp_path / "nope.pdf")))
