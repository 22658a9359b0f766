"""
Tests for resumecraft.core.importer: the import pipeline orchestrator.
"""

import asyncio
from datetime import date

import pytest

from resumecraft.core.importer import (
    ResumeDrafts,
    apply_contact,
    apply_drafts,
    to_education,
    to_work_experience,
)
from resumecraft.core.merge.merge_engine import MERGE_RULES
from resumecraft.exceptions import (
    DocumentUnreadable,
    EmptyCanonicalization,
    EmptyExtraction,
    GenerationFailure,
)
from resumecraft.nlp.parsers import ContactInfo, EducationEntry, JobExperience
from resumecraft.utils.constants import CollectionKind

CANONICAL_SNIPPET = (
    "Jane Doe\njane@x.com\n\nSKILLS:\nPython, Go\n\n"
    "EDUCATION:\nBSc Computer Science, MIT\nSep 2016 - Jun 2020"
)


def key_set(resume, kind):
    return {MERGE_RULES[kind].key(record) for record in resume.collection(kind)}


class TestEndToEnd:
    def test_already_canonical_text(self, make_importer, resume):
        importer, _ = make_importer(reply=CANONICAL_SNIPPET)

        result = asyncio.run(importer.import_text(CANONICAL_SNIPPET, resume))

        assert set(result.drafts.sections) == {"contact", "skills", "education"}
        assert [s.name for s in result.drafts.skills] == ["Python", "Go"]
        [entry] = result.drafts.educations
        assert (entry.institution, entry.degree) == ("MIT", "BSc Computer Science")
        assert (entry.start_date, entry.end_date) == ("Sep 2016", "Jun 2020")

        assert resume.personal.full_name == "Jane Doe"
        assert resume.personal.email == "jane@x.com"
        [education] = resume.educations
        assert education.start_date == date(2016, 9, 1)
        assert education.end_date == date(2020, 6, 1)

    def test_sample_import_fills_every_collection(self, make_importer, resume):
        importer, service = make_importer()

        result = asyncio.run(importer.import_text("raw resume text", resume))

        assert len(service.calls) == 1
        assert result.added == {
            "skills": 4,
            "experiences": 2,
            "educations": 1,
            "projects": 1,
            "extracurriculars": 1,
            "languages": 2,
        }
        current, intern = resume.experiences
        assert current.is_current and current.end_date is None
        assert current.start_date == date(2020, 1, 1)
        assert intern.end_date == date(2019, 12, 1)
        assert resume.projects[0].link == "https://example.com/parser"
        assert resume.personal.github == "https://github.com/janedoe"
        assert [lang.proficiency for lang in resume.languages] == ["Native", "Fluent"]

    def test_importing_twice_is_idempotent(self, make_importer, resume, sample_canonical_text):
        importer, _ = make_importer()

        importer.import_canonical_text(sample_canonical_text, resume)
        once = {kind: (len(resume.collection(kind)), key_set(resume, kind)) for kind in CollectionKind}

        second = importer.import_canonical_text(sample_canonical_text, resume)
        twice = {kind: (len(resume.collection(kind)), key_set(resume, kind)) for kind in CollectionKind}

        assert twice == once
        assert second.merge.total_merged == sum(second.added.values())
        for kind in CollectionKind:
            indexes = sorted(r.order_index for r in resume.collection(kind))
            assert indexes == list(range(len(indexes)))

    def test_existing_records_keep_their_ids(self, make_importer, resume, sample_canonical_text):
        importer, _ = make_importer()
        importer.import_canonical_text(sample_canonical_text, resume)
        ids = [job.id for job in resume.experiences]

        importer.import_canonical_text(sample_canonical_text, resume)

        assert [job.id for job in resume.experiences] == ids

    def test_import_document(self, make_importer, make_document, fake_ocr, resume):
        fake_ocr.lines = {"image-1": ["SKILLS:", "Python, Go"]}
        importer, service = make_importer(reply=CANONICAL_SNIPPET)

        result = asyncio.run(importer.import_document(make_document(["Jane Doe", None]), resume))

        assert "Jane Doe\nSKILLS:\nPython, Go" in service.calls[0][1]
        assert result.extraction.ocr_pages == [1]
        assert result.warnings == []
        assert len(resume.skills) == 2


class TestFailures:
    def test_blank_raw_text(self, make_importer, resume):
        importer, service = make_importer()
        with pytest.raises(EmptyExtraction):
            asyncio.run(importer.import_text("  \n ", resume))
        assert service.calls == []

    def test_document_without_text(self, make_importer, make_document, resume):
        importer, service = make_importer()
        with pytest.raises(EmptyExtraction):
            asyncio.run(importer.import_document(make_document([None, ""]), resume))
        assert service.calls == []

    def test_unreadable_document(self, make_importer, resume, tmp_path):
        importer, _ = make_importer()
        with pytest.raises(DocumentUnreadable):
            asyncio.run(importer.import_document(tmp_path / "missing.pdf", resume))

    def test_generation_failure_leaves_resume_untouched(self, make_importer, resume):
        importer, _ = make_importer(error=GenerationFailure("offline", "fake"))
        before = resume.model_dump()

        with pytest.raises(GenerationFailure):
            asyncio.run(importer.import_text("Jane Doe", resume))

        assert resume.model_dump() == before

    def test_cancellation_leaves_resume_untouched(self, make_importer, resume):
        importer, _ = make_importer(error=asyncio.CancelledError())
        before = resume.model_dump()

        with pytest.raises(asyncio.CancelledError):
            asyncio.run(importer.import_text("Jane Doe", resume))

        assert resume.model_dump() == before

    def test_blank_reply(self, make_importer, resume):
        importer, _ = make_importer(reply="  \n\n ")
        with pytest.raises(EmptyCanonicalization):
            asyncio.run(importer.import_text("Jane Doe", resume))
        assert resume.skills == []


class TestConversion:
    def test_incomplete_experience_is_dropped(self):
        assert to_work_experience(JobExperience(title="Engineer", company="")) is None

    def test_present_end_date_means_current(self):
        job = to_work_experience(
            JobExperience(title="Engineer", company="Acme", start_date="Jan 2020", end_date="present")
        )
        assert job.is_current
        assert job.end_date is None

    def test_incomplete_education_is_dropped(self):
        assert to_education(EducationEntry(degree="", institution="MIT")) is None

    def test_apply_drafts_counts_only_converted(self, resume):
        drafts = ResumeDrafts(
            experiences=[
                JobExperience(title="Engineer", company="Acme"),
                JobExperience(title="", company="Beta"),
            ]
        )
        added = apply_drafts(resume, drafts)
        assert added["experiences"] == 1
        assert added["skills"] == 0

    def test_apply_contact_keeps_missing_fields(self, resume):
        resume.personal.phone = "+1 555 0100"
        apply_contact(resume, ContactInfo(name="Mary Ann Smith", email="mary@x.com"))
        assert (resume.personal.first_name, resume.personal.last_name) == ("Mary", "Ann Smith")
        assert resume.personal.email == "mary@x.com"
        assert resume.personal.phone == "+1 555 0100"
