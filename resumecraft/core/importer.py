"""
Resume import orchestrator.

Coordinates the import pipeline for one resume aggregate:

1. Extract raw text from the document (OCR for pages without text)
2. Canonicalize the text with the generation service
3. Split the canonical text into sections
4. Parse each section into draft records
5. Convert drafts into records, append them, and merge duplicates

Steps 1 and 2 await I/O and may be cancelled; a cancellation there
leaves the aggregate untouched. Steps 3 to 5 run without any await, so
they complete as one unit on the event loop.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from resumecraft.core.merge import MergeEngine, MergeResult, get_merge_engine
from resumecraft.data.models import (
    Education,
    Extracurricular,
    Language,
    Project,
    Resume,
    Skill,
    WorkExperience,
)
from resumecraft.exceptions import EmptyExtraction
from resumecraft.nlp.canonicalizer import Canonicalizer
from resumecraft.nlp.extractors import DocumentHandle, ExtractionResult, TextExtractor
from resumecraft.nlp.parsers import (
    ContactInfo,
    ContactParser,
    EducationEntry,
    EducationParser,
    ExperienceParser,
    ExtracurricularEntry,
    ExtracurricularParser,
    JobExperience,
    LanguageEntry,
    LanguagesParser,
    ProjectEntry,
    ProjectsParser,
    SkillEntry,
    SkillsParser,
)
from resumecraft.nlp.section_splitter import SectionSplitter
from resumecraft.services.generation import GenerationService, get_generation_service
from resumecraft.utils.constants import CollectionKind, SectionKey
from resumecraft.utils.dates import is_ongoing, parse_resume_date
from resumecraft.utils.logger import LoggerMixin, get_logger, log_import

logger = get_logger(__name__)


@dataclass
class ResumeDrafts:
    """Draft records parsed from one canonical text."""

    sections: dict[str, str] = field(default_factory=dict)
    contact: ContactInfo = field(default_factory=ContactInfo)
    experiences: list[JobExperience] = field(default_factory=list)
    educations: list[EducationEntry] = field(default_factory=list)
    skills: list[SkillEntry] = field(default_factory=list)
    projects: list[ProjectEntry] = field(default_factory=list)
    extracurriculars: list[ExtracurricularEntry] = field(default_factory=list)
    languages: list[LanguageEntry] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return (
            len(self.experiences)
            + len(self.educations)
            + len(self.skills)
            + len(self.projects)
            + len(self.extracurriculars)
            + len(self.languages)
        )


@dataclass
class ImportResult:
    """Outcome of one import run."""

    drafts: ResumeDrafts
    added: dict[str, int] = field(default_factory=dict)
    merge: MergeResult = field(default_factory=MergeResult)
    canonical_text: str = ""
    extraction: Optional[ExtractionResult] = None

    @property
    def warnings(self) -> list[str]:
        return list(self.extraction.warnings) if self.extraction else []


# =============================================================================
# Draft to record conversion
# =============================================================================


def to_work_experience(draft: JobExperience) -> Optional[WorkExperience]:
    if not draft.title or not draft.company:
        return None
    ongoing = is_ongoing(draft.end_date)
    return WorkExperience(
        title=draft.title,
        company=draft.company,
        location=draft.location,
        start_date=parse_resume_date(draft.start_date),
        end_date=None if ongoing else parse_resume_date(draft.end_date),
        is_current=ongoing,
        details=draft.details,
    )


def to_education(draft: EducationEntry) -> Optional[Education]:
    if not draft.institution or not draft.degree:
        return None
    return Education(
        school=draft.institution,
        degree=draft.degree,
        start_date=parse_resume_date(draft.start_date),
        end_date=parse_resume_date(draft.end_date),
        details=draft.details,
    )


def to_project(draft: ProjectEntry) -> Optional[Project]:
    if not draft.name:
        return None
    return Project(
        name=draft.name,
        details=draft.details,
        technologies=draft.technologies,
        link=draft.link,
    )


def to_skill(draft: SkillEntry) -> Optional[Skill]:
    if not draft.name:
        return None
    return Skill(name=draft.name, category=draft.category)


def to_extracurricular(draft: ExtracurricularEntry) -> Optional[Extracurricular]:
    if not draft.title:
        return None
    return Extracurricular(
        title=draft.title, organization=draft.organization, details=draft.details
    )


def to_language(draft: LanguageEntry) -> Optional[Language]:
    if not draft.name:
        return None
    return Language(name=draft.name, proficiency=draft.proficiency)


def apply_contact(resume: Resume, contact: ContactInfo) -> None:
    """Overwrite personal info with every field the contact section had."""
    personal = resume.personal
    if contact.name:
        first, _, last = contact.name.strip().partition(" ")
        personal.first_name = first
        personal.last_name = last.strip()
    personal.email = contact.email or personal.email
    personal.phone = contact.phone or personal.phone
    personal.address = contact.location or personal.address
    personal.linkedin = contact.linkedin or personal.linkedin
    personal.website = contact.website or personal.website
    personal.github = contact.github or personal.github


def apply_drafts(resume: Resume, drafts: ResumeDrafts) -> dict[str, int]:
    """
    Convert drafts to records and append them to the resume.

    Drafts missing a required field are skipped. Returns the number of
    records added per collection.
    """
    apply_contact(resume, drafts.contact)

    conversions = (
        (CollectionKind.SKILLS, drafts.skills, to_skill),
        (CollectionKind.EXPERIENCES, drafts.experiences, to_work_experience),
        (CollectionKind.EDUCATIONS, drafts.educations, to_education),
        (CollectionKind.PROJECTS, drafts.projects, to_project),
        (CollectionKind.EXTRACURRICULARS, drafts.extracurriculars, to_extracurricular),
        (CollectionKind.LANGUAGES, drafts.languages, to_language),
    )

    added: dict[str, int] = {}
    for kind, items, convert in conversions:
        count = 0
        for draft in items:
            record = convert(draft)
            if record is None:
                logger.debug(f"Skipping incomplete {kind.value} draft: {draft}")
                continue
            resume.add(kind, record)
            count += 1
        added[kind.value] = count

    return added


class ResumeImporter(LoggerMixin):
    """
    Runs the import pipeline against one resume aggregate.

    The caller owns the aggregate and must not mutate it from elsewhere
    while an import is running.
    """

    def __init__(
        self,
        generation_service: Optional[GenerationService] = None,
        text_extractor: Optional[TextExtractor] = None,
        merge_engine: Optional[MergeEngine] = None,
    ):
        self._generation_service = generation_service
        self._text_extractor = text_extractor
        self.merge_engine = merge_engine or get_merge_engine()

        self.splitter = SectionSplitter()
        self.contact_parser = ContactParser()
        self.skills_parser = SkillsParser()
        self.experience_parser = ExperienceParser()
        self.education_parser = EducationParser()
        self.projects_parser = ProjectsParser()
        self.extracurricular_parser = ExtracurricularParser()
        self.languages_parser = LanguagesParser()

    @property
    def text_extractor(self) -> TextExtractor:
        if self._text_extractor is None:
            self._text_extractor = TextExtractor()
        return self._text_extractor

    @property
    def canonicalizer(self) -> Canonicalizer:
        if self._generation_service is None:
            self._generation_service = get_generation_service()
        return Canonicalizer(self._generation_service)

    def parse_text(self, canonical_text: str) -> ResumeDrafts:
        """Split canonical text into sections and parse each into drafts."""
        sections = self.splitter.split(canonical_text)

        drafts = ResumeDrafts(
            sections=sections,
            contact=self.contact_parser.parse(sections.get(SectionKey.CONTACT.value, "")),
            skills=self.skills_parser.parse(sections.get(SectionKey.SKILLS.value, "")),
            experiences=self.experience_parser.parse(
                sections.get(SectionKey.WORK_EXPERIENCE.value, "")
            ),
            educations=self.education_parser.parse(sections.get(SectionKey.EDUCATION.value, "")),
            projects=self.projects_parser.parse(sections.get(SectionKey.PROJECTS.value, "")),
            extracurriculars=self.extracurricular_parser.parse(
                sections.get(SectionKey.EXTRACURRICULAR.value, "")
            ),
            languages=self.languages_parser.parse(sections.get(SectionKey.LANGUAGES.value, "")),
        )

        self.logger.debug(
            f"Parsed {drafts.record_count} drafts from sections {list(sections)}"
        )
        return drafts

    def import_canonical_text(self, canonical_text: str, resume: Resume) -> ImportResult:
        """Parse already canonical text, apply the drafts and merge."""
        drafts = self.parse_text(canonical_text)
        added = apply_drafts(resume, drafts)
        merge = self.merge_engine.merge(resume)

        self.logger.info(
            f"Imported {sum(added.values())} records, {merge.total_merged} merged as duplicates"
        )
        log_import(resume.id, added, merge.merged)
        return ImportResult(drafts=drafts, added=added, merge=merge, canonical_text=canonical_text)

    async def import_text(self, raw_text: str, resume: Resume) -> ImportResult:
        """
        Canonicalize raw text and import it.

        Raises:
            EmptyExtraction: If the raw text is blank
            GenerationFailure: If the generation service fails
            EmptyCanonicalization: If the generation reply is blank
        """
        if not raw_text or not raw_text.strip():
            raise EmptyExtraction("No text to import")

        canonical = await self.canonicalizer.canonicalize(raw_text)
        return self.import_canonical_text(canonical, resume)

    async def import_document(
        self, source: str | Path | DocumentHandle, resume: Resume
    ) -> ImportResult:
        """
        Import a resume document into an aggregate.

        Raises:
            DocumentUnreadable: If the document cannot be opened
            EmptyExtraction: If no page yields text, even after OCR
            GenerationFailure: If the generation service fails
            EmptyCanonicalization: If the generation reply is blank
        """
        self.logger.info(f"Importing resume document {source}")

        extraction = await self.text_extractor.extract(source)
        if extraction.is_empty:
            self.logger.error(f"No text extracted from {extraction.page_count} pages")
            raise EmptyExtraction("The document contains no extractable text")

        result = await self.import_text(extraction.text, resume)
        result.extraction = extraction
        return result
