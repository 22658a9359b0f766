"""
Application-wide constants for ResumeCraft import.

This module contains all constant values used throughout the import pipeline.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "resumecraft"
APP_DISPLAY_NAME: Final[str] = "ResumeCraft Import"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# File Types
# =============================================================================

SUPPORTED_DOCUMENT_FORMATS: Final[tuple[str, ...]] = (".pdf",)


# =============================================================================
# Section Constants
# =============================================================================


class SectionKey(str, Enum):
    """Canonical keys produced by the section splitter."""

    CONTACT = "contact"
    SKILLS = "skills"
    WORK_EXPERIENCE = "work experience"
    EDUCATION = "education"
    PROJECTS = "projects"
    EXTRACURRICULAR = "extracurricular"
    LANGUAGES = "languages"
    MISCELLANEOUS = "miscellaneous"


# Literal headers the canonicalizer asks the model to emit, in prompt order
CANONICAL_HEADERS: Final[tuple[str, ...]] = (
    "CONTACT",
    "SKILLS",
    "WORK EXPERIENCE",
    "EDUCATION",
    "PROJECTS",
    "EXTRACURRICULAR",
    "LANGUAGES",
)

# Substring synonyms used to map a matched header onto a canonical key.
# Checked in order; the first key with a matching synonym wins.
SECTION_SYNONYMS: Final[tuple[tuple[SectionKey, tuple[str, ...]], ...]] = (
    (SectionKey.CONTACT, ("contact", "personal", "kontakt", "persönliche", "persoenliche")),
    (SectionKey.SKILLS, ("skill", "fähigkeiten", "faehigkeiten", "kenntnisse", "kompetenzen")),
    (
        SectionKey.WORK_EXPERIENCE,
        ("experience", "employment", "work", "berufserfahrung", "arbeitserfahrung", "werdegang"),
    ),
    (SectionKey.EDUCATION, ("education", "academic", "ausbildung", "studium", "bildung")),
    (SectionKey.PROJECTS, ("project", "projekte")),
    (
        SectionKey.EXTRACURRICULAR,
        ("extracurricular", "activit", "aktivität", "aktivitaet", "ehrenamt", "verein"),
    ),
    (SectionKey.LANGUAGES, ("language", "sprachen")),
    (
        SectionKey.MISCELLANEOUS,
        ("other", "misc", "sonstiges", "sonstige", "weitere", "additional"),
    ),
)


# =============================================================================
# Merge Constants
# =============================================================================

# Ordinal scale for language proficiency; anything else ranks 0
PROFICIENCY_RANK: Final[dict[str, int]] = {
    "native": 5,
    "fluent": 4,
    "professional": 3,
    "intermediate": 2,
    "basic": 1,
}

# Values of an end date that mean "ongoing"
ONGOING_END_TOKENS: Final[tuple[str, ...]] = ("present", "current")


class CollectionKind(str, Enum):
    """Child collections owned by a resume aggregate."""

    EXPERIENCES = "experiences"
    EDUCATIONS = "educations"
    PROJECTS = "projects"
    SKILLS = "skills"
    EXTRACURRICULARS = "extracurriculars"
    LANGUAGES = "languages"
