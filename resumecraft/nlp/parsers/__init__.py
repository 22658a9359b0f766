"""
Resume section parsers for extracting draft records.

Each parser turns the body of one section of canonical resume text into
immutable draft records (contact info, experience, education, skills,
projects, extracurricular activities, languages). Parsers never raise:
lines they cannot interpret are folded into details or dropped.
"""

from .contact_parser import ContactParser, ContactInfo
from .skills_parser import SkillsParser, SkillEntry
from .experience_parser import ExperienceParser, JobExperience
from .education_parser import EducationParser, EducationEntry
from .projects_parser import ProjectsParser, ProjectEntry
from .extracurricular_parser import ExtracurricularParser, ExtracurricularEntry
from .languages_parser import LanguagesParser, LanguageEntry
from .dated_entries import DatedEntry, scan_dated_entries, split_header

__all__ = [
    "ContactParser",
    "ContactInfo",
    "SkillsParser",
    "SkillEntry",
    "ExperienceParser",
    "JobExperience",
    "EducationParser",
    "EducationEntry",
    "ProjectsParser",
    "ProjectEntry",
    "ExtracurricularParser",
    "ExtracurricularEntry",
    "LanguagesParser",
    "LanguageEntry",
    "DatedEntry",
    "scan_dated_entries",
    "split_header",
]
