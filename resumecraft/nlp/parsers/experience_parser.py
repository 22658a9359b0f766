"""
Work experience parser for resumes.

Extracts job titles, companies, date ranges and responsibility lines
from the work experience section of canonical resume text.
"""

from dataclasses import dataclass
from typing import Optional

from resumecraft.utils.logger import get_logger

from .dated_entries import scan_dated_entries

logger = get_logger(__name__)


@dataclass(frozen=True)
class JobExperience:
    """A work experience entry extracted from a resume."""

    title: str
    company: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    details: str = ""
    location: str = ""


class ExperienceParser:
    """Parser for extracting work experience from a section body."""

    def parse(self, section_text: str) -> list[JobExperience]:
        """
        Parse work experience entries.

        Entries without both a title and a company are dropped.

        Args:
            section_text: Body of the work experience section

        Returns:
            Experiences in document order
        """
        if not section_text or not section_text.strip():
            return []

        experiences = []
        for entry in scan_dated_entries(section_text.splitlines()):
            if not entry.first or not entry.second:
                logger.debug(f"Dropping experience without title/company: {entry.first!r}")
                continue
            experiences.append(
                JobExperience(
                    title=entry.first,
                    company=entry.second,
                    start_date=entry.start_date,
                    end_date=entry.end_date,
                    details="\n".join(entry.details).strip(),
                    location=entry.extra,
                )
            )

        return experiences
