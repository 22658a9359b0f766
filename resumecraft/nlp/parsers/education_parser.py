"""
Education parser for resumes.

Extracts institutions, degrees and date ranges from the education
section of canonical resume text.
"""

from dataclasses import dataclass
from typing import Optional

from resumecraft.nlp.patterns import BULLET_PREFIX_PATTERN, DEGREE_HINT_PATTERN
from resumecraft.utils.logger import get_logger

from .dated_entries import DatedEntry, scan_dated_entries

logger = get_logger(__name__)


@dataclass(frozen=True)
class EducationEntry:
    """An education entry extracted from a resume."""

    degree: str
    institution: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    details: str = ""


class EducationParser:
    """Parser for extracting education from a section body."""

    def parse(self, section_text: str) -> list[EducationEntry]:
        """
        Parse education entries.

        Header fields are read as (institution, degree) by position and
        swapped when only the first one looks like a degree. Entries
        without both fields are dropped.

        Args:
            section_text: Body of the education section

        Returns:
            Education entries in document order
        """
        if not section_text or not section_text.strip():
            return []

        entries = []
        for scanned in scan_dated_entries(section_text.splitlines()):
            entry = self._to_entry(scanned)
            if not entry.institution or not entry.degree:
                logger.debug(f"Dropping education without institution/degree: {scanned.first!r}")
                continue
            entries.append(entry)

        return entries

    def _to_entry(self, scanned: DatedEntry) -> EducationEntry:
        institution, degree = scanned.first, scanned.second
        if self._looks_like_degree(institution) and not self._looks_like_degree(degree):
            institution, degree = degree, institution

        details = list(scanned.details)
        if not degree and details:
            # "MIT | Sep 2016 - Jun 2020" followed by the degree on its own line
            degree = BULLET_PREFIX_PATTERN.sub("", details.pop(0), count=1).strip()

        return EducationEntry(
            degree=degree,
            institution=institution,
            start_date=scanned.start_date,
            end_date=scanned.end_date,
            details="\n".join(details).strip(),
        )

    @staticmethod
    def _looks_like_degree(text: str) -> bool:
        return bool(text) and DEGREE_HINT_PATTERN.search(text) is not None
