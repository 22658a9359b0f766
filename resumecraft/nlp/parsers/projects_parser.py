"""
Projects parser for resumes.

Each blank-line separated paragraph of the projects section is one
project: the first line is its name, the remaining lines its details.
"""

from dataclasses import dataclass
from typing import Optional

from resumecraft.nlp.patterns import BULLET_PREFIX_PATTERN, LINK_LINE_PATTERN

from .paragraphs import split_paragraphs


@dataclass(frozen=True)
class ProjectEntry:
    """A project extracted from a resume."""

    name: str
    details: str = ""
    # Left empty by extraction; filled by user edits and merges
    technologies: str = ""
    link: Optional[str] = None


class ProjectsParser:
    """Parser for extracting projects from a section body."""

    def parse(self, section_text: str) -> list[ProjectEntry]:
        """Parse one project per paragraph."""
        if not section_text:
            return []

        projects = []
        for paragraph in split_paragraphs(section_text):
            name = BULLET_PREFIX_PATTERN.sub("", paragraph[0], count=1).strip()
            link = None
            details = []
            for line in paragraph[1:]:
                link_match = LINK_LINE_PATTERN.match(line)
                if link_match and link is None:
                    link = link_match.group("url")
                    continue
                details.append(line)

            projects.append(ProjectEntry(name=name, details="\n".join(details), link=link))

        return projects
