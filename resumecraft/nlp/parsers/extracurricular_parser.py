"""
Extracurricular activities parser for resumes.
"""

from dataclasses import dataclass

from resumecraft.nlp.patterns import BULLET_PREFIX_PATTERN, ENTRY_CONNECTOR_PATTERN

from .paragraphs import split_paragraphs


@dataclass(frozen=True)
class ExtracurricularEntry:
    """An extracurricular activity extracted from a resume."""

    title: str
    organization: str = ""
    details: str = ""


class ExtracurricularParser:
    """Parser for extracting activities from a section body."""

    def parse(self, section_text: str) -> list[ExtracurricularEntry]:
        """
        Parse one activity per paragraph.

        Line one is the title and line two the organization, unless line
        one reads "Title at Organization", in which case the details start
        at line two.
        """
        if not section_text:
            return []

        entries = []
        for paragraph in split_paragraphs(section_text):
            first = BULLET_PREFIX_PATTERN.sub("", paragraph[0], count=1).strip()
            connected = ENTRY_CONNECTOR_PATTERN.split(first, maxsplit=1)

            if len(connected) == 2:
                title, organization = connected[0].strip(), connected[1].strip()
                rest = paragraph[1:]
            else:
                title = first
                organization = paragraph[1] if len(paragraph) > 1 else ""
                rest = paragraph[2:]

            entries.append(
                ExtracurricularEntry(title=title, organization=organization, details=" ".join(rest))
            )

        return entries
