"""
Section splitting for canonical resume text.

Partitions text into named sections by matching header lines. Also used
on raw, less clean text, so the header pattern recognizes common
synonyms (including German spellings) besides the canonical headers.
"""

import re
from dataclasses import dataclass

from resumecraft.nlp.patterns import SECTION_HEADER_PATTERN
from resumecraft.utils.constants import SECTION_SYNONYMS, SectionKey
from resumecraft.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass
class TextSection:
    """A detected section of resume text."""

    key: str
    title: str
    content: str
    start_pos: int
    end_pos: int


def normalize_section_key(header: str) -> str:
    """
    Map a header to a canonical section key by substring synonyms.

    Unrecognized headers fall through as their lowercased text with
    whitespace collapsed.
    """
    normalized = _WHITESPACE.sub(" ", header).strip().lower()
    for key, synonyms in SECTION_SYNONYMS:
        if any(synonym in normalized for synonym in synonyms):
            return key.value
    return normalized


class SectionSplitter:
    """Splits resume text into sections keyed by canonical section name."""

    def detect_sections(self, text: str) -> list[TextSection]:
        """
        Detect sections in document order.

        Text before the first header becomes a contact section. Text with
        no header at all is one contact section. Sections whose body is
        blank are omitted.
        """
        if not text or not text.strip():
            return []

        matches = list(SECTION_HEADER_PATTERN.finditer(text))
        if not matches:
            logger.debug("No section headers found, treating text as contact section")
            return [TextSection(SectionKey.CONTACT.value, "", text.strip(), 0, len(text))]

        sections = []
        preamble = text[: matches[0].start()].strip()
        if preamble:
            sections.append(TextSection(SectionKey.CONTACT.value, "", preamble, 0, matches[0].start()))

        for i, match in enumerate(matches):
            end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
            body = text[match.end():end].strip()
            if not body:
                continue
            header = match.group("header")
            sections.append(
                TextSection(
                    key=normalize_section_key(header),
                    title=header.strip(),
                    content=body,
                    start_pos=match.start(),
                    end_pos=end,
                )
            )

        return sections

    def split(self, text: str) -> dict[str, str]:
        """
        Split text into a mapping of section key to body.

        A key found more than once gets its bodies joined by a blank line.

        Args:
            text: Canonical (or raw) resume text

        Returns:
            Section bodies keyed by canonical section name, in document order
        """
        result: dict[str, str] = {}
        for section in self.detect_sections(text):
            if section.key in result:
                result[section.key] = f"{result[section.key]}\n\n{section.content}"
            else:
                result[section.key] = section.content

        logger.debug(f"Split text into sections: {list(result)}")
        return result
