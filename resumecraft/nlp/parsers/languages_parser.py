"""
Languages parser for resumes.
"""

import re
from dataclasses import dataclass

from resumecraft.nlp.patterns import (
    BULLET_PREFIX_PATTERN,
    LANGUAGE_PAIR_PATTERN,
    LANGUAGE_TOKEN_PATTERN,
)


@dataclass(frozen=True)
class LanguageEntry:
    """A spoken language extracted from a resume."""

    name: str
    proficiency: str = ""


class LanguagesParser:
    """Parser for "English (Native), German - Fluent, French: B1" style sections."""

    TOKEN_SEPARATOR = re.compile(r"[,\n]")

    def parse(self, section_text: str) -> list[LanguageEntry]:
        """Parse languages; tokens without a recognizable level get an empty proficiency."""
        if not section_text:
            return []

        entries = []
        for raw in self.TOKEN_SEPARATOR.split(section_text):
            token = BULLET_PREFIX_PATTERN.sub("", raw, count=1).strip()
            if not token:
                continue

            match = LANGUAGE_TOKEN_PATTERN.match(token) or LANGUAGE_PAIR_PATTERN.match(token)
            if match:
                entries.append(
                    LanguageEntry(
                        name=match.group("name").strip(),
                        proficiency=match.group("proficiency").strip(),
                    )
                )
            else:
                entries.append(LanguageEntry(name=token))

        return entries
