"""
Skills parser for resumes.

Splits the skills section into individual skills, keeping the category
prefix of "Category: a, b, c" lines.
"""

from dataclasses import dataclass

from resumecraft.nlp.patterns import SKILL_SPLIT_PATTERN


@dataclass(frozen=True)
class SkillEntry:
    """A skill extracted from a resume."""

    name: str
    category: str = ""


class SkillsParser:
    """Parser for extracting skills from a section body."""

    def parse(self, section_text: str) -> list[SkillEntry]:
        """
        Parse skills line by line.

        "Languages: Python, Go" yields two skills in category "Languages";
        "• Docker • Kubernetes, Helm" yields three uncategorized skills.
        """
        if not section_text:
            return []

        skills: list[SkillEntry] = []
        for line in section_text.splitlines():
            if ":" in line:
                category, _, rest = line.partition(":")
                category = SKILL_SPLIT_PATTERN.sub("", category).strip()
                skills.extend(SkillEntry(name, category) for name in self._split_commas(rest))
                continue

            for fragment in SKILL_SPLIT_PATTERN.split(line):
                skills.extend(SkillEntry(name) for name in self._split_commas(fragment))

        return skills

    @staticmethod
    def _split_commas(text: str) -> list[str]:
        return [part.strip() for part in text.split(",") if part.strip()]
