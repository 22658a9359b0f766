"""
Merge and de-duplication of resume collections.

After an import appends new records, every collection is reduced to one
record per normalized key. The first record seen for a key survives in
place; later records with the same key are folded into it field by
field and dropped. Collections are then renumbered from zero.

Merging is a total function over the aggregate, and running it on an
already merged aggregate changes nothing.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from resumecraft.data.models import (
    ChildRecord,
    Education,
    Extracurricular,
    Language,
    Project,
    Resume,
    Skill,
    WorkExperience,
)
from resumecraft.utils.constants import PROFICIENCY_RANK, CollectionKind
from resumecraft.utils.dates import month_year_key
from resumecraft.utils.logger import get_logger

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize(value: Optional[str]) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    if not value:
        return ""
    return _WHITESPACE.sub(" ", value).strip().lower()


def join_unique_lines(first: str, second: str) -> str:
    """
    Union the lines of two detail texts, sorted.

    Original line order is not kept, and identical lines collapse into
    one. When one side is empty the other is returned as is.
    """
    if not first:
        return second
    if not second:
        return first
    lines = {line for line in first.split("\n") if line} | {
        line for line in second.split("\n") if line
    }
    return "\n".join(sorted(lines))


def merge_technologies(first: str, second: str) -> str:
    """Sorted union of comma-separated technology tokens, case-insensitive."""
    tokens: dict[str, str] = {}
    for raw in f"{first},{second}".split(","):
        token = raw.strip()
        if token:
            tokens.setdefault(token.lower(), token)
    return ", ".join(tokens[key] for key in sorted(tokens))


def proficiency_rank(value: str) -> int:
    return PROFICIENCY_RANK.get(normalize(value), 0)


# =============================================================================
# Keys
# =============================================================================


def experience_key(item: WorkExperience) -> str:
    return "|".join([normalize(item.title), normalize(item.company), month_year_key(item.start_date)])


def education_key(item: Education) -> str:
    return "|".join([normalize(item.school), normalize(item.degree), month_year_key(item.start_date)])


def project_key(item: Project) -> str:
    return normalize(item.name)


def skill_key(item: Skill) -> str:
    return f"{normalize(item.name)}|{normalize(item.category)}"


def extracurricular_key(item: Extracurricular) -> str:
    return f"{normalize(item.title)}|{normalize(item.organization)}"


def language_key(item: Language) -> str:
    return normalize(item.name)


# =============================================================================
# Field merges; `existing` is updated in place from `duplicate`
# =============================================================================


def _merge_end_date(existing, duplicate) -> None:
    if existing.end_date is not None and duplicate.end_date is not None:
        existing.end_date = max(existing.end_date, duplicate.end_date)
    elif existing.end_date is None:
        existing.end_date = duplicate.end_date


def merge_experience(existing: WorkExperience, duplicate: WorkExperience) -> None:
    existing.details = join_unique_lines(existing.details, duplicate.details)
    if not existing.location:
        existing.location = duplicate.location
    existing.is_current = existing.is_current or duplicate.is_current
    _merge_end_date(existing, duplicate)


def merge_education(existing: Education, duplicate: Education) -> None:
    existing.details = join_unique_lines(existing.details, duplicate.details)
    if not existing.field:
        existing.field = duplicate.field
    if not existing.grade:
        existing.grade = duplicate.grade
    _merge_end_date(existing, duplicate)


def merge_project(existing: Project, duplicate: Project) -> None:
    existing.details = join_unique_lines(existing.details, duplicate.details)
    technologies = merge_technologies(existing.technologies, duplicate.technologies)
    if technologies:
        existing.technologies = technologies
    if not existing.link and duplicate.link:
        existing.link = duplicate.link


def merge_skill(existing: Skill, duplicate: Skill) -> None:
    """Skills have nothing to merge besides visibility."""


def merge_extracurricular(existing: Extracurricular, duplicate: Extracurricular) -> None:
    existing.details = join_unique_lines(existing.details, duplicate.details)


def merge_language(existing: Language, duplicate: Language) -> None:
    if proficiency_rank(duplicate.proficiency) > proficiency_rank(existing.proficiency):
        existing.proficiency = duplicate.proficiency


@dataclass(frozen=True)
class MergeRule:
    """Identity key and field merge for one collection kind."""

    key: Callable[[ChildRecord], str]
    merge: Callable[[ChildRecord, ChildRecord], None]


MERGE_RULES: dict[CollectionKind, MergeRule] = {
    CollectionKind.EXPERIENCES: MergeRule(experience_key, merge_experience),
    CollectionKind.EDUCATIONS: MergeRule(education_key, merge_education),
    CollectionKind.PROJECTS: MergeRule(project_key, merge_project),
    CollectionKind.SKILLS: MergeRule(skill_key, merge_skill),
    CollectionKind.EXTRACURRICULARS: MergeRule(extracurricular_key, merge_extracurricular),
    CollectionKind.LANGUAGES: MergeRule(language_key, merge_language),
}


@dataclass
class MergeResult:
    """Counts of records folded away per collection."""

    merged: dict[str, int] = field(default_factory=dict)

    @property
    def total_merged(self) -> int:
        return sum(self.merged.values())


class MergeEngine:
    """
    De-duplicates every collection of a resume aggregate.

    Not safe to run concurrently with any other mutation of the same
    aggregate.
    """

    def __init__(self, rules: Optional[dict[CollectionKind, MergeRule]] = None):
        self.rules = rules or MERGE_RULES

    def dedupe(self, records: list[ChildRecord], rule: MergeRule) -> list[ChildRecord]:
        """Keep the first record per key, folding later duplicates into it."""
        seen: dict[str, ChildRecord] = {}
        for record in records:
            key = rule.key(record)
            existing = seen.get(key)
            if existing is None:
                seen[key] = record
                continue
            existing.visible = existing.visible or record.visible
            rule.merge(existing, record)
        return list(seen.values())

    def merge(self, resume: Resume) -> MergeResult:
        """Merge duplicates in all collections and renumber them."""
        result = MergeResult()

        for kind, rule in self.rules.items():
            records = resume.collection(kind)
            survivors = self.dedupe(records, rule)
            result.merged[kind.value] = len(records) - len(survivors)
            resume.replace_collection(kind, survivors)

        if result.total_merged:
            logger.info(f"Merged {result.total_merged} duplicate records: {result.merged}")
            resume.touch()

        return result


_merge_engine: Optional[MergeEngine] = None


def get_merge_engine() -> MergeEngine:
    """Get the merge engine singleton instance."""
    global _merge_engine
    if _merge_engine is None:
        _merge_engine = MergeEngine()
    return _merge_engine


def merge_resume(resume: Resume) -> MergeResult:
    """Merge duplicates in every collection of a resume."""
    return get_merge_engine().merge(resume)
