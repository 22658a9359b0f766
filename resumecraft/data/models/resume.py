"""
Resume data models for ResumeCraft.

Defines the persistent records produced by an import (work experience,
education, projects, skills, extracurriculars, languages, personal info)
and the Resume aggregate that owns their ordered collections.
"""

from datetime import date
from typing import Optional
from uuid import UUID, uuid4

from pydantic import Field

from resumecraft.utils.constants import CollectionKind

from .base import ChildRecord, EmbeddedModel, TimestampMixin, utc_now


class PersonalInfo(EmbeddedModel):
    """Contact and identity details of the resume owner."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class WorkExperience(ChildRecord):
    """A job held by the resume owner."""

    title: str
    company: str
    location: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    details: str = ""


class Education(ChildRecord):
    """An education entry."""

    school: str
    degree: str
    field: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    grade: str = ""
    details: str = ""


class Project(ChildRecord):
    """A project with optional comma-separated technologies."""

    name: str
    details: str = ""
    technologies: str = ""
    link: Optional[str] = None


class Skill(ChildRecord):
    name: str
    category: str = ""


class Extracurricular(ChildRecord):
    title: str
    organization: str = ""
    details: str = ""


class Language(ChildRecord):
    name: str
    proficiency: str = ""


class Resume(TimestampMixin):
    """
    Resume aggregate owning one ordered list per record kind.

    Every structural change (add, remove, move) renumbers the affected
    collection so order_index values stay 0..N-1. The aggregate is not
    safe for concurrent mutation; callers serialize access per resume.
    """

    id: UUID = Field(default_factory=uuid4)
    title: str = "My Resume"
    personal: PersonalInfo = Field(default_factory=PersonalInfo)

    experiences: list[WorkExperience] = Field(default_factory=list)
    educations: list[Education] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    extracurriculars: list[Extracurricular] = Field(default_factory=list)
    languages: list[Language] = Field(default_factory=list)

    def collection(self, kind: CollectionKind | str) -> list[ChildRecord]:
        """Return the live list for a collection kind."""
        return getattr(self, CollectionKind(kind).value)

    def replace_collection(self, kind: CollectionKind | str, records: list[ChildRecord]) -> None:
        """Swap in a new list for a collection kind and renumber it."""
        setattr(self, CollectionKind(kind).value, list(records))
        self.renumber(kind)

    def add(self, kind: CollectionKind | str, record: ChildRecord) -> ChildRecord:
        """Append a record to the end of a collection."""
        items = self.collection(kind)
        record.order_index = len(items)
        items.append(record)
        self.touch()
        return record

    def remove(self, kind: CollectionKind | str, record_id: UUID) -> bool:
        """Delete a record by id; returns False if it was not found."""
        items = self.collection(kind)
        for position, record in enumerate(items):
            if record.id == record_id:
                del items[position]
                self.renumber(kind)
                self.touch()
                return True
        return False

    def move(self, kind: CollectionKind | str, from_index: int, to_index: int) -> None:
        """
        Move the record at from_index so it ends up at to_index.

        Raises:
            IndexError: If from_index is out of range
        """
        items = self.collection(kind)
        if not 0 <= from_index < len(items):
            raise IndexError(f"No record at position {from_index}")
        record = items.pop(from_index)
        to_index = max(0, min(to_index, len(items)))
        items.insert(to_index, record)
        self.renumber(kind)
        self.touch()

    def renumber(self, kind: Optional[CollectionKind | str] = None) -> None:
        """Reassign order_index densely from 0 in list order."""
        kinds = [CollectionKind(kind)] if kind is not None else list(CollectionKind)
        for each in kinds:
            for position, record in enumerate(self.collection(each)):
                record.order_index = position

    def sorted_collection(self, kind: CollectionKind | str) -> list[ChildRecord]:
        return sorted(self.collection(kind), key=lambda r: r.order_index)

    def touch(self) -> None:
        self.updated_at = utc_now()
