"""
Data models for ResumeCraft.
"""

from .base import ChildRecord, EmbeddedModel, TimestampMixin
from .resume import (
    Education,
    Extracurricular,
    Language,
    PersonalInfo,
    Project,
    Resume,
    Skill,
    WorkExperience,
)

__all__ = [
    # Base
    "ChildRecord",
    "EmbeddedModel",
    "TimestampMixin",
    # Resume
    "Education",
    "Extracurricular",
    "Language",
    "PersonalInfo",
    "Project",
    "Resume",
    "Skill",
    "WorkExperience",
]
