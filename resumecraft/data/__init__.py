"""
Data layer for ResumeCraft: record models and JSON persistence.
"""

from .repository import ResumeRepository, load_resume_file, save_resume_file

__all__ = ["ResumeRepository", "load_resume_file", "save_resume_file"]
