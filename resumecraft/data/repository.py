"""
JSON file persistence for resume aggregates.

A repository directory holds one `<resume id>.json` file per resume.
Writes go to a temporary file that then replaces the target, so a
failed write never leaves a truncated resume behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional
from uuid import UUID

from pydantic import ValidationError

from resumecraft.data.models import Resume
from resumecraft.utils.config import get_settings
from resumecraft.utils.logger import get_logger

logger = get_logger(__name__)


def load_resume_file(path: str | Path) -> Resume:
    """
    Load a resume from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid resume document
    """
    path = Path(path)
    try:
        return Resume.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError(f"Invalid resume file {path}: {e}") from e


def save_resume_file(resume: Resume, path: str | Path) -> Path:
    """Write a resume to a JSON file, replacing it atomically."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(resume.model_dump_json(indent=2))
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Saved resume {resume.id} to {path}")
    return path


class ResumeRepository:
    """Stores resume aggregates as JSON files in one directory."""

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory) if directory else get_settings().data_dir / "resumes"

    def _path_for(self, resume_id: UUID | str) -> Path:
        return self.directory / f"{UUID(str(resume_id))}.json"

    def get(self, resume_id: UUID | str) -> Optional[Resume]:
        """Get a resume by id, or None if it is not stored."""
        path = self._path_for(resume_id)
        if not path.exists():
            return None
        return load_resume_file(path)

    def save(self, resume: Resume) -> Path:
        """Insert or replace a resume."""
        return save_resume_file(resume, self._path_for(resume.id))

    def delete(self, resume_id: UUID | str) -> bool:
        path = self._path_for(resume_id)
        if not path.exists():
            return False
        path.unlink()
        logger.info(f"Deleted resume {resume_id}")
        return True

    def list_all(self) -> list[Resume]:
        """Load every stored resume, most recently updated first."""
        if not self.directory.exists():
            return []
        resumes = [load_resume_file(path) for path in sorted(self.directory.glob("*.json"))]
        return sorted(resumes, key=lambda r: r.updated_at, reverse=True)
