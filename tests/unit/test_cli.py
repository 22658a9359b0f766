"""
Tests for the resumecraft CLI commands.
"""

import pytest
from typer.testing import CliRunner

from resumecraft.cli import app
from resumecraft.core.importer import ResumeImporter
from resumecraft.data import load_resume_file, save_resume_file
from resumecraft.data.models import Skill
from resumecraft.utils.constants import CollectionKind

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr("resumecraft.utils.logger.setup_logging", lambda: None)


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "testing" in result.output


class TestSections:
    def test_prints_each_section(self, tmp_path, sample_canonical_text):
        path = tmp_path / "canonical.txt"
        path.write_text(sample_canonical_text, encoding="utf-8")

        result = runner.invoke(app, ["sections", str(path)])

        assert result.exit_code == 0
        assert "WORK EXPERIENCE" in result.output
        assert "Captain at Chess Club" in result.output

    def test_parse_counts(self, tmp_path, sample_canonical_text):
        path = tmp_path / "canonical.txt"
        path.write_text(sample_canonical_text, encoding="utf-8")

        result = runner.invoke(app, ["sections", str(path), "--parse"])

        assert result.exit_code == 0
        assert "Parsed Drafts" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["sections", str(tmp_path / "none.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestShow:
    def test_lists_visible_records(self, tmp_path, resume):
        resume.personal.first_name = "Jane"
        resume.personal.last_name = "Doe"
        resume.add(CollectionKind.SKILLS, Skill(name="Python", category="Languages"))
        resume.add(CollectionKind.SKILLS, Skill(name="Cobol", visible=False))
        path = save_resume_file(resume, tmp_path / "resume.json")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "Jane Doe" in result.output
        assert "Languages: Python" in result.output
        assert "Cobol" not in result.output

    def test_hidden_flag(self, tmp_path, resume):
        resume.add(CollectionKind.SKILLS, Skill(name="Cobol", visible=False))
        path = save_resume_file(resume, tmp_path / "resume.json")

        result = runner.invoke(app, ["show", str(path), "--hidden"])

        assert "Cobol" in result.output

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text("[]", encoding="utf-8")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1


class TestImportResume:
    def test_unsupported_provider(self, tmp_path):
        result = runner.invoke(
            app,
            ["import-resume", "cv.pdf", "--resume", str(tmp_path / "r.json"), "--provider", "bard"],
        )
        assert result.exit_code == 1
        assert "Unsupported provider" in result.output

    def test_unreadable_document(self, tmp_path):
        result = runner.invoke(
            app,
            [
                "import-resume",
                str(tmp_path / "missing.pdf"),
                "--resume",
                str(tmp_path / "r.json"),
                "--provider",
                "ollama",
            ],
        )
        assert result.exit_code == 1
        assert "Import failed" in result.output
        assert not (tmp_path / "r.json").exists()

    def test_saves_imported_records(self, tmp_path, monkeypatch, sample_canonical_text):
        async def fake_import(self, source, resume):
            return self.import_canonical_text(sample_canonical_text, resume)

        monkeypatch.setattr(ResumeImporter, "import_document", fake_import)
        resume_path = tmp_path / "r.json"

        result = runner.invoke(
            app, ["import-resume", "cv.pdf", "--resume", str(resume_path), "--provider", "ollama"]
        )

        assert result.exit_code == 0, result.output
        assert "Import Summary" in result.output
        saved = load_resume_file(resume_path)
        assert len(saved.experiences) == 2
        assert saved.personal.email == "jane.doe@example.com"
