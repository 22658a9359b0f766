"""
Tests for resumecraft.utils.config: settings defaults and validation.
"""

import pytest
from pydantic import ValidationError

from resumecraft.data import ResumeRepository
from resumecraft.utils import config
from resumecraft.utils.config import (
    AppSettings,
    ExtractionSettings,
    GenerationSettings,
    LoggingSettings,
    OCRSettings,
    get_settings,
    reload_settings,
)


class TestOCRSettings:
    def test_default_config(self):
        assert OCRSettings(engine_mode=1, page_segmentation_mode=3).tesseract_config == "--oem 1 --psm 3"

    def test_language_correction_off(self):
        settings = OCRSettings(engine_mode=1, page_segmentation_mode=6, language_correction=False)
        assert settings.tesseract_config == (
            "--oem 1 --psm 6 -c load_system_dawg=0 -c load_freq_dawg=0"
        )


class TestGenerationSettings:
    @pytest.mark.parametrize("value", [-0.1, 2.5])
    def test_temperature_range(self, value):
        with pytest.raises(ValidationError):
            GenerationSettings(temperature=value)

    def test_resolved_model_defaults_per_provider(self):
        assert GenerationSettings(provider="openai", model=None).resolved_model == "gpt-4o-mini"
        assert GenerationSettings(provider="ollama", model=None).resolved_model == "llama3.1"

    def test_explicit_model_wins(self):
        assert GenerationSettings(provider="ollama", model="qwen2.5").resolved_model == "qwen2.5"

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValidationError):
            GenerationSettings(provider="anthropic")

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("LLM_MAX_TOKENS", "512")
        assert GenerationSettings().max_tokens == 512


class TestAppSettings:
    def test_testing_environment(self):
        assert AppSettings().environment == "testing"

    def test_max_file_size_bytes(self):
        assert ExtractionSettings(max_file_size_mb=2).max_file_size_bytes == 2 * 1024 * 1024

    def test_singleton_and_reload(self):
        first = get_settings()
        assert get_settings() is first
        assert reload_settings() is not first


class TestDefaultPaths:
    @pytest.fixture
    def workdir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config, "_settings", None)
        return tmp_path

    def test_log_file_under_working_directory(self, workdir):
        assert LoggingSettings().file_path == workdir / "logs" / "resumecraft.log"

    def test_data_dir_under_working_directory(self, workdir):
        assert AppSettings().data_dir == workdir / "data"

    def test_repository_defaults_to_data_dir(self, workdir):
        assert ResumeRepository().directory == workdir / "data" / "resumes"

    def test_data_dir_from_environment(self, workdir, monkeypatch):
        monkeypatch.setenv("APP_DATA_DIR", str(workdir / "store"))
        assert AppSettings().data_dir == workdir / "store"
