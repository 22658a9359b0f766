"""
Configuration management for ResumeCraft import.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _working_dir(*parts: str) -> Path:
    return Path.cwd().joinpath(*parts)


class ExtractionSettings(BaseSettings):
    """Document text extraction configuration."""

    model_config = SettingsConfigDict(env_prefix="EXTRACT_")

    max_file_size_mb: int = 50
    # DPI used when rendering an image-only page for OCR
    render_resolution: int = 300

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


class OCRSettings(BaseSettings):
    """Tesseract OCR configuration."""

    model_config = SettingsConfigDict(env_prefix="OCR_")

    languages: str = "eng+deu"
    # 1 = LSTM only, the accurate recognizer
    engine_mode: int = 1
    # 3 = fully automatic page segmentation
    page_segmentation_mode: int = 3
    # Dictionary-based word correction
    language_correction: bool = True
    tesseract_cmd: Optional[str] = None

    @property
    def tesseract_config(self) -> str:
        """Build the tesseract command-line config string."""
        config = f"--oem {self.engine_mode} --psm {self.page_segmentation_mode}"
        if not self.language_correction:
            config += " -c load_system_dawg=0 -c load_freq_dawg=0"
        return config


class GenerationSettings(BaseSettings):
    """Text-generation (LLM) provider configuration."""

    model_config = SettingsConfigDict(env_prefix="LLM_")

    provider: Literal["openai", "ollama"] = "openai"
    model: Optional[str] = None
    api_key: Optional[str] = None
    # Any OpenAI-compatible endpoint, e.g. https://openrouter.ai/api/v1
    base_url: Optional[str] = None
    temperature: float = 0.2
    max_tokens: int = 4096
    request_timeout: float = 600.0
    ollama_host: str = "http://localhost:11434"

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("temperature must be between 0 and 2")
        return v

    @property
    def resolved_model(self) -> str:
        """Model name, falling back to the provider default."""
        if self.model:
            return self.model
        return {"openai": "gpt-4o-mini", "ollama": "llama3.1"}[self.provider]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = Field(default_factory=lambda: _working_dir("logs", "resumecraft.log"))
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "ResumeCraft Import"
    version: str = "0.1.0"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Resume JSON files live under <data_dir>/resumes
    data_dir: Path = Field(default_factory=lambda: _working_dir("data"))

    # Nested settings
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    ocr: OCRSettings = Field(default_factory=OCRSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
