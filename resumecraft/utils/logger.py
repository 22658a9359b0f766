"""
Logging for the ResumeCraft import pipeline.

Built on Loguru. Besides the console and the rotating application log,
every completed import writes one summary line to a separate import
history log, so a resume's import runs can be traced later.
"""

import sys
from typing import Any
from uuid import UUID

from loguru import logger

from resumecraft.utils.config import get_settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)

HISTORY_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | resume={extra[import_run]} | {message}"


def _is_import_summary(record: dict) -> bool:
    return "import_run" in record["extra"]


def setup_logging() -> None:
    """
    Install the console, application file and import history sinks.

    File sinks are skipped when `LOG_FILE_OUTPUT` is false.
    """
    settings = get_settings()
    log_settings = settings.logging

    logger.remove()
    logger.configure(extra={"name": "resumecraft"})

    # Stack-variable values in tracebacks can contain resume contents
    enable_diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            backtrace=True,
            diagnose=enable_diagnose,
        )

    if log_settings.file_output:
        log_file = log_settings.file_path
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=log_settings.format,
            level=log_settings.level,
            rotation=log_settings.rotation,
            retention=log_settings.retention,
            compression="zip",
            backtrace=True,
            diagnose=enable_diagnose,
            enqueue=True,
        )
        logger.add(
            log_file.parent / "imports.log",
            format=HISTORY_FORMAT,
            level="INFO",
            filter=_is_import_summary,
            rotation="1 month",
            retention=log_settings.retention,
            enqueue=True,
        )

    logger.debug(f"Logging ready at level {log_settings.level}")


def get_logger(name: str) -> Any:
    """Return the shared logger bound to a component name."""
    return logger.bind(name=name)


def log_import(resume_id: UUID | str, added: dict[str, int], merged: dict[str, int]) -> None:
    """Write one import run's counts to the import history."""
    counts = ", ".join(
        f"{kind}=+{added.get(kind, 0)}/-{merged.get(kind, 0)}"
        for kind in sorted(set(added) | set(merged))
    )
    logger.bind(name="import", import_run=str(resume_id)).info(f"import finished: {counts}")


class LoggerMixin:
    """
    Gives a class a `logger` bound to its class name.

    Usage:
        class TextExtractor(LoggerMixin):
            def extract(self, source):
                self.logger.info("Extracting...")
    """

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
