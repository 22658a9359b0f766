"""
External service adapters for ResumeCraft import.
"""

from .generation import (
    GenerationService,
    OllamaGenerationService,
    OpenAIGenerationService,
    get_generation_service,
)

__all__ = [
    "GenerationService",
    "OllamaGenerationService",
    "OpenAIGenerationService",
    "get_generation_service",
]
