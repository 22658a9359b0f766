"""
Text-generation service adapters.

The import pipeline only needs one operation: send a system instruction
plus one user message and await a single string reply. Concrete adapters
cover any OpenAI-compatible chat endpoint (OpenAI, OpenRouter) and a
local Ollama server. SDK errors are wrapped in GenerationFailure;
cancellation is never caught.
"""

from abc import ABC, abstractmethod
from typing import Optional

import ollama
import openai

from resumecraft.exceptions import GenerationFailure
from resumecraft.utils.config import GenerationSettings, get_settings
from resumecraft.utils.logger import get_logger

logger = get_logger(__name__)


class GenerationService(ABC):
    """Abstract base class for text-generation providers."""

    provider: str = ""

    @abstractmethod
    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Send one conversational turn and return the reply text."""

    @staticmethod
    def build_messages(system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]


class OpenAIGenerationService(GenerationService):
    """Chat completions against an OpenAI-compatible endpoint."""

    provider = "openai"

    def __init__(self, settings: GenerationSettings):
        self.settings = settings
        self.model = settings.resolved_model
        try:
            self.client = openai.AsyncOpenAI(
                api_key=settings.api_key,
                base_url=settings.base_url,
                timeout=settings.request_timeout,
            )
        except openai.OpenAIError as e:
            raise GenerationFailure(f"Cannot configure OpenAI client: {e}", self.provider) from e

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        logger.debug(f"Requesting completion from {self.model}")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(system_prompt, user_prompt),
                temperature=self.settings.temperature,
                max_tokens=self.settings.max_tokens,
            )
        except openai.OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise GenerationFailure(str(e), self.provider) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


class OllamaGenerationService(GenerationService):
    """Chat against a local Ollama server."""

    provider = "ollama"

    def __init__(self, settings: GenerationSettings):
        self.settings = settings
        self.model = settings.resolved_model
        self.client = ollama.AsyncClient(host=settings.ollama_host)

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        logger.debug(f"Requesting chat from Ollama model {self.model}")
        try:
            response = await self.client.chat(
                model=self.model,
                messages=self.build_messages(system_prompt, user_prompt),
                options={
                    "temperature": self.settings.temperature,
                    "num_predict": self.settings.max_tokens,
                },
            )
        except (ollama.ResponseError, ConnectionError) as e:
            logger.error(f"Ollama request failed: {e}")
            raise GenerationFailure(str(e), self.provider) from e

        return response.message.content or ""


def get_generation_service(settings: Optional[GenerationSettings] = None) -> GenerationService:
    """Factory function returning the configured provider's adapter."""
    settings = settings or get_settings().generation

    if settings.provider == "openai":
        return OpenAIGenerationService(settings)
    elif settings.provider == "ollama":
        return OllamaGenerationService(settings)
    else:
        raise ValueError(f"Unsupported generation provider: {settings.provider}")
