"""
Provider gateway for content idea generation.
Routes a built prompt to exactly one upstream model (Gemini or OpenAI) and
normalizes the text it returns.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from google import genai
from openai import AsyncOpenAI

from socialgenius.exceptions import ConfigurationError, EmptyResponseError, UpstreamUnavailableError
from socialgenius.models.idea import IdeaRecord
from socialgenius.services.prompt_builder import build_prompt
from socialgenius.services.response_parser import parse_response
from socialgenius.utils.constants import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
    GENERATION_MAX_TOKENS,
    GENERATION_TEMPERATURE,
    OPENAI_SYSTEM_MESSAGE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
    SUPPORTED_PROVIDERS,
)
from socialgenius.utils.logger import logger

PROVIDER_DISPLAY_NAMES = {
    PROVIDER_GEMINI: "Gemini",
    PROVIDER_OPENAI: "OpenAI",
}


@dataclass(frozen=True)
class ProviderConfig:
    """Provider selection and credentials, fixed for the lifetime of an AIService."""

    provider: str
    api_key: str
    model: Optional[str] = None
    timeout: Optional[float] = 60.0


@dataclass(frozen=True)
class GeminiBackend:
    client: Any
    model: str
    kind: str = field(default=PROVIDER_GEMINI, init=False)


@dataclass(frozen=True)
class OpenAIBackend:
    client: Any
    model: str
    kind: str = field(default=PROVIDER_OPENAI, init=False)


Backend = Union[GeminiBackend, OpenAIBackend]


class AIService:
    """Generates content ideas through the configured provider."""

    def __init__(self, config: ProviderConfig, gemini_client: Any = None, openai_client: Any = None):
        """
        Initialize the AI service.

        Args:
            config: Provider selection and credentials
            gemini_client: Pre-built google.genai.Client, used instead of building one
            openai_client: Pre-built openai.AsyncOpenAI, used instead of building one
        """
        self.config = config
        self.provider = config.provider
        self.backend: Optional[Backend] = self._build_backend(config, gemini_client, openai_client)

    @staticmethod
    def _build_backend(config: ProviderConfig, gemini_client: Any, openai_client: Any) -> Optional[Backend]:
        # Unknown providers are reported on the first call, not here
        if config.provider == PROVIDER_GEMINI:
            client = gemini_client if gemini_client is not None else genai.Client(api_key=config.api_key)
            return GeminiBackend(client=client, model=config.model or DEFAULT_GEMINI_MODEL)
        if config.provider == PROVIDER_OPENAI:
            client = openai_client if openai_client is not None else AsyncOpenAI(api_key=config.api_key)
            return OpenAIBackend(client=client, model=config.model or DEFAULT_OPENAI_MODEL)
        return None

    @property
    def model(self) -> Optional[str]:
        return self.backend.model if self.backend else None

    async def generate_ideas(self, business_type: str) -> List[IdeaRecord]:
        """
        Generate content ideas for a business type.

        Args:
            business_type: Free-text business description

        Returns:
            Non-empty list of IdeaRecord

        Raises:
            ConfigurationError: if the configured provider is not supported
            UpstreamUnavailableError: if the provider call fails or times out
            EmptyResponseError: if the provider returns no text
            MalformedOutputError: if the text cannot be normalized
        """
        prompt = build_prompt(business_type)
        backend = self.backend

        if isinstance(backend, GeminiBackend):
            text = await self._call_gemini(backend, prompt)
        elif isinstance(backend, OpenAIBackend):
            text = await self._call_openai(backend, prompt)
        else:
            raise ConfigurationError(
                f"Unsupported AI provider: {self.provider} (expected one of: {', '.join(SUPPORTED_PROVIDERS)})"
            )

        ideas = parse_response(text)
        logger.info(f"Generated {len(ideas)} ideas with {PROVIDER_DISPLAY_NAMES[backend.kind]}")
        return ideas

    async def _call_gemini(self, backend: GeminiBackend, prompt: str) -> str:
        """Call Gemini and return the raw response text."""
        logger.info(f"Requesting ideas from Gemini ({backend.model})")
        try:
            response = await self._with_timeout(
                backend.client.aio.models.generate_content(
                    model=backend.model,
                    contents=prompt,
                    config={
                        "temperature": GENERATION_TEMPERATURE,
                        "max_output_tokens": GENERATION_MAX_TOKENS,
                    },
                )
            )
            text = response.text
        except Exception as e:
            raise self._upstream_error(PROVIDER_GEMINI, e) from e

        return self._require_text(PROVIDER_GEMINI, text)

    async def _call_openai(self, backend: OpenAIBackend, prompt: str) -> str:
        """Call OpenAI chat completions and return the raw response text."""
        logger.info(f"Requesting ideas from OpenAI ({backend.model})")
        try:
            response = await self._with_timeout(
                backend.client.chat.completions.create(
                    model=backend.model,
                    messages=[
                        {"role": "system", "content": OPENAI_SYSTEM_MESSAGE},
                        {"role": "user", "content": prompt},
                    ],
                    temperature=GENERATION_TEMPERATURE,
                    max_tokens=GENERATION_MAX_TOKENS,
                )
            )
            text = response.choices[0].message.content if response.choices else None
        except Exception as e:
            raise self._upstream_error(PROVIDER_OPENAI, e) from e

        return self._require_text(PROVIDER_OPENAI, text)

    async def _with_timeout(self, awaitable):
        if self.config.timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=self.config.timeout)

    def _upstream_error(self, provider: str, error: Exception) -> UpstreamUnavailableError:
        name = PROVIDER_DISPLAY_NAMES[provider]
        if isinstance(error, asyncio.TimeoutError):
            cause = f"request timed out after {self.config.timeout} seconds"
        else:
            cause = str(error) or error.__class__.__name__
        logger.error(f"{name} API call failed: {cause}")
        return UpstreamUnavailableError(f"{name} API Error: {cause}", provider=provider)

    @staticmethod
    def _require_text(provider: str, text: Optional[str]) -> str:
        if not text:
            name = PROVIDER_DISPLAY_NAMES[provider]
            logger.error(f"Empty response from {name}")
            raise EmptyResponseError(f"No response received from {name} model", provider=provider)
        return text
