"""
Factory for creating service instances.
"""

from socialgenius.exceptions import ConfigurationError
from socialgenius.services.ai_service import AIService, ProviderConfig
from socialgenius.utils.config import config
from socialgenius.utils.constants import PROVIDER_GEMINI


def create_ai_service(settings=config) -> AIService:
    """
    Create the AI service from process configuration.

    Args:
        settings: Config instance to read from (defaults to the global config)

    Returns:
        AIService bound to the configured provider

    Raises:
        ConfigurationError: if AI_API_KEY is not set
    """
    if not settings.ai_api_key:
        raise ConfigurationError("AI_API_KEY is not set in the environment")

    provider = settings.ai_provider or PROVIDER_GEMINI
    model = settings.google_ai_model if provider == PROVIDER_GEMINI else settings.openai_model

    return AIService(
        ProviderConfig(
            provider=provider,
            api_key=settings.ai_api_key,
            model=model,
            timeout=settings.ai_timeout,
        )
    )
