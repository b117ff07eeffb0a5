"""
Error taxonomy for idea generation.

Every failure the core can produce is a GenerationError subclass, so the
HTTP layer can map kinds to status codes without inspecting messages.
"""

from typing import Optional


class GenerationError(Exception):
    """Base class for all idea generation failures."""


class ConfigurationError(GenerationError):
    """Missing credential or unsupported provider. Not retryable."""


class UpstreamUnavailableError(GenerationError):
    """The provider client call raised or timed out."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class EmptyResponseError(GenerationError):
    """The provider call succeeded but returned no text."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.provider = provider


class MalformedOutputError(GenerationError):
    """The model output could not be normalized into idea records."""


class RateLimitExceededError(GenerationError):
    """A client address exceeded its request budget for the current window."""

    def __init__(self, limit: int, retry_after: int):
        super().__init__(
            f"Rate limited: you have exceeded the limit of {limit} requests per minute. "
            f"Try again in {retry_after} seconds."
        )
        self.limit = limit
        self.retry_after = retry_after
