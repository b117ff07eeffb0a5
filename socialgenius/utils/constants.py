"""Constants used throughout the application."""

# Provider identifiers
PROVIDER_GEMINI = "gemini"
PROVIDER_OPENAI = "openai"
SUPPORTED_PROVIDERS = (PROVIDER_GEMINI, PROVIDER_OPENAI)

# Default models
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash-exp"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

# Generation parameters shared by both providers
GENERATION_TEMPERATURE = 0.9
GENERATION_MAX_TOKENS = 1024

OPENAI_SYSTEM_MESSAGE = (
    "You are a social media marketing expert for small businesses. "
    "You answer only with valid JSON."
)

# Prompt contents
IDEA_COUNT = 6
IDEA_CATEGORIES = [
    "practical tip",
    "interactive question",
    "special promotion",
    "educational content",
    "behind the scenes",
    "viral trend",
]

# Response schema
IDEAS_FIELD = "ideas"
IDEA_FIELD_DEFAULTS = {
    "category": "Uncategorized",
    "suggestedFormat": "Standard post",
    "hookTitle": "Untitled",
    "executionGuide": "No description",
}

# Max characters of model output echoed into logs
LOG_SNIPPET_LENGTH = 200

# Rate limiting
RATE_LIMIT_WINDOW_SECONDS = 60

# HTTP
API_NAME = "SocialGenius API"
API_VERSION = "1.0.0"
BUSINESS_TYPE_MAX_LENGTH = 100

# HTTP client and SDK loggers capped at the configured log level
THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "openai", "google_genai")
