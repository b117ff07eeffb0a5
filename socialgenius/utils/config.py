import os
from pathlib import Path
from dotenv import load_dotenv

from socialgenius.utils.constants import DEFAULT_GEMINI_MODEL, DEFAULT_OPENAI_MODEL

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("SOCIALGENIUS_ENV", "dev")
        self._load_env_file()

        # AI provider settings
        self.ai_api_key = os.getenv("AI_API_KEY")
        self.ai_provider = os.getenv("AI_PROVIDER", "gemini").strip().lower()
        self.ai_timeout = self._parse_timeout(os.getenv("AI_TIMEOUT_SECONDS", "60"))

        # Model settings
        self.google_ai_model = os.getenv("GOOGLE_AI_MODEL", DEFAULT_GEMINI_MODEL)
        self.openai_model = os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)

        # Server settings
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", 3000))
        self.app_env = os.getenv("APP_ENV", "development")
        self.allowed_origins = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
            if origin.strip()
        ]

        # Rate limiting settings
        self.rate_limit_per_minute = int(os.getenv("RATE_LIMIT_PER_MINUTE", 6))
        self.rate_limit_max_keys = int(os.getenv("RATE_LIMIT_MAX_KEYS", 1000))

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
                print(f"Loading environment from {env_file}")
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        # Load the environment file
        load_dotenv(env_file)

    @staticmethod
    def _parse_timeout(value):
        """A timeout of 0, 'none' or 'off' disables the upstream timeout."""
        if value.strip().lower() in ("", "0", "none", "off"):
            return None
        return float(value)

# Create a global config instance
config = Config()
