"""Configuration management for the business calls assistant."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Application configuration."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "calls-assistant")
    VERSION: str = os.getenv("VERSION", "1.0.0")

    # Application Settings
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:8000")  # Used by the terminal client
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional: log the raw chat message text.
    # Defaults to enabled in development (DEBUG=True) and disabled in production.
    # May include client names and phone numbers.
    LOG_CHAT_MESSAGES: bool = os.getenv(
        "LOG_CHAT_MESSAGES",
        "True" if DEBUG else "False",
    ).lower() == "true"
    LOG_CHAT_MESSAGES_MAX_CHARS: int = int(os.getenv("LOG_CHAT_MESSAGES_MAX_CHARS", "500"))

    # Comma separated list; "*" allows any origin (browser front end on another port).
    CORS_ALLOW_ORIGINS: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    @classmethod
    def cors_origins(cls) -> list[str]:
        """Return the configured CORS origins as a list."""
        origins = [o.strip() for o in cls.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def has_chat_logging(cls) -> bool:
        """Check if chat message text may be written to the logs."""
        return cls.LOG_CHAT_MESSAGES and cls.LOG_CHAT_MESSAGES_MAX_CHARS > 0


# Create a global config instance
config = Config()
