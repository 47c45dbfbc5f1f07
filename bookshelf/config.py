"""
Bookshelf API configuration.

Values come from environment variables (optionally via a ``.env`` file)
with safe defaults, validated once at load time.
"""
import os
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Configuration validation error"""
    pass


class Config:
    """Application configuration with environment variable validation"""

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080
    APP_LOG_LEVEL: str = "INFO"

    def __init__(self):
        """Initialize and validate configuration"""
        self._load_env_vars()
        self._validate_config()

    def _load_env_vars(self) -> None:
        self.APP_HOST = os.getenv("APP_HOST", self.APP_HOST)
        port = os.getenv("APP_PORT", str(self.APP_PORT))
        try:
            self.APP_PORT = int(port)
        except ValueError:
            raise ConfigError(f"Invalid APP_PORT: {port!r} is not an integer")
        self.APP_LOG_LEVEL = os.getenv("APP_LOG_LEVEL", self.APP_LOG_LEVEL).upper()

    def _validate_config(self) -> None:
        if not 1 <= self.APP_PORT <= 65535:
            raise ConfigError("APP_PORT must be between 1 and 65535")

        if self.APP_LOG_LEVEL not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid APP_LOG_LEVEL: must be one of {', '.join(LOG_LEVELS)}"
            )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    return Config()
