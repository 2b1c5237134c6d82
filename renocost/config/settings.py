"""renocost configuration settings.

Loads configuration from environment variables with sensible defaults.
Pricing constants (markup, blended split, hours heuristic) live beside the
code that uses them, not here.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

from renocost.config.errors import ConfigurationError

# Load .env file for local overrides (log level, default jurisdiction, etc.)
load_dotenv()

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Pricing
    default_jurisdiction: str = field(
        default_factory=lambda: os.getenv("RENOCOST_DEFAULT_JURISDICTION", "ON").strip().upper()
    )

    # Flyer matching
    flyer_match_limit: int = field(
        default_factory=lambda: int(os.getenv("RENOCOST_FLYER_MATCH_LIMIT", "4"))
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_json: bool = field(default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true")

    def validate(self) -> None:
        """Validate settings.

        Raises:
            ConfigurationError: If a setting holds an unusable value.
        """
        if self.flyer_match_limit <= 0:
            raise ConfigurationError(
                f"RENOCOST_FLYER_MATCH_LIMIT must be positive, got {self.flyer_match_limit}",
                setting="flyer_match_limit",
            )
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown LOG_LEVEL {self.log_level!r}",
                setting="log_level",
            )


# Singleton settings instance
settings = Settings()
