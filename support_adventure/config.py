"""
Centralized configuration with environment variable overrides.

Presentation and logging settings are configurable here. Story content
and its fixed narrative strings live in support_adventure.story.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from support_adventure.logging_context import SessionIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class GameConfig:
    """Narrative and presentation settings loaded from environment or defaults."""

    role_title: str = os.getenv("ADVENTURE_ROLE", "AWS Networking Cloud Support Engineer")
    max_visible_choices: int = _safe_int("MAX_VISIBLE_CHOICES", "3")
    max_input_length: int = _safe_int("MAX_INPUT_LENGTH", "100")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    game: GameConfig = field(default_factory=GameConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "support-adventure")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if not config.game.role_title.strip():
        raise ValueError("ADVENTURE_ROLE must not be empty")
    if config.game.max_visible_choices < 1:
        raise ValueError(
            f"MAX_VISIBLE_CHOICES must be >= 1, got {config.game.max_visible_choices}"
        )
    if config.game.max_input_length < 1:
        raise ValueError(
            f"MAX_INPUT_LENGTH must be >= 1, got {config.game.max_input_length}"
        )


def build_log_handler() -> logging.Handler:
    """Stream handler that stamps every record with the active session ID."""
    handler = logging.StreamHandler()
    handler.addFilter(SessionIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[build_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
