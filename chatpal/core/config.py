"""
ChatPal Configuration System.

BotConfig is a Pydantic BaseSettings snapshot loaded once at startup from:
  1. bot_config.json (written with defaults when missing)
  2. Environment variables (CHATPAL_ prefix) for fields the file omits
  3. .env file
  4. Defaults

Usage:
    config = load_config()                 # reads or creates bot_config.json
    config = BotConfig(model="qwen-plus")  # explicit
"""

import json
import logging
import os

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatpal.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "bot_config.json"


class BotConfig(BaseSettings):
    """Immutable session configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CHATPAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Identity
    name: str = Field(default="ChatPal", description="Bot display name")
    username: str = Field(default="User", description="Name shown for the human side")

    # Remote model
    api_key: str = Field(default="", description="Bearer token for the chat endpoint")
    model: str = Field(default="qwen3-235b-a22b", description="Remote model id")
    temperature: float = Field(default=0.8, description="Sampling temperature")
    max_tokens: int = Field(default=2000, description="Completion token cap per reply")

    # Context
    max_history: int = Field(default=10, description="Advertised memory capacity in exchanges")
    max_context_chars: int = Field(default=8000, description="Turns longer than this are trimmed")

    # Storage & output
    save_path: str = Field(default="conversations", description="Directory for saved conversations")
    verbose: bool = Field(default=False, description="Enable verbose/debug logging")

    def setup_logging(self) -> None:
        """Configure Python logging based on verbose flag."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        # Quiet noisy libraries
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logger.debug(f"Logging configured: level={logging.getLevelName(level)}")


def default_settings() -> dict:
    """Field defaults, independent of the environment."""
    return {name: field.default for name, field in BotConfig.model_fields.items()}


def load_config(path: str = DEFAULT_CONFIG_PATH) -> BotConfig:
    """
    Load the bot config from a JSON file, creating it with defaults if absent.

    Raises:
        ConfigError: If the file is malformed or the default cannot be written
    """
    if not os.path.exists(path):
        return _create_default(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config file {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object", path=path)

    try:
        config = BotConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values in {path}: {e}", path=path) from e

    logger.debug(f"Config loaded from {path}: model={config.model}")
    return config


def _create_default(path: str) -> BotConfig:
    defaults = default_settings()
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(defaults, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ConfigError(f"Cannot create default config {path}: {e}", path=path) from e

    logger.warning(f"Config file not found, created default: {path}")
    return BotConfig(**defaults)
