import json
import logging
import os
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from chatpal.core.config import BotConfig
from chatpal.core.exceptions import StorageError
from chatpal.core.types import Conversation

logger = logging.getLogger(__name__)


def conversation_filename(config: BotConfig, now: datetime) -> str:
    """<save_path>/<YYYYMMDD_HHMM>_<name>_<username>.json with spaces as underscores."""
    sanitized_name = config.name.replace(" ", "_")
    sanitized_user = config.username.replace(" ", "_")
    filename = f"{now.strftime('%Y%m%d_%H%M')}_{sanitized_name}_{sanitized_user}.json"
    return os.path.join(config.save_path, filename)


def save_conversation(
    conversation: Conversation,
    config: BotConfig,
    now: Optional[datetime] = None,
) -> str:
    """
    Write the full conversation, system turn included, as pretty JSON.

    A file saved within the same minute is overwritten.

    Returns:
        Path of the written file

    Raises:
        StorageError: If the directory or the file cannot be written
    """
    filepath = conversation_filename(config, now or datetime.now())
    data = conversation.model_dump(mode="json")

    try:
        os.makedirs(config.save_path, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error(f"Failed to save conversation to {filepath}: {e}")
        raise StorageError(f"Cannot save conversation: {e}", path=filepath) from e

    logger.info(f"Conversation saved: {filepath} ({len(conversation.history)} turns)")
    return filepath


def load_conversation(filepath: str) -> Conversation:
    """Read a conversation previously written by save_conversation."""
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return Conversation.model_validate_json(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Cannot read conversation: {e}", path=filepath) from e
    except ValidationError as e:
        raise StorageError(f"Malformed conversation file: {e}", path=filepath) from e
