"""
ChatPal: a terminal companion for OpenAI-compatible chat endpoints

Keeps one ongoing conversation, trims it to a character budget before
every request, and saves it to disk on demand.
"""

__version__ = "0.1.0"

from chatpal.core.config import BotConfig, load_config
from chatpal.core.types import Role, Turn, Conversation
from chatpal.core.context import ContextManager, trim_context
from chatpal.core.client import ChatClient
from chatpal.core.store import save_conversation, load_conversation
from chatpal.core.exceptions import ChatPalError

__all__ = [
    "__version__",
    "BotConfig",
    "load_config",
    "Role",
    "Turn",
    "Conversation",
    "ContextManager",
    "trim_context",
    "ChatClient",
    "save_conversation",
    "load_conversation",
    "ChatPalError",
]
