"""
ChatPal Core - conversation context, chat client and storage

Re-exports all public interfaces for clean imports:
    from chatpal.core import Turn, Role, ContextManager, ChatClient
"""

# Data structures
from chatpal.core.types import (
    Role,
    Turn,
    Conversation,
    ChatRequest,
    ChatResponse,
)

# Exceptions
from chatpal.core.exceptions import (
    ChatPalError,
    ConfigError,
    RemoteError,
    EmptyReplyError,
    TransportError,
    DecodeError,
    StorageError,
)

# Core components
from chatpal.core.config import BotConfig, load_config
from chatpal.core.context import ContextManager, trim_context
from chatpal.core.client import ChatClient
from chatpal.core.store import conversation_filename, save_conversation, load_conversation

__all__ = [
    # Types
    "Role", "Turn", "Conversation", "ChatRequest", "ChatResponse",
    # Exceptions
    "ChatPalError", "ConfigError", "RemoteError", "EmptyReplyError",
    "TransportError", "DecodeError", "StorageError",
    # Components
    "BotConfig", "load_config", "ContextManager", "trim_context", "ChatClient",
    "conversation_filename", "save_conversation", "load_conversation",
]
