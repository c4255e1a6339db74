"""
Shared pytest fixtures for the ChatPal test suite.

Provides configs, sample conversations, a mock chat client and a captured
console so individual test files can focus on behavior, not setup.
"""

import io
import json

import httpx
import pytest
from rich.console import Console

from chatpal.core.client import ChatClient
from chatpal.core.config import BotConfig
from chatpal.core.context import ContextManager
from chatpal.core.exceptions import RemoteError
from chatpal.core.types import Conversation, Role, Turn
from chatpal.interface.ui import ChatUI


class MockChatClient:
    """Chat client that returns configurable replies without network calls."""

    def __init__(self, reply: str = "Mock reply", tokens: int = 42, error: Exception | None = None):
        self._reply = reply
        self._tokens = tokens
        self._error = error
        self.call_count = 0
        self.last_turns = None

    def send(self, turns, config):
        self.call_count += 1
        self.last_turns = list(turns)
        if self._error is not None:
            raise self._error
        return self._reply, self._tokens


def make_turn(role: Role, content: str) -> Turn:
    return Turn(role=role, content=content)


def completion_body(content: str = "Hello there", total_tokens: int | None = 17) -> dict:
    body = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    if total_tokens is not None:
        body["usage"] = {"total_tokens": total_tokens}
    return body


@pytest.fixture
def config(tmp_path):
    """A config that saves under a temp directory."""
    return BotConfig(
        name="Chat Pal",
        username="a b",
        api_key="sk-test",
        save_path=str(tmp_path / "conversations"),
    )


@pytest.fixture
def conversation():
    """A conversation holding only the system turn."""
    return Conversation.start("You are a test bot.")


@pytest.fixture
def long_conversation():
    """system + three full exchanges."""
    conv = Conversation.start("You are a test bot.")
    for i in range(3):
        conv.history.append(make_turn(Role.USER, f"question {i}"))
        conv.history.append(make_turn(Role.ASSISTANT, f"answer {i}"))
    return conv


@pytest.fixture
def context(conversation):
    return ContextManager(conversation)


@pytest.fixture
def mock_client():
    return MockChatClient()


@pytest.fixture
def failing_client():
    return MockChatClient(error=RemoteError(500, "internal error"))


@pytest.fixture
def console():
    """A Rich console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def ui(console):
    return ChatUI(console=console)


@pytest.fixture
def http_client():
    """Build a ChatClient whose requests go to a handler instead of the network."""
    clients = []

    def _factory(handler):
        client = ChatClient(url="https://example.test/v1/chat/completions",
                            transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _factory
    for client in clients:
        client.close()


@pytest.fixture
def json_response():
    def _respond(body, status_code=200):
        return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"),
                              headers={"Content-Type": "application/json"})
    return _respond
