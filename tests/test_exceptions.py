"""Tests for chatpal.core.exceptions — Custom exception hierarchy."""

import pytest
from chatpal.core.exceptions import (
    ChatPalError,
    ConfigError,
    RemoteError,
    EmptyReplyError,
    TransportError,
    DecodeError,
    StorageError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_chatpal_error(self):
        """All custom exceptions should inherit from ChatPalError."""
        for exc_class in (ConfigError, RemoteError, EmptyReplyError,
                          TransportError, DecodeError, StorageError):
            assert issubclass(exc_class, ChatPalError)

    def test_catch_all_exchange_errors(self):
        """A failed exchange of any kind is caught by one except clause."""
        for exc in (RemoteError(502, "bad gateway"), EmptyReplyError(),
                    TransportError("refused"), DecodeError("garbage")):
            with pytest.raises(ChatPalError):
                raise exc


class TestRemoteError:
    def test_message_format(self):
        e = RemoteError(429, "rate limited")
        assert "429" in str(e)
        assert "rate limited" in str(e)

    def test_details(self):
        e = RemoteError(500, "x" * 1000)
        assert e.status_code == 500
        assert len(e.body) == 1000
        assert len(e.details["body"]) <= 500


class TestDecodeError:
    def test_raw_response_truncated(self):
        e = DecodeError(message="Parse failed", raw_response="a" * 1000)
        assert len(e.details["raw_response"]) <= 500


class TestStorageError:
    def test_path_kept(self):
        e = StorageError("disk full", path="conversations/x.json")
        assert e.path == "conversations/x.json"
        assert e.details["path"] == "conversations/x.json"
