"""
ChatPal Custom Exception Hierarchy

All ChatPal-specific exceptions inherit from ChatPalError.
This enables:
  - Catching every failed exchange:  except ChatPalError
  - Catching specific categories:    except RemoteError
  - Clean error messages with structured context
"""


class ChatPalError(Exception):
    """Base exception for all ChatPal errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(ChatPalError):
    """Raised when the config file cannot be read, parsed or created."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message, details={"path": path})


class RemoteError(ChatPalError):
    """Raised when the chat endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Remote call failed ({status_code}): {body}",
            details={"status_code": status_code, "body": body[:500]},
        )


class EmptyReplyError(ChatPalError):
    """Raised when the endpoint returns no choices."""

    def __init__(self, message: str = "Remote returned an empty reply"):
        super().__init__(message)


class TransportError(ChatPalError):
    """Raised when the request cannot be sent or the connection fails."""
    pass


class DecodeError(ChatPalError):
    """Raised when the response body is not the expected JSON shape."""

    def __init__(self, message: str, raw_response: str = ""):
        self.raw_response = raw_response
        super().__init__(message, details={"raw_response": raw_response[:500]})


class StorageError(ChatPalError):
    """Raised when a conversation cannot be written or read back."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message, details={"path": path})
