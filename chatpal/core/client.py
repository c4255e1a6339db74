"""
Chat-completions client.

Sends the whole current turn list to an OpenAI-compatible endpoint with a
single blocking POST and maps every failure to a typed ChatPalError:

- RemoteError:     non-2xx status (raw body kept, not parsed)
- DecodeError:     body is not valid JSON or lacks `choices`
- EmptyReplyError: `choices` is empty
- TransportError:  connection, timeout or request serialization failure

Nothing is retried; the session decides what to do with a failure.
"""

import logging
from typing import List, Optional, Tuple

import httpx
from pydantic import ValidationError

from chatpal.core.config import BotConfig
from chatpal.core.exceptions import (
    DecodeError,
    EmptyReplyError,
    RemoteError,
    TransportError,
)
from chatpal.core.types import ChatRequest, ChatResponse, Turn

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ChatClient:
    """Blocking HTTP client; one instance is reused for the whole session."""

    def __init__(
        self,
        url: str = CHAT_COMPLETIONS_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(self, turns: List[Turn], config: BotConfig) -> ChatRequest:
        return ChatRequest(
            model=config.model,
            messages=list(turns),
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            enable_thinking=False,
        )

    def send(self, turns: List[Turn], config: BotConfig) -> Tuple[str, int]:
        """
        Ask the remote model for the next assistant turn.

        Returns:
            Tuple of (reply_text, total_tokens); tokens is 0 when usage is absent

        Raises:
            RemoteError, EmptyReplyError, DecodeError, TransportError
        """
        try:
            payload = self.build_request(turns, config).model_dump(mode="json")
        except ValidationError as e:
            raise TransportError(f"Cannot serialize request: {e}") from e

        logger.debug(f"POST {self.url}: model={config.model}, turns={len(payload['messages'])}")

        try:
            response = self._http.post(
                self.url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {config.api_key}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logger.warning(f"Request to {self.url} failed: {e}")
            raise TransportError(f"Request failed: {e}", details={"url": self.url}) from e
        except UnicodeEncodeError as e:
            # header values must be ASCII
            logger.warning(f"Cannot encode request headers: {e}")
            raise TransportError(f"Invalid header value (api_key must be ASCII): {e}",
                                 details={"url": self.url}) from e

        if not response.is_success:
            logger.warning(f"Remote returned {response.status_code}")
            raise RemoteError(response.status_code, response.text)

        body = response.text
        try:
            parsed = ChatResponse.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response body: {e}", raw_response=body) from e

        if not parsed.choices:
            raise EmptyReplyError()

        tokens = parsed.usage.total_tokens if parsed.usage else 0
        reply = parsed.choices[0].message.content or ""
        logger.debug(f"Reply received: tokens={tokens}, chars={len(reply)}")
        return reply, tokens
