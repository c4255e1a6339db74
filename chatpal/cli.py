"""
ChatPal CLI — interactive chat with a remote model in your terminal.

Usage:
    chatpal

In-session commands:
    /save          — save the conversation to a JSON file
    /exit, /quit   — end the session (asks whether to save first)
"""

import logging
import sys
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv

from chatpal.core.client import ChatClient
from chatpal.core.config import BotConfig, load_config
from chatpal.core.context import ContextManager
from chatpal.core.exceptions import ChatPalError, ConfigError, StorageError
from chatpal.core.prompts import COMPANION_SYSTEM_PROMPT
from chatpal.core.store import save_conversation
from chatpal.core.types import Conversation, Role
from chatpal.interface.ui import ChatUI

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")
SAVE_COMMAND = "/save"


class ChatSession:
    """One conversation between the user and the remote model."""

    def __init__(
        self,
        config: BotConfig,
        client: ChatClient,
        ui: ChatUI,
        read_line: Optional[Callable[[str], str]] = None,
        system_prompt: str = COMPANION_SYSTEM_PROMPT,
    ):
        self.config = config
        self.client = client
        self.ui = ui
        self.read_line = read_line or ui.prompt
        self.context = ContextManager(Conversation.start(system_prompt))
        self.running = True

    @property
    def conversation(self) -> Conversation:
        return self.context.conversation

    def handle(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False once the session should end
        """
        line = line.strip()

        if line in EXIT_COMMANDS:
            self.ui.success(f"\n{self.config.name} says: bye {self.config.username}, talk soon!")
            self.running = False
        elif line == SAVE_COMMAND:
            self.save()
        elif line:
            self.exchange(line)

        return self.running

    def exchange(self, text: str) -> bool:
        """Send one user message; on failure the message is rolled back."""
        turn = self.context.add(Role.USER, text)
        self.context.trim(self.config.max_context_chars)

        try:
            with self.ui.thinking(self.config):
                reply, tokens = self.client.send(self.context.turns, self.config)
        except ChatPalError as e:
            logger.warning(f"Exchange failed: {e}")
            self.ui.error(f"AI error: {e}")
            self.ui.warning("Recovering conversation...")
            self.context.rollback(turn)
            return False

        self.ui.reply(self.config.name, reply)
        self.ui.token_usage(tokens, self.config.max_tokens)
        self.context.add(Role.ASSISTANT, reply)
        return True

    def save(self) -> Optional[str]:
        try:
            path = save_conversation(self.conversation, self.config)
        except StorageError as e:
            self.ui.error(f"Save failed: {e}")
            return None
        self.ui.success(f"Conversation saved to: {path}")
        return path

    def run(self):
        while self.running:
            try:
                line = self.read_line(self.config.username)
            except (EOFError, KeyboardInterrupt):
                self.ui.console.print()
                line = EXIT_COMMANDS[0]
            self.handle(line)

    def finish(self):
        """Offer to save, then print the closing time."""
        try:
            answer = self.read_line("Save the conversation? [y]/n")
        except (EOFError, KeyboardInterrupt):
            answer = "n"

        if answer.strip().lower() in ("", "y", "yes"):
            self.save()

        self.ui.info(f"\nSession ended at {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")


def main():
    load_dotenv()
    ui = ChatUI()

    try:
        config = load_config()
    except ConfigError as e:
        ui.error(f"Config loading failed: {e}")
        sys.exit(1)

    config.setup_logging()
    ui.banner(config)
    if not config.api_key:
        ui.warning("  No api_key set in the config file; requests will be rejected.")

    with ChatClient() as client:
        session = ChatSession(config, client, ui)
        session.run()
        session.finish()

    sys.exit(0)


if __name__ == "__main__":
    main()
