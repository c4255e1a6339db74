"""
Conversation context management.

Keeps the ordered turn list that is sent to the remote model and shrinks it
before each call. Sizes are measured in characters as a stand-in for tokens.

The trimming policy has two passes:
  1. Filter: every non-system turn longer than the budget is dropped,
     wherever it sits in the history.
  2. Window: once more than three turns survive, everything from the first
     non-system turn up to (not including) the final two is removed, leaving
     the system turn plus the latest exchange.
"""

import logging
from typing import List

from chatpal.core.types import Conversation, Role, Turn

logger = logging.getLogger(__name__)


def trim_context(turns: List[Turn], budget: int) -> None:
    """Shrink `turns` in place. Never raises."""
    if len(turns) <= 2:
        return

    turns[:] = [t for t in turns if t.role == Role.SYSTEM or len(t.content) <= budget]

    if len(turns) > 3:
        first = next((i for i, t in enumerate(turns) if t.role != Role.SYSTEM), 1)
        end = len(turns) - 2
        if first < end:
            del turns[first:end]


class ContextManager:
    """Owns the conversation history for one session."""

    def __init__(self, conversation: Conversation):
        self.conversation = conversation

    @property
    def turns(self) -> List[Turn]:
        return self.conversation.history

    def __len__(self) -> int:
        return len(self.turns)

    def append(self, turn: Turn) -> Turn:
        self.turns.append(turn)
        return turn

    def add(self, role: Role, content: str) -> Turn:
        return self.append(Turn(role=role, content=content))

    def trim(self, budget: int) -> None:
        before = len(self.turns)
        trim_context(self.turns, budget)
        dropped = before - len(self.turns)
        if dropped:
            logger.debug(f"Trimmed {dropped} turn(s), {len(self.turns)} left (budget={budget} chars)")

    def rollback(self, turn: Turn) -> bool:
        """
        Undo a failed exchange by removing `turn` from the end of the history.

        Only removes it if it is still the last element (trimming may already
        have dropped an oversized turn). The system turn is never removed.

        Returns:
            True if a turn was removed
        """
        if len(self.turns) > 1 and self.turns[-1] is turn and turn.role != Role.SYSTEM:
            self.turns.pop()
            logger.debug("Rolled back last turn after failed exchange")
            return True
        return False
