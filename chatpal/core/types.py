from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"

class Turn(BaseModel):
    """One message of the conversation, tagged by speaker."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

class Conversation(BaseModel):
    timestamp: str # RFC 3339, local offset
    history: List[Turn] = Field(default_factory=list)

    @classmethod
    def start(cls, system_prompt: str) -> "Conversation":
        """New conversation holding only the system turn."""
        return cls(
            timestamp=datetime.now().astimezone().isoformat(),
            history=[Turn(role=Role.SYSTEM, content=system_prompt)],
        )

# Wire shapes for the OpenAI-compatible chat-completions endpoint

class ChatRequest(BaseModel):
    model: str
    messages: List[Turn]
    temperature: float
    max_tokens: int
    enable_thinking: bool = False

class ReplyMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None # some backends send null content

class Choice(BaseModel):
    message: ReplyMessage

class Usage(BaseModel):
    total_tokens: int = 0

class ChatResponse(BaseModel):
    choices: List[Choice]
    usage: Optional[Usage] = None
