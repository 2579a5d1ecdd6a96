# ai companion models - chat messages, chat turns and journal reflections

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

from medjournal.models.journal import JournalEntryCreate


class ChatMessage(BaseModel):
    """one message of the companion chat, persisted under the aiChatMessages key"""
    id: str
    type: Literal["user", "ai"]
    content: str
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))

    model_config = {"extra": "ignore"}


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
    # when omitted the persisted chat history is used
    conversation_history: Optional[list[ChatMessage]] = Field(None, alias="conversationHistory")

    model_config = {"populate_by_name": True}


class ChatResponse(BaseModel):
    response: str
    fallback: bool = False
    notice: Optional[str] = None


class ChatHistoryResponse(BaseModel):
    messages: list[ChatMessage] = Field(default_factory=list)


class ReflectionRequest(BaseModel):
    journal_entry: JournalEntryCreate = Field(..., alias="journalEntry")

    model_config = {"populate_by_name": True}


class ReflectionResponse(BaseModel):
    reflection: str
