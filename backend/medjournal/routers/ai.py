# ai router - companion chat and journal reflection
# text-service failures never break the request: chat answers with a canned
# supportive reply, reflection reports the failure with a 502

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from medjournal.models.ai import (
    ChatHistoryResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ReflectionRequest,
    ReflectionResponse,
)
from medjournal.services.ai_service import (
    FALLBACK_REPLY,
    GREETING_MESSAGE,
    TextServiceError,
    reflect,
    send_turn,
)
from medjournal.services.db import Database, get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ai", tags=["ai"])

CHAT_ERROR_NOTICE = "Something went wrong while sending your message. Please try again."


def _greeting() -> ChatMessage:
    return ChatMessage(id="1", type="ai", content=GREETING_MESSAGE)


@router.post("/chat", response_model=ChatResponse)
async def chat(body: ChatRequest, db: Database = Depends(get_db)):
    """send one message to the companion and record both sides of the turn"""
    history = body.conversation_history
    if history is None:
        history = db.chat_messages.all()

    user_message = ChatMessage(id=str(uuid.uuid4()), type="user", content=body.message)

    try:
        reply = await send_turn(body.message, history)
        response = ChatResponse(response=reply)
    except TextServiceError as e:
        logger.warning(f"Chat fell back to canned reply: {e}")
        response = ChatResponse(response=FALLBACK_REPLY, fallback=True, notice=CHAT_ERROR_NOTICE)

    ai_message = ChatMessage(id=str(uuid.uuid4()), type="ai", content=response.response)
    if len(db.chat_messages) == 0:
        db.save_chat_messages(_greeting(), user_message, ai_message)
    else:
        db.save_chat_messages(user_message, ai_message)
    return response


@router.get("/chat/history", response_model=ChatHistoryResponse)
async def get_chat_history(db: Database = Depends(get_db)):
    """persisted chat messages, starting with the greeting"""
    messages = db.chat_messages.all()
    return ChatHistoryResponse(messages=messages or [_greeting()])


@router.delete("/chat/history", response_model=ChatHistoryResponse)
async def clear_chat_history(db: Database = Depends(get_db)):
    """reset the conversation to the greeting message"""
    db.reset_chat([_greeting()])
    logger.info("Chat history cleared")
    return ChatHistoryResponse(messages=db.chat_messages.all())


@router.post("/reflection", response_model=ReflectionResponse)
async def create_reflection(body: ReflectionRequest):
    """generate a reflection for a journal entry (not persisted)"""
    if not body.journal_entry.journal_text.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Journal entry is required",
        )

    try:
        text = await reflect(body.journal_entry)
    except TextServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Could not generate a reflection: {e}",
        )
    return ReflectionResponse(reflection=text)
