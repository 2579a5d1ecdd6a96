# ai companion service - langchain + gemini text generation
# two single request / single response operations:
#   send_turn - empathetic chat reply given the recent conversation
#   reflect   - written reflection on one journal entry
# provider, transport and empty-output failures surface as TextServiceError

import logging
from typing import Optional

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.output_parsers import StrOutputParser

from medjournal.config import settings
from medjournal.models.ai import ChatMessage
from medjournal.models.journal import JournalEntryCreate

logger = logging.getLogger(__name__)

GREETING_MESSAGE = (
    "Hi! I'm here to listen. Tell me what's on your mind today. "
    "Remember, this is a safe space to express how you feel."
)

# substituted for the chat reply when the text service fails
FALLBACK_REPLY = (
    "Sorry, I'm having some technical difficulties right now. Please try again in a moment. "
    "In the meantime, remember that what you are feeling is valid and you are not alone."
)

NOT_MENTIONED = "Not mentioned"


class TextServiceError(Exception):
    """the text-generation service failed or returned nothing usable"""


def get_llm(temperature: float, top_p: float) -> ChatGoogleGenerativeAI:
    """create a gemini llm instance"""
    if not settings.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not configured")
        raise TextServiceError("AI service not configured")
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_MODEL,
        google_api_key=settings.GEMINI_API_KEY,
        temperature=temperature,
        top_p=top_p,
        top_k=settings.TOP_K,
        max_output_tokens=settings.MAX_OUTPUT_TOKENS,
    )


CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are an empathetic, supportive AI companion for a medical student living with schizoaffective disorder.

YOUR JOB:
1. Listen with empathy and without judgement
2. Offer warm emotional support
3. Help manage stress and anxiety
4. Offer a realistic, hopeful perspective
5. Remind them of healthy coping strategies
6. When needed, suggest reaching out to a professional

HOW YOU COMMUNICATE:
- Warm, gentle language that is never overwhelming
- Avoid specific medical advice, focus on emotional support
- Validate their feelings and experiences
- Offer hope and encouragement
- Reply in natural, friendly {language}"""),
    ("human", """{history_block}Current message from the user: {message}

Respond with empathy and support:"""),
])

REFLECTION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You help a medical student living with schizoaffective disorder reflect deeply on their daily journal.

Write a reflection that:
1. Identifies positive patterns and areas to improve
2. Offers insight into their mental health and study progress
3. Suggests specific coping strategies
4. Acknowledges achievements and progress made
5. Gives realistic encouragement and motivation

Be empathetic, insightful and supportive. Write in {language}, around 200-300 words."""),
    ("human", """JOURNAL:
- Free journal: {journal_text}
- Challenges: {challenges}
- Wellness activities: {wellness}
- Grateful for: {gratitude}
- Goals for tomorrow: {goals}
- Learnings: {learnings}
- Study subjects: {study_subjects}
- Sleep: {sleep_hours} hours
- Sleep quality: {sleep_quality}/10
- Study: {study_hours} hours

Focus on recognizing behavioural and emotional patterns, appreciating the effort made,
gentle suggestions for improvement, validating their experience, and encouraging positive habits."""),
])

_chat_chain = None
_reflection_chain = None


def get_chat_chain():
    """get or create the companion chat chain"""
    global _chat_chain
    if _chat_chain is None:
        llm = get_llm(settings.CHAT_TEMPERATURE, settings.CHAT_TOP_P)
        _chat_chain = CHAT_PROMPT | llm | StrOutputParser()
    return _chat_chain


def get_reflection_chain():
    """get or create the journal reflection chain"""
    global _reflection_chain
    if _reflection_chain is None:
        llm = get_llm(settings.REFLECTION_TEMPERATURE, settings.REFLECTION_TOP_P)
        _reflection_chain = REFLECTION_PROMPT | llm | StrOutputParser()
    return _reflection_chain


def _format_history(history: list[ChatMessage]) -> str:
    """format the most recent messages into a block for the prompt"""
    recent = history[-settings.CHAT_HISTORY_LIMIT:] if settings.CHAT_HISTORY_LIMIT > 0 else []
    if not recent:
        return ""

    parts = ["Previous conversation:"]
    for msg in recent:
        role_label = "User" if msg.type == "user" else "AI"
        parts.append(f"{role_label}: {msg.content}")
    return "\n".join(parts) + "\n\n"


def _or_not_mentioned(value) -> str:
    # blank text and zero hours both read as "not mentioned"
    if value is None or value == "" or value == 0:
        return NOT_MENTIONED
    return str(value)


def _reflection_fields(entry: JournalEntryCreate) -> dict:
    return {
        "language": settings.RESPONSE_LANGUAGE,
        "journal_text": entry.journal_text,
        "challenges": _or_not_mentioned(entry.challenges),
        "wellness": _or_not_mentioned(entry.wellness),
        "gratitude": _or_not_mentioned(entry.gratitude),
        "goals": _or_not_mentioned(entry.goals),
        "learnings": _or_not_mentioned(entry.learnings),
        "study_subjects": _or_not_mentioned(entry.study_subjects),
        "sleep_hours": _or_not_mentioned(entry.sleep_hours),
        "sleep_quality": _or_not_mentioned(entry.sleep_quality),
        "study_hours": _or_not_mentioned(entry.study_hours),
    }


async def _generate(chain, inputs: dict, what: str) -> str:
    try:
        text = await chain.ainvoke(inputs)
    except Exception as e:
        logger.error(f"{what} generation failed: {e}")
        raise TextServiceError(f"{what} generation failed") from e

    if not isinstance(text, str) or not text.strip():
        logger.error(f"{what} generation returned no text: {text!r}")
        raise TextServiceError(f"No {what.lower()} generated")
    return text.strip()


async def send_turn(message: str, history: Optional[list[ChatMessage]] = None) -> str:
    """generate the companion's reply to one user message"""
    return await _generate(
        get_chat_chain(),
        {
            "language": settings.RESPONSE_LANGUAGE,
            "history_block": _format_history(history or []),
            "message": message,
        },
        "Chat reply",
    )


async def reflect(entry: JournalEntryCreate) -> str:
    """generate a reflection on the given journal fields"""
    return await _generate(get_reflection_chain(), _reflection_fields(entry), "Reflection")
