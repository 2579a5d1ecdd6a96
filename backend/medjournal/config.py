# backend configuration
# loads env vars for the data directory, persistence keys, gemini and analytics windows

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # local key-value persistence
    DATA_DIR: str = os.getenv("MEDJOURNAL_DATA_DIR", str(Path.home() / ".config" / "medjournal"))
    JOURNAL_ENTRIES_KEY: str = "journalEntries"
    MOOD_ENTRIES_KEY: str = "moodEntries"
    CHAT_MESSAGES_KEY: str = "aiChatMessages"

    # gemini (chat companion and journal reflection)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    CHAT_TEMPERATURE: float = 0.7
    CHAT_TOP_P: float = 0.8
    REFLECTION_TEMPERATURE: float = 0.8
    REFLECTION_TOP_P: float = 0.9
    TOP_K: int = 40
    MAX_OUTPUT_TOKENS: int = 1024
    CHAT_HISTORY_LIMIT: int = 10
    RESPONSE_LANGUAGE: str = os.getenv("RESPONSE_LANGUAGE", "Indonesian")

    # analytics windows (in dated groups / days)
    ALERT_WINDOW_DAYS: int = 7
    TREND_DAYS: int = 30
    SLEEP_TREND_DAYS: int = 14
    ADHERENCE_TREND_DAYS: int = 7
    RECENT_ACTIVITY_LIMIT: int = 5

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
