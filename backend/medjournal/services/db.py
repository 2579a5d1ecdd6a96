# entry database for the backend api
# owns the journal, mood and chat-message stores and syncs them to the key-value boundary

import logging
import time
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from medjournal.config import settings
from medjournal.models.ai import ChatMessage
from medjournal.models.journal import JournalEntry
from medjournal.models.mood import MoodEntry
from medjournal.services.entry_store import EntryStore
from medjournal.services.kv_store import JsonFileKeyValueStore, KeyValueStore

logger = logging.getLogger(__name__)

_journal_adapter = TypeAdapter(list[JournalEntry])
_mood_adapter = TypeAdapter(list[MoodEntry])
_chat_adapter = TypeAdapter(list[ChatMessage])


class Database:
    """in-memory entry collections persisted whole on every mutation"""

    def __init__(self, kv: Optional[KeyValueStore] = None):
        self.kv = kv
        self.journals: EntryStore[JournalEntry] = EntryStore()
        self.moods: EntryStore[MoodEntry] = EntryStore()
        self.chat_messages: EntryStore[ChatMessage] = EntryStore()

    def connect(self):
        """open the key-value store and load every collection"""
        if self.kv is None:
            logger.info(f"Opening data directory: {settings.DATA_DIR}")
            self.kv = JsonFileKeyValueStore(settings.DATA_DIR)
        self.load()

    def close(self):
        logger.info(
            f"Closing database ({len(self.journals)} journal entries, {len(self.moods)} mood entries)"
        )

    def load(self):
        """(re)load all collections; an unreadable key loads as empty"""
        self.journals.replace_all(self._load_collection(settings.JOURNAL_ENTRIES_KEY, _journal_adapter))
        self.moods.replace_all(self._load_collection(settings.MOOD_ENTRIES_KEY, _mood_adapter))
        self.chat_messages.replace_all(self._load_collection(settings.CHAT_MESSAGES_KEY, _chat_adapter))
        logger.info(f"Loaded {len(self.journals)} journal entries and {len(self.moods)} mood entries")

    def _load_collection(self, key: str, adapter: TypeAdapter) -> list:
        backup_key = f"{key}.corrupt-{int(time.time())}"
        try:
            raw = self.kv.get(key)
        except (UnicodeDecodeError, OSError) as e:
            # the payload cannot be read as text; move it aside untouched
            self._set_aside(key, backup_key)
            logger.warning(f"Could not read '{key}', starting empty (moved to '{backup_key}'): {e}")
            return []
        if raw is None:
            return []
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            # keep the unreadable payload aside, it is overwritten on the next save
            self.kv.set(backup_key, raw)
            logger.warning(f"Could not decode '{key}', starting empty (backup in '{backup_key}'): {e}")
            return []

    def _set_aside(self, key: str, backup_key: str):
        try:
            self.kv.rename(key, backup_key)
        except OSError as e:
            logger.error(f"Could not move '{key}' to '{backup_key}': {e}")

    def _commit(self, key: str, candidate: EntryStore, adapter: TypeAdapter) -> list:
        """write the candidate collection; raises before any in-memory change when the write fails"""
        payload = adapter.dump_json(candidate.all(), by_alias=True).decode("utf-8")
        try:
            self.kv.set(key, payload)
        except OSError as e:
            logger.error(f"Could not persist '{key}' ({len(candidate)} records): {e}")
            raise
        return candidate.all()

    # mutations - each one rewrites the whole affected collection, then updates memory

    def save_journal(self, entry: JournalEntry) -> JournalEntry:
        candidate = EntryStore(self.journals.all())
        candidate.upsert(entry)
        self.journals.replace_all(self._commit(settings.JOURNAL_ENTRIES_KEY, candidate, _journal_adapter))
        logger.info(f"Saved journal entry {entry.id} for {entry.date}")
        return entry

    def save_mood(self, entry: MoodEntry) -> MoodEntry:
        candidate = EntryStore(self.moods.all())
        candidate.upsert(entry)
        self.moods.replace_all(self._commit(settings.MOOD_ENTRIES_KEY, candidate, _mood_adapter))
        logger.info(f"Saved mood entry {entry.id} at {entry.timestamp}")
        return entry

    def save_chat_messages(self, *messages: ChatMessage):
        candidate = EntryStore(self.chat_messages.all())
        for message in messages:
            candidate.upsert(message)
        self.chat_messages.replace_all(self._commit(settings.CHAT_MESSAGES_KEY, candidate, _chat_adapter))

    def reset_chat(self, messages: list[ChatMessage]):
        candidate = EntryStore(messages)
        self.chat_messages.replace_all(self._commit(settings.CHAT_MESSAGES_KEY, candidate, _chat_adapter))


# singleton instance
db = Database()


async def get_db() -> Database:
    """dependency injection for database access"""
    return db
