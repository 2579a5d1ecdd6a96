# shared fixtures for backend tests
# provides entry factories, an in-memory database and an httpx test client

import pytest
import pytest_asyncio

from httpx import AsyncClient, ASGITransport

from medjournal.main import app
from medjournal.models.journal import JournalEntry, Medication
from medjournal.models.mood import MoodEntry
from medjournal.services.db import Database, get_db
from medjournal.services.kv_store import InMemoryKeyValueStore


# entry factories

def make_journal(entry_id: str, entry_date: str, **overrides) -> JournalEntry:
    """journal entry with neutral defaults; keyword overrides use field names"""
    data = {
        "id": entry_id,
        "date": entry_date,
        "medications": [],
        "sleep_hours": 7,
        "sleep_quality": 6,
        "study_hours": 3,
        "study_subjects": "",
        "clinical_rotation": "",
        "journal_text": "",
        "gratitude": "",
        "goals": "",
        "wellness": "",
        "challenges": "",
        "learnings": "",
    }
    data.update(overrides)
    return JournalEntry(**data)


def make_mood(entry_id: str, timestamp: str, **overrides) -> MoodEntry:
    """mood sample with mid-scale defaults; keyword overrides use field names"""
    data = {
        "id": entry_id,
        "timestamp": timestamp,
        "mood": 5,
        "anxiety": 5,
        "energy": 5,
        "stress": 5,
        "psychotic_symptoms": [],
        "triggers": "",
        "notes": "",
    }
    data.update(overrides)
    return MoodEntry(**data)


def meds(*taken: bool) -> list[Medication]:
    """medication lines with the given taken flags"""
    return [Medication(name=f"Med {i + 1}", taken=t, time="08:00") for i, t in enumerate(taken)]


SAMPLE_JOURNAL_PAYLOAD = {
    "date": "2024-03-05",
    "medications": [
        {"name": "Morning dose", "taken": True, "time": "08:00"},
        {"name": "Evening dose", "taken": False, "time": "20:00"},
    ],
    "sleepHours": 6.5,
    "sleepQuality": 7,
    "studyHours": 4,
    "studySubjects": "Cardiology",
    "clinicalRotation": "Internal Medicine",
    "journalText": "Long ward round today, but I kept up with my notes.",
    "gratitude": "Supportive resident",
    "goals": "Review ECG basics",
    "wellness": "Short walk",
    "challenges": "Felt tired after lunch",
    "learnings": "Heart failure staging",
}

SAMPLE_MOOD_PAYLOAD = {
    "timestamp": "2024-03-05T09:30:00",
    "mood": 6,
    "anxiety": 4,
    "energy": 5,
    "stress": 6,
    "psychoticSymptoms": [],
    "triggers": "exam tomorrow",
    "notes": "",
    "weather": "Cerah",
}


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def database(kv):
    """fresh database over an empty in-memory key-value store"""
    database = Database(kv)
    database.connect()
    return database


@pytest_asyncio.fixture
async def client(database):
    """httpx async test client bound to the test database"""

    async def override_get_db():
        return database

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
