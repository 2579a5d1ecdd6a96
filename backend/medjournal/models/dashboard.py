# dashboard models - today's status, 7-day averages, alerts and recent activity

from typing import Optional
from pydantic import BaseModel, Field

from medjournal.models.alert import Alert
from medjournal.models.journal import JournalEntry
from medjournal.models.mood import MoodEntry


class TodayStatus(BaseModel):
    date: str
    latest_mood: Optional[MoodEntry] = Field(None, alias="latestMood")
    journal: Optional[JournalEntry] = None

    model_config = {"populate_by_name": True}


class WeeklyAverages(BaseModel):
    """rounded averages over the alert window. means are 0 when there is no data"""
    mood: float = 0.0
    anxiety: float = 0.0
    energy: float = 0.0
    stress: float = 0.0
    sleep_hours: float = Field(0.0, alias="sleepHours")
    study_hours: float = Field(0.0, alias="studyHours")
    adherence: float = 0.0
    mood_entries: int = Field(0, alias="moodEntries")
    journal_entries: int = Field(0, alias="journalEntries")
    total_medications: int = Field(0, alias="totalMedications")
    taken_medications: int = Field(0, alias="takenMedications")
    psychotic_symptom_days: int = Field(0, alias="psychoticSymptomDays")
    window_days: int = Field(7, alias="windowDays")

    model_config = {"populate_by_name": True}


class DashboardResponse(BaseModel):
    today: TodayStatus
    weekly: WeeklyAverages
    alerts: list[Alert] = Field(default_factory=list)
    recent_journals: list[JournalEntry] = Field(default_factory=list, alias="recentJournals")
    recent_moods: list[MoodEntry] = Field(default_factory=list, alias="recentMoods")

    model_config = {"populate_by_name": True}
