# analytics models - trend series and distributions for the analytics view

from pydantic import BaseModel, Field


class MoodTrendPoint(BaseModel):
    """daily averages of the mood samples of one date"""
    date: str
    count: int
    mood: float
    anxiety: float
    energy: float
    stress: float


class JournalTrendPoint(BaseModel):
    date: str
    count: int
    sleep_hours: float = Field(..., alias="sleepHours")
    study_hours: float = Field(..., alias="studyHours")
    sleep_quality: float = Field(..., alias="sleepQuality")

    model_config = {"populate_by_name": True}


class SleepPoint(BaseModel):
    date: str
    hours: float
    quality: float


class AdherencePoint(BaseModel):
    date: str
    adherence: float
    total_medications: int = Field(0, alias="totalMedications")

    model_config = {"populate_by_name": True}


class RotationStudy(BaseModel):
    rotation: str
    hours: float


class SymptomCount(BaseModel):
    symptom: str
    count: int


class AnalyticsResponse(BaseModel):
    mood_trend: list[MoodTrendPoint] = Field(default_factory=list, alias="moodTrend")
    journal_trend: list[JournalTrendPoint] = Field(default_factory=list, alias="journalTrend")
    sleep_trend: list[SleepPoint] = Field(default_factory=list, alias="sleepTrend")
    adherence_trend: list[AdherencePoint] = Field(default_factory=list, alias="adherenceTrend")
    study_by_rotation: list[RotationStudy] = Field(default_factory=list, alias="studyByRotation")
    symptom_frequency: list[SymptomCount] = Field(default_factory=list, alias="symptomFrequency")
    avg_mood: float = Field(0.0, alias="avgMood")
    avg_anxiety: float = Field(0.0, alias="avgAnxiety")
    avg_energy: float = Field(0.0, alias="avgEnergy")
    avg_sleep: float = Field(0.0, alias="avgSleep")
    avg_sleep_quality: float = Field(0.0, alias="avgSleepQuality")
    total_study_hours: float = Field(0.0, alias="totalStudyHours")
    avg_study_hours: float = Field(0.0, alias="avgStudyHours")
    # whole-percent mean of the adherence trend points
    avg_adherence: float = Field(0.0, alias="avgAdherence")
    good_mood_days: int = Field(0, alias="goodMoodDays")
    symptom_entries: int = Field(0, alias="symptomEntries")
    symptom_free_entries: int = Field(0, alias="symptomFreeEntries")
    total_mood_entries: int = Field(0, alias="totalMoodEntries")
    total_journal_entries: int = Field(0, alias="totalJournalEntries")

    model_config = {"populate_by_name": True}
