# mood models - freeform mood samples, any number per day
# field aliases mirror the camelCase shape persisted under the moodEntries key

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

# fixed symptom vocabulary offered by the mood tracker
PSYCHOTIC_SYMPTOMS = (
    "Halusinasi pendengaran",
    "Halusinasi visual",
    "Delusi/waham",
    "Pikiran tidak terorganisir",
    "Paranoia",
    "Gangguan konsentrasi",
    "Kebingungan realitas",
)

WEATHER_OPTIONS = ("Cerah", "Berawan", "Hujan", "Badai", "Berkabut", "Panas", "Dingin")


def _dedupe(values: list[str]) -> list[str]:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class MoodEntry(BaseModel):
    """stored mood sample"""
    id: str
    timestamp: str
    mood: int
    anxiety: int
    energy: int
    stress: int
    psychotic_symptoms: list[str] = Field(..., alias="psychoticSymptoms")
    triggers: str
    notes: str
    location: Optional[str] = None
    weather: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("psychotic_symptoms")
    @classmethod
    def _unique_symptoms(cls, value: list[str]) -> list[str]:
        return _dedupe(value)

    @property
    def date_key(self) -> str:
        # timezone-naive: truncate, never convert
        return self.timestamp[:10]


class MoodEntryCreate(BaseModel):
    """payload for saving a mood sample. scores default to the slider midpoint"""
    id: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))
    mood: int = Field(5, ge=1, le=10)
    anxiety: int = Field(5, ge=1, le=10)
    energy: int = Field(5, ge=1, le=10)
    stress: int = Field(5, ge=1, le=10)
    psychotic_symptoms: list[str] = Field(default_factory=list, alias="psychoticSymptoms")
    triggers: str = ""
    notes: str = ""
    location: Optional[str] = None
    weather: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
        return value

    @field_validator("psychotic_symptoms")
    @classmethod
    def _check_symptoms(cls, value: list[str]) -> list[str]:
        unknown = [s for s in value if s not in PSYCHOTIC_SYMPTOMS]
        if unknown:
            raise ValueError(f"unknown psychotic symptoms: {', '.join(unknown)}")
        return _dedupe(value)

    def to_entry(self, entry_id: str) -> MoodEntry:
        """build the stored entry under the given id"""
        data = self.model_dump(exclude={"id"})
        return MoodEntry(id=entry_id, **data)
