# journal models - daily structured entry, medication lines and request schema
# field aliases mirror the camelCase shape persisted under the journalEntries key

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Medication(BaseModel):
    """one medication line of a journal entry"""
    name: str
    taken: bool = False
    time: str

    model_config = {"extra": "ignore"}


class JournalEntry(BaseModel):
    """stored journal entry. the store performs no validation beyond shape"""
    id: str
    date: str
    medications: list[Medication]
    sleep_hours: float = Field(..., alias="sleepHours")
    sleep_quality: int = Field(..., alias="sleepQuality")
    study_hours: float = Field(..., alias="studyHours")
    study_subjects: str = Field(..., alias="studySubjects")
    clinical_rotation: str = Field(..., alias="clinicalRotation")
    journal_text: str = Field(..., alias="journalText")
    gratitude: str
    goals: str
    wellness: str
    challenges: str
    learnings: str

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @property
    def date_key(self) -> str:
        return self.date[:10]


class JournalEntryCreate(BaseModel):
    """payload for saving a journal entry. defaults match a fresh form"""
    id: Optional[str] = None
    date: str = Field(default_factory=lambda: date.today().isoformat())
    medications: list[Medication] = Field(default_factory=list)
    sleep_hours: float = Field(7, ge=0, le=12, alias="sleepHours")
    sleep_quality: int = Field(5, ge=1, le=10, alias="sleepQuality")
    study_hours: float = Field(0, ge=0, le=12, alias="studyHours")
    study_subjects: str = Field("", alias="studySubjects")
    clinical_rotation: str = Field("", alias="clinicalRotation")
    journal_text: str = Field("", alias="journalText")
    gratitude: str = ""
    goals: str = ""
    wellness: str = ""
    challenges: str = ""
    learnings: str = ""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        # calendar date only, no time component
        return date.fromisoformat(value).isoformat()

    @field_validator("medications")
    @classmethod
    def _check_medication_times(cls, value: list[Medication]) -> list[Medication]:
        for med in value:
            hours, _, minutes = med.time.partition(":")
            if not (hours.isdigit() and minutes.isdigit() and len(hours) == 2 and len(minutes) == 2
                    and int(hours) < 24 and int(minutes) < 60):
                raise ValueError(f"medication time must be HH:MM, got {med.time!r}")
        return value

    def to_entry(self, entry_id: str) -> JournalEntry:
        """build the stored entry under the given id"""
        data = self.model_dump(exclude={"id"})
        return JournalEntry(id=entry_id, **data)
