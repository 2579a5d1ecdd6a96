# calendar models - per-day summary cells for one month

from typing import Optional
from pydantic import BaseModel, Field


class CalendarDay(BaseModel):
    date: str
    journal_id: Optional[str] = Field(None, alias="journalId")
    mood_count: int = Field(0, alias="moodCount")
    avg_mood: Optional[float] = Field(None, alias="avgMood")
    mood_band: Optional[str] = Field(None, alias="moodBand")

    model_config = {"populate_by_name": True}


class CalendarMonth(BaseModel):
    year: int
    month: int
    # 0 = sunday, number of blank cells before the 1st
    first_weekday: int = Field(..., alias="firstWeekday")
    days: list[CalendarDay] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
