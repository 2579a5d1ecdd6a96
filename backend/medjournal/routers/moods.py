# moods router - list, read and save mood samples
# several samples per day are allowed; listing is chronological by timestamp

import logging
import uuid
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from medjournal.models.mood import MoodEntry, MoodEntryCreate, PSYCHOTIC_SYMPTOMS, WEATHER_OPTIONS
from medjournal.services.db import Database, get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/moods", tags=["moods"])


@router.get("", response_model=list[MoodEntry])
async def list_moods(
    entry_date: Optional[date] = Query(None, alias="date", description="only samples from this date"),
    db: Database = Depends(get_db),
):
    """list mood samples oldest first"""
    if entry_date:
        key = entry_date.isoformat()
        entries = db.moods.find_where(lambda e: e.date_key == key)
    else:
        entries = db.moods.all()
    return sorted(entries, key=lambda e: e.timestamp)


@router.get("/symptoms")
async def list_symptom_options():
    """symptom vocabulary and weather options offered by the tracker"""
    return {"psychoticSymptoms": list(PSYCHOTIC_SYMPTOMS), "weather": list(WEATHER_OPTIONS)}


@router.get("/{entry_id}", response_model=MoodEntry)
async def get_mood(entry_id: str, db: Database = Depends(get_db)):
    """get a single mood sample by id"""
    entry = db.moods.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Mood entry not found",
        )
    return entry


@router.post("", response_model=MoodEntry, status_code=status.HTTP_201_CREATED)
async def save_mood(body: MoodEntryCreate, db: Database = Depends(get_db)):
    """record a mood sample, or replace it when the body carries a known id"""
    entry_id = body.id or str(uuid.uuid4())
    return db.save_mood(body.to_entry(entry_id))


@router.put("/{entry_id}", response_model=MoodEntry)
async def upsert_mood(entry_id: str, body: MoodEntryCreate, db: Database = Depends(get_db)):
    """save a mood sample under the given id"""
    if body.id and body.id != entry_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Entry id in body does not match the url",
        )
    return db.save_mood(body.to_entry(entry_id))
