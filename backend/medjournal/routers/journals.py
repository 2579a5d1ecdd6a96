# journals router - list, read and save daily journal entries
# saving is an upsert: a known id replaces the entry in place, otherwise it is appended

import logging
import uuid
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from medjournal.models.journal import JournalEntry, JournalEntryCreate
from medjournal.services.db import Database, get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/journals", tags=["journals"])


@router.get("", response_model=list[JournalEntry])
async def list_journals(
    start: Optional[date] = Query(None, description="first date to include"),
    end: Optional[date] = Query(None, description="last date to include"),
    db: Database = Depends(get_db),
):
    """list journal entries in store order, optionally limited to a date range"""
    start_key = start.isoformat() if start else None
    end_key = end.isoformat() if end else None

    def in_range(entry: JournalEntry) -> bool:
        if start_key and entry.date_key < start_key:
            return False
        if end_key and entry.date_key > end_key:
            return False
        return True

    return db.journals.find_where(in_range)


@router.get("/date/{entry_date}", response_model=JournalEntry)
async def get_journal_for_date(entry_date: date, db: Database = Depends(get_db)):
    """get the journal entry written for a calendar date"""
    key = entry_date.isoformat()
    matches = db.journals.find_where(lambda e: e.date_key == key)
    if not matches:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No journal entry for {key}",
        )
    return matches[0]


@router.get("/{entry_id}", response_model=JournalEntry)
async def get_journal(entry_id: str, db: Database = Depends(get_db)):
    """get a single journal entry by id"""
    entry = db.journals.find_by_id(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Journal entry not found",
        )
    return entry


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def save_journal(body: JournalEntryCreate, db: Database = Depends(get_db)):
    """create a journal entry, or replace it when the body carries a known id"""
    entry_id = body.id or str(uuid.uuid4())
    return db.save_journal(body.to_entry(entry_id))


@router.put("/{entry_id}", response_model=JournalEntry)
async def upsert_journal(entry_id: str, body: JournalEntryCreate, db: Database = Depends(get_db)):
    """save a journal entry under the given id"""
    if body.id and body.id != entry_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Entry id in body does not match the url",
        )
    return db.save_journal(body.to_entry(entry_id))
