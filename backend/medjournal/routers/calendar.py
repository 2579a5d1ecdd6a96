# calendar router - month grid of journal and mood activity

import logging
from fastapi import APIRouter, Depends, Path

from medjournal.models.calendar import CalendarMonth
from medjournal.services.db import Database, get_db
from medjournal.services.reports import build_calendar_month

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("/{year}/{month}", response_model=CalendarMonth)
async def get_calendar_month(
    year: int = Path(..., ge=1, le=9999),
    month: int = Path(..., ge=1, le=12),
    db: Database = Depends(get_db),
):
    """per-day journal and mood summary for one month"""
    return build_calendar_month(db.journals.all(), db.moods.all(), year, month)
