# dashboard router - today's status, 7-day averages and health alerts
# recomputed from the current entries on every request

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from medjournal.config import settings
from medjournal.models.dashboard import DashboardResponse
from medjournal.services.db import Database, get_db
from medjournal.services.reports import build_dashboard

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    today: Optional[date] = Query(None, description="reference date, defaults to the server's today"),
    days: int = Query(settings.ALERT_WINDOW_DAYS, ge=1, le=90, description="rolling window in calendar days"),
    db: Database = Depends(get_db),
):
    """dashboard snapshot with alerts over the trailing window"""
    return build_dashboard(db.journals.all(), db.moods.all(), today or date.today(), days)
