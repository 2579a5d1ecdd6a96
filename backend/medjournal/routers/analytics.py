# analytics router - mood, sleep, study, medication and symptom trends

import logging
from fastapi import APIRouter, Depends

from medjournal.models.analytics import AnalyticsResponse
from medjournal.services.db import Database, get_db
from medjournal.services.reports import build_analytics

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(db: Database = Depends(get_db)):
    """trend series over the most recent dates with data"""
    return build_analytics(db.journals.all(), db.moods.all())
