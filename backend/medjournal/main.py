# medjournal backend api
# serves the journal and mood stores, windowed analytics, alerts and the ai companion

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medjournal.config import settings
from medjournal.routers import ai, analytics, calendar, dashboard, journals, moods
from medjournal.services.db import Database, db, get_db

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ROUTERS = (journals, moods, dashboard, analytics, calendar, ai)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """load every collection before serving; unreadable data loads empty instead of failing"""
    logger.info(f"Loading journal data from {settings.DATA_DIR}")
    db.connect()
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY is not set, the companion will answer with fallback replies")
    yield
    db.close()


app = FastAPI(
    title="MedJournal API",
    description="Daily journal, mood tracking, trend analytics and an AI companion for a medical student",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in ROUTERS:
    app.include_router(module.router)


@app.get("/health")
async def health_check(db: Database = Depends(get_db)):
    """liveness plus the size of each loaded collection"""
    return {
        "status": "ok",
        "service": "medjournal-api",
        "journalEntries": len(db.journals),
        "moodEntries": len(db.moods),
    }
