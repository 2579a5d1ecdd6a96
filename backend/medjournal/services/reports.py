# report builders for the dashboard, analytics and calendar views
# each builder takes entry snapshots and returns a response model; nothing here touches storage

import calendar
import logging
from datetime import date
from typing import Optional, Sequence

from medjournal.config import settings
from medjournal.models.analytics import (
    AdherencePoint,
    AnalyticsResponse,
    JournalTrendPoint,
    MoodTrendPoint,
    RotationStudy,
    SleepPoint,
    SymptomCount,
)
from medjournal.models.calendar import CalendarDay, CalendarMonth
from medjournal.models.dashboard import DashboardResponse, TodayStatus, WeeklyAverages
from medjournal.models.journal import JournalEntry
from medjournal.models.mood import MoodEntry
from medjournal.services.adherence import adherence, medication_counts
from medjournal.services.aggregation import daily_average, round_display, trailing_window
from medjournal.services.alerts import compute_window_aggregates, evaluate
from medjournal.services.grouping import group_by_date

logger = logging.getLogger(__name__)

GOOD_MOOD_THRESHOLD = 7

MOOD_FIELDS = ("mood", "anxiety", "energy", "stress")
JOURNAL_FIELDS = ("sleep_hours", "study_hours", "sleep_quality")


def mood_band(value: Optional[float]) -> Optional[str]:
    """colour band of a mood score"""
    if value is None:
        return None
    if value >= 8:
        return "excellent"
    if value >= 6:
        return "good"
    if value >= 4:
        return "neutral"
    if value >= 2:
        return "poor"
    return "terrible"


# dashboard

def build_dashboard(
    journals: Sequence[JournalEntry],
    moods: Sequence[MoodEntry],
    today: date,
    days: Optional[int] = None,
) -> DashboardResponse:
    """today's status, rolling averages, alerts and recent activity"""
    days = days or settings.ALERT_WINDOW_DAYS
    today_key = today.isoformat()

    todays_moods = [m for m in moods if m.date_key == today_key]
    todays_journal = next((j for j in journals if j.date_key == today_key), None)

    aggregates = compute_window_aggregates(journals, moods, today, days)
    weekly = WeeklyAverages(
        mood=round_display(aggregates.avg_mood),
        anxiety=round_display(aggregates.avg_anxiety),
        energy=round_display(aggregates.avg_energy),
        stress=round_display(aggregates.avg_stress),
        sleep_hours=round_display(aggregates.avg_sleep),
        study_hours=round_display(aggregates.avg_study),
        adherence=round_display(aggregates.adherence),
        mood_entries=aggregates.mood_entry_count,
        journal_entries=aggregates.journal_entry_count,
        total_medications=aggregates.total_medications,
        taken_medications=aggregates.taken_medications,
        psychotic_symptom_days=aggregates.psychotic_symptom_days,
        window_days=days,
    )

    limit = settings.RECENT_ACTIVITY_LIMIT
    return DashboardResponse(
        today=TodayStatus(
            date=today_key,
            latest_mood=todays_moods[-1] if todays_moods else None,
            journal=todays_journal,
        ),
        weekly=weekly,
        alerts=evaluate(aggregates),
        recent_journals=list(reversed(journals[-limit:])) if limit > 0 else [],
        recent_moods=list(reversed(moods[-limit:])) if limit > 0 else [],
    )


# analytics

def _adherence_trend(journals: Sequence[JournalEntry], days: int) -> list[AdherencePoint]:
    groups = list(group_by_date(journals).items())[-days:] if days > 0 else []
    points = []
    for day, entries in groups:
        _, total = medication_counts(entries)
        points.append(AdherencePoint(
            date=day,
            adherence=round_display(adherence(entries), places=0),
            total_medications=total,
        ))
    return points


def _study_by_rotation(journals: Sequence[JournalEntry]) -> list[RotationStudy]:
    hours: dict[str, float] = {}
    for entry in journals:
        if entry.clinical_rotation:
            hours[entry.clinical_rotation] = hours.get(entry.clinical_rotation, 0) + entry.study_hours
    return [RotationStudy(rotation=r, hours=round_display(h)) for r, h in hours.items()]


def _symptom_frequency(moods: Sequence[MoodEntry]) -> list[SymptomCount]:
    counts: dict[str, int] = {}
    for entry in moods:
        for symptom in entry.psychotic_symptoms:
            counts[symptom] = counts.get(symptom, 0) + 1
    return [SymptomCount(symptom=s, count=c) for s, c in counts.items()]


def _overall_mean(entries: Sequence, field: str) -> float:
    value = daily_average(entries, field)
    return round_display(value) if value is not None else 0.0


def build_analytics(journals: Sequence[JournalEntry], moods: Sequence[MoodEntry]) -> AnalyticsResponse:
    """trend series over the dates with data plus all-time distributions"""
    mood_trend = [
        MoodTrendPoint(**point)
        for point in trailing_window(moods, settings.TREND_DAYS, MOOD_FIELDS)
    ]
    journal_trend = [
        JournalTrendPoint(**point)
        for point in trailing_window(journals, settings.TREND_DAYS, JOURNAL_FIELDS)
    ]
    sleep_trend = [
        SleepPoint(date=point["date"], hours=point["sleep_hours"], quality=point["sleep_quality"])
        for point in trailing_window(journals, settings.SLEEP_TREND_DAYS, ("sleep_hours", "sleep_quality"))
    ]

    adherence_trend = _adherence_trend(journals, settings.ADHERENCE_TREND_DAYS)
    avg_adherence = daily_average(adherence_trend, "adherence")
    symptom_entries = sum(1 for entry in moods if entry.psychotic_symptoms)

    good_mood_days = sum(
        1 for entries in group_by_date(moods).values()
        if daily_average(entries, "mood") >= GOOD_MOOD_THRESHOLD
    )

    return AnalyticsResponse(
        mood_trend=mood_trend,
        journal_trend=journal_trend,
        sleep_trend=sleep_trend,
        adherence_trend=adherence_trend,
        study_by_rotation=_study_by_rotation(journals),
        symptom_frequency=_symptom_frequency(moods),
        avg_mood=_overall_mean(moods, "mood"),
        avg_anxiety=_overall_mean(moods, "anxiety"),
        avg_energy=_overall_mean(moods, "energy"),
        avg_sleep=_overall_mean(journals, "sleep_hours"),
        avg_sleep_quality=_overall_mean(journals, "sleep_quality"),
        total_study_hours=round_display(sum(entry.study_hours for entry in journals)),
        avg_study_hours=_overall_mean(journals, "study_hours"),
        avg_adherence=round_display(avg_adherence, places=0) if avg_adherence is not None else 0.0,
        good_mood_days=good_mood_days,
        symptom_entries=symptom_entries,
        symptom_free_entries=len(moods) - symptom_entries,
        total_mood_entries=len(moods),
        total_journal_entries=len(journals),
    )


# calendar

def build_calendar_month(
    journals: Sequence[JournalEntry],
    moods: Sequence[MoodEntry],
    year: int,
    month: int,
) -> CalendarMonth:
    """one summary cell per day of the month"""
    first_weekday, day_count = calendar.monthrange(year, month)
    prefix = f"{year:04d}-{month:02d}-"

    journal_ids: dict[str, str] = {}
    for entry in journals:
        # first entry wins when a date was saved twice
        if entry.date_key.startswith(prefix):
            journal_ids.setdefault(entry.date_key, entry.id)
    mood_groups = group_by_date(m for m in moods if m.date_key.startswith(prefix))

    days = []
    for day in range(1, day_count + 1):
        key = f"{prefix}{day:02d}"
        day_moods = mood_groups.get(key, [])
        avg = daily_average(day_moods, "mood")
        days.append(CalendarDay(
            date=key,
            journal_id=journal_ids.get(key),
            mood_count=len(day_moods),
            avg_mood=round_display(avg) if avg is not None else None,
            mood_band=mood_band(avg),
        ))

    # calendar.monthrange counts from monday; cells start on sunday
    return CalendarMonth(year=year, month=month, first_weekday=(first_weekday + 1) % 7, days=days)
