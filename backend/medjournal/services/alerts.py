# alert engine - threshold rules over the trailing window aggregates
# stateless: alerts are recomputed from the current entries on every request

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Iterable

from medjournal.models.alert import Alert, AlertKind, AlertSeverity
from medjournal.models.journal import JournalEntry
from medjournal.models.mood import MoodEntry
from medjournal.services.adherence import medication_counts
from medjournal.services.aggregation import entries_since, rolling_mean, window_start

logger = logging.getLogger(__name__)

LOW_MOOD_THRESHOLD = 4
HIGH_ANXIETY_THRESHOLD = 7
SLEEP_DEFICIT_HOURS = 6
LOW_ADHERENCE_PERCENT = 80
PSYCHOTIC_SYMPTOM_DAY_LIMIT = 3


@dataclass
class WindowAggregates:
    """unrounded aggregates of the trailing window the alert rules read"""
    avg_mood: float = 0.0
    avg_anxiety: float = 0.0
    avg_energy: float = 0.0
    avg_stress: float = 0.0
    avg_sleep: float = 0.0
    avg_study: float = 0.0
    adherence: float = 0.0
    taken_medications: int = 0
    total_medications: int = 0
    mood_entry_count: int = 0
    journal_entry_count: int = 0
    psychotic_symptom_days: int = 0


def compute_window_aggregates(
    journals: Iterable[JournalEntry],
    moods: Iterable[MoodEntry],
    today: date,
    days: int = 7,
) -> WindowAggregates:
    """aggregate the entries dated within `days` calendar dates ending today"""
    since = window_start(today, days)
    recent_journals = entries_since(journals, since)
    recent_moods = entries_since(moods, since)

    taken, total = medication_counts(recent_journals)
    symptom_days = {m.date_key for m in recent_moods if m.psychotic_symptoms}

    return WindowAggregates(
        avg_mood=rolling_mean(recent_moods, since, "mood"),
        avg_anxiety=rolling_mean(recent_moods, since, "anxiety"),
        avg_energy=rolling_mean(recent_moods, since, "energy"),
        avg_stress=rolling_mean(recent_moods, since, "stress"),
        avg_sleep=rolling_mean(recent_journals, since, "sleep_hours"),
        avg_study=rolling_mean(recent_journals, since, "study_hours"),
        adherence=100 * taken / total if total else 0.0,
        taken_medications=taken,
        total_medications=total,
        mood_entry_count=len(recent_moods),
        journal_entry_count=len(recent_journals),
        psychotic_symptom_days=len(symptom_days),
    )


@dataclass(frozen=True)
class AlertRule:
    kind: AlertKind
    severity: AlertSeverity
    condition: Callable[[WindowAggregates], bool]

    @property
    def message(self) -> str:
        return f"alerts.{self.kind.value}"


# evaluated in this order; every matching rule emits an alert
RULES = (
    AlertRule(
        AlertKind.LOW_MOOD, AlertSeverity.WARNING,
        lambda a: a.avg_mood < LOW_MOOD_THRESHOLD,
    ),
    AlertRule(
        AlertKind.HIGH_ANXIETY, AlertSeverity.WARNING,
        lambda a: a.avg_anxiety > HIGH_ANXIETY_THRESHOLD,
    ),
    AlertRule(
        AlertKind.SLEEP_DEFICIT, AlertSeverity.INFO,
        lambda a: a.avg_sleep < SLEEP_DEFICIT_HOURS,
    ),
    AlertRule(
        AlertKind.LOW_ADHERENCE, AlertSeverity.WARNING,
        lambda a: a.adherence < LOW_ADHERENCE_PERCENT and a.total_medications > 0,
    ),
    AlertRule(
        AlertKind.PSYCHOTIC_SYMPTOMS, AlertSeverity.CRITICAL,
        lambda a: a.psychotic_symptom_days > PSYCHOTIC_SYMPTOM_DAY_LIMIT,
    ),
    AlertRule(
        AlertKind.ALL_CLEAR, AlertSeverity.POSITIVE,
        lambda a: a.avg_mood >= 7 and a.avg_anxiety <= 3 and a.avg_sleep >= 7 and a.adherence >= 90,
    ),
    # cannot tell "no samples" from samples averaging exactly 0; kept as is
    AlertRule(
        AlertKind.NO_DATA, AlertSeverity.NEUTRAL,
        lambda a: a.avg_mood == 0 and a.avg_anxiety == 0 and a.mood_entry_count == 0,
    ),
)


def evaluate(aggregates: WindowAggregates) -> list[Alert]:
    """run every rule against the aggregates and return the matching alerts"""
    alerts = []
    for rule in RULES:
        if not rule.condition(aggregates):
            continue
        params = {}
        if rule.kind is AlertKind.PSYCHOTIC_SYMPTOMS:
            params["days"] = aggregates.psychotic_symptom_days
        alerts.append(Alert(kind=rule.kind, severity=rule.severity, message=rule.message, params=params))

    if alerts:
        logger.info(f"Alert evaluation produced {len(alerts)} alerts: {[a.kind.value for a in alerts]}")
    return alerts
