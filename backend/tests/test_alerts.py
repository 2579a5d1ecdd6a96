# tests for the alert engine - rule thresholds and end-to-end scenarios

from datetime import date

import pytest

from tests.conftest import make_journal, make_mood, meds
from medjournal.models.alert import AlertKind, AlertSeverity
from medjournal.services.alerts import WindowAggregates, compute_window_aggregates, evaluate
from medjournal.services.entry_store import EntryStore


def kinds(alerts):
    return [a.kind for a in alerts]


def healthy(**overrides) -> WindowAggregates:
    """aggregates that trip no warning rule and are not all-clear"""
    data = dict(
        avg_mood=6, avg_anxiety=5, avg_sleep=6.5, adherence=85,
        total_medications=10, taken_medications=8, mood_entry_count=5,
    )
    data.update(overrides)
    return WindowAggregates(**data)


class TestRuleThresholds:
    """each rule fires strictly on its side of the boundary"""

    def test_healthy_window_has_no_alerts(self):
        assert evaluate(healthy()) == []

    def test_anxiety_of_exactly_seven_does_not_fire(self):
        assert AlertKind.HIGH_ANXIETY not in kinds(evaluate(healthy(avg_anxiety=7)))

    def test_anxiety_above_seven_fires(self):
        alerts = evaluate(healthy(avg_anxiety=7.01))
        assert kinds(alerts) == [AlertKind.HIGH_ANXIETY]
        assert alerts[0].severity == AlertSeverity.WARNING

    def test_low_mood(self):
        assert AlertKind.LOW_MOOD in kinds(evaluate(healthy(avg_mood=3.99)))
        assert AlertKind.LOW_MOOD not in kinds(evaluate(healthy(avg_mood=4)))

    def test_sleep_deficit_is_info(self):
        alerts = evaluate(healthy(avg_sleep=5.9))
        assert kinds(alerts) == [AlertKind.SLEEP_DEFICIT]
        assert alerts[0].severity == AlertSeverity.INFO

    def test_adherence_of_exactly_eighty_does_not_fire(self):
        assert AlertKind.LOW_ADHERENCE not in kinds(evaluate(healthy(adherence=80)))

    def test_low_adherence_needs_medications(self):
        assert AlertKind.LOW_ADHERENCE in kinds(evaluate(healthy(adherence=50)))
        assert AlertKind.LOW_ADHERENCE not in kinds(
            evaluate(healthy(adherence=0, total_medications=0, taken_medications=0))
        )

    def test_psychotic_symptoms_more_than_three_days(self):
        assert AlertKind.PSYCHOTIC_SYMPTOMS not in kinds(evaluate(healthy(psychotic_symptom_days=3)))
        alerts = evaluate(healthy(psychotic_symptom_days=4))
        assert alerts[0].kind == AlertKind.PSYCHOTIC_SYMPTOMS
        assert alerts[0].severity == AlertSeverity.CRITICAL
        assert alerts[0].params == {"days": 4}

    def test_all_clear(self):
        alerts = evaluate(healthy(avg_mood=7, avg_anxiety=3, avg_sleep=7, adherence=90))
        assert kinds(alerts) == [AlertKind.ALL_CLEAR]
        assert alerts[0].severity == AlertSeverity.POSITIVE
        assert alerts[0].message == "alerts.all_clear"

    def test_no_data_requires_zero_mood_entries(self):
        empty = WindowAggregates()
        assert AlertKind.NO_DATA in kinds(evaluate(empty))
        # samples that average exactly 0 are not "no data"
        assert AlertKind.NO_DATA not in kinds(evaluate(WindowAggregates(mood_entry_count=1)))

    def test_rules_are_independent_and_ordered(self):
        aggregates = WindowAggregates(
            avg_mood=2, avg_anxiety=9, avg_sleep=4, adherence=40,
            total_medications=5, taken_medications=2, mood_entry_count=6,
            psychotic_symptom_days=5,
        )
        assert kinds(evaluate(aggregates)) == [
            AlertKind.LOW_MOOD,
            AlertKind.HIGH_ANXIETY,
            AlertKind.SLEEP_DEFICIT,
            AlertKind.LOW_ADHERENCE,
            AlertKind.PSYCHOTIC_SYMPTOMS,
        ]


class TestWindowAggregates:
    """aggregates over the trailing calendar window"""

    def test_window_excludes_older_entries(self):
        journals = [
            make_journal("old", "2024-02-28", sleep_hours=12),
            make_journal("in", "2024-03-01", sleep_hours=6),
        ]
        moods = [
            make_mood("m-old", "2024-02-29T23:59:00", mood=10),
            make_mood("m-in", "2024-03-07T08:00:00", mood=4),
        ]
        aggregates = compute_window_aggregates(journals, moods, date(2024, 3, 7), days=7)
        assert aggregates.avg_sleep == 6
        assert aggregates.avg_mood == 4
        assert aggregates.journal_entry_count == 1
        assert aggregates.mood_entry_count == 1

    def test_symptom_days_are_distinct_dates(self):
        moods = [
            make_mood("a", "2024-03-01T08:00:00", psychotic_symptoms=["Paranoia"]),
            make_mood("b", "2024-03-01T20:00:00", psychotic_symptoms=["Paranoia"]),
            make_mood("c", "2024-03-02T08:00:00", psychotic_symptoms=["Halusinasi visual"]),
            make_mood("d", "2024-03-03T08:00:00"),
        ]
        aggregates = compute_window_aggregates([], moods, date(2024, 3, 7))
        assert aggregates.psychotic_symptom_days == 2

    def test_no_entries_default_to_zero(self):
        aggregates = compute_window_aggregates([], [], date(2024, 3, 7))
        assert aggregates == WindowAggregates()


class TestScenarios:
    """store -> aggregates -> alerts"""

    def test_week_of_short_sleep_without_mood_entries(self):
        journals = EntryStore()
        for day in range(1, 8):
            journals.upsert(make_journal(f"j{day}", f"2024-03-{day:02d}", sleep_hours=5))
        moods = EntryStore()

        aggregates = compute_window_aggregates(journals.all(), moods.all(), date(2024, 3, 7))
        alert_kinds = kinds(evaluate(aggregates))

        assert aggregates.avg_sleep == 5
        assert AlertKind.SLEEP_DEFICIT in alert_kinds
        assert AlertKind.NO_DATA in alert_kinds
        assert AlertKind.LOW_ADHERENCE not in alert_kinds
        # the zero default also reads as low mood
        assert AlertKind.LOW_MOOD in alert_kinds

    def test_four_of_five_medications_taken(self):
        journals = [
            make_journal("a", "2024-03-01", medications=meds(True, True)),
            make_journal("b", "2024-03-04", medications=meds(True, False)),
            make_journal("c", "2024-03-07", medications=meds(True)),
        ]
        aggregates = compute_window_aggregates(journals, [], date(2024, 3, 7))
        assert aggregates.adherence == 80
        assert AlertKind.LOW_ADHERENCE not in kinds(evaluate(aggregates))

    @pytest.mark.parametrize("anxiety,fires", [(7, False), (8, True)])
    def test_anxiety_from_entries(self, anxiety, fires):
        moods = [make_mood("m", "2024-03-07T08:00:00", mood=6, anxiety=anxiety)]
        journals = [make_journal("j", "2024-03-07", sleep_hours=7)]
        alerts = evaluate(compute_window_aggregates(journals, moods, date(2024, 3, 7)))
        assert (AlertKind.HIGH_ANXIETY in kinds(alerts)) is fires
