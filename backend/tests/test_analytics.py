# tests for analytics and calendar routers

from tests.conftest import make_journal, make_mood, meds


class TestAnalytics:
    """trend series and distributions"""

    async def test_empty(self, client):
        resp = await client.get("/analytics")
        assert resp.status_code == 200
        data = resp.json()
        assert data["moodTrend"] == []
        assert data["sleepTrend"] == []
        assert data["avgMood"] == 0
        assert data["totalMoodEntries"] == 0

    async def test_camel_case_series(self, client, database):
        database.save_journal(make_journal(
            "j1", "2024-03-01", sleep_hours=6, sleep_quality=8, study_hours=2,
            clinical_rotation="Psychiatry", medications=meds(True, False),
        ))
        database.save_mood(make_mood("m1", "2024-03-01T08:00:00", mood=8, psychotic_symptoms=["Paranoia"]))

        data = (await client.get("/analytics")).json()
        assert data["moodTrend"][0] == {
            "date": "2024-03-01", "count": 1, "mood": 8, "anxiety": 5, "energy": 5, "stress": 5,
        }
        assert data["journalTrend"][0]["sleepHours"] == 6
        assert data["sleepTrend"][0] == {"date": "2024-03-01", "hours": 6, "quality": 8}
        assert data["adherenceTrend"][0] == {"date": "2024-03-01", "adherence": 50, "totalMedications": 2}
        assert data["studyByRotation"] == [{"rotation": "Psychiatry", "hours": 2}]
        assert data["symptomFrequency"] == [{"symptom": "Paranoia", "count": 1}]
        assert data["goodMoodDays"] == 1
        assert data["avgSleep"] == 6
        assert data["avgSleepQuality"] == 8
        assert data["totalStudyHours"] == 2
        assert data["avgAdherence"] == 50
        assert data["symptomEntries"] == 1
        assert data["symptomFreeEntries"] == 0
        assert data["totalJournalEntries"] == 1

    async def test_trend_is_ascending_across_gaps(self, client, database):
        database.save_mood(make_mood("b", "2024-03-20T08:00:00", mood=4))
        database.save_mood(make_mood("a", "2024-01-02T08:00:00", mood=6))
        data = (await client.get("/analytics")).json()
        assert [p["date"] for p in data["moodTrend"]] == ["2024-01-02", "2024-03-20"]


class TestCalendar:
    """month grid endpoint"""

    async def test_month(self, client, database):
        database.save_journal(make_journal("j1", "2024-03-05"))
        database.save_mood(make_mood("m1", "2024-03-05T08:00:00", mood=3))

        resp = await client.get("/calendar/2024/3")
        assert resp.status_code == 200
        data = resp.json()
        assert data["year"] == 2024
        assert data["month"] == 3
        # 1 march 2024 was a friday
        assert data["firstWeekday"] == 5
        assert len(data["days"]) == 31
        assert data["days"][4] == {
            "date": "2024-03-05", "journalId": "j1", "moodCount": 1, "avgMood": 3, "moodBand": "poor",
        }

    async def test_invalid_month(self, client):
        resp = await client.get("/calendar/2024/13")
        assert resp.status_code == 422
