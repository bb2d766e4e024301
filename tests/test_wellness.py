from datetime import date, datetime, timedelta

import pytest

from core.exceptions import ValidationError
from core.models import ActivityType, WellnessActivity
from core.repositories import DailyStatsRepository, WellnessRepository
from core.store import KeyedStore
from core.stats import average_mood, compute_wellness_stats, streak_days, walk_totals


def _activity(activity_id, activity_type="walk", duration=30, mood=7, day=None):
    return WellnessActivity(
        id=activity_id,
        type=ActivityType(activity_type),
        duration=duration,
        mood=mood,
        date=datetime.combine(day or date.today(), datetime.min.time()).isoformat(),
    )


def test_first_walk_on_empty_state(store):
    repo = WellnessRepository(store)
    repo.add_activity("walk", 30, 8, "")

    stats = repo.get_stats()
    assert stats.total_walks == 1
    assert stats.total_distance == 1.5
    assert stats.average_mood == 8
    assert stats.streak_days == 1
    assert store.read("wellness-stats")["totalDistance"] == 1.5


def test_average_mood_over_all_activities(store):
    repo = WellnessRepository(store)
    repo.add_activity("meditation", 10, 8)
    repo.add_activity("exercise", 45, 4)

    stats = repo.get_stats()
    assert stats.average_mood == 6.0
    assert stats.total_walks == 0
    assert stats.total_distance == 0


def test_activities_are_newest_first(store):
    repo = WellnessRepository(store)
    first = repo.add_activity("walk", 20, 6)
    second = repo.add_activity("music", 15, 9, "  lo-fi  ")

    activities = repo.list_activities()
    assert [a.id for a in activities] == [second.id, first.id]
    assert activities[0].notes == "lo-fi"


def test_delete_recomputes_stats(store):
    repo = WellnessRepository(store)
    walk = repo.add_activity("walk", 40, 10)
    repo.add_activity("exercise", 30, 4)

    repo.delete_activity(walk.id)

    stats = repo.get_stats()
    assert stats.total_walks == 0
    assert stats.total_distance == 0
    assert stats.average_mood == 4.0
    assert len(repo.list_activities()) == 1


def test_delete_unknown_activity_leaves_state(store):
    repo = WellnessRepository(store)
    repo.add_activity("walk", 10, 5)
    before = store.read("wellness")

    repo.delete_activity(42)
    assert store.read("wellness") == before


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"activity_type": "swim", "duration": 10, "mood": 5}, "type"),
        ({"activity_type": "walk", "duration": 0, "mood": 5}, "duration"),
        ({"activity_type": "walk", "duration": -5, "mood": 5}, "duration"),
        ({"activity_type": "walk", "duration": 10, "mood": 0}, "mood"),
        ({"activity_type": "walk", "duration": 10, "mood": 11}, "mood"),
        ({"activity_type": "walk", "duration": 10, "mood": 7.5}, "mood"),
    ],
)
def test_add_activity_validation(store, kwargs, field):
    repo = WellnessRepository(store)

    with pytest.raises(ValidationError) as exc:
        repo.add_activity(**kwargs)

    assert exc.value.field == field
    assert repo.list_activities() == []
    assert store.read("wellness-stats") is None


def test_legacy_timestamp_field_is_read_as_date(store):
    store.write("wellness", [
        {"id": 1, "type": "walk", "duration": 20, "mood": 8, "timestamp": "2026-01-02T10:00:00"},
    ])
    activity = WellnessRepository(store).list_activities()[0]
    assert activity.date == "2026-01-02T10:00:00"
    assert activity.notes == ""


def test_recompute_stats_from_stored_list(store):
    store.write("wellness", [
        {"id": 1, "type": "walk", "duration": 20, "mood": 8, "date": "2026-01-02T10:00:00"},
        {"id": 2, "type": "walk", "duration": 10, "mood": 6, "date": "2026-01-01T10:00:00"},
    ])

    stats = WellnessRepository(store).recompute_stats(today=date(2026, 1, 2))
    assert stats.total_walks == 2
    assert stats.total_distance == 1.5
    assert stats.average_mood == 7.0
    assert stats.streak_days == 2


def test_average_mood_rounds_to_one_decimal():
    activities = [_activity(1, mood=7), _activity(2, mood=8), _activity(3, mood=8)]
    assert average_mood(activities) == 7.7
    assert average_mood([]) == 0.0


def test_walk_totals_ignore_other_types():
    activities = [_activity(1, "walk", 25), _activity(2, "exercise", 60), _activity(3, "walk", 7)]
    assert walk_totals(activities) == {"total_walks": 2, "total_distance": 1.6}
    assert walk_totals(activities, distance_per_minute=0.1)["total_distance"] == 3.2


def test_streak_days():
    today = date(2026, 3, 10)
    days_back = lambda n: today - timedelta(days=n)

    assert streak_days([], today) == 0
    assert streak_days([_activity(1, day=today), _activity(2, day=today)], today) == 1
    assert streak_days([_activity(i, day=days_back(i)) for i in range(4)], today) == 4
    # run ending yesterday still counts
    assert streak_days([_activity(1, day=days_back(1)), _activity(2, day=days_back(2))], today) == 2
    # gap breaks the run
    assert streak_days([_activity(1, day=today), _activity(2, day=days_back(2))], today) == 1
    assert streak_days([_activity(1, day=days_back(3))], today) == 0


def test_compute_wellness_stats_empty():
    stats = compute_wellness_stats([])
    assert stats.to_dict() == {
        "totalWalks": 0,
        "totalDistance": 0,
        "averageMood": 0.0,
        "streakDays": 0,
    }


def test_daily_stats_default_and_accumulate(store):
    repo = DailyStatsRepository(store)
    assert repo.get().to_dict() == {"todayHours": 0, "weekStreak": 0, "totalProjects": 0}

    repo.add_coding_hours(1.5)
    stats = repo.add_coding_hours(2)

    assert stats.today_hours == 3.5
    assert store.read("daily-stats")["todayHours"] == 3.5


@pytest.mark.parametrize("hours", [0, -1, "2", None, True])
def test_add_coding_hours_rejects_non_positive(store, hours):
    with pytest.raises(ValidationError):
        DailyStatsRepository(store).add_coding_hours(hours)
    assert store.read("daily-stats") is None


def test_malformed_daily_stats_fall_back_to_defaults(store):
    store.write("daily-stats", {"todayHours": "lots"})
    assert DailyStatsRepository(store).get().today_hours == 0

    store.write("daily-stats", [1, 2, 3])
    assert DailyStatsRepository(store).get().week_streak == 0


def test_failed_activity_write_leaves_stats_untouched(refusing):
    store = KeyedStore(refusing)
    repo = WellnessRepository(store)
    refusing.refuse("devjourney-wellness")

    assert repo.add_activity("walk", 30, 2) is None
    assert repo.list_activities() == []
    assert store.read("wellness-stats") is None


def test_failed_delete_keeps_activity_and_stats(refusing):
    store = KeyedStore(refusing)
    repo = WellnessRepository(store)
    kept = repo.add_activity("walk", 30, 8)
    stats_before = store.read("wellness-stats")
    refusing.refuse("devjourney-wellness")

    assert repo.add_activity("walk", 60, 2) is None
    assert [a.id for a in repo.delete_activity(kept.id)] == [kept.id]
    assert [a.id for a in repo.list_activities()] == [kept.id]
    assert store.read("wellness-stats") == stats_before


@pytest.mark.parametrize("duration", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_duration_is_rejected(store, duration):
    with pytest.raises(ValidationError):
        WellnessRepository(store).add_activity("walk", duration, 7)
    assert store.read("wellness") is None


@pytest.mark.parametrize("hours", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_coding_hours_are_rejected(store, hours):
    repo = DailyStatsRepository(store)
    repo.add_coding_hours(1)

    with pytest.raises(ValidationError):
        repo.add_coding_hours(hours)
    assert store.read("daily-stats")["todayHours"] == 1


def test_small_coding_hour_increments_are_kept(store):
    repo = DailyStatsRepository(store)
    repo.add_coding_hours(0.001)
    repo.add_coding_hours(0.001)

    assert repo.add_coding_hours(1).today_hours == pytest.approx(1.002)
    assert store.read("daily-stats")["todayHours"] == pytest.approx(1.002)


def test_failed_coding_hours_write_returns_stored_record(refusing):
    store = KeyedStore(refusing)
    repo = DailyStatsRepository(store)
    repo.add_coding_hours(2)
    refusing.refuse()

    assert repo.add_coding_hours(3).today_hours == 2
    assert repo.get().today_hours == 2
