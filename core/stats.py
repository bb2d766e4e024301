"""
Pure aggregation over persisted records.

Nothing here reads or writes the store; repositories call these functions
after every mutation and persist the result.
"""
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from core.config_manager import config
from core.models import ActivityType, Goal, MusicStats, WellnessActivity, WellnessStats


def average_mood(activities: Sequence[WellnessActivity]) -> float:
    """Mean mood rounded to one decimal; 0 for an empty list."""
    if not activities:
        return 0.0
    total = sum(a.mood for a in activities)
    return round(total / len(activities), 1)


def walk_totals(
    activities: Iterable[WellnessActivity],
    distance_per_minute: Optional[float] = None,
) -> Dict[str, float]:
    """Walk count and estimated distance in km (rounded to one decimal)."""
    rate = config.DISTANCE_PER_MINUTE_KM if distance_per_minute is None else distance_per_minute
    walks = [a for a in activities if a.type == ActivityType.WALK]
    minutes = sum(a.duration for a in walks)
    return {"total_walks": len(walks), "total_distance": round(minutes * rate, 1)}


def _activity_day(activity: WellnessActivity) -> Optional[date]:
    try:
        return datetime.fromisoformat(str(activity.date).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def streak_days(activities: Iterable[WellnessActivity], today: Optional[date] = None) -> int:
    """
    Consecutive calendar days with at least one activity.

    The run must end today or yesterday; an older run counts as broken.
    """
    today = today or date.today()
    days = {d for d in (_activity_day(a) for a in activities) if d is not None}
    if not days:
        return 0

    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def compute_wellness_stats(
    activities: Sequence[WellnessActivity],
    today: Optional[date] = None,
) -> WellnessStats:
    walks = walk_totals(activities)
    return WellnessStats(
        total_walks=int(walks["total_walks"]),
        total_distance=walks["total_distance"],
        average_mood=average_mood(activities),
        streak_days=streak_days(activities, today),
    )


def goal_summary(goals: List[Goal]) -> Dict[str, int]:
    completed = sum(1 for g in goals if g.completed)
    return {
        "total": len(goals),
        "completed": completed,
        "active": len(goals) - completed,
        "high": sum(1 for g in goals if g.priority.value == "high"),
    }


def format_playtime(total_hours: float) -> str:
    """Fractional hours as "Xh Ym", both parts floored."""
    hours = int(total_hours // 1)
    minutes = int((total_hours % 1) * 60)
    return f"{hours}h {minutes}m"


def apply_music_activity(
    stats: MusicStats,
    activity_type: str,
    duration: float = 0,
    genre: Optional[str] = None,
    artist: Optional[str] = None,
    track: Optional[str] = None,
) -> MusicStats:
    """Additive update of listening totals; returns a new MusicStats."""
    total_hours = stats.total_hours + (duration or 0)
    return MusicStats(
        total_hours=total_hours,
        favorite_genre=genre or stats.favorite_genre,
        top_artist=artist or stats.top_artist,
        most_played_track=track or stats.most_played_track,
        coding_playtime=format_playtime(total_hours),
        playlists=stats.playlists + (1 if activity_type == "playlist_added" else 0),
    )
