"""
Read-only dashboard overview.

Joins several entity groups for display; nothing here is persisted.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from core.models import DailyStats, WellnessStats
from core.repositories import (
    DailyStatsRepository,
    GoalRepository,
    LanguageRepository,
    MusicRepository,
    WellnessRepository,
)
from core.store import KeyedStore
from core.utils import get_random_coding_tip, get_time_based_greeting


def is_new_user(daily: DailyStats, wellness: WellnessStats) -> bool:
    """True when nothing has been logged yet (selects the welcome view)."""
    return (
        daily.today_hours == 0
        and daily.week_streak == 0
        and daily.total_projects == 0
        and wellness.total_walks == 0
    )


def build_overview(store: KeyedStore, now: Optional[datetime] = None) -> Dict[str, Any]:
    daily = DailyStatsRepository(store).get()
    wellness = WellnessRepository(store).get_stats()
    languages = LanguageRepository(store).list_languages()

    return {
        "greeting": get_time_based_greeting(now),
        "tip": get_random_coding_tip(),
        "isNewUser": is_new_user(daily, wellness),
        "dailyStats": daily.to_dict(),
        "wellnessStats": wellness.to_dict(),
        "goals": GoalRepository(store).summary(),
        "languages": {
            "count": len(languages),
            "averageProgress": (
                round(sum(l.progress for l in languages) / len(languages), 1) if languages else 0
            ),
        },
        "musicStats": MusicRepository(store).get_stats().to_dict(),
    }
