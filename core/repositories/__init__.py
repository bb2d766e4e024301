# Entity-group repositories over KeyedStore.

from core.repositories.base import GROUP_KEYS
from core.repositories.daily_stats import DailyStatsRepository
from core.repositories.goals import GoalRepository, filter_goals
from core.repositories.languages import LanguageRepository
from core.repositories.music import MusicRepository
from core.repositories.quotes import UserQuoteRepository
from core.repositories.wellness import WellnessRepository

__all__ = [
    "GROUP_KEYS",
    "DailyStatsRepository",
    "GoalRepository",
    "LanguageRepository",
    "MusicRepository",
    "UserQuoteRepository",
    "WellnessRepository",
    "filter_goals",
]
