"""
DailyStatsRepository: the single today/streak/projects record.

todayHours is stored as the raw running sum; rounding is left to display
helpers so that small increments are never lost.
"""
import math

from core.exceptions import ValidationError
from core.models import DailyStats
from core.repositories.base import BaseRepository


class DailyStatsRepository(BaseRepository):

    def get(self) -> DailyStats:
        return self._load_record("daily_stats", DailyStats)

    def add_coding_hours(self, hours: float) -> DailyStats:
        """Accumulate coding hours for today. No upper bound.

        Returns the stored record, which is unchanged when the write fails.
        """
        if (
            isinstance(hours, bool)
            or not isinstance(hours, (int, float))
            or not math.isfinite(hours)
            or hours <= 0
        ):
            raise ValidationError("hours", "must be a finite number greater than 0", hours)

        stats = self.get()
        stats.today_hours = stats.today_hours + hours
        if not self._save_record("daily_stats", stats):
            self.logger.warning(f"Could not save {hours}h of coding")
            return self.get()
        self.logger.info(f"Logged {hours}h of coding, today at {stats.today_hours:.2f}h")
        return stats
