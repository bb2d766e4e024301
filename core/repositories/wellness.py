"""
WellnessRepository: wellness activity log plus its derived stats record.

The activity list is kept newest first. The stats record is recomputed from
the full live list after every add and every delete, so it never drifts from
the activities it summarizes. When the activity list cannot be written the
stats record is left alone too.
"""
import math
from datetime import date
from typing import List, Optional, Union

from core.config_manager import config
from core.exceptions import ValidationError
from core.models import ActivityType, WellnessActivity, WellnessStats, next_id
from core.repositories.base import BaseRepository
from core.stats import compute_wellness_stats


class WellnessRepository(BaseRepository):

    def list_activities(self) -> List[WellnessActivity]:
        return self._load_list("wellness", WellnessActivity.from_dict)

    def get_stats(self) -> WellnessStats:
        return self._load_record("wellness_stats", WellnessStats)

    def add_activity(
        self,
        activity_type: Union[ActivityType, str],
        duration: float,
        mood: int,
        notes: str = "",
    ) -> Optional[WellnessActivity]:
        """
        Log an activity and refresh the aggregate stats.

        Returns the new activity, or None when the store refused the write.

        Raises:
            ValidationError: unknown type, duration not a finite number > 0,
                or mood outside MOOD_MIN..MOOD_MAX.
        """
        try:
            activity_type = ActivityType(activity_type)
        except ValueError:
            raise ValidationError(
                "type", "expected walk, exercise, meditation or music", activity_type
            )
        if (isinstance(duration, bool) or not isinstance(duration, (int, float))
                or not math.isfinite(duration) or duration <= 0):
            raise ValidationError("duration", "must be a positive number of minutes", duration)
        if (
            isinstance(mood, bool)
            or not isinstance(mood, int)
            or not config.MOOD_MIN <= mood <= config.MOOD_MAX
        ):
            raise ValidationError(
                "mood", f"must be an integer from {config.MOOD_MIN} to {config.MOOD_MAX}", mood
            )

        activity = WellnessActivity(
            id=next_id(),
            type=activity_type,
            duration=duration,
            mood=mood,
            notes=(notes or "").strip(),
        )
        activities = [activity] + self.list_activities()
        if not self._save_list("wellness", activities):
            self.logger.warning(f"Could not save {activity_type.value} activity, stats unchanged")
            return None
        stats = self._refresh_stats(activities)
        self.logger.info(
            f"Logged {activity_type.value} ({duration} min, mood {mood}); "
            f"average mood now {stats.average_mood}"
        )
        return activity

    def delete_activity(self, activity_id: int) -> List[WellnessActivity]:
        activities = self.list_activities()
        remaining = [a for a in activities if a.id != activity_id]
        if len(remaining) != len(activities):
            if not self._save_list("wellness", remaining):
                self.logger.warning(f"Could not delete wellness activity {activity_id}")
                return activities
            self._refresh_stats(remaining)
            self.logger.info(f"Deleted wellness activity {activity_id}")
        return remaining

    def recompute_stats(self, today: Optional[date] = None) -> WellnessStats:
        """Rebuild the stats record from the stored activities (e.g. after import)."""
        return self._refresh_stats(self.list_activities(), today)

    def _refresh_stats(
        self, activities: List[WellnessActivity], today: Optional[date] = None
    ) -> WellnessStats:
        stats = compute_wellness_stats(activities, today)
        self._save_record("wellness_stats", stats)
        return stats
