"""
MusicRepository: listening stats record plus an append-only activity log.

Activity types seen in practice: "listen", "playlist_added". Duration is in
hours.
"""
import math
from typing import List, Optional

from core.exceptions import ValidationError
from core.models import MusicActivity, MusicStats, next_id
from core.repositories.base import BaseRepository
from core.stats import apply_music_activity


class MusicRepository(BaseRepository):

    def get_stats(self) -> MusicStats:
        return self._load_record("music_stats", MusicStats)

    def list_activities(self) -> List[MusicActivity]:
        return self._load_list("music_activities", MusicActivity.from_dict)

    def track_activity(
        self,
        activity_type: str = "listen",
        duration: float = 0,
        genre: Optional[str] = None,
        artist: Optional[str] = None,
        track: Optional[str] = None,
    ) -> MusicStats:
        if not activity_type or not activity_type.strip():
            raise ValidationError("type", "activity type must not be empty", activity_type)
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or not math.isfinite(duration)
            or duration < 0
        ):
            raise ValidationError("duration", "must be a finite, non-negative number of hours", duration)

        stats = apply_music_activity(
            self.get_stats(), activity_type, duration, genre=genre, artist=artist, track=track
        )
        if not self._save_record("music_stats", stats):
            return self.get_stats()

        activities = self.list_activities()
        activities.append(
            MusicActivity(
                id=next_id(),
                type=activity_type,
                duration=duration,
                genre=genre,
                artist=artist,
                track=track,
            )
        )
        self._save_list("music_activities", activities)
        return stats
