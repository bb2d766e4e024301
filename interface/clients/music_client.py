"""
Coding music catalog.

Serves a fixed sample catalog with a small artificial delay in place of a
streaming service API. Listening stats live in MusicRepository, not here.
"""
import time
from typing import Any, Dict, List, Optional

from core.config_manager import config
from interface.clients.base import BaseClient

SAMPLE_PLAYLISTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Deep Focus", "description": "Concentration music for coding sessions",
     "trackCount": 45, "duration": "3h 12m", "genre": "Ambient"},
    {"id": 2, "name": "Coding Beats", "description": "Upbeat instrumental tracks to keep you motivated",
     "trackCount": 32, "duration": "2h 18m", "genre": "Electronic"},
    {"id": 3, "name": "Lo-Fi Study", "description": "Chill lo-fi beats for relaxed coding",
     "trackCount": 28, "duration": "1h 54m", "genre": "Lo-Fi"},
    {"id": 4, "name": "Classical Focus", "description": "Classical music for deep concentration",
     "trackCount": 25, "duration": "2h 45m", "genre": "Classical"},
    {"id": 5, "name": "Synthwave Programming", "description": "Retro synthwave for late-night coding",
     "trackCount": 20, "duration": "1h 32m", "genre": "Synthwave"},
]

SAMPLE_TRACKS: List[Dict[str, Any]] = [
    {"id": 1, "title": "Midnight Coding", "artist": "Code Symphony", "duration": "4:23",
     "genre": "Ambient", "mood": "focused"},
    {"id": 2, "title": "Binary Dreams", "artist": "Digital Zen", "duration": "3:45",
     "genre": "Electronic", "mood": "energetic"},
    {"id": 3, "title": "Algorithm Flow", "artist": "Function Beat", "duration": "5:12",
     "genre": "Lo-Fi", "mood": "relaxed"},
    {"id": 4, "title": "Debug Sessions", "artist": "Syntax Sound", "duration": "3:28",
     "genre": "Ambient", "mood": "concentrated"},
    {"id": 5, "title": "Compile Time", "artist": "Runtime Rhythm", "duration": "4:01",
     "genre": "Electronic", "mood": "motivated"},
]

# coding activity -> track mood
ACTIVITY_MOODS = {
    "debugging": "focused",
    "learning": "relaxed",
    "project": "energetic",
}
DEFAULT_MOOD = "concentrated"


class MusicCatalogClient(BaseClient):

    def __init__(self, latency: Optional[float] = None, **kwargs):
        super().__init__(**kwargs)
        self.latency = config.MUSIC_SIMULATED_LATENCY if latency is None else latency

    def get_name(self) -> str:
        return "music_catalog"

    def _simulate_latency(self) -> None:
        if self.latency > 0:
            time.sleep(self.latency)

    def fetch_playlists(self) -> List[Dict[str, Any]]:
        self._simulate_latency()
        return [dict(p) for p in SAMPLE_PLAYLISTS]

    def fetch_playlist_tracks(self, playlist_id: int) -> List[Dict[str, Any]]:
        """Tracks of a playlist; the sample catalog shares one track list, unknown ids get []."""
        self._simulate_latency()
        if not any(p["id"] == playlist_id for p in SAMPLE_PLAYLISTS):
            return []
        return [dict(t) for t in SAMPLE_TRACKS]

    def search(self, query: str) -> List[Dict[str, Any]]:
        """Case-insensitive substring match over genre, mood, title and artist."""
        self._simulate_latency()
        needle = (query or "").strip().lower()
        return [
            dict(t)
            for t in SAMPLE_TRACKS
            if any(needle in t[f].lower() for f in ("genre", "mood", "title", "artist"))
        ]

    def recommendations(self, coding_activity: str = "general") -> List[Dict[str, Any]]:
        self._simulate_latency()
        mood = ACTIVITY_MOODS.get(coding_activity, DEFAULT_MOOD)
        return [dict(t) for t in SAMPLE_TRACKS if t["mood"] == mood]
