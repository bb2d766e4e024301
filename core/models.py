"""
DevJourney data models.

Each entity group is persisted under its own key as camelCase JSON (the
dashboard's stored JSON shape). from_dict() is the explicit decode step:
it raises on rows it cannot make sense of, and decode_list()/decode_record()
turn those failures into skipped rows or documented defaults.
"""
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from core.config_manager import config
from core.logger import get_logger
from core.utils import clamp

logger = get_logger("models")

NO_DATA = "–"

T = TypeVar("T")


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ActivityType(str, Enum):
    WALK = "walk"
    EXERCISE = "exercise"
    MEDITATION = "meditation"
    MUSIC = "music"


class GoalFilter(str, Enum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    HIGH = "high"


_last_id = 0


def next_id() -> int:
    """Millisecond timestamp id, strictly increasing within this process."""
    global _last_id
    candidate = int(time.time() * 1000)
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return candidate


def now_iso() -> str:
    return datetime.now().isoformat()


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    return value


@dataclass
class Goal:
    """Coding goal. Only `completed` ever changes after creation."""
    id: int
    text: str
    priority: Priority = Priority.MEDIUM
    completed: bool = False
    created_at: str = field(default_factory=now_iso)
    type: str = "coding"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "priority": self.priority.value,
            "completed": self.completed,
            "createdAt": self.created_at,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Goal":
        return cls(
            id=int(d["id"]),
            text=str(d["text"]),
            priority=Priority(d.get("priority", "medium")),
            completed=bool(d.get("completed", False)),
            created_at=d.get("createdAt") or now_iso(),
            type=d.get("type", "coding"),
        )


@dataclass
class Language:
    """Language being learned; progress is a percentage."""
    id: int
    name: str
    progress: int = 0
    hours_spent: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "progress": self.progress,
            "hoursSpent": self.hours_spent,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Language":
        progress = int(_number(d.get("progress", 0), "progress"))
        return cls(
            id=int(d["id"]),
            name=str(d["name"]),
            progress=clamp(progress, config.PROGRESS_MIN, config.PROGRESS_MAX),
            hours_spent=_number(d.get("hoursSpent", 0), "hoursSpent"),
        )


@dataclass
class DailyStats:
    today_hours: float = 0
    week_streak: int = 0
    total_projects: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "todayHours": self.today_hours,
            "weekStreak": self.week_streak,
            "totalProjects": self.total_projects,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DailyStats":
        stats = cls(
            today_hours=_number(d.get("todayHours", 0), "todayHours"),
            week_streak=int(_number(d.get("weekStreak", 0), "weekStreak")),
            total_projects=int(_number(d.get("totalProjects", 0), "totalProjects")),
        )
        if stats.today_hours < 0 or stats.week_streak < 0 or stats.total_projects < 0:
            raise ValueError("daily stats must not be negative")
        return stats


@dataclass
class WellnessActivity:
    id: int
    type: ActivityType
    duration: float  # minutes
    mood: int
    notes: str = ""
    date: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "duration": self.duration,
            "mood": self.mood,
            "notes": self.notes,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WellnessActivity":
        # quick-action entries were stored with "timestamp" instead of "date"
        return cls(
            id=int(d["id"]),
            type=ActivityType(d["type"]),
            duration=_number(d["duration"], "duration"),
            mood=int(_number(d["mood"], "mood")),
            notes=str(d.get("notes") or ""),
            date=d.get("date") or d.get("timestamp") or now_iso(),
        )


@dataclass
class WellnessStats:
    """Aggregate over the wellness activity list; see core.stats."""
    total_walks: int = 0
    total_distance: float = 0.0  # km
    average_mood: float = 0.0
    streak_days: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalWalks": self.total_walks,
            "totalDistance": self.total_distance,
            "averageMood": self.average_mood,
            "streakDays": self.streak_days,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WellnessStats":
        return cls(
            total_walks=int(_number(d.get("totalWalks", 0), "totalWalks")),
            total_distance=_number(d.get("totalDistance", 0), "totalDistance"),
            average_mood=_number(d.get("averageMood", 0), "averageMood"),
            streak_days=int(_number(d.get("streakDays", 0), "streakDays")),
        )


@dataclass
class UserQuote:
    id: int
    content: str
    author: str
    tags: List[str] = field(default_factory=list)
    is_user_quote: bool = True
    date_added: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "author": self.author,
            "tags": list(self.tags),
            "isUserQuote": True,
            "dateAdded": self.date_added,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "UserQuote":
        tags = d.get("tags") or []
        if not isinstance(tags, list):
            raise TypeError("tags must be a list")
        return cls(
            id=int(d["id"]),
            content=str(d["content"]),
            author=str(d["author"]),
            tags=[str(t) for t in tags],
            date_added=d.get("dateAdded") or now_iso(),
        )


@dataclass
class MusicStats:
    """Listening totals; NO_DATA and 0 mean nothing tracked yet."""
    total_hours: float = 0
    favorite_genre: str = NO_DATA
    top_artist: str = NO_DATA
    most_played_track: str = NO_DATA
    coding_playtime: str = "0h 0m"
    playlists: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalHours": self.total_hours,
            "favoriteGenre": self.favorite_genre,
            "topArtist": self.top_artist,
            "mostPlayedTrack": self.most_played_track,
            "codingPlaytime": self.coding_playtime,
            "playlists": self.playlists,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MusicStats":
        return cls(
            total_hours=_number(d.get("totalHours", 0), "totalHours"),
            favorite_genre=str(d.get("favoriteGenre", NO_DATA)),
            top_artist=str(d.get("topArtist", NO_DATA)),
            most_played_track=str(d.get("mostPlayedTrack", NO_DATA)),
            coding_playtime=str(d.get("codingPlaytime", "0h 0m")),
            playlists=int(_number(d.get("playlists", 0), "playlists")),
        )


@dataclass
class MusicActivity:
    """Entry in the music activity log. duration is in hours."""
    id: int
    type: str
    duration: float = 0
    genre: Optional[str] = None
    artist: Optional[str] = None
    track: Optional[str] = None
    timestamp: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MusicActivity":
        return cls(
            id=int(d["id"]),
            type=str(d.get("type", "listen")),
            duration=_number(d.get("duration", 0), "duration"),
            genre=d.get("genre"),
            artist=d.get("artist"),
            track=d.get("track"),
            timestamp=d.get("timestamp") or now_iso(),
        )


_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


def decode_list(raw: Any, decoder: Callable[[Dict[str, Any]], T], group: str) -> List[T]:
    """Decode a persisted list, dropping rows that do not fit the schema."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning(f"'{group}' is not a list, using empty default")
        return []

    items: List[T] = []
    for row in raw:
        try:
            items.append(decoder(row))
        except _DECODE_ERRORS as e:
            logger.warning(f"Dropping malformed '{group}' row {row!r}: {e}")
    return items


def decode_record(raw: Any, model: Type[T], group: str) -> T:
    """Decode a persisted singleton, falling back to the model's defaults."""
    if raw is None:
        return model()
    try:
        if not isinstance(raw, dict):
            raise TypeError(f"expected object, got {type(raw).__name__}")
        return model.from_dict(raw)
    except _DECODE_ERRORS as e:
        logger.warning(f"Malformed '{group}' record, using defaults: {e}")
        return model()
