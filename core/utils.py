import random
from datetime import datetime
from typing import Optional, Union

DateLike = Union[datetime, str]


def _to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    # JS-style ISO strings end in "Z"
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_date(value: DateLike) -> str:
    """Format a date as e.g. "Jan 5, 2026"."""
    d = _to_datetime(value)
    return f"{d:%b} {d.day}, {d.year}"


def format_duration(minutes: int) -> str:
    """
    Human readable duration.

    Example:
        >>> format_duration(45)
        '45m'
        >>> format_duration(150)
        '2h 30m'
    """
    if minutes < 60:
        return f"{minutes}m"

    hours = int(minutes // 60)
    remaining = minutes % 60
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}m"


_TIME_UNITS = (
    ("year", 31536000),
    ("month", 2592000),
    ("week", 604800),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


def get_relative_time(value: DateLike, now: Optional[datetime] = None) -> str:
    """Relative time string such as "2 hours ago"."""
    target = _to_datetime(value)
    if now is None:
        now = datetime.now(target.tzinfo)
    diff_seconds = int((now - target).total_seconds())

    for unit, seconds in _TIME_UNITS:
        interval = diff_seconds // seconds
        if interval >= 1:
            return f"{interval} {unit}{'s' if interval > 1 else ''} ago"
    return "just now"


def clamp(value, min_value, max_value):
    return min(max(value, min_value), max_value)


def calculate_progress(current: float, total: float) -> float:
    """Percentage of current over total, clamped to 0..100."""
    if total == 0:
        return 0
    return clamp((current / total) * 100, 0, 100)


_MOOD_EMOJI = {
    1: "😢", 2: "😔", 3: "🙁", 4: "😐", 5: "😐",
    6: "🙂", 7: "😊", 8: "😊", 9: "😁", 10: "🤩",
}


def get_mood_emoji(mood: float) -> str:
    return _MOOD_EMOJI.get(round(clamp(mood, 1, 10)), "😐")


def get_progress_color(progress: float) -> str:
    """Color bucket for a progress percentage."""
    if progress >= 80:
        return "green"
    if progress >= 60:
        return "yellow"
    if progress >= 40:
        return "orange"
    return "red"


def get_time_based_greeting(when: Optional[datetime] = None) -> str:
    hour = (when or datetime.now()).hour
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    return "Good evening"


CODING_TIPS = (
    "💡 Take regular breaks to prevent burnout and maintain focus",
    "🎯 Break large problems into smaller, manageable tasks",
    "📝 Write comments for your future self - you'll thank yourself later",
    "🔍 Use meaningful variable and function names for better readability",
    "🧪 Test your code frequently to catch bugs early",
    "📚 Learn one new thing every day, even if it's small",
    "🤝 Don't hesitate to ask for help when you're stuck",
    "🔄 Refactor your code regularly to keep it clean and maintainable",
    "🎵 Find your coding playlist - music can boost productivity",
    "🌱 Embrace mistakes as learning opportunities",
)


def get_random_coding_tip(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(CODING_TIPS)
