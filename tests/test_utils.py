import random
from datetime import datetime, timedelta

from core.utils import (
    CODING_TIPS,
    calculate_progress,
    clamp,
    format_date,
    format_duration,
    get_mood_emoji,
    get_progress_color,
    get_random_coding_tip,
    get_relative_time,
    get_time_based_greeting,
)


def test_format_duration():
    assert format_duration(45) == "45m"
    assert format_duration(60) == "1h"
    assert format_duration(150) == "2h 30m"


def test_format_date():
    assert format_date("2026-01-05T10:00:00") == "Jan 5, 2026"
    assert format_date(datetime(2025, 12, 31)) == "Dec 31, 2025"


def test_relative_time():
    now = datetime(2026, 5, 1, 12, 0, 0)
    assert get_relative_time(now - timedelta(seconds=20), now) == "20 seconds ago"
    assert get_relative_time(now - timedelta(hours=1), now) == "1 hour ago"
    assert get_relative_time(now - timedelta(days=3), now) == "3 days ago"
    assert get_relative_time(now, now) == "just now"


def test_clamp_and_progress():
    assert clamp(150, 0, 100) == 100
    assert clamp(-3, 0, 100) == 0
    assert calculate_progress(5, 0) == 0
    assert calculate_progress(1, 4) == 25
    assert calculate_progress(10, 4) == 100


def test_mood_emoji_and_progress_color():
    assert get_mood_emoji(10) == "🤩"
    assert get_mood_emoji(42) == "🤩"
    assert get_mood_emoji(1) == "😢"
    assert get_progress_color(85) == "green"
    assert get_progress_color(60) == "yellow"
    assert get_progress_color(45) == "orange"
    assert get_progress_color(10) == "red"


def test_greeting_and_tip():
    assert get_time_based_greeting(datetime(2026, 1, 1, 9)) == "Good morning"
    assert get_time_based_greeting(datetime(2026, 1, 1, 13)) == "Good afternoon"
    assert get_time_based_greeting(datetime(2026, 1, 1, 20)) == "Good evening"
    assert get_random_coding_tip(random.Random(1)) in CODING_TIPS
