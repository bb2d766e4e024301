"""
Backup, reset and summary utilities over the whole DevJourney namespace.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from core.logger import get_logger
from core.repositories.base import GROUP_KEYS
from core.store import KeyedStore

logger = get_logger("data_tools")

# Export document field -> entity group
EXPORT_FIELDS = {
    "codingGoals": "goals",
    "languages": "languages",
    "dailyStats": "daily_stats",
    "wellness": "wellness",
    "wellnessStats": "wellness_stats",
    "userQuotes": "user_quotes",
    "musicStats": "music_stats",
    "musicActivities": "music_activities",
}

_RECORD_GROUPS = {"daily_stats", "wellness_stats", "music_stats"}


def export_user_data(store: KeyedStore, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Every entity group as stored, plus an ISO export timestamp."""
    data: Dict[str, Any] = {}
    for field, group in EXPORT_FIELDS.items():
        default: Any = {} if group in _RECORD_GROUPS else []
        data[field] = store.read(GROUP_KEYS[group], default)
    data["exportDate"] = (now or datetime.now()).isoformat()
    return data


def write_export(store: KeyedStore, directory: Path, now: Optional[datetime] = None) -> Path:
    """Write devjourney-backup-YYYY-MM-DD.json into directory and return its path."""
    now = now or datetime.now()
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / f"devjourney-backup-{now:%Y-%m-%d}.json"
    with open(target, "w", encoding="utf-8") as f:
        json.dump(export_user_data(store, now), f, ensure_ascii=False, indent=2)
    logger.info(f"Exported data to {target}")
    return target


def reset_all_data(store: KeyedStore) -> List[str]:
    """Remove every namespaced key; repositories read defaults afterwards."""
    removed = store.keys()
    for name in removed:
        store.remove(name)
    logger.warning(f"Reset all data ({len(removed)} keys removed)")
    return removed


def get_data_summary(store: KeyedStore) -> Dict[str, Any]:
    def count(group: str) -> int:
        value = store.read(GROUP_KEYS[group], [])
        return len(value) if isinstance(value, list) else 0

    daily = store.read(GROUP_KEYS["daily_stats"], {})
    return {
        "codingGoals": count("goals"),
        "languages": count("languages"),
        "wellnessActivities": count("wellness"),
        "userQuotes": count("user_quotes"),
        "musicActivities": count("music_activities"),
        "dailyStats": daily if isinstance(daily, dict) else {},
    }
