"""
Shared pieces for the entity-group repositories.

Every repository reads its group through KeyedStore on each call and writes
the full group back after each mutation (write-through, no cached state).
"""
from typing import Any, Callable, Dict, List, Type, TypeVar

from core.logger import get_logger
from core.models import decode_list, decode_record
from core.store import KeyedStore

T = TypeVar("T")

# Entity group -> key suffix under the store prefix ("devjourney-<suffix>")
GROUP_KEYS: Dict[str, str] = {
    "goals": "coding-goals",
    "languages": "languages",
    "daily_stats": "daily-stats",
    "wellness": "wellness",
    "wellness_stats": "wellness-stats",
    "user_quotes": "user-quotes",
    "music_stats": "music-stats",
    "music_activities": "music-activities",
}


class BaseRepository:
    def __init__(self, store: KeyedStore):
        self.store = store
        self.logger = get_logger(f"repo.{type(self).__name__}")

    def _load_list(self, group: str, decoder: Callable[[Dict[str, Any]], T]) -> List[T]:
        return decode_list(self.store.read(GROUP_KEYS[group], []), decoder, group)

    def _save_list(self, group: str, items: List[Any]) -> bool:
        return self.store.write(GROUP_KEYS[group], [item.to_dict() for item in items])

    def _load_record(self, group: str, model: Type[T]) -> T:
        return decode_record(self.store.read(GROUP_KEYS[group]), model, group)

    def _save_record(self, group: str, record: Any) -> bool:
        return self.store.write(GROUP_KEYS[group], record.to_dict())
