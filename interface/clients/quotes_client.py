"""
Quotable API client.

Fallbacks: fetch_random_quote -> FALLBACK_QUOTE, fetch_quotes_by_tag -> [],
fetch_author -> None.
"""
from typing import Any, Dict, List, Optional

from core.config_manager import config
from core.exceptions import RemoteFetchError
from interface.clients.base import BaseClient

FALLBACK_QUOTE: Dict[str, Any] = {
    "content": "The only way to do great work is to love what you do.",
    "author": "Steve Jobs",
    "tags": ["motivational"],
}

RANDOM_QUOTE_TAGS = "motivational|inspirational|success"

_SHAPE_ERRORS = (RemoteFetchError, KeyError, TypeError, AttributeError)


class QuotesClient(BaseClient):

    base_url = config.QUOTABLE_API_BASE

    def get_name(self) -> str:
        return "quotable"

    def fetch_random_quote(self) -> Dict[str, Any]:
        try:
            data = self._get_json("/random", params={"tags": RANDOM_QUOTE_TAGS})
            return {
                "content": data["content"],
                "author": data["author"],
                "tags": list(data.get("tags") or []),
            }
        except _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return {**FALLBACK_QUOTE, "tags": list(FALLBACK_QUOTE["tags"])}

    def fetch_quotes_by_tag(self, tag: str = "motivational", limit: int = 5) -> List[Dict[str, Any]]:
        try:
            data = self._get_json("/quotes", params={"tags": tag, "limit": limit})
            return [
                {
                    "id": q["_id"],
                    "content": q["content"],
                    "author": q["author"],
                    "tags": list(q.get("tags") or []),
                }
                for q in data["results"]
            ]
        except _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return []

    def fetch_author(self, slug: str) -> Optional[Dict[str, Any]]:
        try:
            data = self._get_json(f"/authors/{slug}")
        except RemoteFetchError as e:
            self._log_fallback(e)
            return None
        return data if isinstance(data, dict) else None
