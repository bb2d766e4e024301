"""
GitHub REST client (unauthenticated, public data only).
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from core.config_manager import config
from core.exceptions import RemoteFetchError
from interface.clients.base import BaseClient

_SHAPE_ERRORS = (RemoteFetchError, KeyError, TypeError, AttributeError)


def _empty_activity() -> Dict[str, Any]:
    return {"totalEvents": 0, "commits": 0, "repos": 0, "lastActivity": None}


def _parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class GitHubClient(BaseClient):

    base_url = config.GITHUB_API_BASE

    def get_name(self) -> str:
        return "github"

    def fetch_profile(self, username: str) -> Optional[Dict[str, Any]]:
        try:
            data = self._get_json(f"/users/{username}")
            return {
                "username": data["login"],
                "name": data.get("name") or data["login"],
                "avatar": data.get("avatar_url"),
                "bio": data.get("bio"),
                "publicRepos": data.get("public_repos", 0),
                "followers": data.get("followers", 0),
                "following": data.get("following", 0),
                "createdAt": data.get("created_at"),
                "location": data.get("location"),
                "blog": data.get("blog"),
                "company": data.get("company"),
            }
        except _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return None

    def fetch_repos(self, username: str, limit: int = 10) -> List[Dict[str, Any]]:
        try:
            data = self._get_json(
                f"/users/{username}/repos", params={"sort": "updated", "per_page": limit}
            )
            return [
                {
                    "id": repo["id"],
                    "name": repo["name"],
                    "description": repo.get("description"),
                    "language": repo.get("language"),
                    "stars": repo.get("stargazers_count", 0),
                    "forks": repo.get("forks_count", 0),
                    "updatedAt": repo.get("updated_at"),
                    "htmlUrl": repo.get("html_url"),
                    "topics": repo.get("topics") or [],
                }
                for repo in data
            ]
        except _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return []

    def fetch_activity(self, username: str, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Public events from the last 7 days, summarized."""
        try:
            events = self._get_json(f"/users/{username}/events/public", params={"per_page": 100})
            now = now or datetime.now(timezone.utc)
            since = now - timedelta(days=7)

            recent = [e for e in events if _parse_ts(e["created_at"]) >= since]
            commits = sum(
                len((e.get("payload") or {}).get("commits") or [])
                for e in recent
                if e.get("type") == "PushEvent"
            )
            return {
                "totalEvents": len(recent),
                "commits": commits,
                "repos": len({e["repo"]["name"] for e in recent}),
                "lastActivity": events[0]["created_at"] if events else None,
            }
        except (ValueError,) + _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return _empty_activity()

    def fetch_trending(self, language: str = "javascript", limit: int = 5) -> List[Dict[str, Any]]:
        try:
            data = self._get_json(
                "/search/repositories",
                params={
                    "q": f"language:{language} stars:>100",
                    "sort": "stars",
                    "order": "desc",
                    "per_page": limit,
                },
            )
            return [
                {
                    "id": repo["id"],
                    "name": repo["name"],
                    "fullName": repo.get("full_name"),
                    "description": repo.get("description"),
                    "language": repo.get("language"),
                    "stars": repo.get("stargazers_count", 0),
                    "forks": repo.get("forks_count", 0),
                    "htmlUrl": repo.get("html_url"),
                    "topics": repo.get("topics") or [],
                }
                for repo in data["items"]
            ]
        except _SHAPE_ERRORS as e:
            self._log_fallback(e)
            return []
