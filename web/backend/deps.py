"""
Process-wide collaborators for the API routers.

Routers call these getters on every request; tests monkeypatch them.
"""
from functools import lru_cache

from fastapi import HTTPException

from core.store import KeyedStore, open_default_store
from interface.clients import GitHubClient, MusicCatalogClient, QuotesClient


@lru_cache(maxsize=1)
def get_store() -> KeyedStore:
    return open_default_store()


@lru_cache(maxsize=1)
def get_quotes_client() -> QuotesClient:
    return QuotesClient()


@lru_cache(maxsize=1)
def get_github_client() -> GitHubClient:
    return GitHubClient()


@lru_cache(maxsize=1)
def get_music_client() -> MusicCatalogClient:
    return MusicCatalogClient()


def require_saved(value, what: str):
    """Turn a repository's None (store refused the write) into a 503."""
    if value is None:
        raise HTTPException(status_code=503, detail=f"{what} could not be saved")
    return value
