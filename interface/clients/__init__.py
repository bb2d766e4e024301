# Remote data clients (profile, quotes, music catalog).

from interface.clients.base import BaseClient
from interface.clients.github_client import GitHubClient
from interface.clients.music_client import MusicCatalogClient
from interface.clients.quotes_client import FALLBACK_QUOTE, QuotesClient

__all__ = ["BaseClient", "GitHubClient", "MusicCatalogClient", "QuotesClient", "FALLBACK_QUOTE"]
