"""
Base client for DevJourney's remote data sources.

Clients never raise to their callers: a failed call is logged as a
RemoteFetchError and the method returns its documented fallback value.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from core.config_manager import config
from core.exceptions import RemoteFetchError
from core.logger import get_logger


class BaseClient(ABC):
    """Base class for all remote data clients."""

    base_url: str = ""

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        if base_url is not None:
            self.base_url = base_url
        self.timeout = config.HTTP_TIMEOUT_SECONDS if timeout is None else timeout
        self._http = http_client
        self.logger = get_logger(f"clients.{self.get_name()}")

    @abstractmethod
    def get_name(self) -> str:
        """Service name used in logs and errors."""
        pass

    def _client(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._http

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET path and decode JSON.

        Raises:
            RemoteFetchError: transport failure, non-2xx status or invalid JSON.
        """
        try:
            response = self._client().get(path, params=params)
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"request failed: {e}", self.get_name(), path) from e

        if not response.is_success:
            raise RemoteFetchError(
                f"HTTP {response.status_code}",
                self.get_name(),
                path,
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise RemoteFetchError(f"invalid JSON: {e}", self.get_name(), path) from e

    def _log_fallback(self, error: Exception) -> None:
        self.logger.warning(f"{error}; using fallback")

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None
