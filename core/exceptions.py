"""
DevJourney exception hierarchy.

- DevJourneyError: base class, every known error
- ConfigError: configuration file problems
- StorageReadError: persisted text that cannot be read or decoded
- StorageWriteError: serialization or storage quota failure
- RemoteFetchError: non-2xx response or transport failure from a remote API
- ValidationError: caller-supplied value outside its documented domain

Only ValidationError is meant to reach callers. The storage and remote errors
are built, logged and recovered from inside their own layer.
"""
from typing import Any, Optional


class DevJourneyError(Exception):
    """Base DevJourney exception.

    Every known error in the system inherits from this class, so catching it
    covers all expected failure cases.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        """
        Args:
            message: error description
            hint: suggestion for the user
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def get_user_message(self) -> str:
        """Return a user friendly error message."""
        if self.hint:
            return f"{self.message}\n💡 Hint: {self.hint}"
        return self.message


class ConfigError(DevJourneyError):
    """Configuration file error."""

    def __init__(self, message: str, config_path: Optional[str] = None):
        hint = f"Check the config file: {config_path}" if config_path else "Check the config file format"
        super().__init__(message, hint)
        self.config_path = config_path


class StorageReadError(DevJourneyError):
    """Persisted value is absent-but-corrupt, malformed, or of the wrong shape."""

    def __init__(self, key: str, reason: str, raw: Optional[str] = None):
        super().__init__(f"Could not read '{key}': {reason}", hint="The default value was used instead")
        self.key = key
        self.raw = raw


class StorageWriteError(DevJourneyError):
    """Value could not be serialized or the store refused it."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Could not write '{key}': {reason}", hint="The previous value was kept")
        self.key = key


class RemoteFetchError(DevJourneyError):
    """Remote API call failed.

    Carries the service name and endpoint for the log line.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None
    ):
        self.service = service or "unknown"
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(
            f"[{self.service}] {message}",
            hint="Using offline/default data",
        )


class ValidationError(DevJourneyError):
    """Caller-supplied value outside its documented domain."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(f"Invalid {field}: {message}")
        self.field = field
        self.value = value
