from __future__ import annotations

from datetime import datetime


class PrChangesError(Exception):
    """Base class for every error raised while collecting changes."""


class ConfigError(PrChangesError):
    pass


class NetworkError(PrChangesError):
    pass


class ApiError(PrChangesError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class RateLimitError(PrChangesError):
    def __init__(self, message: str, reset_at: datetime | None = None) -> None:
        super().__init__(message)
        self.reset_at = reset_at
