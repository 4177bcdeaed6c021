"""Typed exceptions for the blog API client."""

from typing import Any


class BlogError(Exception):
    """Base exception for all blog client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BlogAPIError(BlogError):
    """API request error with status code and response details."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class BlogAuthError(BlogError):
    """Authorization failure that could not be recovered."""

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        status_code: int | None = 401,
    ) -> None:
        self.stage = stage  # e.g., "request", "token_exchange"
        self.status_code = status_code
        super().__init__(message)


class BlogTokenError(BlogAuthError):
    """Access token could not be renewed from the refresh token."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        exhausted: bool = False,
    ) -> None:
        self.exhausted = exhausted  # refresh attempt budget used up
        super().__init__(message, stage="token_exchange", status_code=status_code)


class BlogValidationError(BlogError):
    """Request validation error before sending to the API."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
