"""Configuration management for the blog client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from blog_client.exceptions import BlogValidationError

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TOKEN_ENDPOINT = "/api/token"


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "blog-client"
    return Path.home() / ".config" / "blog-client"


@dataclass(frozen=True, slots=True)
class BlogConfig:
    """Blog API configuration.

    Attributes:
        base_url: Scheme and host the relative API paths are resolved against.
        token_endpoint: Path of the refresh-token exchange endpoint.
        max_attempts: How many times one request may be sent in total.
            The default of 2 allows the original request plus a single
            replay after a token refresh.
        timeout: HTTP timeout in seconds for pooled and per-request clients.
    """

    base_url: str = DEFAULT_BASE_URL
    token_endpoint: str = DEFAULT_TOKEN_ENDPOINT
    max_attempts: int = 2
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {self.max_attempts}"
            raise BlogValidationError(msg, field="max_attempts")

    @property
    def token_url(self) -> str:
        """Get the absolute URL of the token exchange endpoint."""
        return self.resolve(self.token_endpoint)

    def resolve(self, url: str) -> str:
        """Resolve a path like ``/api/articles`` against the base URL.

        Absolute URLs are returned unchanged.
        """
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"

    @classmethod
    def from_env(cls) -> BlogConfig:
        """Create config from environment variables.

        Expected env vars:
        - BLOG_BASE_URL (required)
        - BLOG_TOKEN_ENDPOINT, BLOG_MAX_ATTEMPTS, BLOG_TIMEOUT (optional)
        """
        base_url = os.environ.get("BLOG_BASE_URL")
        if not base_url:
            msg = "Missing required environment variable: BLOG_BASE_URL"
            raise ValueError(msg)

        return cls(
            base_url=base_url,
            token_endpoint=os.environ.get("BLOG_TOKEN_ENDPOINT", DEFAULT_TOKEN_ENDPOINT),
            max_attempts=int(os.environ.get("BLOG_MAX_ATTEMPTS", "2")),
            timeout=float(os.environ.get("BLOG_TIMEOUT", "30")),
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> BlogConfig:
        """Load config from JSON file.

        Default path: ~/.config/blog-client/config.json

        Expected format:
        {
            "base_url": "https://blog.example.com",
            "max_attempts": 2
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls(
            base_url=data["base_url"],
            token_endpoint=data.get("token_endpoint", DEFAULT_TOKEN_ENDPOINT),
            max_attempts=int(data.get("max_attempts", 2)),
            timeout=float(data.get("timeout", 30.0)),
        )

    @classmethod
    def load(cls) -> BlogConfig:
        """Load config from environment or file (env takes precedence).

        The file is only consulted when BLOG_BASE_URL is unset; malformed
        optional variables are reported rather than skipped.
        """
        if os.environ.get("BLOG_BASE_URL"):
            return cls.from_env()
        return cls.from_file()
