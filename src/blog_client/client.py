"""Main blog client."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import httpx

from blog_client.api.articles import ArticlesAPI
from blog_client.auth import (
    ACCESS_TOKEN_KEY,
    CookieReader,
    FileTokenStorage,
    TokenStorage,
    bootstrap_token,
)
from blog_client.auth.storage import COOKIE_KEY
from blog_client.config import BlogConfig
from blog_client.dispatcher import Body, Continuation, RequestDispatcher
from blog_client.exceptions import BlogTokenError

if TYPE_CHECKING:
    from types import TracebackType


class BlogClient:
    """Blog API client.

    Provides a unified interface to the blog API with bearer-token
    authentication and automatic access-token renewal.

    Usage (context manager - recommended for connection pooling):
        async with BlogClient(config) as client:
            client.bootstrap("https://blog.example.com/articles?token=...")
            articles = await client.articles.list_articles()

    Usage (continuation style, like a button handler):
        await client.dispatch(
            "DELETE", "/api/articles/1", None,
            on_success=lambda: print("deleted"),
            on_failure=lambda: print("failed"),
        )

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        client = BlogClient(config, http_client=http_client)
        # Client uses shared pool, doesn't close it

    The refresh token is looked up in the explicit ``cookies`` string (or the
    cookie string kept in storage when none is given) followed by the cookie
    jar of the pooled HTTP client.
    """

    def __init__(
        self,
        config: BlogConfig,
        *,
        storage: TokenStorage | None = None,
        cookies: str | Callable[[], str | None] | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Blog API configuration
            storage: Durable key/value storage for the access token
                (uses a JSON file in the XDG data dir if not provided)
            cookies: Raw cookie string, or a callable returning one, holding
                the ``refresh_token`` cookie
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
        """
        self.config = config
        self.storage = storage if storage is not None else FileTokenStorage()
        self._cookie_source = cookies
        self.cookies = CookieReader(self._cookie_header)

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

        self.dispatcher = RequestDispatcher(config, self.storage, self.cookies, http_client)
        self.articles = ArticlesAPI(self.dispatcher)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on the dispatcher."""
        self._http_client = http_client
        self.dispatcher.set_http_client(http_client)

    def _cookie_header(self) -> str | None:
        """Render all known cookies as one ``key=value; ...`` string."""
        parts: list[str] = []

        source = self._cookie_source
        explicit = source() if callable(source) else source
        if explicit is None:
            explicit = self.storage.get(COOKIE_KEY)
        if explicit:
            parts.append(explicit)

        if self._http_client is not None:
            parts.extend(f"{cookie.name}={cookie.value}" for cookie in self._http_client.cookies.jar)

        return "; ".join(parts) or None

    async def open(self) -> None:
        """Open connection pool for HTTP requests."""
        if self._http_client is None and self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._set_http_client(http_client)

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> BlogClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls, *, storage: TokenStorage | None = None) -> BlogClient:
        """Create client from environment variables.

        Expects:
        - BLOG_BASE_URL
        """
        config = BlogConfig.from_env()
        return cls(config, storage=storage)

    @property
    def access_token(self) -> str | None:
        """Get the stored access token."""
        return self.storage.get(ACCESS_TOKEN_KEY)

    @property
    def is_authenticated(self) -> bool:
        """Check if an access token is stored."""
        return bool(self.access_token)

    def bootstrap(self, url: str) -> str | None:
        """Store the ``token`` query parameter of a redirect URL.

        Returns:
            The stored token, or None if the URL carried none
        """
        return bootstrap_token(url, self.storage)

    def clear_token(self) -> None:
        """Forget the stored access token."""
        self.storage.remove(ACCESS_TOKEN_KEY)

    async def renew_token(self) -> str:
        """Exchange the refresh token for a new access token right away.

        Raises:
            BlogTokenError: If no refresh token is available or the exchange fails
        """
        refresh_token = self.cookies.refresh_token
        if not refresh_token:
            raise BlogTokenError("No refresh_token cookie available")

        token = await self.dispatcher.exchanger.exchange(refresh_token, self.access_token)
        self.storage.set(ACCESS_TOKEN_KEY, token)
        return token

    async def dispatch(
        self,
        method: str,
        url: str,
        body: Body = None,
        on_success: Continuation | None = None,
        on_failure: Continuation | None = None,
    ) -> None:
        """Send a request and report the outcome through continuations."""
        await self.dispatcher.dispatch(method, url, body, on_success, on_failure)

    async def send(self, method: str, url: str, body: Body = None) -> httpx.Response:
        """Send a request, raising on failure."""
        return await self.dispatcher.send(method, url, body)
