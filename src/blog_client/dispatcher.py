"""Authenticated request dispatch with access-token refresh."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt

from blog_client.auth.exchange import TokenExchanger, bearer_headers
from blog_client.auth.storage import ACCESS_TOKEN_KEY
from blog_client.exceptions import BlogAPIError, BlogAuthError, BlogError, BlogTokenError

if TYPE_CHECKING:
    from blog_client.auth.cookies import CookieReader
    from blog_client.auth.storage import TokenStorage
    from blog_client.config import BlogConfig

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({200, 201})

Continuation = Callable[[], Awaitable[Any] | Any]
Body = str | bytes | Mapping[str, Any] | list[Any] | BaseModel | None


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """One user action: what to send and what to do with the outcome."""

    method: str
    url: str
    body: Body = None
    on_success: Continuation | None = None
    on_failure: Continuation | None = None


class _TokenRefreshed(Exception):
    """Signals that the access token changed and the request should be replayed."""


async def _invoke(continuation: Continuation | None) -> None:
    if continuation is None:
        return
    result = continuation()
    if inspect.isawaitable(result):
        await result


def _encode_body(body: Body) -> dict[str, Any]:
    """Build the httpx keyword arguments carrying ``body``."""
    if body is None:
        return {}
    if isinstance(body, BaseModel):
        return {"json": body.model_dump(by_alias=True, mode="json")}
    if isinstance(body, str | bytes):
        # Already serialized by the caller
        return {"content": body}
    return {"json": body}


class RequestDispatcher:
    """Sends requests with a bearer access token and renews it on 401.

    The access token is read from storage before every attempt. When the
    server answers 401 and a ``refresh_token`` cookie is available, the
    refresh token is exchanged for a new access token, which is stored, and
    the original request is sent again. ``config.max_attempts`` bounds how
    often one request is sent; a 401 on the last attempt is final.

    Refreshes are serialized: a request whose stale token was already
    replaced by a concurrent refresh reuses the new token instead of
    exchanging the refresh token again.
    """

    def __init__(
        self,
        config: BlogConfig,
        storage: TokenStorage,
        cookies: CookieReader,
        http_client: httpx.AsyncClient | None = None,
        *,
        exchanger: TokenExchanger | None = None,
    ) -> None:
        self.config = config
        self.storage = storage
        self.cookies = cookies
        self.exchanger = exchanger or TokenExchanger(config, http_client)
        self._http_client = http_client
        self._refresh_lock = asyncio.Lock()

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client
        self.exchanger.set_http_client(http_client)

    async def dispatch(
        self,
        method: str,
        url: str,
        body: Body = None,
        on_success: Continuation | None = None,
        on_failure: Continuation | None = None,
    ) -> None:
        """Send a request and report the outcome through continuations.

        ``on_success`` is called once the server answers 200 or 201.
        ``on_failure`` is called for every other outcome: an error status,
        a 401 that could not be recovered, or a transport error. Neither
        receives arguments and either may be a coroutine function.
        """
        await self.dispatch_request(
            RequestDescriptor(
                method=method,
                url=url,
                body=body,
                on_success=on_success,
                on_failure=on_failure,
            )
        )

    async def dispatch_request(self, request: RequestDescriptor) -> None:
        """Dispatch a prepared :class:`RequestDescriptor`."""
        try:
            await self.send(request.method, request.url, request.body)
        except (BlogError, httpx.HTTPError) as e:
            logger.info("%s %s failed: %s", request.method, request.url, e)
            await _invoke(request.on_failure)
            return

        await _invoke(request.on_success)

    async def send(self, method: str, url: str, body: Body = None) -> httpx.Response:
        """Send a request, renewing the access token on 401 as needed.

        Returns:
            The 200/201 response

        Raises:
            BlogAuthError: On 401 without a refresh token
            BlogTokenError: When the token exchange fails, or the request is
                still unauthorized on its last permitted attempt
            BlogAPIError: On any other non-success status
            httpx.HTTPError: On transport errors of the request itself
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(_TokenRefreshed),
            stop=stop_after_attempt(self.config.max_attempts),
            reraise=True,
        )

        async for attempt in retrying:
            with attempt:
                is_last = attempt.retry_state.attempt_number >= self.config.max_attempts
                response = await self._send_once(method, url, body, is_last=is_last)

        return response

    async def _send_once(
        self,
        method: str,
        url: str,
        body: Body,
        *,
        is_last: bool,
    ) -> httpx.Response:
        access_token = self.storage.get(ACCESS_TOKEN_KEY)
        response = await self._send_http(method, url, body, access_token)

        if response.status_code in SUCCESS_STATUSES:
            return response

        if response.status_code == 401:
            refresh_token = self.cookies.refresh_token
            if not refresh_token:
                raise BlogAuthError("Unauthorized and no refresh token available", stage="request")
            if is_last:
                raise BlogTokenError(
                    f"Still unauthorized after {self.config.max_attempts} attempts",
                    status_code=401,
                    exhausted=True,
                )

            await self.refresh_access_token(refresh_token, access_token)
            raise _TokenRefreshed

        raise self._api_error(response)

    async def refresh_access_token(self, refresh_token: str, stale_access_token: str | None) -> str:
        """Store and return a new access token obtained for ``refresh_token``.

        If storage no longer holds ``stale_access_token``, another request has
        already refreshed it and the stored token is returned as is.
        """
        async with self._refresh_lock:
            current = self.storage.get(ACCESS_TOKEN_KEY)
            if current and current != stale_access_token:
                logger.debug("Access token already renewed by a concurrent request")
                return current

            logger.info("Access token rejected, exchanging refresh token")
            new_token = await self.exchanger.exchange(refresh_token, stale_access_token)
            self.storage.set(ACCESS_TOKEN_KEY, new_token)
            return new_token

    async def _send_http(
        self,
        method: str,
        url: str,
        body: Body,
        access_token: str | None,
    ) -> httpx.Response:
        full_url = self.config.resolve(url)
        headers = bearer_headers(access_token)

        logger.debug("Request: %s %s", method, full_url)

        if self._http_client is not None:
            # Use shared connection pool
            response = await self._http_client.request(
                method, full_url, headers=headers, **_encode_body(body)
            )
        else:
            # Fallback: create per-request client (no pooling)
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.request(
                    method, full_url, headers=headers, **_encode_body(body)
                )

        logger.debug("Response status: %s", response.status_code)
        return response

    def _api_error(self, response: httpx.Response) -> BlogAPIError:
        try:
            error_body = response.json()
        except ValueError:
            error_body = None

        error_msg = f"API error: {response.status_code}"
        if isinstance(error_body, dict):
            error_msg = error_body.get("message") or error_msg
        else:
            error_body = None

        return BlogAPIError(
            error_msg,
            status_code=response.status_code,
            response_body=error_body,
        )
