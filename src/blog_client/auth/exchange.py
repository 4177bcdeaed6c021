"""Refresh-token exchange against the token endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from blog_client.exceptions import BlogTokenError
from blog_client.models.auth import TokenExchangeRequest, TokenExchangeResponse

if TYPE_CHECKING:
    from blog_client.config import BlogConfig

logger = logging.getLogger(__name__)


def bearer_headers(access_token: str | None) -> dict[str, str]:
    """Build JSON request headers, authenticated when a token is known."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers


class TokenExchanger:
    """Trades a refresh token for a new access token.

    The request carries the stale access token as its bearer credential
    and ``{"refreshToken": ...}`` as its body; a 2xx response must contain
    ``{"accessToken": ...}``.
    """

    def __init__(
        self,
        config: BlogConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    async def exchange(self, refresh_token: str, stale_access_token: str | None) -> str:
        """Exchange ``refresh_token`` for a new access token.

        Returns:
            The new access token

        Raises:
            BlogTokenError: On transport failure, a non-2xx status, or a body
                without a usable ``accessToken``
        """
        url = self.config.token_url
        headers = bearer_headers(stale_access_token)
        body = TokenExchangeRequest(refresh_token=refresh_token).model_dump(by_alias=True)

        logger.debug("Token exchange: POST %s", url)

        try:
            if self._http_client is not None:
                response = await self._http_client.request(
                    "POST", url, json=body, headers=headers
                )
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    response = await client.request("POST", url, json=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Token exchange failed: %s", e)
            raise BlogTokenError(f"Token exchange request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning("Token exchange rejected with status %s", response.status_code)
            raise BlogTokenError(
                f"Token exchange rejected: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = TokenExchangeResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise BlogTokenError(
                "Token exchange returned no access token",
                status_code=response.status_code,
            ) from e

        logger.info("Access token renewed")
        return result.access_token
