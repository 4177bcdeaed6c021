"""Base API client with common functionality."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blog_client.dispatcher import Body, RequestDispatcher


class BaseAPI:
    """Base class for blog API endpoints.

    Requests go through the shared :class:`RequestDispatcher`, so every
    endpoint gets bearer authentication and access-token refresh.
    """

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self.dispatcher = dispatcher

    async def _request(self, method: str, endpoint: str, body: Body = None) -> Any:
        """Make an authenticated API request.

        Returns:
            Parsed JSON response, or None for an empty body

        Raises:
            BlogAPIError: On API error
            BlogAuthError: When authorization could not be recovered
        """
        response = await self.dispatcher.send(method, endpoint, body)
        if not response.content:
            return None
        return response.json()

    async def _get(self, endpoint: str) -> Any:
        """Make a GET request."""
        return await self._request("GET", endpoint)

    async def _post(self, endpoint: str, body: Body) -> Any:
        """Make a POST request."""
        return await self._request("POST", endpoint, body)

    async def _put(self, endpoint: str, body: Body) -> Any:
        """Make a PUT request."""
        return await self._request("PUT", endpoint, body)

    async def _delete(self, endpoint: str) -> Any:
        """Make a DELETE request."""
        return await self._request("DELETE", endpoint)
