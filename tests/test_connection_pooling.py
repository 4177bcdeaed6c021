"""Tests for connection pooling functionality."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from blog_client import BlogClient, BlogConfig, MemoryTokenStorage


@pytest.fixture
def memory() -> MemoryTokenStorage:
    return MemoryTokenStorage()


class TestContextManager:
    """Tests for async context manager usage."""

    async def test_context_manager_creates_http_client(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """Context manager should create an http client on entry."""
        async with BlogClient(config, storage=memory) as client:
            assert isinstance(client._http_client, httpx.AsyncClient)

    async def test_context_manager_closes_http_client(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """Context manager should close http client on exit."""
        async with BlogClient(config, storage=memory) as client:
            http_client = client._http_client
            assert http_client is not None

        assert client._http_client is None
        assert http_client.is_closed

    async def test_context_manager_propagates_to_dispatcher(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """The pool should be shared by the dispatcher and the token exchanger."""
        async with BlogClient(config, storage=memory) as client:
            http_client = client._http_client
            assert client.dispatcher._http_client is http_client
            assert client.dispatcher.exchanger._http_client is http_client

        assert client.dispatcher._http_client is None
        assert client.dispatcher.exchanger._http_client is None

    async def test_pool_uses_configured_timeout(self, memory: MemoryTokenStorage) -> None:
        """The owned pool should use the configured timeout."""
        config = BlogConfig(timeout=5.0)

        async with BlogClient(config, storage=memory) as client:
            assert client._http_client.timeout == httpx.Timeout(5.0)


class TestExternalHttpClient:
    """Tests for external http client usage."""

    async def test_external_client_is_used(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """External http client should be used by the dispatcher."""
        external_client = httpx.AsyncClient(timeout=60.0)
        try:
            client = BlogClient(config, storage=memory, http_client=external_client)

            assert client._http_client is external_client
            assert client.dispatcher._http_client is external_client
            assert client.dispatcher.exchanger._http_client is external_client
        finally:
            await external_client.aclose()

    async def test_external_client_not_closed_by_context_manager(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """External http client should NOT be closed when exiting context manager."""
        external_client = httpx.AsyncClient(timeout=60.0)
        try:
            async with BlogClient(config, storage=memory, http_client=external_client) as client:
                assert client._http_client is external_client

            assert not external_client.is_closed
        finally:
            await external_client.aclose()


class TestExplicitLifecycle:
    """Tests for explicit open/close lifecycle."""

    async def test_open_and_close(self, config: BlogConfig, memory: MemoryTokenStorage) -> None:
        """open() should create the pool and close() should drop it."""
        client = BlogClient(config, storage=memory)
        assert client._http_client is None

        await client.open()
        assert client._http_client is not None

        await client.close()
        assert client._http_client is None

    async def test_multiple_open_calls_are_idempotent(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """Multiple open() calls should not create multiple clients."""
        client = BlogClient(config, storage=memory)
        await client.open()
        first_http_client = client._http_client

        await client.open()
        assert client._http_client is first_http_client

        await client.close()


class TestFallbackBehavior:
    """Tests for fallback to per-request connections."""

    async def test_dispatch_works_without_pooling(
        self, config: BlogConfig, memory: MemoryTokenStorage
    ) -> None:
        """Without open(), each request should use its own short-lived client."""
        client = BlogClient(config, storage=memory)
        response = httpx.Response(200, request=httpx.Request("GET", "http://blog.test"))

        with patch.object(
            httpx.AsyncClient, "request", new_callable=AsyncMock, return_value=response
        ) as mock_request:
            result = await client.send("GET", "/api/articles")

        assert result is response
        mock_request.assert_awaited_once()
