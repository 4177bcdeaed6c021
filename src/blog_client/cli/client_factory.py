"""Client factory for CLI commands."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from blog_client.auth import FileTokenStorage
from blog_client.client import BlogClient

if TYPE_CHECKING:
    from blog_client.cli.config import CLIConfig


@asynccontextmanager
async def get_client(config: CLIConfig) -> AsyncGenerator[BlogClient]:
    """Create and configure a BlogClient for CLI use.

    This context manager:
    1. Loads settings from the config file with command-line overrides
    2. Uses file storage in the data directory (XDG_DATA_HOME), which also
       holds the cookie string saved with 'auth set-cookie'
    3. Manages connection pooling lifecycle

    Usage:
        async with get_client(cli_config) as client:
            result = await client.articles.list_articles()
    """
    blog_config = config.load_config()
    storage = FileTokenStorage(path=config.storage_path)

    async with BlogClient(blog_config, storage=storage) as client:
        yield client
