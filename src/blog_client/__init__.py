"""Blog API client library.

An async Python client for the blog REST API with bearer-token
authentication and automatic access-token renewal.

Example:
    from blog_client import BlogClient, BlogConfig

    config = BlogConfig(base_url="https://blog.example.com")

    async with BlogClient(config, cookies="refresh_token=...") as client:
        # Store the token handed over in the post-login redirect
        client.bootstrap("https://blog.example.com/articles?token=...")

        # Typed calls
        article = await client.articles.create_article("Title", "Body")

        # Continuation style
        await client.dispatch(
            "DELETE",
            f"/api/articles/{article.article_id}",
            None,
            on_success=lambda: print("Article deleted."),
            on_failure=lambda: print("Failed to delete article."),
        )
"""

from blog_client.auth import FileTokenStorage, MemoryTokenStorage, TokenStorage
from blog_client.client import BlogClient
from blog_client.config import BlogConfig
from blog_client.dispatcher import RequestDescriptor, RequestDispatcher
from blog_client.exceptions import (
    BlogAPIError,
    BlogAuthError,
    BlogError,
    BlogTokenError,
    BlogValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "BlogClient",
    "BlogConfig",
    "RequestDescriptor",
    "RequestDispatcher",
    # Storage
    "FileTokenStorage",
    "MemoryTokenStorage",
    "TokenStorage",
    # Exceptions
    "BlogAPIError",
    "BlogAuthError",
    "BlogError",
    "BlogTokenError",
    "BlogValidationError",
]
