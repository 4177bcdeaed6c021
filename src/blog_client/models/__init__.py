"""Pydantic models for blog API payloads."""

from blog_client.models.articles import (
    Article,
    ArticleListResponse,
    ArticleRequest,
    ArticleSummary,
)
from blog_client.models.auth import TokenExchangeRequest, TokenExchangeResponse

__all__ = [
    # Articles
    "Article",
    "ArticleListResponse",
    "ArticleRequest",
    "ArticleSummary",
    # Auth
    "TokenExchangeRequest",
    "TokenExchangeResponse",
]
