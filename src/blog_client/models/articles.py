"""Article request and response models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ArticleRequest(BaseModel):
    """Body for creating or modifying an article."""

    title: str
    content: str


class ArticleSummary(BaseModel):
    """Article as returned by the list and lookup endpoints."""

    title: str
    content: str


class Article(BaseModel):
    """Article as returned after it was created or modified."""

    article_id: int | None = Field(default=None, alias="id")
    title: str
    content: str
    author: str | None = Field(default=None)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class ArticleListResponse(BaseModel):
    """Response from the list articles endpoint."""

    articles: list[ArticleSummary] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: list[dict[str, Any]] | dict[str, Any]) -> ArticleListResponse:
        """Parse from raw API response.

        The endpoint returns a bare JSON array; a single object is
        accepted as a one-item list.
        """
        if isinstance(data, dict):
            data = [data] if data else []
        return cls(articles=[ArticleSummary.model_validate(a) for a in data])
