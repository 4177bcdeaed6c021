"""Articles API endpoints."""

from blog_client.api.base import BaseAPI
from blog_client.models.articles import (
    Article,
    ArticleListResponse,
    ArticleRequest,
    ArticleSummary,
)

ARTICLES_ENDPOINT = "/api/articles"


def article_path(article_id: int | str) -> str:
    """Get the API path of a single article."""
    return f"{ARTICLES_ENDPOINT}/{article_id}"


class ArticlesAPI(BaseAPI):
    """Blog Articles API.

    Create, modify, delete and read articles.
    """

    async def list_articles(self) -> ArticleListResponse:
        """List all articles.

        Returns:
            ArticleListResponse with title and content of each article
        """
        data = await self._get(ARTICLES_ENDPOINT)
        return ArticleListResponse.from_api_response(data or [])

    async def get_article(self, article_id: int | str) -> ArticleSummary:
        """Get a single article by ID."""
        data = await self._get(article_path(article_id))
        return ArticleSummary.model_validate(data)

    async def create_article(self, title: str, content: str) -> Article:
        """Create a new article.

        Args:
            title: Article title
            content: Article body text

        Returns:
            The created Article as stored by the server
        """
        data = await self._post(ARTICLES_ENDPOINT, ArticleRequest(title=title, content=content))
        return Article.model_validate(data)

    async def update_article(self, article_id: int | str, title: str, content: str) -> Article:
        """Replace title and content of an existing article."""
        data = await self._put(
            article_path(article_id), ArticleRequest(title=title, content=content)
        )
        return Article.model_validate(data)

    async def delete_article(self, article_id: int | str) -> None:
        """Delete an article.

        Only the author may delete an article; the server answers with an
        error status otherwise, raised as BlogAPIError.
        """
        await self._delete(article_path(article_id))
