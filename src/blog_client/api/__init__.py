"""Blog API client modules."""

from blog_client.api.articles import ArticlesAPI

__all__ = ["ArticlesAPI"]
