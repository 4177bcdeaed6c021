"""Seed the access token from a redirect URL."""

import logging
from urllib.parse import parse_qs, urlsplit

from blog_client.auth.storage import ACCESS_TOKEN_KEY, TokenStorage

logger = logging.getLogger(__name__)

TOKEN_PARAM = "token"


def search_param(url: str, key: str) -> str | None:
    """Return the first value of query parameter ``key`` in ``url``."""
    params = parse_qs(urlsplit(url).query, keep_blank_values=True)
    values = params.get(key)
    return values[0] if values else None


def bootstrap_token(url: str, storage: TokenStorage) -> str | None:
    """Store the ``token`` query parameter of ``url`` as the access token.

    After a successful login the server redirects to a page such as
    ``/articles?token=...``. Any previously stored access token is
    overwritten. A missing or empty parameter leaves storage untouched.

    Returns:
        The stored token, or None if the URL carried none
    """
    token = search_param(url, TOKEN_PARAM)
    if not token:
        return None

    storage.set(ACCESS_TOKEN_KEY, token)
    logger.info("Stored access token from redirect URL")
    return token
