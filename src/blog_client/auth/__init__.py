"""Token storage, cookie lookup and token exchange."""

from blog_client.auth.bootstrap import bootstrap_token, search_param
from blog_client.auth.cookies import CookieReader, get_cookie, parse_cookie_header
from blog_client.auth.exchange import TokenExchanger
from blog_client.auth.storage import (
    ACCESS_TOKEN_KEY,
    FileTokenStorage,
    MemoryTokenStorage,
    TokenStorage,
)

__all__ = [
    "ACCESS_TOKEN_KEY",
    "CookieReader",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "TokenExchanger",
    "TokenStorage",
    "bootstrap_token",
    "get_cookie",
    "parse_cookie_header",
    "search_param",
]
