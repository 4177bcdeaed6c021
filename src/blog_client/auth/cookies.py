"""Cookie string parsing."""

from collections.abc import Callable

REFRESH_TOKEN_COOKIE = "refresh_token"


def parse_cookie_header(raw: str | None) -> dict[str, str]:
    """Parse a ``key=value; key2=value2`` cookie string into a mapping.

    Leading whitespace is stripped from each entry before the key is split
    from the value at the first ``=``. Entries without ``=`` or with an
    empty key are skipped, and the first occurrence of a repeated key wins.
    Never raises; malformed input yields whatever entries could be read.
    """
    cookies: dict[str, str] = {}
    if not raw:
        return cookies

    for item in raw.split(";"):
        key, sep, value = item.lstrip().partition("=")
        if not sep or not key:
            continue
        cookies.setdefault(key, value)
    return cookies


def get_cookie(raw: str | None, key: str) -> str | None:
    """Return the value of cookie ``key`` in ``raw``, or None."""
    return parse_cookie_header(raw).get(key)


class CookieReader:
    """Looks up cookies from a source that is re-read on every call."""

    def __init__(self, source: Callable[[], str | None]) -> None:
        self._source = source

    def get(self, key: str) -> str | None:
        return get_cookie(self._source(), key)

    @property
    def refresh_token(self) -> str | None:
        return self.get(REFRESH_TOKEN_COOKIE)
