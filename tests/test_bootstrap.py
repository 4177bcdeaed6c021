"""Tests for seeding the access token from a redirect URL."""

from blog_client import BlogClient, BlogConfig, MemoryTokenStorage
from blog_client.auth import bootstrap_token, search_param


class TestSearchParam:
    """Tests for search_param."""

    def test_returns_first_value(self) -> None:
        """Should return the first value of a repeated parameter."""
        assert search_param("http://blog.test/new-article?id=3&id=4", "id") == "3"

    def test_missing_parameter(self) -> None:
        """Should return None when the parameter is absent."""
        assert search_param("http://blog.test/articles", "id") is None

    def test_decodes_percent_escapes(self) -> None:
        """Should URL-decode values."""
        assert search_param("/articles?token=a%2Bb%3D", "token") == "a+b="


class TestBootstrapToken:
    """Tests for bootstrap_token."""

    def test_stores_token_parameter(self) -> None:
        """?token=ABC123 should be stored as the access token."""
        storage = MemoryTokenStorage()

        result = bootstrap_token("http://blog.test/articles?token=ABC123", storage)

        assert result == "ABC123"
        assert storage.get("access_token") == "ABC123"

    def test_overwrites_previous_token(self) -> None:
        """An existing access token should be replaced."""
        storage = MemoryTokenStorage({"access_token": "OLD"})

        bootstrap_token("/articles?token=NEW", storage)

        assert storage.get("access_token") == "NEW"

    def test_missing_parameter_leaves_storage_untouched(self) -> None:
        """A URL without token should not change storage."""
        storage = MemoryTokenStorage({"access_token": "OLD", "cookie": "a=1"})

        result = bootstrap_token("http://blog.test/articles?page=2", storage)

        assert result is None
        assert storage.values == {"access_token": "OLD", "cookie": "a=1"}

    def test_empty_parameter_is_ignored(self) -> None:
        """?token= with no value should not clear the stored token."""
        storage = MemoryTokenStorage({"access_token": "OLD"})

        assert bootstrap_token("/articles?token=", storage) is None
        assert storage.get("access_token") == "OLD"

    def test_client_bootstrap(self) -> None:
        """BlogClient.bootstrap should write to the client's storage."""
        storage = MemoryTokenStorage()
        client = BlogClient(BlogConfig(), storage=storage)

        client.bootstrap("/articles?token=XYZ")

        assert client.access_token == "XYZ"
        assert client.is_authenticated
