"""Tests for error handling and exception classes."""

import pytest

from blog_client.exceptions import (
    BlogAPIError,
    BlogAuthError,
    BlogError,
    BlogTokenError,
    BlogValidationError,
)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_blog_error_is_base(self) -> None:
        """All exceptions should inherit from BlogError."""
        assert issubclass(BlogAPIError, BlogError)
        assert issubclass(BlogAuthError, BlogError)
        assert issubclass(BlogTokenError, BlogError)
        assert issubclass(BlogValidationError, BlogError)

    def test_token_error_inherits_from_auth_error(self) -> None:
        """BlogTokenError should be a BlogAuthError."""
        assert issubclass(BlogTokenError, BlogAuthError)


class TestBlogError:
    """Tests for base BlogError."""

    def test_stores_message(self) -> None:
        """Should store the error message."""
        error = BlogError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"


class TestBlogAPIError:
    """Tests for BlogAPIError."""

    def test_stores_status_and_body(self) -> None:
        """Should store status code and response body."""
        body = {"message": "Article not found"}
        error = BlogAPIError("Article not found", status_code=404, response_body=body)

        assert error.status_code == 404
        assert error.response_body == body

    def test_can_catch_as_blog_error(self) -> None:
        """Should be catchable as BlogError."""
        with pytest.raises(BlogError):
            raise BlogAPIError("API error", status_code=500)


class TestBlogAuthError:
    """Tests for BlogAuthError."""

    def test_defaults(self) -> None:
        """Should default to status 401 and no stage."""
        error = BlogAuthError("Unauthorized")

        assert error.status_code == 401
        assert error.stage is None

    def test_stores_stage(self) -> None:
        """Should store the failing stage."""
        error = BlogAuthError("Unauthorized", stage="request")

        assert error.stage == "request"


class TestBlogTokenError:
    """Tests for BlogTokenError."""

    def test_stage_is_token_exchange(self) -> None:
        """Stage should always be token_exchange."""
        error = BlogTokenError("Exchange rejected", status_code=400)

        assert error.stage == "token_exchange"
        assert error.status_code == 400
        assert error.exhausted is False

    def test_exhausted_flag(self) -> None:
        """Should record that the attempt budget ran out."""
        error = BlogTokenError("Still unauthorized", status_code=401, exhausted=True)

        assert error.exhausted is True

    def test_can_catch_as_auth_error(self) -> None:
        """Should be catchable as BlogAuthError."""
        with pytest.raises(BlogAuthError):
            raise BlogTokenError("Exchange failed")


class TestBlogValidationError:
    """Tests for BlogValidationError."""

    def test_stores_field(self) -> None:
        """Should store the offending field."""
        error = BlogValidationError("Title must not be empty", field="title")

        assert error.field == "title"
