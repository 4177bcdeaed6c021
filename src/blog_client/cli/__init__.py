"""Blog CLI - Command-line interface for the blog API."""

from blog_client.cli.app import app

# Import command modules to register them with the app
from blog_client.cli.commands import articles, auth

# Register sub-apps
app.add_typer(auth.app, name="auth", help="Authentication commands.")
app.add_typer(articles.app, name="articles", help="Article management.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
