"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from blog_client.exceptions import BlogAuthError, BlogError, BlogValidationError


def _is_token_invalid_error(e: BlogError) -> bool:
    """Check if the error means the stored credentials are no longer usable."""
    return isinstance(e, BlogAuthError)


def _handle_token_invalid(ctx: typer.Context) -> None:
    """Handle invalid credentials by prompting for a fresh redirect URL."""
    from blog_client.auth import FileTokenStorage, bootstrap_token
    from blog_client.cli.formatters import console, print_error, print_info

    print_error("Your session is invalid or has expired.")
    print_info("Log in again in the browser and copy the URL you are redirected to.")
    console.print()

    re_auth = typer.confirm("Would you like to re-authenticate now?", default=True)

    if not re_auth:
        print_info("Run 'blog-cli auth bootstrap <url>' when ready to re-authenticate.")
        raise typer.Exit(1)

    url = typer.prompt("Redirect URL")
    storage = FileTokenStorage(path=ctx.obj.storage_path)
    if bootstrap_token(url.strip(), storage) is None:
        print_error("That URL has no token parameter.")
        raise typer.Exit(1)


def _find_context(args: tuple[Any, ...], kwargs: dict[str, Any]) -> typer.Context | None:
    for arg in args:
        if isinstance(arg, typer.Context):
            return arg
    # Typer passes ctx as keyword arg
    ctx = kwargs.get("ctx")
    return ctx if isinstance(ctx, typer.Context) else None


T = TypeVar("T")


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Prompts for re-authentication when the access token was rejected and
    could not be renewed, then runs the command once more.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                result = await client.articles.list_articles()
                ...
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        async def run_with_error_handling() -> T:
            from blog_client.cli.formatters import print_error

            try:
                return await f(*args, **kwargs)
            except BlogValidationError as e:
                print_error(e.message)
                raise typer.Exit(1) from None
            except BlogError as e:
                if _is_token_invalid_error(e):
                    ctx = _find_context(args, kwargs)
                    if ctx is not None:
                        _handle_token_invalid(ctx)
                        # If we get here, a new token was stored
                        return await f(*args, **kwargs)
                raise

        return asyncio.run(run_with_error_handling())

    return wrapper
