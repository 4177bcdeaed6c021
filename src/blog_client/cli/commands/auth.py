"""Authentication commands."""

import typer

from blog_client.auth import FileTokenStorage, bootstrap_token, get_cookie
from blog_client.auth.cookies import REFRESH_TOKEN_COOKIE
from blog_client.auth.storage import ACCESS_TOKEN_KEY, COOKIE_KEY
from blog_client.cli.async_runner import async_command
from blog_client.cli.client_factory import get_client
from blog_client.cli.config import CLIConfig
from blog_client.cli.formatters import console, print_error, print_info, print_success

app = typer.Typer(no_args_is_help=True)


@app.command("bootstrap")
def bootstrap(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL the browser was redirected to after login."),
) -> None:
    """Store the access token carried in a post-login redirect URL.

    The server appends '?token=...' to the page it redirects to after a
    successful login. Any previously stored token is replaced.
    """
    config: CLIConfig = ctx.obj
    storage = FileTokenStorage(path=config.storage_path)

    if bootstrap_token(url, storage) is None:
        print_info("No token parameter in URL - nothing stored.")
        return

    print_success(f"Access token saved to {config.storage_path}")


@app.command("set-cookie")
def set_cookie(
    ctx: typer.Context,
    cookie: str = typer.Argument(
        ..., help="Cookie string from the browser, e.g. 'refresh_token=...; JSESSIONID=...'."
    ),
) -> None:
    """Save the browser's cookie string, which carries the refresh token."""
    config: CLIConfig = ctx.obj
    storage = FileTokenStorage(path=config.storage_path)

    storage.set(COOKIE_KEY, cookie.strip())

    if get_cookie(cookie, REFRESH_TOKEN_COOKIE):
        print_success("Cookie saved - access tokens will be renewed automatically.")
    else:
        print_info("Cookie saved, but it contains no refresh_token.")


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Check authentication status."""
    config: CLIConfig = ctx.obj
    storage = FileTokenStorage(path=config.storage_path)

    console.print(f"Storage path: {config.storage_path}")

    if storage.get(ACCESS_TOKEN_KEY):
        print_success("Access token found")
    else:
        print_info("No access token - run 'blog-cli auth bootstrap <url>'")

    if get_cookie(storage.get(COOKIE_KEY), REFRESH_TOKEN_COOKIE):
        print_success("Refresh token found")
    else:
        print_info("No refresh token - run 'blog-cli auth set-cookie <cookie>'")


@app.command("refresh")
@async_command
async def refresh(ctx: typer.Context) -> None:
    """Exchange the refresh token for a new access token now."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        if not client.cookies.refresh_token:
            print_error("No refresh token. Run 'blog-cli auth set-cookie' first.")
            raise typer.Exit(1)

        print_info("Renewing access token...")
        await client.renew_token()
        print_success("Access token renewed successfully!")


@app.command("logout")
def logout(ctx: typer.Context) -> None:
    """Clear the stored access token and cookie string."""
    config: CLIConfig = ctx.obj
    storage = FileTokenStorage(path=config.storage_path)

    if not storage.path.exists():
        print_info("Nothing to clear.")
        return

    storage.clear()
    print_success("Logged out.")
