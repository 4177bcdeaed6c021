"""Article commands."""

import typer

from blog_client.api.articles import ARTICLES_ENDPOINT, article_path
from blog_client.auth import search_param
from blog_client.cli.async_runner import async_command
from blog_client.cli.client_factory import get_client
from blog_client.cli.config import CLIConfig, OutputFormat
from blog_client.cli.formatters import format_output, print_error, print_info, print_success
from blog_client.exceptions import BlogValidationError
from blog_client.models.articles import ArticleRequest

app = typer.Typer(no_args_is_help=True)

ARTICLES_PAGE = "/articles"


def _require_text(value: str, field: str) -> str:
    """Reject blank titles and contents before anything is sent."""
    if not value.strip():
        raise BlogValidationError(f"Article {field} must not be empty", field=field)
    return value


def _resolve_article_id(value: str) -> str:
    """Accept either an article ID or an editor URL carrying ``?id=``."""
    if "?" in value:
        article_id = search_param(value, "id")
        if not article_id:
            raise BlogValidationError(f"No id parameter in {value}", field="id")
        return article_id
    return value


async def _run_action(
    config: CLIConfig,
    method: str,
    url: str,
    body: ArticleRequest | None,
    *,
    done: str,
    failed: str,
    next_page: str,
) -> None:
    """Dispatch one article action and report it like the web editor does."""
    succeeded = False

    def success() -> None:
        nonlocal succeeded
        succeeded = True
        print_success(done)

    def fail() -> None:
        print_error(failed)

    async with get_client(config) as client:
        await client.dispatch(method, url, body, success, fail)
        print_info(f"Next page: {client.config.resolve(next_page)}")

    if not succeeded:
        raise typer.Exit(1)


@app.command("list")
@async_command
async def list_articles(
    ctx: typer.Context,
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List articles."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        response = await client.articles.list_articles()

        if not response.articles:
            print_info("No articles found")
            return

        format_output(response.articles, output, title="Articles", columns=["title", "content"])


@app.command("show")
@async_command
async def show_article(
    ctx: typer.Context,
    article_id: str = typer.Argument(..., help="Article ID."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Show a single article."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        article = await client.articles.get_article(article_id)
        format_output(article, output, title=f"Article {article_id}")


@app.command("create")
@async_command
async def create_article(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Article title."),
    content: str = typer.Option(..., "--content", "-m", help="Article content."),
) -> None:
    """Create a new article."""
    body = ArticleRequest(
        title=_require_text(title, "title"),
        content=_require_text(content, "content"),
    )
    await _run_action(
        ctx.obj,
        "POST",
        ARTICLES_ENDPOINT,
        body,
        done="Article created.",
        failed="Failed to create article.",
        next_page=ARTICLES_PAGE,
    )


@app.command("modify")
@async_command
async def modify_article(
    ctx: typer.Context,
    article: str = typer.Argument(..., help="Article ID, or editor URL with ?id=..."),
    title: str = typer.Option(..., "--title", "-t", help="New title."),
    content: str = typer.Option(..., "--content", "-m", help="New content."),
) -> None:
    """Replace title and content of an article."""
    article_id = _resolve_article_id(article)
    body = ArticleRequest(
        title=_require_text(title, "title"),
        content=_require_text(content, "content"),
    )
    await _run_action(
        ctx.obj,
        "PUT",
        article_path(article_id),
        body,
        done="Article modified.",
        failed="Failed to modify article.",
        next_page=f"{ARTICLES_PAGE}/{article_id}",
    )


@app.command("delete")
@async_command
async def delete_article(
    ctx: typer.Context,
    article_id: str = typer.Argument(..., help="Article ID."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
) -> None:
    """Delete an article."""
    if not yes:
        typer.confirm(f"Delete article {article_id}?", abort=True)

    await _run_action(
        ctx.obj,
        "DELETE",
        article_path(article_id),
        None,
        done="Article deleted.",
        failed="Failed to delete article.",
        next_page=ARTICLES_PAGE,
    )
