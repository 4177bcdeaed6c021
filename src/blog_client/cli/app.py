"""Main Typer application."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from blog_client.cli.config import CLIConfig, _default_config_dir, _default_data_dir

# Create main app
app = typer.Typer(
    name="blog-cli",
    help="Blog API command-line interface.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str | None = typer.Option(
        None,
        "--base-url",
        "-u",
        help="Blog server URL, e.g. http://localhost:8080.",
        envvar="BLOG_BASE_URL",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/blog-cli).",
        envvar="BLOG_CLI_CONFIG_DIR",
    ),
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory for tokens (default: ~/.local/share/blog-cli).",
        envvar="BLOG_CLI_DATA_DIR",
    ),
) -> None:
    """Blog API command-line interface.

    Log in through the browser, then pass the URL you were redirected to
    to 'blog-cli auth bootstrap'.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )

    ctx.obj = CLIConfig(
        base_url=base_url,
        verbose=verbose,
        config_dir=config_dir or _default_config_dir(),
        data_dir=data_dir or _default_data_dir(),
    )
