"""Output formatters for CLI commands."""

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from blog_client.cli.config import OutputFormat

console = Console()
error_console = Console(stderr=True)

# Table cells longer than this are cut with an ellipsis
MAX_CELL_WIDTH = 60


def _to_rows(data: BaseModel | Sequence[BaseModel]) -> list[dict[str, Any]]:
    models = [data] if isinstance(data, BaseModel) else list(data)
    return [m.model_dump(mode="json", exclude_none=True) for m in models]


def format_output(
    data: BaseModel | Sequence[BaseModel],
    output_format: OutputFormat,
    *,
    title: str | None = None,
    columns: list[str] | None = None,
) -> None:
    """Print one model or a list of models in the requested format.

    Args:
        data: Pydantic model or list of models
        output_format: Output format (table, json, csv)
        title: Optional title for table output
        columns: Field names to include (table/csv); all fields by default
    """
    rows = _to_rows(data)

    if output_format == OutputFormat.JSON:
        payload = rows[0] if isinstance(data, BaseModel) else rows
        console.print_json(json.dumps(payload, default=str))
        return

    if not rows:
        console.print("[dim]No data[/dim]")
        return

    columns = columns or list(rows[0])

    if output_format == OutputFormat.CSV:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
        console.print(output.getvalue(), end="")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col.replace("_", " ").title())
    for row in rows:
        table.add_row(*[_cell(row.get(col, "")) for col in columns])
    console.print(table)


def _cell(value: Any) -> str:
    text = " ".join(str(value).split())
    if len(text) > MAX_CELL_WIDTH:
        return text[: MAX_CELL_WIDTH - 1] + "…"
    return text


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")
