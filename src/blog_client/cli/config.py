"""CLI configuration with XDG-compliant paths and environment variable overrides."""

import json
import os
import sys
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from blog_client.config import DEFAULT_TOKEN_ENDPOINT, BlogConfig


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"


def _default_config_dir() -> Path:
    """Get XDG-compliant config directory for settings.

    Uses XDG_CONFIG_HOME if set, otherwise ~/.config/blog-cli.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "blog-cli"
    return Path.home() / ".config" / "blog-cli"


def _default_data_dir() -> Path:
    """Get XDG-compliant data directory for tokens.

    Uses XDG_DATA_HOME if set, otherwise ~/.local/share/blog-cli.
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "blog-cli"
    return Path.home() / ".local" / "share" / "blog-cli"


@dataclass
class CLIConfig:
    """Configuration passed through Typer context.

    Attributes:
        base_url: Blog server URL; overrides the config file when set.
        verbose: Enable verbose output.
        config_dir: Directory for configuration files.
        data_dir: Directory for data files (access token, cookies).

    Directory Structure:
        config_dir/
        └── config.json     # {"base_url": ..., "max_attempts": ...}

        data_dir/
        └── storage.json    # access_token and cookie string
    """

    base_url: str | None = None
    verbose: bool = False
    config_dir: Path = field(default_factory=_default_config_dir)
    data_dir: Path = field(default_factory=_default_data_dir)

    @property
    def settings_path(self) -> Path:
        """Get the settings file path."""
        return self.config_dir / "config.json"

    @property
    def storage_path(self) -> Path:
        """Get the credential storage file path."""
        return self.data_dir / "storage.json"

    def load_config(self) -> BlogConfig:
        """Build the client configuration.

        Loading priority:
        1. Settings file (config.json) in the config directory
        2. base_url given on the command line or via BLOG_BASE_URL

        Raises:
            ValueError: If no base URL can be determined
        """
        data: dict[str, Any] = {}

        if self.settings_path.exists():
            try:
                with self.settings_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                if self.verbose:
                    print(f"Warning: Failed to read {self.settings_path}: {e}", file=sys.stderr)

        base_url = self.base_url or data.get("base_url")
        if not base_url:
            msg = (
                "Missing base URL. Pass --base-url, set BLOG_BASE_URL, "
                f"or create a config file at {self.settings_path}"
            )
            raise ValueError(msg)

        return BlogConfig(
            base_url=str(base_url),
            token_endpoint=str(data.get("token_endpoint", DEFAULT_TOKEN_ENDPOINT)),
            max_attempts=int(data.get("max_attempts", 2)),
            timeout=float(data.get("timeout", 30.0)),
        )
