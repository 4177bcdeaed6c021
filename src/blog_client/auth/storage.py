"""Durable key/value storage for client credentials."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access_token"
COOKIE_KEY = "cookie"


def _get_storage_path() -> Path:
    """Get default storage path."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / "blog-client" / "storage.json"


class TokenStorage(Protocol):
    """Key/value capability the dispatcher reads tokens from."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


@dataclass
class MemoryTokenStorage:
    """In-process storage, lost when the process exits."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def remove(self, key: str) -> None:
        self.values.pop(key, None)


@dataclass
class FileTokenStorage:
    """Persistent storage backed by a JSON file.

    Every write rewrites the whole file, so a value set here is visible
    to any later process using the same path.
    """

    path: Path = field(default_factory=_get_storage_path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with self.path.open() as f:
                data = json.load(f)
        except (ValueError, OSError):
            # Undecodable bytes and invalid JSON are both ValueError
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}

        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with self.path.open("w") as f:
            json.dump(data, f, indent=2)

        # Set restrictive permissions (owner read/write only)
        self.path.chmod(0o600)

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def clear(self) -> None:
        """Remove the storage file."""
        if self.path.exists():
            self.path.unlink()
