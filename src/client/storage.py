"""Durable storage for the client session.

Stored values are plain dicts (``{"token", "email", "role"}``) so any
backend that can persist JSON can hold a session.
"""

import json
from pathlib import Path
from typing import Any, Protocol

import structlog

from src.core.constants import DEFAULT_SESSION_FILE

logger = structlog.get_logger("kennel_client.storage")


class SessionStorage(Protocol):
    """Where a session survives between runs."""

    def load(self) -> dict[str, Any] | None:
        """Return the stored session, or None when nothing usable is stored."""
        ...

    def save(self, data: dict[str, Any]) -> None: ...

    def clear(self) -> None: ...


class InMemorySessionStorage:
    """Process-local storage, mainly for tests and short-lived scripts."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = dict(data) if data is not None else None

    def load(self) -> dict[str, Any] | None:
        return dict(self._data) if self._data is not None else None

    def save(self, data: dict[str, Any]) -> None:
        self._data = dict(data)

    def clear(self) -> None:
        self._data = None


class JsonFileSessionStorage:
    """Session stored as a JSON document on disk.

    A missing, unreadable or malformed file loads as None.
    """

    def __init__(self, path: str | Path = DEFAULT_SESSION_FILE) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any] | None:
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("session_file_unreadable", path=str(self._path), error=str(e))
            return None
        return data if isinstance(data, dict) else None

    def save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
