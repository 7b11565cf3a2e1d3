"""Persistence for the last-viewed chapter index."""
import json
import logging
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class BookmarkStore(Protocol):
    """Key-value store holding integer bookmarks."""

    def get(self, key: str) -> Optional[int]: ...

    def set(self, key: str, value: int) -> None: ...


def _as_index(key: str, value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning("ignoring non-integer bookmark %s=%r", key, value)
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("ignoring non-integer bookmark %s=%r", key, value)
        return None


class MemoryBookmarkStore:
    """In-process store, lost when the process exits."""

    def __init__(self, initial: Optional[dict[str, int]] = None):
        self._values: dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return _as_index(key, self._values.get(key))

    def set(self, key: str, value: int) -> None:
        self._values[key] = int(value)


class JsonBookmarkStore:
    """Bookmarks kept in a small JSON object file.

    A missing, unreadable or malformed file reads as empty; the next
    ``set`` rewrites it.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("cannot read bookmarks from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("bookmark file %s is not a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> Optional[int]:
        return _as_index(key, self._load().get(key))

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
