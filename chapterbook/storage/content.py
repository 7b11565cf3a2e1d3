"""Content fetchers: turn a chapter url into HTML for the view."""
import logging
from pathlib import Path
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

OnComplete = Callable[[str], None]


class ContentFetcher(Protocol):
    def fetch(self, url: str, on_complete: OnComplete) -> None: ...


class NullContentFetcher:
    """Fetcher that never delivers content."""

    def fetch(self, url: str, on_complete: OnComplete) -> None:
        logger.debug("not fetching %s", url)


class FileContentFetcher:
    """Read chapter HTML from a local site directory."""

    def __init__(self, base_dir: Path | str = "."):
        self.base_dir = Path(base_dir)

    def fetch(self, url: str, on_complete: OnComplete) -> None:
        path = self.base_dir / url
        try:
            html = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("cannot load %s: %s", path, e)
            return
        on_complete(html)
