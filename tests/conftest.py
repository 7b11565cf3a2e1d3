import json

import pytest

from chapterbook.navigation.controller import BookController
from chapterbook.storage.bookmarks import MemoryBookmarkStore


class RecordingFetcher:
    """Fetcher that holds callbacks until the test delivers content."""

    def __init__(self):
        self.requests = []

    def fetch(self, url, on_complete):
        self.requests.append((url, on_complete))

    def deliver(self, n, html):
        url, on_complete = self.requests[n]
        return on_complete(html)


BOOK = {
    "title": "Two Books",
    "sections": [
        {
            "title": "Book One",
            "root": "s1",
            "src": "index.html",
            "chapters": [
                {"title": "Intro", "src": "intro.html"},
                {"title": "Setup", "src": "setup.html"},
            ],
        },
        {
            "title": "Book Two",
            "root": "s2",
            "src": "index.html",
            "chapters": [{"title": "Begin", "src": "begin.html"}],
        },
    ],
}


@pytest.fixture
def bookmarks():
    return MemoryBookmarkStore()


@pytest.fixture
def fetcher():
    return RecordingFetcher()


@pytest.fixture
def controller(bookmarks, fetcher):
    return BookController(bookmarks=bookmarks, fetcher=fetcher)


@pytest.fixture
def book(controller):
    """Controller populated one call at a time, like the reader's startup."""
    one = controller.new_section({"title": "Book One", "root": "s1", "src": "index.html"})
    controller.add_chapter(one, {"title": "Intro", "src": "intro.html"})
    controller.add_chapter(one, {"title": "Setup", "src": "setup.html"})
    two = controller.new_section({"title": "Book Two", "root": "s2", "src": "index.html"})
    controller.add_chapter(two, {"title": "Begin", "src": "begin.html"})
    return controller


@pytest.fixture
def site(tmp_path):
    """A site directory with a book config and chapter files."""
    (tmp_path / "book.json").write_text(json.dumps(BOOK), encoding="utf-8")
    for root, src, body in [
        ("s1", "intro.html", "<p>Welcome <span class='glossary'>dharma</span></p>"),
        ("s1", "setup.html", "<p>Setting up</p>"),
        ("s2", "begin.html", "<p>It begins</p>"),
    ]:
        path = tmp_path / "chapter" / root / src
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
    return tmp_path
