from chapterbook.storage.content import FileContentFetcher, NullContentFetcher


def test_file_fetcher_delivers_html(tmp_path):
    (tmp_path / "chapter").mkdir()
    (tmp_path / "chapter" / "intro.html").write_text("<p>Hi</p>", encoding="utf-8")
    received = []
    FileContentFetcher(tmp_path).fetch("chapter/intro.html", received.append)
    assert received == ["<p>Hi</p>"]


def test_file_fetcher_missing_file_never_calls_back(tmp_path, caplog):
    received = []
    FileContentFetcher(tmp_path).fetch("chapter/missing.html", received.append)
    assert received == []
    assert "cannot load" in caplog.text


def test_null_fetcher():
    received = []
    NullContentFetcher().fetch("chapter/intro.html", received.append)
    assert received == []


def test_file_fetcher_replaces_undecodable_bytes(tmp_path):
    (tmp_path / "cafe.html").write_bytes(b"<p>caf\xe9</p>")
    received = []
    FileContentFetcher(tmp_path).fetch("cafe.html", received.append)
    assert received == ["<p>caf�</p>"]


def test_navigate_to_latin1_chapter(tmp_path, book):
    path = tmp_path / "chapter" / "s1" / "intro.html"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"<p>caf\xe9</p>")
    book.fetcher = FileContentFetcher(tmp_path)
    assert book.navigate(0).chapter_title == "Intro"
    assert book.content == "<p>caf�</p>"
