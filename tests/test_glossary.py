import pytest

from chapterbook import config
from chapterbook.extractors.glossary import (
    GlossaryExtractor,
    GlossaryStubWriter,
    generate_glossary_stubs,
)

CHAPTER = """
<h1>Chapter</h1>
<p>The <span class="glossary">dharma</span> of a
<span class="glossary" href="kshatriya.html"> kshatriya </span>.</p>
<p class="glossary">not a span</p>
<span class="glossary">   </span>
"""


def test_extract_terms():
    assert GlossaryExtractor().extract_terms(CHAPTER) == ["dharma", "kshatriya"]


def test_scan_directory_reads_html_only(tmp_path):
    (tmp_path / "b.html").write_text(CHAPTER, encoding="utf-8")
    (tmp_path / "a.htm").write_text('<span class="glossary">karma</span>', encoding="utf-8")
    (tmp_path / "notes.txt").write_text('<span class="glossary">skip</span>', encoding="utf-8")
    found = GlossaryExtractor().scan_directory(tmp_path)
    assert [p.name for p in found] == ["a.htm", "b.html"]
    assert found[tmp_path / "a.htm"] == ["karma"]


def test_scan_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        GlossaryExtractor().scan_directory(tmp_path / "nope")


def test_writer_creates_stub(tmp_path):
    path = GlossaryStubWriter(tmp_path / "glossary").write("dharma")
    assert path == tmp_path / "glossary" / "dharma.html"
    assert path.read_text(encoding="utf-8") == config.GLOSSARY_STUB_BODY
    assert "No information available." in path.read_text(encoding="utf-8")


def test_writer_keeps_authored_files(tmp_path):
    authored = tmp_path / "dharma.html"
    authored.write_text("<p>Duty.</p>", encoding="utf-8")
    assert GlossaryStubWriter(tmp_path).write("dharma") is None
    assert authored.read_text(encoding="utf-8") == "<p>Duty.</p>"


def test_writer_overwrite(tmp_path):
    authored = tmp_path / "dharma.html"
    authored.write_text("<p>Duty.</p>", encoding="utf-8")
    assert GlossaryStubWriter(tmp_path, overwrite=True).write("dharma") == authored
    assert authored.read_text(encoding="utf-8") == config.GLOSSARY_STUB_BODY


def test_writer_writes_duplicates_once(tmp_path):
    paths = GlossaryStubWriter(tmp_path, overwrite=True).write_all(["karma", "karma", "yoga"])
    assert [p.name for p in paths] == ["karma.html", "yoga.html"]


def test_term_cannot_escape_output_dir(tmp_path):
    out = tmp_path / "out"
    path = GlossaryStubWriter(out).write("../secret")
    assert path.parent == out
    assert path.name == ".._secret.html"


def test_generate_glossary_stubs(tmp_path):
    indir = tmp_path / "chapters"
    indir.mkdir()
    (indir / "one.html").write_text(CHAPTER, encoding="utf-8")
    (indir / "two.html").write_text('<span class="glossary">dharma</span>', encoding="utf-8")
    written = generate_glossary_stubs(indir, tmp_path / "glossary")
    assert sorted(p.name for p in written) == ["dharma.html", "kshatriya.html"]


def test_extract_file_with_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.html"
    path.write_bytes(b'<p>caf\xe9 <span class="glossary">karma</span></p>')
    assert GlossaryExtractor().extract_file(path) == ["karma"]
