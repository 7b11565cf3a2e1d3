"""Glossary stub generation from chapter HTML.

Every ``span.glossary`` element in a chapter marks a term whose
definition lives in ``<glossary root>/<term>.html``. This module finds
those terms and writes placeholder definition files for them.
"""
import logging
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from chapterbook import config

logger = logging.getLogger(__name__)


class GlossaryExtractor:
    """Find glossary-marked terms in HTML documents."""

    def __init__(self, selector: str = "span.glossary"):
        self.selector = selector

    def extract_terms(self, html: str) -> list[str]:
        """Text of every glossary element, in document order."""
        soup = BeautifulSoup(html, "html.parser")
        terms = []
        for el in soup.select(self.selector):
            term = el.get_text().strip()
            if term:
                terms.append(term)
        return terms

    def extract_file(self, path: Path | str) -> list[str]:
        path = Path(path)
        return self.extract_terms(path.read_text(encoding="utf-8", errors="replace"))

    def scan_directory(self, indir: Path | str) -> dict[Path, list[str]]:
        """Glossary terms per HTML file of a directory, sorted by file name."""
        indir = Path(indir)
        if not indir.is_dir():
            raise FileNotFoundError(f"Input directory not found: {indir}")

        files = sorted(
            p for p in indir.iterdir()
            if p.is_file() and p.suffix.lower() in config.GLOSSARY_SUFFIXES
        )
        logger.info("read %d files from %s", len(files), indir)

        found: dict[Path, list[str]] = {}
        for path in files:
            terms = self.extract_file(path)
            logger.info("%d glossary items found in %s", len(terms), path)
            found[path] = terms
        return found


def _stub_filename(term: str) -> str:
    """File name for a term; path separators never leave the output dir."""
    name = term.replace("/", "_").replace("\\", "_")
    if name in (".", ".."):
        name = name.replace(".", "_")
    return f"{name}.html"


class GlossaryStubWriter:
    """Write placeholder glossary definition files.

    Existing files hold authored definitions and are kept unless
    ``overwrite`` is set.
    """

    def __init__(
        self,
        outdir: Path | str,
        overwrite: bool = False,
        body: str = config.GLOSSARY_STUB_BODY,
    ):
        self.outdir = Path(outdir)
        self.overwrite = overwrite
        self.body = body
        self._written: set[Path] = set()

    def write(self, term: str) -> Optional[Path]:
        """Write the stub for one term. Returns None if it was skipped."""
        outfile = self.outdir / _stub_filename(term)
        if outfile in self._written:
            return None
        if outfile.exists() and not self.overwrite:
            logger.info("keeping existing %s", outfile)
            return None

        logger.info("writing %s...", outfile)
        self.outdir.mkdir(parents=True, exist_ok=True)
        outfile.write_text(self.body, encoding="utf-8")
        self._written.add(outfile)
        return outfile

    def write_all(self, terms: list[str]) -> list[Path]:
        paths = []
        for term in terms:
            path = self.write(term)
            if path is not None:
                paths.append(path)
        return paths


def generate_glossary_stubs(
    indir: Path | str,
    outdir: Path | str,
    overwrite: bool = False,
) -> list[Path]:
    """Scan every HTML file in ``indir`` and write stubs into ``outdir``."""
    extractor = GlossaryExtractor()
    writer = GlossaryStubWriter(outdir, overwrite=overwrite)
    written = []
    for terms in extractor.scan_directory(indir).values():
        written.extend(writer.write_all(terms))
    return written
