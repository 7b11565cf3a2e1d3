"""Ordered container of all sections and chapters."""
import logging

from chapterbook.errors import EmptyRepositoryError
from chapterbook.models.book import Chapter, Section

logger = logging.getLogger(__name__)


class Repository:
    """Holds every section in insertion order and every chapter flattened
    across sections in reading order.

    Chapters are indexed globally: the chapter at position i of
    ``chapters`` has ``index == i``.
    """

    def __init__(self):
        logger.debug("creating empty content repository")
        self.sections: list[Section] = []
        self.chapters: list[Chapter] = []

    def __len__(self) -> int:
        return len(self.chapters)

    def add_section(self, section: Section) -> Section:
        self.sections.append(section)
        return section

    def add_chapter(self, chapter: Chapter) -> Chapter:
        self.chapters.append(chapter)
        return chapter

    def find_chapter_by_index(self, idx) -> Chapter:
        """Find the chapter with the given 0-based index.

        Any index out of bounds, in either direction, resolves to the first
        chapter. Raises EmptyRepositoryError if there are no chapters.
        """
        if not self.chapters:
            raise EmptyRepositoryError("Repository has no chapters")
        try:
            idx = int(idx)
        except (TypeError, ValueError, OverflowError):
            logger.warning("invalid chapter index %r, using first chapter", idx)
            return self.chapters[0]
        if idx < 0 or idx >= len(self.chapters):
            return self.chapters[0]
        return self.chapters[idx]

    def debug(self) -> None:
        for section in self.sections:
            logger.debug("%s", section.title)
        for chapter in self.chapters:
            logger.debug("%d %s %s", chapter.index, chapter.label, chapter.title)
