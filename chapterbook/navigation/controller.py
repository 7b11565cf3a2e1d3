"""Book controller: builds the repository and drives chapter navigation.

The controller owns a Repository and a bookmark store. It assigns
indices, labels and urls as sections and chapters are added, and turns
navigation requests (a target chapter index) into DisplayState records for
the view. Content loading is handed to a ContentFetcher; only the content
for the most recent selection is applied.
"""
import logging
from functools import partial
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ValidationError

from chapterbook import config
from chapterbook.errors import (
    ConfigurationError,
    EmptyRepositoryError,
    NumberingError,
    OrderingError,
)
from chapterbook.models.book import Chapter, Section
from chapterbook.models.config import BookConfig, BookOptions, ChapterConfig, SectionConfig
from chapterbook.models.view import (
    DisplayState,
    GlossaryPopup,
    TableOfContents,
    TocChapter,
    TocSection,
)
from chapterbook.navigation.repository import Repository
from chapterbook.numbering import MAX_ORDINAL, roman_numeral
from chapterbook.storage.bookmarks import BookmarkStore, MemoryBookmarkStore
from chapterbook.storage.content import ContentFetcher, NullContentFetcher

logger = logging.getLogger(__name__)

SectionData = Union[SectionConfig, Mapping[str, Any]]
ChapterData = Union[ChapterConfig, Mapping[str, Any]]


def _validate(model: type[BaseModel], data, what: str):
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {what} record: {e}") from e


class BookController:
    """Orchestrates sections, chapters, the bookmark and the view state."""

    def __init__(
        self,
        options: Optional[BookOptions] = None,
        repository: Optional[Repository] = None,
        bookmarks: Optional[BookmarkStore] = None,
        fetcher: Optional[ContentFetcher] = None,
        title: str = "",
    ):
        self.options = options or BookOptions()
        self.repo = repository if repository is not None else Repository()
        self.bookmarks = bookmarks if bookmarks is not None else MemoryBookmarkStore()
        self.fetcher = fetcher or NullContentFetcher()
        self.title = title

        self.current: Optional[DisplayState] = None
        self.content: Optional[str] = None
        self.content_url: Optional[str] = None
        self._request_id = 0

    @classmethod
    def from_config(
        cls,
        book: BookConfig,
        bookmarks: Optional[BookmarkStore] = None,
        fetcher: Optional[ContentFetcher] = None,
    ) -> "BookController":
        """Build a controller holding every section and chapter of a book."""
        controller = cls(
            options=book.options,
            bookmarks=bookmarks,
            fetcher=fetcher,
            title=book.title,
        )
        controller.load(book)
        return controller

    def load(self, book: BookConfig) -> list[Section]:
        return [self.new_section(record) for record in book.sections]

    # ── Building ──────────────────────────────────────────────

    def new_section(self, data: SectionData) -> Section:
        """Create and register a section.

        The section root is appended to the content root to form the
        section's url. Chapters carried by the record are added in the
        same call; every record is validated first, so a rejected section
        leaves the repository unchanged.
        """
        record = _validate(SectionConfig, data, "section")
        index = len(self.repo.sections)
        label = roman_numeral(index + 1, capitalized=True)
        if len(record.chapters) > MAX_ORDINAL:
            raise NumberingError(
                f"Section {record.title!r} has {len(record.chapters)} chapters; "
                f"at most {MAX_ORDINAL} can be numbered"
            )

        section = Section.from_config(record)
        section.index = index
        section.label = label
        section.root = f"{self.options.content_root}/{record.root}"
        section.url = f"{section.root}/{section.src}"
        logger.debug("new_section %s [%s] %s", section.label, section.title, section.root)
        self.repo.add_section(section)

        for chapter_record in record.chapters:
            self.add_chapter(section, chapter_record)
        return section

    def add_chapter(self, section: Section, data: ChapterData) -> Chapter:
        """Add a chapter to the end of a section and of the reading order.

        Only the most recently created section accepts chapters, so the
        global chapter order always matches section-by-section reading.
        """
        record = _validate(ChapterConfig, data, "chapter")
        if section is None or not any(s is section for s in self.repo.sections):
            raise ConfigurationError(
                f"Chapter {record.title!r} added to a section not in this book"
            )
        if section is not self.repo.sections[-1]:
            raise OrderingError(
                f"Chapter {record.title!r} added to section {section.label} "
                f"after section {self.repo.sections[-1].label} was created"
            )

        label = f"{section.label}.{roman_numeral(len(section.chapters) + 1)}"
        chapter = Chapter.from_config(record)
        chapter.section = section
        chapter.label = label
        chapter.url = f"{section.root}/{chapter.src}"
        chapter.index = len(self.repo.chapters)

        section.chapters.append(chapter)
        self.repo.add_chapter(chapter)
        logger.debug(
            "add_chapter %d [%s %s] %s", chapter.index, chapter.label, chapter.title, chapter.url
        )
        return chapter

    # ── Navigation ────────────────────────────────────────────

    def restore_last_chapter(self) -> Optional[Chapter]:
        """Chapter stored as the bookmark, or the first chapter if none.

        Returns None if the book has no chapters.
        """
        idx = self.bookmarks.get(config.BOOKMARK_KEY)
        if idx is None:
            idx = 0
        logger.debug("read last shown chapter index %s from bookmarks", idx)
        try:
            return self.repo.find_chapter_by_index(idx)
        except EmptyRepositoryError:
            logger.warning("no chapter to restore: book has no chapters")
            return None

    def select_chapter(self, chapter: Optional[Chapter]) -> Optional[DisplayState]:
        """Show a chapter: save the bookmark, publish the view state and
        request its content.
        """
        if chapter is None:
            logger.warning("can not show undefined chapter")
            return None

        logger.debug("show chapter %s", chapter)
        self.bookmarks.set(config.BOOKMARK_KEY, chapter.index)

        self._request_id += 1
        self.content = None
        self.content_url = None
        next_index = chapter.index + 1
        prev_index = chapter.index - 1
        state = DisplayState(
            request_id=self._request_id,
            chapter_index=chapter.index,
            chapter_label=chapter.label,
            chapter_title=chapter.title,
            section_title=chapter.section.title if chapter.section else "",
            url=chapter.url,
            status=chapter.title,
            next_index=next_index,
            prev_index=prev_index,
            next_title=self._title_at(next_index),
            prev_title=self._title_at(prev_index),
        )
        self.current = state
        self.fetcher.fetch(chapter.url, partial(self._apply_content, state.request_id, chapter.url))
        return state

    def _title_at(self, index: int) -> str:
        try:
            return self.repo.find_chapter_by_index(index).title
        except EmptyRepositoryError:
            return ""

    def _apply_content(self, request_id: int, url: str, html: str) -> bool:
        if request_id != self._request_id:
            logger.debug("dropping stale content for %s (request %d)", url, request_id)
            return False
        self.content = html
        self.content_url = url
        return True

    def navigate(self, index: int) -> Optional[DisplayState]:
        """Select the chapter a navigation control points at.

        Out-of-range indices land on the first chapter. With no chapters
        the current display is left as it is.
        """
        try:
            chapter = self.repo.find_chapter_by_index(index)
        except EmptyRepositoryError:
            logger.warning("can not navigate to chapter %s: book has no chapters", index)
            return None
        return self.select_chapter(chapter)

    def next_chapter(self) -> Optional[DisplayState]:
        if self.current is not None:
            return self.navigate(self.current.next_index)
        chapter = self.restore_last_chapter()
        return self.navigate(chapter.index + 1) if chapter else None

    def previous_chapter(self) -> Optional[DisplayState]:
        if self.current is not None:
            return self.navigate(self.current.prev_index)
        chapter = self.restore_last_chapter()
        return self.navigate(chapter.index - 1) if chapter else None

    # ── Views ─────────────────────────────────────────────────

    def table_of_contents(self) -> TableOfContents:
        sections = [
            TocSection(
                index=section.index,
                label=section.label,
                title=section.title,
                url=section.url,
                chapters=[
                    TocChapter(index=ch.index, label=ch.label, title=ch.title)
                    for ch in section.chapters
                ],
            )
            for section in self.repo.sections
        ]
        return TableOfContents(title=self.title, sections=sections)

    def glossary_popup(
        self,
        href: Optional[str] = None,
        title: Optional[str] = None,
        text: Optional[str] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> GlossaryPopup:
        """Popup for a clicked glossary term.

        The href is relative to the glossary root; the popup title falls
        back to the term's text. The default dialog options always apply
        over caller options.
        """
        href = href or config.MISSING_GLOSSARY_HREF
        url = f"{self.options.glossary_root}/{href}"
        logger.debug("loading glossary content from %s", url)
        return GlossaryPopup(
            url=url,
            title=title or text or "",
            options={**(options or {}), **config.DEFAULT_DIALOG_OPTIONS},
        )

    def debug(self) -> None:
        self.repo.debug()
