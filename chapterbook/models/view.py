"""Records handed to the renderer."""
from typing import Any

from pydantic import BaseModel, Field


class TocChapter(BaseModel):
    index: int
    label: str
    title: str


class TocSection(BaseModel):
    index: int
    label: str
    title: str
    url: str
    chapters: list[TocChapter] = Field(default_factory=list)


class TableOfContents(BaseModel):
    """Sections and their chapters, in reading order."""
    title: str = ""
    sections: list[TocSection] = Field(default_factory=list)

    @property
    def chapter_count(self) -> int:
        return sum(len(section.chapters) for section in self.sections)


class DisplayState(BaseModel):
    """Everything the view needs to show one chapter and its navigation."""
    request_id: int
    chapter_index: int
    chapter_label: str
    chapter_title: str
    section_title: str
    url: str
    status: str
    next_index: int
    prev_index: int
    next_title: str
    prev_title: str


class GlossaryPopup(BaseModel):
    """A glossary definition to show in a non-modal popup."""
    url: str
    title: str = ""
    options: dict[str, Any] = Field(default_factory=dict)
