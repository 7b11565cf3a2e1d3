"""Section and chapter entities.

A Section owns its list of chapters. A Chapter keeps a non-owning
reference back to its section, used only to look up titles and roots.
Index, label and url are assigned by the controller when the entity is
added, never at construction.
"""
from dataclasses import dataclass, field
from typing import Optional

from chapterbook.models.config import ChapterConfig, SectionConfig


@dataclass(eq=False)
class Chapter:
    """A single content unit, addressed by its global index."""
    title: str
    src: str
    index: int = -1
    label: str = ""
    url: str = ""
    section: Optional["Section"] = field(default=None, repr=False)

    @classmethod
    def from_config(cls, record: ChapterConfig) -> "Chapter":
        return cls(title=record.title, src=record.src)

    def describe(self) -> str:
        section_title = self.section.title if self.section else ""
        return f"{self.index} [{section_title}] [{self.title}] {self.url}"

    def __str__(self) -> str:
        return self.describe()


@dataclass(eq=False)
class Section:
    """An ordered group of chapters sharing a content root."""
    title: str
    root: str
    src: str
    index: int = -1
    label: str = ""
    url: str = ""
    chapters: list[Chapter] = field(default_factory=list, repr=False)

    @classmethod
    def from_config(cls, record: SectionConfig) -> "Section":
        return cls(title=record.title, root=record.root, src=record.src)

    def describe(self) -> str:
        return f"{self.index} [{self.title}] {self.url}"

    def __str__(self) -> str:
        return self.describe()
