"""Configuration records describing a book's sections and chapters."""
from pathlib import Path
from typing import Annotated, Optional

from pydantic import BaseModel, Field, StringConstraints

from chapterbook import config

RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ChapterConfig(BaseModel):
    """A chapter record: title and source file relative to its section root."""
    title: RequiredStr
    src: RequiredStr
    label: Optional[str] = None


class SectionConfig(BaseModel):
    """A section record, optionally carrying its chapters."""
    title: RequiredStr
    root: RequiredStr
    src: RequiredStr
    label: Optional[str] = None
    chapters: list[ChapterConfig] = Field(default_factory=list)


class BookOptions(BaseModel):
    """Site-wide roots the section and glossary urls are built from."""
    logo: str = config.LOGO
    content_root: str = config.CONTENT_ROOT
    glossary_root: str = config.GLOSSARY_ROOT
    images_root: str = config.IMAGES_ROOT


class BookConfig(BaseModel):
    """Complete book configuration, in reading order."""
    title: str = ""
    options: BookOptions = Field(default_factory=BookOptions)
    sections: list[SectionConfig] = Field(default_factory=list)

    def to_json(self, path: Path | str) -> None:
        """Serialize configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    @classmethod
    def from_json(cls, path: Path | str) -> "BookConfig":
        """Deserialize configuration from JSON file."""
        data = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(data)
