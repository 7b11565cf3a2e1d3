"""Render a table of contents as Markdown."""
from pathlib import Path

from chapterbook.models.view import TableOfContents


class TocMarkdownConverter:
    """Produce a nested Markdown list of sections and chapters.

    - Optional book title heading
    - One top-level item per section: "I Book One"
    - One nested item per chapter: "I.i Intro"
    """

    def convert(self, toc: TableOfContents) -> str:
        """Convert a TableOfContents to a Markdown string."""
        lines = []
        if toc.title:
            lines.append(f"# {toc.title}")
            lines.append("")
        lines.append("## Table of Contents")
        lines.append("")

        for section in toc.sections:
            lines.append(f"- {section.label} {section.title}")
            for ch in section.chapters:
                lines.append(f"  - {ch.label} {ch.title}")

        return "\n".join(lines) + "\n"

    def convert_to_file(self, toc: TableOfContents, output_path: Path | str) -> Path:
        """Write table of contents markdown to file."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.convert(toc), encoding="utf-8")
        return path
