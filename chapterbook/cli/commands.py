"""CLI commands for chapterbook."""
import logging
from pathlib import Path
from typing import Optional

import typer
from bs4 import BeautifulSoup
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from chapterbook import config
from chapterbook.converters.toc_markdown import TocMarkdownConverter
from chapterbook.errors import BookError
from chapterbook.extractors.glossary import generate_glossary_stubs
from chapterbook.models.config import BookConfig
from chapterbook.models.view import DisplayState
from chapterbook.navigation.controller import BookController
from chapterbook.storage.bookmarks import JsonBookmarkStore
from chapterbook.storage.content import FileContentFetcher

__version__ = "0.1.0"

app = typer.Typer(
    name="chapterbook",
    help="Multi-chapter book navigation: table of contents, bookmarks, glossary stubs.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_controller(
    config_path: Path,
    bookmarks: Optional[Path] = None,
    content_dir: Optional[Path] = None,
) -> BookController:
    """Build the controller for a book configuration file, or exit."""
    try:
        book = BookConfig.from_json(config_path)
        controller = BookController.from_config(
            book,
            bookmarks=JsonBookmarkStore(bookmarks or config.BOOKMARK_FILE),
            fetcher=FileContentFetcher(content_dir or config_path.parent),
        )
    except (BookError, ValidationError, UnicodeDecodeError, OSError) as e:
        console.print(f"[red]Cannot load book:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    controller.debug()
    return controller


def _print_state(controller: BookController, state: Optional[DisplayState]) -> None:
    if state is None:
        console.print("[yellow]No chapter to show.[/yellow]")
        raise typer.Exit(1)

    console.print(Panel(
        f"[bold]Section:[/bold] {escape(state.section_title)}\n"
        f"[bold]Chapter:[/bold] {state.chapter_label} {escape(state.chapter_title)}\n"
        f"[bold]URL:[/bold] {escape(state.url)}\n\n"
        f"[dim]prev →[/dim] {state.prev_index}: {escape(state.prev_title)}\n"
        f"[dim]next →[/dim] {state.next_index}: {escape(state.next_title)}",
        title=escape(controller.title) if controller.title else "chapterbook",
        border_style="green",
    ))
    if controller.content is not None:
        text = BeautifulSoup(controller.content, "html.parser").get_text("\n").strip()
        console.print(text, markup=False)
    else:
        console.print(f"[yellow]⚠[/yellow] No content loaded from {escape(state.url)}")


# ─── TOC ───────────────────────────────────────────────────────

@app.command()
def toc(
    config_path: Path = typer.Argument(
        ...,
        help="Path to the book configuration JSON",
        exists=True,
        dir_okay=False,
    ),
    markdown: bool = typer.Option(False, "--markdown", "-m", help="Print as Markdown"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write Markdown table of contents to this file"
    ),
):
    """Show the table of contents."""
    controller = _load_controller(config_path)
    contents = controller.table_of_contents()
    converter = TocMarkdownConverter()

    if output:
        path = converter.convert_to_file(contents, output)
        console.print(f"[green]✓[/green] Table of contents → {path}")
        return
    if markdown:
        console.print(converter.convert(contents), markup=False)
        return

    tree = Tree(f"[bold]{escape(contents.title or config_path.stem)}[/bold]")
    for section in contents.sections:
        branch = tree.add(f"[yellow]{section.label} {escape(section.title)}[/yellow]")
        for ch in section.chapters:
            branch.add(f"{ch.label} {escape(ch.title)} [dim]({ch.index})[/dim]")
    console.print(tree)
    console.print(
        f"[dim]{len(contents.sections)} sections, {contents.chapter_count} chapters[/dim]"
    )


# ─── SHOW / NEXT / PREV ────────────────────────────────────────

_BOOKMARKS_OPTION = typer.Option(
    None, "--bookmarks", "-b", help="Bookmark file (default: ~/.chapterbook/bookmarks.json)"
)
_CONTENT_DIR_OPTION = typer.Option(
    None, "--content-dir", "-d", help="Site directory chapter urls are relative to"
)


@app.command()
def show(
    config_path: Path = typer.Argument(
        ..., help="Path to the book configuration JSON", exists=True, dir_okay=False
    ),
    index: Optional[int] = typer.Option(
        None, "--index", "-i", help="Chapter index (default: last bookmarked chapter)"
    ),
    bookmarks: Optional[Path] = _BOOKMARKS_OPTION,
    content_dir: Optional[Path] = _CONTENT_DIR_OPTION,
):
    """Show a chapter and bookmark it."""
    controller = _load_controller(config_path, bookmarks, content_dir)
    if index is None:
        state = controller.select_chapter(controller.restore_last_chapter())
    else:
        state = controller.navigate(index)
    _print_state(controller, state)


@app.command("next")
def next_chapter(
    config_path: Path = typer.Argument(
        ..., help="Path to the book configuration JSON", exists=True, dir_okay=False
    ),
    bookmarks: Optional[Path] = _BOOKMARKS_OPTION,
    content_dir: Optional[Path] = _CONTENT_DIR_OPTION,
):
    """Show the chapter after the bookmarked one."""
    controller = _load_controller(config_path, bookmarks, content_dir)
    _print_state(controller, controller.next_chapter())


@app.command("prev")
def previous_chapter(
    config_path: Path = typer.Argument(
        ..., help="Path to the book configuration JSON", exists=True, dir_okay=False
    ),
    bookmarks: Optional[Path] = _BOOKMARKS_OPTION,
    content_dir: Optional[Path] = _CONTENT_DIR_OPTION,
):
    """Show the chapter before the bookmarked one."""
    controller = _load_controller(config_path, bookmarks, content_dir)
    _print_state(controller, controller.previous_chapter())


# ─── GLOSSARY-STUBS ───────────────────────────────────────────

@app.command("glossary-stubs")
def glossary_stubs(
    indir: Path = typer.Option(Path("."), "--in", help="Directory of chapter HTML files"),
    outdir: Path = typer.Option(Path("."), "--out", help="Directory for glossary files"),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace glossary files that already exist"
    ),
):
    """Write a placeholder glossary file for every glossary term found."""
    try:
        written = generate_glossary_stubs(indir, outdir, overwrite=overwrite)
    except OSError as e:
        console.print(f"[red]Glossary scan failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(Panel(
        f"[green]Glossary stubs complete![/green]\n\n"
        f"[bold]Input:[/bold] {indir}\n"
        f"[bold]Output:[/bold] {outdir}\n"
        f"[bold]Written:[/bold] {len(written)} files",
        title="chapterbook glossary-stubs",
        border_style="green",
    ))


# ─── VERSION ──────────────────────────────────────────────────

@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]chapterbook[/bold] version {__version__}")


if __name__ == "__main__":
    app()
