"""Typer CLI for recall."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from recall.core.errors import NotFoundError, RecallError, ValidationError
from recall.core.logging import configure_logging
from recall.core.note import content_display, display_line
from recall.core.settings import Settings, load_settings
from recall.storage.store import Store
from recall.tools.local.editor import Editor, ExternalEditor, resolve_editor_command
from recall.tools.local.notes import NotesService
from recall.tools.local.opener import Opener, SystemOpener

app = typer.Typer(
    help="Record, list, open and archive short notes.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def main(
    note_title_or_index: Annotated[
        str | None,
        typer.Argument(
            help="Index of an existing note, or the title of a new one.",
            show_default=False,
        ),
    ] = None,
    archive: Annotated[
        bool, typer.Option("--archive", "-a", help="Archive the note at INDEX.")
    ] = False,
    edit: Annotated[
        bool,
        typer.Option(
            "--edit", "-e", help="Edit a text note, or write a new one, in $EDITOR."
        ),
    ] = False,
    path: Annotated[
        str | None, typer.Option("--path", "-p", help="Attach a file path.")
    ] = None,
    link: Annotated[
        str | None, typer.Option("--link", "-l", help="Attach a link.")
    ] = None,
    text: Annotated[
        str | None, typer.Option("--text", "-t", help="Attach a block of text.")
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to use.", dir_okay=False),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output.")
    ] = False,
) -> None:
    """List notes, show the note at INDEX, or add a note titled TITLE."""
    configure_logging(verbose)
    index = _parse_index(note_title_or_index)
    has_content = any(value is not None for value in (path, link, text))
    try:
        if archive:
            if note_title_or_index is None:
                console.print("Must supply note index with --archive")
                return
            if index is None:
                raise ValidationError(
                    f"--archive needs a note index, got '{note_title_or_index}'"
                )
            if edit or has_content:
                raise ValidationError(
                    "--archive cannot be combined with --edit, --path, --link "
                    "or --text"
                )
        elif index is not None and has_content:
            raise ValidationError(
                "--path, --link and --text only apply when adding a new note"
            )

        settings = load_settings(config)
        with Store.open(settings.db_path) as store:
            service = NotesService(store, _editor(settings), _opener(settings))
            if archive:
                _archive(service, index)
            elif note_title_or_index is None:
                _list(service)
            elif index is not None:
                _show_or_edit(service, index, edit)
            else:
                _add(service, note_title_or_index, path, link, text, edit)
    except RecallError as exc:
        err_console.print(f"[red]Error:[/red] {escape(exc.message)}")
        raise typer.Exit(code=1) from exc


def _list(service: NotesService) -> None:
    notes = service.list_notes()
    if not notes:
        console.print("No notes.")
        return
    for i, note in enumerate(notes):
        console.print(display_line(note, index=i), soft_wrap=True)


def _show_or_edit(service: NotesService, index: int, edit: bool) -> None:
    try:
        note = service.edit(index) if edit else service.show(index)
    except NotFoundError:
        console.print("Note not found.")
        return
    if edit:
        console.print(f"Saved note '{escape(note.title)}'")
        return
    console.print(display_line(note), soft_wrap=True)
    if body := content_display(note):
        console.print(Text(body), soft_wrap=True)


def _add(
    service: NotesService,
    title: str,
    path: str | None,
    link: str | None,
    text: str | None,
    edit: bool,
) -> None:
    note = service.add(title, path=path, link=link, text=text, edit=edit)
    position = service.index_of(note)
    console.print(f"Added note {position}: {escape(note.title)}", soft_wrap=True)


def _archive(service: NotesService, index: int | None) -> None:
    if index is None:
        return
    note = service.archive(index)
    if note is None:
        console.print("Note not found. Nothing archived")
        return
    console.print(f"Note titled '{escape(note.title)}' archived")


def _parse_index(value: str | None) -> int | None:
    if value is None or not value.isdecimal():
        return None
    return int(value)


def _editor(settings: Settings) -> Editor:
    return ExternalEditor(resolve_editor_command(settings.editor_command))


def _opener(settings: Settings) -> Opener:
    return SystemOpener(settings.opener_command)


if __name__ == "__main__":
    app()
