"""Note model and its content variants.

A note carries at most one piece of content: a filesystem path, a link, or a
block of text. In memory that is a single ``content`` slot holding one of the
variant dataclasses below; on disk it becomes three nullable columns, of which
the writer only ever fills one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Literal

from rich.text import Text

from recall.core.errors import ValidationError
from recall.utils.time import format_local_ms, now_ms

ContentKind = Literal["path", "link", "text"]


@dataclass(frozen=True)
class PathContent:
    value: str
    kind: ClassVar[ContentKind] = "path"


@dataclass(frozen=True)
class LinkContent:
    value: str
    kind: ClassVar[ContentKind] = "link"


@dataclass(frozen=True)
class TextContent:
    value: str
    kind: ClassVar[ContentKind] = "text"


NoteContent = PathContent | LinkContent | TextContent


@dataclass(frozen=True)
class Note:
    title: str
    created_at: int
    content: NoteContent | None = None
    archived: bool = False
    id: int | None = None

    @property
    def kind(self) -> ContentKind | None:
        return None if self.content is None else self.content.kind

    def with_id(self, note_id: int) -> Note:
        return replace(self, id=note_id)


def new_note(title: str, content: NoteContent | None = None) -> Note:
    if not title or not title.strip():
        raise ValidationError("Note title must not be empty")
    if isinstance(content, (PathContent, LinkContent)) and not content.value:
        raise ValidationError(f"Note {content.kind} must not be empty")
    return Note(title=title, created_at=now_ms(), content=content)


def new_note_with_path(title: str, path: str) -> Note:
    return new_note(title, PathContent(path))


def new_note_with_link(title: str, link: str) -> Note:
    return new_note(title, LinkContent(link))


def new_note_with_text(title: str, text: str) -> Note:
    return new_note(title, TextContent(text))


def content_columns(
    content: NoteContent | None,
) -> tuple[str | None, str | None, str | None]:
    """Encode content as the (path, link, text) column triple."""
    if isinstance(content, PathContent):
        return content.value, None, None
    if isinstance(content, LinkContent):
        return None, content.value, None
    if isinstance(content, TextContent):
        return None, None, content.value
    return None, None, None


def content_from_columns(
    path: str | None, link: str | None, text: str | None
) -> NoteContent | None:
    """Decode the column triple, rejecting rows with more than one value."""
    populated = [value for value in (path, link, text) if value is not None]
    if len(populated) > 1:
        raise ValueError("more than one of path, link, text is set")
    if path is not None:
        return PathContent(path)
    if link is not None:
        return LinkContent(link)
    if text is not None:
        return TextContent(text)
    return None


def display_line(note: Note, index: int | None = None) -> Text:
    line = Text()
    if index is not None:
        line.append(str(index), style="bold")
        line.append(" ")
    line.append(format_local_ms(note.created_at))
    line.append("\t")
    if note.kind is not None:
        line.append(note.kind, style="italic")
    line.append("\t")
    line.append(note.title, style="yellow")
    return line


def content_display(note: Note) -> str:
    if note.content is None:
        return ""
    return note.content.value


def open_target(note: Note) -> str | None:
    """Return what the system opener should receive, if anything."""
    if isinstance(note.content, (PathContent, LinkContent)):
        return note.content.value
    return None
