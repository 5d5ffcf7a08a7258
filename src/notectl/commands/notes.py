"""Command group: the notes dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteGroup
from notectl.domain.models import NoteFilters
from notectl.domain.types import ViewMode
from notectl.services.notes import NoteService

if TYPE_CHECKING:
    from datetime import datetime

    from notectl.commands._context import AppContext

_NOTES_EXAMPLES = """\
  notectl notes list
  notectl notes list --search meeting --tag work --view pinned
  notectl notes create "Weekly sync" --tag work --tag team
  notectl notes update 12 --add-tag urgent
  notectl notes pin 12
  notectl notes delete 12"""

_ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.group(cls=NoteGroup, examples=_NOTES_EXAMPLES)
def notes() -> None:
    """List, view, and edit your notes."""


@notes.command(
    name="list",
    examples="""\
  notectl notes list
  notectl notes list --search "release plan"
  notectl notes list --since 2024-01-01 --until 2024-03-31
  notectl notes list --tag work --tag ideas
  notectl notes list --view favorite
  notectl -q notes list --view pinned""",
)
@click.option("--search", default=None, help="Keyword matched against title and description.")
@click.option("--since", type=_ISO_DATE, default=None, help="Created on or after (YYYY-MM-DD).")
@click.option("--until", type=_ISO_DATE, default=None, help="Created on or before (YYYY-MM-DD).")
@click.option("--tag", "tags", multiple=True, help="Require a tag (repeatable).")
@click.option(
    "--view",
    type=click.Choice([m.value for m in ViewMode]),
    default=ViewMode.ALL.value,
    help="Show all, pinned, or favorite notes.",
)
@click.pass_obj
def list_cmd(
    app: AppContext,
    search: str | None,
    since: datetime | None,
    until: datetime | None,
    tags: tuple[str, ...],
    view: str,
) -> None:
    """List notes matching the filters."""
    filters = NoteFilters(
        search=search or None,
        start_date=since.date().isoformat() if since else None,
        end_date=until.date().isoformat() if until else None,
        tags=tuple(tags),
    )
    with app.loading("Loading notes..."):
        result = NoteService(app.api).list_notes(filters, view=view)
    app.emit(result)


@notes.command(examples="  notectl notes get 12\n  notectl --json notes get 12")
@click.argument("note_id", type=int)
@click.pass_obj
def get(app: AppContext, note_id: int) -> None:
    """Show a single note."""
    with app.loading("Loading note..."):
        result = NoteService(app.api).get(note_id)
    app.emit(result)


@notes.command(
    examples="""\
  notectl notes create "Grocery list"
  notectl notes create "Sprint review" --description "Demo + retro" --tag work
  notectl notes create "Links" --attachments $'https://a.example\\nhttps://b.example'"""
)
@click.argument("title")
@click.option("--description", default=None, help="Note body.")
@click.option("--tag", "tags", multiple=True, help="Tag to attach (repeatable).")
@click.option("--attachments", default=None, help="Attachment URLs, one per line.")
@click.option("--pinned", is_flag=True, help="Pin the note.")
@click.option("--favorite", is_flag=True, help="Mark the note as favorite.")
@click.pass_obj
def create(
    app: AppContext,
    title: str,
    description: str | None,
    tags: tuple[str, ...],
    attachments: str | None,
    pinned: bool,
    favorite: bool,
) -> None:
    """Create a note."""
    result = NoteService(app.api).create(
        title,
        description=description,
        tags=tags,
        attachments_text=attachments,
        pinned=pinned,
        favorite=favorite,
    )
    app.emit(result)


@notes.command(
    examples="""\
  notectl notes update 12 --title "Renamed"
  notectl notes update 12 --tag a --tag b
  notectl notes update 12 --add-tag urgent --remove-tag later
  notectl notes update 12 --no-pinned"""
)
@click.argument("note_id", type=int)
@click.option("--title", default=None, help="New title.")
@click.option("--description", default=None, help="New body.")
@click.option("--tag", "tags", multiple=True, help="Replace all tags (repeatable).")
@click.option("--add-tag", "add_tags", multiple=True, help="Add a tag (repeatable).")
@click.option("--remove-tag", "remove_tags", multiple=True, help="Remove a tag (repeatable).")
@click.option("--attachments", default=None, help="Replace attachments, one URL per line.")
@click.option("--pinned/--no-pinned", default=None, help="Set the pinned flag.")
@click.option("--favorite/--no-favorite", default=None, help="Set the favorite flag.")
@click.pass_obj
def update(
    app: AppContext,
    note_id: int,
    title: str | None,
    description: str | None,
    tags: tuple[str, ...],
    add_tags: tuple[str, ...],
    remove_tags: tuple[str, ...],
    attachments: str | None,
    pinned: bool | None,
    favorite: bool | None,
) -> None:
    """Change fields of an existing note."""
    result = NoteService(app.api).update(
        note_id,
        title=title,
        description=description,
        tags=tags or None,
        add_tags=add_tags,
        remove_tags=remove_tags,
        attachments_text=attachments,
        pinned=pinned,
        favorite=favorite,
    )
    app.emit(result)


@notes.command()
@click.argument("note_id", type=int)
@click.confirmation_option(prompt="Delete this note?")
@click.pass_obj
def delete(app: AppContext, note_id: int) -> None:
    """Delete a note."""
    app.emit(NoteService(app.api).delete(note_id))


@notes.command()
@click.argument("note_id", type=int)
@click.pass_obj
def pin(app: AppContext, note_id: int) -> None:
    """Toggle the pinned flag."""
    app.emit(NoteService(app.api).toggle_pin(note_id))


@notes.command()
@click.argument("note_id", type=int)
@click.pass_obj
def favorite(app: AppContext, note_id: int) -> None:
    """Toggle the favorite flag."""
    app.emit(NoteService(app.api).toggle_favorite(note_id))


@notes.command()
@click.pass_obj
def tags(app: AppContext) -> None:
    """List every tag in use."""
    app.emit(NoteService(app.api).tags())
