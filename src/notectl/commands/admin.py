"""Command group: administrator views."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteGroup
from notectl.domain.types import Granularity
from notectl.services.admin import AdminService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext

_RANGES = click.Choice([g.value for g in Granularity])


@click.group(cls=NoteGroup)
def admin() -> None:
    """Workspace-wide metrics (admin accounts only)."""


@admin.command(
    examples="""\
  notectl admin overview
  notectl admin overview --notes-range monthly --users-range yearly
  notectl --json admin overview"""
)
@click.option("--notes-range", type=_RANGES, default=Granularity.WEEKLY.value, show_default=True)
@click.option("--users-range", type=_RANGES, default=Granularity.WEEKLY.value, show_default=True)
@click.pass_obj
def overview(app: AppContext, notes_range: str, users_range: str) -> None:
    """Note and user metrics, timelines, and the user table."""
    with app.loading("Loading admin metrics..."):
        result = AdminService(app.api).overview(notes_range=notes_range, users_range=users_range)
    app.emit(result)
