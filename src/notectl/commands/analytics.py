"""Command: the personal analytics view."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteCommand
from notectl.services.analytics import AnalyticsService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext


@click.command(
    cls=NoteCommand,
    examples="""\
  notectl analytics
  notectl --json analytics
  notectl -v analytics""",
)
@click.pass_obj
def analytics(app: AppContext) -> None:
    """Summary counts and tag, weekly, and monthly charts for your notes."""
    svc = AnalyticsService(app.api, charts=app.settings.charts)
    with app.loading("Loading analytics..."):
        result = svc.analytics()
    app.emit(result)
