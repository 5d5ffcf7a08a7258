"""Subcommand modules for notectl.

``register_commands`` imports each group only when the root group is
built, keeping module import order in one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the five command groups and the ``analytics`` command."""
    from notectl.commands.admin import admin
    from notectl.commands.analytics import analytics
    from notectl.commands.auth import auth
    from notectl.commands.notes import notes
    from notectl.commands.profile import profile

    cli.add_command(auth)
    cli.add_command(notes)
    cli.add_command(analytics)
    cli.add_command(profile)
    cli.add_command(admin)
