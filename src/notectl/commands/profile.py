"""Command group: account profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteGroup
from notectl.services.profile import ProfileService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext

_PROFILE_EXAMPLES = """\
  notectl profile show
  notectl profile email ada@new.example
  notectl profile password"""


@click.group(cls=NoteGroup, examples=_PROFILE_EXAMPLES)
def profile() -> None:
    """View and update your account."""


@profile.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Show account details."""
    with app.loading("Loading profile..."):
        result = ProfileService(app.api).show()
    app.emit(result)


@profile.command()
@click.argument("new_email")
@click.pass_obj
def email(app: AppContext, new_email: str) -> None:
    """Change the account email."""
    app.emit(ProfileService(app.api).update_email(new_email))


@profile.command(
    examples="""\
  notectl profile password
  notectl profile password --current old --new n3w --confirm n3w"""
)
@click.option("--current", "current_password", prompt="Current password", hide_input=True)
@click.option("--new", "new_password", prompt="New password", hide_input=True)
@click.option("--confirm", "confirm_password", prompt="Confirm new password", hide_input=True)
@click.pass_obj
def password(
    app: AppContext, current_password: str, new_password: str, confirm_password: str
) -> None:
    """Change the account password."""
    result = ProfileService(app.api).change_password(
        current_password, new_password, confirm_password
    )
    app.emit(result)
