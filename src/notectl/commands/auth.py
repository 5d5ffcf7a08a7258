"""Command group: sign up, sign in, sign out, and show the current account."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notectl.commands._base import NoteGroup
from notectl.services.auth import AuthService

if TYPE_CHECKING:
    from notectl.commands._context import AppContext

_AUTH_EXAMPLES = """\
  notectl auth signup "Ada Lovelace" ada@example.com
  notectl auth signin ada@example.com --password hunter2
  notectl auth whoami
  notectl auth signout"""


@click.group(cls=NoteGroup, examples=_AUTH_EXAMPLES)
def auth() -> None:
    """Manage the stored session."""


@auth.command(
    examples="""\
  notectl auth signup "Ada Lovelace" ada@example.com
  notectl auth signup Ada ada@example.com --password hunter2"""
)
@click.argument("name")
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_obj
def signup(app: AppContext, name: str, email: str, password: str) -> None:
    """Create an account and sign in to it."""
    with app.loading("Creating account..."):
        result = AuthService(app.api).signup(name, email, password)
    app.emit(result)


@auth.command(
    examples="""\
  notectl auth signin ada@example.com
  notectl --api-url https://notes.example.com auth signin ada@example.com"""
)
@click.argument("email")
@click.option("--password", prompt=True, hide_input=True)
@click.pass_obj
def signin(app: AppContext, email: str, password: str) -> None:
    """Sign in and store the access token."""
    with app.loading("Signing in..."):
        result = AuthService(app.api).signin(email, password)
    app.emit(result)


@auth.command()
@click.pass_obj
def signout(app: AppContext) -> None:
    """Forget the stored access token."""
    app.emit(AuthService(app.api).signout())


@auth.command(examples="  notectl --json auth whoami")
@click.pass_obj
def whoami(app: AppContext) -> None:
    """Show the signed-in account."""
    with app.loading("Loading account..."):
        result = AuthService(app.api).whoami()
    app.emit(result)
