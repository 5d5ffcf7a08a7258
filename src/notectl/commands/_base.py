"""Click base classes that add an ``--examples`` flag.

``NoteCommand`` and ``NoteGroup`` take an ``examples`` keyword.  Passing
``--examples`` on the command line prints them and exits, so ``--help``
stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_callback(examples: str) -> Any:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


def _with_examples(cmd: click.Command, examples: str | None) -> None:
    if not examples:
        return
    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_examples_callback(examples),
            help="Show usage examples.",
        )
    )


class NoteCommand(click.Command):
    """A command accepting ``examples=`` at declaration time."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)


class NoteGroup(click.Group):
    """A group whose subcommands default to :class:`NoteCommand`."""

    command_class = NoteCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)
