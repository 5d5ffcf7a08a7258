"""AppContext — the object every command receives via ``@click.pass_obj``.

Built once by the root group.  It configures logging, builds the API
client on first use, and owns result emission (stdout/stderr routing and
exit codes).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from notectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from notectl.config.settings import NotectlSettings
    from notectl.infrastructure.api import ApiClient
    from notectl.services.result import ServiceResult


class AppContext:
    """Shared state for one CLI invocation.

    The API client is created lazily so ``--help``, ``--version`` and
    ``--examples`` never touch the session file.
    """

    def __init__(self, settings: NotectlSettings) -> None:
        self.settings = settings
        self._api: ApiClient | None = None

        from notectl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from notectl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def api(self) -> ApiClient:
        if self._api is None:
            from notectl.infrastructure.api import ApiClient
            from notectl.infrastructure.session import SessionStore

            store = SessionStore(self.settings.session.token_path)
            self._api = ApiClient(
                self.settings.api.base_url,
                store,
                timeout=self.settings.api.timeout,
            )
        return self._api

    def close(self) -> None:
        if self._api is not None:
            self._api.close()
            self._api = None

    @contextmanager
    def loading(self, message: str) -> Iterator[None]:
        """Show a spinner on stderr while a fetch is in flight.

        Suppressed for ``--json`` and ``--quiet`` so scripted output stays
        clean.
        """
        if self.settings.json_output or self.settings.quiet:
            yield
            return

        from rich.console import Console

        with Console(stderr=True).status(message):
            yield

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; exit with status 1 when it failed.

        Successful output goes to stdout with warnings on stderr.  In JSON
        mode the warnings are already part of the payload.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
