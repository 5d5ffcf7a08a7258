"""Output mode selection for ServiceResult.

Three modes: ``--json`` dumps the full envelope for scripts, ``--quiet``
prints identifiers only, and the default hands off to the Rich renderers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from notectl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from notectl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """The subset of CLI flags that affects rendering."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
