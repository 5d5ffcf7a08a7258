"""ServiceResult and ServiceError — the contract between services and the CLI.

Every public service method returns a :class:`ServiceResult`; nothing
raises past the service boundary.  Renderers and the ``--json`` output
both consume this one shape.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is a stable, upper-case identifier (``SESSION_EXPIRED``,
    ``API_ERROR`` ...); ``message`` is what the user sees.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"analytics"``, ``"list_notes"`` ...); renderers
            dispatch on it.
        data: Operation-specific payload, JSON-serialisable.
        warnings: Non-fatal problems, e.g. a secondary fetch that failed.
        error: Set when ``ok`` is False.
        meta: Timing and telemetry, populated under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Shorthand for an ``ok=False`` result."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
