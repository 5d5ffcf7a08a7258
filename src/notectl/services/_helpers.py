"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pydantic import BaseModel


def dump(model: BaseModel) -> dict[str, Any]:
    """JSON-compatible dict of a wire model, for ``ServiceResult.data``."""
    return model.model_dump(mode="json")


def dump_all(models: Any) -> list[dict[str, Any]]:
    return [dump(m) for m in models]
