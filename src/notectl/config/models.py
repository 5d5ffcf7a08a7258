"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notectl.toml only contains overrides.
A fresh install needs nothing but ``[api] base_url`` when the service is not
running on localhost.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


def _default_token_path() -> Path:
    return Path.home() / ".notectl" / "session"


# --- notectl.toml sections ---


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    base_url: str = "http://localhost:8000"
    timeout: float = 30.0


class ChartsConfig(BaseModel):
    """[charts] section."""

    model_config = {"frozen": True}

    tag_limit: int = Field(default=8, ge=0)
    weekly_limit: int = Field(default=8, ge=0)
    monthly_limit: int = Field(default=6, ge=0)


class SessionConfig(BaseModel):
    """[session] section."""

    model_config = {"frozen": True}

    token_path: Path = Field(default_factory=_default_token_path)
