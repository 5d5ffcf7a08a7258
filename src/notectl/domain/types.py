"""Enumerations shared by the domain, service, and command layers."""

from __future__ import annotations

from enum import StrEnum


class Granularity(StrEnum):
    """Bucket size of a server-side admin timeline."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ViewMode(StrEnum):
    """Dashboard view selector applied on top of the fetched notes."""

    ALL = "all"
    PINNED = "pinned"
    FAVORITE = "favorite"


class Role(StrEnum):
    """Account role reported by ``/api/auth/me``."""

    ADMIN = "admin"
    USER = "user"
