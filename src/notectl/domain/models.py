"""Wire models for the notes service API.

Field names match the JSON the service sends, so ``model_validate`` can
be applied directly to decoded response bodies.  Unknown fields are
ignored: the server may grow its payloads without breaking the client.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from notectl.domain.types import Granularity, Role


class WireModel(BaseModel):
    """Base for every model decoded from an API response."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Users and auth ---


class User(WireModel):
    id: int
    name: str
    email: str
    role: Role = Role.USER
    created_at: str
    last_login: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AuthResponse(WireModel):
    access_token: str
    token_type: str = "bearer"
    user: User


# --- Notes ---


class Note(WireModel):
    """A note as returned by ``/api/notes``.

    ``tags`` and ``attachments`` arriving as ``null`` are normalised to empty
    lists.  ``created_at`` is always sent by the service; it is optional here
    so that a malformed record still loads and simply drops out of the time
    buckets during aggregation.
    """

    id: int
    title: str
    description: str | None = None
    user_id: int | None = None
    tags: list[str] = Field(default_factory=list)
    attachments: list[str] = Field(default_factory=list)
    pinned: bool = False
    favorite: bool = False
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("tags", "attachments", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class NoteWithOwner(Note):
    owner: User | None = None


class NoteFilters(BaseModel):
    """Server-side filters for ``GET /api/notes``."""

    model_config = ConfigDict(frozen=True)

    search: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    tags: tuple[str, ...] = ()

    def to_params(self) -> dict[str, str]:
        """Query parameters; unset fields are omitted entirely."""
        params: dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.start_date:
            params["start_date"] = self.start_date
        if self.end_date:
            params["end_date"] = self.end_date
        if self.tags:
            params["tags"] = ",".join(self.tags)
        return params


# --- Admin ---


class AdminUserSummary(WireModel):
    name: str
    email: str
    note_count: int = 0
    created_at: str
    last_login: str | None = None
    is_monthly_active: bool = False
    is_yearly_active: bool = False


class AdminTimelinePoint(WireModel):
    label: str
    count: int


class AdminTimeline(WireModel):
    weekly: list[AdminTimelinePoint] = Field(default_factory=list)
    monthly: list[AdminTimelinePoint] = Field(default_factory=list)
    yearly: list[AdminTimelinePoint] = Field(default_factory=list)

    def points(self, granularity: Granularity | str) -> list[AdminTimelinePoint]:
        return list(getattr(self, Granularity(granularity).value))


class AdminStats(WireModel):
    total_users: int = 0
    total_notes: int = 0
    notes_last_7_days: int = 0
    notes_last_30_days: int = 0
    notes_last_365_days: int = 0
    monthly_active_users: int = 0
    annual_active_users: int = 0
    users: list[AdminUserSummary] = Field(default_factory=list)


class TagCount(WireModel):
    tag: str
    count: int


class LabelCount(WireModel):
    label: str
    count: int


class TopUser(WireModel):
    name: str
    email: str
    note_count: int


class AdminAnalytics(WireModel):
    notes_per_tag: list[TagCount] = Field(default_factory=list)
    weekly_activity: list[LabelCount] = Field(default_factory=list)
    top_users: list[TopUser] = Field(default_factory=list)
    notes_timeline: AdminTimeline = Field(default_factory=AdminTimeline)
    users_timeline: AdminTimeline = Field(default_factory=AdminTimeline)
