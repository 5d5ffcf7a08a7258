"""ViewState — owner of the note collection behind an analytics view.

One-way flow: a completed fetch hands a new collection to :meth:`resolve`,
which replaces the previous one and recomputes the snapshot from scratch.
A failed fetch goes to :meth:`fail` and the aggregator is not run.

There is no request sequencing.  If two fetches overlap, whichever
resolves last wins, even when it carries older data.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from notectl.domain.analytics import AnalyticsSnapshot, aggregate_notes
from notectl.domain.models import Note


@dataclass
class ViewState:
    loading: bool = False
    error: str | None = None
    notes: tuple[Note, ...] = ()
    snapshot: AnalyticsSnapshot = field(default_factory=AnalyticsSnapshot)

    def begin(self) -> None:
        """Mark a fetch in flight; the previous data stays visible."""
        self.loading = True
        self.error = None

    def resolve(self, notes: Sequence[Note]) -> AnalyticsSnapshot:
        self.notes = tuple(notes)
        self.snapshot = aggregate_notes(self.notes)
        self.loading = False
        return self.snapshot

    def fail(self, message: str) -> None:
        self.error = message
        self.loading = False
