"""Read-only snapshot view shared between the originator and the caretaker.

The caretaker only ever sees this protocol. The concrete snapshot type, the
one carrying the captured state, lives in ``patterns.memento.holder``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

LABEL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@runtime_checkable
class Snapshot(Protocol):
    """Metadata of a captured state. Does not expose the state itself."""

    @property
    def created_at(self) -> datetime: ...

    @property
    def preview(self) -> str: ...

    @property
    def label(self) -> str: ...


@dataclass(frozen=True)
class HistoryEntry:
    """One row of ``HistoryStack.history()``."""

    created_at: datetime
    preview: str
    label: str

    def __str__(self) -> str:
        return self.label


def format_label(created_at: datetime, preview: str) -> str:
    return f"{created_at.strftime(LABEL_TIME_FORMAT)} / ({preview})..."
