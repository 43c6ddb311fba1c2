"""Trace events emitted by the memento components.

Every operation on ``StateHolder`` and ``HistoryStack`` produces exactly one
event (``undo`` produces one per snapshot it tries). Subscribers decide how to
render them; ``patterns.log.console_listener`` prints one line per event.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Literal


# ============================================================================
# Event Types
# ============================================================================


@dataclass(frozen=True)
class StateCreated:
    state: str


@dataclass(frozen=True)
class StateChanged:
    state: str
    reason: Literal["mutate", "restore"]


@dataclass(frozen=True)
class BackupTaken:
    label: str
    created_at: datetime
    size: int  # stack size after the push


@dataclass(frozen=True)
class UndoStarted:
    label: str


@dataclass(frozen=True)
class UndoFailed:
    label: str
    error: str


@dataclass(frozen=True)
class HistoryListed:
    count: int


MementoEvent = (
    StateCreated | StateChanged | BackupTaken | UndoStarted | UndoFailed | HistoryListed
)

Listener = Callable[[MementoEvent], None]


# ============================================================================
# Emitter
# ============================================================================


class EventEmitter:
    """Mixin holding a set of listeners."""

    def __init__(self) -> None:
        self._listeners: set[Listener] = set()

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        """Subscribe to events. Returns an unsubscribe function."""
        self._listeners.add(fn)

        def unsubscribe() -> None:
            self._listeners.discard(fn)

        return unsubscribe

    def _emit(self, event: MementoEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
