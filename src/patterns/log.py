"""Colored console narration of memento events."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import click

from patterns.events import (
    BackupTaken,
    HistoryListed,
    MementoEvent,
    StateChanged,
    StateCreated,
    UndoFailed,
    UndoStarted,
)

# ── ANSI helpers ─────────────────────────────────────────────────────

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BLUE = "\033[34m"
_DIM = "\033[2m"
_RESET = "\033[0m"


def _timestamp() -> str:
    now = datetime.now()
    return f"[{now.strftime('%H:%M:%S')}]"


# ── Formatting ───────────────────────────────────────────────────────


def format_event(event: MementoEvent) -> str:
    """Render an event as a single plain line of narration."""
    if isinstance(event, StateCreated):
        return f"Originator: My initial state is: {event.state}"
    if isinstance(event, StateChanged):
        if event.reason == "mutate":
            return f"Originator: I'm doing something important, my state has changed to: {event.state}"
        return f"Originator: My state has changed to: {event.state}"
    if isinstance(event, BackupTaken):
        return f"Caretaker: Saving Originator's state... ({event.size} saved)"
    if isinstance(event, UndoStarted):
        return f"Caretaker: Restoring state to: {event.label}"
    if isinstance(event, UndoFailed):
        return f"Caretaker: Could not restore {event.label}: {event.error}"
    if isinstance(event, HistoryListed):
        return f"Caretaker: Here's the list of mementos ({event.count}):"
    raise TypeError(f"Unknown event type: {type(event).__name__}")


def _color(event: MementoEvent) -> str:
    if isinstance(event, (StateCreated, StateChanged)):
        return _GREEN
    if isinstance(event, UndoFailed):
        return _YELLOW
    return _BLUE


# ── Listeners ────────────────────────────────────────────────────────


def console_listener(
    echo: Callable[[str], None] = click.echo, *, color: bool = True
) -> Callable[[MementoEvent], None]:
    """Build a listener that writes one timestamped line per event."""

    def listener(event: MementoEvent) -> None:
        line = f"{_timestamp()} {format_event(event)}"
        if color:
            line = f"{_color(event)}{line}{_RESET}"
        echo(line)

    return listener


def dim(text: str) -> str:
    return f"{_DIM}{text}{_RESET}"
