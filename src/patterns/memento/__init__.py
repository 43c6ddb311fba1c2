"""Memento pattern: an originator, its snapshots, and a caretaker stack."""

from patterns.errors import InvalidSnapshotKind
from patterns.memento.history import HistoryStack, HistoryView
from patterns.memento.holder import StateHolder
from patterns.memento.snapshot import HistoryEntry, Snapshot

__all__ = [
    "HistoryEntry",
    "HistoryStack",
    "HistoryView",
    "InvalidSnapshotKind",
    "Snapshot",
    "StateHolder",
]
