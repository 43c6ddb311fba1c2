"""The caretaker: a LIFO stack of snapshots taken from one ``StateHolder``."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from patterns.errors import InvalidSnapshotKind
from patterns.events import BackupTaken, EventEmitter, HistoryListed, UndoFailed, UndoStarted
from patterns.memento.snapshot import HistoryEntry, Snapshot

if TYPE_CHECKING:
    from patterns.memento.holder import StateHolder

logger = logging.getLogger(__name__)


class HistoryView:
    """Lazy, re-iterable listing of the snapshots present when it was created."""

    def __init__(self, snapshots: Sequence[Snapshot]) -> None:
        self._snapshots = tuple(snapshots)

    def __iter__(self) -> Iterator[HistoryEntry]:
        for snapshot in self._snapshots:
            yield HistoryEntry(
                created_at=snapshot.created_at,
                preview=snapshot.preview,
                label=snapshot.label,
            )

    def __len__(self) -> int:
        return len(self._snapshots)


class HistoryStack(EventEmitter):
    """Backs up and restores a ``StateHolder`` without looking inside snapshots."""

    def __init__(self, holder: StateHolder) -> None:
        super().__init__()
        self._holder = holder
        self._snapshots: list[Snapshot] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def backup(self) -> None:
        """Push a snapshot of the holder's current state."""
        snapshot = self._holder.snapshot()
        self._snapshots.append(snapshot)
        self._emit(
            BackupTaken(
                label=snapshot.label,
                created_at=snapshot.created_at,
                size=len(self._snapshots),
            )
        )

    def undo(self) -> bool:
        """Pop the most recent snapshot and restore it into the holder.

        Snapshots the holder rejects are dropped and the next older one is
        tried. Returns ``True`` once a restore succeeds, ``False`` when the
        stack runs out (including when it was empty to begin with).
        """
        while self._snapshots:
            snapshot = self._snapshots.pop()
            self._emit(UndoStarted(label=snapshot.label))
            try:
                self._holder.restore(snapshot)
            except InvalidSnapshotKind as e:
                logger.warning("Skipping unrestorable snapshot %s: %s", snapshot.label, e)
                self._emit(UndoFailed(label=snapshot.label, error=str(e)))
                continue
            return True
        return False

    def history(self) -> HistoryView:
        """List stored snapshots, oldest first."""
        view = HistoryView(self._snapshots)
        self._emit(HistoryListed(count=len(view)))
        return view
