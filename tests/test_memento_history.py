"""Tests for patterns.memento.history.HistoryStack -- the caretaker."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from patterns.config import DemoConfig
from patterns.events import BackupTaken, HistoryListed, UndoFailed, UndoStarted
from patterns.memento import HistoryEntry, HistoryStack, StateHolder


@dataclass(frozen=True)
class CorruptSnapshot:
    created_at: datetime = datetime(2024, 1, 1, 12, 0, 0)
    preview: str = "corrupt"
    label: str = "corrupt entry"


def _make(state: str = "init") -> tuple[StateHolder, HistoryStack]:
    holder = StateHolder(state, config=DemoConfig(seed=11))
    return holder, HistoryStack(holder)


class TestHistoryStackUndo:
    """LIFO restore semantics."""

    def test_undo_restores_in_lifo_order(self) -> None:
        holder, stack = _make("A")
        stack.backup()
        holder.mutate()
        b = holder.state
        stack.backup()
        holder.mutate()
        assert holder.state not in ("A", b)

        assert stack.undo() is True
        assert holder.state == b
        assert stack.undo() is True
        assert holder.state == "A"
        assert stack.undo() is False
        assert holder.state == "A"

    def test_undo_right_after_backup_keeps_state(self) -> None:
        holder, stack = _make("init")
        stack.backup()
        holder.mutate()
        x = holder.state
        stack.backup()

        stack.undo()
        assert holder.state == x
        stack.undo()
        assert holder.state == "init"

    def test_undo_on_empty_stack_is_noop(self) -> None:
        holder, stack = _make("init")
        assert stack.undo() is False
        assert stack.undo() is False
        assert holder.state == "init"
        assert len(stack) == 0

    def test_undo_on_empty_stack_emits_nothing(self) -> None:
        _, stack = _make()
        events: list = []
        stack.subscribe(events.append)
        stack.undo()
        assert events == []


class TestHistoryStackCorruptEntries:
    """Snapshots the holder rejects are skipped."""

    def test_corrupt_top_entry_falls_back_to_older(self) -> None:
        holder, stack = _make("init")
        stack.backup()
        holder.mutate()
        stack._snapshots.append(CorruptSnapshot())

        assert stack.undo() is True
        assert holder.state == "init"
        assert len(stack) == 0

    def test_only_corrupt_entries_leaves_state_alone(self) -> None:
        holder, stack = _make("init")
        stack._snapshots.extend([CorruptSnapshot(), CorruptSnapshot()])

        assert stack.undo() is False
        assert holder.state == "init"
        assert len(stack) == 0

    def test_many_corrupt_entries_do_not_recurse(self) -> None:
        holder, stack = _make("init")
        stack.backup()
        holder.mutate()
        stack._snapshots.extend(CorruptSnapshot() for _ in range(2000))

        assert stack.undo() is True
        assert holder.state == "init"

    def test_failure_is_logged_and_emitted(self, caplog) -> None:
        holder, stack = _make("init")
        stack.backup()
        stack._snapshots.append(CorruptSnapshot())
        events: list = []
        stack.subscribe(events.append)

        with caplog.at_level(logging.WARNING, logger="patterns.memento.history"):
            stack.undo()

        assert "corrupt entry" in caplog.text
        assert events[0] == UndoStarted(label="corrupt entry")
        assert isinstance(events[1], UndoFailed)
        assert events[1].label == "corrupt entry"
        assert "CorruptSnapshot" in events[1].error
        assert isinstance(events[2], UndoStarted)
        assert len(events) == 3


class TestHistoryStackListing:
    def test_history_length_tracks_backups_and_undos(self) -> None:
        holder, stack = _make()
        assert len(stack.history()) == 0
        stack.backup()
        holder.mutate()
        stack.backup()
        assert len(stack.history()) == 2
        stack.undo()
        assert len(stack.history()) == 1
        stack.undo()
        stack.undo()
        assert len(stack.history()) == 0

    def test_history_is_oldest_first(self) -> None:
        holder, stack = _make("Super-duper-super-puper-super.")
        stack.backup()
        holder.mutate()
        second_preview = holder.state[:9]
        stack.backup()

        entries = list(stack.history())
        assert [e.preview for e in entries] == ["Super-dup", second_preview]
        assert all(isinstance(e, HistoryEntry) for e in entries)

    def test_history_is_reiterable(self) -> None:
        holder, stack = _make()
        stack.backup()
        holder.mutate()
        stack.backup()

        view = stack.history()
        assert list(view) == list(view)

    def test_history_view_is_detached_from_later_backups(self) -> None:
        _, stack = _make()
        stack.backup()
        view = stack.history()
        stack.backup()
        assert len(view) == 1
        assert len(stack) == 2

    def test_entry_str_is_label(self) -> None:
        _, stack = _make()
        stack.backup()
        entry = next(iter(stack.history()))
        assert str(entry) == entry.label

    def test_history_emits_listing_event(self) -> None:
        _, stack = _make()
        stack.backup()
        events: list = []
        stack.subscribe(events.append)
        stack.history()
        assert events == [HistoryListed(count=1)]


class TestHistoryStackBackupEvents:
    def test_backup_emits_label_and_size(self) -> None:
        _, stack = _make("init")
        events: list = []
        stack.subscribe(events.append)
        stack.backup()
        stack.backup()

        assert [e.size for e in events] == [1, 2]
        assert all(isinstance(e, BackupTaken) for e in events)
        assert events[0].label.endswith("/ (init)...")
