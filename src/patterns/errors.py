"""Exceptions raised by the pattern demonstrations."""

from __future__ import annotations


class PatternsError(Exception):
    """Base class for errors raised by this package."""


class InvalidSnapshotKind(PatternsError):
    """A snapshot of a foreign type was handed to ``StateHolder.restore``."""

    def __init__(self, snapshot: object) -> None:
        self.snapshot = snapshot
        super().__init__(f"Unknown snapshot class {type(snapshot).__name__}")
