"""patterns: small demonstrations of classic object-oriented design patterns."""

from patterns.chain import DogHandler, Handler, MonkeyHandler, SquirrelHandler, client_code
from patterns.config import DemoConfig
from patterns.errors import InvalidSnapshotKind, PatternsError
from patterns.iterator import AlphabeticalOrderIterator, WordsCollection
from patterns.memento import HistoryEntry, HistoryStack, HistoryView, Snapshot, StateHolder
from patterns.singleton import Singleton

__all__ = [
    "AlphabeticalOrderIterator",
    "DemoConfig",
    "DogHandler",
    "Handler",
    "HistoryEntry",
    "HistoryStack",
    "HistoryView",
    "InvalidSnapshotKind",
    "MonkeyHandler",
    "PatternsError",
    "Singleton",
    "Snapshot",
    "SquirrelHandler",
    "StateHolder",
    "WordsCollection",
    "client_code",
]
