"""Iterator pattern: a words collection with a restartable, reversible iterator."""

from __future__ import annotations

from collections.abc import Iterable


class AlphabeticalOrderIterator:
    """Walks a ``WordsCollection`` in insertion order, or backwards.

    The position starts before the first element; ``move_next`` advances it.
    ``reset`` rewinds so the same iterator can be walked again.
    """

    def __init__(self, collection: WordsCollection, reverse: bool = False) -> None:
        self._collection = collection
        self._reverse = reverse
        self._position = self._start()

    def _start(self) -> int:
        return len(self._collection.items) if self._reverse else -1

    def key(self) -> int:
        self._check_position()
        return self._position

    def current(self) -> str:
        self._check_position()
        return self._collection.items[self._position]

    def move_next(self) -> bool:
        updated = self._position + (-1 if self._reverse else 1)
        if 0 <= updated < len(self._collection.items):
            self._position = updated
            return True
        return False

    def reset(self) -> None:
        self._position = self._start()

    def __iter__(self) -> AlphabeticalOrderIterator:
        return self

    def __next__(self) -> str:
        if not self.move_next():
            raise StopIteration
        return self.current()

    def _check_position(self) -> None:
        if not 0 <= self._position < len(self._collection.items):
            raise IndexError("iterator is not positioned on an element")


class WordsCollection:
    """Ordered list of words; ``reverse_direction`` flips future iterators."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = list(items)
        self._reverse = False

    @property
    def items(self) -> list[str]:
        return self._items

    @property
    def reversed(self) -> bool:
        return self._reverse

    def add_item(self, item: str) -> None:
        self._items.append(item)

    def reverse_direction(self) -> None:
        self._reverse = not self._reverse

    def __iter__(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self, self._reverse)

    def __len__(self) -> int:
        return len(self._items)
