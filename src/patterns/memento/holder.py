"""The originator: owns a state string, snapshots and restores it."""

from __future__ import annotations

import random
import string
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from patterns.config import DemoConfig
from patterns.errors import InvalidSnapshotKind
from patterns.events import EventEmitter, Listener, StateChanged, StateCreated
from patterns.memento.snapshot import format_label

_ALLOWED_SYMBOLS = string.ascii_letters


@dataclass(frozen=True)
class _StateSnapshot:
    """Concrete snapshot. Only ``StateHolder`` reads ``state``."""

    state: str = field(repr=False)
    created_at: datetime = field(default_factory=datetime.now)
    preview_length: int = field(default=9, repr=False)

    @property
    def preview(self) -> str:
        return self.state[: self.preview_length]

    @property
    def label(self) -> str:
        return format_label(self.created_at, self.preview)


class StateHolder(EventEmitter):
    """Holds a single state string that business logic keeps replacing."""

    def __init__(
        self,
        state: str,
        *,
        config: DemoConfig | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
        listener: Listener | None = None,
    ) -> None:
        super().__init__()
        if not isinstance(state, str):
            raise TypeError(f"state must be a string, got {type(state).__name__}")
        self._config = config or DemoConfig()
        self._rng = rng or random.Random(self._config.seed)
        self._sleep = sleep
        self._state = state
        if listener is not None:
            self.subscribe(listener)
        self._emit(StateCreated(state=state))

    @property
    def state(self) -> str:
        return self._state

    def mutate(self) -> None:
        """Replace the state with a freshly generated random string."""
        self._state = self._generate_state(self._config.state_length)
        self._emit(StateChanged(state=self._state, reason="mutate"))

    def snapshot(self) -> _StateSnapshot:
        """Capture the current state."""
        return _StateSnapshot(
            state=self._state,
            preview_length=self._config.preview_length,
        )

    def restore(self, snapshot: object) -> None:
        """Restore the state captured by ``snapshot``.

        Raises:
            InvalidSnapshotKind: ``snapshot`` was not produced by ``snapshot()``.
                The current state is left untouched.
        """
        if not isinstance(snapshot, _StateSnapshot):
            raise InvalidSnapshotKind(snapshot)
        self._state = snapshot.state
        self._emit(StateChanged(state=self._state, reason="restore"))

    def _generate_state(self, length: int) -> str:
        chars: list[str] = []
        for _ in range(length):
            chars.append(self._rng.choice(_ALLOWED_SYMBOLS))
            if self._config.char_delay:
                self._sleep(self._config.char_delay)
        return "".join(chars)
