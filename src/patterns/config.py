"""Configuration for the demos. Values can be overridden from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "PATTERNS_"


@dataclass
class DemoConfig:
    """Knobs for the memento demo."""

    state_length: int = 30
    preview_length: int = 9
    char_delay: float = 0.0  # seconds slept per generated character
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.state_length < 1:
            raise ValueError(f"state_length must be positive, got {self.state_length}")
        if self.preview_length < 0:
            raise ValueError(f"preview_length must not be negative, got {self.preview_length}")
        if self.char_delay < 0:
            raise ValueError(f"char_delay must not be negative, got {self.char_delay}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DemoConfig:
        """Build a config from ``PATTERNS_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()
        config.state_length = _read(env, "STATE_LENGTH", int, config.state_length)
        config.preview_length = _read(env, "PREVIEW_LENGTH", int, config.preview_length)
        config.char_delay = _read(env, "CHAR_DELAY", float, config.char_delay)
        config.seed = _read(env, "SEED", int, config.seed)
        config.__post_init__()
        return config


def _read(env: Mapping[str, str], name: str, convert, default):
    key = ENV_PREFIX + name
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {raw!r}") from None
