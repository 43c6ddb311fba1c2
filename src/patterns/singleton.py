"""Singleton: one lazily created, shared instance."""

from __future__ import annotations

import threading


class Singleton:
    """Access through ``Singleton.get_instance()``; direct construction is refused."""

    _instance: Singleton | None = None
    _lock = threading.Lock()
    _creating = False

    def __init__(self) -> None:
        if not type(self)._creating:
            raise TypeError("Singleton cannot be instantiated directly, use Singleton.get_instance()")

    @classmethod
    def get_instance(cls) -> Singleton:
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._creating = True
                    try:
                        cls._instance = cls()
                    finally:
                        cls._creating = False
        return cls._instance

    @classmethod
    def _reset_instance(cls) -> None:
        """Drop the shared instance. Tests only."""
        with cls._lock:
            cls._instance = None

    def some_business_logic(self) -> str:
        return f"Singleton {id(self):#x} is doing business logic."
