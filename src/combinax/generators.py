"""Counter-backed unique string generation."""

from __future__ import annotations

import threading


class UniqueStringGenerator:
    """Owns a private counter; each call returns ``prefix`` plus the next value."""

    def __init__(self, start: int = 0) -> None:
        if not isinstance(start, int) or isinstance(start, bool):
            raise TypeError(f"start must be an integer, got {type(start).__name__}")
        self._count = start
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return self._count

    def unique_string(self, prefix: str = "") -> str:
        with self._lock:
            current = self._count
            self._count += 1
        return f"{prefix}{current}"

    def __call__(self, prefix: str = "") -> str:
        return self.unique_string(prefix)

    def __repr__(self) -> str:
        return f"UniqueStringGenerator(count={self._count})"
