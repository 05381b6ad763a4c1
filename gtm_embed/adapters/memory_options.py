"""In-memory option store, used for tests and ephemeral runs."""

from __future__ import annotations


class InMemoryOptionStore:
    """Holds a single option value in process memory."""

    def __init__(self, initial: str | None = None) -> None:
        self._value = initial

    def get(self) -> str:
        return self._value or ""

    def set(self, value: str) -> None:
        self._value = value

    def delete(self) -> None:
        self._value = None

    def exists(self) -> bool:
        return self._value is not None
