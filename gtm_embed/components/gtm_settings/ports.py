"""
GTM settings component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class OptionStorePort(Protocol):
    """Persistent storage for the single container ID option."""

    def get(self) -> str:
        """Get the stored value, or "" if the option is absent."""
        ...

    def set(self, value: str) -> None:
        """Create or overwrite the option."""
        ...

    def delete(self) -> None:
        """Remove the option entirely."""
        ...


class SettingsErrorReporterPort(Protocol):
    """Channel for messages shown to the administrator after a save."""

    def add_error(self, setting: str, code: str, message: str) -> None:
        """Register an error for a setting."""
        ...
