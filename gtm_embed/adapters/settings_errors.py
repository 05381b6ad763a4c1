"""
Settings error collector.

Gathers messages raised while saving settings so the admin surface can show
them after the request that triggered them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SettingsErrorEntry:
    setting: str
    code: str
    message: str
    type: str = "error"


class SettingsErrors:
    """Request-scoped collector implementing SettingsErrorReporterPort."""

    def __init__(self) -> None:
        self._entries: list[SettingsErrorEntry] = []

    def add_error(self, setting: str, code: str, message: str) -> None:
        self._entries.append(SettingsErrorEntry(setting=setting, code=code, message=message))

    def get_errors(self, setting: str | None = None) -> list[SettingsErrorEntry]:
        if setting is None:
            return list(self._entries)
        return [e for e in self._entries if e.setting == setting]
