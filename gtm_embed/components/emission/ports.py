"""
Emission component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from gtm_embed.domain.entities import EnvironmentKind


class ContainerIdReaderPort(Protocol):
    """Read side of the option store."""

    def get(self) -> str:
        """Get the stored container ID, or "" if none is stored."""
        ...


class EnvironmentPort(Protocol):
    """Classifies the environment the site runs in."""

    def current(self) -> EnvironmentKind:
        """Get the current environment kind."""
        ...
