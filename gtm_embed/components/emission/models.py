"""
Emission component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from gtm_embed.domain.entities import EnvironmentKind


def should_emit(stored_value: str, environment: EnvironmentKind) -> bool:
    """True iff the environment is production and an ID is stored."""
    return environment is EnvironmentKind.PRODUCTION and bool(stored_value)


@dataclass(frozen=True)
class EmissionDecision:
    """
    Per-render snapshot of the stored ID and the environment.

    Computed once at the start of a render and handed to every hook point,
    so the resource hint, head script and body fallback always agree.
    """

    container_id: str
    environment: EnvironmentKind

    @property
    def enabled(self) -> bool:
        return should_emit(self.container_id, self.environment)


@dataclass(frozen=True)
class PageFragments:
    """Everything a single render may add to the page."""

    resource_hints: tuple[str, ...] = ()
    head: str = ""
    body_open: str = ""
