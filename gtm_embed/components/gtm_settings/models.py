"""
GTM settings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gtm_embed.components.container_id import ValidationError


@dataclass(frozen=True)
class GetContainerIdInput:
    """Input for reading the stored container ID."""

    pass


@dataclass(frozen=True)
class GetContainerIdOutput:
    """Output from reading the stored container ID."""

    container_id: str


@dataclass(frozen=True)
class UpdateContainerIdInput:
    """Input for an administrator submission."""

    value: str | None


@dataclass(frozen=True)
class UpdateContainerIdOutput:
    """Output from an update; errors is empty when the value was accepted."""

    container_id: str
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class DeleteContainerIdInput:
    """Input for removing the option on uninstall."""

    pass


@dataclass(frozen=True)
class DeleteContainerIdOutput:
    """Output from removing the option."""

    deleted: bool = True
