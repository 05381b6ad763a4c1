"""
Container ID component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from gtm_embed.domain.entities import CONTAINER_ID_OPTION


@dataclass(frozen=True)
class ValidationError:
    """Format rejection with a message fit for an administrator."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidateContainerIdInput:
    """Input for validating a submitted container ID."""

    value: str | None
    previous: str = ""
    field: str = CONTAINER_ID_OPTION


@dataclass(frozen=True)
class ValidationResult:
    """Value to store plus the rejection, if any."""

    stored_value: str
    error: ValidationError | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None
