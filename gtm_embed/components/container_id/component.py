"""
Container ID component - normalizes and validates GTM container IDs.

Key behaviors:
- Surrounding whitespace is stripped before anything else
- An empty value is always accepted and clears the setting
- Values are upcased before matching, so "gtm-abc" is stored as "GTM-ABC"
- A value that does not match keeps the previously stored value

Invariant: a stored value is either "" or matches ``^GTM-[A-Z0-9]+$``.
"""

from __future__ import annotations

import re

from gtm_embed.domain.entities import CONTAINER_ID_FORMAT, CONTAINER_ID_OPTION

from .models import ValidateContainerIdInput, ValidationError, ValidationResult

CONTAINER_ID_PATTERN = re.compile(r"^GTM-[A-Z0-9]+$")

INVALID_FORMAT_CODE = "invalid_format"

# Space, tab, newline, carriage return, NUL and vertical tab.
TRIM_CHARACTERS = " \t\n\r\0\x0b"


def format_error_message() -> str:
    """Message shown when a submitted value is rejected."""
    return f"The container ID doesn’t match the required format {CONTAINER_ID_FORMAT}."


def normalize(value: str | None) -> str:
    """
    Trim and upcase a raw value. Empty input stays empty.

    Only ASCII whitespace is trimmed and only ASCII text is upcased; any
    other value is returned trimmed but otherwise untouched, so it can never
    case-map into a valid ID.
    """
    if value is None:
        return ""
    trimmed = value.strip(TRIM_CHARACTERS)
    if not trimmed.isascii():
        return trimmed
    return trimmed.upper()


def is_valid_container_id(value: str) -> bool:
    """Check an already normalized value against the container ID format."""
    return CONTAINER_ID_PATTERN.match(value) is not None


def validate(
    value: str | None,
    previous: str = "",
    *,
    field: str = CONTAINER_ID_OPTION,
) -> ValidationResult:
    """
    Validate a submitted container ID.

    Args:
        value: Raw, untrusted input.
        previous: The value currently on record, returned on rejection.
        field: Name of the setting, used to label the error.

    Returns:
        ValidationResult with the value to store and an optional error.
    """
    normalized = normalize(value)

    if normalized == "":
        return ValidationResult(stored_value="")

    if is_valid_container_id(normalized):
        return ValidationResult(stored_value=normalized)

    return ValidationResult(
        stored_value=previous,
        error=ValidationError(
            field=field,
            code=INVALID_FORMAT_CODE,
            message=format_error_message(),
        ),
    )


def run(inp: ValidateContainerIdInput) -> ValidationResult:
    """Component entry point."""
    return validate(inp.value, inp.previous, field=inp.field)
