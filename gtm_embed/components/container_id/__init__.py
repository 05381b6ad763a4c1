"""
Container ID component - GTM container ID validation.
"""

from .component import (
    CONTAINER_ID_PATTERN,
    INVALID_FORMAT_CODE,
    format_error_message,
    is_valid_container_id,
    normalize,
    run,
    validate,
)
from .models import ValidateContainerIdInput, ValidationError, ValidationResult

__all__ = [
    # Entry points
    "run",
    "validate",
    # Helpers
    "normalize",
    "is_valid_container_id",
    "format_error_message",
    # Constants
    "CONTAINER_ID_PATTERN",
    "INVALID_FORMAT_CODE",
    # Models
    "ValidateContainerIdInput",
    "ValidationError",
    "ValidationResult",
]
