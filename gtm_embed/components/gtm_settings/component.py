"""
GTM settings component - reads, writes and removes the container ID option.

Key behaviors:
- GET returns "" when nothing is stored
- UPDATE runs every submission through the container ID validator
- A rejected submission leaves the stored value alone and reports the error
- DELETE removes the option (uninstall)
"""

from __future__ import annotations

import logging

from gtm_embed.components.container_id import validate

from .models import (
    DeleteContainerIdInput,
    DeleteContainerIdOutput,
    GetContainerIdInput,
    GetContainerIdOutput,
    UpdateContainerIdInput,
    UpdateContainerIdOutput,
)
from .ports import OptionStorePort, SettingsErrorReporterPort

logger = logging.getLogger(__name__)


# --- Component Entry Points ---


def run_get(
    inp: GetContainerIdInput,
    *,
    store: OptionStorePort,
) -> GetContainerIdOutput:
    """
    Get the stored container ID.

    Args:
        inp: Input (empty for get operation).
        store: Option store port.

    Returns:
        GetContainerIdOutput with the stored value or "".
    """
    return GetContainerIdOutput(container_id=store.get() or "")


def run_update(
    inp: UpdateContainerIdInput,
    *,
    store: OptionStorePort,
    errors: SettingsErrorReporterPort | None = None,
) -> UpdateContainerIdOutput:
    """
    Validate and store a submitted container ID.

    Args:
        inp: Input containing the raw submitted value.
        store: Option store port.
        errors: Optional channel the rejection message is reported to.

    Returns:
        UpdateContainerIdOutput with the value now on record.
    """
    previous = store.get() or ""
    result = validate(inp.value, previous)

    if result.error is not None:
        logger.warning("Rejected container ID %r: %s", inp.value, result.error.message)
        if errors is not None:
            errors.add_error(result.error.field, result.error.code, result.error.message)
        return UpdateContainerIdOutput(
            container_id=result.stored_value,
            errors=[result.error],
            success=False,
        )

    if result.stored_value != previous:
        store.set(result.stored_value)
        logger.info("Container ID updated to %r", result.stored_value)

    return UpdateContainerIdOutput(container_id=result.stored_value)


def run_delete(
    inp: DeleteContainerIdInput,
    *,
    store: OptionStorePort,
) -> DeleteContainerIdOutput:
    """Remove the option from the store."""
    store.delete()
    logger.info("Container ID option deleted")
    return DeleteContainerIdOutput()


def run(
    inp: GetContainerIdInput | UpdateContainerIdInput | DeleteContainerIdInput,
    *,
    store: OptionStorePort,
    errors: SettingsErrorReporterPort | None = None,
) -> GetContainerIdOutput | UpdateContainerIdOutput | DeleteContainerIdOutput:
    """
    Main entry point for the GTM settings component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GetContainerIdInput):
        return run_get(inp, store=store)
    elif isinstance(inp, UpdateContainerIdInput):
        return run_update(inp, store=store, errors=errors)
    elif isinstance(inp, DeleteContainerIdInput):
        return run_delete(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")


# --- Service ---


class GtmSettingsService:
    """Convenience wrapper binding the entry points to a store."""

    def __init__(
        self,
        store: OptionStorePort,
        errors: SettingsErrorReporterPort | None = None,
    ) -> None:
        self._store = store
        self._errors = errors

    def get(self) -> str:
        return run_get(GetContainerIdInput(), store=self._store).container_id

    def update(self, value: str | None) -> UpdateContainerIdOutput:
        return run_update(UpdateContainerIdInput(value=value), store=self._store, errors=self._errors)

    def delete(self) -> None:
        run_delete(DeleteContainerIdInput(), store=self._store)
