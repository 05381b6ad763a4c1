"""
GTM settings component - container ID option management.
"""

from .component import (
    GtmSettingsService,
    run,
    run_delete,
    run_get,
    run_update,
)
from .models import (
    DeleteContainerIdInput,
    DeleteContainerIdOutput,
    GetContainerIdInput,
    GetContainerIdOutput,
    UpdateContainerIdInput,
    UpdateContainerIdOutput,
)
from .ports import OptionStorePort, SettingsErrorReporterPort

__all__ = [
    # Entry points
    "run",
    "run_get",
    "run_update",
    "run_delete",
    # Service
    "GtmSettingsService",
    # Models
    "GetContainerIdInput",
    "GetContainerIdOutput",
    "UpdateContainerIdInput",
    "UpdateContainerIdOutput",
    "DeleteContainerIdInput",
    "DeleteContainerIdOutput",
    # Ports
    "OptionStorePort",
    "SettingsErrorReporterPort",
]
