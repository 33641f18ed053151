"""Data models module."""

from superai.models.install import (
    STATE_VERSION,
    CopyResult,
    CopyStatus,
    CopyStep,
    InstallReport,
    InstallState,
    UpdateReport,
    utc_timestamp,
)

__all__ = [
    "STATE_VERSION",
    "CopyResult",
    "CopyStatus",
    "CopyStep",
    "InstallReport",
    "InstallState",
    "UpdateReport",
    "utc_timestamp",
]
