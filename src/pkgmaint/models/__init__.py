"""Data models and schemas."""

from pkgmaint.models.schemas import (
    AdoptionRecord,
    MaintenanceStatus,
    PackageError,
    PackageOutcome,
    PackageResult,
    ProjectUrls,
    ReleaseEntry,
)

__all__ = [
    "AdoptionRecord",
    "MaintenanceStatus",
    "PackageError",
    "PackageOutcome",
    "PackageResult",
    "ProjectUrls",
    "ReleaseEntry",
]
