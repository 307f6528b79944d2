"""Pydantic models for package maintenance data."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class MaintenanceStatus(str, Enum):
    """Coarse maintenance classification."""

    ACTIVE = "active"  # Recent release and supports current Python
    MODERATE = "moderate"  # Supports current Python, release within a year
    POOR = "poor"  # Stale, or missing support for the previous Python line
    UNKNOWN = "unknown"  # No release data at all


class ReleaseEntry(BaseModel):
    """A package version and the upload time of its first file."""

    version: str
    date: datetime


class AdoptionRecord(BaseModel):
    """How a package picked up one Python release."""

    supported: bool = False
    days: int | None = None  # Days from Python release to first package release after it
    no_data: bool = False  # Claimed, but no release on/after the Python release date


class ProjectUrls(BaseModel):
    """Links pulled from ``project_urls`` and ``home_page``."""

    homepage: str | None = None
    repository: str | None = None
    docs: str | None = None
    changelog: str | None = None


class PackageResult(BaseModel):
    """Maintenance report for one package."""

    name: str
    version: str = ""
    summary: str | None = None
    author: str | None = None
    dependency_count: int | None = None  # None when requires_dist is missing
    project_urls: ProjectUrls = Field(default_factory=ProjectUrls)
    python_versions: list[str] = Field(default_factory=list)
    last_release: datetime | None = None
    recent_releases: list[ReleaseEntry] = Field(default_factory=list)
    total_releases: int = 0
    release_frequency: int | None = None  # Average days between recent releases
    python_adoption: dict[str, AdoptionRecord] = Field(default_factory=dict)
    maintenance_status: MaintenanceStatus = MaintenanceStatus.UNKNOWN
    checked_at: datetime

    @property
    def is_error(self) -> bool:
        return False


class PackageError(BaseModel):
    """A package lookup that failed as a whole."""

    name: str
    error: str

    @property
    def is_error(self) -> bool:
        return True


PackageOutcome = PackageResult | PackageError
