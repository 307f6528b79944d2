"""Maintenance status classification."""

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from pkgmaint.analyzers.history import SECONDS_PER_DAY
from pkgmaint.analyzers.versions import version_key
from pkgmaint.models.schemas import MaintenanceStatus
from pkgmaint.runtimes import PYTHON_RELEASES


class MaintenanceScorer:
    """Classifies a package as active, moderate, poor or unknown.

    Rules, in order:
    - No release on record: unknown
    - Does not claim the second-newest Python 3 line: poor
    - Last release under ACTIVE_DAYS ago: active
    - Last release under MODERATE_DAYS ago: moderate
    - Otherwise: poor

    The status is recomputed from scratch on every call.
    """

    ACTIVE_DAYS = 180
    MODERATE_DAYS = 365

    def __init__(self, runtime_releases: Mapping[str, datetime] = PYTHON_RELEASES) -> None:
        """Initialize the scorer.

        Args:
            runtime_releases: Runtime version to release date.
        """
        self.runtime_releases = runtime_releases
        self.latest_python_versions = sorted(
            (v for v in runtime_releases if v.startswith("3.")),
            key=version_key,
            reverse=True,
        )[:2]

    @property
    def required_python_version(self) -> str | None:
        """The Python line a package must claim to avoid a poor rating."""
        if len(self.latest_python_versions) < 2:
            return None
        return self.latest_python_versions[1]

    def classify(
        self,
        last_release: datetime | None,
        release_frequency: int | None,
        python_versions: Iterable[str],
        now: datetime | None = None,
    ) -> MaintenanceStatus:
        """Classify maintenance status.

        Args:
            last_release: Date of the newest release, if any.
            release_frequency: Cadence in days. Accepted but not used by the
                current rules.
            python_versions: Claimed Python versions.
            now: Reference time, defaults to the current UTC time.

        Returns:
            MaintenanceStatus for the package.
        """
        if last_release is None:
            return MaintenanceStatus.UNKNOWN

        required = self.required_python_version
        if required is not None and required not in set(python_versions):
            return MaintenanceStatus.POOR

        now = now or datetime.now(timezone.utc)
        days_since_release = (now - last_release).total_seconds() / SECONDS_PER_DAY

        if days_since_release < self.ACTIVE_DAYS:
            return MaintenanceStatus.ACTIVE
        elif days_since_release < self.MODERATE_DAYS:
            return MaintenanceStatus.MODERATE
        else:
            return MaintenanceStatus.POOR
