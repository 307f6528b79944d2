"""Python release adoption lag."""

from collections.abc import Iterable, Mapping
from datetime import datetime

from pkgmaint.analyzers.history import days_between
from pkgmaint.analyzers.versions import version_key
from pkgmaint.models.schemas import AdoptionRecord, ReleaseEntry
from pkgmaint.runtimes import PYTHON_RELEASES

# Oldest Python line still tracked for adoption; older lines are EOL
ADOPTION_FLOOR = (3, 9)


def calculate_adoption_times(
    history: list[ReleaseEntry],
    claimed_versions: Iterable[str],
    runtime_releases: Mapping[str, datetime] = PYTHON_RELEASES,
    floor: tuple[int, int] = ADOPTION_FLOOR,
) -> dict[str, AdoptionRecord]:
    """Measure how long a package took to ship after each Python release.

    For every runtime version at or above ``floor``, the lag is the number
    of days between the Python release and the earliest package release made
    on or after that date. Versions below the floor are left out entirely.

    Args:
        history: Release history in any order.
        claimed_versions: Python versions the package claims to support.
        runtime_releases: Runtime version to release date.
        floor: Lowest ``(major, minor)`` to report on.

    Returns:
        Mapping of runtime version to AdoptionRecord, newest version first.
    """
    claimed = set(claimed_versions)
    adoption: dict[str, AdoptionRecord] = {}

    for py_version in sorted(runtime_releases, key=version_key, reverse=True):
        if version_key(py_version) < floor:
            continue

        if py_version not in claimed:
            adoption[py_version] = AdoptionRecord(supported=False)
            continue

        py_release_date = runtime_releases[py_version]
        qualifying = [entry.date for entry in history if entry.date >= py_release_date]
        if not qualifying:
            adoption[py_version] = AdoptionRecord(supported=True, no_data=True)
            continue

        adoption[py_version] = AdoptionRecord(
            supported=True,
            days=days_between(min(qualifying), py_release_date),
        )

    return adoption
