"""Release history extraction and cadence estimation."""

import logging
import math
from datetime import datetime, timezone

from pkgmaint.models.schemas import ReleaseEntry

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 60 * 60 * 24

# Number of most recent releases averaged for cadence
CADENCE_WINDOW = 10


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a PyPI upload timestamp as a UTC-aware datetime.

    PyPI's ``upload_time`` carries no offset and is UTC; the
    ``upload_time_iso_8601`` variant ends in ``Z``.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def days_between(later: datetime, earlier: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, rounding half up."""
    delta = (later - earlier).total_seconds() / SECONDS_PER_DAY
    return math.floor(delta + 0.5)


def extract_release_history(releases: dict[str, list[dict]] | None) -> list[ReleaseEntry]:
    """Build the release history from the registry's ``releases`` mapping.

    The first file listed for a version dates that version; the registry's
    ordering of files is trusted. Versions without files (yanked or
    withdrawn uploads) are dropped.

    Args:
        releases: Mapping of version string to list of file records.

    Returns:
        ReleaseEntry list, newest first.
    """
    history = []
    for version, files in (releases or {}).items():
        if not files:
            continue

        first_file = files[0]
        date = parse_timestamp(first_file.get("upload_time")) or parse_timestamp(
            first_file.get("upload_time_iso_8601")
        )
        if date is None:
            logger.debug("Skipping %s: no usable upload time", version)
            continue

        history.append(ReleaseEntry(version=version, date=date))

    history.sort(key=lambda entry: entry.date, reverse=True)
    return history


def calculate_release_frequency(
    history: list[ReleaseEntry],
    window: int = CADENCE_WINDOW,
) -> int | None:
    """Average days between the most recent releases.

    Only the newest ``window`` releases are considered, so the estimate
    tracks recent cadence rather than the whole project lifetime.

    Args:
        history: Release history sorted newest first.
        window: How many recent releases to average over.

    Returns:
        Rounded average gap in days, or None with fewer than two releases.
    """
    if len(history) < 2:
        return None

    recent = history[:window]
    total_days = sum(
        (newer.date - older.date).total_seconds() / SECONDS_PER_DAY
        for newer, older in zip(recent, recent[1:])
    )
    return math.floor(total_days / (len(recent) - 1) + 0.5)
