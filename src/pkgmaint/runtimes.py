"""Python runtime release calendar."""

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType


def _release(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


# First final release of each Python line. Append new lines as they ship;
# existing entries are never edited.
PYTHON_RELEASES: Mapping[str, datetime] = MappingProxyType({
    "3.14": _release(2025, 10, 7),
    "3.13": _release(2024, 10, 7),
    "3.12": _release(2023, 10, 2),
    "3.11": _release(2022, 10, 24),
    "3.10": _release(2021, 10, 4),
    "3.9": _release(2020, 10, 5),
    "3.8": _release(2019, 10, 14),
    "3.7": _release(2018, 6, 27),
    "3.6": _release(2016, 12, 23),
    "3.5": _release(2015, 9, 13),
    "3.4": _release(2014, 3, 16),
    "3.3": _release(2012, 9, 29),
    "3.2": _release(2011, 2, 20),
    "3.1": _release(2009, 6, 27),
    "3.0": _release(2008, 12, 3),
    "2.7": _release(2010, 7, 3),
    "2.6": _release(2008, 10, 1),
})
