"""Claims a package makes about itself in its PyPI ``info`` block."""

import re
from collections.abc import Mapping
from datetime import datetime

from pkgmaint.analyzers.versions import is_compatible, version_key
from pkgmaint.models.schemas import ProjectUrls
from pkgmaint.runtimes import PYTHON_RELEASES

_CLASSIFIER_RE = re.compile(r"Programming Language :: Python :: (\d+\.?\d*)")

# project_urls key fragments per link type, checked in this order
_URL_CATEGORIES = [
    ("changelog", ("changelog", "change", "release")),
    ("docs", ("doc",)),
    ("homepage", ("home", "website")),
    ("repository", ("repo", "source", "github", "gitlab", "bitbucket")),
]


def extract_python_versions(
    info: dict,
    runtime_releases: Mapping[str, datetime] = PYTHON_RELEASES,
) -> list[str]:
    """Collect the Python versions a package claims to support.

    Two sources are merged, since either may be missing or vague:

    - every known runtime version that satisfies ``requires_python``
    - the version in each ``Programming Language :: Python :: X.Y``
      classifier, taken as written (so ``"3"`` or ``"2"`` can appear even
      though they are not in the release table)

    Args:
        info: The ``info`` object from the PyPI JSON response.
        runtime_releases: Known runtime versions to test the constraint against.

    Returns:
        Unique versions, newest first.
    """
    versions: set[str] = set()

    requires_python = info.get("requires_python")
    if requires_python:
        for version in runtime_releases:
            if is_compatible(version, requires_python):
                versions.add(version)

    for classifier in info.get("classifiers") or []:
        match = _CLASSIFIER_RE.search(classifier)
        if match:
            versions.add(match.group(1))

    return sorted(versions, key=lambda v: (version_key(v), v), reverse=True)


def extract_project_urls(info: dict) -> ProjectUrls:
    """Sort ``project_urls`` entries into homepage/repository/docs/changelog.

    Keys are matched case-insensitively on substrings. ``home_page`` is used
    when no project URL looks like a homepage.
    """
    urls: dict[str, str] = {}

    for key, url in (info.get("project_urls") or {}).items():
        lower_key = key.lower()
        for category, fragments in _URL_CATEGORIES:
            if any(fragment in lower_key for fragment in fragments):
                urls[category] = url
                break

    if not urls.get("homepage") and info.get("home_page"):
        urls["homepage"] = info["home_page"]

    return ProjectUrls(**urls)


def count_dependencies(info: dict) -> int | None:
    """Number of ``requires_dist`` entries, extras included.

    Returns None when the registry gives no dependency list.
    """
    requires_dist = info.get("requires_dist")
    if not requires_dist:
        return None
    return len(requires_dist)
