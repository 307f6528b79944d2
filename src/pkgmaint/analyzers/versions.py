"""Dotted version comparison and ``requires_python`` matching."""

import re

_MIN_VERSION_RE = re.compile(r">=([\d.]+)")
_MAX_VERSION_RE = re.compile(r"<([\d.]+)")


def compare_versions(a: str, b: str) -> int:
    """Compare two dotted numeric versions.

    Missing or empty components count as zero, so ``"3"`` equals ``"3.0"``
    and ``"3..6"`` equals ``"3.0.6"``.

    Returns:
        -1 if ``a`` is older, 1 if newer, 0 if equal.
    """
    parts_a = [int(part or 0) for part in a.split(".")]
    parts_b = [int(part or 0) for part in b.split(".")]

    for i in range(max(len(parts_a), len(parts_b))):
        part_a = parts_a[i] if i < len(parts_a) else 0
        part_b = parts_b[i] if i < len(parts_b) else 0
        if part_a > part_b:
            return 1
        if part_a < part_b:
            return -1
    return 0


def version_key(version: str) -> tuple[int, int]:
    """Return ``(major, minor)`` for sorting, minor defaulting to 0."""
    parts = version.split(".")
    major = int(parts[0])
    minor = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    return major, minor


def is_compatible(version: str, constraint: str | None) -> bool:
    """Check whether a runtime version satisfies a ``requires_python`` string.

    Only a ``>=`` lower bound and an optional ``<`` upper bound are read.
    Without a lower bound the constraint is treated as non-committal and the
    version is excluded. A ``<`` marker with no number after it leaves the
    range open above. Other operators (``<=``, ``!=``, ``~=``, ``==``) are
    not interpreted.

    Args:
        version: Runtime version such as ``"3.11"``.
        constraint: Raw constraint, e.g. ``">=3.8, <4"``.
    """
    if not constraint:
        return False

    compact = re.sub(r"\s", "", constraint)
    if ">=" not in compact:
        return False

    min_version = _extract_bound(_MIN_VERSION_RE, compact)
    if not min_version or compare_versions(version, min_version) < 0:
        return False

    if "<" in compact:
        max_version = _extract_bound(_MAX_VERSION_RE, compact)
        if max_version:
            return compare_versions(version, max_version) < 0
    return True


def _extract_bound(pattern: re.Pattern[str], constraint: str) -> str | None:
    match = pattern.search(constraint)
    if not match:
        return None
    return match.group(1).strip(".") or None
