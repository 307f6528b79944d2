"""Registry adapters."""

from pkgmaint.adapters.base import (
    BaseAdapter,
    PackageNotFoundError,
    parse_package_list,
    strip_version_specifier,
)
from pkgmaint.adapters.pypi import PyPiAdapter

__all__ = [
    "BaseAdapter",
    "PackageNotFoundError",
    "PyPiAdapter",
    "parse_package_list",
    "strip_version_specifier",
]
