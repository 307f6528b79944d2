"""Abstract base class for registry adapters and query parsing."""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable

# Version specifier operators and whitespace end the bare package name
_SPECIFIER_RE = re.compile(r"[=<>!~\s]")


class BaseAdapter(ABC):
    """Base class for registry adapters.

    An adapter fetches the raw metadata document for one package. All
    interpretation of that document happens in the analyzers.
    """

    @abstractmethod
    async def get_package_json(self, name: str) -> dict:
        """Fetch the raw metadata document for a package.

        Args:
            name: Bare package name.

        Returns:
            Decoded JSON body with ``info`` and ``releases`` keys.

        Raises:
            PackageNotFoundError: If the registry answers with a non-success status.
        """
        ...


def strip_version_specifier(query: str) -> str:
    """Reduce a requirement-like string to its bare package name.

    ``"requests>=2.0,<3.0"`` becomes ``"requests"``; anything from the first
    ``=``, ``<``, ``>``, ``!``, ``~`` or whitespace onwards is dropped.
    """
    return _SPECIFIER_RE.split(query.strip(), maxsplit=1)[0]


def parse_package_list(lines: Iterable[str]) -> list[str]:
    """Turn newline-delimited user input into bare package names.

    Blank lines are skipped; order and duplicates are kept.
    """
    names = []
    for line in lines:
        for raw in line.splitlines():
            name = strip_version_specifier(raw)
            if name:
                names.append(name)
    return names


class PackageNotFoundError(Exception):
    """Raised when the registry does not know a package."""

    def __init__(self, name: str, status_code: int | None = None) -> None:
        self.name = name
        self.status_code = status_code
        super().__init__(f"Package {name} not found")
