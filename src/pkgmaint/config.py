"""Runtime settings read from the environment."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from pkgmaint.adapters.pypi import PyPiAdapter


class Settings(BaseModel):
    """Settings for registry access.

    Environment variables (a ``.env`` file is loaded by the CLI):
    - PKGMAINT_REGISTRY_URL: JSON API base URL
    - PKGMAINT_TIMEOUT: request timeout in seconds, 0 disables it
    - PKGMAINT_MAX_CONNECTIONS: concurrent connections to the registry
    """

    registry_url: str = PyPiAdapter.PYPI_URL
    timeout: float = Field(default=30.0, ge=0)
    max_connections: int = Field(default=20, ge=1)

    @property
    def request_timeout(self) -> float | None:
        """Timeout to hand to httpx, None when disabled."""
        return self.timeout or None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, ignoring unset ones."""
        environ = os.environ if environ is None else environ
        values = {
            "registry_url": environ.get("PKGMAINT_REGISTRY_URL"),
            "timeout": environ.get("PKGMAINT_TIMEOUT"),
            "max_connections": environ.get("PKGMAINT_MAX_CONNECTIONS"),
        }
        return cls(**{key: value for key, value in values.items() if value})
