"""PyPI registry adapter."""

import logging

import httpx

from pkgmaint.adapters.base import BaseAdapter, PackageNotFoundError

logger = logging.getLogger(__name__)


class PyPiAdapter(BaseAdapter):
    """Adapter for the Python Package Index (PyPI).

    Data source:
    - Package metadata: https://pypi.org/pypi/{package}/json
    """

    PYPI_URL = "https://pypi.org/pypi"

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        registry_url: str | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        """Initialize the adapter.

        Args:
            client: Optional httpx client for making requests.
            registry_url: Base URL of the JSON API, defaults to PyPI.
            timeout: Request timeout in seconds for clients created here.
                None disables the timeout.
        """
        self._client = client
        self.registry_url = (registry_url or self.PYPI_URL).rstrip("/")
        self.timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create an HTTP client."""
        if self._client is not None:
            return self._client
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def _get(self, url: str) -> httpx.Response:
        """GET a URL, closing the client afterwards if it was created here."""
        client = await self._get_client()
        try:
            return await client.get(url)
        finally:
            if self._client is None:
                await client.aclose()

    async def get_package_json(self, name: str) -> dict:
        """Fetch the JSON metadata document for a PyPI package.

        Args:
            name: Bare package name, sent as given.

        Returns:
            Decoded body with ``info`` and ``releases``.

        Raises:
            PackageNotFoundError: On any non-2xx response.
            httpx.HTTPError: If the request itself fails.
            ValueError: If the body is not valid JSON.
        """
        url = f"{self.registry_url}/{name}/json"
        logger.debug("Fetching %s", url)

        response = await self._get(url)
        if not response.is_success:
            logger.debug("%s answered %s", url, response.status_code)
            raise PackageNotFoundError(name, response.status_code)

        return response.json()
