"""Per-package maintenance pipeline and batch fan-out."""

import asyncio
import logging
from collections.abc import Mapping
from datetime import datetime, timezone

import httpx

from pkgmaint.adapters.base import BaseAdapter, PackageNotFoundError
from pkgmaint.adapters.pypi import PyPiAdapter
from pkgmaint.analyzers.adoption import calculate_adoption_times
from pkgmaint.analyzers.claims import (
    count_dependencies,
    extract_project_urls,
    extract_python_versions,
)
from pkgmaint.analyzers.history import (
    calculate_release_frequency,
    extract_release_history,
)
from pkgmaint.analyzers.scorer import MaintenanceScorer
from pkgmaint.config import Settings
from pkgmaint.models.schemas import PackageError, PackageOutcome, PackageResult
from pkgmaint.runtimes import PYTHON_RELEASES

logger = logging.getLogger(__name__)

# Releases kept on the result for display
RECENT_RELEASES = 10


class MaintenancePipeline:
    """Fetches packages from the registry and scores their maintenance.

    Pipeline stages, per package:
    1. Fetch the JSON document from the registry adapter
    2. Extract release history
    3. Extract claimed Python versions
    4. Estimate release cadence
    5. Measure Python release adoption
    6. Classify maintenance status

    Each package is independent: ``check_packages`` runs them concurrently
    and a failure only turns that package into a PackageError.

    Usage:
        async with MaintenancePipeline() as pipeline:
            results = await pipeline.check_packages(["requests", "httpx"])
    """

    def __init__(
        self,
        adapter: BaseAdapter | None = None,
        settings: Settings | None = None,
        runtime_releases: Mapping[str, datetime] = PYTHON_RELEASES,
    ) -> None:
        """Initialize the pipeline.

        Args:
            adapter: Registry adapter. Defaults to a PyPiAdapter built from settings.
            settings: Registry settings, used only when no adapter is given.
            runtime_releases: Runtime version to release date.
        """
        self.settings = settings or Settings()
        self.runtime_releases = runtime_releases
        self.scorer = MaintenanceScorer(runtime_releases)
        self._adapter = adapter
        self._http_client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "MaintenancePipeline":
        """Set up a shared HTTP client for the default adapter."""
        if self._adapter is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                limits=httpx.Limits(max_connections=self.settings.max_connections),
                follow_redirects=True,
            )
            self._adapter = self._build_adapter(self._http_client)
        return self

    async def __aexit__(self, *args) -> None:
        """Clean up HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
            self._adapter = None

    @property
    def adapter(self) -> BaseAdapter:
        if self._adapter is None:
            self._adapter = self._build_adapter(None)
        return self._adapter

    def _build_adapter(self, client: httpx.AsyncClient | None) -> PyPiAdapter:
        return PyPiAdapter(
            client=client,
            registry_url=self.settings.registry_url,
            timeout=self.settings.request_timeout,
        )

    def build_result(
        self,
        package_name: str,
        data: dict,
        now: datetime | None = None,
    ) -> PackageResult:
        """Compute the maintenance report for an already fetched document.

        Args:
            package_name: Name as requested by the user.
            data: Registry JSON with ``info`` and ``releases``.
            now: Reference time for recency, defaults to the current UTC time.

        Returns:
            Fully populated PackageResult.
        """
        now = now or datetime.now(timezone.utc)
        info = data["info"]

        history = extract_release_history(data["releases"])
        latest_release = history[0] if history else None
        python_versions = extract_python_versions(info, self.runtime_releases)
        release_frequency = calculate_release_frequency(history)
        python_adoption = calculate_adoption_times(
            history, python_versions, self.runtime_releases
        )
        maintenance_status = self.scorer.classify(
            latest_release.date if latest_release else None,
            release_frequency,
            python_versions,
            now=now,
        )

        return PackageResult(
            name=package_name,
            version=info.get("version") or "",
            summary=info.get("summary"),
            author=info.get("author"),
            dependency_count=count_dependencies(info),
            project_urls=extract_project_urls(info),
            python_versions=python_versions,
            last_release=latest_release.date if latest_release else None,
            recent_releases=history[:RECENT_RELEASES],
            total_releases=len(history),
            release_frequency=release_frequency,
            python_adoption=python_adoption,
            maintenance_status=maintenance_status,
            checked_at=now,
        )

    async def check_package(self, package_name: str) -> PackageOutcome:
        """Fetch and score a single package.

        Args:
            package_name: Bare package name.

        Returns:
            PackageResult, or PackageError if any stage failed.
        """
        try:
            data = await self.adapter.get_package_json(package_name)
            return self.build_result(package_name, data)
        except PackageNotFoundError as e:
            logger.warning("%s", e)
            return PackageError(name=package_name, error=str(e))
        except Exception as e:
            logger.warning("Error checking %s: %s", package_name, e)
            return PackageError(name=package_name, error=str(e) or type(e).__name__)

    async def check_packages(self, package_names: list[str]) -> list[PackageOutcome]:
        """Check many packages concurrently.

        All lookups start together and the call returns once every one has
        finished. Results are in the same order as ``package_names``.
        """
        logger.debug("Checking %d packages", len(package_names))
        return list(
            await asyncio.gather(*(self.check_package(name) for name in package_names))
        )
