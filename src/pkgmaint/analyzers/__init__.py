"""Analyzers that turn registry metadata into maintenance signals."""

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
from pkgmaint.analyzers.pipeline import MaintenancePipeline
from pkgmaint.analyzers.scorer import MaintenanceScorer
from pkgmaint.analyzers.versions import compare_versions, is_compatible

__all__ = [
    "MaintenancePipeline",
    "MaintenanceScorer",
    "calculate_adoption_times",
    "calculate_release_frequency",
    "compare_versions",
    "count_dependencies",
    "extract_project_urls",
    "extract_python_versions",
    "extract_release_history",
    "is_compatible",
]
