"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType

import pytest


def utc(year: int, month: int, day: int, hour: int = 0) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def small_runtime_table():
    """A trimmed release table: two lines below the adoption floor, three above."""
    return MappingProxyType({
        "3.11": utc(2022, 10, 24),
        "3.10": utc(2021, 10, 4),
        "3.9": utc(2020, 10, 5),
        "3.8": utc(2019, 10, 14),
        "2.7": utc(2010, 7, 3),
    })


@pytest.fixture
def package_json() -> dict:
    """A PyPI JSON document trimmed to the fields the pipeline reads."""
    return {
        "info": {
            "name": "demo",
            "version": "2.1.0",
            "summary": "A demo package",
            "author": "Jane Doe",
            "home_page": None,
            "requires_python": ">=3.10",
            "classifiers": [
                "License :: OSI Approved :: MIT License",
                "Programming Language :: Python :: 3",
                "Programming Language :: Python :: 3.12",
            ],
            "requires_dist": ["httpx>=0.27", "rich"],
            "project_urls": {
                "Homepage": "https://demo.dev",
                "Source": "https://github.com/example/demo",
                "Documentation": "https://docs.demo.dev",
                "Changelog": "https://demo.dev/changes",
            },
        },
        "releases": {
            "0.9.0": [],
            "1.0.0": [{"upload_time": "2021-11-01T10:00:00"}],
            "2.0.0": [{"upload_time": "2023-12-01T10:00:00"}],
            "2.1.0": [
                {"upload_time": "2024-11-01T10:00:00"},
                {"upload_time": "2024-11-02T10:00:00"},
            ],
        },
    }
