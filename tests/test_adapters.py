"""Tests for query parsing and the PyPI adapter."""

from __future__ import annotations

import httpx
import pytest

from pkgmaint.adapters.base import (
    PackageNotFoundError,
    parse_package_list,
    strip_version_specifier,
)
from pkgmaint.adapters.pypi import PyPiAdapter


class TestStripVersionSpecifier:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ("requests>=2.0,<3.0", "requests"),
            ("django==4.2.1", "django"),
            ("numpy~=1.26", "numpy"),
            ("flask!=2.0", "flask"),
            ("  httpx  ", "httpx"),
            ("rich 13.7", "rich"),
            ("pydantic", "pydantic"),
        ],
    )
    def test_strips_specifiers(self, query, expected):
        assert strip_version_specifier(query) == expected

    def test_specifier_only(self):
        assert strip_version_specifier(">=1.0") == ""


class TestParsePackageList:
    def test_skips_blank_lines_and_keeps_order(self):
        lines = ["requests>=2.0", "", "   ", "httpx", "requests"]

        assert parse_package_list(lines) == ["requests", "httpx", "requests"]

    def test_accepts_multiline_text(self):
        assert parse_package_list(["rich\ntyper==0.12\n"]) == ["rich", "typer"]


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestPyPiAdapter:
    async def test_fetches_package_json(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"info": {"name": "demo"}, "releases": {}})

        adapter = PyPiAdapter(client=_mock_client(handler))
        data = await adapter.get_package_json("demo")

        assert data["info"]["name"] == "demo"
        assert seen == ["https://pypi.org/pypi/demo/json"]

    async def test_custom_registry_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json={"info": {}, "releases": {}})

        adapter = PyPiAdapter(client=_mock_client(handler), registry_url="https://mirror.example/pypi/")
        await adapter.get_package_json("demo")

        assert seen == ["https://mirror.example/pypi/demo/json"]

    @pytest.mark.parametrize("status_code", [404, 410, 500])
    async def test_non_success_is_not_found(self, status_code):
        adapter = PyPiAdapter(client=_mock_client(lambda request: httpx.Response(status_code)))

        with pytest.raises(PackageNotFoundError) as exc_info:
            await adapter.get_package_json("nope")

        assert str(exc_info.value) == "Package nope not found"
        assert exc_info.value.status_code == status_code

    async def test_invalid_json_raises_value_error(self):
        adapter = PyPiAdapter(
            client=_mock_client(lambda request: httpx.Response(200, content=b"<html>"))
        )

        with pytest.raises(ValueError):
            await adapter.get_package_json("demo")

    async def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = PyPiAdapter(client=_mock_client(handler))

        with pytest.raises(httpx.ConnectError):
            await adapter.get_package_json("demo")
