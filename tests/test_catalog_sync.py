"""Tests for refreshing the catalog from upstream devicon.json."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
import pytest_mock

from stackicons.catalog import Catalog, CatalogEntry, load_catalog
from stackicons.catalog.sync import CatalogSyncError, DeviconSyncClient, convert_devicon_records
from stackicons.config.settings import Settings

SOURCE_URL = "https://upstream.test/devicon.json"

UPSTREAM = [
    {"name": "python", "altnames": ["Python"], "tags": ["language"], "versions": {"svg": ["original", "plain"]}},
    {"name": "kubernetes", "altnames": [], "tags": ["container"], "versions": {"svg": ["plain"]}},
    {"name": "fontonly", "tags": [], "versions": {"svg": [], "font": ["plain"]}},
    {"name": "python", "tags": ["duplicate"], "versions": {"svg": ["line"]}},
]


def _settings() -> Settings:
    return Settings(devicon_source_url=SOURCE_URL, request_timeout=5.0)


def _transport(status_code: int = 200, payload: object = UPSTREAM) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == SOURCE_URL
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)


def test_convert_skips_unusable_records() -> None:
    converted = convert_devicon_records(UPSTREAM)

    assert list(converted) == ["python", "kubernetes"]
    assert converted["python"] == {"name": "Python", "tags": ["language"], "svgVersions": ["original", "plain"]}
    assert converted["kubernetes"]["name"] == "kubernetes"


def test_convert_keeps_known_display_names() -> None:
    known = Catalog([CatalogEntry("kubernetes", "Kubernetes", (), ("plain",))])

    converted = convert_devicon_records(UPSTREAM, known=known)

    assert converted["kubernetes"]["name"] == "Kubernetes"


@pytest.mark.asyncio
async def test_sync_writes_loadable_catalog(tmp_path: Path) -> None:
    client = DeviconSyncClient(_settings(), transport=_transport())
    destination = tmp_path / "data" / "devicon.json"

    try:
        count = await client.sync_to(destination)
    finally:
        await client.close()

    assert count == 2
    catalog = load_catalog(destination)
    assert catalog["python"].svg_versions == ("original", "plain")
    assert json.loads(destination.read_text(encoding="utf-8"))["kubernetes"]["svgVersions"] == ["plain"]


@pytest.mark.asyncio
async def test_fetch_raises_on_http_error() -> None:
    client = DeviconSyncClient(_settings(), transport=_transport(status_code=503, payload={}))

    try:
        with pytest.raises(CatalogSyncError) as exc_info:
            await client.fetch_records()
    finally:
        await client.close()

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_fetch_rejects_non_list_payload() -> None:
    client = DeviconSyncClient(_settings(), transport=_transport(payload={"python": {}}))

    try:
        with pytest.raises(CatalogSyncError, match="JSON list"):
            await client.fetch_records()
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_fetch_wraps_timeouts(mocker: pytest_mock.MockerFixture) -> None:
    client = DeviconSyncClient(_settings())
    mocker.patch.object(
        client._client,
        "get",
        mocker.AsyncMock(side_effect=httpx.ReadTimeout("timed out")),
    )

    try:
        with pytest.raises(CatalogSyncError, match="Timed out"):
            await client.fetch_records()
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_fetch_wraps_connection_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    client = DeviconSyncClient(_settings(), transport=httpx.MockTransport(handler))

    try:
        with pytest.raises(CatalogSyncError, match="Could not fetch"):
            await client.fetch_records()
    finally:
        await client.close()


@pytest.mark.asyncio
async def test_fetch_rejects_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    client = DeviconSyncClient(_settings(), transport=httpx.MockTransport(handler))

    try:
        with pytest.raises(CatalogSyncError, match="valid JSON"):
            await client.fetch_records()
    finally:
        await client.close()
