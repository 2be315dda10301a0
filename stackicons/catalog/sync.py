"""Async client that refreshes the bundled catalog from upstream devicon.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import httpx

from stackicons.catalog.loader import catalog_from_mapping
from stackicons.catalog.models import Catalog
from stackicons.config.settings import Settings


class CatalogSyncError(RuntimeError):
    """Raised when the upstream catalog cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


logger = logging.getLogger(__name__)


def convert_devicon_records(
    records: Iterable[Mapping[str, Any]],
    known: Catalog | None = None,
) -> dict[str, dict[str, Any]]:
    """Convert upstream records into the bundled lookup-table layout.

    Display names come from ``known`` when the identifier is already
    catalogued, otherwise from the first upstream alt name, otherwise the slug.
    """

    converted: dict[str, dict[str, Any]] = {}
    for record in records:
        identifier = str(record.get("name") or "").strip().lower()
        if not identifier:
            logger.warning("Skipping upstream record without a name: %s", record)
            continue
        svg_versions = [str(v) for v in (record.get("versions") or {}).get("svg") or []]
        if not svg_versions:
            logger.warning("Skipping %r: no SVG versions upstream", identifier)
            continue
        if identifier in converted:
            logger.warning("Skipping duplicate upstream record %r", identifier)
            continue

        if known is not None and identifier in known:
            display_name = known[identifier].display_name
        else:
            altnames = record.get("altnames") or []
            display_name = str(altnames[0]) if altnames else identifier

        converted[identifier] = {
            "name": display_name,
            "tags": [str(tag) for tag in record.get("tags") or []],
            "svgVersions": svg_versions,
        }
    return converted


class DeviconSyncClient:
    """Downloads devicon.json and rewrites it in the bundled format."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def fetch_records(self) -> list[dict[str, Any]]:
        """Return the raw upstream records."""

        url = self._settings.devicon_source_url
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise CatalogSyncError(f"Timed out fetching {url}.") from exc
        except httpx.HTTPStatusError as exc:
            raise CatalogSyncError(
                f"{url} returned {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogSyncError(f"Could not fetch {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise CatalogSyncError(f"{url} did not return valid JSON.") from exc
        if not isinstance(payload, list):
            raise CatalogSyncError(f"{url} did not return a JSON list.")
        return payload

    async def fetch_catalog_data(self, known: Catalog | None = None) -> dict[str, dict[str, Any]]:
        """Fetch upstream data already converted to the lookup-table layout."""

        records = await self.fetch_records()
        converted = convert_devicon_records(records, known=known)
        logger.info("Fetched %d upstream icons (%d usable)", len(records), len(converted))
        return converted

    async def sync_to(self, destination: Path, known: Catalog | None = None) -> int:
        """Write the converted catalog to ``destination`` and return the entry count."""

        data = await self.fetch_catalog_data(known=known)
        catalog_from_mapping(data)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.info("Wrote %d icons to %s", len(data), destination)
        return len(data)
