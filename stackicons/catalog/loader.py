"""Build the icon catalog from the bundled JSON lookup table."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from stackicons.catalog.models import Catalog, CatalogEntry, CatalogError
from stackicons.config.settings import get_settings

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "devicon.json"


class CatalogRecord(BaseModel):
    """One value of the lookup table, keyed by identifier in the data file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    svg_versions: list[str] = Field(alias="svgVersions", min_length=1)

    def to_entry(self, identifier: str) -> CatalogEntry:
        return CatalogEntry(
            identifier=identifier,
            display_name=self.name,
            tags=tuple(self.tags),
            svg_versions=tuple(self.svg_versions),
        )


def catalog_from_mapping(raw: Mapping[str, Any]) -> Catalog:
    """Validate raw lookup-table data and build a catalog preserving key order."""

    entries: list[CatalogEntry] = []
    for identifier, payload in raw.items():
        try:
            record = CatalogRecord.model_validate(payload)
        except ValidationError as exc:
            raise CatalogError(f"Invalid catalog record for {identifier!r}: {exc}") from exc
        entries.append(record.to_entry(identifier))
    return Catalog(entries)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """Read a catalog file, defaulting to the data shipped with the package."""

    catalog_path = Path(path) if path else BUNDLED_CATALOG_PATH
    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file {catalog_path} is not valid JSON.") from exc
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file {catalog_path} must contain a JSON object.")

    catalog = catalog_from_mapping(raw)
    logger.info("Loaded %d icon entries from %s", len(catalog), catalog_path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Return the process-wide catalog configured through settings."""

    return load_catalog(get_settings().catalog_path or None)
