"""Refresh the icon catalog from the upstream devicon repository."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from stackicons.catalog import BUNDLED_CATALOG_PATH, load_catalog
from stackicons.catalog.sync import CatalogSyncError, DeviconSyncClient
from stackicons.config.settings import get_settings
from stackicons.monitoring.logging import configure_logging


async def run_sync(destination: Path) -> int:
    settings = get_settings()
    known = load_catalog(destination) if destination.exists() else None
    client = DeviconSyncClient(settings)
    try:
        return await client.sync_to(destination, known=known)
    finally:
        await client.close()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=BUNDLED_CATALOG_PATH, help="catalog file to write")
    args = parser.parse_args()

    configure_logging()
    try:
        count = asyncio.run(run_sync(args.output))
    except CatalogSyncError as exc:
        print(f"❌ Sync failed: {exc}")
        raise SystemExit(1) from exc
    print(f"✅ Wrote {count} icons to {args.output}")


if __name__ == "__main__":
    main()
