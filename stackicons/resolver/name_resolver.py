"""Normalise free-form technology names into devicon identifiers."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Optional

from stackicons.catalog.loader import get_catalog
from stackicons.catalog.models import Catalog, CatalogEntry
from stackicons.config.settings import DEFAULT_ASSET_BASE_URL, get_settings
from stackicons.resolver.aliases import ALIAS_RULES, AliasRule, build_alias_index

logger = logging.getLogger(__name__)

PREFERRED_VARIANT = "original"


class NameResolver:
    """Maps technology names to catalog identifiers, asset URLs and display names.

    Lookups never raise: anything that cannot be matched yields ``None``.
    """

    def __init__(
        self,
        catalog: Catalog,
        aliases: Iterable[AliasRule] = ALIAS_RULES,
        asset_base_url: str = DEFAULT_ASSET_BASE_URL,
    ) -> None:
        self._catalog = catalog
        self._aliases = build_alias_index(aliases)
        self._asset_base_url = asset_base_url.rstrip("/")

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def resolve_identifier(self, raw_name: Optional[str]) -> Optional[str]:
        """Return the identifier that best matches ``raw_name``, if any.

        Tried in order: exact catalog key, alias table, then the first catalog
        entry whose display name or tags contain the normalised name.
        """

        if not raw_name or not isinstance(raw_name, str):
            return None

        key = raw_name.lower().strip()
        if not key:
            return None

        if key in self._catalog:
            return key

        target = self._aliases.get(key)
        if target is not None:
            logger.debug("Resolved %r via alias to %r", raw_name, target)
            return target

        for identifier, entry in self._catalog.items():
            if _entry_contains(entry, key):
                logger.debug("Resolved %r via name/tag scan to %r", raw_name, identifier)
                return identifier

        logger.debug("No icon found for %r", raw_name)
        return None

    def build_asset_url(self, identifier: Optional[str]) -> Optional[str]:
        """Return the SVG download URL for a catalog identifier."""

        entry = self._lookup(identifier)
        if entry is None:
            return None

        variant = PREFERRED_VARIANT
        if variant not in entry.svg_versions:
            variant = entry.svg_versions[0]
        return f"{self._asset_base_url}/{entry.identifier}/{entry.identifier}-{variant}.svg"

    def get_display_name(self, identifier: Optional[str]) -> Optional[str]:
        """Return the human-readable name, e.g. ``"python"`` -> ``"Python"``."""

        entry = self._lookup(identifier)
        return entry.display_name if entry is not None else None

    def _lookup(self, identifier: Optional[str]) -> Optional[CatalogEntry]:
        if not identifier or not isinstance(identifier, str):
            return None
        return self._catalog.get(identifier)


def _entry_contains(entry: CatalogEntry, key: str) -> bool:
    if key in entry.display_name.lower():
        return True
    return any(key in tag.lower() for tag in entry.tags)


@lru_cache(maxsize=1)
def get_resolver() -> NameResolver:
    """Return a resolver over the configured catalog and asset host."""

    return NameResolver(get_catalog(), asset_base_url=get_settings().asset_base_url)
