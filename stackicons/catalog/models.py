"""Immutable catalog of icon entries keyed by identifier."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


class CatalogError(ValueError):
    """Raised when catalog data violates the catalog invariants."""


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Metadata describing a single icon."""

    identifier: str
    display_name: str
    tags: tuple[str, ...] = ()
    svg_versions: tuple[str, ...] = ("original",)


class Catalog(Mapping[str, CatalogEntry]):
    """Read-only mapping from identifier to entry.

    Iteration follows the order in which entries were supplied, which is the
    order the resolver uses when scanning names and tags.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        collected: dict[str, CatalogEntry] = {}
        for entry in entries:
            if not entry.identifier:
                raise CatalogError("Catalog entry is missing an identifier.")
            if entry.identifier != entry.identifier.lower() or any(ch.isspace() for ch in entry.identifier):
                raise CatalogError(f"Catalog identifier must be a lowercase slug: {entry.identifier!r}")
            if entry.identifier in collected:
                raise CatalogError(f"Duplicate catalog identifier: {entry.identifier!r}")
            if not entry.svg_versions:
                raise CatalogError(f"Catalog entry {entry.identifier!r} has no render variants.")
            collected[entry.identifier] = entry
        self._entries: Mapping[str, CatalogEntry] = MappingProxyType(collected)

    def __getitem__(self, identifier: str) -> CatalogEntry:
        return self._entries[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} entries)"
