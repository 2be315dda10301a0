"""Shared fixtures: a small in-memory catalog and a resolver over it."""

from __future__ import annotations

import pytest

from stackicons.catalog import Catalog, CatalogEntry
from stackicons.config.settings import get_settings
from stackicons.resolver import NameResolver

BASE_URL = "https://icons.test/icons"


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        [
            CatalogEntry("python", "Python", ("language", "scripting"), ("original", "plain")),
            CatalogEntry("react", "React", ("framework", "javascript"), ("original", "original-wordmark")),
            CatalogEntry("kubernetes", "Kubernetes", ("container", "orchestration"), ("plain", "plain-wordmark")),
            CatalogEntry("tensorflow", "TensorFlow", ("machine-learning",), ("original", "line")),
            CatalogEntry("postgresql", "PostgreSQL", ("database", "sql"), ("original",)),
            CatalogEntry("mysql", "MySQL", ("database", "sql"), ("original",)),
            CatalogEntry("grafana", "Grafana", ("monitoring", "dashboard"), ("plain", "line")),
            CatalogEntry("cplusplus", "C++", ("language",), ("original",)),
        ]
    )


@pytest.fixture
def resolver(catalog: Catalog) -> NameResolver:
    return NameResolver(catalog, asset_base_url=BASE_URL)


@pytest.fixture(autouse=True)
def _fresh_settings() -> None:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
