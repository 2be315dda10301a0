"""Application configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_ASSET_BASE_URL = "https://cdn.jsdelivr.net/gh/devicons/devicon/icons"
DEFAULT_DEVICON_SOURCE_URL = "https://raw.githubusercontent.com/devicons/devicon/master/devicon.json"


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Centralised project settings based on OS environment variables."""

    environment: str = "dev"
    log_level: str = "INFO"

    asset_base_url: str = DEFAULT_ASSET_BASE_URL
    catalog_path: str = ""

    devicon_source_url: str = DEFAULT_DEVICON_SOURCE_URL
    request_timeout: float = 30.0


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        environment=os.getenv("ENVIRONMENT", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        asset_base_url=os.getenv("ICON_ASSET_BASE_URL", DEFAULT_ASSET_BASE_URL).rstrip("/"),
        catalog_path=os.getenv("ICON_CATALOG_PATH", ""),
        devicon_source_url=os.getenv("DEVICON_SOURCE_URL", DEFAULT_DEVICON_SOURCE_URL),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
