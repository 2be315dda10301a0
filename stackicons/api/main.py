"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel

from stackicons.config.settings import get_settings
from stackicons.resolver import NameResolver, get_resolver


class IconResponse(BaseModel):
    """Icon details for a query; fields are ``None`` when nothing matched."""

    query: Optional[str] = None
    identifier: Optional[str] = None
    display_name: Optional[str] = None
    url: Optional[str] = None


def _describe(resolver: NameResolver, identifier: Optional[str], query: Optional[str] = None) -> IconResponse:
    return IconResponse(
        query=query,
        identifier=identifier,
        display_name=resolver.get_display_name(identifier),
        url=resolver.build_asset_url(identifier),
    )


def create_app() -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    app = FastAPI(
        title="Stack Icons API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/icons/resolve", response_model=IconResponse, tags=["icons"])
    async def resolve_icon(
        name: str = Query(default="", description="Free-form technology name"),
        resolver: NameResolver = Depends(get_resolver),
    ) -> IconResponse:
        """Resolve a technology name to its icon."""

        return _describe(resolver, resolver.resolve_identifier(name), query=name)

    @app.get("/icons/{identifier}", response_model=IconResponse, tags=["icons"])
    async def get_icon(
        identifier: str,
        resolver: NameResolver = Depends(get_resolver),
    ) -> IconResponse:
        """Return icon details for an exact catalog identifier."""

        if identifier not in resolver.catalog:
            raise HTTPException(status_code=404, detail=f"Unknown icon {identifier!r}")
        return _describe(resolver, identifier)

    return app


app = create_app()
