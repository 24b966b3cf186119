"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import contact, coverage, health, site
from .config import Settings, settings as default_settings
from .services.coverage import CoverageService
from .services.coverage.state import Loader


def create_app(config: Optional[Settings] = None, loader: Optional[Loader] = None) -> FastAPI:
    config = config or default_settings
    coverage_service = CoverageService(config, loader=loader)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # single ingestion pass per process; failures are latched, not retried
        await coverage_service.load()
        yield

    app = FastAPI(title=config.app_name, root_path="", lifespan=lifespan)
    app.state.settings = config
    app.state.coverage = coverage_service

    if config.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/")
    def root():
        return {
            "service": config.app_name,
            "status": "running",
            "api_prefix": config.api_prefix,
            "health": f"{config.api_prefix}/health",
            "coverage_ready": coverage_service.table_ready,
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=config.api_prefix)
    app.include_router(coverage.router, prefix=config.api_prefix)
    app.include_router(contact.router, prefix=config.api_prefix)
    app.include_router(site.router, prefix=config.api_prefix)
    return app


app = create_app()
