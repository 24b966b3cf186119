"""Request-scoped accessors for application state."""

from __future__ import annotations

from fastapi import Request

from ..services.coverage import CoverageService


def get_coverage_service(request: Request) -> CoverageService:
    return request.app.state.coverage
