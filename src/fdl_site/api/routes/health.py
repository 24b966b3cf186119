"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.coverage import CoverageService
from ..dependencies import get_coverage_service

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/coverage", status_code=status.HTTP_200_OK)
def health_coverage(coverage: CoverageService = Depends(get_coverage_service)) -> dict:
    """Report whether the ZIP coverage table loaded."""
    summary = coverage.summary()
    return {
        "service": "coverage",
        "healthy": summary["tableReady"],
        "error": summary["loadError"],
        "zips": summary["zipCount"],
    }
