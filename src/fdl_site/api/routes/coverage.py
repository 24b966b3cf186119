"""ZIP coverage endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...schemas.coverage import (
    BannerModel,
    CoverageCheckRequest,
    CoverageCheckResponse,
    CoverageStatusResponse,
    OutcomeModel,
)
from ...services.coverage import CoverageNotReady, CoverageService, ZipLookupSession
from ..dependencies import get_coverage_service

router = APIRouter(prefix="/coverage", tags=["coverage"])


def _check(raw: str, coverage: CoverageService) -> CoverageCheckResponse:
    session = ZipLookupSession(coverage)
    session.update_input(raw, sanitize=False)
    try:
        outcome = session.submit()
    except CoverageNotReady as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    banner = session.banner
    return CoverageCheckResponse(
        state=session.state.value,
        outcome=OutcomeModel(
            kind=outcome.kind.value,
            zip=outcome.zip,
            city=outcome.city,
            deliveryDays=outcome.delivery_days,
            contactMessage=outcome.contact_message,
        ),
        banner=BannerModel(tone=banner.tone, title=banner.title, body=banner.body, meta=banner.meta),
    )


@router.get("/status", response_model=CoverageStatusResponse, status_code=status.HTTP_200_OK)
def get_coverage_status(coverage: CoverageService = Depends(get_coverage_service)) -> CoverageStatusResponse:
    return CoverageStatusResponse(**coverage.summary())


@router.post("/check", response_model=CoverageCheckResponse, status_code=status.HTTP_200_OK)
def check_coverage(
    payload: CoverageCheckRequest,
    coverage: CoverageService = Depends(get_coverage_service),
) -> CoverageCheckResponse:
    return _check(payload.zip, coverage)


@router.get("/{zip_code}", response_model=CoverageCheckResponse, status_code=status.HTTP_200_OK)
def check_coverage_by_path(
    zip_code: str = Path(..., description="ZIP code to look up"),
    coverage: CoverageService = Depends(get_coverage_service),
) -> CoverageCheckResponse:
    return _check(zip_code, coverage)
