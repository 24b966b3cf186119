"""Marketing content endpoint."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...services.content import get_site_content

router = APIRouter(prefix="/site", tags=["site"])


@router.get("/content", status_code=status.HTTP_200_OK)
def site_content() -> dict:
    return get_site_content()
