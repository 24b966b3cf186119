"""Quote-request endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status

from ...schemas.contact import ContactStatusResponse, QuoteRequest
from ...services.contact import ContactState, submit_quote_request

router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactStatusResponse, status_code=status.HTTP_200_OK)
async def post_quote_request(payload: QuoteRequest, request: Request) -> ContactStatusResponse:
    result = await submit_quote_request(payload.model_dump(), config=request.app.state.settings)
    if result.validation_failed:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.msg)
    if result.state is ContactState.ERROR:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.msg)
    return ContactStatusResponse(state=result.state.value, msg=result.msg)
