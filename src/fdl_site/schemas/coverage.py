"""ZIP coverage API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CoverageCheckRequest(BaseModel):
    zip: str = Field(..., description="ZIP code as typed by the visitor.")


class BannerModel(BaseModel):
    tone: Literal["ok", "warn", "bad"]
    title: str
    body: str
    meta: str | None = None


class OutcomeModel(BaseModel):
    kind: Literal["invalid_input", "not_covered", "affiliate_covered", "covered"]
    zip: str | None = None
    city: str | None = None
    deliveryDays: str | None = None
    contactMessage: str | None = None


class CoverageCheckResponse(BaseModel):
    state: Literal["invalid", "not_covered", "affiliate", "covered"]
    outcome: OutcomeModel
    banner: BannerModel


class CoverageStatusResponse(BaseModel):
    tableReady: bool
    loadError: str | None = None
    zipCount: int
    rowsRead: int = 0
    duplicateRows: int = 0
    rowsSkipped: int = 0
    source: str | None = None
