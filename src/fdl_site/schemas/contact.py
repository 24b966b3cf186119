"""Quote-request API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class QuoteRequest(BaseModel):
    company: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=320)
    phone: str = Field(default="", max_length=50)
    details: str = Field(default="", max_length=5000)
    website: str = Field(default="", description="Honeypot; left empty by real visitors.")


class ContactStatusResponse(BaseModel):
    state: Literal["idle", "loading", "success", "error"]
    msg: str
