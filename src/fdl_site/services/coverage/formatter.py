"""Render coverage outcomes into the banner text shown under the ZIP form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .classifier import Outcome, OutcomeKind

Tone = Literal["ok", "warn", "bad"]

INVALID_ZIP_MESSAGE = "Enter a valid 5-digit ZIP."


@dataclass(frozen=True, slots=True)
class Banner:
    tone: Tone
    title: str
    body: str
    meta: Optional[str] = None


def _city_suffix(city: Optional[str]) -> str:
    return f" ({city})" if city else ""


def render_outcome(outcome: Outcome) -> Banner:
    if outcome.kind is OutcomeKind.INVALID_INPUT:
        return Banner(tone="bad", title="Invalid ZIP", body=INVALID_ZIP_MESSAGE)

    if outcome.kind is OutcomeKind.NOT_COVERED:
        return Banner(tone="bad", title="We Do Not Deliver", body=outcome.contact_message or "")

    if outcome.kind is OutcomeKind.AFFILIATE_COVERED:
        detail = ""
        if outcome.city:
            detail = f" ({outcome.city}), for more information, click their link at the bottom footer"
        return Banner(
            tone="warn",
            title="DNT Delivers",
            body=f"ZIP {outcome.zip} is our Affiliate DNT Zone{detail}.",
        )

    return Banner(
        tone="ok",
        title="We Deliver Here",
        body=f"ZIP {outcome.zip}{_city_suffix(outcome.city)}.",
        meta=f"Days: {outcome.delivery_days}",
    )
