"""Quote-request relay to the third-party mail endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

import httpx

from ...config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Company and Email are required."
SUCCESS_MESSAGE = "Thanks! Your request was emailed."
FAILURE_MESSAGE = "Email failed. Please try again."

FORM_FIELDS = ("company", "email", "phone", "details", "website")
HONEYPOT_FIELD = "website"


class ContactState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ContactStatus:
    state: ContactState
    msg: str
    validation_failed: bool = False


def build_form_payload(fields: Mapping[str, Optional[str]], subject: str) -> dict[str, str]:
    payload = {name: (fields.get(name) or "").strip() for name in FORM_FIELDS}
    payload["subject"] = subject
    return payload


def validate_quote_request(fields: Mapping[str, Optional[str]]) -> Optional[ContactStatus]:
    if not (fields.get("company") or "").strip() or not (fields.get("email") or "").strip():
        return ContactStatus(state=ContactState.ERROR, msg=REQUIRED_FIELDS_MESSAGE, validation_failed=True)
    return None


async def submit_quote_request(
    fields: Mapping[str, Optional[str]],
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ContactStatus:
    """Validate and forward a quote request, reporting the terminal form state.

    Unlike a browser ``no-cors`` post, the endpoint's status code is visible
    here, so a non-2xx answer is reported as a failure.
    """

    config = config or default_settings
    invalid = validate_quote_request(fields)
    if invalid is not None:
        return invalid

    if (fields.get(HONEYPOT_FIELD) or "").strip():
        logger.info("Dropping quote request with a filled honeypot field")
        return ContactStatus(state=ContactState.SUCCESS, msg=SUCCESS_MESSAGE)

    if not config.contact_endpoint_url:
        logger.warning("Quote request received but no contact endpoint is configured")
        return ContactStatus(state=ContactState.ERROR, msg=FAILURE_MESSAGE)

    payload = build_form_payload(fields, config.contact_subject)
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(config.contact_timeout_seconds),
            transport=transport,
            follow_redirects=True,
        ) as client:
            response = await client.post(config.contact_endpoint_url, data=payload)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.error(f"Failed to relay quote request for {payload['company']}: {exc}")
        return ContactStatus(state=ContactState.ERROR, msg=FAILURE_MESSAGE)

    logger.info(f"Relayed quote request for {payload['company']}")
    return ContactStatus(state=ContactState.SUCCESS, msg=SUCCESS_MESSAGE)
