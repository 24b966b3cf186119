"""ZIP coverage classification over an already-built coverage table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...config import DEFAULT_CONTACT_MESSAGE
from ...models.domain import CoverageTable

_ZIP_INPUT = re.compile(r"^[0-9]{5}$")


class OutcomeKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NOT_COVERED = "not_covered"
    AFFILIATE_COVERED = "affiliate_covered"
    COVERED = "covered"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of classifying a single ZIP query.

    Only the fields relevant to ``kind`` are populated: ``contact_message`` for
    NOT_COVERED, ``zip``/``city`` for AFFILIATE_COVERED, and ``zip``/``city``/
    ``delivery_days`` for COVERED. ``city`` is None when the record has none.
    """

    kind: OutcomeKind
    zip: Optional[str] = None
    city: Optional[str] = None
    delivery_days: Optional[str] = None
    contact_message: Optional[str] = None


def classify(raw: str, table: CoverageTable, contact_message: str = DEFAULT_CONTACT_MESSAGE) -> Outcome:
    """Classify user input against the coverage table. Pure and synchronous."""

    clean = (raw or "").strip()
    if not _ZIP_INPUT.match(clean):
        return Outcome(kind=OutcomeKind.INVALID_INPUT)

    record = table.get(clean)
    if record is None:
        return Outcome(kind=OutcomeKind.NOT_COVERED, contact_message=contact_message)

    city = record.city or None
    if record.is_affiliate:
        return Outcome(kind=OutcomeKind.AFFILIATE_COVERED, zip=record.zip, city=city)
    return Outcome(
        kind=OutcomeKind.COVERED,
        zip=record.zip,
        city=city,
        delivery_days=record.delivery_days,
    )
