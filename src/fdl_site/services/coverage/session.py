"""Per-form ZIP lookup state, mirroring what the coverage widget shows."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .classifier import Outcome, OutcomeKind
from .formatter import Banner, render_outcome
from .state import CoverageNotReady, CoverageService

_NON_DIGITS = re.compile(r"[^0-9]")


class LookupState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    NOT_COVERED = "not_covered"
    AFFILIATE = "affiliate"
    COVERED = "covered"


_STATE_BY_OUTCOME = {
    OutcomeKind.INVALID_INPUT: LookupState.INVALID,
    OutcomeKind.NOT_COVERED: LookupState.NOT_COVERED,
    OutcomeKind.AFFILIATE_COVERED: LookupState.AFFILIATE,
    OutcomeKind.COVERED: LookupState.COVERED,
}


def sanitize_zip_input(value: str) -> str:
    """Keep digits only, capped at five characters, the way the input field does."""
    return _NON_DIGITS.sub("", value or "")[:5]


class ZipLookupSession:
    def __init__(self, coverage: CoverageService) -> None:
        self._coverage = coverage
        self.value = ""
        self.state = LookupState.IDLE
        self.outcome: Optional[Outcome] = None

    @property
    def can_submit(self) -> bool:
        return self._coverage.table_ready

    @property
    def banner(self) -> Optional[Banner]:
        return render_outcome(self.outcome) if self.outcome is not None else None

    def update_input(self, value: str, sanitize: bool = True) -> str:
        """Replace the input value; any previous outcome is cleared."""
        self.value = sanitize_zip_input(value) if sanitize else (value or "")
        self.state = LookupState.IDLE
        self.outcome = None
        return self.value

    def submit(self) -> Outcome:
        self.state = LookupState.VALIDATING
        try:
            outcome = self._coverage.classify(self.value)
        except CoverageNotReady:
            self.state = LookupState.IDLE
            raise
        self.outcome = outcome
        self.state = _STATE_BY_OUTCOME[outcome.kind]
        return outcome
