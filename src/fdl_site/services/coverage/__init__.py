"""ZIP coverage service helpers."""

from .classifier import Outcome, OutcomeKind, classify
from .formatter import Banner, render_outcome
from .session import LookupState, ZipLookupSession, sanitize_zip_input
from .state import CoverageNotReady, CoverageService

__all__ = [
    "Banner",
    "CoverageNotReady",
    "CoverageService",
    "LookupState",
    "Outcome",
    "OutcomeKind",
    "ZipLookupSession",
    "classify",
    "render_outcome",
    "sanitize_zip_input",
]
