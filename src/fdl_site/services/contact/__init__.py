"""Contact form helpers."""

from .relay import ContactState, ContactStatus, submit_quote_request

__all__ = ["ContactState", "ContactStatus", "submit_quote_request"]
