"""Route group exports."""

from . import contact, coverage, health, site

__all__ = ["contact", "coverage", "health", "site"]
