"""Domain modules for the Daily Updates bot."""

from .base import Domain, ScheduledTask

__all__ = ["Domain", "ScheduledTask"]
