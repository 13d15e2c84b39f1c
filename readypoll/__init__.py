"""Readiness interests, events, event sources and registration bookkeeping."""

__version__ = "0.1.0"

__all__ = ["event", "events", "interest", "io_source", "source"]