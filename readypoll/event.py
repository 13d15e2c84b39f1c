"""A single readiness event paired with its token."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass


@dataclass(frozen=True, repr=False)
class Event:
    """Readiness state reported for the source registered under `token`."""

    token: int
    _: KW_ONLY
    readable: bool = False
    writable: bool = False
    error: bool = False
    read_closed: bool = False
    write_closed: bool = False
    priority: bool = False
    aio: bool = False
    lio: bool = False

    def is_readable(self) -> bool:
        return self.readable

    def is_writable(self) -> bool:
        return self.writable

    def is_error(self) -> bool:
        """True if the source entered an error state."""
        return self.error

    def is_read_closed(self) -> bool:
        """True if the read half of the source was shut down."""
        return self.read_closed

    def is_write_closed(self) -> bool:
        """True if the write half of the source was shut down."""
        return self.write_closed

    def is_priority(self) -> bool:
        return self.priority

    def is_aio(self) -> bool:
        return self.aio

    def is_lio(self) -> bool:
        return self.lio

    def __repr__(self) -> str:
        return (
            f"Event(token={self.token!r}, readable={self.readable}, "
            f"writable={self.writable}, error={self.error}, "
            f"read_closed={self.read_closed}, write_closed={self.write_closed}, "
            f"priority={self.priority}, aio={self.aio}, lio={self.lio})"
        )