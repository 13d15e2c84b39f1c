"""A bounded collection of readiness events filled by each poll."""

from __future__ import annotations

from typing import Iterable, Iterator

from readypoll.event import Event


class Events:
    """Holds up to `capacity` readiness events received since the last poll.

    A single instance is usually created alongside a poller and reused on
    every poll; its contents are replaced each time it is filled.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {capacity!r}")
        if capacity < 0:
            raise ValueError("capacity cannot be negative")
        self._capacity = capacity
        self._events: list[Event] = []

    def capacity(self) -> int:
        """Return the number of events this collection can hold."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True if no events are held."""
        return not self._events

    def clear(self) -> None:
        """Remove all held events."""
        self._events.clear()

    def fill(self, events: Iterable[Event]) -> int:
        """Replace the contents with `events`, keeping at most `capacity`.

        Returns the number of events stored.
        """
        stored: list[Event] = []
        for event in events:
            if len(stored) >= self._capacity:
                break
            if not isinstance(event, Event):
                raise TypeError(f"expected an Event, got {event!r}")
            stored.append(event)
        self._events = stored
        return len(stored)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(event) for event in self._events) + "]"