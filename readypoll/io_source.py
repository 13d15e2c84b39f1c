"""Adapter tying an I/O object to its registration state."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class SelectorId:
    """Tracks which selector, if any, an I/O source is registered with.

    Selector ids start at 1; 0 means the source is not associated.
    """

    UNASSOCIATED = 0

    def __init__(self) -> None:
        self._id = self.UNASSOCIATED
        self._lock = threading.Lock()

    @property
    def id(self) -> int:
        with self._lock:
            return self._id

    def _swap(self, new_id: int) -> int:
        with self._lock:
            previous, self._id = self._id, new_id
        return previous

    def associate(self, registry_id: int) -> None:
        """Associate with `registry_id`; raise if already associated."""
        previous = self._swap(registry_id)
        if previous != self.UNASSOCIATED:
            raise FileExistsError("I/O source already registered with a `Registry`")

    def check_association(self, registry_id: int) -> None:
        """Raise unless associated with exactly `registry_id`."""
        current = self.id
        if current == registry_id:
            return
        if current == self.UNASSOCIATED:
            raise FileNotFoundError("I/O source not registered with `Registry`")
        raise FileExistsError(
            "I/O source already registered with a different `Registry`"
        )

    def remove_association(self, registry_id: int) -> None:
        """Drop the association; raise if it was not with `registry_id`."""
        previous = self._swap(self.UNASSOCIATED)
        if previous != registry_id:
            raise FileNotFoundError("I/O source not registered with `Registry`")

    def __copy__(self) -> SelectorId:
        clone = SelectorId()
        clone._id = self.id
        return clone

    def __repr__(self) -> str:
        return f"SelectorId(id={self.id})"


class IoSource(Generic[T]):
    """Wraps an I/O object so it can be registered with a poller.

    All I/O that may block should go through `do_io`. Other attributes are
    forwarded to the wrapped object.
    """

    def __init__(self, io: T) -> None:
        self._inner = io
        self.selector_id = SelectorId()

    def do_io(self, f: Callable[[T], R]) -> R:
        """Run `f` on the wrapped object and return its result."""
        return f(self._inner)

    def into_inner(self) -> T:
        """Return the wrapped object, discarding the registration state."""
        return self._inner

    def __getattr__(self, name: str) -> Any:
        if name == "_inner":
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __repr__(self) -> str:
        return repr(self._inner)