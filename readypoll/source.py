"""The interface every registrable event source implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from readypoll.interest import Interest


class Source(ABC):
    """An event source that can be registered with a registry.

    Users should go through the registry rather than call these methods
    directly; implementations usually delegate to a lower-level handle.
    Failures are reported by raising OSError.
    """

    @abstractmethod
    def register(self, registry: Any, token: int, interests: Interest) -> None:
        """Register with `registry` under `token` for `interests`."""

    @abstractmethod
    def reregister(self, registry: Any, token: int, interests: Interest) -> None:
        """Replace the token and interests of an existing registration."""

    @abstractmethod
    def deregister(self, registry: Any) -> None:
        """Remove the registration from `registry`."""