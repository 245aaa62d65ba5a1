"""Controller contracts shared by data sources.

A controller owns every remote read behind one screen. Its reads return
``FetchResult`` values so that one failing source can be reported next to
the sources that succeeded.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FetchError(Exception):
    """Raised when a remote read returns nothing usable."""


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one source fetch: data on success, a message on failure."""

    source: str
    data: T | None = None
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


def elapsed_ms(started: float) -> float:
    """Milliseconds since a ``time.monotonic()`` reading."""
    return (time.monotonic() - started) * 1000


class BaseController(ABC):
    """A source of screen data that can be polled from a Textual worker."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Return whether the cluster answers at all."""
        ...

    @abstractmethod
    async def fetch_all(self) -> Any:
        """Run one full fetch cycle and return its aggregate."""
        ...
