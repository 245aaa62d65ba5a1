"""Process-wide error banner state."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass
class ErrorNotification:
    """Single user-visible error banner.

    Owned by the summary controller and handed to the presentation layer.
    It only distinguishes "some source failed" from "all sources healthy".
    """

    message: str | None = None
    raised_at: datetime | None = None

    @property
    def active(self) -> bool:
        return self.message is not None

    def raise_error(self, message: str) -> None:
        self.message = message
        self.raised_at = datetime.now(timezone.utc)

    def clear(self) -> None:
        self.message = None
        self.raised_at = None
