"""Screen-specific keyboard bindings."""

from textual.binding import Binding

SUMMARY_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("j", "scroll_down", "Down", show=False),
    Binding("k", "scroll_up", "Up", show=False),
]

__all__ = [
    "SUMMARY_SCREEN_BINDINGS",
]
