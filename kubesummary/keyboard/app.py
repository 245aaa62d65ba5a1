"""Bindings active on every screen."""

from textual.binding import Binding

APP_BINDINGS: list[Binding] = [
    Binding("q", "app.quit", "Quit", priority=True),
    Binding("ctrl+p", "app.command_palette", "Palette", show=False),
]

__all__ = ["APP_BINDINGS"]
