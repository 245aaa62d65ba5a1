"""ErrorBanner - single process-wide error notification display."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static

from kubesummary.models.state.error_notification import ErrorNotification


class ErrorBanner(Static):
    """Banner bound to an ErrorNotification; hidden while no error is set."""

    DEFAULT_CSS = """
    ErrorBanner {
        width: 1fr;
        height: auto;
        padding: 0 1;
        background: $error;
        color: $text;
        text-style: bold;
    }
    """

    banner_text: str = ""

    def on_mount(self) -> None:
        self.display = False

    def sync(self, notification: ErrorNotification) -> None:
        """Show or hide according to the notification state."""
        if notification.active:
            self.banner_text = f"Error: {notification.message or ''}"
            self.update(escape(self.banner_text))
            self.display = True
        else:
            self.banner_text = ""
            self.update("")
            self.display = False
