"""SummaryPanel - titled card that waits for its own data source.

CSS Classes: widget-summary-panel, panel-loading, panel-failed
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.widget import Widget
from textual.widgets import LoadingIndicator, Static

from kubesummary.constants.enums import PanelState
from kubesummary.widgets._base import BaseWidget

if TYPE_CHECKING:
    from textual.app import ComposeResult


class SummaryPanel(BaseWidget):
    """Card with a title, a status line and one content widget."""

    DEFAULT_CSS = """
    SummaryPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-bottom: 1;
    }
    SummaryPanel .panel-title {
        text-style: bold;
    }
    SummaryPanel LoadingIndicator {
        height: 1;
    }
    SummaryPanel.panel-failed .panel-status {
        color: $error;
    }
    """

    _default_classes: ClassVar[str] = "widget-summary-panel"

    def __init__(
        self,
        title: str,
        content: Widget,
        *,
        loading_text: str,
        failed_text: str,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self._title = title
        self._content = content
        self._loading_text = loading_text
        self._failed_text = failed_text
        self._state = PanelState.LOADING

    @property
    def state(self) -> PanelState:
        return self._state

    @property
    def content(self) -> Widget:
        return self._content

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="panel-title")
        yield LoadingIndicator(classes="panel-spinner")
        yield Static(self._loading_text, classes="panel-status")
        yield self._content

    def on_mount(self) -> None:
        self.set_state(self._state)

    def set_state(self, state: PanelState) -> None:
        """Switch between loading, ready and failed presentation."""
        self._state = state
        if not self.is_mounted:
            return
        spinner = self.query_one(".panel-spinner", LoadingIndicator)
        status = self.query_one(".panel-status", Static)
        self.set_class(state == PanelState.LOADING, "panel-loading")
        self.set_class(state == PanelState.FAILED, "panel-failed")
        spinner.display = state == PanelState.LOADING
        status.display = state != PanelState.READY
        self._content.display = state == PanelState.READY
        if state == PanelState.FAILED:
            status.update(self._failed_text)
        else:
            status.update(self._loading_text)
