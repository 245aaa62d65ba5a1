"""Summary screen - controller, agents, node latency and feature gates."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header
from textual.worker import WorkerState

from kubesummary.constants.enums import PanelState
from kubesummary.keyboard import SUMMARY_SCREEN_BINDINGS
from kubesummary.screens.mixins import WorkerMixin
from kubesummary.screens.summary.config import (
    AGENT_TABLE_COLUMNS,
    CONTROLLER_TABLE_COLUMNS,
    ERROR_BANNER_ID,
    FEATURE_GATE_TABLE_COLUMNS,
    PANEL_AGENT_FEATURE_GATES,
    PANEL_AGENTS,
    PANEL_CONTROLLER,
    PANEL_CONTROLLER_FEATURE_GATES,
    PANEL_FAILED_TEXT,
    PANEL_IDS,
    PANEL_LOADING_TEXT,
    PANEL_NODE_LATENCY,
    PANEL_TITLES,
    SUMMARY_BODY_ID,
)
from kubesummary.screens.summary.presenter import (
    SummaryDataLoaded,
    SummaryDataLoadFailed,
    SummaryPresenter,
)
from kubesummary.widgets import ErrorBanner, LatencyHeatmap, SummaryPanel, SummaryTable


class SummaryScreen(WorkerMixin, Screen):
    """Cluster network summary: five independently loading panels."""

    BINDINGS = SUMMARY_SCREEN_BINDINGS

    DEFAULT_CSS = """
    SummaryScreen #summary-body {
        padding: 0 1;
    }
    """

    def __init__(self, context: str | None = None) -> None:
        super().__init__()
        self.context = context
        self.presenter = SummaryPresenter(self)

    @property
    def screen_title(self) -> str:
        return "Summary"

    def compose(self) -> ComposeResult:
        yield Header()
        yield ErrorBanner(id=ERROR_BANNER_ID)
        with VerticalScroll(id=SUMMARY_BODY_ID):
            for panel_id in PANEL_IDS:
                if panel_id == PANEL_NODE_LATENCY:
                    content = LatencyHeatmap()
                else:
                    content = SummaryTable()
                yield SummaryPanel(
                    PANEL_TITLES[panel_id],
                    content,
                    loading_text=PANEL_LOADING_TEXT[panel_id],
                    failed_text=PANEL_FAILED_TEXT[panel_id],
                    id=panel_id,
                )
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.screen_title
        self.presenter.load_data()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        """Re-run the whole aggregation cycle."""
        for panel_id in PANEL_IDS:
            self._panel(panel_id).set_state(PanelState.LOADING)
        self.presenter.load_data()

    def action_scroll_down(self) -> None:
        self.query_one(f"#{SUMMARY_BODY_ID}", VerticalScroll).scroll_down()

    def action_scroll_up(self) -> None:
        self.query_one(f"#{SUMMARY_BODY_ID}", VerticalScroll).scroll_up()

    # =========================================================================
    # Message handlers
    # =========================================================================

    def on_summary_data_loaded(self, _: SummaryDataLoaded) -> None:
        self._refresh_panels()

    def on_summary_data_load_failed(self, message: SummaryDataLoadFailed) -> None:
        self.notify(message.error, title="Summary load failed", severity="error")

    def cycle_finished(self, state: WorkerState, duration_ms: float) -> None:
        if state == WorkerState.SUCCESS:
            self.sub_title = f"Updated in {duration_ms:.0f}ms"

    # =========================================================================
    # Rendering
    # =========================================================================

    def _panel(self, panel_id: str) -> SummaryPanel:
        return self.query_one(f"#{panel_id}", SummaryPanel)

    def _fill_table(
        self, panel_id: str, columns: list[str], rows: list[list[str]]
    ) -> None:
        panel = self._panel(panel_id)
        table = panel.content
        if isinstance(table, SummaryTable):
            table.set_rows(columns, rows)

    def _refresh_panels(self) -> None:
        presenter = self.presenter
        with suppress(NoMatches):
            self.query_one(f"#{ERROR_BANNER_ID}", ErrorBanner).sync(
                presenter.notification
            )

        for panel_id in PANEL_IDS:
            state = presenter.panel_state(panel_id)
            if state == PanelState.READY:
                self._render_panel(panel_id)
            self._panel(panel_id).set_state(state)

    def _render_panel(self, panel_id: str) -> None:
        presenter = self.presenter
        if panel_id == PANEL_CONTROLLER:
            self._fill_table(
                panel_id, CONTROLLER_TABLE_COLUMNS, presenter.get_controller_rows()
            )
        elif panel_id == PANEL_AGENTS:
            self._fill_table(panel_id, AGENT_TABLE_COLUMNS, presenter.get_agent_rows())
        elif panel_id == PANEL_CONTROLLER_FEATURE_GATES:
            self._fill_table(
                panel_id,
                FEATURE_GATE_TABLE_COLUMNS,
                presenter.get_controller_feature_gate_rows(),
            )
        elif panel_id == PANEL_AGENT_FEATURE_GATES:
            self._fill_table(
                panel_id,
                FEATURE_GATE_TABLE_COLUMNS,
                presenter.get_agent_feature_gate_rows(),
            )
        elif panel_id == PANEL_NODE_LATENCY:
            matrix = presenter.get_latency_matrix()
            heatmap = self._panel(panel_id).content
            if matrix is not None and isinstance(heatmap, LatencyHeatmap):
                heatmap.update_matrix(matrix)
