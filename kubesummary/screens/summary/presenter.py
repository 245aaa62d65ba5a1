"""Summary screen presenter - data loading, panel state and row formatting."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from textual.message import Message

from kubesummary.constants.enums import PanelState
from kubesummary.controllers import SummaryController, SummarySnapshot
from kubesummary.models.core.latency_info import LatencyMatrix
from kubesummary.models.state.app_settings import AppSettings
from kubesummary.models.state.error_notification import ErrorNotification
from kubesummary.screens.summary.config import (
    PANEL_AGENT_FEATURE_GATES,
    PANEL_AGENTS,
    PANEL_CONTROLLER,
    PANEL_CONTROLLER_FEATURE_GATES,
    PANEL_NODE_LATENCY,
)
from kubesummary.utils.formatting import (
    agent_property_values,
    controller_property_values,
    feature_gate_property_values,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class SummaryDataLoaded(Message):
    """Message indicating one aggregation cycle has settled."""


class SummaryDataLoadFailed(Message):
    """Message indicating the aggregation cycle itself crashed."""

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


class SummaryPresenter:
    """Presenter for SummaryScreen - handles data loading, state, and formatting."""

    _PANEL_SOURCES: dict[str, str] = {
        PANEL_CONTROLLER: SummaryController.SOURCE_CONTROLLER_INFO,
        PANEL_AGENTS: SummaryController.SOURCE_AGENT_INFOS,
        PANEL_NODE_LATENCY: SummaryController.SOURCE_NODE_LATENCY_STATS,
        PANEL_CONTROLLER_FEATURE_GATES: SummaryController.SOURCE_FEATURE_GATES,
        PANEL_AGENT_FEATURE_GATES: SummaryController.SOURCE_FEATURE_GATES,
    }

    def __init__(
        self,
        screen: Any,
        *,
        controller_factory: Callable[[ErrorNotification], SummaryController] | None = None,
    ) -> None:
        self._screen = screen
        self._controller_factory = controller_factory
        self._notification = ErrorNotification()
        self._snapshot: SummarySnapshot | None = None
        self._is_loading = False
        self._cycle = 0

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def snapshot(self) -> SummarySnapshot | None:
        return self._snapshot

    @property
    def notification(self) -> ErrorNotification:
        return self._notification

    @property
    def error_message(self) -> str:
        return self._notification.message or ""

    # =========================================================================
    # Data Loading
    # =========================================================================

    def _build_controller(self) -> SummaryController:
        if self._controller_factory is not None:
            return self._controller_factory(self._notification)
        app = self._screen.app
        settings = getattr(app, "settings", None) or AppSettings()
        context = getattr(self._screen, "context", None) or getattr(app, "context", None)
        return SummaryController(
            context=context,
            settings=settings,
            notification=self._notification,
        )

    def _begin_cycle(self) -> int:
        self._cycle += 1
        self._is_loading = True
        return self._cycle

    def load_data(self) -> None:
        """Start one aggregation cycle, cancelling any cycle still in flight."""
        cycle = self._begin_cycle()
        self._snapshot = None
        worker = partial(self._load_summary_worker, cycle)
        start_worker = getattr(self._screen, "start_worker", None)
        if callable(start_worker):
            start_worker(worker, name="summary-data", exclusive=True)
            return
        self._screen.run_worker(
            worker, name="summary-data", exclusive=True
        )

    async def refresh(self, cycle: int | None = None) -> SummarySnapshot:
        """Run one aggregation cycle and keep its snapshot.

        A cycle that has been superseded by a newer one leaves the loading
        flag and the stored snapshot alone.
        """
        if cycle is None:
            cycle = self._begin_cycle()
        try:
            snapshot = await self._build_controller().fetch_all()
            if cycle == self._cycle:
                self._snapshot = snapshot
            return snapshot
        finally:
            if cycle == self._cycle:
                self._is_loading = False

    async def _load_summary_worker(self, cycle: int | None = None) -> None:
        """Worker body for load_data()."""
        try:
            await self.refresh(cycle)
            self._screen.post_message(SummaryDataLoaded())
        except asyncio.CancelledError:
            # Refresh actions intentionally cancel in-flight workers.
            raise
        except Exception as e:
            logger.exception("Failed to load summary data")
            self._screen.post_message(SummaryDataLoadFailed(str(e) or type(e).__name__))

    # =========================================================================
    # Panel state
    # =========================================================================

    def panel_state(self, panel_id: str) -> PanelState:
        """Return the display state of one panel.

        Each panel follows its own source only.
        """
        if self._snapshot is None:
            return PanelState.LOADING
        source = self._PANEL_SOURCES[panel_id]
        if source in self._snapshot.errors:
            return PanelState.FAILED
        return PanelState.READY

    # =========================================================================
    # Row formatting
    # =========================================================================

    def get_controller_rows(self) -> list[list[str]]:
        if self._snapshot is None or self._snapshot.controller_info is None:
            return []
        return [controller_property_values(self._snapshot.controller_info)]

    def get_agent_rows(self) -> list[list[str]]:
        if self._snapshot is None or self._snapshot.agent_infos is None:
            return []
        return [agent_property_values(agent) for agent in self._snapshot.agent_infos]

    def get_controller_feature_gate_rows(self) -> list[list[str]]:
        if self._snapshot is None or self._snapshot.feature_gate_partition is None:
            return []
        return [
            feature_gate_property_values(gate)
            for gate in self._snapshot.feature_gate_partition.controller
        ]

    def get_agent_feature_gate_rows(self) -> list[list[str]]:
        if self._snapshot is None or self._snapshot.feature_gate_partition is None:
            return []
        return [
            feature_gate_property_values(gate)
            for gate in self._snapshot.feature_gate_partition.agent
        ]

    def get_latency_matrix(self) -> LatencyMatrix | None:
        if self._snapshot is None:
            return None
        return self._snapshot.latency_matrix
