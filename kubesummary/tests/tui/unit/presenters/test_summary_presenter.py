"""Unit tests for SummaryPresenter - data loading, panel state, and row formatting.

This module tests:
- Initialization and properties
- Worker start-up and message posting
- Per-panel state derived from each source
- Row formatting for every panel

Tests inject a controller factory backed by a fake kubectl runner.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from kubesummary.constants.enums import PanelState
from kubesummary.controllers import SummaryController
from kubesummary.models.state.app_settings import AppSettings
from kubesummary.models.state.error_notification import ErrorNotification
from kubesummary.screens.summary.config import (
    PANEL_AGENT_FEATURE_GATES,
    PANEL_AGENTS,
    PANEL_CONTROLLER,
    PANEL_CONTROLLER_FEATURE_GATES,
    PANEL_IDS,
    PANEL_NODE_LATENCY,
)
from kubesummary.screens.summary.presenter import (
    SummaryDataLoaded,
    SummaryDataLoadFailed,
    SummaryPresenter,
)

# =============================================================================
# Test Fixtures
# =============================================================================

SETTINGS = AppSettings(
    controller_info_resource="controllerinfos.test",
    agent_info_resource="agentinfos.test",
    node_latency_resource="latencies.test",
    feature_gates_path="/featuregates",
)

RESPONSES: dict[str, Any] = {
    "controllerinfos.test": {
        "metadata": {"name": "antrea-controller"},
        "version": "v2.1.0",
        "connectedAgentNum": 1,
    },
    "agentinfos.test": {"items": [{"metadata": {"name": "node-1"}}]},
    "/featuregates": [
        {"component": "controller", "name": "AntreaPolicy", "status": "Enabled", "version": "BETA"},
        {"component": "agent", "name": "Multicast", "status": "Disabled", "version": "ALPHA"},
    ],
    "latencies.test": {"Items": [{"name": "node-1", "NodeIPLatencyList": []}]},
}


class MockSummaryScreen:
    """Mock SummaryScreen for testing SummaryPresenter."""

    def __init__(self) -> None:
        """Initialize mock screen."""
        self.app = MagicMock()
        self.context = "test-cluster"
        self._messages: list = []
        self.workers: list[tuple[Any, str, bool]] = []

    def post_message(self, message: object) -> None:
        """Record posted messages."""
        self._messages.append(message)

    def run_worker(self, coro: Any, name: str = "", exclusive: bool = False) -> None:
        """Record worker requests."""
        self.workers.append((coro, name, exclusive))


def _factory(failing: set[str] | None = None):
    failing = failing or set()

    async def run_kubectl(args: tuple[str, ...]) -> str:
        key = args[2] if args[1] == "--raw" else args[1]
        if key in failing:
            raise RuntimeError(f"{key} failed")
        return json.dumps(RESPONSES[key])

    def build(notification: ErrorNotification) -> SummaryController:
        return SummaryController(
            settings=SETTINGS, notification=notification, run_kubectl_func=run_kubectl
        )

    return build


@pytest.fixture
def screen() -> MockSummaryScreen:
    return MockSummaryScreen()


# =============================================================================
# Tests
# =============================================================================


class TestSummaryPresenterInit:
    """Tests for SummaryPresenter initialization."""

    def test_initial_state(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen)

        assert presenter.snapshot is None
        assert presenter.is_loading is False
        assert presenter.error_message == ""
        assert not presenter.notification.active

    def test_every_panel_starts_loading(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen)

        assert all(presenter.panel_state(p) == PanelState.LOADING for p in PANEL_IDS)

    def test_rows_empty_before_load(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen)

        assert presenter.get_controller_rows() == []
        assert presenter.get_agent_rows() == []
        assert presenter.get_controller_feature_gate_rows() == []
        assert presenter.get_agent_feature_gate_rows() == []
        assert presenter.get_latency_matrix() is None


class TestSummaryPresenterLoading:
    """Tests for load_data() and the worker body."""

    def test_load_data_starts_exclusive_worker(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())

        presenter.load_data()

        assert presenter.is_loading is True
        assert len(screen.workers) == 1
        _, name, exclusive = screen.workers[0]
        assert name == "summary-data"
        assert exclusive is True

    def test_load_data_prefers_start_worker(self, screen: MockSummaryScreen) -> None:
        screen.start_worker = MagicMock()
        presenter = SummaryPresenter(screen, controller_factory=_factory())

        presenter.load_data()

        screen.start_worker.assert_called_once()
        assert screen.workers == []

    @pytest.mark.asyncio
    async def test_worker_posts_loaded(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())

        await presenter._load_summary_worker()

        assert isinstance(screen._messages[-1], SummaryDataLoaded)
        assert presenter.snapshot is not None
        assert presenter.is_loading is False

    @pytest.mark.asyncio
    async def test_worker_posts_failed_when_cycle_crashes(
        self, screen: MockSummaryScreen
    ) -> None:
        def broken(notification: ErrorNotification) -> SummaryController:
            raise ValueError("bad settings")

        presenter = SummaryPresenter(screen, controller_factory=broken)

        await presenter._load_summary_worker()

        message = screen._messages[-1]
        assert isinstance(message, SummaryDataLoadFailed)
        assert message.error == "bad settings"

    @pytest.mark.asyncio
    async def test_reload_clears_previous_snapshot(
        self, screen: MockSummaryScreen
    ) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())
        await presenter.refresh()

        presenter.load_data()

        assert presenter.snapshot is None
        assert presenter.panel_state(PANEL_CONTROLLER) == PanelState.LOADING


class TestSummaryPresenterPanels:
    """Tests for panel state and row formatting after a cycle."""

    @pytest.mark.asyncio
    async def test_all_panels_ready(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())

        await presenter.refresh()

        assert all(presenter.panel_state(p) == PanelState.READY for p in PANEL_IDS)
        assert presenter.error_message == ""

    @pytest.mark.asyncio
    async def test_panels_follow_their_own_source(
        self, screen: MockSummaryScreen
    ) -> None:
        presenter = SummaryPresenter(
            screen, controller_factory=_factory({"agentinfos.test"})
        )

        await presenter.refresh()

        assert presenter.panel_state(PANEL_AGENTS) == PanelState.FAILED
        assert presenter.panel_state(PANEL_CONTROLLER) == PanelState.READY
        assert presenter.panel_state(PANEL_NODE_LATENCY) == PanelState.READY
        assert presenter.error_message == "agentinfos.test failed"

    @pytest.mark.asyncio
    async def test_feature_gate_failure_fails_both_gate_panels(
        self, screen: MockSummaryScreen
    ) -> None:
        presenter = SummaryPresenter(
            screen, controller_factory=_factory({"/featuregates"})
        )

        await presenter.refresh()

        assert presenter.panel_state(PANEL_CONTROLLER_FEATURE_GATES) == PanelState.FAILED
        assert presenter.panel_state(PANEL_AGENT_FEATURE_GATES) == PanelState.FAILED
        assert presenter.get_controller_feature_gate_rows() == []

    @pytest.mark.asyncio
    async def test_rows(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())

        await presenter.refresh()

        controller_rows = presenter.get_controller_rows()
        assert len(controller_rows) == 1
        assert controller_rows[0][:2] == ["antrea-controller", "v2.1.0"]
        assert [row[0] for row in presenter.get_agent_rows()] == ["node-1"]
        assert presenter.get_controller_feature_gate_rows() == [
            ["AntreaPolicy", "Enabled", "BETA"]
        ]
        assert presenter.get_agent_feature_gate_rows() == [
            ["Multicast", "Disabled", "ALPHA"]
        ]
        matrix = presenter.get_latency_matrix()
        assert matrix is not None
        assert matrix.data == [[0]]

    @pytest.mark.asyncio
    async def test_banner_clears_after_recovery(self, screen: MockSummaryScreen) -> None:
        presenter = SummaryPresenter(
            screen, controller_factory=_factory({"latencies.test"})
        )
        await presenter.refresh()
        assert presenter.notification.active

        presenter._controller_factory = _factory()
        await presenter.refresh()

        assert not presenter.notification.active


class TestSummaryPresenterStaleCycles:
    """Tests for cycles superseded by a newer load_data()."""

    @pytest.mark.asyncio
    async def test_cancelled_stale_cycle_keeps_new_cycle_loading(
        self, screen: MockSummaryScreen
    ) -> None:
        release = asyncio.Event()

        async def run_kubectl(args: tuple[str, ...]) -> str:
            await release.wait()
            return "{}"

        presenter = SummaryPresenter(
            screen,
            controller_factory=lambda notification: SummaryController(
                settings=SETTINGS,
                notification=notification,
                run_kubectl_func=run_kubectl,
            ),
        )
        stale = asyncio.create_task(presenter.refresh())
        await asyncio.sleep(0)

        presenter.load_data()
        stale.cancel()
        with pytest.raises(asyncio.CancelledError):
            await stale

        assert presenter.is_loading is True
        assert presenter.snapshot is None

    @pytest.mark.asyncio
    async def test_finished_stale_cycle_does_not_store_snapshot(
        self, screen: MockSummaryScreen
    ) -> None:
        presenter = SummaryPresenter(screen, controller_factory=_factory())
        stale_cycle = presenter._begin_cycle()
        presenter.load_data()

        await presenter.refresh(stale_cycle)

        assert presenter.snapshot is None
        assert presenter.is_loading is True
