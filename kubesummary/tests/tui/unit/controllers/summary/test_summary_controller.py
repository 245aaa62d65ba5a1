"""Tests for SummaryController aggregation."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import pytest

from kubesummary.constants.enums import FetchState
from kubesummary.controllers import FetchStatus, SummaryController
from kubesummary.models.state.app_settings import AppSettings
from kubesummary.models.state.error_notification import ErrorNotification

SETTINGS = AppSettings(
    controller_info_resource="controllerinfos.test",
    controller_info_name="ctrl",
    agent_info_resource="agentinfos.test",
    node_latency_resource="latencies.test",
    feature_gates_path="/featuregates",
    fetch_timeout_seconds=0.5,
)

CONTROLLER_JSON = {"metadata": {"name": "ctrl"}, "version": "v2.1.0"}
AGENTS_JSON = {"items": [{"metadata": {"name": "n1"}}, {"metadata": {"name": "n2"}}]}
GATES_JSON = [
    {"component": "controller", "name": "AntreaPolicy", "status": "Enabled", "version": "BETA"},
    {"component": "agent", "name": "Multicast", "status": "Disabled", "version": "ALPHA"},
    {"component": "flow-aggregator", "name": "Other", "status": "Enabled", "version": "GA"},
]
LATENCY_JSON = {
    "Items": [
        {"name": "n1", "NodeIPLatencyList": [{"NodeName": "n2", "LastMeasuredRTT": 1500}]},
        {"name": "n2", "NodeIPLatencyList": []},
    ]
}


class FakeKubectl:
    """Routes kubectl args to canned responses."""

    def __init__(self, **overrides: Any) -> None:
        self.responses: dict[str, Any] = {
            "controllerinfos.test": CONTROLLER_JSON,
            "agentinfos.test": AGENTS_JSON,
            "/featuregates": GATES_JSON,
            "latencies.test": LATENCY_JSON,
        }
        self.responses.update(overrides)
        self.calls: list[tuple[str, ...]] = []

    async def __call__(self, args: tuple[str, ...]) -> str:
        self.calls.append(args)
        key = args[2] if args[1] == "--raw" else args[1]
        response = self.responses[key]
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return await response()
        return json.dumps(response)


def _controller(
    kubectl: FakeKubectl, notification: ErrorNotification | None = None
) -> SummaryController:
    return SummaryController(
        settings=SETTINGS,
        notification=notification or ErrorNotification(),
        run_kubectl_func=kubectl,
    )


class TestSummaryControllerInit:
    """Tests for SummaryController initialization."""

    def test_default_settings(self) -> None:
        controller = SummaryController()
        assert controller.settings == AppSettings()
        assert controller.context is None

    def test_context_overrides_settings(self) -> None:
        controller = SummaryController(
            "ctx-b", settings=AppSettings(context="ctx-a")
        )
        assert controller.context == "ctx-b"

    def test_fetch_states_start_loading(self) -> None:
        controller = _controller(FakeKubectl())
        states = controller.get_all_fetch_states()
        assert set(states) == set(SummaryController.SOURCES)
        assert all(s.state == FetchState.LOADING for s in states.values())


class TestFetchAll:
    """Tests for SummaryController.fetch_all()."""

    @pytest.mark.asyncio
    async def test_all_sources_succeed(self) -> None:
        notification = ErrorNotification()
        notification.raise_error("stale failure")
        controller = _controller(FakeKubectl(), notification)

        snapshot = await controller.fetch_all()

        assert snapshot.all_succeeded
        assert snapshot.errors == {}
        assert snapshot.controller_info is not None
        assert snapshot.controller_info.name == "ctrl"
        assert [a.name for a in snapshot.agent_infos or []] == ["n1", "n2"]
        assert snapshot.latency_matrix is not None
        assert snapshot.latency_matrix.node_index == ["n1", "n2"]
        assert snapshot.latency_matrix.data == [[0, 1500], [0, 0]]
        partition = snapshot.feature_gate_partition
        assert partition is not None
        assert [g.name for g in partition.controller] == ["AntreaPolicy"]
        assert [g.name for g in partition.agent] == ["Multicast"]
        assert not notification.active
        assert controller.is_all_success()

    @pytest.mark.asyncio
    async def test_two_node_cluster_with_mixed_gates(self) -> None:
        gates = [
            {"component": "controller", "name": "c1", "status": "Enabled", "version": "GA"},
            {"component": "agent", "name": "a1", "status": "Enabled", "version": "GA"},
            {"component": "controller", "name": "c2", "status": "Enabled", "version": "BETA"},
            {"component": "controller", "name": "c3", "status": "Disabled", "version": "ALPHA"},
            {"component": "agent", "name": "a2", "status": "Disabled", "version": "ALPHA"},
        ]
        latency = {
            "Items": [
                {"name": "A", "NodeIPLatencyList": [{"NodeName": "B", "LastMeasuredRTT": 1500}]},
                {"name": "B", "NodeIPLatencyList": []},
            ]
        }
        notification = ErrorNotification()
        kubectl = FakeKubectl(**{"/featuregates": gates, "latencies.test": latency})

        snapshot = await _controller(kubectl, notification).fetch_all()

        assert snapshot.latency_matrix is not None
        assert snapshot.latency_matrix.x_labels == ["A", "B"]
        assert snapshot.latency_matrix.y_labels == ["A", "B"]
        assert snapshot.latency_matrix.data == [[0, 1500], [0, 0]]
        partition = snapshot.feature_gate_partition
        assert partition is not None
        assert [g.name for g in partition.controller] == ["c1", "c2", "c3"]
        assert [g.name for g in partition.agent] == ["a1", "a2"]
        assert not notification.active

    @pytest.mark.asyncio
    async def test_one_failing_source_keeps_the_others(self) -> None:
        notification = ErrorNotification()
        kubectl = FakeKubectl(
            **{"agentinfos.test": RuntimeError("error: the server is unreachable")}
        )
        controller = _controller(kubectl, notification)

        snapshot = await controller.fetch_all()

        assert snapshot.agent_infos is None
        assert snapshot.errors == {
            SummaryController.SOURCE_AGENT_INFOS: "the server is unreachable"
        }
        assert snapshot.controller_info is not None
        assert snapshot.feature_gate_partition is not None
        assert snapshot.latency_matrix is not None
        assert notification.active
        assert notification.message == "the server is unreachable"
        assert controller.get_error_sources() == [SummaryController.SOURCE_AGENT_INFOS]
        assert not controller.is_all_success()

    @pytest.mark.asyncio
    async def test_failed_source_skips_its_derived_view(self) -> None:
        kubectl = FakeKubectl(
            **{
                "/featuregates": RuntimeError("forbidden"),
                "latencies.test": RuntimeError("not found"),
            }
        )

        snapshot = await _controller(kubectl).fetch_all()

        assert snapshot.feature_gates is None
        assert snapshot.feature_gate_partition is None
        assert snapshot.node_latency_stats is None
        assert snapshot.latency_matrix is None
        assert snapshot.controller_info is not None

    @pytest.mark.asyncio
    async def test_all_sources_fail(self) -> None:
        notification = ErrorNotification()
        kubectl = FakeKubectl(
            **{key: RuntimeError(f"{key} failed") for key in FakeKubectl().responses}
        )

        snapshot = await _controller(kubectl, notification).fetch_all()

        assert set(snapshot.errors) == set(SummaryController.SOURCES)
        # Banner reports the first failing source in source order
        assert notification.message == "controllerinfos.test failed"

    @pytest.mark.asyncio
    async def test_malformed_payload_is_a_source_failure(self) -> None:
        kubectl = FakeKubectl(**{"controllerinfos.test": {"items": []}})

        snapshot = await _controller(kubectl).fetch_all()

        assert SummaryController.SOURCE_CONTROLLER_INFO in snapshot.errors
        assert snapshot.controller_info is None

    @pytest.mark.asyncio
    async def test_timeout_is_a_source_failure(self) -> None:
        async def hang() -> str:
            await asyncio.sleep(10)
            return "{}"

        kubectl = FakeKubectl(**{"latencies.test": hang})

        snapshot = await _controller(kubectl).fetch_all()

        assert snapshot.errors[SummaryController.SOURCE_NODE_LATENCY_STATS] == (
            "Timed out after 0.5s"
        )
        assert snapshot.latency_matrix is None
        assert snapshot.controller_info is not None

    @pytest.mark.asyncio
    async def test_loader_timeout_keeps_its_own_message(self) -> None:
        kubectl = FakeKubectl(
            **{"agentinfos.test": TimeoutError("dial tcp 10.0.0.1:6443: i/o timeout")}
        )

        snapshot = await _controller(kubectl).fetch_all()

        message = snapshot.errors[SummaryController.SOURCE_AGENT_INFOS]
        assert message == "dial tcp 10.0.0.1:6443: i/o timeout"
        assert not message.startswith("Timed out after")
        assert snapshot.controller_info is not None

    @pytest.mark.asyncio
    async def test_bare_loader_timeout_is_not_the_fetch_budget(self) -> None:
        kubectl = FakeKubectl(**{"latencies.test": TimeoutError()})

        snapshot = await _controller(kubectl).fetch_all()

        assert snapshot.errors[SummaryController.SOURCE_NODE_LATENCY_STATS] == (
            "Request timed out"
        )

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self) -> None:
        async def hang() -> str:
            await asyncio.sleep(10)
            return "{}"

        notification = ErrorNotification()
        kubectl = FakeKubectl(**{"controllerinfos.test": hang})
        controller = SummaryController(
            settings=SETTINGS.model_copy(update={"fetch_timeout_seconds": 30.0}),
            notification=notification,
            run_kubectl_func=kubectl,
        )

        task = asyncio.create_task(controller.fetch_all())
        await asyncio.sleep(0.05)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert not notification.active

    @pytest.mark.asyncio
    async def test_to_dict_is_json_serializable(self) -> None:
        kubectl = FakeKubectl(**{"agentinfos.test": RuntimeError("boom")})

        snapshot = await _controller(kubectl).fetch_all()
        data = snapshot.to_dict()

        json.dumps(data)
        assert data["agent_infos"] is None
        assert data["latency_matrix"]["data"] == [[0, 1500], [0, 0]]
        assert data["errors"] == {SummaryController.SOURCE_AGENT_INFOS: "boom"}


class TestCheckConnection:
    """Tests for SummaryController.check_connection()."""

    @pytest.mark.asyncio
    async def test_connection_ok(self) -> None:
        async def run(args: tuple[str, ...]) -> str:
            return "Kubernetes control plane is running"

        controller = SummaryController(run_kubectl_func=run)
        assert await controller.check_connection() is True

    @pytest.mark.asyncio
    async def test_connection_failure(self) -> None:
        async def run(args: tuple[str, ...]) -> str:
            raise RuntimeError("Unable to connect to the server")

        controller = SummaryController(run_kubectl_func=run)
        assert await controller.check_connection() is False


class TestSummarizeError:
    """Tests for SummaryController._summarize_error()."""

    def test_last_line_without_prefix(self) -> None:
        error = RuntimeError("W0501 warning line\nerror: resource not found")
        assert SummaryController._summarize_error(error) == "resource not found"

    def test_empty_message(self) -> None:
        assert SummaryController._summarize_error(ValueError()) == (
            "ValueError while fetching data"
        )

    def test_truncates_long_message(self) -> None:
        message = SummaryController._summarize_error(RuntimeError("x" * 500))
        assert len(message) == 160
        assert message.endswith("...")


class TestFetchStatus:
    """Tests for FetchStatus."""

    def test_to_dict(self) -> None:
        status = FetchStatus(source_name="controller_info")
        assert status.to_dict() == {
            "source_name": "controller_info",
            "state": FetchState.LOADING.value,
            "error_message": None,
            "last_updated": None,
        }

    def test_reset_fetch_state(self) -> None:
        controller = SummaryController()
        controller._update_fetch_state("controller_info", FetchState.ERROR, "boom")

        assert controller.reset_fetch_state("controller_info") is True
        status = controller.get_fetch_state("controller_info")
        assert status is not None
        assert status.state == FetchState.LOADING
        assert status.error_message is None
        assert controller.reset_fetch_state("missing") is False
