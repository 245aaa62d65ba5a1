"""Tests for summary data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kubesummary.models.core.component_info import AgentInfo, ControllerInfo, OVSInfo
from kubesummary.models.core.feature_gate import FeatureGate
from kubesummary.models.core.k8s_ref import Condition, K8sRef
from kubesummary.models.core.latency_info import LatencyMatrix
from kubesummary.models.state.error_notification import ErrorNotification


class TestLatencyMatrix:
    """Tests for LatencyMatrix."""

    def test_empty(self) -> None:
        matrix = LatencyMatrix()

        assert matrix.is_empty()
        assert matrix.size == 0
        assert matrix.value_range() == (0, 0)

    def test_value_range(self) -> None:
        matrix = LatencyMatrix(node_index=["a", "b"], data=[[0, 1500], [700, 0]])

        assert matrix.value_range() == (0, 1500)

    def test_labels_are_node_index(self) -> None:
        matrix = LatencyMatrix(node_index=["a", "b"], data=[[0, 0], [0, 0]])

        assert matrix.x_labels == matrix.y_labels == ["a", "b"]


class TestFeatureGate:
    def test_defaults(self) -> None:
        gate = FeatureGate(name="Egress")

        assert gate.status == "Disabled"
        assert gate.component == ""


class TestErrorNotification:
    """Tests for ErrorNotification."""

    def test_starts_inactive(self) -> None:
        notification = ErrorNotification()

        assert not notification.active
        assert notification.raised_at is None

    def test_raise_and_clear(self) -> None:
        notification = ErrorNotification()

        notification.raise_error("agents unavailable")
        assert notification.active
        assert notification.message == "agents unavailable"
        assert notification.raised_at is not None

        notification.clear()
        assert not notification.active
        assert notification.message is None


class TestComponentInfoSnapshots:
    """Controller and agent infos are read-only once parsed."""

    def test_controller_info_is_frozen(self) -> None:
        info = ControllerInfo(name="ctrl")

        with pytest.raises(ValidationError):
            info.name = "mutated"
        assert info.name == "ctrl"

    def test_agent_info_is_frozen(self) -> None:
        agent = AgentInfo(name="node-1", ovs_info=OVSInfo(version="3.1.0"))

        with pytest.raises(ValidationError):
            agent.local_pod_num = 5
        with pytest.raises(ValidationError):
            agent.ovs_info.version = "9.9.9"  # type: ignore[union-attr]

    def test_nested_refs_and_conditions_are_frozen(self) -> None:
        ref = K8sRef(name="pod-1", namespace="kube-system")
        condition = Condition(type="ControllerHealthy", status="True")

        with pytest.raises(ValidationError):
            ref.namespace = "default"
        with pytest.raises(ValidationError):
            condition.status = "False"
