"""Display formatting for summary tables and the latency heat-map."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from kubesummary.constants.enums import ConditionStatus
from kubesummary.constants.values import (
    AGENT_HEALTHY_CONDITION,
    CONTROLLER_HEALTHY_CONDITION,
    LATENCY_DISPLAY_DIVISOR,
    STATUS_NONE,
    STATUS_UNKNOWN,
)
from kubesummary.models.core.component_info import AgentInfo, ControllerInfo
from kubesummary.models.core.feature_gate import FeatureGate
from kubesummary.models.core.k8s_ref import Condition, K8sRef


def ref_to_string(ref: K8sRef | None) -> str:
    """Render a reference as ``namespace/name``, ``name`` or ``Unknown``."""
    if ref is None:
        return STATUS_UNKNOWN
    if ref.namespace:
        return f"{ref.namespace}/{ref.name}"
    return ref.name


def format_heartbeat(timestamp: datetime | None) -> str:
    """Render a heartbeat timestamp in local time."""
    if timestamp is None:
        return STATUS_NONE
    return timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def get_condition_info(
    conditions: Sequence[Condition] | None, name: str
) -> tuple[str, str]:
    """Return (status, last heartbeat) for the named condition.

    Missing conditions read as ``("False", "None")``.
    """
    if not conditions:
        return ConditionStatus.FALSE.value, STATUS_NONE
    condition = next((c for c in conditions if c.type == name), None)
    if condition is None:
        return ConditionStatus.FALSE.value, STATUS_NONE
    return condition.status, format_heartbeat(condition.last_heartbeat_time)


def controller_property_values(controller: ControllerInfo) -> list[str]:
    """Row values for the controller table."""
    healthy, last_heartbeat = get_condition_info(
        controller.controller_conditions, CONTROLLER_HEALTHY_CONDITION
    )
    return [
        controller.name,
        controller.version or STATUS_UNKNOWN,
        ref_to_string(controller.pod_ref),
        ref_to_string(controller.node_ref),
        str(controller.connected_agent_num or 0),
        healthy,
        last_heartbeat,
    ]


def agent_property_values(agent: AgentInfo) -> list[str]:
    """Row values for the agents table."""
    healthy, last_heartbeat = get_condition_info(
        agent.agent_conditions, AGENT_HEALTHY_CONDITION
    )
    ovs_version = agent.ovs_info.version if agent.ovs_info else None
    return [
        agent.name,
        agent.version or STATUS_UNKNOWN,
        ref_to_string(agent.pod_ref),
        ref_to_string(agent.node_ref),
        str(agent.local_pod_num or 0),
        ",".join(agent.node_subnets) if agent.node_subnets is not None else STATUS_NONE,
        ovs_version or STATUS_UNKNOWN,
        healthy,
        last_heartbeat,
    ]


def feature_gate_property_values(gate: FeatureGate) -> list[str]:
    """Row values for a feature gate table."""
    return [gate.name, gate.status, gate.version]


def format_latency_cell(value: int) -> str:
    """Render a microsecond RTT as milliseconds; blank when unmeasured."""
    if not value:
        return ""
    return f"{value / LATENCY_DISPLAY_DIVISOR:.15g}ms"


def latency_intensity(value: int, minimum: int, maximum: int) -> float:
    """Relative cell intensity in [0, 1] for heat-map shading."""
    if maximum == minimum:
        return 0.0
    return 1 - (maximum - value) / (maximum - minimum)


__all__ = [
    "agent_property_values",
    "controller_property_values",
    "feature_gate_property_values",
    "format_heartbeat",
    "format_latency_cell",
    "get_condition_info",
    "latency_intensity",
    "ref_to_string",
]
