"""Core cluster component models."""

from kubesummary.models.core.component_info import AgentInfo, ControllerInfo, OVSInfo
from kubesummary.models.core.feature_gate import FeatureGate, FeatureGatePartition
from kubesummary.models.core.k8s_ref import Condition, K8sRef
from kubesummary.models.core.latency_info import (
    LatencyMatrix,
    NodeIPLatencyEntry,
    NodeIPLatencyStatsInfo,
)

__all__ = [
    "AgentInfo",
    "Condition",
    "ControllerInfo",
    "FeatureGate",
    "FeatureGatePartition",
    "K8sRef",
    "LatencyMatrix",
    "NodeIPLatencyEntry",
    "NodeIPLatencyStatsInfo",
    "OVSInfo",
]
