"""Feature gate partitioning."""

from __future__ import annotations

from collections.abc import Iterable

from kubesummary.constants.enums import FeatureGateComponent
from kubesummary.models.core.feature_gate import FeatureGate, FeatureGatePartition


def partition_feature_gates(gates: Iterable[FeatureGate]) -> FeatureGatePartition:
    """Split feature gates into controller-owned and agent-owned lists.

    Gates tagged with any other component are left out of both lists.
    Relative input order is kept within each list.
    """
    controller: list[FeatureGate] = []
    agent: list[FeatureGate] = []
    for gate in gates:
        if gate.component == FeatureGateComponent.CONTROLLER.value:
            controller.append(gate)
        elif gate.component == FeatureGateComponent.AGENT.value:
            agent.append(gate)
    return FeatureGatePartition(controller=controller, agent=agent)


__all__ = ["partition_feature_gates"]
