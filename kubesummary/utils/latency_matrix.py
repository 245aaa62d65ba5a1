"""Latency matrix construction.

Turns the sparse per-node latency rows into a dense square matrix for the
heat-map. The source-node names form a single ``node_index`` that labels
both axes.

Targets that never reported their own latency row have no column, so any
entry pointing at them is dropped. Nodes that reported a row but were never
measured as a target by a given source read as ``0``. Neither case is
reconciled here.
"""

from __future__ import annotations

from collections.abc import Sequence

from kubesummary.models.core.latency_info import LatencyMatrix, NodeIPLatencyStatsInfo


def build_latency_matrix(stats: Sequence[NodeIPLatencyStatsInfo]) -> LatencyMatrix:
    """Build a dense RTT matrix from per-node latency rows.

    Args:
        stats: Latency rows in response order.

    Returns:
        LatencyMatrix whose ``node_index`` is the input's source-node names
        (input order, no sorting) and whose cell (r, c) is the RTT node ``r``
        last reported for node ``c``, or ``0`` when there is none.
    """
    node_index = [row.name for row in stats]

    data: list[list[int]] = []
    for row in stats:
        rtt_by_target: dict[str, int] = {}
        for entry in row.node_ip_latency_list:
            # Later entries for the same target overwrite earlier ones
            rtt_by_target[entry.node_name] = entry.last_measured_rtt
        data.append([rtt_by_target.get(target, 0) for target in node_index])

    return LatencyMatrix(node_index=node_index, data=data)


__all__ = ["build_latency_matrix"]
