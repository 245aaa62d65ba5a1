"""Node-to-node latency models."""

from pydantic import BaseModel, Field


class NodeIPLatencyEntry(BaseModel):
    """Last measured RTT from a source node to one target node.

    ``last_measured_rtt`` is in microseconds.
    """

    node_name: str
    last_measured_rtt: int = 0


class NodeIPLatencyStatsInfo(BaseModel):
    """Latency row reported by one source node.

    Targets that are unreachable or not measured yet are simply absent.
    """

    name: str
    node_ip_latency_list: list[NodeIPLatencyEntry] = Field(default_factory=list)


class LatencyMatrix(BaseModel):
    """Dense square latency matrix over ``node_index``.

    The same ``node_index`` labels both axes: row ``i`` and column ``i``
    refer to the same node. Cells without a measurement hold ``0``.
    """

    node_index: list[str] = Field(default_factory=list)
    data: list[list[int]] = Field(default_factory=list)

    @property
    def x_labels(self) -> list[str]:
        return self.node_index

    @property
    def y_labels(self) -> list[str]:
        return self.node_index

    @property
    def size(self) -> int:
        return len(self.node_index)

    def is_empty(self) -> bool:
        return not self.node_index

    def value_range(self) -> tuple[int, int]:
        """Return (min, max) over all cells, ``(0, 0)`` for an empty matrix."""
        values = [value for row in self.data for value in row]
        if not values:
            return 0, 0
        return min(values), max(values)
