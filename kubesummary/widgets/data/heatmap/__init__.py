"""Heat-map widgets."""

from kubesummary.widgets.data.heatmap.latency_heatmap import (
    LatencyHeatmap,
    build_heatmap_table,
    cell_style,
)

__all__ = ["LatencyHeatmap", "build_heatmap_table", "cell_style"]
