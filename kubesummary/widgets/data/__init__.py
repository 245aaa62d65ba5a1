"""Data display widgets."""

from kubesummary.widgets.data.heatmap import LatencyHeatmap
from kubesummary.widgets.data.tables import SummaryTable

__all__ = ["LatencyHeatmap", "SummaryTable"]
