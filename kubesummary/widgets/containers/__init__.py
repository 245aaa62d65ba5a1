"""Container widgets."""

from kubesummary.widgets.containers.summary_panel import SummaryPanel

__all__ = ["SummaryPanel"]
