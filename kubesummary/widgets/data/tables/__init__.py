"""Table widgets."""

from kubesummary.widgets.data.tables.custom_table import SummaryTable

__all__ = ["SummaryTable"]
