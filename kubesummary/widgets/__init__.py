"""Widgets module for KubeSummary.

This module provides all reusable widgets organized into submodules:
- containers: Container widgets (SummaryPanel)
- data: Data display widgets (SummaryTable, LatencyHeatmap)
- feedback: ErrorBanner
"""

from kubesummary.widgets._base import BaseWidget
from kubesummary.widgets.containers import SummaryPanel
from kubesummary.widgets.data import LatencyHeatmap, SummaryTable
from kubesummary.widgets.feedback import ErrorBanner

__all__ = [
    "BaseWidget",
    "ErrorBanner",
    "LatencyHeatmap",
    "SummaryPanel",
    "SummaryTable",
]
