"""Screens module for KubeSummary."""

from kubesummary.screens.summary import SummaryScreen

__all__ = ["SummaryScreen"]
